#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/utils/ansi.py
"""ANSI SGR styling helpers for terminal output."""

from __future__ import annotations

import os
import sys
from typing import IO, Optional

BOLD = "\x1b[1m"
UNDERLINE = "\x1b[4m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
CYAN = "\x1b[36m"
GREY = "\x1b[90m"
RESET = "\x1b[0m"

_STATUS_STYLES = {
    "in progress": BOLD + BLUE,
    "done": GREEN,
    "review": BOLD + YELLOW,
    "blocked": RED,
}
_DEFAULT_STATUS_STYLE = BOLD + GREY


def style(text: str, codes: str, enabled: bool = True) -> str:
    """Wrap ``text`` in SGR ``codes`` followed by a reset.

    Parameters
    ----------
    text : str
        Text to decorate
    codes : str
        Concatenated SGR escape sequences
    enabled : bool, default True
        When False the text is returned unchanged

    Returns
    -------
    str
        Decorated text

    """
    if not enabled or not codes:
        return text
    return f"{codes}{text}{RESET}"


def colour_url(url: str, enabled: bool = True) -> str:
    """Style a URL as underlined cyan."""
    return style(url, UNDERLINE + CYAN, enabled)


def colour_status(status: str, enabled: bool = True) -> str:
    """Style a Jira status name by its (case-insensitive) meaning.

    Examples
    --------
        >>> colour_status("Done")
        '\\x1b[32mDone\\x1b[0m'

    """
    codes = _STATUS_STYLES.get(status.lower(), _DEFAULT_STATUS_STYLE)
    return style(status, codes, enabled)


def supports_colour(stream: Optional[IO[str]] = None) -> bool:
    """Determine whether ANSI styling should be emitted on ``stream``.

    Colour is used when the stream is a TTY, unless ``NO_COLOR`` is set.

    """
    if os.environ.get("NO_COLOR"):
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except (ValueError, OSError):
            return False
    return False
