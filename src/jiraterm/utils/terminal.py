#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/jiraterm/utils/terminal.py
"""Terminal measurement helpers."""

import shutil

from jiraterm.constants import DEFAULT_TERMINAL_WIDTH


def get_terminal_width(fallback: int = DEFAULT_TERMINAL_WIDTH) -> int:
    """Return the width of the controlling terminal in columns.

    Parameters
    ----------
    fallback : int, default DEFAULT_TERMINAL_WIDTH
        Width used when the output is not attached to a terminal

    Returns
    -------
    int
        Column count, never less than 1

    """
    columns = shutil.get_terminal_size(fallback=(fallback, 24)).columns
    return columns if columns > 0 else fallback
