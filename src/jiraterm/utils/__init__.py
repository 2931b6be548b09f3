#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/utils/__init__.py
"""Utility modules for jiraterm: ANSI styling, terminal size and debug dumps."""

from jiraterm.utils.ansi import colour_status, colour_url, style, supports_colour
from jiraterm.utils.debug import DebugDumper
from jiraterm.utils.terminal import get_terminal_width

__all__ = [
    "DebugDumper",
    "colour_status",
    "colour_url",
    "get_terminal_width",
    "style",
    "supports_colour",
]
