#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/jiraterm/renderers/__init__.py
"""Renderers turning the ADF AST into output text."""

from jiraterm.renderers.base import BaseRenderer, InlineContentMixin
from jiraterm.renderers.terminal import TerminalRenderer, normalize_blank_lines

__all__ = ["BaseRenderer", "InlineContentMixin", "TerminalRenderer", "normalize_blank_lines"]
