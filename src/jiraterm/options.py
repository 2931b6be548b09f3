#  Copyright (c) 2025 Tom Villani, Ph.D.
# jiraterm/options.py
"""Configuration options for terminal rendering of Jira documents.

Options are immutable; use :meth:`CloneFrozenMixin.create_updated` to derive
a modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from jiraterm.constants import DEFAULT_RULE_CHAR, DEFAULT_TERMINAL_WIDTH


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class TerminalRendererOptions(CloneFrozenMixin):
    """Configuration options for rendering Jira documents to terminal text.

    Parameters
    ----------
    colour : bool, default True
        Emit ANSI SGR sequences for URLs. Set to False when output is not a
        terminal.
    rule_width : int, default 80
        Number of dash characters in a horizontal rule. Callers pass the
        measured terminal width here.
    rule_char : str, default "-"
        Character repeated to draw horizontal rules.
    legacy_link_format : bool, default False
        Reproduce the historical ``[label](url`` output that omits the
        closing parenthesis.
    fence_code_blocks : bool, default False
        Wrap code blocks in triple-backtick fences. When False, code blocks
        render like paragraphs.

    Examples
    --------
        >>> from jiraterm.options import TerminalRendererOptions
        >>> options = TerminalRendererOptions(colour=False, rule_width=40)
        >>> wide = options.create_updated(rule_width=120)

    """

    colour: bool = field(default=True, metadata={"help": "Emit ANSI colour sequences"})
    rule_width: int = field(
        default=DEFAULT_TERMINAL_WIDTH, metadata={"help": "Width of horizontal rules in columns"}
    )
    rule_char: str = field(default=DEFAULT_RULE_CHAR, metadata={"help": "Character used to draw rules"})
    legacy_link_format: bool = field(
        default=False, metadata={"help": "Omit the closing parenthesis of labelled links"}
    )
    fence_code_blocks: bool = field(default=False, metadata={"help": "Fence code blocks with backticks"})

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.rule_width < 1:
            raise ValueError(f"rule_width must be positive, got {self.rule_width}")
        if len(self.rule_char) != 1:
            raise ValueError(f"rule_char must be a single character, got {self.rule_char!r}")
