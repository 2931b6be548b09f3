#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/renderers/terminal.py
"""Terminal text rendering of Jira rich-text documents.

This module provides the TerminalRenderer class which converts a parsed
Jira document into readable, Markdown-flavoured text with ANSI-coloured
URLs. Block renderers each emit their own leading blank line; the final
pass in :meth:`TerminalRenderer.render_to_string` trims the result and
collapses runs of blank lines so that blocks end up separated by exactly
one empty line.

Lists are rendered recursively: a nested list is rendered on its own and
every line of the result is shifted right by two spaces, so indentation
compounds with depth.

"""

from __future__ import annotations

import json
import logging
import re
from typing import Optional

from jiraterm.adf.nodes import (
    LIST_TYPES,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    InlineCard,
    ListItem,
    MediaGroup,
    MediaReference,
    MediaSingle,
    OrderedList,
    Paragraph,
    Rule,
    Text,
    UnknownNode,
)
from jiraterm.adf.visitors import NodeVisitor
from jiraterm.constants import (
    BLOCK_SEPARATOR,
    BULLET_MARKER,
    FILE_PLACEHOLDER,
    NESTED_LIST_INDENT,
    PICTURE_PLACEHOLDER,
)
from jiraterm.options import TerminalRendererOptions
from jiraterm.renderers.base import BaseRenderer, InlineContentMixin
from jiraterm.utils.ansi import colour_url

logger = logging.getLogger(__name__)

_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")

# Item children that carry the bullet or number marker
MARKED_ITEM_TYPES = (Paragraph, CodeBlock)


def normalize_blank_lines(text: str) -> str:
    """Collapse every run of three or more newlines into exactly two.

    Applying the function to its own output returns the same string.
    """
    return _EXCESS_BLANK_LINES.sub("\n\n", text)


class TerminalRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render Jira documents to terminal text.

    Parameters
    ----------
    options : TerminalRendererOptions or None, default = None
        Rendering options

    Examples
    --------
        >>> from jiraterm.adf.nodes import Document, Heading, Text
        >>> doc = Document(children=(Heading(level=2, content=(Text("Hi"),)),))
        >>> TerminalRenderer().render_to_string(doc)
        '## Hi'

    """

    def __init__(self, options: TerminalRendererOptions | None = None):
        """Initialize the terminal renderer with options."""
        if options is not None and not isinstance(options, TerminalRendererOptions):
            raise TypeError(f"Expected TerminalRendererOptions, got {type(options).__name__}")
        options = options or TerminalRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: TerminalRendererOptions = options
        self._output: list[str] = []

    def render_to_string(self, document: Document) -> str:
        """Render a document to a trimmed, blank-line-normalized string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Terminal text

        """
        self._output = []
        document.accept(self)
        result = "".join(self._output)
        self._output = []
        return normalize_blank_lines(result.strip())

    def visit_document(self, node: Document) -> None:
        """Render every top-level node in document order."""
        for child in node.children:
            child.accept(self)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a text run, decorating link targets.

        A link whose target is the text itself is shown as the bare URL;
        any other link is shown as ``[label](url)``.
        """
        href = node.link_href
        if not href:
            self._output.append(node.text)
            return

        url = colour_url(href, self.options.colour)
        if href == node.text:
            self._output.append(url)
        elif self.options.legacy_link_format:
            self._output.append(f"[{node.text}]({url}")
        else:
            self._output.append(f"[{node.text}]({url})")

    def visit_inline_card(self, node: InlineCard) -> None:
        """Render an inline card as its URL in parentheses."""
        self._output.append(f"({colour_url(node.url, self.options.colour)})")

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_heading(self, node: Heading) -> None:
        """Render a heading as ``#`` characters followed by its text."""
        content = self._render_inline_content(node.content)
        self._output.append(f"{BLOCK_SEPARATOR}{'#' * node.level} {content}")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a paragraph."""
        self._output.append(BLOCK_SEPARATOR + self._render_inline_content(node.content))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a code block, fenced only when the options ask for it."""
        content = self._render_inline_content(node.content)
        if self.options.fence_code_blocks:
            content = f"```{node.language or ''}\n{content}\n```"
        self._output.append(BLOCK_SEPARATOR + content)

    def visit_media_single(self, node: MediaSingle) -> None:
        """Render placeholders for embedded media."""
        self._output.append(self._render_media(node.media))

    def visit_media_group(self, node: MediaGroup) -> None:
        """Render placeholders for a group of attachments."""
        self._output.append(self._render_media(node.media))

    @staticmethod
    def _render_media(media: tuple[MediaReference, ...]) -> str:
        return "\n".join(PICTURE_PLACEHOLDER if ref.has_dimensions else FILE_PLACEHOLDER for ref in media)

    def visit_rule(self, node: Rule) -> None:
        """Render a horizontal rule as a full line of dashes."""
        line = self.options.rule_char * self.options.rule_width
        self._output.append(f"{BLOCK_SEPARATOR}{line}{BLOCK_SEPARATOR}")

    def visit_unknown(self, node: UnknownNode) -> None:
        """Render an unrecognised node as its pretty-printed JSON."""
        logger.warning("Unexpected Jira content of type %r; rendering raw JSON", node.type)
        dump = json.dumps(node.raw, indent=2, ensure_ascii=False, default=str)
        self._output.append(BLOCK_SEPARATOR + dump)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def visit_bullet_list(self, node: BulletList) -> None:
        """Render an unordered list."""
        for item in node.items:
            self._output.append(self._render_list_item(item))

    def visit_ordered_list(self, node: OrderedList) -> None:
        """Render an ordered list, numbering items from the list's start value."""
        for offset, item in enumerate(node.items):
            self._output.append(self._render_list_item(item, node.start + offset))

    def visit_list_item(self, node: ListItem) -> None:
        """Render a list item found outside of a list as a bullet item."""
        self._output.append(self._render_list_item(node))

    def _render_list_item(self, item: ListItem, index: Optional[int] = None) -> str:
        """Render one list item.

        Parameters
        ----------
        item : ListItem
            Item to render
        index : int or None, default = None
            Item number for ordered lists; None for bullet items

        Returns
        -------
        str
            Item text, each line starting with a newline

        """
        parts = []
        numbered = False
        if index is None:
            padding = " " * len(BULLET_MARKER)
        else:
            # Later lines of a numbered item are padded to the index width
            padding = " " * len(str(index))

        for child in item.children:
            if isinstance(child, LIST_TYPES):
                nested = self._render_node(child)
                parts.append(nested.replace("\n", "\n" + NESTED_LIST_INDENT))
                continue

            text = self._render_node(child).strip()
            if not isinstance(child, MARKED_ITEM_TYPES):
                # Headings, rules, media and raw JSON sit under the marker
                if text:
                    parts.append("\n" + padding + text.replace("\n", "\n" + padding))
                continue

            if index is None:
                parts.append(f"\n{BULLET_MARKER}{text}")
                continue

            text = text.replace("\n", "\n" + padding)
            if numbered:
                parts.append(f"\n{padding}{text}")
            else:
                parts.append(f"\n{index}. {text}")
                numbered = True
        return "".join(parts)
