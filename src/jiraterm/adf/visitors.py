#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/adf/visitors.py
"""Visitor pattern base class for Jira document traversal.

Each node class dispatches to the matching ``visit_*`` method of the
visitor it accepts. Renderers subclass :class:`NodeVisitor` and implement
every method, which keeps dispatch over the closed node set total:
``visit_unknown`` is the fallback arm for kinds the parser did not
recognise.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from jiraterm.adf.nodes import (
    BulletList,
    CodeBlock,
    Document,
    Heading,
    InlineCard,
    ListItem,
    MediaGroup,
    MediaSingle,
    OrderedList,
    Paragraph,
    Rule,
    Text,
    UnknownNode,
)


class NodeVisitor(ABC):
    """Abstract base class for document node visitors.

    Examples
    --------
    Collecting every link target in a document:

        >>> class LinkCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.links = []
        ...
        ...     def visit_text(self, node):
        ...         if node.link_href:
        ...             self.links.append(node.link_href)
        ...
        ...     # remaining visit_* methods recurse into children

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit the document root."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a text run."""
        pass

    @abstractmethod
    def visit_inline_card(self, node: InlineCard) -> Any:
        """Visit an inline reference card."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a heading."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a paragraph."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a code block."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit an unordered list."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an ordered list."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a list item outside of its parent list's rendering."""
        pass

    @abstractmethod
    def visit_media_single(self, node: MediaSingle) -> Any:
        """Visit a single media embed."""
        pass

    @abstractmethod
    def visit_media_group(self, node: MediaGroup) -> Any:
        """Visit a group of media embeds."""
        pass

    @abstractmethod
    def visit_rule(self, node: Rule) -> Any:
        """Visit a horizontal rule."""
        pass

    @abstractmethod
    def visit_unknown(self, node: UnknownNode) -> Any:
        """Visit a node of an unrecognised kind."""
        pass
