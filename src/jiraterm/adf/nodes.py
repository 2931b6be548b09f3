#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/adf/nodes.py
"""Node classes for Jira rich-text (Atlassian Document Format) documents.

Jira stores issue descriptions and comments as a JSON tree of typed nodes.
This module defines a closed set of node classes for the kinds the terminal
renderer understands, plus :class:`UnknownNode`, the fallback arm that keeps
dispatch total when Jira introduces new kinds.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document, Heading, Paragraph, CodeBlock
    - BulletList, OrderedList, ListItem
    - MediaSingle, MediaGroup, Rule

Inline nodes:
    - Text, InlineCard

Fallback:
    - UnknownNode

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

# Raw ``type`` tags used by Jira for each node kind
DOC = "doc"
TEXT = "text"
INLINE_CARD = "inlineCard"
HEADING = "heading"
PARAGRAPH = "paragraph"
CODE_BLOCK = "codeBlock"
BULLET_LIST = "bulletList"
ORDERED_LIST = "orderedList"
LIST_ITEM = "listItem"
MEDIA_SINGLE = "mediaSingle"
MEDIA_GROUP = "mediaGroup"
RULE = "rule"

LINK_MARK = "link"


class Node(ABC):
    """Base class for all document nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Mark:
    """Inline formatting annotation attached to a text node.

    Parameters
    ----------
    type : str
        Mark type, e.g. ``"link"``, ``"strong"``, ``"code"``
    attrs : dict, default = empty dict
        Mark attributes; link marks carry the target under ``"href"``

    """

    type: str
    attrs: dict[str, Any] = field(default_factory=dict)

    @property
    def href(self) -> Optional[str]:
        """Return the link target for link marks, otherwise None."""
        if self.type != LINK_MARK:
            return None
        href = self.attrs.get("href")
        return str(href) if href else None


@dataclass(frozen=True)
class Text(Node):
    """Run of literal text with optional marks.

    Parameters
    ----------
    text : str
        Literal text
    marks : tuple of Mark, default = ()
        Formatting marks in document order

    """

    text: str
    marks: tuple[Mark, ...] = ()

    @property
    def link_href(self) -> Optional[str]:
        """Return the target of the first link mark, if any."""
        for mark in self.marks:
            if mark.href:
                return mark.href
        return None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass(frozen=True)
class InlineCard(Node):
    """Inline reference card (smart link) pointing at a URL.

    Parameters
    ----------
    url : str
        Target URL of the card

    """

    url: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_inline_card``."""
        return visitor.visit_inline_card(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Heading(Node):
    """Heading with a level and inline content.

    Parameters
    ----------
    level : int
        Heading level; Jira uses 1-6
    content : tuple of Node, default = ()
        Inline nodes representing heading text

    """

    level: int
    content: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        """Validate heading level is positive."""
        if self.level < 1:
            raise ValueError(f"Heading level must be positive, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)


@dataclass(frozen=True)
class Paragraph(Node):
    """Paragraph of inline content."""

    content: tuple[Node, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass(frozen=True)
class CodeBlock(Node):
    """Code block.

    Parameters
    ----------
    content : tuple of Node, default = ()
        Text nodes holding the code
    language : str or None, default = None
        Language tag from ``attrs.language``

    """

    content: tuple[Node, ...] = ()
    language: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self)


@dataclass(frozen=True)
class ListItem(Node):
    """Item of a bullet or ordered list.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Paragraphs, code blocks and nested lists in document order

    """

    children: tuple[Node, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass(frozen=True)
class BulletList(Node):
    """Unordered list of list items."""

    items: tuple[ListItem, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_bullet_list``."""
        return visitor.visit_bullet_list(self)


@dataclass(frozen=True)
class OrderedList(Node):
    """Ordered list of list items.

    Parameters
    ----------
    items : tuple of ListItem, default = ()
        List items in document order
    start : int, default = 1
        Number of the first item (``attrs.order``)

    """

    items: tuple[ListItem, ...] = ()
    start: int = 1

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_ordered_list``."""
        return visitor.visit_ordered_list(self)


@dataclass(frozen=True)
class MediaReference:
    """Reference to an attachment stored in Jira's media service.

    The binary content is never fetched; only the presence of size metadata
    matters for rendering.

    """

    id: str = ""
    media_type: Optional[str] = None
    collection: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @property
    def has_dimensions(self) -> bool:
        """Return True when both width and height are known (i.e. a picture)."""
        return self.width is not None and self.height is not None


@dataclass(frozen=True)
class MediaSingle(Node):
    """Single embedded media item (usually one picture)."""

    media: tuple[MediaReference, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_media_single``."""
        return visitor.visit_media_single(self)


@dataclass(frozen=True)
class MediaGroup(Node):
    """Group of attached files shown together."""

    media: tuple[MediaReference, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_media_group``."""
        return visitor.visit_media_group(self)


@dataclass(frozen=True)
class Rule(Node):
    """Horizontal rule."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_rule``."""
        return visitor.visit_rule(self)


@dataclass(frozen=True)
class UnknownNode(Node):
    """Node of a kind this package does not understand.

    Carries the raw JSON so that renderers can show it verbatim instead of
    failing the whole document.

    Parameters
    ----------
    type : str
        The raw ``type`` tag (``"<missing>"`` when absent)
    raw : any
        The raw node value as received

    """

    type: str
    raw: Any = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_unknown``."""
        return visitor.visit_unknown(self)


@dataclass(frozen=True)
class Document(Node):
    """Root node of a validated ``{"type": "doc"}`` envelope.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Top-level nodes in document order
    version : int or None, default = None
        ADF schema version from the envelope, if present

    """

    children: tuple[Node, ...] = ()
    version: Optional[int] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)


LIST_TYPES = (BulletList, OrderedList)

__all__ = [
    "Node",
    "Mark",
    "Text",
    "InlineCard",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "ListItem",
    "BulletList",
    "OrderedList",
    "MediaReference",
    "MediaSingle",
    "MediaGroup",
    "Rule",
    "UnknownNode",
    "Document",
    "LIST_TYPES",
]
