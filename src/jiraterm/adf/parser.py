#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/adf/parser.py
"""Build typed document trees from raw Jira rich-text JSON.

The parser validates the top-level envelope and converts every node it
recognises into the matching class from :mod:`jiraterm.adf.nodes`. Nodes of
any other kind (or malformed nodes) become :class:`UnknownNode`, so parsing
only fails when the envelope itself is wrong.

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from jiraterm.adf.nodes import (
    BULLET_LIST,
    CODE_BLOCK,
    DOC,
    HEADING,
    INLINE_CARD,
    LIST_ITEM,
    MEDIA_GROUP,
    MEDIA_SINGLE,
    ORDERED_LIST,
    PARAGRAPH,
    RULE,
    TEXT,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    InlineCard,
    ListItem,
    Mark,
    MediaGroup,
    MediaReference,
    MediaSingle,
    Node,
    OrderedList,
    Paragraph,
    Rule,
    Text,
    UnknownNode,
)
from jiraterm.constants import DESCRIPTION_DUMP_NAME
from jiraterm.exceptions import InvalidEnvelopeError
from jiraterm.utils.debug import DebugDumper

logger = logging.getLogger(__name__)

MISSING_TYPE = "<missing>"
MAX_HEADING_LEVEL = 6


def _as_int(value: Any) -> Optional[int]:
    """Coerce ``value`` to int, returning None for anything non-numeric."""
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _attrs(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    attrs = raw.get("attrs")
    return attrs if isinstance(attrs, Mapping) else {}


class AdfParser:
    """Convert a raw Jira document envelope into a :class:`Document`.

    Parameters
    ----------
    dumper : DebugDumper or None, default = None
        Diagnostic side channel used when the envelope is rejected

    Examples
    --------
        >>> parser = AdfParser()
        >>> doc = parser.parse({"type": "doc", "content": [
        ...     {"type": "paragraph", "content": [{"type": "text", "text": "Hi"}]}
        ... ]})
        >>> doc.children[0].content[0].text
        'Hi'

    """

    def __init__(self, dumper: DebugDumper | None = None) -> None:
        self.dumper = dumper or DebugDumper(None)
        self._builders: dict[str, Callable[[Mapping[str, Any]], Node]] = {
            TEXT: self._parse_text,
            INLINE_CARD: self._parse_inline_card,
            HEADING: self._parse_heading,
            PARAGRAPH: self._parse_paragraph,
            CODE_BLOCK: self._parse_code_block,
            BULLET_LIST: self._parse_bullet_list,
            ORDERED_LIST: self._parse_ordered_list,
            LIST_ITEM: self._parse_list_item,
            MEDIA_SINGLE: self._parse_media_single,
            MEDIA_GROUP: self._parse_media_group,
            RULE: self._parse_rule,
        }

    def parse(self, envelope: Any) -> Document:
        """Validate the envelope and build the document tree.

        Parameters
        ----------
        envelope : Any
            Decoded JSON value expected to look like ``{"type": "doc", "content": [...]}``

        Returns
        -------
        Document
            Typed document tree

        Raises
        ------
        InvalidEnvelopeError
            If the envelope is not a mapping with ``type == "doc"``. The raw
            content is dumped through the debug channel first.

        """
        if not isinstance(envelope, Mapping) or envelope.get("type") != DOC:
            envelope_type = envelope.get("type") if isinstance(envelope, Mapping) else type(envelope).__name__
            payload = envelope.get("content", envelope) if isinstance(envelope, Mapping) else envelope
            dump_path = self.dumper.dump(DESCRIPTION_DUMP_NAME, payload)
            logger.error("Rejected Jira document with root type %r", envelope_type)
            raise InvalidEnvelopeError(envelope_type, debug_path=str(dump_path) if dump_path else None)

        children = self.parse_nodes(envelope.get("content"))
        return Document(children=children, version=_as_int(envelope.get("version")))

    def parse_nodes(self, raw_nodes: Any) -> tuple[Node, ...]:
        """Parse a raw ``content`` array; anything that is not a list yields no nodes."""
        if not isinstance(raw_nodes, list):
            if raw_nodes is not None:
                logger.debug("Ignoring non-list content of type %s", type(raw_nodes).__name__)
            return ()
        return tuple(self.parse_node(raw) for raw in raw_nodes)

    def parse_node(self, raw: Any) -> Node:
        """Parse a single raw node, falling back to :class:`UnknownNode`."""
        if not isinstance(raw, Mapping):
            logger.debug("Node is not an object: %r", raw)
            return UnknownNode(type=MISSING_TYPE, raw=raw)

        node_type = raw.get("type")
        builder = self._builders.get(node_type) if isinstance(node_type, str) else None
        if builder is None:
            logger.debug("Unrecognised node type %r", node_type)
            return UnknownNode(type=str(node_type) if node_type is not None else MISSING_TYPE, raw=raw)

        return builder(raw)

    def _parse_text(self, raw: Mapping[str, Any]) -> Node:
        text = raw.get("text")
        marks = []
        raw_marks = raw.get("marks")
        if isinstance(raw_marks, list):
            for raw_mark in raw_marks:
                if not isinstance(raw_mark, Mapping):
                    continue
                marks.append(Mark(type=str(raw_mark.get("type", "")), attrs=dict(_attrs(raw_mark))))
        return Text(text="" if text is None else str(text), marks=tuple(marks))

    def _parse_inline_card(self, raw: Mapping[str, Any]) -> Node:
        url = _attrs(raw).get("url")
        if not url:
            # Cards backed by embedded JSON-LD data have no URL to show
            return UnknownNode(type=INLINE_CARD, raw=raw)
        return InlineCard(url=str(url))

    def _parse_heading(self, raw: Mapping[str, Any]) -> Node:
        level = _as_int(_attrs(raw).get("level")) or 1
        return Heading(level=min(max(level, 1), MAX_HEADING_LEVEL), content=self.parse_nodes(raw.get("content")))

    def _parse_paragraph(self, raw: Mapping[str, Any]) -> Node:
        return Paragraph(content=self.parse_nodes(raw.get("content")))

    def _parse_code_block(self, raw: Mapping[str, Any]) -> Node:
        language = _attrs(raw).get("language")
        return CodeBlock(content=self.parse_nodes(raw.get("content")), language=str(language) if language else None)

    def _parse_list_items(self, raw: Mapping[str, Any]) -> tuple[ListItem, ...]:
        items = []
        for child in self.parse_nodes(raw.get("content")):
            if isinstance(child, ListItem):
                items.append(child)
            else:
                # Keep stray list children visible as their own item
                items.append(ListItem(children=(child,)))
        return tuple(items)

    def _parse_bullet_list(self, raw: Mapping[str, Any]) -> Node:
        return BulletList(items=self._parse_list_items(raw))

    def _parse_ordered_list(self, raw: Mapping[str, Any]) -> Node:
        start = _as_int(_attrs(raw).get("order"))
        return OrderedList(items=self._parse_list_items(raw), start=start if start is not None and start >= 0 else 1)

    def _parse_list_item(self, raw: Mapping[str, Any]) -> Node:
        return ListItem(children=self.parse_nodes(raw.get("content")))

    def _parse_media(self, raw: Mapping[str, Any]) -> tuple[MediaReference, ...]:
        references = []
        raw_media = raw.get("content")
        if not isinstance(raw_media, list):
            return ()
        for item in raw_media:
            if not isinstance(item, Mapping):
                continue
            attrs = _attrs(item)
            references.append(
                MediaReference(
                    id=str(attrs.get("id", "")),
                    media_type=attrs.get("type"),
                    collection=attrs.get("collection"),
                    width=_as_int(attrs.get("width")),
                    height=_as_int(attrs.get("height")),
                )
            )
        return tuple(references)

    def _parse_media_single(self, raw: Mapping[str, Any]) -> Node:
        return MediaSingle(media=self._parse_media(raw))

    def _parse_media_group(self, raw: Mapping[str, Any]) -> Node:
        return MediaGroup(media=self._parse_media(raw))

    def _parse_rule(self, raw: Mapping[str, Any]) -> Node:
        return Rule()
