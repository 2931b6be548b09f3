#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/jiraterm/adf/__init__.py
"""Atlassian Document Format (ADF) AST.

Jira stores rich text as ADF, a JSON tree of typed nodes. :class:`AdfParser`
turns that JSON into the frozen node classes of :mod:`jiraterm.adf.nodes`,
which renderers walk through the :class:`NodeVisitor` interface.
"""

from jiraterm.adf.nodes import (
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
from jiraterm.adf.parser import AdfParser
from jiraterm.adf.visitors import NodeVisitor

__all__ = [
    "AdfParser",
    "NodeVisitor",
    "Node",
    "Document",
    "Text",
    "Mark",
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
]
