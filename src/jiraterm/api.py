#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/api.py
"""Public entry points for turning Jira rich text into terminal text.

Examples
--------
    >>> from jiraterm.api import render_description
    >>> render_description({
    ...     "type": "doc",
    ...     "content": [{"type": "heading", "attrs": {"level": 2},
    ...                  "content": [{"type": "text", "text": "Hi"}]}],
    ... })
    '## Hi'
    >>> render_description(None)
    'No description.'

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from jiraterm.adf.nodes import Document
from jiraterm.adf.parser import AdfParser
from jiraterm.constants import NO_DESCRIPTION
from jiraterm.options import TerminalRendererOptions
from jiraterm.renderers.terminal import TerminalRenderer
from jiraterm.utils.debug import DebugDumper

logger = logging.getLogger(__name__)


def _is_empty_description(envelope: Any) -> bool:
    """Return True for None and other empty scalars such as ``""`` or ``0``."""
    return envelope is None or (not envelope and not isinstance(envelope, (Mapping, list)))


def parse_description(envelope: Any, dumper: Optional[DebugDumper] = None) -> Document:
    """Validate a raw description envelope and build its document tree.

    Parameters
    ----------
    envelope : Any
        Decoded JSON of a Jira description or comment body
    dumper : DebugDumper, optional
        Where to dump the raw content if the envelope is rejected

    Returns
    -------
    Document
        Typed document tree

    Raises
    ------
    InvalidEnvelopeError
        If the envelope's ``type`` is not ``"doc"``

    """
    return AdfParser(dumper).parse(envelope)


def render_document(document: Document, options: Optional[TerminalRendererOptions] = None) -> str:
    """Render an already-parsed document to terminal text."""
    return TerminalRenderer(options).render_to_string(document)


def render_description(
    envelope: Any,
    options: Optional[TerminalRendererOptions] = None,
    dumper: Optional[DebugDumper] = None,
) -> str:
    """Render a Jira description (or comment body) to terminal text.

    Parameters
    ----------
    envelope : Any
        Decoded ``{"type": "doc", "content": [...]}`` JSON, or None when the
        issue has no description
    options : TerminalRendererOptions, optional
        Rendering options (colour, rule width, ...)
    dumper : DebugDumper, optional
        Diagnostic side channel for rejected envelopes

    Returns
    -------
    str
        Rendered text, or ``"No description."`` when ``envelope`` is None or an
        empty scalar (``""``, ``0``, ``False``)

    Raises
    ------
    InvalidEnvelopeError
        If the envelope's ``type`` is not ``"doc"``. Nothing is rendered.

    """
    if _is_empty_description(envelope):
        return NO_DESCRIPTION

    document = parse_description(envelope, dumper)
    logger.debug("Rendering document with %d top-level nodes", len(document.children))
    return render_document(document, options)
