#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/renderers/base.py
"""Base classes for document renderers.

This module defines the abstract base class renderers inherit from and the
output-capturing mixin used by text renderers to render a subtree to a
string.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Iterable, Union

from jiraterm.adf.nodes import Document, Node


class BaseRenderer(ABC):
    """Abstract base class for document renderers.

    Parameters
    ----------
    options : Any or None, default = None
        Renderer-specific options

    Examples
    --------
    Creating a custom renderer:

        >>> class WordCountRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return str(len(doc.children))

    """

    def __init__(self, options: Any = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the document to a string.

        Parameters
        ----------
        doc : Document
            Document node to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, doc: Document, output: Union[str, Path, IO[str]]) -> None:
        """Render the document and write it to a path or text stream.

        Parameters
        ----------
        doc : Document
            Document node to render
        output : str, Path, or IO[str]
            File path, or a file-like object opened in text mode

        """
        text = self.render_to_string(doc)
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        else:
            output.write(text)


class InlineContentMixin:
    """Mixin providing the output-capture pattern for text renderers.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    """

    _output: list[str]  # Type hint for the required attribute

    def _render_inline_content(self, content: Iterable[Node]) -> str:
        """Render a sequence of nodes to text without touching the main output.

        Parameters
        ----------
        content : iterable of Node
            Nodes to render

        Returns
        -------
        str
            Rendered content as a string

        """
        saved_output = self._output
        self._output = []

        try:
            for node in content:
                node.accept(self)
            result = "".join(self._output)
        finally:
            self._output = saved_output

        return result

    def _render_node(self, node: Node) -> str:
        """Render a single node to text without touching the main output."""
        return self._render_inline_content((node,))
