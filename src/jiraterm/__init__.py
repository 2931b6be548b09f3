"""jiraterm - Jira issues and sprint boards in the terminal.

jiraterm fetches issues, comments and the active sprint of a board from the
Jira REST API and prints them as plain terminal text. Issue descriptions and
comment bodies are Atlassian Document Format (ADF) trees; they are parsed into
a small typed AST and rendered with the terminal renderer.

Examples
--------
Render a description fetched from Jira:

    >>> from jiraterm import render_description
    >>> envelope = {
    ...     "type": "doc",
    ...     "content": [{"type": "heading", "attrs": {"level": 2},
    ...                  "content": [{"type": "text", "text": "Hi"}]}],
    ... }
    >>> render_description(envelope)
    '## Hi'

"""

from importlib.metadata import PackageNotFoundError, version

from jiraterm.api import parse_description, render_description, render_document
from jiraterm.exceptions import InvalidEnvelopeError, JiraTermError
from jiraterm.options import TerminalRendererOptions

try:
    __version__ = version("jiraterm")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "parse_description",
    "render_description",
    "render_document",
    "TerminalRendererOptions",
    "JiraTermError",
    "InvalidEnvelopeError",
]
