"""Command-line interface for jiraterm.

Environment Variable Support
----------------------------
Connection settings are read from ``JIRA_URL``, ``ATLASSIAN_USER``,
``ATLASSIAN_API_TOKEN`` (or ``JIRA_COOKIE``) and ``DEFAULT_ISSUE_PREFIX``,
overriding any configuration file.

Examples
--------
Show the ticket of the current git branch::

    $ jiraterm i

Show comments of a ticket, expanding the number with DEFAULT_ISSUE_PREFIX::

    $ jiraterm i 123 comments

Move a ticket to review::

    $ jiraterm i ABC-123 status:review

Active sprint of board 42::

    $ jiraterm b 42

"""

import argparse
import logging
import sys

from jiraterm.cli.builder import EXIT_ERROR, create_parser, get_exit_code_for_exception
from jiraterm.cli.commands import dispatch_command
from jiraterm.cli.commands.help import handle_help_command
from jiraterm.cli.commands.shared import CommandContext
from jiraterm.config import load_config
from jiraterm.exceptions import JiraTermError
from jiraterm.logging_utils import configure_logging
from jiraterm.options import TerminalRendererOptions
from jiraterm.utils.ansi import supports_colour
from jiraterm.utils.terminal import get_terminal_width

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace or (parsed_args.verbose and parsed_args.log_level == "WARNING"):
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _build_renderer_options(parsed_args: argparse.Namespace) -> TerminalRendererOptions:
    colour = not parsed_args.no_colour and supports_colour(sys.stdout)
    return TerminalRendererOptions(colour=colour, rule_width=get_terminal_width())


def main(args: list[str] | None = None) -> int:
    """Execute the jiraterm CLI.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    if parsed_args.help or parsed_args.command in (None, "help"):
        return handle_help_command()

    try:
        context = CommandContext(
            config=load_config(parsed_args.config),
            options=_build_renderer_options(parsed_args),
        )
        result = dispatch_command(parsed_args.command, parsed_args.args, context)
    except JiraTermError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return EXIT_ERROR

    if result is None:
        print(f"Error: Unknown command: {parsed_args.command}", file=sys.stderr)
        handle_help_command()
        return EXIT_ERROR
    return result
