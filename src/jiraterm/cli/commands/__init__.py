#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/jiraterm/cli/commands/__init__.py
"""CLI command dispatch for jiraterm."""

import logging

from jiraterm.cli.commands.shared import CommandContext

logger = logging.getLogger(__name__)

LINK_COMMANDS = ("l", "link")
BOARD_COMMANDS = ("b", "board")
TICKET_NUMBER_COMMANDS = ("ticket-number", "issue-number")
ISSUE_COMMANDS = ("i", "ticket", "issue")


def dispatch_command(command: str, args: list[str], context: CommandContext) -> int | None:
    """Run the handler for ``command``.

    Parameters
    ----------
    command : str
        Command name or alias
    args : list[str]
        Arguments following the command
    context : CommandContext
        Configuration and client factory

    Returns
    -------
    int or None
        Exit code if the command was handled, None for unknown commands

    """
    logger.debug("Dispatching %r with %r", command, args)

    if command in LINK_COMMANDS:
        from jiraterm.cli.commands.issue import handle_link_command

        return handle_link_command(args, context)

    if command in TICKET_NUMBER_COMMANDS:
        from jiraterm.cli.commands.issue import handle_ticket_number_command

        return handle_ticket_number_command(args, context)

    if command in ISSUE_COMMANDS:
        from jiraterm.cli.commands.issue import handle_issue_command

        return handle_issue_command(args, context)

    if command in BOARD_COMMANDS:
        from jiraterm.cli.commands.board import handle_board_command

        return handle_board_command(args, context)

    return None
