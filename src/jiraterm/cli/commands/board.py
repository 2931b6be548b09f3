#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/jiraterm/cli/commands/board.py
"""Board command: active sprint overview for a Jira board."""

import argparse
import sys

from jiraterm.cli.builder import EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from jiraterm.cli.commands.shared import CommandContext
from jiraterm.formatting import format_board, print_board_table


def handle_board_command(args: list[str], context: CommandContext) -> int:
    """Print the active sprint of a board with issues grouped by status.

    Parameters
    ----------
    args : list[str]
        Command line arguments (beyond 'board')
    context : CommandContext
        Configuration and client factory

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = argparse.ArgumentParser(prog="jiraterm board", description="Show the active sprint of a Jira board.")
    parser.add_argument("board_id", nargs="?", help="Numeric board id")
    parser.add_argument(
        "start_page", nargs="?", type=int, default=1, help="Sprint page to start searching from (default 1)"
    )
    parser.add_argument("--rich", action="store_true", help="Show the issues as a table")
    parsed = parser.parse_args(args)

    if not parsed.board_id:
        print("Missing board number.", file=sys.stderr)
        print("Usage: jiraterm board <board-number> [start-page]")
        return EXIT_VALIDATION_ERROR
    if parsed.start_page < 1:
        print(f"Invalid start page: {parsed.start_page}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    with context.open_client() as client:
        board = client.get_board(parsed.board_id, parsed.start_page)

    print(format_board(board, colour=context.options.colour, include_issues=not parsed.rich))
    if parsed.rich:
        print_board_table(board)
    return EXIT_SUCCESS
