#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/jiraterm/cli/commands/help.py
"""Usage text for the jiraterm CLI."""

from jiraterm.cli.builder import EXIT_SUCCESS

USAGE = """jiraterm: Jira in your terminal

Commands
- jiraterm i [issue-key]: Show a Jira issue
  - jiraterm i [issue-key] comments[:edit]: Show comments, newest first (edit: open in browser)
  - jiraterm i [issue-key] assign:[me, no-one]: Assign the issue to yourself or unassign it
  - jiraterm i [issue-key] status[:name]: Change the status of the issue
- jiraterm b <board-number> [start-page] [--rich]: Show the active sprint of a board
- jiraterm link [issue-key]: Print the URL of the issue
- jiraterm issue-number: Print the current issue key

Without an issue key, the current ticket file or the git branch name is used.
A bare number is prefixed with DEFAULT_ISSUE_PREFIX."""


def handle_help_command() -> int:
    """Print usage information."""
    print(USAGE)
    return EXIT_SUCCESS
