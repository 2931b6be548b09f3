#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/jiraterm/cli/commands/issue.py
"""Issue commands for the jiraterm CLI.

``issue`` shows a ticket and optionally acts on it; ``link`` and
``issue-number`` print the ticket's URL or key.
"""

import argparse
import logging
import os
import sys
import webbrowser
from typing import Optional

from jiraterm.cli.builder import EXIT_ERROR, EXIT_SUCCESS, EXIT_TRANSITION_ERROR
from jiraterm.cli.commands.shared import CommandContext, choose_and_apply_transition
from jiraterm.constants import ASSIGN_SELF_PAYLOADS, ENV_NO_BROWSER, UNASSIGN_PAYLOADS
from jiraterm.exceptions import TransitionError
from jiraterm.formatting import format_comments, format_issue
from jiraterm.tickets import resolve_ticket

logger = logging.getLogger(__name__)

COMMENT_ACTIONS = ("c", "comment", "comments")
ASSIGN_ACTIONS = ("a", "assign")
STATUS_ACTIONS = ("status",)
BROWSER_PAYLOADS = ("edit", "rich")


def split_action(value: Optional[str]) -> tuple[str, str]:
    """Split ``action:payload`` into its two parts.

    Examples
    --------
        >>> split_action("assign:me")
        ('assign', 'me')
        >>> split_action(None)
        ('', '')

    """
    if not value:
        return "", ""
    action, _, payload = value.partition(":")
    return action, payload


def _is_action(value: str) -> bool:
    action, _ = split_action(value)
    return action in COMMENT_ACTIONS + ASSIGN_ACTIONS + STATUS_ACTIONS


def _parse_ticket_args(prog: str, description: str, args: list[str], with_action: bool = False) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("ticket", nargs="?", help="Ticket key or number (default: current ticket or git branch)")
    if with_action:
        parser.add_argument(
            "action",
            nargs="?",
            help="comments[:edit], assign:me|no-one, or status[:NAME]",
        )
    parsed = parser.parse_args(args)

    # "jiraterm issue status" acts on the ticket of the current branch
    if with_action and parsed.ticket and parsed.action is None and _is_action(parsed.ticket):
        parsed.action, parsed.ticket = parsed.ticket, None
    return parsed


def _report_transition(key: str, name: Optional[str]) -> None:
    if name:
        print(f'{key} is now "{name}"')


def handle_link_command(args: list[str], context: CommandContext) -> int:
    """Print the browser URL of a ticket."""
    parsed = _parse_ticket_args("jiraterm link", "Print the URL of a Jira ticket.", args)
    key = resolve_ticket(parsed.ticket, context.config)
    print(context.config.browse_url(key))
    return EXIT_SUCCESS


def handle_ticket_number_command(args: list[str], context: CommandContext) -> int:
    """Print the resolved ticket key."""
    parsed = _parse_ticket_args("jiraterm issue-number", "Print the resolved Jira ticket key.", args)
    print(resolve_ticket(parsed.ticket, context.config))
    return EXIT_SUCCESS


def handle_issue_command(args: list[str], context: CommandContext) -> int:
    """Show a ticket, then run the requested action.

    Parameters
    ----------
    args : list[str]
        Command line arguments (beyond 'issue')
    context : CommandContext
        Configuration and client factory

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parsed = _parse_ticket_args("jiraterm issue", "Show a Jira issue and act on it.", args, with_action=True)
    key = resolve_ticket(parsed.ticket, context.config)
    action, payload = split_action(parsed.action)

    with context.open_client() as client:
        issue = client.get_issue(key)
        print(format_issue(issue, context.options, context.dumper))

        if action in ASSIGN_ACTIONS:
            return _assign(client, key, payload, context)
        if action in STATUS_ACTIONS:
            return _change_status(client, key, payload, context)

        comments = client.get_comments(key)
        if action in COMMENT_ACTIONS:
            print(format_comments(comments, context.options, context.dumper))
            if payload in BROWSER_PAYLOADS:
                _open_in_browser(context.config.browse_url(key))
            return EXIT_SUCCESS

        if action:
            print(f"Error: Unknown action: {action}", file=sys.stderr)
            return EXIT_ERROR

        if comments:
            print(f"\nType `jiraterm i {parsed.ticket or key} c` to see {len(comments)} comments")
        else:
            print("\nNo comments")
    return EXIT_SUCCESS


def _assign(client, key: str, payload: str, context: CommandContext) -> int:
    if payload in ASSIGN_SELF_PAYLOADS:
        client.assign(key, client.get_myself().account_id)
    elif payload in UNASSIGN_PAYLOADS:
        client.assign(key, None)
    else:
        print(f"Error: Unknown assignee '{payload}'. Use one of: me, no-one", file=sys.stderr)
        return EXIT_ERROR

    return _change_status(client, key, "", context)


def _change_status(client, key: str, payload: str, context: CommandContext) -> int:
    try:
        if payload:
            transition = client.apply_transition(key, payload)
        else:
            transition = choose_and_apply_transition(client, key, context)
    except TransitionError as e:
        print(f"Error when updating status of {key}: {e}", file=sys.stderr)
        for name in e.candidates:
            print(name, file=sys.stderr)
        return EXIT_TRANSITION_ERROR

    _report_transition(key, transition.name if transition else None)
    return EXIT_SUCCESS


def _open_in_browser(url: str) -> None:
    if os.environ.get(ENV_NO_BROWSER):
        print("Skipping browser launch (test mode)")
        return
    logger.debug("Opening %s", url)
    webbrowser.open(url)
