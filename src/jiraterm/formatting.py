#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/formatting.py
"""Human-readable summaries of issues, comments and sprint boards."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from jiraterm.api import render_description
from jiraterm.constants import DEFAULT_STATUS_WEIGHT, STATUS_ORDER
from jiraterm.models import Board, BoardIssue, Comment, Issue
from jiraterm.options import TerminalRendererOptions
from jiraterm.utils.ansi import BOLD, colour_status, style
from jiraterm.utils.debug import DebugDumper

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

# Sorts comments with no timestamp after every dated one
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def format_date(date: Optional[datetime]) -> str:
    """Format a date as ``"5 Jan 2024"``; unknown dates render as ``"?"``."""
    if date is None:
        return "?"
    return f"{date.day} {MONTHS[date.month - 1]} {date.year}"


def status_weight(status: str) -> int:
    """Return the board sort weight of a status; unknown statuses sort last."""
    return STATUS_ORDER.get(status, DEFAULT_STATUS_WEIGHT)


def sorted_statuses(board: Board) -> list[tuple[str, list[BoardIssue]]]:
    """Return the board's status groups in workflow order.

    Groups with equal weight keep the order Jira listed them in.
    """
    return sorted(board.issues_by_status.items(), key=lambda entry: status_weight(entry[0]))


def _aware(date: Optional[datetime]) -> datetime:
    if date is None:
        return _EPOCH
    return date if date.tzinfo else date.replace(tzinfo=timezone.utc)


def days_left(board: Board, now: Optional[datetime] = None) -> Optional[float]:
    """Return the (possibly negative) number of days until the sprint ends."""
    if board.sprint.end_date is None:
        return None
    now = _aware(now or datetime.now(timezone.utc))
    return (_aware(board.sprint.end_date) - now).total_seconds() / (60 * 60 * 24)


def format_issue(
    issue: Issue,
    options: Optional[TerminalRendererOptions] = None,
    dumper: Optional[DebugDumper] = None,
) -> str:
    """Format an issue header followed by its rendered description."""
    options = options or TerminalRendererOptions()
    colour = options.colour
    lines = [
        f"{style(issue.key, BOLD, colour)}: {issue.summary}",
        f"Status: {colour_status(issue.status, colour)}",
        f"Assignee: {issue.assignee or 'Unassigned'}",
    ]
    if issue.issue_type:
        lines.append(f"Type: {issue.issue_type}")
    lines.append("")
    lines.append(render_description(issue.description, options, dumper))
    return "\n".join(lines)


def format_comments(
    comments: Iterable[Comment],
    options: Optional[TerminalRendererOptions] = None,
    dumper: Optional[DebugDumper] = None,
) -> str:
    """Format comments newest first, or ``"No comments"`` when there are none."""
    ordered = sorted(comments, key=lambda c: _aware(c.created), reverse=True)
    if not ordered:
        return "\nNo comments"

    lines = ["\nComments - newest first"]
    for comment in ordered:
        lines.append(f"{format_date(comment.created)}: {comment.author}")
        lines.append(render_description(comment.body, options, dumper) + "\n")
    return "\n".join(lines)


def format_board(
    board: Board, now: Optional[datetime] = None, colour: bool = True, include_issues: bool = True
) -> str:
    """Format the sprint header and, optionally, the issues grouped by status."""
    now = now or datetime.now(timezone.utc)
    sprint = board.sprint
    dates = f"{format_date(sprint.start_date)} - {format_date(sprint.end_date)}"

    lines = [f"\nToday: {format_date(now)}\n"]
    lines.append(f"Sprint: {sprint.name} ({dates})" if sprint.name else dates)
    if sprint.goal:
        lines.append(f"Goal: {sprint.goal}")

    remaining = days_left(board, now)
    if remaining is not None:
        if remaining > 0:
            lines.append(f"Days left: {remaining:.1f}")
        else:
            lines.append(f"Sprint over ({remaining:.1f} days)")

    if not include_issues:
        return "\n".join(lines)

    for status, issues in sorted_statuses(board):
        lines.append(f"\n{colour_status(status, colour)}")
        for issue in issues:
            suffix = f" - {issue.assignee}" if issue.assignee else ""
            lines.append(f"- {issue.key}: {issue.summary}{suffix}")

    return "\n".join(lines)


def print_board_table(board: Board, console: Optional[Console] = None) -> None:
    """Print the board as a rich table, one row per issue."""
    console = console or Console()
    table = Table(title=board.sprint.name or "Active sprint")
    table.add_column("Status", style="bold")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Summary")
    table.add_column("Assignee", style="dim")

    for status, issues in sorted_statuses(board):
        for issue in issues:
            table.add_row(status, issue.key, issue.summary, issue.assignee or "")

    console.print(table)
