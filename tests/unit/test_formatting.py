#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_formatting.py
"""Unit tests for issue, comment and board summaries."""

import io
from datetime import datetime, timezone

import pytest
from rich.console import Console
from utils import doc, paragraph, text

from jiraterm.formatting import (
    days_left,
    format_board,
    format_comments,
    format_date,
    format_issue,
    print_board_table,
    sorted_statuses,
    status_weight,
)
from jiraterm.models import Board, BoardIssue, Comment, Issue, Sprint
from jiraterm.options import TerminalRendererOptions

PLAIN = TerminalRendererOptions(colour=False)
NOW = datetime(2024, 1, 10, 9, 0, tzinfo=timezone.utc)


def make_board(**sprint_fields) -> Board:
    fields = {
        "id": "2",
        "name": "Sprint 2",
        "state": "active",
        "start_date": datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc),
        "end_date": datetime(2024, 1, 15, 9, 0, tzinfo=timezone.utc),
    }
    fields.update(sprint_fields)
    board = Board(sprint=Sprint(**fields))
    board.add_issue(BoardIssue("ABC-3", "Write docs", "To Do"))
    board.add_issue(BoardIssue("ABC-1", "Ship it", "Done", "Ada"))
    board.add_issue(BoardIssue("ABC-2", "Fix bug", "In Progress", "Bob"))
    board.add_issue(BoardIssue("ABC-4", "Check", "Review"))
    return board


@pytest.mark.unit
class TestHelpers:
    """Tests for dates and status ordering."""

    def test_format_date(self):
        """Test dates render as day, short month and year."""
        assert format_date(datetime(2024, 3, 5)) == "5 Mar 2024"

    def test_format_unknown_date(self):
        """Test a missing date renders as a question mark."""
        assert format_date(None) == "?"

    def test_status_weight(self):
        """Test workflow statuses sort before unknown ones."""
        assert status_weight("In Progress") < status_weight("Review") < status_weight("Done") < status_weight("Blocked")

    def test_sorted_statuses(self):
        """Test groups follow the workflow order."""
        assert [status for status, _ in sorted_statuses(make_board())] == ["In Progress", "Review", "Done", "To Do"]

    def test_days_left(self):
        """Test the remaining time is measured in days."""
        assert days_left(make_board(), NOW) == pytest.approx(5.0)

    def test_days_left_without_end(self):
        """Test sprints without an end date have no remaining time."""
        assert days_left(make_board(end_date=None), NOW) is None


@pytest.mark.unit
class TestFormatIssue:
    """Tests for the issue summary."""

    def test_without_description(self):
        """Test the header fields and the missing-description placeholder."""
        issue = Issue(key="ABC-1", summary="Fix login", status="To Do", issue_type="Bug")
        assert format_issue(issue, PLAIN) == (
            "ABC-1: Fix login\nStatus: To Do\nAssignee: Unassigned\nType: Bug\n\nNo description."
        )

    def test_with_description(self):
        """Test the rendered description follows the header."""
        issue = Issue(key="ABC-1", summary="s", status="Done", assignee="Ada", description=doc(paragraph(text("Body"))))
        result = format_issue(issue, PLAIN)
        assert "Assignee: Ada" in result
        assert result.endswith("\n\nBody")


@pytest.mark.unit
class TestFormatComments:
    """Tests for the comment listing."""

    def test_no_comments(self):
        """Test an empty comment list."""
        assert format_comments([], PLAIN) == "\nNo comments"

    def test_newest_first(self):
        """Test comments are listed newest first with their rendered body."""
        comments = [
            Comment("Ada", doc(paragraph(text("old"))), datetime(2024, 1, 1, tzinfo=timezone.utc)),
            Comment("Bob", doc(paragraph(text("new"))), datetime(2024, 2, 1, tzinfo=timezone.utc)),
        ]
        assert format_comments(comments, PLAIN) == (
            "\nComments - newest first\n1 Feb 2024: Bob\nnew\n\n1 Jan 2024: Ada\nold\n"
        )


@pytest.mark.unit
class TestFormatBoard:
    """Tests for the sprint overview."""

    def test_full_board(self):
        """Test the header and the grouped issues."""
        result = format_board(make_board(goal="Release"), now=NOW, colour=False)
        assert result == "\n".join(
            [
                "\nToday: 10 Jan 2024\n",
                "Sprint: Sprint 2 (1 Jan 2024 - 15 Jan 2024)",
                "Goal: Release",
                "Days left: 5.0",
                "\nIn Progress",
                "- ABC-2: Fix bug - Bob",
                "\nReview",
                "- ABC-4: Check",
                "\nDone",
                "- ABC-1: Ship it - Ada",
                "\nTo Do",
                "- ABC-3: Write docs",
            ]
        )

    def test_sprint_over(self):
        """Test a finished sprint reports how long ago it ended."""
        later = datetime(2024, 1, 17, 9, 0, tzinfo=timezone.utc)
        assert "Sprint over (-2.0 days)" in format_board(make_board(), now=later, colour=False)

    def test_unnamed_sprint(self):
        """Test only the dates are shown for an unnamed sprint."""
        result = format_board(make_board(name=""), now=NOW, colour=False, include_issues=False)
        assert result.split("\n")[3] == "1 Jan 2024 - 15 Jan 2024"

    def test_header_only(self):
        """Test the issue list can be left out."""
        result = format_board(make_board(), now=NOW, colour=False, include_issues=False)
        assert "ABC-1" not in result

    def test_rich_table(self):
        """Test the rich table lists every issue."""
        output = io.StringIO()
        print_board_table(make_board(), Console(file=output, width=120, color_system=None))
        rendered = output.getvalue()
        for key in ("ABC-1", "ABC-2", "ABC-3", "ABC-4"):
            assert key in rendered
