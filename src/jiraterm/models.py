#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/models.py
"""Data classes for the parts of Jira REST payloads that jiraterm uses.

Rich-text fields (descriptions, comment bodies) are kept as raw JSON and
rendered on demand through :mod:`jiraterm.api`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

# Jira emits offsets without a colon (+0000), which fromisoformat rejects before 3.11
_OFFSET_WITHOUT_COLON = re.compile(r"([+-]\d{2})(\d{2})$")


def parse_jira_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse a Jira timestamp such as ``2024-01-15T10:20:30.123+0000``.

    Returns None for empty or unparseable values.
    """
    if not value:
        return None
    normalized = value.strip()
    if normalized.endswith("Z"):
        normalized = normalized[:-1] + "+00:00"
    normalized = _OFFSET_WITHOUT_COLON.sub(r"\1:\2", normalized)
    try:
        return datetime.fromisoformat(normalized)
    except ValueError:
        return None


def _fields(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    value = raw.get("fields")
    return value if isinstance(value, Mapping) else {}


def _name(value: Any, key: str = "name") -> Optional[str]:
    if isinstance(value, Mapping) and value.get(key):
        return str(value[key])
    return None


@dataclass(frozen=True)
class User:
    """Jira user account."""

    account_id: str
    display_name: str = ""

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "User":
        """Build from a Jira user object."""
        return cls(account_id=str(raw.get("accountId", "")), display_name=str(raw.get("displayName", "")))


@dataclass(frozen=True)
class Issue:
    """Jira issue with its raw rich-text description."""

    key: str
    summary: str = ""
    status: str = ""
    assignee: Optional[str] = None
    issue_type: Optional[str] = None
    description: Any = None

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "Issue":
        """Build from a ``/rest/api/3/issue/{key}`` response."""
        fields_ = _fields(raw)
        return cls(
            key=str(raw.get("key", "")),
            summary=str(fields_.get("summary") or ""),
            status=_name(fields_.get("status")) or "",
            assignee=_name(fields_.get("assignee"), "displayName"),
            issue_type=_name(fields_.get("issuetype")),
            description=fields_.get("description"),
        )


@dataclass(frozen=True)
class Comment:
    """Issue comment with its raw rich-text body."""

    author: str
    body: Any = None
    created: Optional[datetime] = None

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "Comment":
        """Build from an element of the ``comments`` array."""
        return cls(
            author=_name(raw.get("author"), "displayName") or "Unknown",
            body=raw.get("body"),
            created=parse_jira_datetime(raw.get("created")),
        )


@dataclass(frozen=True)
class Transition:
    """Workflow transition available on an issue."""

    id: str
    name: str

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "Transition":
        """Build from an element of the ``transitions`` array."""
        return cls(id=str(raw.get("id", "")), name=str(raw.get("name", "")))


@dataclass(frozen=True)
class Sprint:
    """Agile sprint."""

    id: str
    name: str = ""
    state: str = ""
    goal: str = ""
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "Sprint":
        """Build from an element of the board ``sprint`` listing."""
        return cls(
            id=str(raw.get("id", "")),
            name=str(raw.get("name") or ""),
            state=str(raw.get("state") or ""),
            goal=str(raw.get("goal") or ""),
            start_date=parse_jira_datetime(raw.get("startDate")),
            end_date=parse_jira_datetime(raw.get("endDate")),
        )


@dataclass(frozen=True)
class BoardIssue:
    """Issue as listed on a sprint board."""

    key: str
    summary: str
    status: str
    assignee: Optional[str] = None

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "BoardIssue":
        """Build from an element of the sprint ``issues`` array."""
        fields_ = _fields(raw)
        return cls(
            key=str(raw.get("key", "")),
            summary=str(fields_.get("summary") or ""),
            status=_name(fields_.get("status")) or "Unknown",
            assignee=_name(fields_.get("assignee"), "displayName"),
        )


@dataclass
class Board:
    """Active sprint of a board with its issues grouped by status."""

    sprint: Sprint
    issues_by_status: dict[str, list[BoardIssue]] = field(default_factory=dict)

    def add_issue(self, issue: BoardIssue) -> None:
        """Append an issue to its status group."""
        self.issues_by_status.setdefault(issue.status, []).append(issue)
