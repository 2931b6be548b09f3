#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/client.py
"""Jira REST client.

A thin wrapper around :class:`httpx.Client` exposing the handful of Jira
Cloud endpoints the CLI needs. Every failure surfaces as
:class:`~jiraterm.exceptions.JiraApiError`; ambiguous or unknown status
transitions raise :class:`~jiraterm.exceptions.TransitionError`.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from jiraterm.config import JiraConfig
from jiraterm.constants import ACTIVE_SPRINT_STATE, MAX_SPRINT_PAGES, SPRINT_PAGE_SIZE
from jiraterm.exceptions import JiraApiError, TransitionError
from jiraterm.models import Board, BoardIssue, Comment, Issue, Sprint, Transition, User
from jiraterm.utils.debug import DebugDumper

logger = logging.getLogger(__name__)

_BODY_EXCERPT_LENGTH = 500


def match_transitions(transitions: list[Transition], name_or_id: str) -> list[Transition]:
    """Return transitions whose id equals, or whose name starts with, ``name_or_id``.

    Name matching is case-insensitive.
    """
    wanted = name_or_id.upper()
    return [t for t in transitions if t.id == name_or_id or t.name.upper().startswith(wanted)]


class JiraClient:
    """Client for the Jira Cloud REST API.

    Parameters
    ----------
    config : JiraConfig
        Site URL, credentials and timeout
    http_client : httpx.Client, optional
        Pre-configured client (tests pass one backed by ``httpx.MockTransport``).
        Its ``base_url`` must point at the Jira site.
    dumper : DebugDumper, optional
        Receives every decoded JSON response for offline inspection

    Examples
    --------
        >>> with JiraClient(load_config()) as client:
        ...     issue = client.get_issue("abc-123")

    """

    def __init__(
        self,
        config: JiraConfig,
        http_client: Optional[httpx.Client] = None,
        dumper: Optional[DebugDumper] = None,
    ) -> None:
        self.config = config
        self.dumper = dumper or DebugDumper(config.debug_dir)
        if http_client is None:
            headers = {"Accept": "application/json", **config.auth_headers()}
            http_client = httpx.Client(base_url=config.base_url, headers=headers, timeout=config.timeout)
        self._http = http_client

    def __enter__(self) -> "JiraClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def _request(
        self,
        method: str,
        path: str,
        expected: tuple[int, ...] = (200,),
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request and check its status code.

        Raises
        ------
        JiraApiError
            On transport failures or unexpected status codes

        """
        logger.debug("%s %s", method, path)
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise JiraApiError(f"Request to Jira failed: {method} {path}: {e}", url=path, original_error=e) from e

        if response.status_code not in expected:
            body = response.text[:_BODY_EXCERPT_LENGTH]
            logger.debug("Unexpected response body: %s", body)
            raise JiraApiError(
                f"Unexpected response from Jira ({response.status_code}) for {method} {path}: {body}",
                status_code=response.status_code,
                url=str(response.request.url),
            )
        return response

    def _get_json(self, path: str, dump_name: Optional[str] = None, **kwargs: Any) -> Any:
        response = self._request("GET", path, **kwargs)
        try:
            data = response.json()
        except ValueError as e:
            raise JiraApiError(
                f"Jira returned invalid JSON for GET {path}",
                status_code=response.status_code,
                url=path,
                original_error=e,
            ) from e
        if dump_name and self.dumper.enabled:
            self.dumper.dump(dump_name, data)
        return data

    def get_issue(self, key: str) -> Issue:
        """Fetch an issue by key (case-insensitive)."""
        data = self._get_json(f"/rest/api/3/issue/{key.upper()}", dump_name="issue.json")
        return Issue.from_json(data)

    def get_comments(self, key: str) -> list[Comment]:
        """Fetch the comments of an issue in the order Jira returns them."""
        data = self._get_json(f"/rest/api/3/issue/{key}/comment", dump_name=f"comments-{key}.json")
        return [Comment.from_json(raw) for raw in data.get("comments", [])]

    def get_myself(self) -> User:
        """Fetch the authenticated user."""
        return User.from_json(self._get_json("/rest/api/3/myself"))

    def list_transitions(self, key: str) -> list[Transition]:
        """List the workflow transitions currently available on an issue."""
        data = self._get_json(f"/rest/api/2/issue/{key}/transitions", dump_name=f"issueTransition-{key}.json")
        return [Transition.from_json(raw) for raw in data.get("transitions", [])]

    def apply_transition(self, key: str, name_or_id: str) -> Transition:
        """Move an issue through the transition matching ``name_or_id``.

        Parameters
        ----------
        key : str
            Issue key
        name_or_id : str
            Transition id, or a case-insensitive prefix of its name

        Returns
        -------
        Transition
            The transition that was applied

        Raises
        ------
        TransitionError
            If no transition, or more than one, matches
        JiraApiError
            If Jira rejects the transition

        """
        transitions = self.list_transitions(key)
        matches = match_transitions(transitions, name_or_id)

        if not matches:
            raise TransitionError(
                f"{name_or_id} does not match a valid transition.",
                requested=name_or_id,
                candidates=[t.name for t in transitions],
            )
        if len(matches) > 1:
            raise TransitionError(
                f"{name_or_id} matches too many transitions.",
                requested=name_or_id,
                candidates=[t.name for t in matches],
            )

        transition = matches[0]
        self._request(
            "POST",
            f"/rest/api/3/issue/{key}/transitions",
            expected=(204,),
            json={"transition": {"id": transition.id}},
        )
        logger.info("Applied transition %r to %s", transition.name, key)
        return transition

    def assign(self, key: str, account_id: Optional[str] = None) -> None:
        """Assign an issue to ``account_id``, or unassign it when None."""
        self._request(
            "PUT",
            f"/rest/api/3/issue/{key}/assignee",
            expected=(204,),
            json={"accountId": account_id},
        )
        logger.info("%s %s", "Assigned" if account_id else "Unassigned", key)

    def find_active_sprint(self, board_id: str, start_page: int = 1) -> Sprint:
        """Page through a board's sprints until the active one is found.

        Parameters
        ----------
        board_id : str
            Numeric board id
        start_page : int, default 1
            1-based sprint page to start scanning from. Boards with a long
            sprint history can skip straight to recent pages.

        Raises
        ------
        JiraApiError
            If the board has no active sprint

        """
        first = max(start_page, 1) - 1
        for page in range(first, first + MAX_SPRINT_PAGES):
            start_at = page * SPRINT_PAGE_SIZE
            data = self._get_json(
                f"/rest/agile/1.0/board/{board_id}/sprint",
                dump_name=f"sprints{start_at:04d}.json",
                params={"startAt": start_at, "maxResults": SPRINT_PAGE_SIZE},
            )
            values = data.get("values", [])
            for raw in values:
                if raw.get("state") == ACTIVE_SPRINT_STATE:
                    return Sprint.from_json(raw)

            if not values or data.get("isLast", True):
                break
            logger.info("Trying page %d of sprints.", page + 2)

        raise JiraApiError(f"Couldn't find active sprint for board {board_id}.")

    def get_board(self, board_id: str, start_page: int = 1) -> Board:
        """Fetch the active sprint of a board and its issues grouped by status."""
        sprint = self.find_active_sprint(board_id, start_page)
        data = self._get_json(
            f"/rest/agile/1.0/board/{board_id}/sprint/{sprint.id}/issue",
            dump_name="sprint-issues.json",
            params={"fields": "summary,assignee,status"},
        )
        board = Board(sprint=sprint)
        for raw in data.get("issues", []):
            board.add_issue(BoardIssue.from_json(raw))
        return board
