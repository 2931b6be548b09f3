"""Builders for raw Jira JSON and a mock Jira transport used across the test suite."""

from typing import Any

import httpx

JIRA_URL = "https://example.atlassian.net"


def doc(*content: Any) -> dict:
    """Wrap raw nodes in a ``doc`` envelope."""
    return {"type": "doc", "version": 1, "content": list(content)}


def text(value: str, href: str | None = None) -> dict:
    """Build a raw text node, optionally carrying a link mark."""
    node: dict = {"type": "text", "text": value}
    if href is not None:
        node["marks"] = [{"type": "link", "attrs": {"href": href}}]
    return node


def paragraph(*content: Any) -> dict:
    return {"type": "paragraph", "content": list(content)}


def heading(level: int, *content: Any) -> dict:
    return {"type": "heading", "attrs": {"level": level}, "content": list(content)}


def list_item(*content: Any) -> dict:
    return {"type": "listItem", "content": list(content)}


def bullet_list(*items: Any) -> dict:
    return {"type": "bulletList", "content": list(items)}


def ordered_list(*items: Any, order: int | None = None) -> dict:
    node: dict = {"type": "orderedList", "content": list(items)}
    if order is not None:
        node["attrs"] = {"order": order}
    return node


def media(width: int | None = None, height: int | None = None) -> dict:
    attrs: dict = {"id": "abc", "type": "file", "collection": "uploads"}
    if width is not None:
        attrs["width"] = width
    if height is not None:
        attrs["height"] = height
    return {"type": "media", "attrs": attrs}


def issue_json(key: str = "ABC-1", description: Any = None, status: str = "To Do", assignee: str | None = None) -> dict:
    """Build a ``/rest/api/3/issue`` response."""
    return {
        "key": key,
        "fields": {
            "summary": "Fix the login page",
            "status": {"name": status},
            "assignee": {"displayName": assignee} if assignee else None,
            "issuetype": {"name": "Bug"},
            "description": description,
        },
    }


class Recorder:
    """Mock Jira transport routing requests by method and path.

    Routes map ``(method, path)`` to ``(status, json_body)`` or to a callable
    taking the request. Every request is remembered.
    """

    def __init__(self, routes):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"errorMessages": ["not found"]})
        if callable(route):
            return route(request)
        status, body = route
        return httpx.Response(status, json=body) if body is not None else httpx.Response(status)
