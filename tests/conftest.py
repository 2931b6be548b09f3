"""Pytest configuration and shared fixtures for the jiraterm test suite.

This module provides the markers, configuration objects and mocked Jira
transport used across the test suite.
"""

import json
import logging
from pathlib import Path
from typing import Callable

import httpx
import pytest
from utils import JIRA_URL

from jiraterm.client import JiraClient
from jiraterm.config import JiraConfig
from jiraterm.constants import (
    ENV_ATLASSIAN_API_TOKEN,
    ENV_ATLASSIAN_USER,
    ENV_CONFIG_PATH,
    ENV_CURRENT_TICKET_FILE,
    ENV_DEBUG_DIR,
    ENV_DEFAULT_ISSUE_PREFIX,
    ENV_JIRA_COOKIE,
    ENV_JIRA_URL,
    ENV_NO_BROWSER,
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def jira_config(tmp_path: Path) -> JiraConfig:
    """Provide a fully configured JiraConfig with basic-auth credentials."""
    return JiraConfig(
        url=JIRA_URL,
        user="dev@example.com",
        api_token="secret",
        default_issue_prefix="ABC",
        current_ticket_file=str(tmp_path / "current-ticket"),
    )


@pytest.fixture
def make_client(jira_config: JiraConfig) -> Callable[..., JiraClient]:
    """Return a factory building a JiraClient backed by ``httpx.MockTransport``.

    The factory takes a request handler ``(httpx.Request) -> httpx.Response``.
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response], config: JiraConfig | None = None) -> JiraClient:
        http_client = httpx.Client(base_url=JIRA_URL, transport=httpx.MockTransport(handler))
        return JiraClient(config or jira_config, http_client=http_client)

    return factory


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate the CLI from the developer's environment and config files.

    Returns the temporary directory holding the (empty) config file.
    """
    for name in (ENV_JIRA_COOKIE, ENV_DEBUG_DIR):
        monkeypatch.delenv(name, raising=False)

    config_file = tmp_path / ".jiraterm.json"
    config_file.write_text(json.dumps({}))
    monkeypatch.setenv(ENV_CONFIG_PATH, str(config_file))
    monkeypatch.setenv(ENV_JIRA_URL, JIRA_URL)
    monkeypatch.setenv(ENV_ATLASSIAN_USER, "dev@example.com")
    monkeypatch.setenv(ENV_ATLASSIAN_API_TOKEN, "secret")
    monkeypatch.setenv(ENV_DEFAULT_ISSUE_PREFIX, "ABC")
    monkeypatch.setenv(ENV_CURRENT_TICKET_FILE, str(tmp_path / "current-ticket"))
    monkeypatch.setenv(ENV_NO_BROWSER, "1")
    monkeypatch.setenv("NO_COLOR", "1")
    return tmp_path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the handler changes ``configure_logging`` makes during CLI tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
