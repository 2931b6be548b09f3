#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for jiraterm.

Constants are organized by category:
1. Rendering - Terminal renderer defaults
2. Jira API - Endpoints and paging
3. Configuration - Environment variables and config file names
"""

from __future__ import annotations

# =============================================================================
# Rendering
# =============================================================================

DEFAULT_TERMINAL_WIDTH = 80
DEFAULT_RULE_CHAR = "-"

NO_DESCRIPTION = "No description."

PICTURE_PLACEHOLDER = "\n\n_picture-goes-here_\n\n"
FILE_PLACEHOLDER = "\n\n_file-goes-here_\n\n"

BLOCK_SEPARATOR = "\n\n"
NESTED_LIST_INDENT = "  "
BULLET_MARKER = "- "

DESCRIPTION_DUMP_NAME = "description-to-markdown.json"

# =============================================================================
# Jira API
# =============================================================================

DEFAULT_HTTP_TIMEOUT = 30.0
SPRINT_PAGE_SIZE = 50
# Upper bound on sprint pages scanned for the active sprint
MAX_SPRINT_PAGES = 1000

ACTIVE_SPRINT_STATE = "active"

# Board status sort weights; unknown statuses sort last
STATUS_ORDER = {
    "In Progress": 10,
    "Review": 20,
    "Done": 30,
}
DEFAULT_STATUS_WEIGHT = 9999

ASSIGN_SELF_PAYLOADS = ("me",)
UNASSIGN_PAYLOADS = ("not-me", "no-one", "noone")

# =============================================================================
# Configuration
# =============================================================================

ENV_JIRA_URL = "JIRA_URL"
ENV_ATLASSIAN_USER = "ATLASSIAN_USER"
ENV_ATLASSIAN_API_TOKEN = "ATLASSIAN_API_TOKEN"
ENV_JIRA_COOKIE = "JIRA_COOKIE"
ENV_DEFAULT_ISSUE_PREFIX = "DEFAULT_ISSUE_PREFIX"
ENV_DEBUG_DIR = "JIRATERM_DEBUG_DIR"
ENV_CURRENT_TICKET_FILE = "JIRATERM_CURRENT_TICKET_FILE"
ENV_CONFIG_PATH = "JIRATERM_CONFIG"
# Set by tests to keep the CLI from launching a browser
ENV_NO_BROWSER = "JIRATERM_TEST_NO_BROWSER"

CONFIG_FILENAMES = [".jiraterm.toml", ".jiraterm.yaml", ".jiraterm.yml", ".jiraterm.json"]
PYPROJECT_SECTION = "jiraterm"

API_TOKEN_HELP_URL = "https://id.atlassian.com/manage-profile/security/api-tokens"
