#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/tickets.py
"""Resolve which Jira ticket a command refers to.

Sources are tried in order: the explicit argument, the current-ticket file,
then the name of the checked-out git branch.
"""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path
from typing import Callable, Optional

from jiraterm.config import JiraConfig
from jiraterm.exceptions import TicketResolutionError

logger = logging.getLogger(__name__)

TICKET_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_]*-\d+")


def normalize_ticket_argument(argument: str, default_prefix: Optional[str] = None) -> str:
    """Expand a bare issue number with the default project prefix.

    Examples
    --------
        >>> normalize_ticket_argument("42", "ABC")
        'ABC-42'
        >>> normalize_ticket_argument("xyz-7", "ABC")
        'xyz-7'

    """
    argument = argument.strip()
    if argument.isdigit() and default_prefix:
        return f"{default_prefix}-{argument}"
    return argument


def read_current_ticket(path: Optional[str | Path]) -> Optional[str]:
    """Return the first non-empty line of the current-ticket file, if any."""
    if not path:
        return None
    try:
        content = Path(path).expanduser().read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as e:
        logger.warning("Could not read current ticket file %s: %s", path, e)
        return None

    for line in content.splitlines():
        if line.strip():
            return line.strip()
    return None


def get_current_branch(cwd: Optional[str | Path] = None) -> str:
    """Return the name of the checked-out git branch.

    Raises
    ------
    TicketResolutionError
        If git is unavailable or the directory is not a repository

    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise TicketResolutionError("Couldn't get Git branch name.", original_error=e) from e

    branch = result.stdout.strip()
    if result.returncode != 0 or not branch:
        logger.debug("git rev-parse failed: %s", result.stderr.strip())
        raise TicketResolutionError("Couldn't get Git branch name.")
    return branch


def ticket_from_branch(branch: str) -> str:
    """Extract a ticket key from a branch name such as ``feature/ABC-123-fix-login``.

    Raises
    ------
    TicketResolutionError
        If no ``/``-separated segment contains a ticket key

    """
    for segment in branch.split("/"):
        match = TICKET_PATTERN.search(segment)
        if match:
            return match.group(0).upper()
    raise TicketResolutionError(f"Can't figure out Jira ticket from branch name: {branch}")


def resolve_ticket(
    argument: Optional[str],
    config: JiraConfig,
    branch_reader: Callable[[], str] = get_current_branch,
) -> str:
    """Determine the ticket key a command should act on.

    Parameters
    ----------
    argument : str or None
        Ticket given on the command line
    config : JiraConfig
        Supplies the default prefix and the current-ticket file
    branch_reader : callable, default get_current_branch
        Returns the current branch name

    Returns
    -------
    str
        Ticket key

    Raises
    ------
    TicketResolutionError
        If no source yields a ticket

    """
    if argument:
        return normalize_ticket_argument(argument, config.default_issue_prefix)

    current = read_current_ticket(config.current_ticket_file)
    if current:
        logger.debug("Using current ticket %s from %s", current, config.current_ticket_file)
        return normalize_ticket_argument(current, config.default_issue_prefix)

    return ticket_from_branch(branch_reader())
