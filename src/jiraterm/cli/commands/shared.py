#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/jiraterm/cli/commands/shared.py
"""Helpers shared by the jiraterm command handlers."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from jiraterm.client import JiraClient
from jiraterm.config import JiraConfig
from jiraterm.models import Transition
from jiraterm.options import TerminalRendererOptions
from jiraterm.utils.debug import DebugDumper

logger = logging.getLogger(__name__)


def create_client(config: JiraConfig, dumper: Optional[DebugDumper] = None) -> JiraClient:
    """Create a Jira client for ``config``."""
    return JiraClient(config, dumper=dumper)


@dataclass
class CommandContext:
    """Everything a command handler needs besides its own arguments.

    Parameters
    ----------
    config : JiraConfig
        Resolved settings
    options : TerminalRendererOptions
        Rendering options (colour, rule width)
    client_factory : callable, optional
        Builds the Jira client; defaults to :func:`create_client`
    input_func : callable, optional
        Reads interactive answers; defaults to :func:`input`

    """

    config: JiraConfig
    options: TerminalRendererOptions
    client_factory: Optional[Callable[[JiraConfig, Optional[DebugDumper]], JiraClient]] = None
    input_func: Optional[Callable[[str], str]] = None

    @property
    def dumper(self) -> DebugDumper:
        """Return the diagnostic dumper for the configured debug directory."""
        return DebugDumper(self.config.debug_dir)

    def open_client(self) -> JiraClient:
        """Create a Jira client using the configured factory."""
        factory = self.client_factory or create_client
        return factory(self.config, self.dumper)

    def ask(self, prompt: str) -> str:
        """Read one interactive answer."""
        reader = self.input_func or input
        return reader(prompt)


def choose_and_apply_transition(client: JiraClient, key: str, context: CommandContext) -> Optional[Transition]:
    """List the available transitions and apply the one the user picks.

    The user may answer with the number shown or a name prefix; ``0`` or an
    empty answer cancels.

    Returns
    -------
    Transition or None
        The applied transition, or None when cancelled

    """
    transitions = client.list_transitions(key)
    print("0. Cancel")
    for number, transition in enumerate(transitions, start=1):
        print(f"{number}. {transition.name}")

    choice = context.ask("Choose a new status: ").strip()
    if choice in ("", "0"):
        logger.debug("Transition of %s cancelled", key)
        return None

    if choice.isdigit() and 1 <= int(choice) <= len(transitions):
        return client.apply_transition(key, transitions[int(choice) - 1].id)

    return client.apply_transition(key, choice)
