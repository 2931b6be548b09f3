#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/cli/builder.py
"""Top-level argument parser and exit codes for the jiraterm CLI."""

import argparse

from jiraterm.exceptions import (
    ConfigurationError,
    JiraApiError,
    TicketResolutionError,
    TransitionError,
    ValidationError,
)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_API_ERROR = 4
EXIT_TICKET_ERROR = 5
EXIT_TRANSITION_ERROR = 6


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ConfigurationError):
        return EXIT_CONFIG_ERROR

    # Includes InvalidEnvelopeError
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, JiraApiError):
        return EXIT_API_ERROR

    if isinstance(exception, TicketResolutionError):
        return EXIT_TICKET_ERROR

    if isinstance(exception, TransitionError):
        return EXIT_TRANSITION_ERROR

    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the global argument parser.

    Everything after the command name is handed to the command's own parser.
    """
    parser = argparse.ArgumentParser(
        prog="jiraterm",
        description="Show Jira issues and boards in the terminal and update their status.",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message and exit")
    parser.add_argument("--config", type=str, help="Path to a configuration file (TOML, YAML or JSON)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")
    parser.add_argument("--no-colour", "--no-color", dest="no_colour", action="store_true", help="Disable ANSI colours")
    parser.add_argument("command", nargs="?", help="Command to run (see 'jiraterm help')")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the command")
    return parser
