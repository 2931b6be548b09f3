#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the jiraterm package.

This module defines specialized exception classes for the error conditions
that can occur while resolving tickets, talking to Jira, and rendering
ticket descriptions.

Exception Hierarchy
-------------------
- JiraTermError (base exception)

  - ValidationError (invalid input data)
    - InvalidEnvelopeError (document root is not a Jira "doc")

  - ConfigurationError (missing or invalid settings)

  - JiraApiError (HTTP/transport failures talking to Jira)

  - TicketResolutionError (no ticket key could be determined)

  - TransitionError (status transition could not be matched)

"""

from typing import Any


class JiraTermError(Exception):
    """Base exception class for all jiraterm-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(JiraTermError):
    """Exception raised for invalid input data.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidEnvelopeError(ValidationError):
    """Exception raised when a rich-text description is not a ``doc`` envelope.

    The whole description is considered unparseable; no partial output is
    produced.

    Parameters
    ----------
    envelope_type : any
        The ``type`` value found at the root of the envelope
    debug_path : str, optional
        Location of the diagnostic dump written for the offending content
    message : str, optional
        Custom error message. Generated from the other arguments if omitted.

    Attributes
    ----------
    envelope_type : any
        The unexpected root type
    debug_path : str or None
        Where the raw content was dumped, if anywhere

    """

    def __init__(self, envelope_type: Any, debug_path: str | None = None, message: str | None = None):
        """Initialize with the unexpected root type and dump location."""
        if message is None:
            message = f"Unexpected Jira description type {envelope_type!r}."
            if debug_path:
                message += f" See {debug_path} for details."
        super().__init__(message, parameter_name="type", parameter_value=envelope_type)
        self.envelope_type = envelope_type
        self.debug_path = debug_path


class ConfigurationError(JiraTermError):
    """Exception raised when required configuration is missing or invalid.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    setting : str, optional
        Name of the offending setting or environment variable

    """

    def __init__(self, message: str, setting: str | None = None, original_error: Exception | None = None):
        """Initialize with the name of the offending setting."""
        super().__init__(message, original_error=original_error)
        self.setting = setting


class JiraApiError(JiraTermError):
    """Exception raised when a Jira REST call fails.

    Parameters
    ----------
    message : str
        Description of the failure
    status_code : int, optional
        HTTP status code of the response, if one was received
    url : str, optional
        The requested URL
    original_error : Exception, optional
        Underlying transport error

    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize with response details."""
        super().__init__(message, original_error=original_error)
        self.status_code = status_code
        self.url = url


class TicketResolutionError(JiraTermError):
    """Exception raised when no ticket key can be determined."""


class TransitionError(JiraTermError):
    """Exception raised when a requested status transition cannot be applied.

    Parameters
    ----------
    message : str
        Description of the problem
    requested : str
        The transition name or id that was asked for
    candidates : list of str, optional
        Names of the transitions that matched (or were available)

    """

    def __init__(self, message: str, requested: str, candidates: list[str] | None = None):
        """Initialize with the requested transition and matching candidates."""
        super().__init__(message)
        self.requested = requested
        self.candidates = candidates or []


__all__ = [
    "JiraTermError",
    "ValidationError",
    "InvalidEnvelopeError",
    "ConfigurationError",
    "JiraApiError",
    "TicketResolutionError",
    "TransitionError",
]
