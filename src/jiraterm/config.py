#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration discovery and loading for jiraterm.

Settings come from two places, highest priority first:

1. Environment variables (``JIRA_URL``, ``ATLASSIAN_USER``, ...)
2. A configuration file: the ``--config`` path, the ``JIRATERM_CONFIG``
   path, or the first ``.jiraterm.toml``/``.yaml``/``.yml``/``.json`` (or
   ``pyproject.toml`` with a ``[tool.jiraterm]`` table) found walking up
   from the working directory, then in the home directory.
"""

import base64
import json
import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from jiraterm.constants import (
    API_TOKEN_HELP_URL,
    CONFIG_FILENAMES,
    DEFAULT_HTTP_TIMEOUT,
    ENV_ATLASSIAN_API_TOKEN,
    ENV_ATLASSIAN_USER,
    ENV_CONFIG_PATH,
    ENV_CURRENT_TICKET_FILE,
    ENV_DEBUG_DIR,
    ENV_DEFAULT_ISSUE_PREFIX,
    ENV_JIRA_COOKIE,
    ENV_JIRA_URL,
    PYPROJECT_SECTION,
)
from jiraterm.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Config-file key -> environment variable overriding it
ENV_OVERRIDES = {
    "url": ENV_JIRA_URL,
    "user": ENV_ATLASSIAN_USER,
    "api_token": ENV_ATLASSIAN_API_TOKEN,
    "cookie": ENV_JIRA_COOKIE,
    "default_issue_prefix": ENV_DEFAULT_ISSUE_PREFIX,
    "debug_dir": ENV_DEBUG_DIR,
    "current_ticket_file": ENV_CURRENT_TICKET_FILE,
}


@dataclass(frozen=True)
class JiraConfig:
    """Resolved jiraterm settings.

    Parameters
    ----------
    url : str or None
        Base URL of the Jira site, e.g. ``https://example.atlassian.net``
    user : str or None
        Atlassian account e-mail for basic auth
    api_token : str or None
        Atlassian API token for basic auth
    cookie : str or None
        Raw session cookie, used when no API token is configured
    default_issue_prefix : str or None
        Project key prepended to purely numeric ticket arguments
    debug_dir : str or None
        Directory for diagnostic JSON dumps; dumps are skipped when unset
    current_ticket_file : str or None
        File holding the "current ticket" key
    timeout : float
        HTTP timeout in seconds

    """

    url: Optional[str] = None
    user: Optional[str] = None
    api_token: Optional[str] = None
    cookie: Optional[str] = None
    default_issue_prefix: Optional[str] = None
    debug_dir: Optional[str] = None
    current_ticket_file: Optional[str] = None
    timeout: float = DEFAULT_HTTP_TIMEOUT

    @property
    def base_url(self) -> str:
        """Return the Jira URL without a trailing slash.

        Raises
        ------
        ConfigurationError
            If no URL is configured

        """
        if not self.url:
            raise ConfigurationError(f"{ENV_JIRA_URL} not set.", setting=ENV_JIRA_URL)
        return self.url.rstrip("/")

    def auth_headers(self) -> Dict[str, str]:
        """Return the headers authenticating requests to Jira.

        Basic auth from user and API token takes precedence over a cookie.

        Raises
        ------
        ConfigurationError
            If neither credential form is configured

        """
        if self.user and self.api_token:
            token = base64.b64encode(f"{self.user}:{self.api_token}".encode("utf-8")).decode("ascii")
            return {"Authorization": f"Basic {token}"}
        if self.cookie:
            logger.info("Using Jira Cookie")
            return {"Cookie": self.cookie}
        raise ConfigurationError(
            f"{ENV_ATLASSIAN_USER} and/or {ENV_ATLASSIAN_API_TOKEN} not set. {API_TOKEN_HELP_URL}",
            setting=ENV_ATLASSIAN_API_TOKEN,
        )

    def browse_url(self, ticket: str) -> str:
        """Return the web URL of a ticket."""
        return f"{self.base_url}/browse/{ticket}"

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "JiraConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        kwargs: Dict[str, Any] = {k: v for k, v in values.items() if k in known and v not in (None, "")}
        if "timeout" in kwargs:
            try:
                kwargs["timeout"] = float(kwargs["timeout"])
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid timeout: {kwargs['timeout']!r}", setting="timeout") from e
        for key, value in kwargs.items():
            if key != "timeout":
                kwargs[key] = str(value)
        return cls(**kwargs)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.jiraterm]`` table from a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    ConfigurationError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading pyproject.toml {pyproject_path}: {e}", original_error=e) from e

    config = data.get("tool", {}).get(PYPROJECT_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` (default: cwd) to the filesystem root and
    returns the first dedicated config file, or ``pyproject.toml`` with a
    ``[tool.jiraterm]`` table.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigurationError:
                # Broken pyproject.toml files belong to someone else; keep looking
                pass

        parent = current.parent
        if parent == current:
            break

        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file in the parent chain, then the home directory."""
    config_in_parents = find_config_in_parents()
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigurationError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigurationError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Invalid config file {config_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading config file {config_path}: {e}", original_error=e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")
    return config


def load_config(explicit_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> JiraConfig:
    """Resolve the effective configuration.

    Parameters
    ----------
    explicit_path : str, optional
        Config file path from ``--config``
    environ : Mapping, optional
        Environment to read; defaults to ``os.environ``

    Returns
    -------
    JiraConfig
        Settings from the config file overridden by environment variables

    """
    env = os.environ if environ is None else environ

    file_values: Dict[str, Any] = {}
    config_path = explicit_path or env.get(ENV_CONFIG_PATH)
    if config_path:
        file_values = load_config_file(config_path)
    else:
        discovered = discover_config_file()
        if discovered:
            logger.debug("Using config file %s", discovered)
            file_values = load_config_file(discovered)

    merged = dict(file_values)
    for key, env_name in ENV_OVERRIDES.items():
        value = env.get(env_name)
        if value:
            merged[key] = value

    return JiraConfig.from_mapping(merged)
