#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jiraterm/utils/debug.py
"""Diagnostic side channel for offline inspection of Jira payloads.

Raw JSON that could not be handled (or, in debug mode, every API response)
is written as pretty-printed JSON into a debug directory. Files are
write-only from this package's point of view; nothing reads them back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class DebugDumper:
    """Writes raw payloads onto disk for inspection.

    Parameters
    ----------
    directory : Path or None
        Target directory. When None, dumps are skipped and only logged.

    """

    def __init__(self, directory: Path | str | None) -> None:
        self.directory = Path(directory) if directory else None

    @property
    def enabled(self) -> bool:
        """Return True when a debug directory is configured."""
        return self.directory is not None

    def path_for(self, name: str) -> Path | None:
        """Return the path a dump called ``name`` is written to."""
        if self.directory is None:
            return None
        return self.directory / f".{name}"

    def dump(self, name: str, payload: Any) -> Path | None:
        """Persist ``payload`` as indented JSON under ``name``.

        Parameters
        ----------
        name : str
            File name; written as a dotfile inside the debug directory
        payload : Any
            JSON-compatible value (dataclasses are converted)

        Returns
        -------
        Path or None
            Path of the written file, or None when dumping is disabled or failed

        """
        target = self.path_for(name)
        if target is None:
            logger.debug("Debug directory not configured; skipping dump %s", name)
            return None

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(json.dumps(self._serialize(payload), indent=2, default=str), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not write debug dump %s: %s", target, e)
            return None

        logger.debug("Wrote debug dump %s", target)
        return target

    def _serialize(self, value: Any) -> Any:
        if is_dataclass(value) and not isinstance(value, type):
            return {k: self._serialize(v) for k, v in asdict(value).items()}
        if isinstance(value, dict):
            return {k: self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        return value
