"""Snapshot loading for offline enhancement runs."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from devcaps.sdk.errors import SnapshotValidationError
from devcaps.sdk.models import DetectionSnapshot

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class SnapshotLoader:
    """Load and validate a YAML or JSON snapshot into a :class:`DetectionSnapshot`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> DetectionSnapshot:
        """Read the file, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before parsing.  JSON is parsed by
        the YAML loader.

        Raises:
            SnapshotValidationError: On read, parse or schema validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SnapshotValidationError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise SnapshotValidationError(f"YAML parse error: {exc}") from exc

        if not isinstance(data, dict):
            raise SnapshotValidationError("Snapshot must be a mapping")

        try:
            snapshot = DetectionSnapshot.model_validate(data)
        except ValidationError as exc:
            raise SnapshotValidationError(str(exc)) from exc

        logger.debug(
            "Loaded snapshot %s: %d properties, %d existing capabilities",
            self._path,
            len(snapshot.properties),
            len(snapshot.existing),
        )
        return snapshot
