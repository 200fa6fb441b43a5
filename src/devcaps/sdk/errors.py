"""SDK error types."""

from __future__ import annotations


class SnapshotValidationError(Exception):
    """Raised when a detection snapshot file fails parsing or validation."""
