"""Snapshot SDK — load recorded detection results and enhance them offline."""

from devcaps.sdk.errors import SnapshotValidationError
from devcaps.sdk.loader import SnapshotLoader
from devcaps.sdk.models import DetectionSnapshot

__all__ = [
    "DetectionSnapshot",
    "SnapshotLoader",
    "SnapshotValidationError",
]
