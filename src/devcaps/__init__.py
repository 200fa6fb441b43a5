"""devcaps — normalises device-detection results into capability profiles."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from devcaps.core.enhancer import CapabilityEnhancer as CapabilityEnhancer
    from devcaps.core.models import EnhancerSettings as EnhancerSettings
    from devcaps.core.strings import InternTable as InternTable
    from devcaps.sdk.loader import SnapshotLoader as SnapshotLoader

_EXPORTS = {
    "CapabilityEnhancer": "devcaps.core.enhancer",
    "EnhancerSettings": "devcaps.core.models",
    "InternTable": "devcaps.core.strings",
    "SnapshotLoader": "devcaps.sdk.loader",
}


def __getattr__(name: str) -> object:
    module_path = _EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'devcaps' has no attribute {name!r}")
