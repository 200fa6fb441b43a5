"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import devcaps

    assert devcaps.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from devcaps.cli import main

    assert callable(main)


def test_core_imports() -> None:
    from devcaps.core import (
        CapabilityEnhancer,
        EnhancerSettings,
        InternTable,
        StaticMatchResult,
        WritePolicy,
    )

    assert CapabilityEnhancer is not None
    assert EnhancerSettings is not None
    assert InternTable is not None
    assert StaticMatchResult is not None
    assert WritePolicy is not None


def test_lazy_import_from_devcaps() -> None:
    import devcaps

    assert devcaps.CapabilityEnhancer is not None
    assert devcaps.SnapshotLoader is not None


def test_end_to_end() -> None:
    from devcaps import CapabilityEnhancer, InternTable
    from devcaps.core import StaticMatchResult

    table = InternTable()
    enhancer = CapabilityEnhancer(table)
    profile = enhancer.transform(
        StaticMatchResult(table, {"BrowserVersion": "7.0.3"}),
        {"javascript": "true"},
    )
    assert profile["version"] == "7.0.3"
    assert profile["javascript"] == "true"
