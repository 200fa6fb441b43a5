"""Shared fixtures for the whole test suite."""

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_devcaps_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's DEVCAPS_* variables out of EnhancerSettings."""
    for name in list(os.environ):
        if name.upper().startswith("DEVCAPS_"):
            monkeypatch.delenv(name)
