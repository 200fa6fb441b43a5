"""Shared fixtures for enhancer tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from devcaps.core.enhancer import CapabilityEnhancer
from devcaps.core.match import StaticMatchResult
from devcaps.core.strings import InternTable


@pytest.fixture
def table() -> InternTable:
    return InternTable()


@pytest.fixture
def enhancer(table: InternTable) -> CapabilityEnhancer:
    return CapabilityEnhancer(table)


@pytest.fixture
def detect(table: InternTable) -> Callable[..., StaticMatchResult]:
    """Build a match result from ``Property=value`` keyword arguments."""

    def _detect(**properties: str | Iterable[str]) -> StaticMatchResult:
        return StaticMatchResult(table, properties)

    return _detect
