"""Match result contracts consumed by the enhancer.

The detection engine is a black box; the enhancer only reads a match result
through :class:`MatchResult`.  :class:`StaticMatchResult` is an in-memory
implementation used by snapshot files, the CLI and tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from devcaps.core.strings import Handle, StringTable


@runtime_checkable
class MatchResult(Protocol):
    """Read-only view of the detected property values for one request."""

    def first_value(self, prop: Handle) -> Handle | None:
        """Return the first (preferred) value handle, or ``None``."""
        ...

    def all_values(self, prop: Handle) -> Sequence[Handle]:
        """Return every value handle for *prop* (possibly empty)."""
        ...


@runtime_checkable
class ScoredMatchResult(MatchResult, Protocol):
    """A match result that also exposes its scores and property list."""

    confidence: float
    difference: float

    def property_handles(self) -> Sequence[Handle]:
        """Return the handles of every property with at least one value."""
        ...


class StaticMatchResult:
    """:class:`ScoredMatchResult` backed by a plain mapping.

    Values are interned into *table* on construction; a single string value
    is treated as a one-element list.
    """

    def __init__(
        self,
        table: StringTable,
        properties: Mapping[str, str | Iterable[str]],
        *,
        confidence: float = 0.0,
        difference: float = 0.0,
    ) -> None:
        self.confidence = confidence
        self.difference = difference
        self._values: dict[Handle, tuple[Handle, ...]] = {}
        for name, raw in properties.items():
            values = (raw,) if isinstance(raw, str) else tuple(raw)
            if not values:
                continue
            self._values[table.intern(name)] = tuple(table.intern(v) for v in values)

    def first_value(self, prop: Handle) -> Handle | None:
        values = self._values.get(prop)
        return values[0] if values else None

    def all_values(self, prop: Handle) -> Sequence[Handle]:
        return self._values.get(prop, ())

    def property_handles(self) -> Sequence[Handle]:
        return tuple(self._values)
