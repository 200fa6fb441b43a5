"""String interning — the table the detection engine resolves values through.

Detection results never carry text directly.  Each property name and each
value is a :data:`Handle` into a shared table, so comparisons are integer
equality rather than string comparison.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NewType, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

Handle = NewType("Handle", int)


@runtime_checkable
class StringTable(Protocol):
    """Interning service owned by the detection engine."""

    def intern(self, text: str) -> Handle:
        """Return the handle for *text*, adding it if needed.  Idempotent."""
        ...

    def resolve(self, handle: Handle) -> str | None:
        """Return the text for *handle*, or ``None`` if it is unknown."""
        ...


class InternTable:
    """In-memory :class:`StringTable`.

    Handles are assigned densely from zero in insertion order.
    """

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._handles: dict[str, Handle] = {}
        self._strings: list[str] = []
        for text in initial:
            self.intern(text)

    def intern(self, text: str) -> Handle:
        handle = self._handles.get(text)
        if handle is None:
            handle = Handle(len(self._strings))
            self._handles[text] = handle
            self._strings.append(text)
        return handle

    def resolve(self, handle: Handle) -> str | None:
        if 0 <= handle < len(self._strings):
            return self._strings[handle]
        return None

    def lookup(self, text: str) -> Handle | None:
        """Return the handle for *text* without interning it."""
        return self._handles.get(text)

    def __len__(self) -> int:
        return len(self._strings)

    def __contains__(self, text: object) -> bool:
        return text in self._handles
