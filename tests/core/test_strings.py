"""Tests for InternTable."""

from devcaps.core.strings import InternTable, StringTable


class TestInternTable:
    def test_intern_is_idempotent(self) -> None:
        table = InternTable()
        first = table.intern("Javascript")
        assert table.intern("Javascript") == first
        assert len(table) == 1

    def test_handles_are_distinct(self) -> None:
        table = InternTable()
        assert table.intern("True") != table.intern("true")

    def test_resolve_round_trip(self) -> None:
        table = InternTable()
        handle = table.intern("image/png")
        assert table.resolve(handle) == "image/png"

    def test_resolve_unknown_handle(self) -> None:
        table = InternTable(["a"])
        assert table.resolve(5) is None  # type: ignore[arg-type]
        assert table.resolve(-1) is None  # type: ignore[arg-type]

    def test_initial_strings(self) -> None:
        table = InternTable(["x", "y", "x"])
        assert len(table) == 2
        assert "y" in table
        assert table.lookup("x") == 0
        assert table.lookup("z") is None
        assert len(table) == 2

    def test_satisfies_protocol(self) -> None:
        assert isinstance(InternTable(), StringTable)
