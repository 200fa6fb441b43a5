"""Tests for strict and permissive version parsing."""

import pytest

from devcaps.core.versions import ZERO, Version, extract_version, parse_version


class TestParseVersion:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("7.0", Version(7, 0)),
            ("7.0.3", Version(7, 0, 3)),
            ("1.2.3.4", Version(1, 2, 3, 4)),
            (" 2.0 ", Version(2, 0)),
            ("07.00", Version(7, 0)),
        ],
    )
    def test_valid(self, text: str, expected: Version) -> None:
        assert parse_version(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["7", "1.2.3.4.5", "a.b", "1..2", "-1.0", "1.0b", "", "99999999999.0", "1.x"],
    )
    def test_invalid(self, text: str) -> None:
        assert parse_version(text) is None

    def test_none(self) -> None:
        assert parse_version(None) is None


class TestVersion:
    def test_str_renders_present_components(self) -> None:
        assert str(Version(7, 0, 3)) == "7.0.3"
        assert str(Version(7, 0)) == "7.0"
        assert str(parse_version("07.00.010")) == "7.0.10"

    def test_format(self) -> None:
        v = Version(1, 0, 2)
        assert v.format(2) == "1.0"
        assert v.format(1) == "1"
        assert v.format(3) == "1.0.2"

    def test_format_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="count must be between"):
            Version(1, 0).format(3)

    def test_zero(self) -> None:
        assert ZERO.format(2) == "0.0"


class TestExtractVersion:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("abc12def7", ("12", "7")),
            ("Mozilla/5.0", ("5", "0")),
            ("v9", ("9", "0")),
            ("Safari", ("0", "0")),
            ("10_3_1", ("10", "3")),
            ("", ("0", "0")),
        ],
    )
    def test_digit_runs(self, text: str, expected: tuple[str, str]) -> None:
        assert extract_version(text) == expected

    def test_none(self) -> None:
        assert extract_version(None) == ("0", "0")
