"""Tests for EnhancerSettings and Enhancement."""

import pytest
from pydantic import ValidationError

from devcaps.core.models import Enhancement, EnhancerSettings
from devcaps.core.policy import DEFAULT_PROPERTY_VALUES
from devcaps.core.rendering import RenderingType


class TestEnhancerSettings:
    def test_defaults(self) -> None:
        s = EnhancerSettings()
        assert s.override_browser is True
        assert s.default_rendering_type is RenderingType.HTML4
        assert s.default_rendering_mime == "text/html"
        assert s.default_values == dict(DEFAULT_PROPERTY_VALUES)

    def test_default_values_not_shared(self) -> None:
        a = EnhancerSettings()
        a.default_values["screenPixelsHeight"] = "1"
        assert EnhancerSettings().default_values["screenPixelsHeight"] == "480"

    def test_rendering_type_from_string(self) -> None:
        s = EnhancerSettings(default_rendering_type="xhtml-mp")  # type: ignore[arg-type]
        assert s.default_rendering_type is RenderingType.XHTML_MP

    def test_invalid_rendering_type(self) -> None:
        with pytest.raises(ValidationError):
            EnhancerSettings(default_rendering_type="html5")  # type: ignore[arg-type]


class TestEnvironment:
    def test_empty_environment(self) -> None:
        s = EnhancerSettings()
        assert s.override_browser is True
        assert s.default_rendering_type is RenderingType.HTML4

    @pytest.mark.parametrize("value", ["false", "0", "no", "OFF", "False"])
    def test_disable_browser_override(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("DEVCAPS_OVERRIDE_BROWSER", value)
        assert EnhancerSettings().override_browser is False

    def test_enable_browser_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVCAPS_OVERRIDE_BROWSER", "yes")
        assert EnhancerSettings().override_browser is True

    def test_invalid_boolean_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVCAPS_OVERRIDE_BROWSER", "nein")
        with pytest.raises(ValidationError):
            EnhancerSettings()

    def test_rendering_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVCAPS_DEFAULT_RENDERING_TYPE", "chtml10")
        monkeypatch.setenv("DEVCAPS_DEFAULT_RENDERING_MIME", "text/plain")
        s = EnhancerSettings()
        assert s.default_rendering_type is RenderingType.CHTML10
        assert s.default_rendering_mime == "text/plain"

    def test_invalid_rendering_type_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVCAPS_DEFAULT_RENDERING_TYPE", "html5")
        with pytest.raises(ValidationError):
            EnhancerSettings()

    def test_keyword_beats_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVCAPS_OVERRIDE_BROWSER", "false")
        assert EnhancerSettings(override_browser=True).override_browser is True


class TestEnhancement:
    def test_defaults(self) -> None:
        e = Enhancement(capabilities={"cookies": "true"})
        assert e.properties == {}
        assert e.confidence is None
        assert e.difference is None
        assert e.detection_time_ms == 1

    def test_json_round_trip(self) -> None:
        e = Enhancement(
            capabilities={"cookies": "true"},
            properties={"IsMobile": ["True"]},
            confidence=0.5,
            difference="0.25",
            detection_time_ms=3,
        )
        assert Enhancement.model_validate_json(e.model_dump_json()) == e
