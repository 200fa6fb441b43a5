"""Tests for DetectionSnapshot."""

import pytest
from pydantic import ValidationError

from devcaps.core.strings import InternTable
from devcaps.sdk.models import DetectionSnapshot, TelemetrySettings


class TestDetectionSnapshot:
    def test_minimal(self) -> None:
        snap = DetectionSnapshot.model_validate({})
        assert snap.properties == {}
        assert snap.existing == {}
        assert snap.settings.override_browser is True

    def test_scalar_property_becomes_list(self) -> None:
        snap = DetectionSnapshot.model_validate({"properties": {"PlatformName": "iOS"}})
        assert snap.properties == {"PlatformName": ["iOS"]}

    def test_yaml_scalars_stringified(self) -> None:
        snap = DetectionSnapshot.model_validate(
            {"properties": {"IsMobile": True, "BitsPerPixel": 24, "CcppAccept": ["image/png"]}}
        )
        assert snap.properties["IsMobile"] == ["True"]
        assert snap.properties["BitsPerPixel"] == ["24"]

    def test_existing_booleans_lower_case(self) -> None:
        snap = DetectionSnapshot.model_validate(
            {"existing": {"javascript": True, "screenPixelsHeight": 320, "version": None}}
        )
        assert snap.existing == {
            "javascript": "true",
            "screenPixelsHeight": "320",
            "version": None,
        }

    def test_empty_values_dropped(self) -> None:
        snap = DetectionSnapshot.model_validate(
            {"properties": {"Adapters": None, "CcppAccept": [], "IsMobile": "True"}}
        )
        assert snap.properties == {"IsMobile": ["True"]}

    def test_settings_block(self) -> None:
        snap = DetectionSnapshot.model_validate({"settings": {"override_browser": False}})
        assert snap.settings.override_browser is False

    def test_unquoted_float_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be quoted"):
            DetectionSnapshot.model_validate({"properties": {"BrowserVersion": 7.1}})

    def test_unquoted_float_in_existing_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be quoted"):
            DetectionSnapshot.model_validate({"existing": {"version": 7.1}})

    def test_quoted_version_kept_verbatim(self) -> None:
        snap = DetectionSnapshot.model_validate({"properties": {"BrowserVersion": "7.10"}})
        assert snap.properties == {"BrowserVersion": ["7.10"]}

    def test_telemetry_block(self) -> None:
        snap = DetectionSnapshot.model_validate(
            {"telemetry": {"enabled": True, "otlp_endpoint": "localhost:4317"}}
        )
        assert snap.telemetry is not None
        assert snap.telemetry.enabled is True
        assert snap.telemetry.otlp_endpoint == "localhost:4317"

    def test_telemetry_defaults(self) -> None:
        assert DetectionSnapshot.model_validate({}).telemetry is None
        assert TelemetrySettings().enabled is False

    def test_settings_default_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEVCAPS_OVERRIDE_BROWSER", "false")
        assert DetectionSnapshot.model_validate({}).settings.override_browser is False

    def test_invalid_properties(self) -> None:
        with pytest.raises(ValidationError):
            DetectionSnapshot.model_validate({"properties": ["not", "a", "mapping"]})

    def test_to_match_result(self) -> None:
        table = InternTable()
        snap = DetectionSnapshot.model_validate(
            {"properties": {"PlatformName": "iOS"}, "confidence": 0.75, "difference": 1.5}
        )
        result = snap.to_match_result(table)
        handle = result.first_value(table.intern("PlatformName"))
        assert handle is not None
        assert table.resolve(handle) == "iOS"
        assert result.confidence == 0.75
        assert result.difference == 1.5
