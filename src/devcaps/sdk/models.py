"""Pydantic models for the detection snapshot files read by ``devcaps enhance``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

from devcaps.core.match import StaticMatchResult
from devcaps.core.models import EnhancerSettings

if TYPE_CHECKING:
    from devcaps.core.strings import StringTable


class TelemetrySettings(BaseModel):
    """Tracing for the enhancement run (needs the ``otel`` extra)."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class DetectionSnapshot(BaseModel):
    """A recorded detection result plus the capabilities known before it.

    Without a ``settings`` block the enhancer settings come from the
    ``DEVCAPS_*`` environment; a ``settings`` block is taken as written.
    """

    properties: dict[str, list[str]] = Field(default_factory=dict)
    existing: dict[str, str | None] = Field(default_factory=dict)
    confidence: float = 0.0
    difference: float = 0.0
    settings: EnhancerSettings = Field(default_factory=EnhancerSettings)
    telemetry: TelemetrySettings | None = None

    @field_validator("properties", mode="before")
    @classmethod
    def _listify_values(cls, value: object) -> object:
        """Accept ``Name: value`` as shorthand for ``Name: [value]``.

        Scalars are spelled the way detection data spells them, so an
        unquoted YAML ``true`` becomes ``"True"``.
        """
        if not isinstance(value, dict):
            return value
        listed: dict[object, object] = {}
        for name, raw in value.items():
            if raw is None:
                listed[name] = []
            elif isinstance(raw, list):
                listed[name] = [_scalar_text(name, item) for item in raw]
            else:
                listed[name] = [_scalar_text(name, raw)]
        return listed

    @field_validator("existing", mode="before")
    @classmethod
    def _stringify_existing(cls, value: object) -> object:
        """Caller capabilities use lower-case booleans (``"true"``)."""
        if not isinstance(value, dict):
            return value
        return {
            name: raw if raw is None else _scalar_text(name, raw, lower_bool=True)
            for name, raw in value.items()
        }

    @field_validator("properties", mode="after")
    @classmethod
    def _drop_empty(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        return {name: values for name, values in value.items() if values}

    def to_match_result(self, table: StringTable) -> StaticMatchResult:
        """Intern the recorded properties into *table* as a match result."""
        return StaticMatchResult(
            table,
            self.properties,
            confidence=self.confidence,
            difference=self.difference,
        )


def _scalar_text(name: object, value: object, *, lower_bool: bool = False) -> object:
    # YAML reads 7.10 as 7.1, so the written spelling is already gone.
    if isinstance(value, float):
        msg = f"{name}: {value!r} must be quoted to keep its exact text"
        raise ValueError(msg)
    if isinstance(value, bool):
        text = str(value)
        return text.lower() if lower_bool else text
    if isinstance(value, int):
        return str(value)
    return value
