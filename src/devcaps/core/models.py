"""Enhancer configuration and result models."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from devcaps.core.policy import DEFAULT_PROPERTY_VALUES
from devcaps.core.rendering import RenderingType


class EnhancerSettings(BaseSettings):
    """Configuration for a :class:`~devcaps.core.enhancer.CapabilityEnhancer`.

    Unset fields are read from ``DEVCAPS_*`` environment variables, e.g.
    ``DEVCAPS_OVERRIDE_BROWSER=false``.
    """

    model_config = SettingsConfigDict(env_prefix="DEVCAPS_")

    override_browser: bool = Field(
        default=True,
        description="Derive the 'browser' capability from the detected browser name.",
    )
    default_rendering_type: RenderingType = Field(
        default=RenderingType.HTML4,
        description="Rendering type used when no upstream layer chose one.",
    )
    default_rendering_mime: str = Field(
        default="text/html",
        description="MIME type paired with the default rendering type.",
    )
    default_values: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_PROPERTY_VALUES),
        description="Fallback values for screen geometry when nothing is known.",
    )


class Enhancement(BaseModel):
    """The outcome of enhancing one match result."""

    capabilities: dict[str, str]
    properties: dict[str, list[str]] = Field(default_factory=dict)
    confidence: float | None = None
    difference: str | None = None
    detection_time_ms: int = 1
