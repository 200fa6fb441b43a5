"""CapabilityEnhancer — turns a detection match result into a capability profile.

The enhancer is a pure, synchronous transformation::

    (MatchResult, existing capabilities) -> dict[str, str]

Rules run in a fixed order because later rules read values written by
earlier ones (``type`` copies the manufacturer, the tag writer reads the
rendering type).  All writes go through a
:class:`~devcaps.core.policy.ProfileWriter` so each key's merge policy is
applied uniformly.
"""

from __future__ import annotations

import logging
import re
import time
from typing import TYPE_CHECKING, Any

from devcaps.core.errors import StringTableError
from devcaps.core.match import ScoredMatchResult
from devcaps.core.models import Enhancement, EnhancerSettings
from devcaps.core.policy import STATIC_CAPABILITIES, ProfileWriter
from devcaps.core.properties import Property, PropertyIndex
from devcaps.core.rendering import select_tag_writer
from devcaps.core.strings import StringTable
from devcaps.core.versions import ZERO, Version, extract_version, parse_version
from devcaps.utils.telemetry import (
    ATTR_BROWSER_OVERRIDE,
    ATTR_CAPABILITY_COUNT,
    ATTR_DETECTION_TIME_MS,
    ATTR_PROPERTY_COUNT,
    get_tracer,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from devcaps.core.match import MatchResult
    from devcaps.core.strings import Handle

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_TRUE = "true"
_FALSE = "false"

_DOM_VERSION_WITH_AJAX = Version(2, 0)


class CapabilityEnhancer:
    """Normalises detection results into a flat capability profile.

    Construction registers every property name and literal the rules need
    in *strings*; the resulting :class:`PropertyIndex` is read-only, so one
    enhancer can serve concurrent requests.

    Raises:
        StringTableError: If *strings* cannot intern the well-known names.
    """

    def __init__(
        self,
        strings: StringTable,
        settings: EnhancerSettings | None = None,
    ) -> None:
        if not isinstance(strings, StringTable):
            msg = f"{type(strings).__name__} does not provide intern() and resolve()"
            raise StringTableError(msg)
        self._strings = strings
        self._settings = settings or EnhancerSettings()
        self._index = PropertyIndex.build(strings)

    @property
    def settings(self) -> EnhancerSettings:
        return self._settings

    @property
    def index(self) -> PropertyIndex:
        return self._index

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def transform(
        self,
        result: MatchResult,
        existing: Mapping[str, Any] | None = None,
    ) -> dict[str, str]:
        """Build the capability profile for *result*.

        *existing* holds the capabilities an upstream layer already
        established; it is read, never modified.
        """
        writer = ProfileWriter(existing)

        for key in STATIC_CAPABILITIES:
            writer.write(key, _TRUE)

        self._set_device(writer, result)
        self._set_screen(writer, result)
        writer.write("preferredImageMime", self._preferred_image_mime(result))
        self._set_version(writer, result)
        self._set_javascript(writer, result)

        writer.write(
            "w3cdomversion",
            self._w3c_dom_version(result, writer.existing("w3cdomversion")),
        )
        writer.write("cookies", self._cookie_support(result, writer.existing("cookies")))

        callback = _FALSE if self._ajax_not_supported(result) else _TRUE
        writer.write("supportsCallback", callback)
        writer.write("SupportsCallback", callback)

        self._set_rendering(writer)

        # Only present when an adapters patch file was loaded.
        writer.write("adapters", self._text(result, Property.ADAPTERS))

        writer.write(
            "tagwriter",
            select_tag_writer(writer.get("preferredRenderingType")).value,
        )
        return writer.profile

    def enhance(
        self,
        result: MatchResult,
        existing: Mapping[str, Any] | None = None,
    ) -> Enhancement:
        """Run :meth:`transform` and report detection details alongside it.

        Match results implementing :class:`ScoredMatchResult` also contribute
        the resolved property values, confidence and difference.
        """
        with _tracer.start_as_current_span("devcaps.enhance") as span:
            span.set_attribute(ATTR_BROWSER_OVERRIDE, self._settings.override_browser)

            start = time.perf_counter()
            capabilities = self.transform(result, existing)
            elapsed_ms = int((time.perf_counter() - start) * 1000) + 1

            span.set_attribute(ATTR_CAPABILITY_COUNT, len(capabilities))
            span.set_attribute(ATTR_DETECTION_TIME_MS, elapsed_ms)

            if not isinstance(result, ScoredMatchResult):
                return Enhancement(capabilities=capabilities, detection_time_ms=elapsed_ms)

            properties = self._resolve_properties(result)
            span.set_attribute(ATTR_PROPERTY_COUNT, len(properties))
            return Enhancement(
                capabilities=capabilities,
                properties=properties,
                confidence=result.confidence,
                difference=_format_difference(result.difference),
                detection_time_ms=elapsed_ms,
            )

    # ------------------------------------------------------------------
    # Rule groups
    # ------------------------------------------------------------------

    def _set_device(self, writer: ProfileWriter, result: MatchResult) -> None:
        is_mobile = _TRUE if self._index.is_true(self._first(result, Property.IS_MOBILE)) else _FALSE
        writer.write("isMobileDevice", is_mobile)
        writer.write("crawler", self._crawler(result))
        writer.write("mobileDeviceModel", self._device_model(result))
        writer.write("mobileDeviceManufacturer", self._text(result, Property.HARDWARE_VENDOR))
        writer.write("platform", self._text(result, Property.PLATFORM_NAME))
        if self._settings.override_browser:
            writer.write("browser", self._text(result, Property.BROWSER_NAME))
        writer.write("type", writer.get("mobileDeviceManufacturer"))
        writer.write("canInitiateVoiceCall", is_mobile)
        writer.write("jscriptversion", self._javascript_version(result))

    def _set_screen(self, writer: ProfileWriter, result: MatchResult) -> None:
        for key, prop in (
            ("screenPixelsHeight", Property.SCREEN_PIXELS_HEIGHT),
            ("screenPixelsWidth", Property.SCREEN_PIXELS_WIDTH),
        ):
            detected = self._screen_pixels(result, prop)
            writer.write(key, detected or self._default_value(writer, key))

        # Keeps consumers that read character geometry from failing.
        for key in ("screenCharactersHeight", "screenCharactersWidth"):
            writer.write(key, self._default_value(writer, key))

        bits_per_pixel = self._bits_per_pixel(result)
        writer.write("screenBitDepth", str(bits_per_pixel))
        writer.write("isColor", _TRUE if bits_per_pixel >= 4 else _FALSE)

    def _set_version(self, writer: ProfileWriter, result: MatchResult) -> None:
        version_string = self._text(result, Property.BROWSER_VERSION)

        if version_string:
            version = parse_version(version_string)
            if version is not None:
                writer.write("majorversion", str(version.major))
                writer.write("minorversion", f".{version.minor}")
                writer.write("version", str(version))
            else:
                logger.debug("Browser version %r is not strict, extracting digits", version_string)
                _fill_version(writer, version_string)
            return

        # Nothing detected: keep the caller's version, then make sure the
        # three keys are never left empty.
        for key in ("majorversion", "minorversion", "version"):
            writer.write(key, writer.existing(key))
        _fill_version(writer, writer.existing("version") or "0.0")

    def _set_javascript(self, writer: ProfileWriter, result: MatchResult) -> None:
        supported = self._javascript_support(result)
        if supported is None:
            logger.debug("No javascript signal, keeping existing javascript capabilities")
            value = ecmascript = None
        else:
            value = _TRUE if supported else _FALSE
            ecmascript = "3.0" if supported else "0.0"

        writer.write("javascript", value)
        writer.write("Javascript", value)
        writer.write("ecmascriptversion", ecmascript)

    def _set_rendering(self, writer: ProfileWriter) -> None:
        upstream = writer.upstream("preferredRenderingType")
        if upstream:
            logger.debug("Rendering type %r chosen upstream, not applying default", upstream)
            writer.write("preferredRenderingType", None)
            writer.carry("preferredRenderingMime")
            return

        writer.write("preferredRenderingType", self._settings.default_rendering_type.value)
        writer.write("preferredRenderingMime", self._settings.default_rendering_mime)

    # ------------------------------------------------------------------
    # Value derivations
    # ------------------------------------------------------------------

    def _crawler(self, result: MatchResult) -> str | None:
        """Tri-state: ``None`` unless the value is a recognised literal."""
        value = self._first(result, Property.IS_CRAWLER)
        if self._index.is_true(value):
            return _TRUE
        if self._index.is_false(value):
            return _FALSE
        return None

    def _device_model(self, result: MatchResult) -> str | None:
        return self._text(result, Property.HARDWARE_MODEL) or self._text(
            result, Property.HARDWARE_NAME
        )

    def _javascript_version(self, result: MatchResult) -> str | None:
        value = self._text(result, Property.JAVASCRIPT_VERSION)
        if parse_version(value) is None:
            return None
        return value

    def _javascript_support(self, result: MatchResult) -> bool | None:
        value = self._first(result, Property.JAVASCRIPT)
        if value is None:
            return None
        return self._index.is_true(value)

    def _screen_pixels(self, result: MatchResult, prop: Property) -> str | None:
        value = self._text(result, prop)
        number = _parse_int(value)
        if value is None or number is None or number < 0:
            return None
        return value.strip()

    def _bits_per_pixel(self, result: MatchResult) -> int:
        number = _parse_int(self._text(result, Property.BITS_PER_PIXEL))
        return 16 if number is None else number

    def _preferred_image_mime(self, result: MatchResult) -> str | None:
        accepted = set(result.all_values(self._index[Property.CCPP_ACCEPT]))
        if not accepted:
            return None
        for mime, handles in self._index.image_mimes:
            if not accepted.isdisjoint(handles):
                return mime
        return None

    def _ajax_not_supported(self, result: MatchResult) -> bool:
        values = result.all_values(self._index[Property.AJAX_REQUEST_TYPE])
        return self._index.ajax_not_supported in values

    def _w3c_dom_version(self, result: MatchResult, current: str | None) -> str:
        version = parse_version(current) or ZERO
        if not self._ajax_not_supported(result):
            version = _DOM_VERSION_WITH_AJAX
        return version.format(2)

    def _cookie_support(self, result: MatchResult, current: str | None) -> str:
        value = _parse_bool(self._text(result, Property.COOKIES_CAPABLE))
        if value is None:
            value = _parse_bool(current)
        return _TRUE if value else _FALSE

    def _default_value(self, writer: ProfileWriter, key: str) -> str | None:
        """The caller's non-empty value for *key*, else the configured default."""
        return writer.existing(key) or self._settings.default_values.get(key)

    def _resolve_properties(self, result: ScoredMatchResult) -> dict[str, list[str]]:
        properties: dict[str, list[str]] = {}
        for prop in result.property_handles():
            name = self._strings.resolve(prop)
            if name is None:
                continue
            values = [self._strings.resolve(v) for v in result.all_values(prop)]
            properties[name] = [v for v in values if v is not None]
        return dict(sorted(properties.items()))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _first(self, result: MatchResult, prop: Property) -> Handle | None:
        return result.first_value(self._index[prop])

    def _text(self, result: MatchResult, prop: Property) -> str | None:
        handle = self._first(result, prop)
        if handle is None:
            return None
        return self._strings.resolve(handle)


def _fill_version(writer: ProfileWriter, version_string: str) -> None:
    """Fill any still-empty version keys from the digits in *version_string*."""
    major, minor = extract_version(version_string)
    writer.write("majorversion", major)
    writer.write("minorversion", minor)
    writer.write("version", f"{major}.{minor}")


def _parse_int(text: str | None) -> int | None:
    if text is None:
        return None
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def _parse_bool(text: str | None) -> bool | None:
    if text is None:
        return None
    lowered = text.strip().lower()
    if lowered == _TRUE:
        return True
    if lowered == _FALSE:
        return False
    return None


def _format_difference(difference: float) -> str:
    """Format with at most three decimals, trailing zeros dropped."""
    return f"{difference:.3f}".rstrip("0").rstrip(".") or "0"
