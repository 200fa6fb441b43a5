"""Property index — handles for every name and literal the enhancer queries.

Built once per :class:`~devcaps.core.enhancer.CapabilityEnhancer` from the
detection engine's string table and read-only afterwards, so a single index
can serve concurrent ``transform`` calls.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from devcaps.core.errors import StringTableError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from devcaps.core.strings import Handle, StringTable


class Property(str, Enum):
    """Well-known detection property names."""

    AJAX_REQUEST_TYPE = "AjaxRequestType"
    JAVASCRIPT = "Javascript"
    JAVASCRIPT_VERSION = "JavascriptVersion"
    COOKIES_CAPABLE = "CookiesCapable"
    BROWSER_VERSION = "BrowserVersion"
    BROWSER_NAME = "BrowserName"
    PLATFORM_NAME = "PlatformName"
    ADAPTERS = "Adapters"
    SCREEN_PIXELS_HEIGHT = "ScreenPixelsHeight"
    SCREEN_PIXELS_WIDTH = "ScreenPixelsWidth"
    BITS_PER_PIXEL = "BitsPerPixel"
    HARDWARE_NAME = "HardwareName"
    HARDWARE_MODEL = "HardwareModel"
    HARDWARE_VENDOR = "HardwareVendor"
    HTML_VERSION = "HtmlVersion"
    XHTML_VERSION = "XHtmlVersion"
    IS_MOBILE = "IsMobile"
    IS_CRAWLER = "IsCrawler"
    TABLES_CAPABLE = "TablesCapable"
    CCPP_ACCEPT = "CcppAccept"


TRUE_LITERALS = ("True", "true")
FALSE_LITERALS = ("False", "false")
AJAX_NOT_SUPPORTED = "AjaxRequestTypeNotSupported"

# Recognised image MIME types, most preferred first.
IMAGE_MIME_TYPES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("image/png", ("image/png",)),
    ("image/jpeg", ("image/jpeg", "image/jpg")),
    ("image/gif", ("image/gif",)),
)


class PropertyIndex:
    """Immutable lookup from :class:`Property` names to string-table handles.

    Also holds the literal value handles used for handle-equality checks:
    the true/false literals, the Ajax "not supported" marker and the image
    MIME sets.  Use :meth:`build` to construct one from a table.
    """

    def __init__(
        self,
        properties: Mapping[str, Handle],
        *,
        true_literals: frozenset[Handle],
        false_literals: frozenset[Handle],
        ajax_not_supported: Handle,
        image_mimes: tuple[tuple[str, frozenset[Handle]], ...],
    ) -> None:
        self._properties = MappingProxyType(dict(properties))
        self.true_literals = true_literals
        self.false_literals = false_literals
        self.ajax_not_supported = ajax_not_supported
        self.image_mimes = image_mimes

    @classmethod
    def build(cls, table: StringTable) -> PropertyIndex:
        """Register every well-known name and literal in *table*.

        Raises:
            StringTableError: If *table* cannot intern strings.
        """
        try:
            properties = {prop.value: _intern(table, prop.value) for prop in Property}
            true_literals = _intern_all(table, TRUE_LITERALS)
            false_literals = _intern_all(table, FALSE_LITERALS)
            ajax_not_supported = _intern(table, AJAX_NOT_SUPPORTED)
            image_mimes = tuple(
                (mime, _intern_all(table, aliases)) for mime, aliases in IMAGE_MIME_TYPES
            )
        except StringTableError:
            raise
        except Exception as exc:
            raise StringTableError(str(exc) or type(exc).__name__) from exc

        return cls(
            properties,
            true_literals=true_literals,
            false_literals=false_literals,
            ajax_not_supported=ajax_not_supported,
            image_mimes=image_mimes,
        )

    def __getitem__(self, name: str) -> Handle:
        """Return the handle for a registered property name.

        Raises ``KeyError`` for names that were never registered.
        """
        if isinstance(name, Property):
            name = name.value
        return self._properties[name]

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Property):
            name = name.value
        return name in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def is_true(self, handle: Handle | None) -> bool:
        return handle is not None and handle in self.true_literals

    def is_false(self, handle: Handle | None) -> bool:
        return handle is not None and handle in self.false_literals


def _intern(table: StringTable, text: str) -> Handle:
    handle = table.intern(text)
    if not isinstance(handle, int) or isinstance(handle, bool):
        msg = f"intern({text!r}) returned {type(handle).__name__}, expected int"
        raise StringTableError(msg)
    return handle


def _intern_all(table: StringTable, texts: Iterable[str]) -> frozenset[Handle]:
    return frozenset(_intern(table, text) for text in texts)
