"""Rendering types and tag-writer selection."""

from __future__ import annotations

from enum import Enum


class RenderingType(str, Enum):
    """Markup flavours a downstream renderer can target."""

    HTML4 = "html4"
    HTML32 = "html32"
    XHTML_MP = "xhtml-mp"
    XHTML_BASIC = "xhtml-basic"
    CHTML10 = "chtml10"


class TagWriter(str, Enum):
    """Logical identifiers of the text writers used to emit each markup flavour.

    These are bare class names without any framework namespace; consumers
    that need a fully qualified type name map them themselves.
    """

    XHTML = "XhtmlTextWriter"
    CHTML = "ChtmlTextWriter"
    HTML = "HtmlTextWriter"
    HTML32 = "Html32TextWriter"


_TAG_WRITERS: dict[RenderingType, TagWriter] = {
    RenderingType.XHTML_MP: TagWriter.XHTML,
    RenderingType.XHTML_BASIC: TagWriter.XHTML,
    RenderingType.CHTML10: TagWriter.CHTML,
    RenderingType.HTML4: TagWriter.HTML,
    RenderingType.HTML32: TagWriter.HTML32,
}

DEFAULT_TAG_WRITER = TagWriter.HTML32


def select_tag_writer(rendering_type: str | None) -> TagWriter:
    """Return the writer for *rendering_type* by exact match.

    Absent or unrecognised values fall through to :data:`DEFAULT_TAG_WRITER`.
    """
    if rendering_type is None:
        return DEFAULT_TAG_WRITER
    try:
        return _TAG_WRITERS[RenderingType(rendering_type)]
    except ValueError:
        return DEFAULT_TAG_WRITER
