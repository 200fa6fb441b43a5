"""Version string parsing.

Two parsers with different tolerance:

* :func:`parse_version` is strict: ``major.minor[.build[.revision]]`` with
  non-negative integer components. It returns ``None`` on anything else.
* :func:`extract_version` is permissive. It takes the first two runs of
  digits found anywhere in the text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_DIGITS_RE = re.compile(r"[0-9]+")

# Components are bounded like a signed 32-bit integer.
_MAX_COMPONENT = 2**31 - 1


@dataclass(frozen=True)
class Version:
    """A parsed two to four component version."""

    major: int
    minor: int
    build: int | None = None
    revision: int | None = None

    @property
    def components(self) -> tuple[int, ...]:
        parts = [self.major, self.minor]
        if self.build is not None:
            parts.append(self.build)
            if self.revision is not None:
                parts.append(self.revision)
        return tuple(parts)

    def format(self, count: int) -> str:
        """Render the first *count* components (1 to the number present)."""
        parts = self.components
        if not 1 <= count <= len(parts):
            msg = f"count must be between 1 and {len(parts)}, got {count}"
            raise ValueError(msg)
        return ".".join(str(p) for p in parts[:count])

    def __str__(self) -> str:
        return ".".join(str(p) for p in self.components)


ZERO = Version(0, 0)


def parse_version(text: str | None) -> Version | None:
    """Strictly parse *text*, returning ``None`` if it is not a valid version."""
    if not text:
        return None
    pieces = text.strip().split(".")
    if not 2 <= len(pieces) <= 4:
        return None

    numbers: list[int] = []
    for piece in pieces:
        piece = piece.strip()
        if not _DIGITS_RE.fullmatch(piece):
            return None
        value = int(piece)
        if value > _MAX_COMPONENT:
            return None
        numbers.append(value)

    return Version(*numbers)


def extract_version(text: str | None) -> tuple[str, str]:
    """Return ``(major, minor)`` from the first two digit runs in *text*.

    Missing runs default to ``"0"``::

        >>> extract_version("abc12def7")
        ('12', '7')
        >>> extract_version("Safari")
        ('0', '0')
    """
    runs = _DIGITS_RE.findall(text or "")
    major = runs[0] if runs else "0"
    minor = runs[1] if len(runs) > 1 else "0"
    return major, minor
