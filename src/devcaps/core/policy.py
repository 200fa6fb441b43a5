"""Write policies — how each capability key is merged into the profile.

Every key the enhancer can emit is registered in :data:`FIELD_POLICIES`
with exactly one :class:`WritePolicy`.  Rules never assign into the output
mapping directly; they go through :class:`ProfileWriter`, which applies the
key's policy.  Writing an unregistered key is a programming error.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from devcaps.core.errors import UnknownCapabilityError

if TYPE_CHECKING:
    from collections.abc import Mapping


class WritePolicy(str, Enum):
    """Merge rule applied when a capability value is written."""

    STICKY = "sticky"
    ALWAYS = "always"
    GUARDED = "guarded"
    UPSTREAM = "upstream"


STATIC_CAPABILITIES: tuple[str, ...] = (
    "requiresSpecialViewStateEncoding",
    "requiresUniqueFilePathSuffix",
    "requiresUniqueHtmlCheckboxNames",
    "requiresUniqueHtmlInputNames",
    "requiresUrlEncodedPostfieldValues",
    "requiresOutputOptimization",
    "requiresControlStateInSession",
)

# Used when neither detection nor the caller provides a value.
DEFAULT_PROPERTY_VALUES: Mapping[str, str] = MappingProxyType(
    {
        "screenPixelsHeight": "480",
        "screenPixelsWidth": "640",
        "screenCharactersHeight": "40",
        "screenCharactersWidth": "80",
    }
)

_STICKY = WritePolicy.STICKY
_ALWAYS = WritePolicy.ALWAYS
_GUARDED = WritePolicy.GUARDED
_UPSTREAM = WritePolicy.UPSTREAM

FIELD_POLICIES: Mapping[str, WritePolicy] = MappingProxyType(
    {
        **{key: _ALWAYS for key in STATIC_CAPABILITIES},
        # Device identity
        "isMobileDevice": _ALWAYS,
        "canInitiateVoiceCall": _ALWAYS,
        "crawler": _STICKY,
        "mobileDeviceModel": _STICKY,
        "mobileDeviceManufacturer": _STICKY,
        "type": _STICKY,
        "platform": _STICKY,
        "browser": _STICKY,
        "jscriptversion": _STICKY,
        # Screen
        "screenPixelsHeight": _STICKY,
        "screenPixelsWidth": _STICKY,
        "screenCharactersHeight": _STICKY,
        "screenCharactersWidth": _STICKY,
        "screenBitDepth": _ALWAYS,
        "isColor": _ALWAYS,
        "preferredImageMime": _STICKY,
        # Browser version
        "majorversion": _GUARDED,
        "minorversion": _GUARDED,
        "version": _GUARDED,
        # Scripting
        "javascript": _STICKY,
        "Javascript": _STICKY,
        "ecmascriptversion": _STICKY,
        "w3cdomversion": _ALWAYS,
        "cookies": _ALWAYS,
        "supportsCallback": _ALWAYS,
        "SupportsCallback": _ALWAYS,
        # Rendering
        "preferredRenderingType": _UPSTREAM,
        "preferredRenderingMime": _ALWAYS,
        "adapters": _STICKY,
        "tagwriter": _ALWAYS,
    }
)


def fields_by_policy(policy: WritePolicy) -> tuple[str, ...]:
    """Return every registered key governed by *policy*, in registration order."""
    return tuple(key for key, p in FIELD_POLICIES.items() if p is policy)


class ProfileWriter:
    """Accumulates one capability profile under the per-key write policies.

    * ``STICKY`` — a non-empty value is written; an empty one keeps the value
      already in the profile, or carries the caller's existing value.
    * ``ALWAYS`` — the value overwrites unconditionally.
    * ``GUARDED`` — the value only fills a key still empty in the profile.
    * ``UPSTREAM`` — a value already in the profile or in ``existing`` wins
      and is carried unchanged; the candidate only fills a gap.
    """

    def __init__(
        self,
        existing: Mapping[str, Any] | None = None,
        *,
        policies: Mapping[str, WritePolicy] = FIELD_POLICIES,
    ) -> None:
        self._existing: Mapping[str, Any] = existing if existing is not None else {}
        self._policies = policies
        self._profile: dict[str, str] = {}

    def policy_for(self, key: str) -> WritePolicy:
        try:
            return self._policies[key]
        except KeyError:
            raise UnknownCapabilityError(key) from None

    def existing(self, key: str) -> str | None:
        """Return the caller's value for *key* if it is a string."""
        value = self._existing.get(key)
        return value if isinstance(value, str) else None

    def get(self, key: str) -> str | None:
        """Return the value written so far for *key*."""
        return self._profile.get(key)

    def upstream(self, key: str) -> str | None:
        """Return the non-empty profile value, else the non-empty existing value."""
        return self._profile.get(key) or self.existing(key) or None

    def carry(self, key: str) -> None:
        """Copy the caller's non-empty value for *key* into the profile."""
        self.policy_for(key)
        value = self.existing(key)
        if value:
            self._profile[key] = value

    def write(self, key: str, value: str | None) -> None:
        """Merge *value* into the profile under the policy registered for *key*."""
        policy = self.policy_for(key)

        if policy is WritePolicy.ALWAYS:
            if value is not None:
                self._profile[key] = value
            return

        if policy is WritePolicy.STICKY:
            if value:
                self._profile[key] = value
            elif key not in self._profile:
                self.carry(key)
            return

        if policy is WritePolicy.GUARDED:
            if value and not self._profile.get(key):
                self._profile[key] = value
            return

        # UPSTREAM
        upstream = self.upstream(key)
        if upstream:
            self._profile[key] = upstream
        elif value:
            self._profile[key] = value

    @property
    def profile(self) -> dict[str, str]:
        """A copy of the profile built so far."""
        return dict(self._profile)
