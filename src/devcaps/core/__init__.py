"""Capability enhancement core — string handles, write policies, the enhancer."""

from devcaps.core.enhancer import CapabilityEnhancer
from devcaps.core.errors import EnhancerError, StringTableError, UnknownCapabilityError
from devcaps.core.match import MatchResult, ScoredMatchResult, StaticMatchResult
from devcaps.core.models import Enhancement, EnhancerSettings
from devcaps.core.policy import (
    DEFAULT_PROPERTY_VALUES,
    FIELD_POLICIES,
    ProfileWriter,
    WritePolicy,
    fields_by_policy,
)
from devcaps.core.properties import Property, PropertyIndex
from devcaps.core.rendering import RenderingType, TagWriter, select_tag_writer
from devcaps.core.strings import Handle, InternTable, StringTable
from devcaps.core.versions import Version, extract_version, parse_version

__all__ = [
    "DEFAULT_PROPERTY_VALUES",
    "FIELD_POLICIES",
    "CapabilityEnhancer",
    "Enhancement",
    "EnhancerError",
    "EnhancerSettings",
    "Handle",
    "InternTable",
    "MatchResult",
    "ProfileWriter",
    "Property",
    "PropertyIndex",
    "RenderingType",
    "ScoredMatchResult",
    "StaticMatchResult",
    "StringTable",
    "StringTableError",
    "TagWriter",
    "UnknownCapabilityError",
    "Version",
    "WritePolicy",
    "extract_version",
    "fields_by_policy",
    "parse_version",
    "select_tag_writer",
]
