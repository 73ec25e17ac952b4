"""Data layer with strongly-typed pydantic models for session setup."""

from .manifest import KernelManifest, TagManifest, to_json, write_text_if_changed
from .options import SessionOptions
from .property import (
    DeferredValue,
    LiteralValue,
    ResolvedProperty,
    Resolver,
    flatten,
    parse_property,
    resolve_items,
)
from .request import SessionContext, SessionRequest
from .standard import DEFAULT_STANDARD, SUPPORTED_STANDARDS, CxxStandard, require_supported
from .target import TargetInfo, TargetKind, TargetRef

__all__ = [
    # Property values
    "LiteralValue",
    "DeferredValue",
    "ResolvedProperty",
    "Resolver",
    "parse_property",
    "flatten",
    "resolve_items",
    # Standards
    "CxxStandard",
    "SUPPORTED_STANDARDS",
    "DEFAULT_STANDARD",
    "require_supported",
    # Targets
    "TargetRef",
    "TargetKind",
    "TargetInfo",
    # Session
    "SessionOptions",
    "SessionContext",
    "SessionRequest",
    # Manifests
    "KernelManifest",
    "TagManifest",
    "to_json",
    "write_text_if_changed",
]
