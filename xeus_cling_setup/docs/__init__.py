"""Inline documentation support: Doxygen tag files paired with documentation URLs."""

from .fetch import TagFetcher
from .registry import DocumentationBundle, ResolvedTag, ResourceRegistry, normalize_url

__all__ = ["TagFetcher", "ResourceRegistry", "ResolvedTag", "DocumentationBundle", "normalize_url"]
