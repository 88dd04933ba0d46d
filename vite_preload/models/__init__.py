"""Manifest and preload data types."""

from vite_preload.models.manifest import (
    ManifestChunk,
    load_manifest,
    parse_manifest,
    validate_entry,
)
from vite_preload.models.preload import Preload, Rel

__all__ = [
    "ManifestChunk",
    "Preload",
    "Rel",
    "load_manifest",
    "parse_manifest",
    "validate_entry",
]
