"""Shared error types."""

from vite_preload.core.errors import (
    ConfigurationError,
    ConsistencyError,
    ManifestFormatError,
    MissingChunkError,
    MissingEntryError,
    MissingManifestError,
    NotAnEntryError,
    PreloadError,
)

__all__ = [
    "ConfigurationError",
    "ConsistencyError",
    "ManifestFormatError",
    "MissingChunkError",
    "MissingEntryError",
    "MissingManifestError",
    "NotAnEntryError",
    "PreloadError",
]
