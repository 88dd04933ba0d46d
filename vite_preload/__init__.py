"""Preload hints for server-rendered Vite applications.

Walks Vite's build manifest from the modules touched during a render and
produces <link>/<script> tags or a `Link` header for the chunks they need.
"""

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
from vite_preload.graph.live import LiveModuleGraph
from vite_preload.models.manifest import ManifestChunk, load_manifest, parse_manifest
from vite_preload.models.preload import Preload, Rel
from vite_preload.registry import ChunkCollector

__version__ = "0.1.0"

__all__ = [
    "ChunkCollector",
    "ConfigurationError",
    "ConsistencyError",
    "LiveModuleGraph",
    "ManifestChunk",
    "ManifestFormatError",
    "MissingChunkError",
    "MissingEntryError",
    "MissingManifestError",
    "NotAnEntryError",
    "Preload",
    "PreloadError",
    "Rel",
    "load_manifest",
    "parse_manifest",
]
