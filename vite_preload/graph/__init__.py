"""Module graph traversal."""

from vite_preload.graph.collector import ChunkLookup, collect_chunks
from vite_preload.graph.live import LiveModuleGraph

__all__ = [
    "ChunkLookup",
    "LiveModuleGraph",
    "collect_chunks",
]
