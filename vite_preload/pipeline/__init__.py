"""Collection pipeline: strategies and preload aggregation."""

from vite_preload.pipeline.aggregator import add_chunk_preloads
from vite_preload.pipeline.protocols import CollectionStrategy
from vite_preload.pipeline.strategies import LiveGraphStrategy, StaticManifestStrategy

__all__ = [
    "CollectionStrategy",
    "LiveGraphStrategy",
    "StaticManifestStrategy",
    "add_chunk_preloads",
]
