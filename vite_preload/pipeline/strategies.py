"""Collection strategies: static build manifest vs. live dev graph.

Both walk the same chunk shape with collect_chunks and merge the result
with add_chunk_preloads. They differ in where chunks come from and in how
strictly the entrypoint is checked up front.
"""

from __future__ import annotations

import logging
from typing import Mapping

from vite_preload.graph.collector import ChunkLookup, collect_chunks
from vite_preload.graph.live import LiveModuleGraph
from vite_preload.models.manifest import ManifestChunk, validate_entry
from vite_preload.models.preload import Preload
from vite_preload.pipeline.aggregator import add_chunk_preloads

logger = logging.getLogger(__name__)


def _collect_module(
    lookup: ChunkLookup,
    module_id: str,
    entrypoint: str,
    preloads: dict[str, Preload],
) -> dict[str, Preload]:
    # The reported module ID is not in its own chunk (e.g. inlined)
    root = lookup(module_id)
    if root is None:
        logger.debug("skipped_module_without_chunk module_id=%s", module_id)
        return preloads

    chunks = collect_chunks(lookup, module_id, chunk=root)
    added = add_chunk_preloads(chunks, preloads, entrypoint)
    logger.debug(
        "collected_module module_id=%s chunks=%d added=%d",
        module_id,
        len(chunks),
        added,
    )
    return preloads


class StaticManifestStrategy:
    """Collects from a production manifest.json.

    Implements the CollectionStrategy protocol from
    vite_preload.pipeline.protocols.
    """

    def __init__(self, manifest: Mapping[str, ManifestChunk]) -> None:
        self._manifest = manifest

    def validate(self, entrypoint: str) -> None:
        """Fail if the entrypoint is missing or not an entry chunk."""
        validate_entry(entrypoint, self._manifest)

    def collect(
        self,
        module_id: str,
        entrypoint: str,
        preloads: dict[str, Preload],
    ) -> dict[str, Preload]:
        """Add directives for `module_id` and everything it statically imports."""
        return _collect_module(self._manifest.get, module_id, entrypoint, preloads)


class LiveGraphStrategy:
    """Collects from a dev server's live module graph.

    The graph fills in as modules are served, so the entrypoint is only
    checked when it is already registered. An unregistered entrypoint
    seeds nothing.
    """

    def __init__(self, graph: LiveModuleGraph) -> None:
        self._graph = graph

    def validate(self, entrypoint: str) -> None:
        """Fail if the entrypoint is registered but not an entry module."""
        chunk = self._graph.get(entrypoint)
        if chunk is None:
            logger.debug("entrypoint_not_in_live_graph entrypoint=%s", entrypoint)
            return
        validate_entry(entrypoint, {entrypoint: chunk})

    def collect(
        self,
        module_id: str,
        entrypoint: str,
        preloads: dict[str, Preload],
    ) -> dict[str, Preload]:
        """Add directives for `module_id` from the live graph."""
        return _collect_module(self._graph.get, module_id, entrypoint, preloads)
