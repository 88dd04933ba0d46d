"""Recursive chunk collection over a module graph.

Follows https://vitejs.dev/guide/backend-integration: starting from one
module, walk its static imports and gather every chunk the browser will
need to render it. Dynamic imports are lazy boundaries and are skipped.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from vite_preload.core.errors import MissingChunkError
from vite_preload.models.manifest import ManifestChunk

ChunkLookup = Callable[[str], "ManifestChunk | None"]


def collect_chunks(
    lookup: ChunkLookup,
    module_id: str,
    chunks: dict[str, ManifestChunk] | None = None,
    is_entry: bool = False,
    *,
    chunk: ManifestChunk | None = None,
) -> dict[str, ManifestChunk]:
    """Collect every chunk statically reachable from a module.

    Each recorded chunk is a copy whose `is_entry` is true if it, or any
    chunk on the path that first reached it, is an entry chunk. Modules
    already in `chunks` are not walked again, which covers both shared
    imports and import cycles.

    Args:
        lookup: Resolves a module ID to its chunk, or None if unknown.
        module_id: Module to start from. Must resolve.
        chunks: Visited mapping for the current traversal.
        is_entry: Entry flag inherited from the importing chunk.
        chunk: Chunk of `module_id` if the caller already resolved it.

    Returns:
        The visited mapping, in depth-first discovery order.

    Raises:
        MissingChunkError: If `module_id` or any import does not resolve.
    """
    if chunks is None:
        chunks = {}

    if chunk is None:
        chunk = lookup(module_id)
    if chunk is None:
        raise MissingChunkError(module_id)

    if module_id in chunks:
        return chunks

    reached_via_entry = is_entry or chunk.is_entry
    chunks[module_id] = replace(chunk, is_entry=reached_via_entry)

    for imported in chunk.imports:
        collect_chunks(lookup, imported, chunks, reached_via_entry)

    return chunks
