"""Turns collected chunks into preload directives.

script chunk  -> module (the entrypoint) or modulepreload
css           -> stylesheet
assets        -> preload
"""

from __future__ import annotations

from typing import Mapping

from vite_preload.models.manifest import ManifestChunk
from vite_preload.models.preload import Preload, Rel


def add_chunk_preloads(
    chunks: Mapping[str, ManifestChunk],
    preloads: dict[str, Preload],
    entrypoint: str,
) -> int:
    """Merge directives for collected chunks into the aggregate.

    Chunks whose file is already in `preloads` are skipped whole. Existing
    directives are never replaced, so the first chunk to reach an href
    decides its rel and entry flag.

    Args:
        chunks: Output of collect_chunks, with propagated entry flags.
        preloads: Aggregate keyed by href, mutated in place.
        entrypoint: Configured entrypoint module ID.

    Returns:
        Number of directives added.
    """
    before = len(preloads)

    for chunk in chunks.values():
        if chunk.file in preloads:
            continue

        comment = f"chunk: {chunk.name}, isEntry: {chunk.is_entry}"

        # Only the entrypoint is a <script type="module">
        rel = Rel.MODULE if chunk.src == entrypoint else Rel.MODULEPRELOAD
        preloads[chunk.file] = Preload(
            rel=rel,
            href=chunk.file,
            is_entry=chunk.is_entry,
            comment=comment,
        )

        # TODO: order CSS of sibling chunks by import depth, not discovery order
        for css_file in chunk.css:
            if css_file in preloads:
                continue
            preloads[css_file] = Preload(
                rel=Rel.STYLESHEET,
                href=css_file,
                is_entry=chunk.is_entry,
                comment=comment,
            )

        # Assets such as svg, png imports
        for asset in chunk.assets:
            preloads.setdefault(
                asset,
                Preload(
                    rel=Rel.PRELOAD,
                    href=asset,
                    is_entry=chunk.is_entry,
                    comment=f"Asset from chunk {chunk.name}: {chunk.file}",
                ),
            )

    return len(preloads) - before
