"""Live module graph for development mode.

A dev server has no manifest.json; it knows modules as it serves them.
LiveModuleGraph holds that knowledge as a directed import graph with the
same shape as the manifest, so the collector can walk either one.
"""

from __future__ import annotations

from typing import Iterable, Mapping

import networkx as nx

from vite_preload.models.manifest import ManifestChunk


class LiveModuleGraph:
    """Directed import graph of modules known to a running dev server.

    Nodes are module IDs with chunk attributes (file, src, name, is_entry,
    css, assets). Edges point from importer to imported module and carry a
    `dynamic` flag. A node that only appears as an edge target has no
    `file` and does not resolve to a chunk.
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._graph: nx.DiGraph = nx.DiGraph()

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, ManifestChunk]) -> LiveModuleGraph:
        """Build a graph equivalent to a parsed manifest.

        Args:
            manifest: Module ID to chunk mapping.

        Returns:
            A graph whose chunk views match the manifest records.
        """
        graph = cls()
        for module_id, chunk in manifest.items():
            graph.add_module(
                module_id,
                chunk.file,
                src=chunk.src,
                name=chunk.name,
                is_entry=chunk.is_entry,
                css=chunk.css,
                assets=chunk.assets,
            )
        for module_id, chunk in manifest.items():
            for imported in chunk.imports:
                graph.add_import(module_id, imported)
            for imported in chunk.dynamic_imports:
                graph.add_import(module_id, imported, dynamic=True)
        return graph

    def add_module(
        self,
        module_id: str,
        file: str,
        *,
        src: str | None = None,
        name: str | None = None,
        is_entry: bool = False,
        css: Iterable[str] = (),
        assets: Iterable[str] = (),
    ) -> None:
        """Register a module, replacing any attributes it already had.

        Existing import edges are kept.
        """
        self._graph.add_node(
            module_id,
            file=file,
            src=src,
            name=name,
            is_entry=is_entry,
            css=tuple(css),
            assets=tuple(assets),
        )

    def add_import(self, importer: str, imported: str, *, dynamic: bool = False) -> None:
        """Record that `importer` imports `imported`.

        The imported module does not have to be registered yet. Once any
        static import of the pair is recorded, the edge stays static.
        """
        if self._graph.has_edge(importer, imported):
            dynamic = dynamic and self._graph.edges[importer, imported]["dynamic"]
        self._graph.add_edge(importer, imported, dynamic=dynamic)

    def get(self, module_id: str) -> ManifestChunk | None:
        """Return the chunk view of a registered module, or None."""
        if module_id not in self._graph:
            return None

        attrs = self._graph.nodes[module_id]
        if "file" not in attrs:
            return None

        static: list[str] = []
        dynamic: list[str] = []
        for imported, edge in self._graph.adj[module_id].items():
            (dynamic if edge.get("dynamic") else static).append(imported)

        return ManifestChunk(
            file=attrs["file"],
            src=attrs.get("src"),
            name=attrs.get("name"),
            is_entry=bool(attrs.get("is_entry", False)),
            imports=tuple(static),
            dynamic_imports=tuple(dynamic),
            css=attrs.get("css", ()),
            assets=attrs.get("assets", ()),
        )

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._graph and "file" in self._graph.nodes[module_id]

    def __len__(self) -> int:
        return sum(1 for _, attrs in self._graph.nodes(data=True) if "file" in attrs)
