"""ChunkCollector: per-request registry of preload directives.

Create one collector per render request. It seeds itself with the
entrypoint, then the rendering framework reports each module it used via
`collect_module_id`. After rendering, `get_tags` or `get_link_header`
produce the output.

    collector = ChunkCollector(manifest=manifest)
    render_app(on_module=collector.collect_module_id)
    head = collector.get_tags()
"""

from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Any, Mapping

from vite_preload.config import DEFAULT_ENTRYPOINT, ENTRYPOINT_ENV_VAR
from vite_preload.core.errors import MissingManifestError
from vite_preload.graph.live import LiveModuleGraph
from vite_preload.models.manifest import parse_manifest
from vite_preload.models.preload import Preload
from vite_preload.pipeline.protocols import CollectionStrategy
from vite_preload.pipeline.strategies import LiveGraphStrategy, StaticManifestStrategy
from vite_preload.render.link_header import create_link_header
from vite_preload.render.order import sort_preloads
from vite_preload.render.tags import create_html_tag

logger = logging.getLogger(__name__)


def _resolve_entrypoint(entrypoint: str | None) -> str:
    if entrypoint:
        return entrypoint
    return os.environ.get(ENTRYPOINT_ENV_VAR) or DEFAULT_ENTRYPOINT


class ChunkCollector:
    """Collects the chunks a rendered page needs and renders preload hints.

    The aggregate only grows: later modules add directives, never change
    earlier ones. Not shared across requests.
    """

    def __init__(
        self,
        manifest: Mapping[str, Any] | None = None,
        entrypoint: str | None = None,
        dev_graph: LiveModuleGraph | None = None,
    ) -> None:
        """Select a collection strategy and seed it with the entrypoint.

        Args:
            manifest: Vite's manifest.json, raw or parsed. NOT
                ssr-manifest.json, which lacks dynamic imports. Not used
                in dev.
            entrypoint: Client entry module ID. Defaults to the
                VITE_PRELOAD_ENTRYPOINT env var, then "index.html".
            dev_graph: Live module graph from a dev server. Takes
                precedence over `manifest` when both are given.

        Raises:
            ManifestFormatError: If `manifest` is malformed.
            MissingEntryError: If the entrypoint is not in the manifest.
            NotAnEntryError: If the entrypoint is not an entry module.
            MissingChunkError: If the entrypoint imports an unknown module.
        """
        self.entrypoint = _resolve_entrypoint(entrypoint)
        self.module_ids: set[str] = set()
        self._preloads: dict[str, Preload] = {}
        self._strategy: CollectionStrategy | None = None

        if dev_graph is not None:
            self._strategy = LiveGraphStrategy(dev_graph)
        elif manifest is not None:
            self._strategy = StaticManifestStrategy(parse_manifest(manifest))

        if self._strategy is None:
            logger.debug("no_manifest_or_dev_graph entrypoint=%s", self.entrypoint)
            return

        logger.debug(
            "selected_strategy strategy=%s entrypoint=%s",
            type(self._strategy).__name__,
            self.entrypoint,
        )
        self._strategy.validate(self.entrypoint)
        self._strategy.collect(self.entrypoint, self.entrypoint, self._preloads)

    def collect_module_id(self, module_id: str) -> None:
        """Record a module used during rendering and collect its chunks.

        Safe to call any number of times, in any order. Pass the bound
        method to the framework as its module callback.

        Raises:
            MissingManifestError: If there is no manifest or dev graph.
            MissingChunkError: If the module imports an unknown module.
        """
        self.module_ids.add(module_id)
        if self._strategy is None:
            raise MissingManifestError()
        self._strategy.collect(module_id, self.entrypoint, self._preloads)

    @property
    def preloads(self) -> Mapping[str, Preload]:
        """Read-only view of the aggregate, keyed by href."""
        return MappingProxyType(self._preloads)

    def get_sorted_preloads(self) -> list[Preload]:
        """Return all directives in presentation order."""
        return sort_preloads(self._preloads.values())

    def get_tags(self, include_entrypoint: bool = False, *, with_comments: bool = False) -> str:
        """Return HTML tags for preload hints and stylesheets.

        If `include_entrypoint` is set, the entry <script type="module">,
        its CSS and everything it imports are included. If not, it is
        assumed the Vite-generated template already has those tags.

        Args:
            include_entrypoint: Include entry-flagged directives.
            with_comments: Prefix each tag with its diagnostic comment.

        Returns:
            Newline-joined tags.
        """
        tags = (
            create_html_tag(p, with_comment=with_comments)
            for p in self.get_sorted_preloads()
            if include_entrypoint or not p.is_entry
        )
        return "\n".join(tag for tag in tags if tag)

    def get_link_header(self) -> str:
        """Return a `Link` header value with every chunk to preload, entries included."""
        return create_link_header(self.get_sorted_preloads())
