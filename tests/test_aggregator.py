"""Tests for turning collected chunks into preload directives."""

from __future__ import annotations

from tests.fixtures.manifests import make_chunk_dict, make_shop_manifest
from vite_preload.graph.collector import collect_chunks
from vite_preload.models.manifest import parse_manifest
from vite_preload.models.preload import Preload, Rel
from vite_preload.pipeline.aggregator import add_chunk_preloads


def _aggregate(manifest_data: dict, *module_ids: str, entrypoint: str = "index.html") -> dict[str, Preload]:
    """Run collection + aggregation for each module into one aggregate."""
    manifest = parse_manifest(manifest_data)
    preloads: dict[str, Preload] = {}
    for module_id in module_ids:
        add_chunk_preloads(collect_chunks(manifest.get, module_id), preloads, entrypoint)
    return preloads


class TestClassification:
    """Tests for rel assignment."""

    def test_entrypoint_is_module(self) -> None:
        """The chunk whose src is the entrypoint is a module script."""
        preloads = _aggregate(make_shop_manifest(), "index.html")

        assert preloads["assets/index.js"].rel == Rel.MODULE
        assert preloads["assets/vendor.js"].rel == Rel.MODULEPRELOAD

    def test_other_entries_are_modulepreload(self) -> None:
        """Only the configured entrypoint gets rel=module."""
        preloads = _aggregate(make_shop_manifest(), "index.html", entrypoint="src/main.ts")
        assert preloads["assets/index.js"].rel == Rel.MODULEPRELOAD

    def test_css_and_assets(self) -> None:
        """CSS is stylesheet, assets are preload."""
        preloads = _aggregate(make_shop_manifest(), "src/pages/Cart.tsx")

        assert preloads["assets/Cart.css"].rel == Rel.STYLESHEET
        assert preloads["assets/shared.css"].rel == Rel.STYLESHEET
        assert preloads["assets/cart-icon.svg"].rel == Rel.PRELOAD

    def test_discovery_order(self) -> None:
        """Script, then its CSS, then its assets, chunk by chunk."""
        preloads = _aggregate(make_shop_manifest(), "src/pages/Cart.tsx")

        assert list(preloads) == [
            "assets/Cart.js",
            "assets/Cart.css",
            "assets/shared.css",
            "assets/cart-icon.svg",
            "assets/vendor.js",
            "assets/Button.js",
            "assets/Button.css",
        ]


class TestEntryFlags:
    """Tests for is_entry on directives."""

    def test_entry_chunk_css_is_entry(self) -> None:
        """Scripts and CSS reached from the entry are entry-flagged."""
        preloads = _aggregate(make_shop_manifest(), "index.html")

        assert preloads["assets/index.js"].is_entry is True
        assert preloads["assets/index.css"].is_entry is True
        assert preloads["assets/vendor.js"].is_entry is True

    def test_entry_chunk_assets_are_entry(self) -> None:
        """Assets of an entry chunk carry the entry flag."""
        manifest = {
            "index.html": make_chunk_dict(
                "index.js", src="index.html", is_entry=True, assets=["logo.png"]
            )
        }
        preloads = _aggregate(manifest, "index.html")
        assert preloads["logo.png"].is_entry is True

    def test_lazy_chunk_assets_not_entry(self) -> None:
        """Assets first reached from a lazy page are not entry-flagged."""
        preloads = _aggregate(make_shop_manifest(), "src/pages/Cart.tsx")
        assert preloads["assets/cart-icon.svg"].is_entry is False


class TestDeduplication:
    """Tests for href uniqueness and first-writer-wins."""

    def test_shared_css_and_assets_once(self) -> None:
        """Paths shared by several chunks appear once."""
        preloads = _aggregate(make_shop_manifest(), "src/pages/Cart.tsx", "src/pages/Product.tsx")

        hrefs = [p.href for p in preloads.values()]
        assert len(hrefs) == len(set(hrefs))
        assert hrefs.count("assets/shared.css") == 1
        assert hrefs.count("assets/cart-icon.svg") == 1

    def test_first_writer_wins(self) -> None:
        """An href first seen as an entry directive keeps that classification."""
        preloads = _aggregate(make_shop_manifest(), "index.html", "src/pages/Cart.tsx")

        vendor = preloads["assets/vendor.js"]
        assert vendor.is_entry is True
        assert vendor.comment == "chunk: vendor, isEntry: True"

    def test_first_writer_wins_reverse(self) -> None:
        """Seen first from a lazy page, the vendor chunk stays non-entry."""
        preloads = _aggregate(make_shop_manifest(), "src/pages/Cart.tsx", "index.html")
        assert preloads["assets/vendor.js"].is_entry is False

    def test_asset_does_not_replace_script(self) -> None:
        """An asset path equal to an existing script href is not overwritten."""
        manifest = {
            "a": make_chunk_dict("a.js", name="a"),
            "b": make_chunk_dict("b.js", name="b", assets=["a.js"]),
        }
        preloads = _aggregate(manifest, "a", "b")
        assert preloads["a.js"].rel == Rel.MODULEPRELOAD

    def test_returns_added_count(self) -> None:
        """The return value counts only new directives."""
        manifest = parse_manifest(make_shop_manifest())
        preloads: dict[str, Preload] = {}

        first = add_chunk_preloads(collect_chunks(manifest.get, "src/pages/Cart.tsx"), preloads, "index.html")
        second = add_chunk_preloads(collect_chunks(manifest.get, "src/pages/Product.tsx"), preloads, "index.html")
        again = add_chunk_preloads(collect_chunks(manifest.get, "src/pages/Product.tsx"), preloads, "index.html")

        assert first == 7
        assert second == 3
        assert again == 0


class TestComments:
    """Tests for diagnostic comments."""

    def test_chunk_comment(self) -> None:
        """Script and CSS directives name their chunk."""
        preloads = _aggregate(make_shop_manifest(), "src/pages/Cart.tsx")

        assert preloads["assets/Cart.js"].comment == "chunk: Cart, isEntry: False"
        assert preloads["assets/Cart.css"].comment == "chunk: Cart, isEntry: False"

    def test_asset_comment(self) -> None:
        """Asset directives name the chunk and file they came from."""
        preloads = _aggregate(make_shop_manifest(), "src/pages/Cart.tsx")
        assert preloads["assets/cart-icon.svg"].comment == "Asset from chunk Cart: assets/Cart.js"
