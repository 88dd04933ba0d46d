"""Test manifest fixtures."""

from tests.fixtures.manifests.sample_manifests import (
    make_chunk_dict,
    make_cyclic_manifest,
    make_example_manifest,
    make_shop_manifest,
)

__all__ = [
    "make_chunk_dict",
    "make_cyclic_manifest",
    "make_example_manifest",
    "make_shop_manifest",
]
