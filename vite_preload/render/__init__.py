"""Sorting and rendering of preload directives."""

from vite_preload.render.link_header import create_link_header
from vite_preload.render.order import sort_preloads
from vite_preload.render.tags import asset_destination, create_html_tag

__all__ = [
    "asset_destination",
    "create_html_tag",
    "create_link_header",
    "sort_preloads",
]
