"""HTML tag rendering for preload directives."""

from __future__ import annotations

from html import escape
from pathlib import PurePosixPath
from urllib.parse import urlsplit

from vite_preload.config import ASSET_DESTINATIONS, CROSSORIGIN_DESTINATIONS
from vite_preload.models.preload import Preload, Rel


def asset_destination(href: str) -> str | None:
    """Infer the `as` value for <link rel="preload"> from the file extension.

    Query string and fragment are ignored. Returns None for unknown types.
    """
    suffix = PurePosixPath(urlsplit(href).path).suffix.lower()
    return ASSET_DESTINATIONS.get(suffix)


def create_html_tag(preload: Preload, *, with_comment: bool = False) -> str:
    """Render one directive as an HTML tag.

    Args:
        preload: Directive to render.
        with_comment: Prefix the tag with its diagnostic comment.

    Returns:
        The tag, or "" for an asset whose preload destination is unknown.
    """
    href = escape(preload.href, quote=True)

    if preload.rel == Rel.MODULE:
        tag = f'<script type="module" crossorigin src="{href}"></script>'
    elif preload.rel == Rel.MODULEPRELOAD:
        tag = f'<link rel="modulepreload" crossorigin href="{href}">'
    elif preload.rel == Rel.STYLESHEET:
        tag = f'<link rel="stylesheet" crossorigin href="{href}">'
    else:
        destination = asset_destination(preload.href)
        if destination is None:
            return ""
        crossorigin = " crossorigin" if destination in CROSSORIGIN_DESTINATIONS else ""
        tag = f'<link rel="preload" as="{destination}"{crossorigin} href="{href}">'

    if with_comment and preload.comment:
        # "--" may not appear inside an HTML comment
        comment = preload.comment.replace("--", "- -")
        return f"<!-- {comment} -->\n{tag}"
    return tag
