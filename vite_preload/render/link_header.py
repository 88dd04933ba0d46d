"""HTTP Link header rendering (RFC 8288) for preload directives."""

from __future__ import annotations

from typing import Iterable
from urllib.parse import quote

from vite_preload.config import CROSSORIGIN_DESTINATIONS
from vite_preload.models.preload import Preload, Rel
from vite_preload.render.tags import asset_destination

# Everything a URI reference may contain, plus "%" so existing escapes survive
_URI_SAFE = "/:@!$&'()*+,;=-._~%?#[]"


def _link_value(preload: Preload) -> str:
    target = f"<{quote(preload.href, safe=_URI_SAFE)}>"

    if preload.rel in (Rel.MODULE, Rel.MODULEPRELOAD):
        return f"{target}; rel=modulepreload; crossorigin"
    if preload.rel == Rel.STYLESHEET:
        return f"{target}; rel=preload; as=style"

    destination = asset_destination(preload.href)
    if destination is None:
        return f"{target}; rel=preload"
    if destination in CROSSORIGIN_DESTINATIONS:
        return f"{target}; rel=preload; as={destination}; crossorigin"
    return f"{target}; rel=preload; as={destination}"


def create_link_header(preloads: Iterable[Preload]) -> str:
    """Render directives as one `Link` header value, in the given order.

    Every directive gets a descriptor, entry chunks included.
    """
    return ", ".join(_link_value(p) for p in preloads)
