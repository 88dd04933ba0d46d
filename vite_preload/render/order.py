"""Deterministic presentation order for preload directives."""

from __future__ import annotations

from typing import Iterable

from vite_preload.config import REL_ORDER
from vite_preload.models.preload import Preload


def sort_preloads(preloads: Iterable[Preload]) -> list[Preload]:
    """Order directives by rel, keeping discovery order within each rel.

    stylesheet < module < modulepreload < preload. The sort is stable, so
    the input order (the aggregate's insertion order) breaks ties.
    """
    return sorted(preloads, key=lambda p: REL_ORDER[p.rel.value])
