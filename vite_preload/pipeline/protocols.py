"""Collection strategy protocol (structural interface).

A strategy knows one kind of module graph and how to expand a touched
module into preload directives. No base classes, no inheritance.
"""

from __future__ import annotations

from typing import Protocol

from vite_preload.models.preload import Preload


class CollectionStrategy(Protocol):
    """Expands touched modules into preload directives."""

    def validate(self, entrypoint: str) -> None:
        """Raise a ConfigurationError if `entrypoint` cannot seed collection."""
        ...

    def collect(
        self,
        module_id: str,
        entrypoint: str,
        preloads: dict[str, Preload],
    ) -> dict[str, Preload]:
        """Add directives for `module_id` to `preloads` and return it."""
        ...
