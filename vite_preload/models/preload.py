"""Preload directive types: the unit of rendered output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Rel(str, Enum):
    """How a collected resource is delivered to the browser.

    Only the configured entrypoint is a <script type="module">; every other
    script chunk is hinted with <link rel="modulepreload">.
    """

    MODULE = "module"
    MODULEPRELOAD = "modulepreload"
    STYLESHEET = "stylesheet"
    PRELOAD = "preload"


@dataclass(frozen=True)
class Preload:
    """A resource plus relation type, keyed by href in the aggregate.

    Created once per href and never replaced: if several chunks reference
    the same file, the first classification wins.
    """

    rel: Rel
    href: str
    is_entry: bool = False
    comment: str = ""
