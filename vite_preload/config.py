"""Configuration constants for chunk collection and rendering.

These values are shared by the collector registry and the render layer.
"""

from __future__ import annotations

# Entrypoint of the client build, as keyed in Vite's manifest.json
DEFAULT_ENTRYPOINT: str = "index.html"
ENTRYPOINT_ENV_VAR: str = "VITE_PRELOAD_ENTRYPOINT"

# Render order by rel. Stylesheets come first so they load before the
# entry script that needs them.
REL_ORDER: dict[str, int] = {
    "stylesheet": 0,
    "module": 1,
    "modulepreload": 2,
    "preload": 3,
}

# File extension -> `as` destination for <link rel="preload">
# Extensions not listed here have no preload destination.
ASSET_DESTINATIONS: dict[str, str] = {
    # Images
    ".apng": "image",
    ".avif": "image",
    ".bmp": "image",
    ".gif": "image",
    ".ico": "image",
    ".jpeg": "image",
    ".jpg": "image",
    ".png": "image",
    ".svg": "image",
    ".webp": "image",
    # Fonts
    ".eot": "font",
    ".otf": "font",
    ".ttf": "font",
    ".woff": "font",
    ".woff2": "font",
    # Styles and scripts imported as assets
    ".css": "style",
    ".js": "script",
    ".mjs": "script",
    # Media
    ".mp3": "audio",
    ".ogg": "audio",
    ".wav": "audio",
    ".mp4": "video",
    ".webm": "video",
    ".vtt": "track",
    # Data
    ".json": "fetch",
    ".wasm": "fetch",
}

# Destinations that are always fetched in CORS mode and need `crossorigin`
# on the preload or the browser will fetch them twice.
CROSSORIGIN_DESTINATIONS: frozenset[str] = frozenset({"font", "fetch"})
