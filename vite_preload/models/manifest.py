"""Manifest chunk records read from Vite's build manifest.

The manifest maps a module ID (the source path relative to the Vite root,
or a synthetic key like "_vendor-abc123.js" for shared chunks) to the
compiled chunk that holds it:

    {
      "index.html": {
        "file": "assets/index-4e3a.js",
        "src": "index.html",
        "isEntry": true,
        "imports": ["_vendor-abc123.js"],
        "dynamicImports": ["src/pages/Settings.tsx"],
        "css": ["assets/index-9f2c.css"]
      },
      ...
    }

Records are immutable once parsed.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from vite_preload.core.errors import (
    ManifestFormatError,
    MissingEntryError,
    NotAnEntryError,
)

# Raw manifest key -> ManifestChunk field
_LIST_FIELDS: dict[str, str] = {
    "imports": "imports",
    "dynamicImports": "dynamic_imports",
    "css": "css",
    "assets": "assets",
}


@dataclass(frozen=True)
class ManifestChunk:
    """One compiled output unit of the client build.

    `dynamic_imports` is kept for inspection only. Dynamic imports are lazy
    boundaries and are never preloaded eagerly.
    """

    file: str
    src: str | None = None
    name: str | None = None
    is_entry: bool = False
    imports: tuple[str, ...] = ()
    dynamic_imports: tuple[str, ...] = ()
    css: tuple[str, ...] = ()
    assets: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any, key: str = "<chunk>") -> ManifestChunk:
        """Build a chunk from one raw manifest record.

        Args:
            data: Record as decoded from manifest.json.
            key: Manifest key of the record, used in error messages.

        Returns:
            The parsed ManifestChunk.

        Raises:
            ManifestFormatError: If the record is not a mapping, has no
                string `file`, or a list field holds non-strings.
        """
        if not isinstance(data, Mapping):
            raise ManifestFormatError(f"entry {key!r} is not an object")

        file = data.get("file")
        if not isinstance(file, str) or not file:
            raise ManifestFormatError(f"entry {key!r} has no 'file'")

        lists: dict[str, tuple[str, ...]] = {}
        for raw_key, field_name in _LIST_FIELDS.items():
            value = data.get(raw_key) or []
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ManifestFormatError(
                    f"entry {key!r} field {raw_key!r} must be a list of strings"
                )
            lists[field_name] = tuple(value)

        src = data.get("src")
        name = data.get("name")
        return cls(
            file=file,
            src=src if isinstance(src, str) else None,
            name=name if isinstance(name, str) else None,
            is_entry=bool(data.get("isEntry", False)),
            **lists,
        )


def parse_manifest(data: Any) -> dict[str, ManifestChunk]:
    """Convert a decoded manifest.json into chunk records.

    Values that are already ManifestChunk instances pass through, so a
    parsed manifest can be handed back in unchanged.

    Raises:
        ManifestFormatError: If the manifest or any record is malformed.
    """
    if not isinstance(data, Mapping):
        raise ManifestFormatError("manifest must be an object keyed by module ID")

    manifest: dict[str, ManifestChunk] = {}
    for key, record in data.items():
        if isinstance(record, ManifestChunk):
            manifest[key] = record
        else:
            manifest[key] = ManifestChunk.from_dict(record, key)
    return manifest


def load_manifest(path: str | Path) -> dict[str, ManifestChunk]:
    """Read and parse a manifest.json file.

    Args:
        path: Path to the manifest, usually dist/.vite/manifest.json.

    Raises:
        ManifestFormatError: If the file cannot be read or is not valid JSON.
    """
    manifest_path = Path(path)
    try:
        raw = json.loads(manifest_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestFormatError(f"cannot read {manifest_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestFormatError(f"{manifest_path} is not valid JSON: {e}") from e
    return parse_manifest(raw)


def validate_entry(entrypoint: str, manifest: Mapping[str, ManifestChunk]) -> None:
    """Check that the entrypoint is a key of the manifest and an entry chunk.

    Raises:
        MissingEntryError: The key is absent.
        NotAnEntryError: The chunk is not flagged isEntry.
    """
    chunk = manifest.get(entrypoint)
    if chunk is None:
        raise MissingEntryError(entrypoint)
    if not chunk.is_entry:
        raise NotAnEntryError(entrypoint)
