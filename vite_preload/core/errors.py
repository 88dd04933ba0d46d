"""Error hierarchy for chunk collection.

Configuration errors surface at collector construction (or on the first
touched module when nothing can be traversed). Consistency errors mean the
manifest is stale relative to the code that reported the module IDs.
Nothing here is retryable: walking the same static graph again gives the
same answer.
"""

from __future__ import annotations


class PreloadError(Exception):
    """Base error for vite_preload.

    All package-specific errors inherit from this.
    """

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PreloadError):
    """The collector was set up with unusable inputs."""

    pass


class ManifestFormatError(ConfigurationError):
    """Manifest data could not be read into chunk records.

    Attributes:
        reason: Human-readable error description

    Retry: Never retryable - rebuild or fix the manifest.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid manifest: {reason}")


class MissingEntryError(ConfigurationError):
    """The configured entrypoint is not a key of the manifest.

    Attributes:
        entrypoint: The module ID that was looked up

    Retry: Never retryable - fix the entrypoint or rebuild with it.
    """

    def __init__(self, entrypoint: str) -> None:
        self.entrypoint = entrypoint
        super().__init__(f'Manifest does not contain key "{entrypoint}"')


class NotAnEntryError(ConfigurationError):
    """The configured entrypoint exists but is not flagged as an entry.

    Attributes:
        entrypoint: The module ID that was looked up

    Retry: Never retryable - point at a real build input.
    """

    def __init__(self, entrypoint: str) -> None:
        self.entrypoint = entrypoint
        super().__init__(f'Module "{entrypoint}" is not an entry module')


class MissingManifestError(ConfigurationError):
    """A module was reported but there is no manifest or dev graph to walk.

    Retry: Never retryable - set build.manifest to true in the vite config
    and pass the manifest to the collector.
    """

    def __init__(self) -> None:
        super().__init__(
            "No manifest.json provided. Set build.manifest to true in your vite config."
        )


# =============================================================================
# Consistency Errors
# =============================================================================


class ConsistencyError(PreloadError):
    """The module graph contradicts itself."""

    pass


class MissingChunkError(ConsistencyError):
    """An import edge points at a module with no chunk.

    Attributes:
        module_id: The imported module ID that could not be resolved

    Retry: Never retryable - the manifest is stale or corrupt.
    """

    def __init__(self, module_id: str) -> None:
        self.module_id = module_id
        super().__init__(f"Missing chunk '{module_id}'")
