"""
Summary: Exception taxonomy shared by every audiocc layer.
Why: Let the orchestrator and CLI tell fatal, per-file and per-bundle failures apart.
"""

from __future__ import annotations

from pathlib import Path


class AudioccError(Exception):
    """Base class for all audiocc failures."""


class ConfigError(AudioccError):
    """Raised when configuration cannot be loaded or validated."""


class FatalSetupError(AudioccError):
    """Raised when the run cannot start, e.g. the root is not a directory."""


class PerFileError(AudioccError):
    """A failure confined to one file; the file is skipped."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path: Path = Path(path)
        self.reason: str = message


class ProbeError(PerFileError):
    """Embedded tags could not be read."""


class EncodeError(PerFileError):
    """The encoder failed or wrote an unusable file."""


class FileMoveError(PerFileError):
    """Replacing the original file with the encoded one failed."""


class CollisionResolutionError(AudioccError):
    """Raised when a bundle folder cannot be placed at its destination."""

    def __init__(self, source: Path, destination: Path, cause: Exception) -> None:
        super().__init__(f"Cannot move {source} to {destination}: {cause}")
        self.source: Path = source
        self.destination: Path = destination


class BundleInconsistencyError(AudioccError):
    """Raised when the files of one bundle resolve to different destinations."""

    def __init__(self, destinations: list[Path]) -> None:
        joined = ", ".join(str(path) for path in destinations)
        super().__init__(f"Bundle files disagree on destination: {joined}")
        self.destinations: list[Path] = destinations


__all__ = [
    "AudioccError",
    "BundleInconsistencyError",
    "CollisionResolutionError",
    "ConfigError",
    "EncodeError",
    "FatalSetupError",
    "FileMoveError",
    "PerFileError",
    "ProbeError",
]
