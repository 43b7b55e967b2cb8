"""Summary: Ports for the encoder and artwork collaborators used during processing.
Why: Decouple the orchestrator from ffmpeg and filesystem image lookup."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from audiocc.shared.path_info import PathInfo

COPY_QUALITY: Final[str] = "copy"


@dataclass(frozen=True, slots=True)
class EncodeMetadata:
    """Tag values written into the encoded file."""

    artist: str = ""
    album: str = ""
    disc: str = ""
    track: str = ""
    title: str = ""
    artwork: Path | None = None


@dataclass(frozen=True, slots=True)
class EncodeRequest:
    """One encode job: ``quality`` is a bitrate string or ``"copy"``."""

    source: Path
    quality: str
    destination: Path
    metadata: EncodeMetadata
    fix: bool = False


@runtime_checkable
class EncoderPort(Protocol):
    """Port for re-encoding or stream-copying audio with new tags."""

    def encode(self, request: EncodeRequest) -> Path:
        """Write ``request.destination`` and return the written path."""
        ...


@runtime_checkable
class ArtworkPort(Protocol):
    """Port for locating the artwork of a bundle folder."""

    def process(self, location: PathInfo) -> Path | None:
        """Return an image path for the folder of ``location``, if any."""
        ...


__all__ = [
    "COPY_QUALITY",
    "ArtworkPort",
    "EncodeMetadata",
    "EncodeRequest",
    "EncoderPort",
]
