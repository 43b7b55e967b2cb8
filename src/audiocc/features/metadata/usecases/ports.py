"""Summary: Ports and records for reading embedded tags.
Why: Decouple metadata use cases from the concrete tag library."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class ProbedTags:
    """Raw embedded tag values as returned by a prober."""

    album: str = ""
    artist: str = ""
    title: str = ""
    track: str = ""
    disc: str = ""
    date: str = ""


@runtime_checkable
class ProberPort(Protocol):
    """Port for reading embedded tags from an audio file."""

    def get_data(self, path: Path) -> ProbedTags:
        """Return the file's tags; raise ``ProbeError`` if it cannot be parsed."""
        ...


__all__ = ["ProbedTags", "ProberPort"]
