"""src/audiocc/features/metadata/adapters/mutagen_prober.py
What: ProberPort implementation reading embedded tags with mutagen.
Why: Keep the tag library behind a port so use cases stay testable."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import mutagen
from mutagen import MutagenError

from audiocc.features.metadata.usecases.ports import ProbedTags, ProberPort
from audiocc.platform.logging import logger
from audiocc.shared.errors import ProbeError

_TAG_KEYS: dict[str, str] = {
    "album": "album",
    "artist": "artist",
    "title": "title",
    "track": "tracknumber",
    "disc": "discnumber",
    "date": "date",
}

# Catalogued formats mutagen has no reader for; ffmpeg still decodes them.
_UNTAGGED_EXTENSIONS: frozenset[str] = frozenset({".shn"})


def _first(tags: Any, key: str) -> str:
    value = tags.get(key) if tags is not None else None
    if isinstance(value, list):
        return str(value[0]) if value else ""
    if value is None:
        return ""
    return str(value)


class MutagenProber(ProberPort):
    """Read tags through mutagen's easy interface."""

    def get_data(self, path: Path) -> ProbedTags:
        try:
            audio = mutagen.File(path, easy=True)
        except (MutagenError, OSError) as exc:
            logger.debug("mutagen failed on %s: %s", path, exc)
            raise ProbeError(path, f"cannot read tags ({exc})") from exc
        if audio is None:
            if path.suffix.lower() in _UNTAGGED_EXTENSIONS:
                logger.debug("No tag reader for %s, treating it as untagged", path)
                return ProbedTags()
            raise ProbeError(path, "unrecognized audio format")

        tags = audio.tags
        return ProbedTags(**{field: _first(tags, key) for field, key in _TAG_KEYS.items()})


__all__ = ["MutagenProber"]
