"""
Summary: Compute the canonical destination path for a reconciled record.
Why: Centralize the folder layout rules shared by dry runs and real writes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from audiocc.config.config import Config
from audiocc.shared.info import Info
from audiocc.shared.path_info import PathInfo


FLAC_FOLDER_SUFFIX: Final[str] = " - FLAC"
MP3_EXTENSION: Final[str] = ".mp3"
FLAC_EXTENSION: Final[str] = ".flac"


def _segment(value: str) -> str:
    return value.replace("/", "_").replace("\\", "_").strip()


class PathBuilder:
    """Build destination paths relative to the collection root."""

    def __init__(self, config: Config) -> None:
        self._config: Config = config

    def _rooted_by_artist(self, info: Info, location: PathInfo) -> bool:
        if self._config.collection:
            return True
        segments = location.segments
        return len(segments) >= 2 and segments[0] == info.artist and segments[1] == info.year

    def album_dir(self, info: Info, location: PathInfo) -> str:
        """Relative folder for ``info``; keeps the current folder name when no album is known."""

        parts: list[str] = []
        if self._rooted_by_artist(info, location):
            parts.extend([_segment(info.artist), info.year])
        album = info.to_album() or (location.segments[-1] if location.segments else "")
        parts.append(_segment(album))
        return "/".join(part for part in parts if part)

    def build(self, info: Info, location: PathInfo, ext: str) -> str:
        """Return the relative result path, file name and ``ext`` included.

        Collection mode, or a file already sitting under ``Artist/Year``,
        yields ``Artist/Year/Album/File``; otherwise ``Album/File``. FLAC
        results keep the `` - FLAC`` marker on their album folder.
        """

        album_dir = self.album_dir(info, location)
        if ext == FLAC_EXTENSION and album_dir and not album_dir.endswith(FLAC_FOLDER_SUFFIX):
            album_dir += FLAC_FOLDER_SUFFIX
        file_name = f"{info.to_file()}{ext}"
        return f"{album_dir}/{file_name}" if album_dir else file_name

    @staticmethod
    def target_extension(location: PathInfo) -> str:
        """FLAC inside a `` - FLAC`` folder stays FLAC; everything else becomes MP3."""

        if location.ext.lower() == FLAC_EXTENSION and location.dir.endswith(FLAC_FOLDER_SUFFIX):
            return FLAC_EXTENSION
        return MP3_EXTENSION

    @staticmethod
    def destination_dir(root: Path, result_path: str) -> Path:
        """Absolute folder a result path lands in."""

        return (root / result_path).parent


__all__ = ["FLAC_EXTENSION", "FLAC_FOLDER_SUFFIX", "MP3_EXTENSION", "PathBuilder"]
