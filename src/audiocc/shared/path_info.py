# Where: audiocc.shared.path_info
# What: Read-only view of a catalogued file's location.
# Why: Workers and the orchestrator derive the same path parts from one helper.

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath


@dataclass(frozen=True, slots=True)
class PathInfo:
    """Location of a file relative to the collection root."""

    fullpath: Path
    fulldir: Path
    dir: str
    file: str
    ext: str

    @property
    def segments(self) -> list[str]:
        """Folder names between the root and the file, outermost first."""
        return [part for part in self.dir.split("/") if part]


def get_path_info(root: Path | str, relpath: str) -> PathInfo:
    """Build a ``PathInfo`` for ``relpath`` found under ``root``."""

    fullpath = Path(root) / relpath
    rel = PurePath(relpath)
    parent = rel.parent.as_posix()
    base = os.path.basename(relpath)
    stem, ext = os.path.splitext(base)
    return PathInfo(
        fullpath=fullpath,
        fulldir=fullpath.parent,
        dir="" if parent == "." else parent,
        file=stem,
        ext=ext,
    )


__all__ = ["PathInfo", "get_path_info"]
