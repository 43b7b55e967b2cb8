"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from audiocc.shared.errors import FatalSetupError

AUDIO_EXTENSIONS: frozenset[str] = frozenset({".flac", ".m4a", ".mp3", ".mp4", ".shn", ".wav"})
IMAGE_EXTENSIONS: frozenset[str] = frozenset({".jpeg", ".jpg", ".png"})


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


def check_dir(directory: Path) -> Path:
    """Return ``directory`` if it is an existing folder.

    Raises:
        FatalSetupError: If the path is missing or not a directory.
    """

    if not directory.exists():
        raise FatalSetupError(f"Directory does not exist: {directory}")
    if not directory.is_dir():
        raise FatalSetupError(f"Not a directory: {directory}")
    return directory


def files_by_extension(root: Path, extensions: Iterable[str]) -> list[str]:
    """List files under ``root`` whose extension is in ``extensions``.

    Matching ignores case. Paths are relative to ``root``, ``/``-separated and
    sorted lexicographically, which keeps files of one folder adjacent.
    """

    wanted = {ext.lower() for ext in extensions}
    found: list[str] = []
    for current, _, names in os.walk(root):
        for name in names:
            if os.path.splitext(name)[1].lower() not in wanted:
                continue
            full = Path(current) / name
            found.append(full.relative_to(root).as_posix())
    return sorted(found)


def is_larger(a: Path | str, b: Path | str) -> bool:
    """Return True when file ``a`` is strictly larger than file ``b``.

    A missing file on either side yields False.
    """

    try:
        return os.path.getsize(a) > os.path.getsize(b)
    except OSError:
        return False


def nth_file_size(files: Sequence[Path | str], want_smallest: bool) -> tuple[int, int]:
    """Return ``(index, size)`` of the smallest or largest readable file.

    Unreadable files are ignored; ``(-1, 0)`` is returned when none is readable.
    """

    best_index = -1
    best_size = 0
    for index, candidate in enumerate(files):
        try:
            size = os.path.getsize(candidate)
        except OSError:
            continue
        if best_index == -1:
            best_index, best_size = index, size
        elif want_smallest and size < best_size:
            best_index, best_size = index, size
        elif not want_smallest and size > best_size:
            best_index, best_size = index, size
    return best_index, best_size


def find_available_path(target_path: Path) -> Path:
    """Find an available file path by appending a number if needed."""

    if not target_path.exists():
        return target_path

    parent = target_path.parent
    stem = target_path.stem
    extension = target_path.suffix
    counter = 1

    while True:
        candidate = parent / f"{stem} ({counter}){extension}"
        if not candidate.exists():
            return candidate
        counter += 1


__all__ = [
    "AUDIO_EXTENSIONS",
    "IMAGE_EXTENSIONS",
    "check_dir",
    "ensure_directory",
    "ensure_parent_directory",
    "files_by_extension",
    "find_available_path",
    "is_larger",
    "nth_file_size",
]
