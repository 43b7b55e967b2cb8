"""
Summary: Place a bundle folder at its destination without overwriting anything.
Why: Duplicate recordings must land side by side instead of replacing each other.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from audiocc.platform.filesystem import ensure_parent_directory
from audiocc.platform.logging import logger
from audiocc.shared.errors import CollisionResolutionError


class Consolidator:
    """Rename folders to collision-free names: ``dir``, ``dir (1)``, ``dir (2)``, ..."""

    @staticmethod
    def available_directory(desired: Path) -> Path:
        """Return ``desired`` or the first ``desired (N)`` that does not exist."""

        if not desired.exists():
            return desired
        counter = 1
        while True:
            candidate = desired.parent / f"{desired.name} ({counter})"
            if not candidate.exists():
                return candidate
            counter += 1

    def place(self, source: Path, desired: Path) -> Path:
        """Move ``source`` to ``desired`` or its first free numbered variant.

        Raises:
            CollisionResolutionError: If the move fails.
        """

        if source == desired:
            return source
        target = self.available_directory(desired)
        try:
            _ = ensure_parent_directory(target)
            _ = shutil.move(str(source), str(target))
        except OSError as exc:
            raise CollisionResolutionError(source, target, exc) from exc
        if target != desired:
            logger.info("Destination %s exists, using %s", desired, target.name)
        return target


__all__ = ["Consolidator"]
