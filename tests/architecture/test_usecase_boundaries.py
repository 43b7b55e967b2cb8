"""
Summary: Architecture checks keeping use cases free of concrete tag and encoder libraries.
Why: Prevent regressions where use case modules reach past their ports to mutagen or ffmpeg.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT: Path = Path(__file__).resolve().parents[2]
FEATURES: Path = REPO_ROOT / "src" / "audiocc" / "features"
FORBIDDEN: tuple[str, ...] = ("import mutagen", "import subprocess", ".adapters")


@pytest.mark.parametrize("feature", ["metadata", "path", "organization", "processing"])
def test_usecases_do_not_import_adapters(feature: str) -> None:
    """Ensure use case modules depend on ports rather than adapters."""

    usecases_dir = FEATURES / feature / "usecases"
    offending: list[str] = []
    for path in usecases_dir.rglob("*.py"):
        contents = path.read_text(encoding="utf-8")
        if any(token in contents for token in FORBIDDEN):
            offending.append(str(path.relative_to(REPO_ROOT)))
    assert offending == [], f"Use case modules import adapters: {', '.join(offending)}"
