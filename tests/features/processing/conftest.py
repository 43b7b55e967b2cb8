"""Stub ports and tree helpers shared by processing tests."""

from __future__ import annotations

import threading
from collections.abc import Callable
from pathlib import Path

import pytest

from audiocc.features.metadata import ProbedTags
from audiocc.features.processing.usecases.ports import EncodeRequest
from audiocc.shared.errors import ProbeError
from audiocc.shared.path_info import PathInfo


class StubProber:
    """Return canned tags keyed by file name; listed names fail to probe."""

    def __init__(
        self,
        tags: dict[str, ProbedTags] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.tags: dict[str, ProbedTags] = tags or {}
        self.failing: set[str] = failing or set()
        self.calls: list[Path] = []
        self._lock: threading.Lock = threading.Lock()

    def get_data(self, path: Path) -> ProbedTags:
        with self._lock:
            self.calls.append(path)
        if path.name in self.failing:
            raise ProbeError(path, "cannot read tags")
        return self.tags.get(path.name, ProbedTags())


class StubEncoder:
    """Write a small payload (or nothing) to the requested destination."""

    def __init__(self, payload: bytes = b"encoded") -> None:
        self.payload: bytes = payload
        self.requests: list[EncodeRequest] = []
        self._lock: threading.Lock = threading.Lock()

    def encode(self, request: EncodeRequest) -> Path:
        with self._lock:
            self.requests.append(request)
        _ = request.destination.write_bytes(self.payload)
        return request.destination


class StubArtwork:
    """Return a fixed image path and remember every folder asked about."""

    def __init__(self, image: Path | None = None) -> None:
        self.image: Path | None = image
        self.calls: list[PathInfo] = []

    def process(self, location: PathInfo) -> Path | None:
        self.calls.append(location)
        return self.image


TreeFactory = Callable[[list[str]], Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Create files (with placeholder audio content) under ``tmp_path / 'music'``."""

    def _make(files: list[str]) -> Path:
        root = tmp_path / "music"
        root.mkdir(exist_ok=True)
        for relpath in files:
            path = root / relpath
            path.parent.mkdir(parents=True, exist_ok=True)
            _ = path.write_bytes(b"original")
        return root

    return _make


@pytest.fixture
def prober() -> StubProber:
    return StubProber()


@pytest.fixture
def encoder() -> StubEncoder:
    return StubEncoder()


@pytest.fixture
def artwork() -> StubArtwork:
    return StubArtwork()
