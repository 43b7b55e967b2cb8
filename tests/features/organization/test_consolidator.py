"""Tests for collision-free folder placement."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from audiocc.features.organization import Consolidator
from audiocc.shared.errors import CollisionResolutionError


def _source(root: Path, name: str) -> Path:
    folder = root / "incoming" / name
    folder.mkdir(parents=True)
    _ = (folder / "01 Song.mp3").write_text(name)
    return folder


def test_place_numbers_collisions(tmp_path: Path) -> None:
    consolidator = Consolidator()
    desired = tmp_path / "dir1"

    first = consolidator.place(_source(tmp_path, "a"), desired)
    second = consolidator.place(_source(tmp_path, "b"), desired)
    third = consolidator.place(_source(tmp_path, "c"), desired)

    assert first == desired
    assert second == tmp_path / "dir1 (1)"
    assert third == tmp_path / "dir1 (2)"
    assert (third / "01 Song.mp3").read_text() == "c"


def test_place_never_overwrites_existing_content(tmp_path: Path) -> None:
    desired = tmp_path / "dir1"
    desired.mkdir()
    _ = (desired / "keep.txt").write_text("keep")

    final = Consolidator().place(_source(tmp_path, "a"), desired)

    assert final == tmp_path / "dir1 (1)"
    assert (desired / "keep.txt").read_text() == "keep"


def test_place_creates_missing_parents(tmp_path: Path) -> None:
    desired = tmp_path / "Phish" / "1999" / "1999-07-10 Camden"

    final = Consolidator().place(_source(tmp_path, "a"), desired)

    assert final == desired
    assert (desired / "01 Song.mp3").exists()


def test_place_same_directory_is_a_no_op(tmp_path: Path) -> None:
    folder = _source(tmp_path, "a")

    assert Consolidator().place(folder, folder) == folder


def test_available_directory_does_not_move(tmp_path: Path) -> None:
    (tmp_path / "dir1").mkdir()

    assert Consolidator.available_directory(tmp_path / "dir1") == tmp_path / "dir1 (1)"
    assert Consolidator.available_directory(tmp_path / "dir2") == tmp_path / "dir2"


def test_move_failure_raises_collision_error(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "audiocc.features.organization.usecases.consolidator.shutil.move",
        side_effect=PermissionError("denied"),
    )

    with pytest.raises(CollisionResolutionError) as exc_info:
        _ = Consolidator().place(_source(tmp_path, "a"), tmp_path / "dir1")

    assert exc_info.value.destination == tmp_path / "dir1"
