"""Tests for grouping sorted files into per-folder bundles."""

from __future__ import annotations

import pytest

from audiocc.features.organization import bundle


def test_bundles_follow_parent_directories() -> None:
    calls: list[list[int]] = []

    bundle(["a1/x", "a1/y", "a2/z"], calls.append)

    assert calls == [[0, 1], [2]]


def test_root_files_form_their_own_bundle() -> None:
    calls: list[list[int]] = []

    bundle(["a.mp3", "b.mp3", "dir/c.mp3", "dir/sub/d.mp3"], calls.append)

    assert calls == [[0, 1], [2], [3]]


def test_empty_file_list_never_calls_back() -> None:
    calls: list[list[int]] = []

    bundle([], calls.append)

    assert calls == []


def test_callback_error_stops_the_pass() -> None:
    calls: list[list[int]] = []

    def fail_on_second(indices: list[int]) -> None:
        calls.append(indices)
        if len(calls) == 2:
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        bundle(["a/1", "b/1", "c/1"], fail_on_second)

    assert calls == [[0], [1]]
