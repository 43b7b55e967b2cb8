"""
Summary: Group a sorted file list into runs that share a parent folder.
Why: Let the orchestrator handle one folder at a time in a single streaming pass.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence

BundleCallback = Callable[[list[int]], None]


def bundle(files: Sequence[str], fn: BundleCallback) -> None:
    """Call ``fn`` with the indices of each run of files in one folder.

    ``files`` must be sorted; grouping relies on that order and never looks
    back. An exception raised by ``fn`` stops the pass and propagates.
    """

    if not files:
        return

    current: list[int] = [0]
    current_dir = os.path.dirname(files[0])
    for index in range(1, len(files)):
        parent = os.path.dirname(files[index])
        if parent == current_dir:
            current.append(index)
            continue
        fn(current)
        current = [index]
        current_dir = parent
    fn(current)


__all__ = ["BundleCallback", "bundle"]
