"""src/audiocc/features/processing/usecases/processing_types.py
Where: Processing feature usecases layer.
What: Shared enums, records and the structured log helper for bundle processing.
Why: Keep the orchestrator and workers lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from audiocc.platform.logging import logger
from audiocc.shared.errors import BundleInconsistencyError
from audiocc.shared.info import Info
from audiocc.shared.path_info import PathInfo


class ProcessingEvent(StrEnum):
    """Structured event identifiers for processing logs."""

    RUN_START = "processing.run.start"
    RUN_COMPLETE = "processing.run.complete"
    BUNDLE_START = "processing.bundle.start"
    BUNDLE_SKIP = "processing.bundle.skip"
    BUNDLE_COMPLETE = "processing.bundle.complete"
    BUNDLE_ERROR = "processing.bundle.error"
    BUNDLE_RENAME = "processing.bundle.rename"
    FILE_MATCH = "processing.file.match"
    FILE_PLAN = "processing.file.plan"
    FILE_SUCCESS = "processing.file.success"
    FILE_ERROR = "processing.file.error"


def log_processing(
    level: int,
    event: ProcessingEvent,
    message: str,
    *message_args: object,
    **context: Any,
) -> None:
    """Log ``message`` with ``event`` and ``context`` attached as record extras."""

    extra: dict[str, Any] = {"processing_event": event.value}
    for key, value in context.items():
        extra[key] = str(value) if isinstance(value, Path) else value
    logger.log(level, message, *message_args, extra=extra, stacklevel=2)


@dataclass(slots=True)
class FileOutcome:
    """Reconciled record for one file."""

    location: PathInfo
    info: Info
    match: bool
    result_path: str
    destination: Path
    target_ext: str = ""


@dataclass(slots=True)
class WorkResult:
    """Tagged outcome of one worker call."""

    index: int
    destination: Path | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class WorkBatch:
    """Every result of one work-queue run, ordered by file index."""

    results: list[WorkResult] = field(default_factory=list)

    @property
    def errors(self) -> list[WorkResult]:
        return [result for result in self.results if not result.ok]

    def destinations(self) -> list[Path]:
        """Distinct destinations of successful results, in index order."""

        seen: list[Path] = []
        for result in self.results:
            if result.ok and result.destination is not None and result.destination not in seen:
                seen.append(result.destination)
        return seen

    def destination(self) -> Path | None:
        """The single destination every successful file agreed on.

        Returns None when no file succeeded.

        Raises:
            BundleInconsistencyError: If successful files disagree.
        """

        destinations = self.destinations()
        if len(destinations) > 1:
            raise BundleInconsistencyError(destinations)
        return destinations[0] if destinations else None


@dataclass(slots=True)
class BundleReport:
    """What happened to one bundle."""

    directory: Path
    total_files: int
    destination: Path | None = None
    skipped: str | None = None
    error: str | None = None
    errors: list[WorkResult] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.errors)


@dataclass(slots=True)
class RunReport:
    """Summary of a whole collection run."""

    root: Path
    total_files: int
    dry_run: bool
    bundles: list[BundleReport] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)

    @property
    def failed_files(self) -> int:
        return sum(bundle.failed for bundle in self.bundles)

    @property
    def failed_bundles(self) -> int:
        return sum(1 for bundle in self.bundles if bundle.error)

    @property
    def has_failures(self) -> bool:
        return self.failed_files > 0 or self.failed_bundles > 0

    def duration_seconds(self) -> float:
        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "directory": str(self.root),
            "total_files": self.total_files,
            "bundles": len(self.bundles),
            "failed": self.failed_files,
            "failed_bundles": self.failed_bundles,
            "dry_run": self.dry_run,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = [
    "BundleReport",
    "FileOutcome",
    "ProcessingEvent",
    "RunReport",
    "WorkBatch",
    "WorkResult",
    "log_processing",
]
