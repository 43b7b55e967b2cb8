"""src/audiocc/features/processing/usecases/orchestrator.py
Where: Processing feature usecases layer.
What: Walk a collection bundle by bundle, fan files out to workers and consolidate folders.
Why: Own the run-level control flow while delegating per-file work and folder moves.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from audiocc.config.config import Config
from audiocc.features.metadata import InfoExtractor, ProberPort
from audiocc.features.organization import Consolidator, bundle
from audiocc.platform.filesystem import AUDIO_EXTENSIONS, check_dir, files_by_extension
from audiocc.platform.logging import logger
from audiocc.shared.errors import BundleInconsistencyError, CollisionResolutionError
from audiocc.shared.path_info import PathInfo, get_path_info

from .file_processor import FileProcessor
from .ports import ArtworkPort, EncoderPort
from .processing_types import BundleReport, ProcessingEvent, RunReport, log_processing
from .work_queue import WorkQueue

WRITE_HINT = "To write changes to disk, please provide flag: --write"
_WORKDIR_PREFIX = ".audiocc-"


@dataclass(slots=True)
class _FolderMove:
    report: BundleReport
    source: Path
    destination: Path


class Orchestrator:
    """Run the whole pipeline over one collection root."""

    def __init__(
        self,
        config: Config,
        *,
        prober: ProberPort,
        encoder: EncoderPort,
        artwork: ArtworkPort,
        extractor: InfoExtractor | None = None,
        consolidator: Consolidator | None = None,
        work_queue: WorkQueue | None = None,
    ) -> None:
        self.config: Config = config
        self.prober: ProberPort = prober
        self.encoder: EncoderPort = encoder
        self.artwork: ArtworkPort = artwork
        self.extractor: InfoExtractor = extractor or InfoExtractor()
        self.consolidator: Consolidator = consolidator or Consolidator()
        self.work_queue: WorkQueue = work_queue or WorkQueue(config.workers)

    def run(self, root: Path) -> RunReport:
        """Process every audio file under ``root``.

        Raises:
            FatalSetupError: If ``root`` is not an existing directory.
        """

        root = check_dir(root)
        if not self.config.write:
            logger.info(WRITE_HINT)

        files = files_by_extension(root, AUDIO_EXTENSIONS)
        report = RunReport(root=root, total_files=len(files), dry_run=not self.config.write)
        log_processing(
            logging.INFO,
            ProcessingEvent.RUN_START,
            "Processing %d files under %s",
            len(files),
            root,
            directory=root,
            total_files=len(files),
            dry_run=report.dry_run,
        )

        processor = FileProcessor(
            root=root,
            files=files,
            config=self.config,
            prober=self.prober,
            encoder=self.encoder,
            extractor=self.extractor,
        )

        moves: list[_FolderMove] = []

        def handle(indices: list[int]) -> None:
            report.bundles.append(self.process_bundle(root, files, indices, processor, moves))

        bundle(files, handle)
        self._consolidate(moves)

        summary = report.summary_extra()
        log_processing(
            logging.INFO,
            ProcessingEvent.RUN_COMPLETE,
            "Finished %d bundles (%d failed files) in %.2fs",
            summary["bundles"],
            summary["failed"],
            summary["duration_seconds"],
            **summary,
        )
        return report

    def skip_reason(self, location: PathInfo) -> str | None:
        """Return why a bundle is left alone, or None to process it."""

        segments = location.segments
        if self.config.collection and segments and " - " in segments[0]:
            return "artist folder contains ' - '"
        if self.config.fast and segments:
            current = self.extractor.extract_from_album(segments[-1])
            if current.year and current.album:
                return "album folder already has year and album"
        return None

    @contextmanager
    def _workdir(self, location: PathInfo) -> Iterator[Path | None]:
        if not self.config.write:
            yield None
            return
        with tempfile.TemporaryDirectory(prefix=_WORKDIR_PREFIX, dir=location.fulldir) as name:
            yield Path(name)

    def process_bundle(
        self,
        root: Path,
        files: Sequence[str],
        indices: list[int],
        processor: FileProcessor,
        moves: list[_FolderMove],
    ) -> BundleReport:
        """Process one folder's files and decide where the folder belongs.

        In write mode the folder move is appended to ``moves`` and carried out
        once every bundle has run, so nested bundles still find their folders.
        """

        location = get_path_info(root, files[indices[0]])
        report = BundleReport(directory=location.fulldir, total_files=len(indices))
        log_processing(
            logging.INFO,
            ProcessingEvent.BUNDLE_START,
            "Processing bundle %s",
            location.fulldir,
            directory=location.fulldir,
            total_files=len(indices),
        )

        reason = self.skip_reason(location)
        if reason is not None:
            report.skipped = reason
            log_processing(
                logging.INFO,
                ProcessingEvent.BUNDLE_SKIP,
                "Skipping bundle %s: %s",
                location.fulldir,
                reason,
                directory=location.fulldir,
                reason=reason,
            )
            return report

        if not location.fulldir.is_dir():
            return self._bundle_error(report, f"folder no longer exists: {location.fulldir}")

        try:
            artwork = self.artwork.process(location) if self.config.write else None
            with self._workdir(location) as workdir:
                batch = self.work_queue.run(
                    indices,
                    lambda index: processor.process(index, workdir=workdir, artwork=artwork),
                )
        except OSError as exc:
            return self._bundle_error(report, f"cannot prepare {location.fulldir} ({exc})")
        report.errors = batch.errors

        try:
            destination = batch.destination()
        except BundleInconsistencyError as exc:
            return self._bundle_error(report, str(exc))

        if destination is None or destination == location.fulldir:
            self._bundle_complete(report)
            return report
        if location.fulldir == root:
            logger.warning("Files directly under %s are never moved", root)
            self._bundle_complete(report)
            return report

        if self.config.write:
            moves.append(_FolderMove(report=report, source=location.fulldir, destination=destination))
            return report

        report.destination = self.consolidator.available_directory(destination)
        self._bundle_renamed(report)
        return report

    def _consolidate(self, moves: list[_FolderMove]) -> None:
        """Move bundle folders, deepest first, so parents move after their subfolders."""

        for move in sorted(moves, key=lambda item: len(item.source.parts), reverse=True):
            try:
                move.report.destination = self.consolidator.place(move.source, move.destination)
            except CollisionResolutionError as exc:
                _ = self._bundle_error(move.report, str(exc))
                continue
            self._bundle_renamed(move.report)

    def _bundle_renamed(self, report: BundleReport) -> None:
        log_processing(
            logging.INFO,
            ProcessingEvent.BUNDLE_RENAME,
            "Moving %s to %s",
            report.directory,
            report.destination,
            directory=report.directory,
            target_path=report.destination,
            dry_run=not self.config.write,
        )
        self._bundle_complete(report)

    def _bundle_complete(self, report: BundleReport) -> None:
        log_processing(
            logging.INFO,
            ProcessingEvent.BUNDLE_COMPLETE,
            "Completed bundle %s",
            report.directory,
            directory=report.directory,
            total_files=report.total_files,
            failed=report.failed,
        )

    def _bundle_error(self, report: BundleReport, message: str) -> BundleReport:
        report.error = message
        log_processing(
            logging.ERROR,
            ProcessingEvent.BUNDLE_ERROR,
            "Bundle %s failed: %s",
            report.directory,
            message,
            directory=report.directory,
            error_message=message,
        )
        return report


__all__ = ["Orchestrator", "WRITE_HINT"]
