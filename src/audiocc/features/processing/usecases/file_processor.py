"""src/audiocc/features/processing/usecases/file_processor.py
Where: Processing feature usecases layer.
What: Reconcile one audio file, report the plan and, in write mode, re-encode it in place.
Why: Give the work queue a single per-file unit that never touches folder layout.
"""

from __future__ import annotations

import logging
import shutil
import threading
from collections.abc import Sequence
from pathlib import Path

from audiocc.config.config import Config
from audiocc.features.metadata import InfoExtractor, ProberPort, TagReconciler
from audiocc.features.path import PathBuilder
from audiocc.platform.filesystem import ensure_directory, find_available_path
from audiocc.shared.errors import EncodeError, FileMoveError
from audiocc.shared.path_info import PathInfo, get_path_info

from .ports import COPY_QUALITY, EncodeMetadata, EncodeRequest, EncoderPort
from .processing_types import FileOutcome, ProcessingEvent, log_processing


class FileProcessor:
    """Per-file step shared by every worker of a run."""

    def __init__(
        self,
        *,
        root: Path,
        files: Sequence[str],
        config: Config,
        prober: ProberPort,
        encoder: EncoderPort,
        extractor: InfoExtractor | None = None,
        reconciler: TagReconciler | None = None,
        path_builder: PathBuilder | None = None,
    ) -> None:
        self.root: Path = root
        self.files: Sequence[str] = files
        self.config: Config = config
        self.prober: ProberPort = prober
        self.encoder: EncoderPort = encoder
        self.extractor: InfoExtractor = extractor or InfoExtractor()
        self.reconciler: TagReconciler = reconciler or TagReconciler(config, self.extractor)
        self.path_builder: PathBuilder = path_builder or PathBuilder(config)
        self._move_lock: threading.Lock = threading.Lock()

    def location(self, index: int) -> PathInfo:
        return get_path_info(self.root, self.files[index])

    def plan(self, index: int) -> FileOutcome:
        """Reconcile path and tag metadata for ``files[index]`` without writing anything.

        Raises:
            ProbeError: If the embedded tags cannot be read.
        """

        location = self.location(index)
        path_info, _ = self.extractor.extract_from_filename(location.file)
        _ = self.extractor.extract_from_path(location.dir, path_info)
        tags = self.prober.get_data(location.fullpath)
        info, match = self.reconciler.reconcile(
            path_info, tags, forced_artist=self.reconciler.forced_artist(location)
        )
        if match:
            return FileOutcome(
                location=location,
                info=info,
                match=True,
                result_path=self.files[index],
                destination=location.fulldir,
                target_ext=location.ext,
            )

        target_ext = self.path_builder.target_extension(location)
        result_path = self.path_builder.build(info, location, target_ext)
        return FileOutcome(
            location=location,
            info=info,
            match=False,
            result_path=result_path,
            destination=self.path_builder.destination_dir(self.root, result_path),
            target_ext=target_ext,
        )

    def quality_for(self, outcome: FileOutcome) -> str:
        """Stream-copy when the container does not change, otherwise use the configured bitrate."""

        if outcome.location.ext.lower() == outcome.target_ext:
            return COPY_QUALITY
        return self.config.bitrate

    def process(self, index: int, *, workdir: Path | None = None, artwork: Path | None = None) -> Path:
        """Process one file and return the folder its bundle should end up in.

        Args:
            index: Position of the file in the run's file list.
            workdir: Scratch folder for encoder output; required in write mode.
            artwork: Cover image to embed, if any.

        Raises:
            PerFileError: If probing, encoding or replacing the file fails.
        """

        outcome = self.plan(index)
        location = outcome.location
        if outcome.match:
            log_processing(
                logging.INFO,
                ProcessingEvent.FILE_MATCH,
                "Tags already match: %s",
                location.fullpath,
                sequence=index,
                source_path=location.fullpath,
            )
            return outcome.destination

        quality = self.quality_for(outcome)
        info = outcome.info
        changes = [
            f"album: {info.to_album()}",
            f"artist: {info.artist}" if info.artist else "artist: (none)",
            f"file: {info.to_file()}{outcome.target_ext}",
            f"encode: {quality} -> {outcome.target_ext}",
        ]
        target = self.root / outcome.result_path
        if target != location.fullpath:
            changes.append(f"rename to: {target}")

        if not self.config.write:
            log_processing(
                logging.INFO,
                ProcessingEvent.FILE_PLAN,
                "Planned changes for %s",
                location.fullpath,
                sequence=index,
                source_path=location.fullpath,
                changes=changes,
            )
            return outcome.destination

        if workdir is None:
            raise ValueError("workdir is required in write mode")
        written = self._write(outcome, quality, workdir / f"{index:04d}", artwork)
        log_processing(
            logging.INFO,
            ProcessingEvent.FILE_SUCCESS,
            "Processed %s -> %s",
            location.fullpath,
            written,
            sequence=index,
            source_path=location.fullpath,
            target_path=written,
            changes=changes,
        )
        return outcome.destination

    def _write(self, outcome: FileOutcome, quality: str, scratch: Path, artwork: Path | None) -> Path:
        """Encode into a per-file scratch folder, then swap the result in for the original.

        The original is removed only once the encoded file sits in its folder.
        """

        location = outcome.location
        info = outcome.info
        try:
            _ = ensure_directory(scratch)
        except OSError as exc:
            raise EncodeError(location.fullpath, f"cannot create scratch folder ({exc})") from exc
        request = EncodeRequest(
            source=location.fullpath,
            quality=quality,
            destination=scratch / f"{info.to_file()}{outcome.target_ext}",
            metadata=EncodeMetadata(
                artist=info.artist,
                album=info.to_album(),
                disc=info.disc,
                track=info.track,
                title=info.title,
                artwork=artwork,
            ),
            fix=self.config.fix,
        )
        written = self.encoder.encode(request)

        try:
            size = written.stat().st_size
        except OSError as exc:
            raise EncodeError(location.fullpath, "encoder produced no file") from exc
        if size <= 0:
            raise EncodeError(location.fullpath, "encoder produced an empty file")

        desired = location.fulldir / written.name
        with self._move_lock:
            try:
                if desired == location.fullpath:
                    _ = shutil.move(str(written), str(desired))
                    return desired
                final = find_available_path(desired)
                _ = shutil.move(str(written), str(final))
            except OSError as exc:
                raise FileMoveError(location.fullpath, f"cannot replace original ({exc})") from exc
            try:
                location.fullpath.unlink()
            except OSError as exc:
                raise FileMoveError(location.fullpath, f"cannot remove original ({exc})") from exc
        return final


__all__ = ["FileProcessor"]
