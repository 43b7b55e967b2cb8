"""Application service for organizing an audio collection.

This layer centralizes construction of the orchestrator and its adapters so
that the CLI (or any other front end) reuses the same use case.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, final

from audiocc.config.config import Config
from audiocc.features.metadata import ProberPort
from audiocc.features.metadata.adapters import MutagenProber
from audiocc.features.processing import ArtworkPort, EncoderPort, Orchestrator, RunReport
from audiocc.features.processing.adapters import FFmpegEncoder, FolderArtworkExtractor


@dataclass(frozen=True)
class OrganizeRequest:
    """Input parameters for an organize run.

    Attributes:
        root: Collection root to walk.
        config: Effective configuration, file values and flags merged.
    """

    root: Path
    config: Config


@final
class OrganizeService:
    """Application service that wires adapters into an ``Orchestrator``."""

    def __init__(
        self,
        *,
        prober_factory: Callable[[], ProberPort] | None = None,
        encoder_factory: Callable[[], EncoderPort] | None = None,
        artwork_factory: Callable[[], ArtworkPort] | None = None,
        orchestrator_factory: Callable[..., Orchestrator] | None = None,
    ) -> None:
        """Create a service with overridable infrastructure factories.

        Tests can inject light-weight doubles while production code relies on
        mutagen, ffmpeg and the folder artwork lookup.
        """

        self._prober_factory: Callable[[], ProberPort] = prober_factory or MutagenProber
        self._encoder_factory: Callable[[], EncoderPort] = encoder_factory or FFmpegEncoder
        self._artwork_factory: Callable[[], ArtworkPort] = (
            artwork_factory or FolderArtworkExtractor
        )
        self._orchestrator_factory: Callable[..., Orchestrator] = (
            orchestrator_factory or Orchestrator
        )

    def build_orchestrator(self, config: Config) -> Orchestrator:
        """Build an ``Orchestrator`` for ``config`` with fresh adapters."""

        return self._orchestrator_factory(
            config,
            prober=self._prober_factory(),
            encoder=self._encoder_factory(),
            artwork=self._artwork_factory(),
        )

    def organize(self, request: OrganizeRequest) -> RunReport:
        """Run the whole collection pass described by ``request``."""

        orchestrator = self.build_orchestrator(request.config)
        return orchestrator.run(request.root)


__all__ = ["OrganizeRequest", "OrganizeService"]
