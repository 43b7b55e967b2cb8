"""
Summary: Package entry for bundle processing.
Why: Offer one import surface for the orchestrator, workers and their ports.
"""

from .usecases import (
    ArtworkPort,
    BundleReport,
    EncoderPort,
    FileProcessor,
    Orchestrator,
    ProcessingEvent,
    RunReport,
    WorkQueue,
)

__all__ = [
    "ArtworkPort",
    "BundleReport",
    "EncoderPort",
    "FileProcessor",
    "Orchestrator",
    "ProcessingEvent",
    "RunReport",
    "WorkQueue",
]
