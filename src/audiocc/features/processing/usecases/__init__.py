"""Processing use cases."""

from .file_processor import FileProcessor
from .orchestrator import WRITE_HINT, Orchestrator
from .ports import COPY_QUALITY, ArtworkPort, EncodeMetadata, EncodeRequest, EncoderPort
from .processing_types import (
    BundleReport,
    FileOutcome,
    ProcessingEvent,
    RunReport,
    WorkBatch,
    WorkResult,
)
from .work_queue import WorkQueue

__all__ = [
    "COPY_QUALITY",
    "WRITE_HINT",
    "ArtworkPort",
    "BundleReport",
    "EncodeMetadata",
    "EncodeRequest",
    "EncoderPort",
    "FileOutcome",
    "FileProcessor",
    "Orchestrator",
    "ProcessingEvent",
    "RunReport",
    "WorkBatch",
    "WorkQueue",
    "WorkResult",
]
