"""Processing adapters."""

from .ffmpeg_encoder import FFmpegEncoder
from .folder_artwork import FolderArtworkExtractor

__all__ = ["FFmpegEncoder", "FolderArtworkExtractor"]
