"""src/audiocc/features/processing/adapters/folder_artwork.py
What: ArtworkPort implementation that picks the largest image next to the audio files.
Why: Scans and covers are usually dropped into the album folder by hand."""

from __future__ import annotations

from pathlib import Path

from audiocc.features.processing.usecases.ports import ArtworkPort
from audiocc.platform.filesystem import IMAGE_EXTENSIONS, nth_file_size
from audiocc.platform.logging import logger
from audiocc.shared.path_info import PathInfo


class FolderArtworkExtractor(ArtworkPort):
    """Return the biggest ``.jpg``/``.jpeg``/``.png`` in the bundle folder."""

    def process(self, location: PathInfo) -> Path | None:
        images = sorted(
            path
            for path in location.fulldir.iterdir()
            if path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS
        )
        index, size = nth_file_size(images, want_smallest=False)
        if index < 0 or size == 0:
            return None
        logger.debug("Using artwork %s for %s", images[index].name, location.fulldir)
        return images[index]


__all__ = ["FolderArtworkExtractor"]
