"""Summary: Merge path-derived and tag-derived metadata and detect matches.
Why: Decide per file whether tags already agree with the folder layout."""

from __future__ import annotations

from dataclasses import replace

from audiocc.config.config import Config
from audiocc.shared.info import Info
from audiocc.shared.path_info import PathInfo

from .extraction import InfoExtractor
from .ports import ProbedTags

_FILL_FIELDS: tuple[str, ...] = ("artist", "album", "disc", "track", "title")


class TagReconciler:
    """Resolve field precedence between path and tag metadata."""

    def __init__(self, config: Config, extractor: InfoExtractor | None = None) -> None:
        self._config: Config = config
        self._extractor: InfoExtractor = extractor or InfoExtractor()

    def forced_artist(self, location: PathInfo) -> str:
        """Artist imposed by configuration, or an empty string.

        Collection mode takes the top-level folder and wins over ``artist``.
        """

        if self._config.collection and location.segments:
            return location.segments[0]
        return self._config.artist

    @staticmethod
    def best_info(path_info: Info, tag_info: Info) -> Info:
        """Prefer path-derived fields and fill the gaps from tags.

        The date moves as one unit so the merged record never mixes a year
        from one source with a month from the other.
        """

        merged = replace(path_info)
        if not merged.year:
            merged.year, merged.month, merged.day = tag_info.year, tag_info.month, tag_info.day
        elif not merged.has_date() and tag_info.has_date() and tag_info.year == merged.year:
            merged.month, merged.day = tag_info.month, tag_info.day
        for name in _FILL_FIELDS:
            if not getattr(merged, name):
                setattr(merged, name, getattr(tag_info, name))
        return merged

    def reconcile(
        self,
        path_info: Info,
        tags: ProbedTags,
        *,
        forced_artist: str = "",
    ) -> tuple[Info, bool]:
        """Return the merged record and whether the embedded album already matches.

        ``match`` compares the rendered album literally against the album tag,
        so ``2000.01.01 Show`` does not match ``2000-01-01 Show``. It is always
        False when reprocessing is forced.
        """

        tag_info = self._extractor.info_from_tags(tags)
        merged = self.best_info(path_info, tag_info)
        if forced_artist:
            merged.artist = forced_artist

        if self._config.force:
            return merged, False
        return merged, merged.to_album() == tags.album


__all__ = ["TagReconciler"]
