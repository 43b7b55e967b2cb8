"""Metadata inference from filenames, folder names and embedded tags.

Where: src/audiocc/features/metadata/usecases/extraction/info_extractor.py
What: Apply the ordered date and disc/track rule tables to fill an ``Info``.
Why: Give path heuristics and tag parsing one implementation with a fixed precedence.
"""

from __future__ import annotations

import datetime
import re
from typing import Final

from audiocc.shared.info import Info

from ..ports import ProbedTags
from .normalize import expand_century, fix_whitespace, normalize_text, valid_date
from .rules import (
    DATE_RULES,
    DISC_ONLY_RULE,
    DISC_TRACK_RULES,
    YEAR_ONLY_RULE,
    PatternRule,
    first_match,
)

_TAG_YEAR: Final[re.Pattern[str]] = re.compile(r"^(?P<year>\d{4})\b")
_TAG_NUMBER: Final[re.Pattern[str]] = re.compile(r"^\s*(?P<number>\d+)")


class InfoExtractor:
    """Fill ``Info`` records from unstructured text.

    Args:
        current_year: Year used to expand 2-digit years. Defaults to today's year.
    """

    def __init__(self, current_year: int | None = None) -> None:
        self._current_year: int | None = current_year

    @property
    def current_year(self) -> int:
        if self._current_year is not None:
            return self._current_year
        return datetime.date.today().year

    def _date_parts(self, fields: dict[str, str]) -> tuple[str, str, str]:
        return expand_century(fields["year"], self.current_year), fields["month"], fields["day"]

    def match_date(self, text: str, info: Info) -> str:
        """Fill the date from the first valid date rule and return the remainder.

        An already complete date on ``info`` is kept; the matched date text is
        still consumed so it does not leak into album or title.
        """

        def accept(rule: PatternRule, found: re.Match[str]) -> bool:
            year, month, day = self._date_parts(rule.extract(found))
            return bool(year) and valid_date(year, month, day)

        result = first_match(DATE_RULES, text, accept)
        if result is None:
            return text
        if not info.has_date():
            info.year, info.month, info.day = self._date_parts(result.fields)
        return result.remainder

    def match_year_only(self, text: str, info: Info) -> str:
        """Consume a leading bare year such as ``'1995 - '``."""

        result = first_match((YEAR_ONLY_RULE,), text)
        if result is None:
            return text
        if not info.year:
            info.year = result.group("year")
        return result.remainder

    def match_disc_track(self, text: str, info: Info) -> str:
        """Fill disc and track from the first disc/track rule."""

        result = first_match(DISC_TRACK_RULES, text)
        if result is None:
            return text
        fields = result.fields
        info.disc = fields.get("disc", "")
        info.track = fields.get("track", "")
        return result.remainder

    def match_disc_only(self, text: str, info: Info) -> None:
        """Fill the disc from markers such as ``'CD2'`` unless it is already set."""

        result = first_match((DISC_ONLY_RULE,), text)
        if result is not None and not info.disc:
            info.disc = result.group("disc")

    def extract_from_filename(self, name: str, info: Info | None = None) -> tuple[Info, str]:
        """Parse a base file name (without extension).

        Returns:
            The filled ``Info`` and the text left after the date and
            disc/track spans were consumed, before title cleanup.
        """

        info = info if info is not None else Info()
        remainder = self.match_date(name, info)
        remainder = self.match_disc_track(remainder, info)
        info.title = normalize_text(remainder)
        return info, remainder

    def extract_from_path_segment(self, segment: str, info: Info) -> Info:
        """Apply one folder name, only filling fields that are still empty."""

        if not segment:
            return info
        self.match_disc_only(segment, info)
        remainder = self.match_date(segment, info)
        remainder = self.match_year_only(remainder, info)
        if not info.album:
            info.album = normalize_text(remainder)
        return info

    def extract_from_path(self, directory: str, info: Info | None = None) -> Info:
        """Apply every folder of ``directory``, innermost first."""

        info = info if info is not None else Info()
        for segment in reversed(directory.split("/")):
            _ = self.extract_from_path_segment(segment, info)
        return info

    def extract_from_album(self, segment: str) -> Info:
        """Parse a single album folder name into a fresh ``Info``."""

        return self.extract_from_path_segment(segment, Info())

    def info_from_tags(self, tags: ProbedTags) -> Info:
        """Interpret embedded tags with the same heuristics as folder names."""

        info = self.extract_from_album(fix_whitespace(tags.album))
        if not info.year and tags.date:
            _ = self.match_date(tags.date, info)
            found = _TAG_YEAR.match(tags.date.strip())
            if not info.year and found is not None:
                info.year = found.group("year")
        info.artist = fix_whitespace(tags.artist)
        info.title = normalize_text(tags.title)
        track = _TAG_NUMBER.match(tags.track)
        if track is not None:
            info.track = track.group("number").zfill(2)
        disc = _TAG_NUMBER.match(tags.disc)
        if disc is not None:
            info.disc = disc.group("number")
        return info


__all__ = ["InfoExtractor"]
