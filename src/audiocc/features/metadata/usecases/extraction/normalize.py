"""
Summary: Free-text cleanup, century expansion and calendar validation helpers.
Why: Album and title candidates must be stable strings whatever heuristic produced them.
"""

from __future__ import annotations

import datetime
import re
from typing import Final

_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[/\\]+")
_DISALLOWED: Final[re.Pattern[str]] = re.compile(r"[^\w\-',.!?&> ()]+")
_TRAILING_COUNTER: Final[re.Pattern[str]] = re.compile(r"\s*\([\d\s]*\)\s*$")
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")
_EXTENSION_ECHO: Final[re.Pattern[str]] = re.compile(
    r"\s-*\s(?:flac|m4a|mp3|mp4|shn|wav)$", re.IGNORECASE
)
_BITRATE_MARKER: Final[re.Pattern[str]] = re.compile(
    r"\s*-*\s*(?:128|192|256|320|sbd)$", re.IGNORECASE
)
_LEADING_PUNCTUATION: Final[re.Pattern[str]] = re.compile(r"^[-',.!?&>_]+")
_TRAILING_PUNCTUATION: Final[re.Pattern[str]] = re.compile(r"[-',.&>_(]+$")


def fix_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and trim both ends."""
    return _WHITESPACE.sub(" ", text).strip()


def _normalize_once(text: str) -> str:
    text = _SEPARATORS.sub("_", text)
    text = _DISALLOWED.sub("", text)
    text = _TRAILING_COUNTER.sub("", text)
    text = fix_whitespace(text)
    text = _EXTENSION_ECHO.sub("", text)
    text = _BITRATE_MARKER.sub("", text)
    text = _LEADING_PUNCTUATION.sub("", text)
    text = _TRAILING_PUNCTUATION.sub("", text)
    return fix_whitespace(text)


def normalize_text(text: str) -> str:
    """Clean an album or title candidate.

    No cleanup step lengthens the text, so repeating the steps until nothing
    changes terminates. The result is a fixed point: normalizing it again
    returns it unchanged.
    """

    current = text
    while True:
        cleaned = _normalize_once(current)
        if cleaned == current:
            return cleaned
        current = cleaned


def expand_century(year: str, current_year: int) -> str:
    """Expand a 2-digit year relative to ``current_year``.

    Years numerically greater than the current year's last two digits belong
    to the previous century; equal or smaller ones to the current century.
    Returns an empty string when the result is not a 4-digit year.
    """

    if len(year) == 2:
        if not year.isdigit():
            return ""
        century, last_two = divmod(current_year, 100)
        if int(year) > last_two:
            century -= 1
        year = f"{century}{year}"
    if len(year) != 4 or not year.isdigit():
        return ""
    return year


def valid_date(year: str, month: str, day: str) -> bool:
    """Return True when the strings form a real calendar date."""

    try:
        _ = datetime.date(int(year), int(month), int(day))
    except ValueError:
        return False
    return True


__all__ = ["expand_century", "fix_whitespace", "normalize_text", "valid_date"]
