"""
Summary: Ordered pattern tables and the shared first-match driver for metadata heuristics.
Why: Keep every heuristic a declarative row so each one can be tested on its own.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final


Extractor = Callable[[re.Match[str]], dict[str, str]]


def named_groups(found: re.Match[str]) -> dict[str, str]:
    """Return every named group, with unmatched groups as empty strings."""
    return {key: value or "" for key, value in found.groupdict().items()}


def date_fields(found: re.Match[str]) -> dict[str, str]:
    """Return year as captured and month and day padded to two digits."""
    fields = named_groups(found)
    return {
        "year": fields["year"],
        "month": fields["month"].zfill(2),
        "day": fields["day"].zfill(2),
    }


@dataclass(frozen=True, slots=True)
class PatternRule:
    """A named regular expression and the extractor that turns its match into fields."""

    name: str
    pattern: re.Pattern[str]
    extract: Extractor = named_groups


@dataclass(frozen=True, slots=True)
class RuleMatch:
    """The first accepted match of a rule table."""

    rule: PatternRule
    match: re.Match[str]
    remainder: str

    @property
    def fields(self) -> dict[str, str]:
        return self.rule.extract(self.match)

    def group(self, name: str) -> str:
        """Return a named group, or an empty string when absent or unmatched."""
        return self.match.groupdict().get(name) or ""


Acceptor = Callable[[PatternRule, re.Match[str]], bool]


def first_match(
    rules: Sequence[PatternRule],
    text: str,
    accept: Acceptor | None = None,
) -> RuleMatch | None:
    """Return the first rule whose leftmost match is accepted.

    Only the leftmost match of each rule is considered; a rejected candidate
    moves on to the next rule. The remainder is the text after the match.
    """

    for rule in rules:
        found = rule.pattern.search(text)
        if found is None:
            continue
        if accept is not None and not accept(rule, found):
            continue
        return RuleMatch(rule=rule, match=found, remainder=text[found.end() :])
    return None


_SEP: Final[str] = r"[/.\-]"

DATE_RULES: Final[tuple[PatternRule, ...]] = (
    # '2000-1-01', '2000/01/01', '2000.1.1', multi-day '2000.01.01-03', '2000.01.31,01'
    PatternRule(
        "year-month-day",
        re.compile(
            rf"(?P<year>\d{{4}}){_SEP}(?P<month>\d{{1,2}}){_SEP}(?P<day>\d{{1,2}})(?:[-,]+\d{{1,2}})*"
        ),
        date_fields,
    ),
    # show codes: 'sci160318d1_01_Shine', 'ph990710d1_01_Wilson'
    PatternRule(
        "show-code",
        re.compile(r"[a-z0-9]{2,10}(?P<year>\d{2})(?P<month>\d{2})(?P<day>\d{2})"),
        date_fields,
    ),
    # '01.01.2000', '1/1/2000', '1-01-2000'
    PatternRule(
        "month-day-year",
        re.compile(rf"(?P<month>\d{{1,2}}){_SEP}(?P<day>\d{{1,2}}){_SEP}(?P<year>\d{{4}})"),
        date_fields,
    ),
    # '03-30-69', '06.09.73'
    PatternRule(
        "month-day-short-year",
        re.compile(rf"(?P<month>\d{{1,2}}){_SEP}(?P<day>\d{{1,2}}){_SEP}(?P<year>\d{{2}})"),
        date_fields,
    ),
    # '98-08-23'
    PatternRule(
        "short-year-month-day",
        re.compile(rf"(?P<year>\d{{2}}){_SEP}(?P<month>\d{{1,2}}){_SEP}(?P<day>\d{{1,2}})"),
        date_fields,
    ),
)

YEAR_ONLY_RULE: Final[PatternRule] = PatternRule(
    "year-only", re.compile(r"^(?P<year>\d{4})\s-*\s*")
)

DISC_TRACK_RULES: Final[tuple[PatternRule, ...]] = (
    # '1-01 ', '01-02 ', '1-3 - ', '03 - 02 '
    PatternRule(
        "disc-track",
        re.compile(r"^(?P<disc>\d{1,2})\s*-\s*(?P<track>\d{1,2})\s-*\s*"),
    ),
    # '01 - ', '1 ', '1-'
    PatternRule("track", re.compile(r"^(?P<track>\d{1,2})\s*-*\s*")),
    # 's01t01', 'd01t01', 's1 01', 'd301', 'd1_01'
    PatternRule(
        "code-2-2",
        re.compile(r"[sd](?P<disc>\d{2})[-. _t]*(?P<track>\d{2})"),
    ),
    PatternRule(
        "code-1-2",
        re.compile(r"[sd](?P<disc>\d)[-. _t]*(?P<track>\d{2})"),
    ),
    PatternRule(
        "code-1-1",
        re.compile(r"[sd](?P<disc>\d)[-. _t]*(?P<track>\d)"),
    ),
)

DISC_ONLY_RULE: Final[PatternRule] = PatternRule(
    "disc-only",
    re.compile(r"(?:cd|disc|set|disk)\s*(?P<disc>\d{1,2})\s*", re.IGNORECASE),
)


__all__ = [
    "Acceptor",
    "DATE_RULES",
    "DISC_ONLY_RULE",
    "DISC_TRACK_RULES",
    "Extractor",
    "PatternRule",
    "RuleMatch",
    "YEAR_ONLY_RULE",
    "date_fields",
    "first_match",
    "named_groups",
]
