"""
Summary: Rule-by-rule checks for the date and disc/track pattern tables.
Why: Each heuristic row must keep matching the layouts it was written for.
"""

from __future__ import annotations

import re

import pytest

from audiocc.features.metadata.usecases.extraction.rules import (
    DATE_RULES,
    DISC_ONLY_RULE,
    DISC_TRACK_RULES,
    YEAR_ONLY_RULE,
    PatternRule,
    date_fields,
    first_match,
)


def _rule(table: tuple[PatternRule, ...], name: str) -> PatternRule:
    return next(rule for rule in table if rule.name == name)


@pytest.mark.parametrize(
    ("name", "text", "groups"),
    [
        ("year-month-day", "2000-1-01", {"year": "2000", "month": "1", "day": "01"}),
        ("year-month-day", "2000/01/01", {"year": "2000", "month": "01", "day": "01"}),
        ("year-month-day", "2000.1.1", {"year": "2000", "month": "1", "day": "1"}),
        ("show-code", "sci160318d1_01_Shine", {"year": "16", "month": "03", "day": "18"}),
        ("show-code", "ph990710d1_01_Wilson", {"year": "99", "month": "07", "day": "10"}),
        ("month-day-year", "01.01.2000", {"month": "01", "day": "01", "year": "2000"}),
        ("month-day-year", "1/1/2000", {"month": "1", "day": "1", "year": "2000"}),
        ("month-day-short-year", "03-30-69", {"month": "03", "day": "30", "year": "69"}),
        ("month-day-short-year", "06.09.73", {"month": "06", "day": "09", "year": "73"}),
        ("short-year-month-day", "98-08-23", {"year": "98", "month": "08", "day": "23"}),
    ],
)
def test_date_rule_groups(name: str, text: str, groups: dict[str, str]) -> None:
    found = _rule(DATE_RULES, name).pattern.search(text)

    assert found is not None
    for key, value in groups.items():
        assert found.group(key) == value


def test_date_rule_consumes_multi_day_suffix() -> None:
    result = first_match(DATE_RULES, "2000.01.31,01 Show")

    assert result is not None
    assert result.rule.name == "year-month-day"
    assert result.group("day") == "31"
    assert result.remainder == " Show"


def test_first_match_honours_table_order() -> None:
    result = first_match(DATE_RULES, "1999-07-10")

    assert result is not None
    assert result.rule.name == "year-month-day"


def test_first_match_tries_next_rule_when_rejected() -> None:
    def reject_first(rule: PatternRule, _found: re.Match[str]) -> bool:
        return rule.name != "month-day-short-year"

    result = first_match(DATE_RULES, "98-08-23", reject_first)

    assert result is not None
    assert result.rule.name == "short-year-month-day"


def test_first_match_without_match_returns_none() -> None:
    assert first_match(DATE_RULES, "Live at the Fillmore") is None


def test_year_only_rule_consumes_separator() -> None:
    result = first_match((YEAR_ONLY_RULE,), "1995 - Record")

    assert result is not None
    assert result.group("year") == "1995"
    assert result.remainder == "Record"


@pytest.mark.parametrize(
    ("text", "rule", "disc", "track", "remainder"),
    [
        ("1-01 Intro", "disc-track", "1", "01", "Intro"),
        ("03 - 02 Song", "disc-track", "03", "02", "Song"),
        ("01 - Song", "track", "", "01", "Song"),
        ("7 Song", "track", "", "7", "Song"),
        ("s01t01 Song", "code-2-2", "01", "01", " Song"),
        ("d1_01 Song", "code-1-2", "1", "01", " Song"),
        ("s1 01 Song", "code-1-2", "1", "01", " Song"),
        ("d1t1 Song", "code-1-1", "1", "1", " Song"),
    ],
)
def test_disc_track_rules(text: str, rule: str, disc: str, track: str, remainder: str) -> None:
    result = first_match(DISC_TRACK_RULES, text)

    assert result is not None
    assert result.rule.name == rule
    assert result.group("disc") == disc
    assert result.group("track") == track
    assert result.remainder == remainder


@pytest.mark.parametrize("text", ["CD2", "Disc 2", "set2", "DISK 2"])
def test_disc_only_rule_is_case_insensitive(text: str) -> None:
    found = DISC_ONLY_RULE.pattern.search(text)

    assert found is not None
    assert found.group("disc") == "2"


def test_date_rules_extract_padded_fields() -> None:
    result = first_match(DATE_RULES, "1/2/2000 Fillmore")

    assert result is not None
    assert result.rule.extract is date_fields
    assert result.fields == {"year": "2000", "month": "01", "day": "02"}


def test_disc_track_rules_extract_named_groups() -> None:
    result = first_match(DISC_TRACK_RULES, "07 Tweezer")

    assert result is not None
    assert result.fields == {"track": "07"}
