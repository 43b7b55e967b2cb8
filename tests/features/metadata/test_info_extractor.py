"""Tests for ``InfoExtractor`` filename, folder and tag heuristics."""

from __future__ import annotations

import pytest

from audiocc.features.metadata import InfoExtractor, ProbedTags
from audiocc.shared.info import Info


@pytest.fixture
def extractor() -> InfoExtractor:
    return InfoExtractor(current_year=2026)


@pytest.mark.parametrize(
    ("name", "date", "remainder"),
    [
        ("2000-01-02 Show", ("2000", "01", "02"), " Show"),
        ("2000-1-2 Show", ("2000", "01", "02"), " Show"),
        ("2000.01.01-03 Show", ("2000", "01", "01"), " Show"),
        ("01.02.2000 Show", ("2000", "01", "02"), " Show"),
        ("03-30-69 Show", ("1969", "03", "30"), " Show"),
        ("98-08-23 Show", ("1998", "08", "23"), " Show"),
    ],
)
def test_extract_from_filename_dates(
    extractor: InfoExtractor, name: str, date: tuple[str, str, str], remainder: str
) -> None:
    info, rest = extractor.extract_from_filename(name)

    assert (info.year, info.month, info.day) == date
    assert rest == remainder
    assert info.title == "Show"


@pytest.mark.parametrize(
    ("name", "date", "disc", "track", "title"),
    [
        ("ph990710d1_01_Wilson", ("1999", "07", "10"), "1", "01", "Wilson"),
        ("sci160318d1_01_Shine", ("2016", "03", "18"), "1", "01", "Shine"),
    ],
)
def test_extract_from_filename_show_codes(
    extractor: InfoExtractor,
    name: str,
    date: tuple[str, str, str],
    disc: str,
    track: str,
    title: str,
) -> None:
    info, _ = extractor.extract_from_filename(name)

    assert (info.year, info.month, info.day) == date
    assert (info.disc, info.track, info.title) == (disc, track, title)


def test_century_boundary_at_current_year() -> None:
    info, _ = InfoExtractor(current_year=2026).extract_from_filename("12.25.26 Xmas")
    assert info.year == "2026"

    info, _ = InfoExtractor(current_year=2025).extract_from_filename("12.25.26 Xmas")
    assert info.year == "1926"


def test_invalid_date_is_skipped(extractor: InfoExtractor) -> None:
    info = Info()

    rest = extractor.match_date("2000-13-45", info)

    assert rest == "2000-13-45"
    assert info.year == ""


def test_extract_from_filename_disc_track(extractor: InfoExtractor) -> None:
    info, _ = extractor.extract_from_filename("1-01 Intro")

    assert (info.disc, info.track, info.title) == ("1", "01", "Intro")
    assert info.year == ""


def test_extract_from_filename_track_only(extractor: InfoExtractor) -> None:
    info, _ = extractor.extract_from_filename("07 - Song")

    assert (info.disc, info.track, info.title) == ("", "07", "Song")


def test_extract_from_path_fills_from_innermost(extractor: InfoExtractor) -> None:
    info = extractor.extract_from_path("Phish/1999/1999-07-10 Camden")

    assert (info.year, info.month, info.day) == ("1999", "07", "10")
    assert info.album == "Camden"


def test_extract_from_path_closer_segment_wins(extractor: InfoExtractor) -> None:
    info = extractor.extract_from_path("2001 - Outer/2000-01-01 Inner")

    assert info.album == "Inner"
    assert info.year == "2000"


def test_filename_date_wins_over_folder_date(extractor: InfoExtractor) -> None:
    info, _ = extractor.extract_from_filename("2000-01-01 Song")

    _ = extractor.extract_from_path("1999-12-31 Show", info)

    assert (info.year, info.month, info.day) == ("2000", "01", "01")
    assert info.album == "Show"


def test_disc_marker_in_folder_only_fills_empty_disc(extractor: InfoExtractor) -> None:
    info = Info(disc="1")
    _ = extractor.extract_from_path_segment("Disc 2", info)
    assert info.disc == "1"

    info = Info()
    _ = extractor.extract_from_path_segment("Disc 2", info)
    assert info.disc == "2"


def test_extract_from_album_year_only(extractor: InfoExtractor) -> None:
    info = extractor.extract_from_album("1995 - Record")

    assert info.year == "1995"
    assert info.month == ""
    assert info.album == "Record"


def test_info_from_tags(extractor: InfoExtractor) -> None:
    tags = ProbedTags(
        album="2000-01-01 Show",
        artist=" Phish ",
        title="Wilson (1)",
        track="3/12",
        disc="1/2",
    )

    info = extractor.info_from_tags(tags)

    assert (info.year, info.month, info.day) == ("2000", "01", "01")
    assert info.album == "Show"
    assert info.artist == "Phish"
    assert info.title == "Wilson"
    assert info.track == "03"
    assert info.disc == "1"


def test_info_from_tags_uses_date_tag(extractor: InfoExtractor) -> None:
    full = extractor.info_from_tags(ProbedTags(album="Show", date="1999-07-10"))
    assert (full.year, full.month, full.day) == ("1999", "07", "10")

    year_only = extractor.info_from_tags(ProbedTags(album="Show", date="2003"))
    assert (year_only.year, year_only.month) == ("2003", "")
