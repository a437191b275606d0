import datetime as dt

import pytest

from fb_timestamps.dates import (
    DATE_GRAMMARS,
    format_canonical,
    parse_dutch_timestamp,
    parse_timestamp,
    parse_with_template,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("18 mei 2012 16:09", "2012:05:18 16:09:00"),
        ("1 januari 2010 0:00", "2010:01:01 00:00:00"),
        ("3 MAART 2015 7:05", "2015:03:03 07:05:00"),
        ("09 december 1999 23:59", "1999:12:09 23:59:00"),
    ],
)
def test_dutch_dates(text, expected):
    assert parse_dutch_timestamp(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "31 februari 2012 10:00",
        "31 april 2012 10:00",
        "18 mei 2012 25:00",
        "18 foo 2012 16:09",
        "18 May 2012 16:09",
        "123 mei 2012 16:09",
        "mei 2012 16:09",
    ],
)
def test_dutch_rejects_invalid_dates(text):
    assert parse_dutch_timestamp(text) is None


def test_dutch_ignores_trailing_seconds():
    assert parse_dutch_timestamp("18 mei 2012 16:09:33") == "2012:05:18 16:09:00"


@pytest.mark.parametrize("text", ["18 mei 2012 16:09u", "18 mei 2012 16:09pm", "18 mei 2012 16:09 uur"])
def test_dutch_accepts_trailing_text(text):
    assert parse_dutch_timestamp(text) == "2012:05:18 16:09:00"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("May 18, 2012 at 4:09PM", "2012:05:18 16:09:00"),
        ("May 18, 2012 4:09PM", "2012:05:18 16:09:00"),
        ("18 May 2012 16:09", "2012:05:18 16:09:00"),
        ("2012-05-18 16:09:00", "2012:05:18 16:09:00"),
        ("January 2, 2011 at 9:03AM", "2011:01:02 09:03:00"),
    ],
)
def test_english_dates(text, expected):
    assert parse_timestamp(text) == expected


def test_twelve_am_is_midnight():
    assert parse_timestamp("May 18, 2012 at 12:15AM") == "2012:05:18 00:15:00"


def test_twelve_pm_is_noon():
    assert parse_timestamp("May 18, 2012 at 12:15PM") == "2012:05:18 12:15:00"


def test_iso_like_keeps_seconds():
    assert parse_timestamp("2013-07-01 09:30:15") == "2013:07:01 09:30:15"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "Uploaded via mobile",
        "June 31, 2012 at 4:09PM",
        "31 June 2012 10:00",
        "2012-02-30 10:00:00",
        "31 februari 2012 10:00",
    ],
)
def test_unmatched_text_yields_none(text):
    assert parse_timestamp(text) is None


def test_surrounding_whitespace_is_trimmed():
    assert parse_timestamp("\n   18 mei 2012 16:09  \n") == "2012:05:18 16:09:00"


def test_dutch_grammar_is_tried_first():
    assert DATE_GRAMMARS[0] is parse_dutch_timestamp
    # Shared month names resolve through the Dutch table first.
    assert parse_timestamp("18 april 2012 16:09") == "2012:04:18 16:09:00"


def test_first_matching_grammar_wins():
    grammars = [lambda text: None, lambda text: "first", lambda text: "second"]
    assert parse_timestamp("anything", grammars) == "first"


def test_parse_with_template_requires_full_match():
    assert parse_with_template("%d %B %Y %H:%M", "18 May 2012 16:09 extra") is None


def test_format_canonical_is_fixed_width():
    assert format_canonical(dt.datetime(999, 1, 2, 3, 4, 5)) == "0999:01:02 03:04:05"
