"""Unit tests for date parsing, formatting and range arithmetic."""

from __future__ import annotations

from datetime import datetime

import pytest

from saga.core.dates import EMPTY_RANGE, Date
from saga.core.errors import DateParseError


@pytest.mark.parametrize(  # type: ignore[misc]
    "text",
    ["1/1/1990 0:0", "01/01/1990 00:00", " 1/1/1990 0:00 "],
)
def test_parse_instant_accepts_short_and_padded_fields(text: str) -> None:
    parsed = Date.parse(text)
    assert parsed.is_ok()
    assert parsed.unwrap() == Date(start=datetime(1990, 1, 1, 0, 0))


def test_parse_range_splits_on_first_dash() -> None:
    parsed = Date.parse("1/1/1990 0:0 - 1/1/1991 0:0").unwrap()
    assert parsed.start == datetime(1990, 1, 1)
    assert parsed.end == datetime(1991, 1, 1)
    assert parsed.is_range


@pytest.mark.parametrize(  # type: ignore[misc]
    "text",
    ["garbage", "", "32/01/1990 0:0", "1/1/1990", "1/1/1990 0:0 - later"],
)
def test_parse_rejects_non_dates(text: str) -> None:
    parsed = Date.parse(text)
    assert parsed.is_err()
    assert isinstance(parsed.unwrap_err(), DateParseError)
    assert parsed.unwrap_err().text == text


def test_parse_rejects_backwards_range() -> None:
    parsed = Date.parse("2/1/1990 0:0 - 1/1/1990 0:0")
    assert parsed.is_err()
    assert "before" in parsed.unwrap_err().reason


def test_format_is_canonical() -> None:
    assert Date.parse("1/2/1990 3:4").unwrap().format() == "01/02/1990 03:04"
    ranged = Date.parse("1/2/1990 3:4 - 5/6/1991 7:8").unwrap()
    assert str(ranged) == "01/02/1990 03:04 - 05/06/1991 07:08"


@pytest.mark.parametrize(  # type: ignore[misc]
    "text",
    ["31/12/1999 23:59", "08/12/1997 00:00 - 26/12/1997 00:00", "29/02/2000 12:30"],
)
def test_parse_format_round_trip(text: str) -> None:
    date = Date.parse(text).unwrap()
    assert Date.parse(date.format()).unwrap() == date


def test_stamps_are_zone_independent() -> None:
    start, end = Date.parse("01/12/1997 0:0 - 26/12/1997 0:0").unwrap().stamps()
    assert start == 880934400
    assert end == 883094400
    assert Date.parse("01/01/1970 0:0").unwrap().stamps() == (0, None)


def test_from_stamps_inverts_stamps() -> None:
    date = Date.parse("03/12/1997 10:15 - 04/12/1997 0:0").unwrap()
    assert Date.from_stamps(*date.stamps()) == date


def test_expand_range_with_instant_only_uses_start() -> None:
    instant = Date.from_stamps(100)
    assert instant.expand_range(EMPTY_RANGE) == (100, 100)
    assert instant.expand_range((50, 60)) == (50, 100)
    assert instant.expand_range((150, 200)) == (100, 200)


def test_expand_range_with_span_covers_both_ends() -> None:
    span = Date.from_stamps(100, 300)
    assert span.expand_range(EMPTY_RANGE) == (100, 300)
    assert span.expand_range((200, 250)) == (100, 300)
    assert span.expand_range((0, 1000)) == (0, 1000)
