"""Unit tests for the `Event` leaf model."""

from __future__ import annotations

import pytest

from saga.core.contracts.event import Event
from saga.core.dates import Date
from saga.core.errors import DescriptionIndexError, ValueKind


@pytest.fixture  # type: ignore[misc]
def event() -> Event:
    return Event.new(
        "Treaty",
        Date.parse("10/02/1947 12:00").unwrap(),
        descriptions=["signed", "ratified"],
    )


def test_event_kind_and_tag(event: Event) -> None:
    assert event.kind is ValueKind.EVENT
    assert event.model_dump()["type"] == "Event"


def test_change_description_in_range(event: Event) -> None:
    assert event.change_description(1, "ratified later").is_ok()
    assert event.descriptions == ["signed", "ratified later"]


def test_change_description_out_of_range_leaves_event_untouched(event: Event) -> None:
    result = event.change_description(2, "nope")
    assert result.unwrap_err() == DescriptionIndexError(index=2, length=2)
    assert event.descriptions == ["signed", "ratified"]


def test_delete_description(event: Event) -> None:
    assert event.delete_description(0).is_ok()
    assert event.descriptions == ["ratified"]
    assert event.delete_description(5).is_err()
    assert event.descriptions == ["ratified"]


def test_location_maps_into_unit_interval() -> None:
    span = Event.new("span", Date.from_stamps(150, 200))
    assert span.location((100, 300)) == (0.25, 0.5)
    instant = Event.new("instant", Date.from_stamps(300))
    assert instant.location((100, 300)) == (1.0, None)


def test_print_terse_and_verbose(event: Event) -> None:
    assert event.print(1) == "  Event: Treaty, [10/02/1947 12:00]"
    assert event.print(0, verbose=True).splitlines() == [
        "Event: Treaty, [10/02/1947 12:00]",
        "  - signed",
        "  - ratified",
    ]


def test_datetime_serializes_to_canonical_text(event: Event) -> None:
    dumped = event.model_dump(mode="json")
    assert dumped["datetime"] == "10/02/1947 12:00"
    assert Event.model_validate(dumped) == event
