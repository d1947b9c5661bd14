"""Evaluation of edit commands against nodes and events."""

from __future__ import annotations

import pytest

from saga.core.commands import (
    Command,
    DateEdit,
    DescAdd,
    DescEdit,
    DescSub,
    Exit,
    Help,
    LineEdit,
    NameEdit,
    NameSub,
    Offset,
    Scale,
)
from saga.core.contracts.event import Event
from saga.core.contracts.node import LineSpec, Node
from saga.core.dates import Date
from saga.core.errors import DescriptionIndexError, NotApplicable, ValueKind

DATE = Date.parse("01/01/2000 00:00").unwrap()


@pytest.fixture  # type: ignore[misc]
def event() -> Event:
    return Event.new("Launch", DATE, descriptions=["first", "second"])


@pytest.fixture  # type: ignore[misc]
def node() -> Node:
    return Node.new("Program")


# ---- Applicability -------------------------------------------------------------


@pytest.mark.parametrize(  # type: ignore[misc]
    "command",
    [NameSub(), Offset(value=2.0), Scale(value=2.0), LineEdit(enabled=True), LineEdit(enabled=False)],
)
def test_node_only_commands_reject_events(event: Event, command: Command) -> None:
    before = event.model_copy(deep=True)
    result = command.eval(event)
    assert result.unwrap_err() == NotApplicable(kind=ValueKind.EVENT, command=command)
    assert event == before


@pytest.mark.parametrize(  # type: ignore[misc]
    "command",
    [
        DescAdd(text="x"),
        DescSub(index=0),
        DescEdit(index=0, text="x"),
        DateEdit(date=DATE),
        Exit(),
        Help(),
    ],
)
def test_event_only_commands_reject_nodes(node: Node, command: Command) -> None:
    before = node.model_copy(deep=True)
    result = command.eval(node)
    assert result.unwrap_err() == NotApplicable(kind=ValueKind.NODE, command=command)
    assert node == before


def test_not_applicable_message() -> None:
    failure = NotApplicable(kind=ValueKind.EVENT, command=NameSub())
    assert str(failure) == "'-name' does not apply to Event targets"
    assert failure.category == "Evaluation"


# ---- Names ----------------------------------------------------------------------


def test_name_edit_on_node_sets_and_clears(node: Node) -> None:
    assert NameEdit(name="Renamed").eval(node).is_ok()
    assert node.name == "Renamed"
    assert NameEdit(name=None).eval(node).is_ok()
    assert node.name is None


def test_name_sub_clears_node_name(node: Node) -> None:
    assert NameSub().eval(node).is_ok()
    assert NameSub().eval(node).is_ok()
    assert node.name is None


def test_name_edit_on_event(event: Event) -> None:
    assert NameEdit(name="Landing").eval(event).is_ok()
    assert event.name == "Landing"
    assert NameEdit(name=None).eval(event).is_err()
    assert event.name == "Landing"


# ---- Node layout ------------------------------------------------------------------


def test_layout_commands(node: Node) -> None:
    Offset(value=-3.5).eval(node)
    Scale(value=0.25).eval(node)
    assert (node.offset, node.y_scale) == (-3.5, 0.25)

    LineEdit(enabled=True, interval=7.0).eval(node)
    assert node.line == LineSpec(interval=7.0)
    LineEdit(enabled=True).eval(node)
    assert node.line == LineSpec(interval=None)
    LineEdit(enabled=False).eval(node)
    assert node.line is None


def test_node_setters_are_idempotent(node: Node) -> None:
    for command in (Offset(value=1.0), Scale(value=2.0), LineEdit(enabled=True, interval=3.0)):
        command.eval(node)
        once = node.model_copy(deep=True)
        command.eval(node)
        assert node == once


# ---- Descriptions -----------------------------------------------------------------


def test_desc_add_appends(event: Event) -> None:
    assert DescAdd(text="third").eval(event).is_ok()
    assert event.descriptions == ["first", "second", "third"]


def test_desc_sub_removes_by_zero_based_index(event: Event) -> None:
    assert DescSub(index=0).eval(event).is_ok()
    assert event.descriptions == ["second"]


def test_desc_edit_replaces(event: Event) -> None:
    assert DescEdit(index=1, text="2nd").eval(event).is_ok()
    assert event.descriptions == ["first", "2nd"]


@pytest.mark.parametrize(  # type: ignore[misc]
    "command",
    [DescSub(index=2), DescEdit(index=2, text="x"), DescEdit(index=9, text=None)],
)
def test_description_index_out_of_range(event: Event, command: Command) -> None:
    result = command.eval(event, editor=lambda text: "never used")
    assert result.unwrap_err() == DescriptionIndexError(index=command.index, length=2)  # type: ignore[attr-defined]
    assert event.descriptions == ["first", "second"]


def test_date_edit(event: Event) -> None:
    span = Date.parse("01/01/2000 00:00 - 02/01/2000 00:00").unwrap()
    assert DateEdit(date=span).eval(event).is_ok()
    assert event.datetime == span


# ---- Editor hook --------------------------------------------------------------------


def test_desc_add_without_text_uses_editor(event: Event) -> None:
    seen: list[str] = []

    def editor(initial: str) -> str | None:
        seen.append(initial)
        return "  typed in editor \n"

    assert DescAdd(text=None).eval(event, editor=editor).is_ok()
    assert seen == [""]
    assert event.descriptions[-1] == "typed in editor"


def test_desc_edit_without_text_starts_from_current(event: Event) -> None:
    seen: list[str] = []

    def editor(initial: str) -> str | None:
        seen.append(initial)
        return initial.upper()

    assert DescEdit(index=1, text=None).eval(event, editor=editor).is_ok()
    assert seen == ["second"]
    assert event.descriptions == ["first", "SECOND"]


@pytest.mark.parametrize("returned", [None, "", "   "])  # type: ignore[misc]
def test_aborted_editor_changes_nothing(event: Event, returned: str | None) -> None:
    assert DescAdd(text=None).eval(event, editor=lambda _: returned).is_ok()
    assert DescEdit(index=0, text=None).eval(event, editor=lambda _: returned).is_ok()
    assert event.descriptions == ["first", "second"]


def test_missing_editor_changes_nothing(event: Event) -> None:
    assert DescAdd(text=None).eval(event).is_ok()
    assert event.descriptions == ["first", "second"]
