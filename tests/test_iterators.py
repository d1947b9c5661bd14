"""Unit tests for the preorder walk and its projections."""

from __future__ import annotations

import pytest

from saga.core import iterators
from saga.core.contracts.color import Color
from saga.core.contracts.event import Event
from saga.core.contracts.node import Node
from saga.core.dates import Date


def test_walk_is_preorder(tree: Node) -> None:
    paths = [visit.path for visit in tree.walk()]
    assert paths == [
        (),
        (1,),
        (2,),
        (3,),
        (3, 1),
        (3, 1, 1),
        (3, 1, 2),
        (3, 2),
        (3, 3),
        (3, 4),
    ]


def test_event_order(tree: Node) -> None:
    names = [event.name for event in tree.iter_events()]
    assert names == [
        "First Event",
        "Second Event",
        "Third Event",
        "Fourth Event",
        "Fifth Event",
        "Sixth Event",
        "Seventh Event",
    ]


def test_node_streams_agree(tree: Node) -> None:
    nodes = list(tree.iter_nodes())
    assert list(tree.depth()) == [0, 1, 2]
    assert len(list(tree.transform_iter())) == len(nodes)


def test_transforms_compose_down_the_tree() -> None:
    leaf = Node()
    middle = Node.from_vec([leaf])
    middle.set_offset(3.0)
    middle.set_scale(0.5)
    root = Node.from_vec([middle])
    root.set_offset(1.0)
    root.set_scale(2.0)

    assert list(root.transform_iter()) == [(0.0, 1.0), (1.0, 2.0), (8.0, 1.0)]
    assert list(root.transform_iter(1.0, 3.0)) == [(1.0, 3.0), (6.0, 6.0), (54.0, 3.0)]


def test_event_visits_carry_parent_context() -> None:
    event = Event.new("deep", Date.from_stamps(0))
    inner = Node.from_vec([event])
    inner.set_offset(2.0)
    root = Node.from_vec([inner])

    (visit,) = list(iterators.event_visits(root))
    assert visit.value is event
    assert visit.path == (1, 1)
    assert visit.depth == 1
    assert (visit.offset, visit.scale) == (2.0, 1.0)


def test_color_is_inherited_until_overridden() -> None:
    red = Color.from_hex("#FF0000")
    blue = Color.from_hex("#0000FF")
    plain = Node.from_vec([Event.new("a", Date.from_stamps(0))])
    painted = Node.from_vec([Event.new("b", Date.from_stamps(1))])
    painted.color_override = blue
    root = Node.from_vec([plain, painted])
    root.color_override = red

    colors = {v.value.name: v.color for v in iterators.event_visits(root)}  # type: ignore[union-attr]
    assert colors == {"a": red, "b": blue}


def test_lines(tree: Node) -> None:
    lines = tree.lines(tree.range())
    assert len(lines) == 2
    root_line, sub_line = lines
    assert (root_line.start, root_line.end, root_line.interval) == (0.0, 1.0, None)
    assert sub_line.interval == 5.0
    assert sub_line.start == pytest.approx(0.08)
    assert sub_line.end == pytest.approx(0.32)


def test_lines_skip_nodes_without_events(tree: Node) -> None:
    tree.push(Node().with_line(1.0))
    assert len(tree.lines(tree.range())) == 2


def test_find_events_matches_names_and_descriptions(tree: Node) -> None:
    found = tree.find_events("fourth")
    assert [(path, event.name) for path, event in found] == [((3, 1, 2), "Fourth Event")]

    fifth = tree.query((3, 2)).unwrap()
    assert isinstance(fifth, Event)
    fifth.add_description("Crossing of the Rhine")
    assert [path for path, _ in tree.find_events("rhine")] == [(3, 2)]


def test_iterators_are_lazy(tree: Node) -> None:
    stream = tree.iter_events()
    first = next(stream)
    assert first.name == "First Event"
