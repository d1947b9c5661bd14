"""Preorder projections of a timeline tree.

Everything here is built on :func:`walk`, a single fused preorder traversal
that yields one :class:`Visit` per node *and* per event, carrying the path,
depth, inherited ``(offset, scale)`` transform and effective color with it.
The public iterators are filters over that one walk, so the event stream,
the per-node depth stream and the per-node transform stream always agree on
order and length.

Transforms
----------
A node is visited with the ``(offset, scale)`` it inherited from its parent.
Its children inherit ``((offset + node.offset) * scale, node.y_scale * scale)``.
An event is visited with the depth of its parent node and the transform the
parent hands to its children.

All iterators are lazy and single pass; they reference the tree, they do not
copy it.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .contracts.color import Color
from .contracts.event import Event

if TYPE_CHECKING:
    from .contracts.node import Node


@dataclass(frozen=True, slots=True)
class Visit:
    """One stop of the preorder walk."""

    value: Node | Event
    path: tuple[int, ...]
    depth: int
    offset: float
    scale: float
    color: Color | None

    @property
    def is_event(self) -> bool:
        return isinstance(self.value, Event)


@dataclass(frozen=True, slots=True)
class Line:
    """A horizontal rule for a node, in unit coordinates.

    ``start``/``end`` are fractions of the canvas width, ``y`` a fraction of
    its height. ``interval`` is the tick spacing, if any.
    """

    start: float
    end: float
    interval: float | None
    y: float


def walk(root: Node, offset: float = 0.0, scale: float = 1.0) -> Iterator[Visit]:
    """Yield every node and event under ``root`` (inclusive) in preorder."""
    yield from _walk(root, (), 0, offset, scale, root.color_override)


def _walk(
    node: Node,
    path: tuple[int, ...],
    depth: int,
    offset: float,
    scale: float,
    color: Color | None,
) -> Iterator[Visit]:
    yield Visit(node, path, depth, offset, scale, color)
    child_offset = (offset + node.offset) * scale
    child_scale = node.y_scale * scale
    for index, child in enumerate(node.children, start=1):
        child_path = (*path, index)
        if isinstance(child, Event):
            yield Visit(child, child_path, depth, child_offset, child_scale, color)
        else:
            child_color = child.color_override if child.color_override is not None else color
            yield from _walk(child, child_path, depth + 1, child_offset, child_scale, child_color)


# ---- Projections -------------------------------------------------------------


def iter_events(root: Node) -> Iterator[Event]:
    for visit in walk(root):
        if isinstance(visit.value, Event):
            yield visit.value


def iter_nodes(root: Node) -> Iterator[Node]:
    for visit in walk(root):
        if not isinstance(visit.value, Event):
            yield visit.value


def depths(root: Node) -> Iterator[int]:
    """One depth per node; the root is 0."""
    return (visit.depth for visit in walk(root) if not visit.is_event)


def transforms(root: Node, offset: float = 0.0, scale: float = 1.0) -> Iterator[tuple[float, float]]:
    """One inherited ``(offset, scale)`` pair per node."""
    return ((v.offset, v.scale) for v in walk(root, offset, scale) if not v.is_event)


def event_visits(root: Node) -> Iterator[Visit]:
    """Event visits only, each with its enclosing layout context."""
    return (visit for visit in walk(root) if visit.is_event)


def lines(root: Node, bounds: tuple[int, int]) -> Iterator[Line]:
    """One :class:`Line` per node that has a line and a defined location."""
    for visit in walk(root):
        node = visit.value
        if isinstance(node, Event) or node.line is None:
            continue
        location = node.location(bounds)
        if location is None:
            continue
        start, end = location
        yield Line(start, end, node.line.interval, visit.offset * visit.scale * visit.depth)


def find_events(root: Node, pattern: str | re.Pattern[str]) -> Iterator[tuple[tuple[int, ...], Event]]:
    """Yield ``(path, event)`` for events whose name or descriptions match."""
    regex = re.compile(pattern, re.IGNORECASE) if isinstance(pattern, str) else pattern
    for visit in walk(root):
        event = visit.value
        if not isinstance(event, Event):
            continue
        if regex.search(event.name) or any(regex.search(d) for d in event.descriptions):
            yield visit.path, event


__all__ = [
    "Visit",
    "Line",
    "walk",
    "iter_events",
    "iter_nodes",
    "depths",
    "transforms",
    "event_visits",
    "lines",
    "find_events",
]
