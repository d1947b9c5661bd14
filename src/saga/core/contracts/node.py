"""Node — the recursive interior of a timeline tree.

A node owns an ordered list of child values (``Event | Node``, discriminated
on the ``"type"`` key exactly as it appears on disk) plus the presentation
state it contributes to its subtree: an additive ``offset``, a multiplicative
``y_scale``, an optional horizontal ``line`` and optional style overrides.

Addressing
----------
Paths are 1-based tuples of child indices. Every step but the last must land
on a node; the last may land on a node or an event. ``()`` is the node itself.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from .. import iterators
from ..dates import EMPTY_RANGE
from ..errors import PathFail, ValueKind
from ..result import Result, err, ok
from .color import Color
from .event import Event
from .graph import Graph


class LineSpec(BaseModel):
    """A node's horizontal rule; ``interval`` is the optional tick spacing.

    A node without a line stores ``line = None``, which keeps the three
    states (off, on, on with ticks) distinct on disk.
    """

    interval: float | None = Field(default=None)

    def describe(self) -> str:
        return "on" if self.interval is None else f"on, ticks every {self.interval}"


class Node(BaseModel):
    """An ordered group of events and sub-nodes."""

    type: Literal["Node"] = Field(default="Node")

    name: str | None = Field(default=None)
    style_override: str | None = Field(default=None)
    color_override: Color | None = Field(default=None)
    offset: float = Field(default=0.0, description="Additive y-displacement for descendants")
    y_scale: float = Field(default=1.0, description="Multiplicative y-scale for descendants")
    line: LineSpec | None = Field(default=None)
    graphs: list[Graph] = Field(default_factory=list)
    children: list[Value] = Field(default_factory=list)

    # ----- Construction ------------------------------------------------------

    @classmethod
    def new(cls, name: str | None, children: Sequence[Event | Node] = ()) -> Node:
        return cls(name=name, children=list(children))

    @classmethod
    def from_vec(cls, children: Sequence[Event | Node]) -> Node:
        """Wrap ``children`` in a new anonymous node."""
        return cls(children=list(children))

    def push(self, value: Event | Node) -> None:
        self.children.append(value)

    def with_line(self, interval: float | None = None) -> Node:
        """Builder helper: turn the line on and return ``self``."""
        self.line = LineSpec(interval=interval)
        return self

    @property
    def kind(self) -> ValueKind:
        return ValueKind.NODE

    # ----- Setters -----------------------------------------------------------

    def set_name(self, name: str | None) -> None:
        self.name = name

    def set_offset(self, offset: float) -> None:
        self.offset = offset

    def set_scale(self, scale: float) -> None:
        self.y_scale = scale

    def set_line(self, line: LineSpec | None) -> None:
        self.line = line

    # ----- Queries -----------------------------------------------------------

    def query(self, path: Sequence[int]) -> Result[Query, PathFail]:
        """Resolve a 1-based path to the node or event it addresses."""
        full = tuple(path)
        current: Node = self
        for step, index in enumerate(full):
            remaining = len(full) - step
            if not 1 <= index <= len(current.children):
                return err(PathFail(path=full, remaining=remaining))
            child = current.children[index - 1]
            if isinstance(child, Event):
                if remaining == 1:
                    return ok(child)
                return err(PathFail(path=full, remaining=remaining - 1))
            current = child
        return ok(current)

    # ----- Iteration ---------------------------------------------------------

    def walk(self, offset: float = 0.0, scale: float = 1.0) -> Iterator[iterators.Visit]:
        return iterators.walk(self, offset, scale)

    def iter_events(self) -> Iterator[Event]:
        return iterators.iter_events(self)

    def iter_nodes(self) -> Iterator[Node]:
        return iterators.iter_nodes(self)

    def depth(self) -> Iterator[int]:
        return iterators.depths(self)

    def transform_iter(self, offset: float = 0.0, scale: float = 1.0) -> Iterator[tuple[float, float]]:
        return iterators.transforms(self, offset, scale)

    def lines(self, bounds: tuple[int, int]) -> list[iterators.Line]:
        return list(iterators.lines(self, bounds))

    def find_events(self, pattern: str | re.Pattern[str]) -> Iterator[tuple[tuple[int, ...], Event]]:
        return iterators.find_events(self, pattern)

    def count_events(self) -> int:
        return sum(1 for _ in self.iter_events())

    def is_empty(self) -> bool:
        """True when the subtree holds no events at all."""
        return next(self.iter_events(), None) is None

    def range(self) -> tuple[int, int]:
        """Smallest ``(start, end)`` epoch pair covering every event.

        An empty subtree yields ``(INT64_MAX, INT64_MIN)``.
        """
        bounds = EMPTY_RANGE
        for event in self.iter_events():
            bounds = event.datetime.expand_range(bounds)
        return bounds

    def location(self, bounds: tuple[int, int]) -> tuple[float, float] | None:
        """This node's own span as fractions of ``bounds``.

        The span covers only this node's events, so a node line is drawn
        under its own events rather than across the whole canvas, and a node
        without events has no location (and no line).
        """
        t0, t1 = bounds
        if t1 == t0 or self.is_empty():
            return None
        start, end = self.range()
        width = float(t1 - t0)
        return ((start - t0) / width, (end - t0) / width)

    # ----- Presentation ------------------------------------------------------

    def print(self, depth: int = 0, verbose: bool = False) -> str:
        """Render the subtree as an indented outline."""
        pad = "  " * depth
        lines = [f"{pad}Node: {self.name if self.name is not None else '(No name)'}"]
        if verbose:
            lines.append(f"{pad}  Offset:  {self.offset}")
            lines.append(f"{pad}  Scaling: {self.y_scale}")
            if self.line is not None:
                lines.append(f"{pad}  Line: {self.line.describe()}")
        lines.extend(child.print(depth + 1, verbose) for child in self.children)
        return "\n".join(lines)


Value = Annotated[Event | Node, Field(discriminator="type")]
Query = Node | Event

Node.model_rebuild()

__all__ = ["LineSpec", "Node", "Value", "Query"]
