"""Scene — backend-neutral 2D drawing primitives.

Coordinates are abstract pixels with the origin at the top-left corner and
the extents ``(width, height)`` of the document canvas.
"""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class Style:
    stroke: str
    stroke_width: float
    fill: str | None = None


@dataclass(frozen=True, slots=True)
class PathShape:
    """A polyline through ``points``; ``closed`` joins the last point to the first."""

    points: tuple[Point, ...]
    style: Style
    closed: bool = True


@dataclass(frozen=True, slots=True)
class Segment:
    start: Point
    end: Point
    style: Style


Shape = PathShape | Segment


@dataclass(slots=True)
class Scene:
    """An ordered list of shapes on a ``width`` x ``height`` canvas."""

    width: float
    height: float
    shapes: list[Shape] = field(default_factory=list)

    def add(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def is_empty(self) -> bool:
        return not self.shapes

    def __len__(self) -> int:
        return len(self.shapes)


__all__ = ["Point", "Style", "PathShape", "Segment", "Shape", "Scene"]
