"""Graph — a data series attached to a node.

Graphs are stored and round-tripped with the document; the renderer does
not draw them yet.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..dates import DateField
from .color import Color


class DrawType(str, Enum):
    SCATTER = "Scatter"
    LINE = "Line"
    LINE_AREA = "LineArea"


class Graph(BaseModel):
    """A series of ``(instant, value)`` samples with its own y-scale and color."""

    data: list[tuple[DateField, float]] = Field(default_factory=list)
    y_scale: float = Field(default=1.0)
    color: Color
    draw_type: DrawType = Field(default=DrawType.LINE)


__all__ = ["DrawType", "Graph"]
