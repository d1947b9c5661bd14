"""Layout: turn a document's tree into scene primitives.

Each event becomes one shape. Its horizontal extent is its position inside
the global date range of the tree, scaled to the canvas width. Its vertical
position comes from the layout context of its enclosing node::

    y_top = offset * scale * canvas_height * depth + 0.1 * canvas_height

where ``(offset, scale)`` is the transform the parent hands down and
``depth`` is the parent's depth. Spans are drawn as closed rectangles of
height ``0.2 * canvas_height``; instants as a vertical stroke of the same
height. Node lines are appended last, as thick horizontal strokes.

A tree without events, or whose events all share one instant, renders to an
empty scene.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from saga.core.contracts.event import Event
from saga.core.iterators import event_visits
from saga.core.settings import get_logger

from .scene import PathShape, Scene, Segment, Style

if TYPE_CHECKING:
    from saga.core.contracts.document import Document

log = get_logger("saga.render")

EVENT_FILL = "#C3B2A4"
EVENT_STROKE = "#2E3D50"
EVENT_STROKE_WIDTH = 2.0
LINE_STROKE = "#000000"
LINE_STROKE_WIDTH = 5.0

SLIDE_RATIO = 0.1
HEIGHT_RATIO = 0.2


def render_document(doc: Document) -> Scene:
    """Lay out ``doc`` and return the resulting scene."""
    scene = Scene(width=doc.x, height=doc.y)
    root = doc.data
    if root.is_empty():
        log.debug("nothing to render: no events")
        return scene
    bounds = root.range()
    if bounds[1] - bounds[0] == 0:
        log.debug("nothing to render: zero-width range")
        return scene

    y_slide = SLIDE_RATIO * doc.y
    height = HEIGHT_RATIO * doc.y

    for visit in event_visits(root):
        event = cast(Event, visit.value)
        u, v = event.location(bounds)
        x_start = u * doc.x
        y_top = visit.offset * visit.scale * doc.y * visit.depth + y_slide
        style = Style(
            stroke=EVENT_STROKE,
            stroke_width=EVENT_STROKE_WIDTH,
            fill=visit.color.hex() if visit.color is not None else EVENT_FILL,
        )
        if v is not None:
            x_end = v * doc.x
            corners = (
                (x_start, y_top),
                (x_end, y_top),
                (x_end, y_top + height),
                (x_start, y_top + height),
            )
            scene.add(PathShape(points=corners, style=style, closed=True))
        else:
            scene.add(Segment(start=(x_start, y_top), end=(x_start, y_top + height), style=style))

    line_style = Style(stroke=LINE_STROKE, stroke_width=LINE_STROKE_WIDTH)
    for line in root.lines(bounds):
        y = line.y * doc.y + y_slide
        scene.add(Segment(start=(line.start * doc.x, y), end=(line.end * doc.x, y), style=line_style))

    log.debug("rendered %d shapes", len(scene))
    return scene


__all__ = ["render_document"]
