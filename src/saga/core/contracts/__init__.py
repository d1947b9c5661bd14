"""Timeline document contracts (Pydantic v2 models).

These models are both the in-memory tree and the on-disk schema: a document
file is exactly ``Document.model_dump_json()``.
"""

from __future__ import annotations

from .color import Color, ColorScheme
from .document import Document
from .event import Event
from .graph import DrawType, Graph
from .node import LineSpec, Node, Query, Value

__all__ = [
    "Color",
    "ColorScheme",
    "Document",
    "DrawType",
    "Event",
    "Graph",
    "LineSpec",
    "Node",
    "Query",
    "Value",
]
