"""Document — the root wrapper persisted in a saga file.

A document owns one root :class:`Node` plus the canvas it is drawn on
(``x`` by ``y`` abstract pixels, with ``padding``) and any named color
schemes.

Catenation
----------
``Document.catenate`` merges several documents into one:

- canvas ``x``, ``y`` and ``padding`` are the element-wise maximum,
- ``color_schemes`` are merged in input order, later names overriding earlier,
- the new root holds every input root's children, in input order (one level
  is flattened; the input roots' own name and styling are dropped).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from ..errors import AddToEvent, PathFail
from ..result import Result, err, ok
from ..settings import get_logger, load_settings
from .color import ColorScheme
from .event import Event
from .node import Node, Query

if TYPE_CHECKING:
    from saga.render.scene import Scene

log = get_logger("saga.document")


class Document(BaseModel):
    """A timeline tree together with its canvas and styling metadata."""

    x: float = Field(description="Canvas width in abstract pixels")
    y: float = Field(description="Canvas height in abstract pixels")
    padding: float = Field(default=0.0)
    color_schemes: dict[str, ColorScheme] = Field(default_factory=dict)
    data: Node = Field(default_factory=Node)

    @classmethod
    def blank(cls) -> Document:
        """A document with the configured default canvas and an empty root."""
        x, y, padding = load_settings().blank_canvas()
        return cls(x=x, y=y, padding=padding, data=Node())

    # ----- Editing -----------------------------------------------------------

    def query_mut(self, path: Sequence[int]) -> Result[Query, PathFail]:
        log.debug("query %s", ":".join(str(i) for i in path) or "(root)")
        return self.data.query(path)

    def add_event(self, path: Sequence[int], event: Event) -> Result[Node, PathFail | AddToEvent]:
        """Append ``event`` to the node at ``path`` and return that node."""
        found = self.query_mut(path)
        if found.is_err():
            return err(found.unwrap_err())
        target = found.unwrap()
        if isinstance(target, Event):
            return err(AddToEvent(path=tuple(path)))
        target.push(event)
        log.debug("added event %r under %s", event.name, tuple(path))
        return ok(target)

    @classmethod
    def catenate(cls, documents: Sequence[Document]) -> Document:
        if not documents:
            return cls.blank()
        merged = cls(
            x=max(doc.x for doc in documents),
            y=max(doc.y for doc in documents),
            padding=max(doc.padding for doc in documents),
        )
        for doc in documents:
            for name, scheme in doc.color_schemes.items():
                merged.color_schemes[name] = [color.model_copy() for color in scheme]
            for child in doc.data.children:
                merged.data.push(child.model_copy(deep=True))
        log.debug(
            "catenated %d documents into %d top-level values",
            len(documents),
            len(merged.data.children),
        )
        return merged

    # ----- Output ------------------------------------------------------------

    def print(self, verbose: bool = False) -> str:
        return self.data.print(0, verbose)

    def render(self) -> Scene:
        """Lay the tree out as vector primitives (see :mod:`saga.render.layout`)."""
        from saga.render.layout import render_document

        return render_document(self)


__all__ = ["Document"]
