"""Event — the named, dated leaf of a timeline tree."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from ..dates import Date, DateField
from ..errors import DescriptionIndexError, ValueKind
from ..result import Result, err, ok


class Event(BaseModel):
    """A single instant or span on the timeline, with free-text descriptions.

    Description indices are 0-based.
    """

    type: Literal["Event"] = Field(default="Event")

    name: str
    descriptions: list[str] = Field(default_factory=list)
    datetime: DateField

    @classmethod
    def new(cls, name: str, datetime: Date, descriptions: list[str] | None = None) -> Event:
        return cls(name=name, datetime=datetime, descriptions=list(descriptions or []))

    @property
    def kind(self) -> ValueKind:
        return ValueKind.EVENT

    # ----- Mutation ----------------------------------------------------------

    def set_name(self, name: str) -> None:
        self.name = name

    def set_dates(self, datetime: Date) -> None:
        self.datetime = datetime

    def add_description(self, text: str) -> None:
        self.descriptions.append(text)

    def change_description(self, index: int, text: str) -> Result[None, DescriptionIndexError]:
        """Replace description ``index``; out of range leaves the event untouched."""
        if not 0 <= index < len(self.descriptions):
            return err(DescriptionIndexError(index=index, length=len(self.descriptions)))
        self.descriptions[index] = text
        return ok(None)

    def delete_description(self, index: int) -> Result[None, DescriptionIndexError]:
        if not 0 <= index < len(self.descriptions):
            return err(DescriptionIndexError(index=index, length=len(self.descriptions)))
        del self.descriptions[index]
        return ok(None)

    # ----- Layout ------------------------------------------------------------

    def location(self, bounds: tuple[int, int]) -> tuple[float, float | None]:
        """Map this event into ``[0, 1]`` relative to ``bounds = (t0, t1)``.

        Undefined for ``t0 == t1``; callers check the width first.
        """
        t0, t1 = bounds
        width = float(t1 - t0)
        start, end = self.datetime.stamps()
        u = (start - t0) / width
        v = None if end is None else (end - t0) / width
        return (u, v)

    # ----- Presentation ------------------------------------------------------

    def print(self, depth: int = 0, verbose: bool = False) -> str:
        pad = "  " * depth
        lines = [f"{pad}Event: {self.name}, [{self.datetime.format()}]"]
        if verbose:
            lines.extend(f"{pad}  - {desc}" for desc in self.descriptions)
        return "\n".join(lines)


__all__ = ["Event"]
