"""Event dates: a single wall-clock instant or an instant-pair range.

Canonical text form is ``%d/%m/%Y %H:%M`` for an instant and
``"<start> - <end>"`` for a range. ``strptime`` accepts one- or two-digit
day, month, hour and minute, so ``"1/1/1990 0:0"`` and ``"01/01/1990 00:00"``
parse to the same instant.

Dates are naive and kept at minute resolution. Epoch stamps are computed as
if the wall-clock value were UTC, so ranges do not depend on the host zone.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Annotated

from pydantic import PlainSerializer, PlainValidator

from .errors import DateParseError
from .result import Result, err, ok

FORMAT = "%d/%m/%Y %H:%M"

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

# An empty fold over `expand_range` starts (and stays) here.
EMPTY_RANGE: tuple[int, int] = (INT64_MAX, INT64_MIN)


def _parse_instant(text: str) -> datetime:
    return datetime.strptime(text, FORMAT)


def _stamp(moment: datetime) -> int:
    return int(moment.replace(tzinfo=UTC).timestamp())


@dataclass(frozen=True, slots=True)
class Date:
    """A point in time (``end is None``) or a closed span ``start <= end``."""

    start: datetime
    end: datetime | None = None

    @classmethod
    def parse(cls, text: str) -> Result[Date, DateParseError]:
        """Parse the canonical form; a ``-`` splits start from end once."""
        raw = text.strip()
        try:
            if "-" in raw:
                left, right = raw.split("-", 1)
                start = _parse_instant(left.strip())
                end = _parse_instant(right.strip())
            else:
                start, end = _parse_instant(raw), None
        except ValueError as exc:
            return err(DateParseError(text=text, reason=str(exc)))
        if end is not None and end < start:
            return err(DateParseError(text=text, reason="range ends before it starts"))
        return ok(cls(start=start, end=end))

    @classmethod
    def from_stamps(cls, start: int, end: int | None = None) -> Date:
        """Build a date back from epoch seconds (inverse of :meth:`stamps`)."""

        def moment(stamp: int) -> datetime:
            return datetime.fromtimestamp(stamp, UTC).replace(tzinfo=None)

        return cls(start=moment(start), end=None if end is None else moment(end))

    @property
    def is_range(self) -> bool:
        return self.end is not None

    def format(self) -> str:
        """Return the canonical text form."""
        left = self.start.strftime(FORMAT)
        if self.end is None:
            return left
        return f"{left} - {self.end.strftime(FORMAT)}"

    def stamps(self) -> tuple[int, int | None]:
        """Return ``(start, end)`` as epoch seconds; ``end`` is None for instants."""
        return (_stamp(self.start), None if self.end is None else _stamp(self.end))

    def expand_range(self, bounds: tuple[int, int]) -> tuple[int, int]:
        """Grow ``(lo, hi)`` so it also covers this date.

        An instant only contributes its start; a missing end neither lowers
        ``lo`` nor raises ``hi``.
        """
        lo, hi = bounds
        start, end = self.stamps()
        if end is None:
            return (min(lo, start), max(hi, start))
        return (min(lo, start, end), max(hi, start, end))

    def __str__(self) -> str:
        return self.format()


def _coerce(value: object) -> Date:
    if isinstance(value, Date):
        return value
    if isinstance(value, str):
        return Date.parse(value).map_err(lambda e: ValueError(str(e))).unwrap_or_raise()
    raise ValueError(f"expected a date string, got {type(value).__name__}")


# Field type for pydantic models: read from and written as the canonical string.
DateField = Annotated[
    Date,
    PlainValidator(_coerce),
    PlainSerializer(lambda d: d.format(), return_type=str),
]

__all__ = ["FORMAT", "EMPTY_RANGE", "INT64_MAX", "INT64_MIN", "Date", "DateField"]
