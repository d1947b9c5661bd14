"""Error payloads shared by the tree, the command language and the CLI.

Every error is an exception class rooted at :class:`SagaError`. They are plain
dataclasses underneath, so two errors with the same fields compare equal,
which keeps ``Result`` values easy to assert on in tests.

Each class carries a ``category`` label; the CLI prints it in front of the
message (``"Path Find Error: ..."``) and exits non-zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from saga.core.commands import Command


class ValueKind(str, Enum):
    """Which side of the ``Event | Node`` union a command was evaluated on."""

    NODE = "Node"
    EVENT = "Event"


class SagaError(Exception):
    """Base class for every failure surfaced by the package."""

    category: ClassVar[str] = "Saga"


# ---- Storage -----------------------------------------------------------------


@dataclass(eq=True)
class DocumentReadError(SagaError):
    """The document file could not be read."""

    category: ClassVar[str] = "I/O"
    path: str
    reason: str

    def __str__(self) -> str:
        return f"cannot read {self.path}: {self.reason}"


@dataclass(eq=True)
class DocumentWriteError(SagaError):
    """The document (or its rendering) could not be written."""

    category: ClassVar[str] = "I/O"
    path: str
    reason: str

    def __str__(self) -> str:
        return f"cannot write {self.path}: {self.reason}"


@dataclass(eq=True)
class NotADocument(SagaError):
    """The file was read but does not hold a valid timeline document."""

    category: ClassVar[str] = "Deserialization"
    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path} is not a saga document: {self.reason}"


@dataclass(eq=True)
class SerializeFail(SagaError):
    category: ClassVar[str] = "Serialization"
    reason: str

    def __str__(self) -> str:
        return f"cannot serialize document: {self.reason}"


# ---- Paths -------------------------------------------------------------------


@dataclass(eq=True)
class PathParseError(SagaError):
    """A colon-separated path contained a segment that is not an unsigned int."""

    category: ClassVar[str] = "Path Parse"
    text: str
    segment: str

    def __str__(self) -> str:
        return f"invalid path {self.text!r}: {self.segment!r} is not an unsigned integer"


@dataclass(eq=True)
class PathFail(SagaError):
    """The path is well formed but the tree has nothing at that address.

    ``remaining`` is the number of path steps that were still unresolved when
    the lookup stopped.
    """

    category: ClassVar[str] = "Path Find"
    path: tuple[int, ...]
    remaining: int

    def __str__(self) -> str:
        shown = ":".join(str(i) for i in self.path) or "(root)"
        return f"nothing at path {shown} ({self.remaining} step(s) unresolved)"


@dataclass(eq=True)
class AddToEvent(SagaError):
    """Events can only be added under a node."""

    category: ClassVar[str] = "Path Find"
    path: tuple[int, ...]

    def __str__(self) -> str:
        shown = ":".join(str(i) for i in self.path)
        return f"path {shown} addresses an event; events can only be added to nodes"


# ---- Dates -------------------------------------------------------------------


@dataclass(eq=True)
class DateParseError(SagaError):
    """Text that is neither ``%d/%m/%Y %H:%M`` nor a ``start - end`` pair of them."""

    category: ClassVar[str] = "Date Parse"
    text: str
    reason: str

    def __str__(self) -> str:
        return f"not a date {self.text!r}: {self.reason}"


# ---- Command parsing ---------------------------------------------------------


class ParseError(SagaError):
    """Base class for failures of the edit command parser."""

    category: ClassVar[str] = "Command Parse"


@dataclass(eq=True)
class MissingCommand(ParseError):
    def __str__(self) -> str:
        return "no command given"


@dataclass(eq=True)
class MissingArgument(ParseError):
    head: str

    def __str__(self) -> str:
        return f"{self.head!r} is missing its argument"


@dataclass(eq=True)
class ExtraArgument(ParseError):
    head: str
    rest: str

    def __str__(self) -> str:
        return f"{self.head!r} does not take {self.rest!r}"


@dataclass(eq=True)
class UnknownCommand(ParseError):
    head: str
    rest: str | None = None

    def __str__(self) -> str:
        return f"unknown command {self.head!r} (try 'help')"


@dataclass(eq=True)
class NotAFloat(ParseError):
    token: str

    def __str__(self) -> str:
        return f"{self.token!r} is not a number"


@dataclass(eq=True)
class NotAInt(ParseError):
    token: str

    def __str__(self) -> str:
        return f"{self.token!r} is not an unsigned integer"


@dataclass(eq=True)
class NotADate(ParseError):
    inner: DateParseError

    def __str__(self) -> str:
        return str(self.inner)


# ---- Evaluation --------------------------------------------------------------


class EvalError(SagaError):
    """Base class for failures while applying a command to a target."""

    category: ClassVar[str] = "Evaluation"


@dataclass(eq=True)
class NotApplicable(EvalError):
    kind: ValueKind
    command: Command

    def __str__(self) -> str:
        return f"{self.command.keyword!r} does not apply to {self.kind.value} targets"


@dataclass(eq=True)
class DescriptionIndexError(EvalError):
    index: int
    length: int

    def __str__(self) -> str:
        return f"description {self.index} out of range (event has {self.length}, 0-based)"


__all__ = [
    "ValueKind",
    "SagaError",
    "DocumentReadError",
    "DocumentWriteError",
    "NotADocument",
    "SerializeFail",
    "PathParseError",
    "PathFail",
    "AddToEvent",
    "DateParseError",
    "ParseError",
    "MissingCommand",
    "MissingArgument",
    "ExtraArgument",
    "UnknownCommand",
    "NotAFloat",
    "NotAInt",
    "NotADate",
    "EvalError",
    "NotApplicable",
    "DescriptionIndexError",
]
