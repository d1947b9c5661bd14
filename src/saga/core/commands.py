"""
Edit command language: parsing and evaluation.

A command is one line of whitespace-separated tokens. The first token is the
*head*, optionally prefixed with ``+`` (add) or ``-`` (sub); no prefix means
*edit*. Remaining tokens are either required scalars or a free-form *tail*
that is re-joined with single spaces.

Grammar
-------
============================  ==========================  ================
Input                         Command                     Target
============================  ==========================  ================
``exit`` / ``help``           ``Exit`` / ``Help``         (REPL only)
``name [text]``               ``NameEdit(text?)``         Node, Event
``-name``                     ``NameSub``                 Node
``+desc [text]``              ``DescAdd(text?)``          Event
``desc N [text]``             ``DescEdit(N, text?)``      Event
``-desc N``                   ``DescSub(N)``              Event
``line [x]`` / ``+line [x]``  ``LineEdit(on, x?)``        Node
``-line``                     ``LineEdit(off)``           Node
``offset v`` / ``-offset``    ``Offset(v)`` / ``(0.0)``   Node
``scale v`` / ``-scale``      ``Scale(v)`` / ``(1.0)``    Node
``date <date>``               ``DateEdit(date)``          Event
============================  ==========================  ================

Description indices are 0-based; node paths elsewhere are 1-based.

Evaluation
----------
``command.eval(target)`` dispatches on the target (node or event) to
``eval_node`` / ``eval_event``. A command that does not apply to that kind of
target returns ``Err(NotApplicable(kind, command))`` and changes nothing.

``DescAdd(None)`` and ``DescEdit(i, None)`` ask for the text through an
optional ``editor`` callable (the CLI passes one backed by ``$EDITOR``).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .contracts.event import Event
from .contracts.node import LineSpec, Node, Query
from .dates import Date
from .errors import (
    DescriptionIndexError,
    EvalError,
    ExtraArgument,
    MissingArgument,
    MissingCommand,
    NotADate,
    NotAFloat,
    NotAInt,
    NotApplicable,
    ParseError,
    UnknownCommand,
)
from .result import Result, err, ok
from .settings import get_logger

log = get_logger("saga.commands")

#: Receives the current text (``""`` for a new description) and returns the
#: edited text, or ``None`` when the user aborted.
Editor = Callable[[str], str | None]

HELP = """\
Commands (the first word may carry a + or - modifier):
  name TEXT          set the name (no TEXT clears a node's name)
  -name              clear a node's name
  +desc TEXT         append a description to an event
  desc N TEXT        replace description N of an event (0-based)
  -desc N            delete description N of an event (0-based)
  line [X]           draw a line under a node, with ticks every X
  -line              remove the node's line
  offset V / -offset set / reset a node's vertical offset
  scale V / -scale   set / reset a node's vertical scale
  date D [- D]       set an event's date, format dd/mm/yyyy hh:mm
  help               show this help
  exit               leave the shell
Numbers must be finite decimals (1, -2.5, 1e3); inf and nan are rejected.
Paths are 1-based and colon separated (1:3:2); an empty path is the root."""

_FLOAT = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


class Modifier(str, Enum):
    ADD = "+"
    SUB = "-"
    EDIT = ""


def split_modifier(word: str) -> tuple[Modifier, str]:
    """Strip a leading ``+``/``-`` from ``word`` and report which it was."""
    if word.startswith("+"):
        return Modifier.ADD, word[1:]
    if word.startswith("-"):
        return Modifier.SUB, word[1:]
    return Modifier.EDIT, word


# --------------------------------------------------------------------------- #
# Command algebra
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Command:
    """Base of the command union; see the module docstring for the grammar."""

    keyword: ClassVar[str] = ""

    @staticmethod
    def parse(text: str) -> Result[Command, ParseError]:
        return parse_command(text)

    def eval(self, target: Query, editor: Editor | None = None) -> Result[None, EvalError]:
        """Apply this command to ``target`` (the node or event a path resolved to)."""
        log.debug("eval %r on %s", self, target.kind.value)
        if isinstance(target, Event):
            return self.eval_event(target, editor)
        return self.eval_node(target)

    def eval_node(self, node: Node) -> Result[None, EvalError]:
        return err(NotApplicable(kind=node.kind, command=self))

    def eval_event(self, event: Event, editor: Editor | None = None) -> Result[None, EvalError]:
        return err(NotApplicable(kind=event.kind, command=self))


@dataclass(frozen=True)
class Exit(Command):
    keyword: ClassVar[str] = "exit"


@dataclass(frozen=True)
class Help(Command):
    keyword: ClassVar[str] = "help"


@dataclass(frozen=True)
class NameSub(Command):
    keyword: ClassVar[str] = "-name"

    def eval_node(self, node: Node) -> Result[None, EvalError]:
        node.set_name(None)
        return ok(None)


@dataclass(frozen=True)
class NameEdit(Command):
    keyword: ClassVar[str] = "name"
    name: str | None = None

    def eval_node(self, node: Node) -> Result[None, EvalError]:
        node.set_name(self.name)
        return ok(None)

    def eval_event(self, event: Event, editor: Editor | None = None) -> Result[None, EvalError]:
        # Events always carry a name.
        if self.name is None:
            return err(NotApplicable(kind=event.kind, command=self))
        event.set_name(self.name)
        return ok(None)


@dataclass(frozen=True)
class DescAdd(Command):
    keyword: ClassVar[str] = "+desc"
    text: str | None = None

    def eval_event(self, event: Event, editor: Editor | None = None) -> Result[None, EvalError]:
        text = self.text
        if text is None:
            text = _ask_editor(editor, "")
            if text is None:
                return ok(None)
        event.add_description(text)
        return ok(None)


@dataclass(frozen=True)
class DescSub(Command):
    keyword: ClassVar[str] = "-desc"
    index: int

    def eval_event(self, event: Event, editor: Editor | None = None) -> Result[None, EvalError]:
        deleted = event.delete_description(self.index)
        return ok(None) if deleted.is_ok() else err(deleted.unwrap_err())


@dataclass(frozen=True)
class DescEdit(Command):
    keyword: ClassVar[str] = "desc"
    index: int
    text: str | None = None

    def eval_event(self, event: Event, editor: Editor | None = None) -> Result[None, EvalError]:
        text = self.text
        if text is None:
            if not 0 <= self.index < len(event.descriptions):
                return err(DescriptionIndexError(index=self.index, length=len(event.descriptions)))
            text = _ask_editor(editor, event.descriptions[self.index])
            if text is None:
                return ok(None)
        changed = event.change_description(self.index, text)
        return ok(None) if changed.is_ok() else err(changed.unwrap_err())


@dataclass(frozen=True)
class LineEdit(Command):
    keyword: ClassVar[str] = "line"
    enabled: bool = True
    interval: float | None = None

    def eval_node(self, node: Node) -> Result[None, EvalError]:
        node.set_line(LineSpec(interval=self.interval) if self.enabled else None)
        return ok(None)


@dataclass(frozen=True)
class Offset(Command):
    keyword: ClassVar[str] = "offset"
    value: float

    def eval_node(self, node: Node) -> Result[None, EvalError]:
        node.set_offset(self.value)
        return ok(None)


@dataclass(frozen=True)
class Scale(Command):
    keyword: ClassVar[str] = "scale"
    value: float

    def eval_node(self, node: Node) -> Result[None, EvalError]:
        node.set_scale(self.value)
        return ok(None)


@dataclass(frozen=True)
class DateEdit(Command):
    keyword: ClassVar[str] = "date"
    date: Date

    def eval_event(self, event: Event, editor: Editor | None = None) -> Result[None, EvalError]:
        event.set_dates(self.date)
        return ok(None)


def _ask_editor(editor: Editor | None, initial: str) -> str | None:
    if editor is None:
        log.warning("no text given and no editor available; nothing changed")
        return None
    text = editor(initial)
    if text is None or not text.strip():
        return None
    return text.strip()


# --------------------------------------------------------------------------- #
# Parser
# --------------------------------------------------------------------------- #


class _Tokens:
    """Cursor over the whitespace-separated words of a command line."""

    def __init__(self, words: list[str]) -> None:
        self._words = words
        self._pos = 0

    def next(self) -> str | None:
        if self._pos >= len(self._words):
            return None
        word = self._words[self._pos]
        self._pos += 1
        return word

    def tail(self) -> str | None:
        """Consume everything left, joined by single spaces (``None`` if empty)."""
        rest = self._words[self._pos :]
        self._pos = len(self._words)
        return " ".join(rest) if rest else None


def _next_int(tokens: _Tokens, head: str) -> Result[int, ParseError]:
    token = tokens.next()
    if token is None:
        return err(MissingArgument(head=head))
    if not (token.isascii() and token.isdigit()):
        return err(NotAInt(token=token))
    return ok(int(token))


def _to_float(token: str) -> Result[float, ParseError]:
    if not _FLOAT.match(token):
        return err(NotAFloat(token=token))
    return ok(float(token))


def _next_float(tokens: _Tokens) -> Result[float | None, ParseError]:
    token = tokens.next()
    if token is None:
        return ok(None)
    return _to_float(token)  # type: ignore[return-value]


def _required_float(tokens: _Tokens, head: str) -> Result[float, ParseError]:
    token = tokens.next()
    if token is None:
        return err(MissingArgument(head=head))
    return _to_float(token)


def parse_command(text: str) -> Result[Command, ParseError]:
    """Parse one command line; returns exactly one command or one parse error."""
    words = text.split()
    if not words:
        return err(MissingCommand())
    tokens = _Tokens(words[1:])
    modifier, head = split_modifier(words[0])

    return _parse_head(head, modifier, tokens).flat_map(lambda cmd: _finish(cmd, head, tokens))


def _finish(cmd: Command, head: str, tokens: _Tokens) -> Result[Command, ParseError]:
    leftover = tokens.tail()
    if leftover is not None:
        return err(ExtraArgument(head=head, rest=leftover))
    return ok(cmd)


def _parse_head(head: str, modifier: Modifier, tokens: _Tokens) -> Result[Command, ParseError]:
    if head == "exit":
        return ok(Exit())
    if head == "help":
        return ok(Help())

    if head == "date" and modifier is Modifier.EDIT:
        raw = tokens.tail()
        if raw is None:
            return err(MissingArgument(head=head))
        return Date.parse(raw).map(lambda d: DateEdit(date=d)).map_err(lambda e: NotADate(inner=e))

    if head == "name":
        if modifier is Modifier.SUB:
            return ok(NameSub())
        return ok(NameEdit(name=tokens.tail()))

    if head == "desc":
        if modifier is Modifier.ADD:
            return ok(DescAdd(text=tokens.tail()))
        index = _next_int(tokens, head)
        if modifier is Modifier.SUB:
            return index.map(lambda i: DescSub(index=i))
        return index.map(lambda i: DescEdit(index=i, text=tokens.tail()))

    if head == "line":
        if modifier is Modifier.SUB:
            return ok(LineEdit(enabled=False))
        return _next_float(tokens).map(lambda x: LineEdit(enabled=True, interval=x))

    if head == "offset":
        if modifier is Modifier.SUB:
            return ok(Offset(value=0.0))
        return _required_float(tokens, head).map(lambda v: Offset(value=v))

    if head == "scale":
        if modifier is Modifier.SUB:
            return ok(Scale(value=1.0))
        return _required_float(tokens, head).map(lambda v: Scale(value=v))

    return err(UnknownCommand(head=head, rest=tokens.tail()))


__all__ = [
    "HELP",
    "Editor",
    "Modifier",
    "split_modifier",
    "Command",
    "Exit",
    "Help",
    "NameSub",
    "NameEdit",
    "DescAdd",
    "DescSub",
    "DescEdit",
    "LineEdit",
    "Offset",
    "Scale",
    "DateEdit",
    "parse_command",
]
