"""Typed ``Result`` for operations with a closed set of failure modes.

Tree queries, date parsing and the edit command language return
``Ok(value)`` or ``Err(error)`` instead of raising, so the ``shell`` REPL can
report a bad command and keep going while ``edit`` aborts on it.

Error payloads in this package are :class:`~saga.core.errors.SagaError`
instances; :meth:`Result.unwrap_or_raise` turns an ``Err`` back into the
exception at the CLI boundary.

>>> ok(2).map(lambda x: x * 10).unwrap()
20
>>> err("bad").map(lambda x: x * 10).unwrap_err()
'bad'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class Result(Generic[T, E]):
    """Either :class:`Ok` or :class:`Err`; each variant implements every method."""

    def is_ok(self) -> bool:
        raise NotImplementedError

    def is_err(self) -> bool:
        return not self.is_ok()

    def unwrap(self) -> T:
        """The success value; ``RuntimeError`` on ``Err``."""
        raise NotImplementedError

    def unwrap_err(self) -> E:
        """The error payload; ``RuntimeError`` on ``Ok``."""
        raise NotImplementedError

    def unwrap_or_raise(self) -> T:
        """The success value, or raise the payload if it is an exception."""
        raise NotImplementedError

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        raise NotImplementedError

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        raise NotImplementedError

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Continue with ``fn`` only on success."""
        raise NotImplementedError


@dataclass(frozen=True)
class Ok(Result[T, E]):
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> E:
        raise RuntimeError(f"unwrap_err on {self!r}")

    def unwrap_or_raise(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        return Ok(self.value)

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)


@dataclass(frozen=True)
class Err(Result[T, E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> T:
        raise RuntimeError(f"unwrap on {self!r}")

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or_raise(self) -> T:
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(f"unwrap on {self!r}")

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        return Err(self.error)

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        return Err(fn(self.error))

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return Err(self.error)


def ok(value: T) -> Result[T, E]:
    return Ok(value)


def err(error: E) -> Result[T, E]:
    return Err(error)


__all__ = ["Result", "Ok", "Err", "ok", "err"]
