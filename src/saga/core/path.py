"""Parsing of colon-separated, 1-based tree paths (``"1:3:2"``)."""

from __future__ import annotations

from .errors import PathParseError
from .result import Result, err, ok

NodePath = tuple[int, ...]


def parse_path(text: str) -> Result[NodePath, PathParseError]:
    """Split ``text`` on ``:`` into unsigned indices.

    Blank input is the empty path (the root). Whitespace around segments is
    ignored, so ``"1: 5:5 :3"`` is ``(1, 5, 5, 3)``.
    """
    if not text.strip():
        return ok(())
    indices: list[int] = []
    for part in text.split(":"):
        segment = part.strip()
        if not segment.isascii() or not segment.isdigit():
            return err(PathParseError(text=text, segment=segment))
        indices.append(int(segment))
    return ok(tuple(indices))


def format_path(path: NodePath) -> str:
    return ":".join(str(i) for i in path)


__all__ = ["NodePath", "parse_path", "format_path"]
