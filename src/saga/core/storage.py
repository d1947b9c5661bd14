"""Reading and writing saga documents as JSON files.

- ``load_document(path)`` reads the whole file first (the handle is closed
  before parsing), then validates it into a :class:`Document`.
- ``save_document(doc, path)`` serializes and writes the whole file in one
  go; there is no temp-file rename.

Every failure is reported as a :class:`~saga.core.errors.SagaError` subclass
so the CLI can print a category and exit non-zero.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from .contracts.document import Document
from .errors import DocumentReadError, DocumentWriteError, NotADocument, SerializeFail
from .settings import get_logger

log = get_logger("saga.storage")


def read_text(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as exc:
        reason = f"not UTF-8 text ({exc.reason} at byte {exc.start})"
        raise NotADocument(path=str(path), reason=reason) from exc
    except OSError as exc:
        raise DocumentReadError(path=str(path), reason=exc.strerror or str(exc)) from exc


def parse_document(text: str, source: str = "<string>") -> Document:
    """Validate JSON ``text`` into a document."""
    try:
        return Document.model_validate_json(text)
    except ValidationError as exc:
        first = exc.errors()[0] if exc.errors() else {"msg": str(exc)}
        where = ".".join(str(p) for p in first.get("loc", ()))
        reason = f"{where}: {first['msg']}" if where else str(first["msg"])
        raise NotADocument(path=source, reason=reason) from exc


def dump_document(doc: Document) -> str:
    """Serialize ``doc`` to pretty-printed JSON with a trailing newline."""
    try:
        return doc.model_dump_json(indent=2) + "\n"
    except (ValueError, TypeError) as exc:
        raise SerializeFail(reason=str(exc)) from exc


def load_document(path: Path) -> Document:
    text = read_text(path)
    doc = parse_document(text, source=str(path))
    log.debug("loaded %s (%d events)", path, doc.data.count_events())
    return doc


def write_text(path: Path, contents: str) -> None:
    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(contents)
    except OSError as exc:
        raise DocumentWriteError(path=str(path), reason=exc.strerror or str(exc)) from exc


def save_document(doc: Document, path: Path) -> Path:
    """Write ``doc`` to ``path`` and return the path."""
    write_text(path, dump_document(doc))
    log.debug("saved %s", path)
    return path


__all__ = [
    "read_text",
    "parse_document",
    "dump_document",
    "load_document",
    "write_text",
    "save_document",
]
