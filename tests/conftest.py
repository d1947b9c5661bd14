"""Shared fixtures: the reference timeline tree used across the suite.

Tree layout (1-based paths)::

    (root)
    ├── 1  Event "First Event"    08/12/1997 - 26/12/1997
    ├── 2  Event "Second Event"   01/12/1997 - 09/12/1997
    └── 3  Node                   (line, ticks every 5.0)
        ├── 3:1  Node
        │   ├── 3:1:1  Event "Third Event"
        │   └── 3:1:2  Event "Fourth Event"
        ├── 3:2  Event "Fifth Event"
        ├── 3:3  Event "Sixth Event"
        └── 3:4  Event "Seventh Event"

The root carries a line without ticks.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from saga.core.contracts.document import Document
from saga.core.contracts.event import Event
from saga.core.contracts.node import Node
from saga.core.dates import Date
from saga.core.storage import save_document


def make_event(name: str, text: str) -> Event:
    return Event.new(name, Date.parse(text).unwrap())


def build_sample_tree() -> Node:
    return Node.from_vec(
        [
            make_event("First Event", "08/12/1997 0:0 - 26/12/1997 0:0"),
            make_event("Second Event", "01/12/1997 0:0 - 09/12/1997 0:0"),
            Node.from_vec(
                [
                    Node.from_vec(
                        [
                            make_event("Third Event", "03/12/1997 0:0 - 04/12/1997 0:0"),
                            make_event("Fourth Event", "04/12/1997 0:0 - 06/12/1997 0:0"),
                        ]
                    ),
                    make_event("Fifth Event", "03/12/1997 0:0 - 04/12/1997 0:0"),
                    make_event("Sixth Event", "04/12/1997 0:0 - 06/12/1997 0:0"),
                    make_event("Seventh Event", "07/12/1997 0:0 - 09/12/1997 0:0"),
                ]
            ).with_line(5.0),
        ]
    ).with_line(None)


@pytest.fixture  # type: ignore[misc]
def tree() -> Node:
    """A fresh copy of the reference tree for each test."""
    return build_sample_tree()


@pytest.fixture  # type: ignore[misc]
def sample_doc(tree: Node) -> Document:
    return Document(x=1000.0, y=500.0, padding=10.0, data=tree)


@pytest.fixture  # type: ignore[misc]
def doc_file(tmp_path: Path, sample_doc: Document) -> Path:
    """The reference document saved to a temporary JSON file."""
    return save_document(sample_doc, tmp_path / "history.json")
