"""Core package for saga: the timeline tree, its edit language and storage.

Typical use::

    from saga.core.contracts import Document
    from saga.core.commands import parse_command
    from saga.core.settings import load_settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
