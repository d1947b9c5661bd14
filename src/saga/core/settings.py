"""Centralized application configuration using Pydantic Settings (v2).

`load_settings()` returns one cached `Settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the working directory: .env, .env.local

The settings carry the log level, the canvas defaults used by
`Document.blank()` and the file suffix written by the `render` subcommand.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed application configuration loaded from env and `.env` files.

    Attributes
    ----------
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    canvas_width, canvas_height : float
        Canvas size (abstract pixels) of a freshly created document.
    canvas_padding : float
        Padding of a freshly created document.
    render_extension : str
        Suffix of the vector image written next to each rendered document.
    """

    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")

    canvas_width: float = Field(default=1920.0, gt=0, alias="SAGA_CANVAS_WIDTH")
    canvas_height: float = Field(default=1080.0, gt=0, alias="SAGA_CANVAS_HEIGHT")
    canvas_padding: float = Field(default=0.0, ge=0, alias="SAGA_CANVAS_PADDING")
    render_extension: str = Field(
        default=".svg", pattern=r"^\.[A-Za-z0-9]+$", alias="SAGA_RENDER_EXTENSION"
    )

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)

    def blank_canvas(self) -> tuple[float, float, float]:
        """Return the `(x, y, padding)` triple used for new documents."""
        return (self.canvas_width, self.canvas_height, self.canvas_padding)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    We keep this behind an LRU cache so tests can force a rebuild via
    `load_settings.cache_clear()` after mutating `os.environ`.
    """
    return Settings()


def get_logger(name: str = "saga") -> logging.Logger:
    """Return a process-global logger configured to the current `LOG_LEVEL`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
