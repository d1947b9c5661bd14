"""Color — an 8-bit RGB triple used by color schemes and node overrides."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

Channel = Annotated[int, Field(ge=0, le=255)]


class Color(BaseModel):
    """An opaque RGB color."""

    r: Channel
    g: Channel
    b: Channel

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Build a color from ``#RRGGBB`` (the leading ``#`` is optional)."""
        raw = text.lstrip("#")
        if len(raw) != 6:
            raise ValueError(f"expected #RRGGBB, got {text!r}")
        return cls(r=int(raw[0:2], 16), g=int(raw[2:4], 16), b=int(raw[4:6], 16))

    def hex(self) -> str:
        """Return the color as an SVG-friendly ``#RRGGBB`` string."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


ColorScheme = list[Color]

__all__ = ["Color", "ColorScheme"]
