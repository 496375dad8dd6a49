"""Color values used by the editor.

Colors travel through the grid and history as opaque strings (whatever the
picker produced, e.g. ``#3b82f6`` or ``rgb(255, 0, 0)``). They are only
interpreted when something needs channel values, which is the raster export.
"""

from dataclasses import dataclass
from typing import Tuple

from PIL import ImageColor

# Picker color when a session starts
DEFAULT_COLOR = "#3b82f6"

TRANSPARENT = (0, 0, 0, 0)


@dataclass(frozen=True)
class RGBA:
    """8-bit RGBA channels."""
    r: int
    g: int
    b: int
    a: int = 255

    @property
    def hex(self) -> str:
        """Hex string, with an alpha byte only when not fully opaque."""
        base = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a == 255:
            return base
        return f"{base}{self.a:02x}"

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


def to_rgba(color: str) -> RGBA:
    """Parse a CSS-style color string.

    Raises:
        ValueError: If Pillow cannot interpret the string
    """
    return RGBA(*ImageColor.getcolor(color, "RGBA"))


def is_valid_color(color: str) -> bool:
    try:
        to_rgba(color)
    except ValueError:
        return False
    return True
