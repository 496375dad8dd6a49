"""Sparse pixel store for the drawing grid.

Only painted cells are materialised. A missing key means the cell is
transparent. Geometry is fixed until ``resize``, which throws away every
painted cell rather than cropping or extending.
"""

from __future__ import annotations

import logging
from typing import Iterator, NamedTuple, Optional

logger = logging.getLogger(__name__)

# Returned by PixelGrid.get for transparent cells
UNPAINTED = None


class Cell(NamedTuple):
    """Grid coordinate. Column ``x``, row ``y``."""
    x: int
    y: int


class PixelGrid:
    """Mapping of in-bounds cells to color strings."""

    def __init__(self, width: int, height: int):
        self._check_geometry(width, height)
        self.width = width
        self.height = height
        self._pixels: dict[Cell, str] = {}

    @staticmethod
    def _check_geometry(width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid geometry must be positive, got {width}x{height}")

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, color: str) -> None:
        """Paint a cell, overwriting whatever was there."""
        if self.in_bounds(x, y):
            self._pixels[Cell(x, y)] = color

    def erase(self, x: int, y: int) -> None:
        """Make a cell transparent again."""
        self._pixels.pop(Cell(x, y), None)

    def get(self, x: int, y: int) -> Optional[str]:
        return self._pixels.get(Cell(x, y), UNPAINTED)

    def clear(self) -> None:
        """Drop all painted cells, keep geometry."""
        self._pixels.clear()

    def resize(self, width: int, height: int) -> None:
        """Replace geometry. All painted content is discarded."""
        self._check_geometry(width, height)
        logger.info("Resizing grid %dx%d -> %dx%d, dropping %d cells",
                    self.width, self.height, width, height, len(self._pixels))
        self.width = width
        self.height = height
        self._pixels = {}

    def cells(self) -> Iterator[tuple[Cell, str]]:
        """Iterate painted cells in row-major order (by y, then x)."""
        for cell in sorted(self._pixels, key=lambda c: (c.y, c.x)):
            yield cell, self._pixels[cell]

    def snapshot(self) -> dict[Cell, str]:
        """Copy of the painted cells."""
        return dict(self._pixels)

    def __len__(self) -> int:
        return len(self._pixels)

    def __contains__(self, cell: object) -> bool:
        return cell in self._pixels

    def __repr__(self) -> str:
        return f"PixelGrid({self.width}x{self.height}, painted={len(self._pixels)})"
