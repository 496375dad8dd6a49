"""PNG export.

The exporter only decides *where* each cell goes. Allocating the pixel
buffer and encoding it are delegated to a ``RasterSurface``. Cells cover
disjoint squares, so fill order does not matter.
"""

from __future__ import annotations

import io
import logging
from typing import Callable, Optional, Protocol

import numpy as np
from PIL import Image

from ..core.colors import TRANSPARENT, to_rgba
from ..core.grid import PixelGrid
from .base import CELL_SCALE, ExportError, ExportPayload, canvas_size

logger = logging.getLogger(__name__)

PNG_FILENAME = "pixel-art.png"
PNG_MIME_TYPE = "image/png"


class RasterSurface(Protocol):
    """Host raster primitive: allocate, fill rectangles, encode."""

    def allocate(self, width: int, height: int) -> None: ...

    def fill_rect(self, x: int, y: int, width: int, height: int, color: str) -> None: ...

    def encode(self) -> bytes: ...


class PillowSurface:
    """RGBA numpy buffer encoded to PNG with Pillow.

    Freshly allocated buffers are fully transparent.
    """

    def __init__(self):
        self._buffer: Optional[np.ndarray] = None

    @property
    def buffer(self) -> Optional[np.ndarray]:
        return self._buffer

    def allocate(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Cannot allocate a {width}x{height} surface")
        self._buffer = np.full((height, width, 4), TRANSPARENT, dtype=np.uint8)

    def fill_rect(self, x: int, y: int, width: int, height: int, color: str) -> None:
        if self._buffer is None:
            raise RuntimeError("Surface not allocated")
        self._buffer[y:y + height, x:x + width] = to_rgba(color).as_tuple()

    def encode(self) -> bytes:
        if self._buffer is None:
            raise RuntimeError("Surface not allocated")
        image = Image.fromarray(self._buffer)
        buf = io.BytesIO()
        image.save(buf, format="PNG")
        return buf.getvalue()


class RasterExporter:
    """Renders a PixelGrid to an encoded raster image."""

    def __init__(
        self,
        surface_factory: Callable[[], RasterSurface] = PillowSurface,
        scale: int = CELL_SCALE,
        filename: str = PNG_FILENAME,
    ):
        self.surface_factory = surface_factory
        self.scale = scale
        self.filename = filename

    def render(self, grid: PixelGrid) -> RasterSurface:
        """Allocate a surface and fill every painted cell."""
        width, height = canvas_size(grid.width, grid.height, self.scale)
        surface = self.surface_factory()
        surface.allocate(width, height)
        s = self.scale
        for cell, color in grid.cells():
            surface.fill_rect(cell.x * s, cell.y * s, s, s, color)
        return surface

    def export(self, grid: PixelGrid) -> ExportPayload:
        """Render and encode the grid.

        Raises:
            ExportError: If the surface fails to allocate, fill or encode
        """
        try:
            data = self.render(grid).encode()
        except Exception as e:
            raise ExportError(f"Raster export failed: {e}") from e
        if not data:
            raise ExportError("Raster export failed: surface produced no data")

        logger.info("Raster export %s: %d cells, %d bytes", self.filename, len(grid), len(data))
        return ExportPayload(data=data, filename=self.filename, mime_type=PNG_MIME_TYPE)
