"""Image export - PNG via a raster surface, SVG as text."""

from .base import (
    CELL_SCALE,
    ExportError,
    ExportPayload,
    ExportResult,
    ExportVariant,
    canvas_size,
)
from .raster import PillowSurface, RasterExporter, RasterSurface
from .vector import VectorExporter

__all__ = [
    "CELL_SCALE",
    "ExportError",
    "ExportPayload",
    "ExportResult",
    "ExportVariant",
    "canvas_size",
    # Raster
    "PillowSurface",
    "RasterExporter",
    "RasterSurface",
    # Vector
    "VectorExporter",
]
