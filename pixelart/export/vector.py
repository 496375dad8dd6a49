"""SVG export.

One ``<rect>`` per painted cell, emitted row by row so that the same grid
content always produces the same bytes, whatever order it was painted in.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from ..core.grid import PixelGrid
from .base import CELL_SCALE, ExportPayload, canvas_size

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_FILENAME = "pixel-art.svg"
SVG_MIME_TYPE = "image/svg+xml"


class VectorExporter:
    """Renders a PixelGrid to an SVG document."""

    def __init__(self, scale: int = CELL_SCALE, filename: str = SVG_FILENAME):
        self.scale = scale
        self.filename = filename

    def build(self, grid: PixelGrid) -> ET.Element:
        width, height = canvas_size(grid.width, grid.height, self.scale)
        root = ET.Element("svg", {
            "xmlns": SVG_NAMESPACE,
            "width": str(width),
            "height": str(height),
        })
        s = self.scale
        for cell, color in grid.cells():
            ET.SubElement(root, "rect", {
                "x": str(cell.x * s),
                "y": str(cell.y * s),
                "width": str(s),
                "height": str(s),
                "fill": color,
            })
        return root

    def render(self, grid: PixelGrid) -> str:
        return ET.tostring(self.build(grid), encoding="unicode")

    def export(self, grid: PixelGrid) -> ExportPayload:
        data = self.render(grid).encode("utf-8")
        logger.info("Vector export %s: %d cells, %d bytes", self.filename, len(grid), len(data))
        return ExportPayload(data=data, filename=self.filename, mime_type=SVG_MIME_TYPE)
