"""Editor facade: the host-facing entry point for one drawing session.

Wires a DrawingSession to the exporters and a save collaborator, and tells
observers (usually the grid view) when something they display changed.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .config import EditorConfig, grid_size_for_viewport
from .core.session import DrawingSession, GestureEvent
from .export.base import ExportError, ExportResult, ExportVariant
from .export.raster import PillowSurface, RasterExporter, RasterSurface
from .export.vector import VectorExporter
from .host.savers import MemorySaver, Saver

logger = logging.getLogger(__name__)

Observer = Callable[[str, dict], None]


class PixelEditor:
    """
    One editing session plus its export and save plumbing.

    All mutations go through this class. Observers are called with
    (change, state) after each mutation, where change is one of
    "pixels", "colors", "geometry".
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        saver: Optional[Saver] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        surface_factory: Callable[[], RasterSurface] = PillowSurface,
    ):
        self.config = config or EditorConfig()
        self.saver = saver if saver is not None else MemorySaver()

        default = self.config.grid.desktop_size
        self.session = DrawingSession(
            width or default,
            height or default,
            initial_color=self.config.palette.initial_color,
            history_limit=self.config.palette.history_limit,
        )

        export = self.config.export
        self._exporters = {
            ExportVariant.RASTER: RasterExporter(
                surface_factory, scale=export.cell_scale, filename=export.png_filename,
            ),
            ExportVariant.VECTOR: VectorExporter(
                scale=export.cell_scale, filename=export.svg_filename,
            ),
        }
        self._observers: list[Observer] = []

    @property
    def grid(self):
        return self.session.grid

    @property
    def history(self):
        return self.session.history

    def subscribe(self, callback: Observer) -> Callable[[], None]:
        """
        Subscribe to changes.

        Args:
            callback: Function called with (change, state) after mutations

        Returns:
            Unsubscribe function
        """
        self._observers.append(callback)

        def unsubscribe():
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _notify(self, change: str) -> None:
        if not self._observers:
            return
        state = self.state()
        for observer in list(self._observers):
            try:
                observer(change, state)
            except Exception as e:
                logger.warning(f"Observer failed for change '{change}': {e}")

    # --- Gestures ---

    def handle(self, event: GestureEvent) -> bool:
        """Feed a gesture event to the session. Returns True if content changed."""
        changed = self.session.handle(event)
        if changed:
            self._notify("pixels")
        return changed

    def gesture_start(self, x: int, y: int, alternate: bool = False) -> bool:
        return self.handle(GestureEvent.start(x, y, alternate))

    def gesture_move(self, x: int, y: int) -> bool:
        return self.handle(GestureEvent.move(x, y))

    def gesture_end(self) -> bool:
        return self.handle(GestureEvent.end())

    # --- Colors ---

    def select_color(self, color: str) -> None:
        self.session.select_color(color)
        self._notify("colors")

    def pick_recent(self, index: int) -> Optional[str]:
        color = self.session.pick_recent(index)
        if color is not None:
            self._notify("colors")
        return color

    # --- Commands ---

    def clear(self) -> None:
        logger.info("Clearing %d painted cells", len(self.grid))
        self.session.clear()
        self._notify("pixels")

    def resize(self, width: int, height: int) -> None:
        self.session.resize(width, height)
        self._notify("geometry")

    def resize_for_viewport(self, viewport_width: int) -> tuple[int, int]:
        """Apply the grid preset for a viewport width.

        Content is only discarded when the preset actually differs.
        """
        size = grid_size_for_viewport(viewport_width, self.config)
        if size != self.grid.size:
            self.resize(*size)
        return size

    def export(self, variant: ExportVariant | str) -> ExportResult:
        """Encode the grid and hand the payload to the saver.

        Failures of the surface, encoder or saver are reported in the
        result; grid state is never touched.
        """
        variant = ExportVariant(variant)
        exporter = self._exporters[variant]
        try:
            payload = exporter.export(self.grid)
        except ExportError as e:
            logger.warning("Export %s failed: %s", variant.value, e)
            return ExportResult(variant, error=str(e))

        try:
            self.saver.save(payload.data, payload.filename, payload.mime_type)
        except OSError as e:
            logger.warning("Saving %s failed: %s", payload.filename, e)
            return ExportResult(variant, error=f"Save failed: {e}")
        return ExportResult(variant, payload=payload)

    def state(self) -> dict:
        """Plain-data snapshot for views and the command interface."""
        return {
            "width": self.grid.width,
            "height": self.grid.height,
            "selected_color": self.session.selected_color,
            "recent_colors": self.history.colors,
            "painted": len(self.grid),
            "drawing": self.session.is_drawing,
            "pixels": [
                {"x": cell.x, "y": cell.y, "color": color}
                for cell, color in self.grid.cells()
            ],
        }
