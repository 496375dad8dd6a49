"""Pixel Art - sparse pixel grid editor with PNG and SVG export."""

from .commands import CommandDispatcher
from .config import EditorConfig, grid_size_for_viewport
from .core import (
    Cell,
    ColorHistory,
    DrawingSession,
    EventKind,
    GestureEvent,
    PixelGrid,
    SessionState,
)
from .editor import PixelEditor
from .export import (
    CELL_SCALE,
    ExportError,
    ExportPayload,
    ExportResult,
    ExportVariant,
    PillowSurface,
    RasterExporter,
    VectorExporter,
)
from .host import DirectorySaver, MemorySaver

__all__ = [
    # Editor
    "PixelEditor",
    "CommandDispatcher",
    "EditorConfig",
    "grid_size_for_viewport",
    # Core
    "Cell",
    "ColorHistory",
    "DrawingSession",
    "EventKind",
    "GestureEvent",
    "PixelGrid",
    "SessionState",
    # Export
    "CELL_SCALE",
    "ExportError",
    "ExportPayload",
    "ExportResult",
    "ExportVariant",
    "PillowSurface",
    "RasterExporter",
    "VectorExporter",
    # Host
    "DirectorySaver",
    "MemorySaver",
]
