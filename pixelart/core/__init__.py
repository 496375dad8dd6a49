"""Core drawing model - grid, color history, session state machine."""

from .colors import DEFAULT_COLOR, RGBA, to_rgba, is_valid_color
from .grid import UNPAINTED, Cell, PixelGrid
from .history import HISTORY_LIMIT, ColorHistory
from .session import DrawingSession, EventKind, GestureEvent, SessionState
from . import devices

__all__ = [
    # Colors
    "DEFAULT_COLOR",
    "RGBA",
    "to_rgba",
    "is_valid_color",
    # Grid
    "UNPAINTED",
    "Cell",
    "PixelGrid",
    # History
    "HISTORY_LIMIT",
    "ColorHistory",
    # Session
    "DrawingSession",
    "EventKind",
    "GestureEvent",
    "SessionState",
    "devices",
]
