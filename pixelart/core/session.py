"""Drawing session: gesture events in, grid and history mutations out.

The session is a two-state machine::

    IDLE --START--> PAINTING --MOVE--> PAINTING --END--> IDLE

START activates the cell under the pointer (paint, or erase when the
alternate modifier is held). MOVE only ever paints. Erasing is a per-tap
action and cannot be dragged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .colors import DEFAULT_COLOR
from .grid import Cell, PixelGrid
from .history import HISTORY_LIMIT, ColorHistory

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    PAINTING = "painting"


class EventKind(Enum):
    START = "start"
    MOVE = "move"
    END = "end"


@dataclass(frozen=True)
class GestureEvent:
    """Device-independent gesture event.

    ``x``/``y`` are ignored for END. ``alternate`` only matters for START.
    """
    kind: EventKind
    x: int = 0
    y: int = 0
    alternate: bool = False

    @classmethod
    def start(cls, x: int, y: int, alternate: bool = False) -> "GestureEvent":
        return cls(EventKind.START, x, y, alternate)

    @classmethod
    def move(cls, x: int, y: int, alternate: bool = False) -> "GestureEvent":
        return cls(EventKind.MOVE, x, y, alternate)

    @classmethod
    def end(cls) -> "GestureEvent":
        return cls(EventKind.END)


class DrawingSession:
    """Owns the grid, the color history, the selected color and the
    drawing-active flag for one editing session."""

    def __init__(
        self,
        width: int,
        height: int,
        initial_color: str = DEFAULT_COLOR,
        history_limit: int = HISTORY_LIMIT,
    ):
        self.grid = PixelGrid(width, height)
        self.history = ColorHistory(initial_color, limit=history_limit)
        self._selected = initial_color
        self._state = SessionState.IDLE

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_drawing(self) -> bool:
        return self._state is SessionState.PAINTING

    @property
    def selected_color(self) -> str:
        return self._selected

    # --- Gestures ---

    def handle(self, event: GestureEvent) -> bool:
        """Apply one gesture event.

        Returns:
            True if the grid or history changed
        """
        if event.kind is EventKind.START:
            self._state = SessionState.PAINTING
            return self._activate(event.x, event.y, event.alternate)

        if event.kind is EventKind.MOVE:
            if self._state is not SessionState.PAINTING:
                return False
            return self._paint(event.x, event.y)

        if self._state is SessionState.PAINTING:
            logger.debug("Gesture ended")
        self._state = SessionState.IDLE
        return False

    def _activate(self, x: int, y: int, alternate: bool) -> bool:
        if alternate:
            if Cell(x, y) not in self.grid:
                return False
            logger.debug("Erase (%d, %d)", x, y)
            self.grid.erase(x, y)
            return True
        return self._paint(x, y)

    def _paint(self, x: int, y: int) -> bool:
        if not self.grid.in_bounds(x, y):
            return False
        logger.debug("Paint (%d, %d) %s", x, y, self._selected)
        self.grid.set(x, y, self._selected)
        self.history.use(self._selected)
        return True

    # --- Colors ---

    def select_color(self, color: str) -> None:
        """Choose a color from the picker. Also records it as recently used."""
        self._selected = color
        self.history.use(color)

    def pick_recent(self, index: int) -> Optional[str]:
        """Select a history entry without reordering the history.

        Returns:
            The selected color, or None if index is out of range
        """
        if not 0 <= index < len(self.history):
            return None
        self._selected = self.history[index]
        return self._selected

    # --- Destructive commands ---

    def clear(self) -> None:
        self.grid.clear()

    def resize(self, width: int, height: int) -> None:
        """New geometry. Drops all content and any gesture in progress."""
        self.grid.resize(width, height)
        self._state = SessionState.IDLE
