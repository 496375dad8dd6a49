"""Command interface for hosts driving the editor.

JSON-RPC style, one request per message:
Request:      {"method": "name", "params": {...}}  -> {"result": ...}
Failure:      -> {"error": "..."}

Params are validated with pydantic before they reach the editor, so a
malformed request never mutates the session.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core import devices
from .editor import PixelEditor
from .export.base import ExportVariant

logger = logging.getLogger(__name__)


class Params(BaseModel):
    model_config = ConfigDict(extra="forbid")


class CellParams(Params):
    x: int = Field(description="Grid column")
    y: int = Field(description="Grid row")


class GestureStartParams(CellParams):
    alternate: bool = Field(False, description="Erase instead of paint")


class PointerParams(CellParams):
    shift: bool = Field(False, description="Shift key held")


class TouchStartParams(CellParams):
    touch_count: int = Field(1, ge=1, description="Fingers on screen")


class SelectColorParams(Params):
    color: str = Field(min_length=1, description="CSS color string")


class PickRecentParams(Params):
    index: int = Field(ge=0, description="Position in recent colors")


class ExportParams(Params):
    variant: ExportVariant = Field(description="raster or vector")


class ResizeParams(Params):
    width: int = Field(gt=0)
    height: int = Field(gt=0)


class ViewportParams(Params):
    viewport_width: int = Field(ge=0, description="Viewport width in CSS pixels")


class CommandDispatcher:
    """Routes validated commands to a PixelEditor."""

    def __init__(self, editor: PixelEditor):
        self.editor = editor
        self._handlers: dict[str, tuple[type[Params], Callable[[Any], Any]]] = {}
        self.register_all()

    def register(self, method: str, params: type[Params], handler: Callable[[Any], Any]) -> None:
        """Register a method with its params model."""
        self._handlers[method] = (params, handler)

    def register_all(self) -> None:
        ed = self.editor
        reg = self.register

        # Device-independent gestures
        reg("gesture_start", GestureStartParams, lambda p: ed.gesture_start(p.x, p.y, p.alternate))
        reg("gesture_move", CellParams, lambda p: ed.gesture_move(p.x, p.y))
        reg("gesture_end", Params, lambda p: ed.gesture_end())

        # Pointer
        reg("pointer_press", PointerParams, lambda p: ed.handle(devices.pointer_press(p.x, p.y, p.shift)))
        reg("pointer_enter", PointerParams, lambda p: ed.handle(devices.pointer_enter(p.x, p.y, p.shift)))
        reg("pointer_release", Params, lambda p: ed.handle(devices.pointer_release()))
        reg("pointer_leave", Params, lambda p: ed.handle(devices.pointer_leave()))

        # Touch
        reg("touch_start", TouchStartParams, lambda p: ed.handle(devices.touch_start(p.x, p.y, p.touch_count)))
        reg("touch_move", CellParams, lambda p: ed.handle(devices.touch_move(p.x, p.y)))
        reg("touch_end", Params, lambda p: ed.handle(devices.touch_end()))

        # Colors
        reg("select_color", SelectColorParams, self._select_color)
        reg("pick_recent", PickRecentParams, lambda p: ed.pick_recent(p.index))

        # Commands
        reg("clear", Params, self._clear)
        reg("resize", ResizeParams, self._resize)
        reg("resize_for_viewport", ViewportParams, lambda p: list(ed.resize_for_viewport(p.viewport_width)))
        reg("export", ExportParams, lambda p: ed.export(p.variant).to_dict())
        reg("get_state", Params, lambda p: ed.state())

    @property
    def methods(self) -> list[str]:
        return sorted(self._handlers)

    def _select_color(self, p: SelectColorParams) -> str:
        self.editor.select_color(p.color)
        return p.color

    def _clear(self, p: Params) -> str:
        self.editor.clear()
        return "ok"

    def _resize(self, p: ResizeParams) -> list[int]:
        self.editor.resize(p.width, p.height)
        return [p.width, p.height]

    def dispatch(self, request: dict) -> dict:
        """Run one request. Never raises for bad input."""
        if not isinstance(request, dict):
            return {"error": "Request must be an object"}
        method = request.get("method")
        if not isinstance(method, str) or not method:
            return {"error": "Missing method"}

        entry = self._handlers.get(method)
        if entry is None:
            return {"error": f"Unknown method: {method}"}
        params_model, handler = entry

        try:
            params = params_model.model_validate(request.get("params") or {})
        except ValidationError as e:
            logger.debug("Invalid params for %s: %s", method, e)
            return {"error": f"Invalid params: {e}"}

        try:
            return {"result": handler(params)}
        except Exception as e:
            logger.warning("Command %s failed: %s", method, e)
            return {"error": str(e)}

    def dispatch_line(self, line: str) -> str:
        """Run one JSON-encoded request and return the JSON response."""
        try:
            request = json.loads(line)
        except json.JSONDecodeError as e:
            return json.dumps({"error": f"Invalid JSON: {e}"})
        return json.dumps(self.dispatch(request))
