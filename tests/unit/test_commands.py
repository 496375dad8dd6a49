"""Tests for the command dispatcher."""

import json
from unittest.mock import MagicMock

import pytest

from pixelart.commands import CommandDispatcher
from pixelart.core.grid import Cell


@pytest.fixture
def dispatcher(editor):
    return CommandDispatcher(editor)


class TestDispatch:

    def test_missing_method(self, dispatcher):
        assert dispatcher.dispatch({"params": {}}) == {"error": "Missing method"}

    def test_unknown_method(self, dispatcher):
        assert dispatcher.dispatch({"method": "undo"}) == {"error": "Unknown method: undo"}

    @pytest.mark.parametrize("method", [["clear"], {"a": 1}, 42, ""])
    def test_non_string_method(self, dispatcher, method):
        assert dispatcher.dispatch({"method": method}) == {"error": "Missing method"}

    def test_handler_exception_returned_as_error(self, dispatcher):
        from pixelart.commands import Params

        dispatcher.register("explode", Params, MagicMock(side_effect=RuntimeError("kaboom")))
        assert dispatcher.dispatch({"method": "explode"}) == {"error": "kaboom"}

    def test_non_object_request(self, dispatcher):
        assert "error" in dispatcher.dispatch(["pointer_press"])

    def test_invalid_params(self, dispatcher, editor):
        response = dispatcher.dispatch({"method": "resize", "params": {"width": 0, "height": 4}})
        assert response["error"].startswith("Invalid params")
        assert editor.grid.size == (4, 4)

    def test_extra_params_rejected(self, dispatcher):
        response = dispatcher.dispatch({"method": "clear", "params": {"force": True}})
        assert "error" in response

    def test_missing_params_rejected(self, dispatcher):
        assert "error" in dispatcher.dispatch({"method": "pointer_press", "params": {"x": 1}})

    def test_params_optional_for_no_arg_methods(self, dispatcher):
        assert dispatcher.dispatch({"method": "gesture_end"}) == {"result": False}

    def test_methods_listed(self, dispatcher):
        assert {"pointer_press", "touch_start", "export", "get_state"} <= set(dispatcher.methods)

    def test_custom_registration(self, dispatcher):
        from pixelart.commands import Params

        handler = MagicMock(return_value="pong")
        dispatcher.register("ping", Params, handler)
        assert dispatcher.dispatch({"method": "ping"}) == {"result": "pong"}


class TestCommands:

    def test_pointer_flow(self, dispatcher, editor):
        dispatcher.dispatch({"method": "select_color", "params": {"color": "#000000"}})
        dispatcher.dispatch({"method": "pointer_press", "params": {"x": 0, "y": 0}})
        dispatcher.dispatch({"method": "pointer_enter", "params": {"x": 0, "y": 1}})
        dispatcher.dispatch({"method": "pointer_enter", "params": {"x": 0, "y": 2}})
        dispatcher.dispatch({"method": "pointer_release"})
        # Shift only matters at press time
        dispatcher.dispatch({"method": "pointer_press", "params": {"x": 3, "y": 3}})
        dispatcher.dispatch({"method": "pointer_enter", "params": {"x": 0, "y": 1, "shift": True}})
        dispatcher.dispatch({"method": "pointer_leave"})

        assert editor.grid.get(0, 1) == "#000000"
        assert len(editor.grid) == 4

    def test_shift_press_erases(self, dispatcher, editor):
        dispatcher.dispatch({"method": "pointer_press", "params": {"x": 1, "y": 1}})
        dispatcher.dispatch({"method": "pointer_release"})
        result = dispatcher.dispatch({"method": "pointer_press", "params": {"x": 1, "y": 1, "shift": True}})
        assert result == {"result": True}
        assert Cell(1, 1) not in editor.grid

    def test_touch_flow(self, dispatcher, editor):
        dispatcher.dispatch({"method": "touch_start", "params": {"x": 2, "y": 2}})
        dispatcher.dispatch({"method": "touch_move", "params": {"x": 3, "y": 2}})
        dispatcher.dispatch({"method": "touch_end"})
        dispatcher.dispatch({"method": "touch_start", "params": {"x": 2, "y": 2, "touch_count": 2}})
        dispatcher.dispatch({"method": "touch_end"})
        assert list(editor.grid.snapshot()) == [Cell(3, 2)]

    def test_gesture_commands(self, dispatcher, editor):
        dispatcher.dispatch({"method": "gesture_start", "params": {"x": 0, "y": 0}})
        dispatcher.dispatch({"method": "gesture_move", "params": {"x": 1, "y": 0}})
        dispatcher.dispatch({"method": "gesture_end"})
        dispatcher.dispatch({"method": "gesture_start", "params": {"x": 0, "y": 0, "alternate": True}})
        assert list(editor.grid.snapshot()) == [Cell(1, 0)]

    def test_pick_recent(self, dispatcher, editor):
        dispatcher.dispatch({"method": "select_color", "params": {"color": "#ff0000"}})
        response = dispatcher.dispatch({"method": "pick_recent", "params": {"index": 1}})
        assert response == {"result": editor.config.palette.initial_color}

    def test_pick_recent_out_of_range(self, dispatcher):
        assert dispatcher.dispatch({"method": "pick_recent", "params": {"index": 9}}) == {"result": None}

    def test_select_empty_color_rejected(self, dispatcher):
        assert "error" in dispatcher.dispatch({"method": "select_color", "params": {"color": ""}})

    def test_clear_and_resize(self, dispatcher, editor):
        dispatcher.dispatch({"method": "gesture_start", "params": {"x": 0, "y": 0}})
        assert dispatcher.dispatch({"method": "clear"}) == {"result": "ok"}
        assert len(editor.grid) == 0
        assert dispatcher.dispatch({"method": "resize", "params": {"width": 8, "height": 6}}) == {"result": [8, 6]}
        assert editor.grid.size == (8, 6)

    def test_resize_for_viewport(self, dispatcher):
        response = dispatcher.dispatch({"method": "resize_for_viewport", "params": {"viewport_width": 375}})
        assert response == {"result": [16, 16]}

    def test_export(self, dispatcher, saver):
        response = dispatcher.dispatch({"method": "export", "params": {"variant": "vector"}})
        assert response["result"]["ok"] is True
        assert saver.last[1] == "pixel-art.svg"

    def test_export_bad_variant(self, dispatcher, saver):
        assert "error" in dispatcher.dispatch({"method": "export", "params": {"variant": "bmp"}})
        assert saver.saved == []

    def test_get_state(self, dispatcher):
        dispatcher.dispatch({"method": "gesture_start", "params": {"x": 1, "y": 2}})
        state = dispatcher.dispatch({"method": "get_state"})["result"]
        assert state["pixels"] == [{"x": 1, "y": 2, "color": state["selected_color"]}]


class TestDispatchLine:

    def test_round_trip(self, dispatcher):
        response = dispatcher.dispatch_line(json.dumps({"method": "get_state"}))
        assert json.loads(response)["result"]["width"] == 4

    def test_invalid_json(self, dispatcher):
        response = json.loads(dispatcher.dispatch_line("{not json"))
        assert response["error"].startswith("Invalid JSON")
