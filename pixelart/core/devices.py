"""Pointer and touch input mapped onto gesture events.

Pointer: shift held at press time erases. Touch: a second finger on the
screen at touch start erases. Releasing, or leaving the canvas, ends the
gesture for pointers.
"""

from .session import GestureEvent


def pointer_press(x: int, y: int, shift: bool = False) -> GestureEvent:
    return GestureEvent.start(x, y, alternate=shift)


def pointer_enter(x: int, y: int, shift: bool = False) -> GestureEvent:
    # Modifiers are carried but have no effect on a drag
    return GestureEvent.move(x, y, alternate=shift)


def pointer_release() -> GestureEvent:
    return GestureEvent.end()


def pointer_leave() -> GestureEvent:
    return GestureEvent.end()


def touch_start(x: int, y: int, touch_count: int = 1) -> GestureEvent:
    return GestureEvent.start(x, y, alternate=touch_count > 1)


def touch_move(x: int, y: int) -> GestureEvent:
    return GestureEvent.move(x, y)


def touch_end() -> GestureEvent:
    return GestureEvent.end()
