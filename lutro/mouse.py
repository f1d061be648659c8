"""Mouse state polled from the frontend each frame."""

from __future__ import annotations

import enum
from typing import Any, Callable

from .runtime import LutroError

RETRO_DEVICE_MOUSE = 2
_CACHE_SIZE = 8


class MouseId(enum.IntEnum):
    X = 0
    Y = 1
    LEFT = 2
    RIGHT = 3
    WHEELUP = 4
    WHEELDOWN = 5
    MIDDLE = 6
    HORIZ_WHEELUP = 7
    HORIZ_WHEELDOWN = 8


_BUTTONS = {1: MouseId.LEFT, 2: MouseId.RIGHT, 3: MouseId.MIDDLE}


def _int16(value: int) -> int:
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


def _check_number(value: Any, index: int, fname: str) -> float:
    if isinstance(value, bool):
        raise TypeError(f"bad argument #{index} to '{fname}' (number expected, got boolean)")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            pass
    raise TypeError(
        f"bad argument #{index} to '{fname}' (number expected, got {type(value).__name__})"
    )


class Mouse:
    """Implements ``lutro.mouse``; positions accumulate relative motion."""

    def __init__(self) -> None:
        self.cache = [0] * _CACHE_SIZE

    def update(self, input_state: Callable[[int, int, int, int], int]) -> None:
        """Poll ``input_state(port, device, index, id)`` for every mouse id."""
        for i in range(_CACHE_SIZE):
            value = input_state(0, RETRO_DEVICE_MOUSE, 0, i)
            if i in (MouseId.X, MouseId.Y):
                self.cache[i] = _int16(self.cache[i] + value)
            else:
                self.cache[i] = _int16(value)

    def is_down(self, *args: Any) -> bool:
        """True if any of the given buttons (1 left, 2 right, 3 middle) is held."""
        n = len(args)
        if n < 1:
            raise LutroError(f"lutro.mouse.isDown requires 1 or more arguments, {n} given.")
        for index, arg in enumerate(args, start=1):
            button = _BUTTONS.get(int(_check_number(arg, index, "isDown")))
            if button is not None and self.cache[button]:
                return True
        return False

    def _coord(self, which: MouseId) -> int:
        return self.cache[which] & 0xFFFFFFFF

    def get_x(self, *args: Any) -> int:
        n = len(args)
        if n > 0:
            raise LutroError(f"lutro.mouse.getX takes no arguments, {n} given.")
        return self._coord(MouseId.X)

    def get_y(self, *args: Any) -> int:
        n = len(args)
        if n > 0:
            raise LutroError(f"lutro.mouse.getX takes no arguments, {n} given.")
        return self._coord(MouseId.Y)

    def get_position(self, *args: Any) -> tuple[int, int]:
        n = len(args)
        if n > 0:
            raise LutroError(f"lutro.mouse.getX takes no arguments, {n} given.")
        return self._coord(MouseId.X), self._coord(MouseId.Y)