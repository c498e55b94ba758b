"""Keyboard and mouse state tracking, fed from window-system events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

MOUSE_BUTTON_LEFT = 0
MOUSE_BUTTON_RIGHT = 1
MOUSE_BUTTON_MIDDLE = 2
MOUSE_BUTTON_LAST = 7

KEY_A = 65
KEY_D = 68
KEY_E = 69
KEY_Q = 81
KEY_S = 83
KEY_W = 87
KEY_ESCAPE = 256
KEY_LEFT_SHIFT = 340
KEY_LEFT_CONTROL = 341

# Ticks are unsigned 64-bit counters; "never" is the largest value.
_TICK_MODULUS = 1 << 64
_NEVER = _TICK_MODULUS - 1


class KeyState(enum.IntFlag):
    PRESSED = 1 << 0
    RELEASED = 1 << 1
    JUST_PRESSED = 1 << 2
    JUST_RELEASED = 1 << 3


class Action(enum.IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass
class _State:
    down_tick: int = _NEVER
    up_tick: int = _NEVER
    is_down: bool = False


Position = tuple[float, float]


class InputHandler:
    """Remembers which keys and buttons are held and when they changed."""

    def __init__(self) -> None:
        self._scancodes: dict[int, _State] = {}
        self._keycodes: dict[int, _State] = {}
        self._mouse: dict[int, _State] = {}
        self._mouse_position: Position = (-1.0, -1.0)
        self._switched: list[Position] = [self._mouse_position] * MOUSE_BUTTON_LAST
        self.mouse_captured_by_ui = False
        self.keyboard_captured_by_ui = False
        self._tick = 0

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def mouse_position(self) -> Position:
        return self._mouse_position

    def advance(self) -> None:
        """Move on to the next frame."""
        self._tick = (self._tick + 1) % _TICK_MODULUS

    def _down(self, states: dict[int, _State], location: int) -> None:
        state = states.setdefault(location, _State())
        state.is_down = True
        state.down_tick = self._tick

    def _up(self, states: dict[int, _State], location: int) -> None:
        state = states.setdefault(location, _State())
        state.is_down = False
        state.up_tick = self._tick

    def feed_keyboard(self, key: int, scancode: int, action: int) -> None:
        if action == Action.PRESS:
            self._down(self._scancodes, scancode)
            self._down(self._keycodes, key)
        elif action == Action.RELEASE:
            self._up(self._scancodes, scancode)
            self._up(self._keycodes, key)

    def feed_mouse_motion(self, position: Iterable[float]) -> None:
        x, y = position
        self._mouse_position = (float(x), float(y))

    def feed_mouse_buttons(self, button: int, action: int) -> None:
        if not 0 <= button < MOUSE_BUTTON_LAST:
            raise IndexError(f"mouse button {button} out of range")
        if action == Action.PRESS:
            self._down(self._mouse, button)
        elif action == Action.RELEASE:
            self._up(self._mouse, button)
        self._switched[button] = self._mouse_position

    def _state(self, states: dict[int, _State], location: int) -> KeyState:
        state = states.get(location)
        if state is None:
            return KeyState.RELEASED
        result = KeyState.PRESSED if state.is_down else KeyState.RELEASED
        previous = (self._tick - 1) % _TICK_MODULUS
        if previous == state.down_tick:
            result |= KeyState.JUST_PRESSED
        if previous == state.up_tick:
            result |= KeyState.JUST_RELEASED
        return result

    def scancode_state(self, scancode: int) -> KeyState:
        return self._state(self._scancodes, scancode)

    def keycode_state(self, key: int) -> KeyState:
        return self._state(self._keycodes, key)

    def mouse_state(self, button: int) -> KeyState:
        return self._state(self._mouse, button)

    def mouse_position_at_state_shift(self, button: int) -> Position:
        """Where the mouse was when ``button`` last changed state."""
        if not 0 <= button < MOUSE_BUTTON_LAST:
            raise IndexError(f"mouse button {button} out of range")
        return self._switched[button]

    def set_ui_capture(self, mouse_capture: bool, keyboard_capture: bool) -> None:
        self.mouse_captured_by_ui = bool(mouse_capture)
        self.keyboard_captured_by_ui = bool(keyboard_capture)