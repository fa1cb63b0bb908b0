"""Keyboard, mouse and controller input with edge detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Optional, Sequence, Tuple

from maple_engine.gamepad import GamePad, GamePadState

KEY_COUNT = 256
MOUSE_BUTTON_COUNT = 8


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


@dataclass
class MouseState:
    """Mouse movement since the last read and the state of its buttons."""

    x: int = 0
    y: int = 0
    z: int = 0
    buttons: Sequence[int] = ()

    def __post_init__(self) -> None:
        buttons = tuple(int(b) for b in self.buttons)
        if len(buttons) > MOUSE_BUTTON_COUNT:
            raise ValueError(f"a mouse has at most {MOUSE_BUTTON_COUNT} buttons")
        self.buttons = buttons + (0,) * (MOUSE_BUTTON_COUNT - len(buttons))


@dataclass(frozen=True)
class MousePosition:
    x: int
    y: int
    z: int


def _key_index(key: int) -> int:
    if not isinstance(key, int) or not 0 <= key < KEY_COUNT:
        raise IndexError(f"key must be from 0 to {KEY_COUNT - 1}, got {key!r}")
    return key


def _button_index(button: int) -> int:
    if not isinstance(button, int) or not 0 <= button < MOUSE_BUTTON_COUNT:
        raise IndexError(
            f"mouse button must be from 0 to {MOUSE_BUTTON_COUNT - 1}, got {button!r}"
        )
    return button


class Input:
    """Current and previous keyboard, mouse and controller state."""

    def __init__(self, gamepad: Optional[GamePad] = None) -> None:
        self.gamepad = gamepad if gamepad is not None else GamePad()
        self.keys: bytes = bytes(KEY_COUNT)
        self.old_keys: bytes = bytes(KEY_COUNT)
        self.mouse = MouseState()
        self.old_mouse = MouseState()

    def update(
        self,
        keys: Iterable[int],
        mouse: Optional[MouseState] = None,
        pads: Iterable[Optional[GamePadState]] = (),
    ) -> None:
        """Take a new frame of input; the current state becomes the previous one.

        ``keys`` holds one value per key, non-zero meaning pressed.
        """
        new_keys = bytes(keys)
        if len(new_keys) != KEY_COUNT:
            raise ValueError(f"expected {KEY_COUNT} key values, got {len(new_keys)}")
        self.old_keys = self.keys
        self.keys = new_keys

        self.old_mouse = self.mouse
        self.mouse = mouse if mouse is not None else MouseState()

        pad = self.gamepad
        pad.update(pads)
        pad.l_stick = pad.left_stick()
        pad.r_stick = pad.right_stick()
        pad.l_trigger = pad.left_trigger()
        pad.r_trigger = pad.right_trigger()

    def is_key_down(self, key: int) -> bool:
        return bool(self.keys[_key_index(key)])

    def is_key_up(self, key: int) -> bool:
        return not self.keys[_key_index(key)]

    def is_key_held(self, key: int) -> bool:
        index = _key_index(key)
        return bool(self.keys[index]) and bool(self.old_keys[index])

    def is_key_triggered(self, key: int) -> bool:
        index = _key_index(key)
        return bool(self.keys[index]) and not self.old_keys[index]

    def is_key_released(self, key: int) -> bool:
        index = _key_index(key)
        return not self.keys[index] and bool(self.old_keys[index])

    def is_mouse_down(self, button: int) -> bool:
        return bool(self.mouse.buttons[_button_index(button)])

    def is_mouse_up(self, button: int) -> bool:
        return not self.mouse.buttons[_button_index(button)]

    def is_mouse_held(self, button: int) -> bool:
        index = _button_index(button)
        return bool(self.mouse.buttons[index]) and bool(self.old_mouse.buttons[index])

    def is_mouse_triggered(self, button: int) -> bool:
        index = _button_index(button)
        return bool(self.mouse.buttons[index]) and not self.old_mouse.buttons[index]

    def is_mouse_released(self, button: int) -> bool:
        index = _button_index(button)
        return not self.mouse.buttons[index] and bool(self.old_mouse.buttons[index])

    def mouse_position(self) -> MousePosition:
        """Mouse movement reported in the latest update."""
        return MousePosition(self.mouse.x, self.mouse.y, self.mouse.z)

    def stop_all_vibration(self) -> None:
        self.gamepad.stop_all_vibration()