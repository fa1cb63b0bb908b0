"""Game controller state tracking with dead-zone handling and vibration."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Callable, Iterable, List, Optional

from maple_engine.floats import Float2, Float3

USER_COUNT = 4
INPUT_DEADZONE = 6000
INPUT_TRIGGER_DEADZONE = 10
MAX_MAGNITUDE = 32767
MAX_TRIGGER_MAGNITUDE = 255


class GamePadButton(IntFlag):
    """Button bits of a controller's button word."""

    UP = 0x0001
    DOWN = 0x0002
    LEFT = 0x0004
    RIGHT = 0x0008
    START = 0x0010
    BACK = 0x0020
    STICK_L = 0x0040
    STICK_R = 0x0080
    LB = 0x0100
    RB = 0x0200
    A = 0x1000
    B = 0x2000
    X = 0x4000
    Y = 0x8000


@dataclass
class GamePadState:
    """A snapshot of one controller."""

    buttons: int = 0
    left_trigger: int = 0
    right_trigger: int = 0
    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0


@dataclass
class Vibration:
    """Motor speeds, each from 0 to 65535."""

    left_speed: int = 0
    right_speed: int = 0


def stick_input(x: float, y: float) -> Float3:
    """Direction and dead-zone-adjusted magnitude (0 to 1) of a thumb stick.

    Inside the circular dead zone the result is all zeros.
    """
    magnitude = math.sqrt(x * x + y * y)
    if magnitude <= INPUT_DEADZONE:
        return Float3(0.0, 0.0, 0.0)
    direction_x = x / magnitude
    direction_y = y / magnitude
    clipped = min(magnitude, MAX_MAGNITUDE) - INPUT_DEADZONE
    return Float3(direction_x, direction_y, clipped / (MAX_MAGNITUDE - INPUT_DEADZONE))


def trigger_input(value: float) -> Float2:
    """Direction and dead-zone-adjusted magnitude (0 to 1) of a trigger."""
    magnitude = abs(value)
    if magnitude <= INPUT_TRIGGER_DEADZONE:
        return Float2(0.0, 0.0)
    direction = value / magnitude
    clipped = min(magnitude, MAX_TRIGGER_MAGNITUDE) - INPUT_TRIGGER_DEADZONE
    return Float2(direction, clipped / (MAX_TRIGGER_MAGNITUDE - INPUT_TRIGGER_DEADZONE))


def _check_user(user: int) -> int:
    if not isinstance(user, int) or not 0 <= user < USER_COUNT:
        raise IndexError(f"user index must be from 0 to {USER_COUNT - 1}, got {user!r}")
    return user


class GamePad:
    """Current and previous state of up to four controllers.

    Vibration requests are recorded in :attr:`vibrations` and passed to
    ``vibration_sink`` when one is given.
    """

    def __init__(
        self, vibration_sink: Optional[Callable[[int, Vibration], None]] = None
    ) -> None:
        self.states: List[GamePadState] = [GamePadState() for _ in range(USER_COUNT)]
        self.old_states: List[GamePadState] = [GamePadState() for _ in range(USER_COUNT)]
        self.vibrations: List[Vibration] = [Vibration() for _ in range(USER_COUNT)]
        self.vibration_sink = vibration_sink
        self.l_stick = Float3(0.0, 0.0, 0.0)
        self.r_stick = Float3(0.0, 0.0, 0.0)
        self.l_trigger = Float2(0.0, 0.0)
        self.r_trigger = Float2(0.0, 0.0)

    def update(self, states: Iterable[Optional[GamePadState]]) -> None:
        """Take new controller states, in user order.

        A missing or ``None`` entry marks that controller as disconnected: its
        state is cleared and the users after it are not updated.
        """
        supplied = list(states)[:USER_COUNT]
        for user in range(USER_COUNT):
            self.old_states[user] = self.states[user]
            new = supplied[user] if user < len(supplied) else None
            if new is None:
                self.states[user] = GamePadState()
                break
            self.states[user] = new

    def _now(self, button: int, user: int) -> bool:
        return bool(self.states[_check_user(user)].buttons & button)

    def _before(self, button: int, user: int) -> bool:
        return bool(self.old_states[_check_user(user)].buttons & button)

    def is_down(self, button: int, user: int = 0) -> bool:
        return self._now(button, user)

    def is_up(self, button: int, user: int = 0) -> bool:
        return not self._now(button, user)

    def is_held(self, button: int, user: int = 0) -> bool:
        """Pressed now and in the previous update."""
        return self._now(button, user) and self._before(button, user)

    def is_triggered(self, button: int, user: int = 0) -> bool:
        """Pressed now but not in the previous update."""
        return self._now(button, user) and not self._before(button, user)

    def is_released(self, button: int, user: int = 0) -> bool:
        """Released now after being pressed in the previous update."""
        return not self._now(button, user) and self._before(button, user)

    def left_stick(self, user: int = 0) -> Float3:
        state = self.states[_check_user(user)]
        return stick_input(state.thumb_lx, state.thumb_ly)

    def right_stick(self, user: int = 0) -> Float3:
        state = self.states[_check_user(user)]
        return stick_input(state.thumb_rx, state.thumb_ry)

    def left_trigger(self, user: int = 0) -> Float2:
        return trigger_input(self.states[_check_user(user)].left_trigger)

    def right_trigger(self, user: int = 0) -> Float2:
        return trigger_input(self.states[_check_user(user)].right_trigger)

    def vibrate(self, left_speed: int, right_speed: int, user: int = 0) -> None:
        """Set the motor speeds; values are truncated to 16 bits."""
        vibration = Vibration(int(left_speed) & 0xFFFF, int(right_speed) & 0xFFFF)
        self.vibrations[_check_user(user)] = vibration
        if self.vibration_sink is not None:
            self.vibration_sink(user, vibration)

    def stop_vibration(self, user: int = 0) -> None:
        self.vibrate(0, 0, user)

    def stop_all_vibration(self) -> None:
        for user in range(USER_COUNT):
            self.stop_vibration(user)