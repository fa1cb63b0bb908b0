import math

import pytest

from maple_engine.floats import Float2, Float3
from maple_engine.gamepad import (
    GamePad,
    GamePadButton,
    GamePadState,
    Vibration,
    stick_input,
    trigger_input,
)


@pytest.mark.parametrize(
    "raw, button",
    [
        (0x0001, GamePadButton.UP),
        (0x1000, GamePadButton.A),
        (0x8000, GamePadButton.Y),
    ],
)
def test_button_values_match_controller_bits(raw, button):
    pad = GamePad()
    pad.update([GamePadState(buttons=raw)])
    assert pad.is_down(button)
    assert pad.is_triggered(button)
    other = GamePadButton.B if button != GamePadButton.B else GamePadButton.X
    assert pad.is_up(other)


def test_press_sequence():
    pad = GamePad()
    pad.update([GamePadState(buttons=GamePadButton.A)])
    assert pad.is_down(GamePadButton.A)
    assert pad.is_triggered(GamePadButton.A)
    assert not pad.is_held(GamePadButton.A)

    pad.update([GamePadState(buttons=GamePadButton.A)])
    assert pad.is_held(GamePadButton.A)
    assert not pad.is_triggered(GamePadButton.A)

    pad.update([GamePadState()])
    assert pad.is_released(GamePadButton.A)
    assert pad.is_up(GamePadButton.A)


def test_other_buttons_unaffected():
    pad = GamePad()
    pad.update([GamePadState(buttons=GamePadButton.B)])
    assert pad.is_up(GamePadButton.A)
    assert pad.is_down(GamePadButton.B)


def test_disconnected_user_stops_update():
    pad = GamePad()
    pad.update([GamePadState(), GamePadState(buttons=GamePadButton.X)])
    assert pad.is_down(GamePadButton.X, 1)
    pad.update([None, GamePadState()])
    assert pad.is_down(GamePadButton.X, 1)
    assert pad.states[0] == GamePadState()


def test_stick_dead_zone_gives_zero():
    assert stick_input(6000, 0) == Float3(0.0, 0.0, 0.0)
    assert stick_input(0, 0) == Float3(0.0, 0.0, 0.0)


def test_stick_full_push():
    assert stick_input(32767, 0) == Float3(1.0, 0.0, 1.0)


def test_stick_diagonal_clips_and_normalizes():
    result = stick_input(32767, 32767)
    assert result.z == pytest.approx(1.0)
    assert result.x == pytest.approx(result.y)
    assert math.hypot(result.x, result.y) == pytest.approx(1.0)


def test_stick_magnitude_between_zero_and_one():
    result = stick_input(0, -20000)
    assert result.y == pytest.approx(-1.0)
    assert 0.0 < result.z < 1.0


def test_trigger_limits():
    assert trigger_input(10) == Float2(0.0, 0.0)
    assert trigger_input(255) == Float2(1.0, 1.0)


def test_pad_sticks_and_triggers_read_state():
    pad = GamePad()
    pad.update([GamePadState(left_trigger=255, thumb_rx=32767)])
    assert pad.left_trigger() == Float2(1.0, 1.0)
    assert pad.right_trigger() == Float2(0.0, 0.0)
    assert pad.right_stick() == Float3(1.0, 0.0, 1.0)
    assert pad.left_stick() == Float3(0.0, 0.0, 0.0)


def test_vibration_recorded_and_sent():
    sent = []
    pad = GamePad(vibration_sink=lambda user, v: sent.append((user, v)))
    pad.vibrate(65535, 0x10000, 2)
    assert pad.vibrations[2] == Vibration(65535, 0)
    assert sent == [(2, Vibration(65535, 0))]


def test_stop_all_vibration():
    pad = GamePad()
    pad.vibrate(100, 200, 3)
    pad.stop_all_vibration()
    assert all(v == Vibration(0, 0) for v in pad.vibrations)


@pytest.mark.parametrize("user", [-1, 4])
def test_bad_user_raises(user):
    pad = GamePad()
    with pytest.raises(IndexError):
        pad.is_down(GamePadButton.A, user)