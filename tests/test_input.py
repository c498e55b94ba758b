import pytest

from bonobo.input import (
    KEY_W,
    MOUSE_BUTTON_LAST,
    MOUSE_BUTTON_LEFT,
    Action,
    InputHandler,
    KeyState,
)


def test_unknown_key_is_released():
    ih = InputHandler()
    assert ih.keycode_state(KEY_W) == KeyState.RELEASED
    assert ih.mouse_state(MOUSE_BUTTON_LEFT) == KeyState.RELEASED


def test_press_then_just_pressed_on_next_tick():
    ih = InputHandler()
    ih.advance()
    ih.feed_keyboard(KEY_W, 17, Action.PRESS)
    assert ih.keycode_state(KEY_W) == KeyState.PRESSED
    ih.advance()
    assert ih.keycode_state(KEY_W) == KeyState.PRESSED | KeyState.JUST_PRESSED
    ih.advance()
    assert ih.keycode_state(KEY_W) == KeyState.PRESSED


def test_release_sets_just_released():
    ih = InputHandler()
    ih.advance()
    ih.feed_keyboard(KEY_W, 17, Action.PRESS)
    ih.advance()
    ih.advance()
    ih.feed_keyboard(KEY_W, 17, Action.RELEASE)
    ih.advance()
    assert ih.keycode_state(KEY_W) == KeyState.RELEASED | KeyState.JUST_RELEASED


def test_scancode_tracked_separately():
    ih = InputHandler()
    ih.advance()
    ih.feed_keyboard(KEY_W, 17, Action.PRESS)
    assert ih.scancode_state(17) & KeyState.PRESSED
    assert ih.scancode_state(KEY_W) == KeyState.RELEASED
    assert ih.keycode_state(17) == KeyState.RELEASED


def test_repeat_is_ignored():
    ih = InputHandler()
    ih.feed_keyboard(KEY_W, 17, Action.REPEAT)
    assert ih.keycode_state(KEY_W) == KeyState.RELEASED


def test_press_at_tick_zero_wraps_previous_tick():
    ih = InputHandler()
    ih.feed_keyboard(KEY_W, 17, Action.PRESS)
    assert ih.keycode_state(KEY_W) == KeyState.PRESSED | KeyState.JUST_RELEASED


def test_mouse_position_recorded_at_button_change():
    ih = InputHandler()
    ih.feed_mouse_motion((10, 20))
    ih.feed_mouse_buttons(MOUSE_BUTTON_LEFT, Action.PRESS)
    ih.feed_mouse_motion((30, 40))
    assert ih.mouse_position == (30.0, 40.0)
    assert ih.mouse_position_at_state_shift(MOUSE_BUTTON_LEFT) == (10.0, 20.0)
    assert ih.mouse_position_at_state_shift(1) == (-1.0, -1.0)
    assert ih.mouse_state(MOUSE_BUTTON_LEFT) & KeyState.PRESSED


def test_mouse_button_out_of_range():
    ih = InputHandler()
    with pytest.raises(IndexError):
        ih.feed_mouse_buttons(MOUSE_BUTTON_LAST, Action.PRESS)
    with pytest.raises(IndexError):
        ih.mouse_position_at_state_shift(-1)


def test_ui_capture():
    ih = InputHandler()
    assert ih.mouse_captured_by_ui is False
    ih.set_ui_capture(True, False)
    assert ih.mouse_captured_by_ui is True
    assert ih.keyboard_captured_by_ui is False