from gammaray.input import (
    Input,
    InputEventKey,
    InputEventMouseButton,
    InputEventMouseMotion,
)
from gammaray.keycodes import Key


def test_latest_instance_is_singleton():
    first = Input()
    second = Input()
    assert Input.get_singleton() is second
    assert Input.get_singleton() is not first


def test_keys_start_released():
    assert Input().is_key_pressed(Key.R) is False


def test_key_press_and_release():
    tracker = Input()
    tracker.process_window_input(InputEventKey(pressed=True, keycode=Key.W))
    assert tracker.is_key_pressed(Key.W) is True
    assert tracker.is_key_pressed(Key.S) is False
    tracker.process_window_input(InputEventKey(pressed=False, keycode=Key.W))
    assert tracker.is_key_pressed(Key.W) is False


def test_mouse_motion_updates_position_and_velocity():
    tracker = Input()
    tracker.process_window_input(InputEventMouseMotion(position=(10, 20)))
    assert tracker.mouse_position == (10, 20)
    assert tracker.mouse_velocity == (10, 20)
    tracker.process_window_input(InputEventMouseMotion(position=(13, 15)))
    assert tracker.mouse_position == (13, 15)
    assert tracker.mouse_velocity == (3, -5)


def test_float_positions_are_truncated():
    tracker = Input()
    tracker.process_window_input(InputEventMouseMotion(position=(3.7, -2.9)))
    assert tracker.mouse_position == (3, -2)


def test_non_motion_event_resets_velocity_only():
    tracker = Input()
    tracker.process_window_input(InputEventMouseMotion(position=(5, 6)))
    tracker.process_window_input(InputEventMouseButton(position=(50, 60), pressed=True))
    assert tracker.mouse_velocity == (0, 0)
    assert tracker.mouse_position == (5, 6)


def test_registered_callback_receives_events():
    tracker = Input()
    received = []
    tracker.register_event_callback(received.append)
    key_event = InputEventKey(pressed=True, keycode=Key.SPACE)
    motion = InputEventMouseMotion(position=(1, 1))
    tracker.process_window_input(key_event)
    tracker.process_window_input(motion)
    assert received == [key_event, motion]


def test_callback_can_be_cleared():
    tracker = Input()
    received = []
    tracker.register_event_callback(received.append)
    tracker.register_event_callback(None)
    tracker.process_window_input(InputEventKey(pressed=True, keycode=Key.A))
    assert received == []
    assert tracker.is_key_pressed(Key.A) is True


def test_event_defaults():
    event = InputEventKey()
    assert (event.pressed, event.keycode, event.echo, event.window_id) == (False, 0, False, 0)
    assert InputEventMouseMotion().position == (0, 0)