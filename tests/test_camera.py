import datetime
import math

import numpy as np
import pytest

from bonobo.camera import FPSCamera, perspective
from bonobo.input import (
    KEY_LEFT_CONTROL,
    KEY_LEFT_SHIFT,
    KEY_W,
    MOUSE_BUTTON_LEFT,
    Action,
    InputHandler,
)


def make_camera():
    return FPSCamera(math.pi / 3, 16 / 9, 0.1, 100.0)


def pressed(*keys):
    ih = InputHandler()
    ih.advance()
    for key in keys:
        ih.feed_keyboard(key, key, Action.PRESS)
    ih.feed_mouse_motion((0, 0))
    return ih


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 10.0)


def test_perspective_maps_near_and_far_planes():
    p = perspective(1.0, 1.5, 0.5, 20.0)
    near = p @ np.array([0.0, 0.0, -0.5, 1.0])
    far = p @ np.array([0.0, 0.0, -20.0, 1.0])
    assert near[2] / near[3] == pytest.approx(-1.0)
    assert far[2] / far[3] == pytest.approx(1.0)


def test_projection_inverse_is_inverse():
    cam = make_camera()
    assert np.allclose(cam.projection @ cam.projection_inverse, np.eye(4))
    assert np.allclose(cam.clip_to_view_matrix(), cam.projection_inverse)
    assert np.allclose(cam.view_to_clip_matrix(), cam.projection)


def test_clip_world_matrices_are_inverse():
    cam = make_camera()
    cam.world.set_translate((1.0, 2.0, 3.0))
    cam.world.set_rotate_y(0.4)
    assert np.allclose(cam.clip_to_world_matrix() @ cam.world_to_clip_matrix(), np.eye(4))


def test_aspect_and_fov_setters_update_projection():
    cam = make_camera()
    cam.aspect = 2.0
    assert cam.aspect == 2.0
    assert np.allclose(cam.projection, perspective(math.pi / 3, 2.0, 0.1, 100.0))
    cam.fov = 1.0
    assert cam.fov == 1.0
    assert np.allclose(cam.projection, perspective(1.0, 2.0, 0.1, 100.0))


def test_forward_movement():
    cam = make_camera()
    cam.update(datetime.timedelta(seconds=1), pressed(KEY_W))
    assert np.allclose(cam.world.translation, [0.0, 0.0, -1.0])


def test_shift_slows_and_control_speeds():
    slow = make_camera()
    slow.update(1.0, pressed(KEY_W, KEY_LEFT_SHIFT))
    fast = make_camera()
    fast.update(1.0, pressed(KEY_W, KEY_LEFT_CONTROL))
    assert slow.world.translation[2] == pytest.approx(-0.25)
    assert fast.world.translation[2] == pytest.approx(-4.0)


def test_ignored_or_captured_keyboard_does_not_move():
    cam = make_camera()
    cam.update(1.0, pressed(KEY_W), ignore_key_events=True)
    ih = pressed(KEY_W)
    ih.set_ui_capture(False, True)
    cam.update(1.0, ih)
    assert np.allclose(cam.world.translation, 0.0)


def test_mouse_drag_rotates():
    cam = make_camera()
    ih = pressed()
    cam.update(0.0, ih)
    ih.feed_mouse_buttons(MOUSE_BUTTON_LEFT, Action.PRESS)
    ih.feed_mouse_motion((3, 5))
    cam.update(0.0, ih)
    assert np.allclose(cam.rotation, [-3.0, -5.0])
    assert np.allclose(cam.world.rotation @ cam.world.rotation.T, np.eye(3))


def test_mouse_ignored_keeps_rotation():
    cam = make_camera()
    ih = pressed()
    ih.feed_mouse_buttons(MOUSE_BUTTON_LEFT, Action.PRESS)
    ih.feed_mouse_motion((3, 5))
    cam.update(0.0, ih, ignore_mouse_events=True)
    assert np.allclose(cam.rotation, 0.0)
    assert np.allclose(cam.world.rotation, np.eye(3))
    assert np.allclose(cam.mouse_position, [3.0, 5.0])


def test_clip_to_view_scales_by_inverse_projection():
    cam = make_camera()
    v = cam.clip_to_view((1.0, 1.0, 2.0))
    assert v[0] == pytest.approx(cam.projection_inverse[0, 0])
    assert v[1] == pytest.approx(cam.projection_inverse[1, 1])
    assert v[2] == pytest.approx(-2.0)


def test_clip_to_world_applies_translation():
    cam = make_camera()
    cam.world.set_translate((5.0, 0.0, 0.0))
    w = cam.clip_to_world((0.0, 0.0, 1.0))
    assert np.allclose(w, [5.0, 0.0, -1.0])


def test_dumps_loads_round_trip():
    cam = make_camera()
    cam.movement_speed = 3.5
    cam.rotation = np.array([0.2, -0.7])
    cam.world.set_translate((1.0, -2.0, 0.5))
    cam.world.set_rotate_z(0.3)
    other = FPSCamera(1.0, 1.0, 1.0, 2.0)
    other.loads(cam.dumps())
    assert other.fov == pytest.approx(cam.fov)
    assert other.aspect == pytest.approx(cam.aspect)
    assert other.movement_speed == pytest.approx(3.5)
    assert np.allclose(other.rotation, cam.rotation)
    assert np.allclose(other.world.matrix(), cam.world.matrix())
    assert np.allclose(other.projection, cam.projection)


def test_loads_rejects_wrong_count():
    cam = make_camera()
    with pytest.raises(ValueError):
        cam.loads("1 2 3")