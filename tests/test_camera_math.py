import pytest

from quadplay.camera_math import (
    ROTATION_STEP,
    ZOOM_FACTOR,
    CameraControls,
    angle_lerp,
    short_angle_dist,
)


@pytest.mark.parametrize("angle", [0.0, 45.0, 359.0, -120.0])
def test_distance_to_self_is_zero(angle):
    assert short_angle_dist(angle, angle) == pytest.approx(0.0)


def test_short_distance_forward():
    assert short_angle_dist(0.0, 10.0) == pytest.approx(10.0)


def test_short_distance_goes_backwards_across_zero():
    assert short_angle_dist(0.0, 350.0) == pytest.approx(-10.0)


@pytest.mark.parametrize("a0,a1", [(10.0, 200.0), (300.0, 20.0), (-50.0, 170.0)])
def test_distance_is_at_most_half_turn(a0, a1):
    assert abs(short_angle_dist(a0, a1)) <= 180.0


def test_angle_lerp_endpoints():
    assert angle_lerp(30.0, 80.0, 0.0) == pytest.approx(30.0)
    assert angle_lerp(30.0, 80.0, 1.0) == pytest.approx(80.0)


def test_wheel_rotates_in_steps():
    controls = CameraControls()
    controls.apply_wheel(1.0)
    assert controls.rotation == pytest.approx(ROTATION_STEP)


def test_wheel_wraps_rotation():
    controls = CameraControls(rotation=350.0)
    controls.apply_wheel(1.0)
    assert controls.rotation == pytest.approx(0.0)
    controls.apply_wheel(-1.0)
    assert controls.rotation == pytest.approx(350.0)


def test_wheel_with_modifier_zooms():
    controls = CameraControls()
    controls.apply_wheel(1.0, zoom_modifier=True)
    assert controls.zoom == pytest.approx(ZOOM_FACTOR)
    assert controls.rotation == 0.0
    controls.apply_wheel(-1.0, zoom_modifier=True)
    assert controls.zoom == pytest.approx(1.0)


def test_zero_wheel_does_nothing():
    controls = CameraControls(rotation=20.0, zoom=2.0)
    controls.apply_wheel(0.0, zoom_modifier=True)
    controls.apply_wheel(0.0)
    assert (controls.rotation, controls.zoom) == (20.0, 2.0)