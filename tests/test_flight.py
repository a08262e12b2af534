from __future__ import annotations

import numpy as np
import pytest

from rotation_math.flight import FlightConfig, Projectile, UnreachableTargetError
from rotation_math.vector_math import horizontal, magnitude


@pytest.mark.parametrize("high_arc", [True, False])
@pytest.mark.parametrize(
    "target",
    [
        np.array([40.0, -10.0, 0.0]),
        np.array([10.0, 10.0, 0.0]),
        np.array([20.0, -100.0, 20.0]),
        np.array([-15.0, 2.0, 25.0]),
    ],
)
def test_aimed_projectile_passes_through_target(target, high_arc):
    projectile = Projectile.aimed_at(np.zeros(3), target, FlightConfig(), high_arc=high_arc)
    t = projectile.time_to_reach(target)
    np.testing.assert_allclose(projectile.position_at(t), target, atol=1e-6)


def test_aim_from_offset_origin():
    origin = np.array([5.0, 3.0, -7.0])
    target = origin + np.array([12.0, 4.0, 9.0])
    projectile = Projectile.aimed_at(origin, target, FlightConfig(speed=25.0, gravity=-9.81))
    np.testing.assert_allclose(projectile.position_at(projectile.time_to_reach(target)), target, atol=1e-6)


def test_unreachable_target_raises():
    with pytest.raises(UnreachableTargetError):
        Projectile.aimed_at(np.zeros(3), np.array([50.0, 0.0, 0.0]))
    assert issubclass(UnreachableTargetError, ValueError)


def test_launch_direction_matches_yaw_and_pitch():
    projectile = Projectile(position=np.zeros(3), yaw=30.0, pitch=45.0)
    assert projectile.state.speed == pytest.approx(20.0)
    assert projectile.state.yaw == pytest.approx(30.0)
    assert projectile.state.pitch == pytest.approx(45.0)


def test_update_follows_closed_form_trajectory():
    projectile = Projectile(position=np.array([1.0, 2.0, 3.0]), yaw=-60.0, pitch=35.0)
    initial_horizontal = magnitude(horizontal(projectile.state.velocity))
    for _ in range(250):
        projectile.update(0.01)
        assert magnitude(horizontal(projectile.state.velocity)) == pytest.approx(initial_horizontal)
    assert projectile.state.time == pytest.approx(2.5)
    np.testing.assert_allclose(projectile.state.position, projectile.position_at(2.5), atol=1e-9)


def test_snapshot_is_independent():
    projectile = Projectile(position=np.zeros(3), yaw=0.0, pitch=20.0)
    snapshot = projectile.snapshot()
    projectile.update(0.1)
    np.testing.assert_array_equal(snapshot.position, np.zeros(3))
    assert snapshot.time == 0.0


def test_invalid_launches_rejected():
    with pytest.raises(ValueError):
        Projectile(position=np.zeros(3), yaw=0.0, pitch=10.0, config=FlightConfig(speed=0.0))
    vertical = Projectile(position=np.zeros(3), yaw=0.0, pitch=90.0)
    with pytest.raises(ValueError):
        vertical.time_to_height(25.0)


@pytest.mark.parametrize(
    ("pitch", "height", "expected"),
    [
        (90.0, 10.0, (20.0 - 204.0 ** 0.5) / 9.8),
        (90.0, -10.0, (20.0 + 596.0 ** 0.5) / 9.8),
        (-90.0, -10.0, (596.0 ** 0.5 - 20.0) / 9.8),
        (90.0, 0.0, 40.0 / 9.8),
    ],
)
def test_time_to_height_takes_first_passage(pitch, height, expected):
    projectile = Projectile(position=np.zeros(3), yaw=0.0, pitch=pitch)
    t = projectile.time_to_height(height)
    assert t == pytest.approx(expected)
    assert projectile.position_at(t)[1] == pytest.approx(height, abs=1e-9)


@pytest.mark.parametrize("target", [np.array([0.0, 10.0, 0.0]), np.array([0.0, -10.0, 0.0])])
def test_vertical_aim_reaches_target_overhead_or_below(target):
    for high_arc in (True, False):
        projectile = Projectile.aimed_at(np.zeros(3), target, high_arc=high_arc)
        t = projectile.time_to_reach(target)
        np.testing.assert_allclose(projectile.position_at(t), target, atol=1e-6)


def test_default_config_is_not_shared():
    first = Projectile(position=np.zeros(3), yaw=0.0, pitch=30.0)
    first.config.speed = 5.0
    second = Projectile(position=np.zeros(3), yaw=0.0, pitch=30.0)
    assert second.config.speed == pytest.approx(20.0)
    assert first.config is not second.config
    assert Projectile.aimed_at(np.zeros(3), np.array([20.0, 0.0, 0.0])).config.speed == pytest.approx(20.0)
