from __future__ import annotations

import numpy as np
import pytest

pytest.importorskip("pygame")

from aim_demo import (  # noqa: E402
    ARC_SAMPLES,
    LAUNCHER_SCREEN,
    PIXELS_PER_METER,
    DemoSettings,
    fire,
    sample_arc,
    screen_to_world,
    solve_arcs,
    world_to_screen,
)


@pytest.mark.parametrize("height", [10.0, -10.0])
def test_arcs_straight_above_or_below_launcher(height):
    click = (LAUNCHER_SCREEN[0], int(LAUNCHER_SCREEN[1] - height * PIXELS_PER_METER))
    settings = DemoSettings(target=screen_to_world(click))
    assert settings.target[0] == 0.0

    arcs = solve_arcs(settings)
    assert all(solution.success for solution in arcs)
    for solution in arcs:
        assert abs(solution.angle) == pytest.approx(90.0)
        points = sample_arc(solution, settings)
        assert len(points) == ARC_SAMPLES
        end_x, end_y = points[-1]
        target_x, target_y = world_to_screen(settings.target)
        assert abs(end_x - target_x) <= 1
        assert abs(end_y - target_y) <= 1


def test_sampled_arc_ends_on_target():
    settings = DemoSettings(target=np.array([40.0, -10.0, 0.0]))
    for solution in solve_arcs(settings):
        end_x, end_y = sample_arc(solution, settings)[-1]
        target_x, target_y = world_to_screen(settings.target)
        assert abs(end_x - target_x) <= 1
        assert abs(end_y - target_y) <= 1


def test_fire_out_of_range_returns_none():
    settings = DemoSettings(target=np.array([80.0, 0.0, 0.0]))
    assert fire(settings, solve_arcs(settings)) is None
    settings.target = np.array([0.0, -10.0, 0.0])
    projectile = fire(settings, solve_arcs(settings))
    assert projectile is not None
    assert projectile.state.pitch == pytest.approx(89.0)
