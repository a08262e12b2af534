"""Closed-form launch angles for a point mass under constant gravity.

``gravity`` is the signed vertical acceleration along +Y, so a planet pulling
down is passed as a negative number (``-9.8``). Angles are elevations above
the horizontal plane, in degrees.

An unreachable target is reported through ``LaunchSolution.success``. It is
detected by the computed angle being NaN, never by checking the inverse trig
domain up front.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, NamedTuple

import numpy as np

from .constants import RAD2DEG
from .vector_math import Vector, to_vector

logger = logging.getLogger(__name__)


class LaunchSolution(NamedTuple):
    angle: float
    success: bool


def _solution(angle: float) -> LaunchSolution:
    angle = float(angle)
    return LaunchSolution(angle=angle, success=not math.isnan(angle))


def solve_flat(
    distance: float,
    speed: float,
    gravity: float,
    high_arc: bool = False,
) -> LaunchSolution:
    """Launch angle hitting a target at the same height, distance away.

    Inverts the range equation ``distance = speed^2 * sin(2 * angle) / -gravity``.
    The low arc is returned unless ``high_arc`` is set, in which case the
    complementary angle is returned. Note that ``solve_spatial`` defaults to
    the high arc, so pass ``high_arc`` explicitly when comparing the two.
    """
    with np.errstate(invalid="ignore", divide="ignore"):
        ratio = np.float64(distance) * -gravity / np.square(np.float64(speed))
        angle = np.arcsin(ratio) / 2.0 * RAD2DEG
    if high_arc:
        angle = 90.0 - angle

    solution = _solution(angle)
    if not solution.success:
        logger.debug(
            "Target at distance %.3f unreachable at speed %.3f (gravity %.3f)",
            distance,
            speed,
            gravity,
        )
    return solution


def solve_spatial(
    from_position: Iterable[float] | Vector,
    to_position: Iterable[float] | Vector,
    speed: float,
    gravity: float,
    high_arc: bool = True,
) -> LaunchSolution:
    """Launch angle from from_position to an arbitrary 3D target.

    With ``d`` the horizontal distance and ``h`` the height difference the
    trajectory satisfies ``d^2 * -gravity / speed^2 + h = sqrt(d^2 + h^2) *
    cos(2 * angle - phase)`` where ``phase = atan2(d, -h)``. The high arc is
    returned by default; ``high_arc=False`` gives the flatter one. This is the
    opposite default from ``solve_flat``; with equal heights the two agree
    only when ``high_arc`` matches.
    """
    offset = to_vector(to_position) - to_vector(from_position)
    dist_sqr = offset[0] * offset[0] + offset[2] * offset[2]
    height = offset[1]

    with np.errstate(invalid="ignore", divide="ignore"):
        numerator = dist_sqr * -gravity / np.square(np.float64(speed)) + height
        denominator = np.sqrt(dist_sqr + height * height)
        phase = np.arctan2(np.sqrt(dist_sqr), -height)
        spread = np.arccos(numerator / denominator)
    if high_arc:
        angle = (spread + phase) / 2.0 * RAD2DEG
    else:
        angle = (phase - spread) / 2.0 * RAD2DEG

    solution = _solution(angle)
    if not solution.success:
        logger.debug(
            "Target offset %s unreachable at speed %.3f (gravity %.3f)",
            offset,
            speed,
            gravity,
        )
    return solution
