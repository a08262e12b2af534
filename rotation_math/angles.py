"""Circular arithmetic on angles measured in degrees.

Signed angles live in ``[-180, 180)`` and unsigned angles in ``[0, 360)``.
Every function accepts any finite value and re-ranges it first.
"""
from __future__ import annotations

import numpy as np

FULL_TURN = 360.0
HALF_TURN = 180.0


def normalize_signed(degree: float) -> float:
    """Wrap degree into [-180, 180)."""
    offset = np.floor((degree + HALF_TURN) / FULL_TURN)
    wrapped = float(degree - offset * FULL_TURN)
    # rounding can land a tiny negative input exactly on the open end
    if wrapped >= HALF_TURN:
        wrapped -= FULL_TURN
    return wrapped


def normalize_unsigned(degree: float) -> float:
    """Wrap degree into [0, 360)."""
    offset = np.floor(degree / FULL_TURN)
    wrapped = float(degree - offset * FULL_TURN)
    if wrapped >= FULL_TURN:
        wrapped -= FULL_TURN
    return wrapped


def _clamp_arc(degree: float, minimum: float, maximum: float) -> float:
    """Clamp degree onto the arc running counter-clockwise from minimum to maximum.

    Returns a signed angle. When degree is outside the arc the result is the
    bound nearest to it around the circle: the excluded gap is split at its
    midpoint, the half next to ``minimum`` snaps to ``minimum`` and the other
    half to ``maximum``.
    """
    if maximum - minimum >= FULL_TURN:
        return normalize_signed(degree)

    degree = normalize_signed(degree)
    minimum = normalize_signed(minimum)
    maximum = normalize_signed(maximum)

    # maximum < minimum means the arc crosses the +180/-180 seam
    width = normalize_unsigned(maximum - minimum)
    offset = normalize_unsigned(degree - minimum)
    if offset <= width or np.isnan(offset):
        return degree

    gap_midpoint = width + (FULL_TURN - width) / 2.0
    if offset < gap_midpoint:
        return maximum
    return minimum


def clamp_signed(degree: float, minimum: float, maximum: float) -> float:
    """Clamp degree to the arc [minimum, maximum], result in [-180, 180).

    ``clamp_signed(380, 60, 350)`` treats 350 as -10, so the arc runs from 60
    through the seam to -10 and 20 snaps to the closer end, -10.
    """
    return _clamp_arc(degree, minimum, maximum)


def clamp_unsigned(degree: float, minimum: float, maximum: float) -> float:
    """Clamp degree to the arc [minimum, maximum], result in [0, 360)."""
    return normalize_unsigned(_clamp_arc(degree, minimum, maximum))
