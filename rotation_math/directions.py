"""Conversions between angles and direction vectors.

2D directions lie on the XY plane with 0 degrees along +X. In 3D, +Y is up,
yaw turns from the forward axis (+X) toward +Z and pitch is the elevation
above the horizontal XZ plane.
"""
from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from .constants import DEG2RAD, RAD2DEG
from .vector_math import Vector, to_vector


def angle_to_direction2(degree: float) -> Vector:
    """Unit vector on the XY plane pointing at degree."""
    radian = degree * DEG2RAD
    return np.array([math.cos(radian), math.sin(radian)], dtype=np.float64)


def direction2_to_angle(direction: Iterable[float] | Vector) -> float:
    """Angle of a 2D direction in (-180, 180]."""
    x, y = to_vector(direction)[:2]
    return math.atan2(y, x) * RAD2DEG


def yaw_pitch_to_direction3(yaw: float, pitch: float) -> Vector:
    yaw_rad = yaw * DEG2RAD
    pitch_rad = pitch * DEG2RAD
    ring = math.cos(pitch_rad)
    return np.array(
        [math.cos(yaw_rad) * ring, math.sin(pitch_rad), math.sin(yaw_rad) * ring],
        dtype=np.float64,
    )


def direction3_to_yaw(direction: Iterable[float] | Vector) -> float:
    x, _, z = to_vector(direction)[:3]
    return math.atan2(z, x) * RAD2DEG


def direction3_to_pitch(direction: Iterable[float] | Vector) -> float:
    """Pitch of a unit direction in [-90, 90].

    The direction must be unit length; a vertical component outside [-1, 1]
    gives NaN.
    """
    y = to_vector(direction)[1]
    with np.errstate(invalid="ignore"):
        return float(np.arcsin(y) * RAD2DEG)
