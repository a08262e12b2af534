"""Basis vectors of a rotation given as an (x, y, z, w) unit quaternion.

Each basis function returns one column of the rotation matrix

    | 1 - 2(yy + zz)   2(xy - wz)       2(xz + wy)     |
    | 2(xy + wz)       1 - 2(xx + zz)   2(yz - wx)     |
    | 2(xz - wy)       2(yz + wx)       1 - 2(xx + yy) |

written with doubled products (``x2 = x + x``, ``xy = x * y2`` ...) so the
result matches ``q * axis`` without building the full matrix. The quaternion
is not normalized; a non-unit input gives a scaled, skewed basis.
"""
from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from .constants import DEG2RAD
from .vector_math import Vector, normalize, to_vector

IDENTITY = np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float64)


def from_axis_angle(axis: Iterable[float] | Vector, degree: float) -> Vector:
    """Unit quaternion rotating by degree around axis (right-handed)."""
    half = degree * DEG2RAD / 2.0
    x, y, z = normalize(to_vector(axis)) * math.sin(half)
    return np.array([x, y, z, math.cos(half)], dtype=np.float64)


def right(rotation: Iterable[float] | Vector) -> Vector:
    """Rotated +X axis."""
    x, y, z, w = to_vector(rotation)
    y2 = y + y
    z2 = z + z
    yy = y * y2
    zz = z * z2
    xy = x * y2
    xz = x * z2
    wy = w * y2
    wz = w * z2
    return np.array([1.0 - (yy + zz), xy + wz, xz - wy], dtype=np.float64)


def up(rotation: Iterable[float] | Vector) -> Vector:
    """Rotated +Y axis."""
    x, y, z, w = to_vector(rotation)
    x2 = x + x
    y2 = y + y
    z2 = z + z
    xx = x * x2
    zz = z * z2
    xy = x * y2
    yz = y * z2
    wx = w * x2
    wz = w * z2
    return np.array([xy - wz, 1.0 - (xx + zz), yz + wx], dtype=np.float64)


def forward(rotation: Iterable[float] | Vector) -> Vector:
    """Rotated +Z axis."""
    x, y, z, w = to_vector(rotation)
    x2 = x + x
    y2 = y + y
    z2 = z + z
    xx = x * x2
    yy = y * y2
    xz = x * z2
    yz = y * z2
    wx = w * x2
    wy = w * y2
    return np.array([xz + wy, yz - wx, 1.0 - (xx + yy)], dtype=np.float64)


def basis(rotation: Iterable[float] | Vector) -> tuple[Vector, Vector, Vector]:
    rotation = to_vector(rotation)
    return right(rotation), up(rotation), forward(rotation)
