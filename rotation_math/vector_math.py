"""Lightweight vector helpers shared by the direction and flight modules."""
from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from .constants import DEG2RAD

Vector = np.ndarray


def to_vector(value: Iterable[float] | Vector) -> Vector:
    """Flat float64 copy of a tuple, list or array; callers may mutate it."""
    return np.array(list(value), dtype=np.float64).ravel()


def magnitude(vec: Iterable[float] | Vector) -> float:
    return float(np.linalg.norm(to_vector(vec)))


def normalize(vec: Iterable[float] | Vector) -> Vector:
    """Unit vector along vec; raises ValueError for a zero-length vector."""
    vec = to_vector(vec)
    norm = magnitude(vec)
    if norm == 0:
        raise ValueError(f"Cannot normalize zero-length vector {vec.tolist()}")
    return vec / norm


def horizontal(vec: Vector) -> Vector:
    """Drop the vertical (y) component of a 3D vector."""
    flat = to_vector(vec)
    flat[1] = 0.0
    return flat


def rotate_about_axis(vec: Vector, axis: Vector, degree: float) -> Vector:
    """Rotate vec around axis by degree (Rodrigues' rotation)."""
    vec = to_vector(vec)
    axis = to_vector(axis)
    axis_norm = magnitude(axis)
    if axis_norm == 0 or abs(degree) < 1e-9:
        return vec.copy()

    k = axis / axis_norm
    radian = degree * DEG2RAD
    cos_a = math.cos(radian)
    sin_a = math.sin(radian)
    return (
        vec * cos_a
        + np.cross(k, vec) * sin_a
        + k * np.dot(k, vec) * (1 - cos_a)
    )
