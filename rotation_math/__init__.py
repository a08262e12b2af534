"""Angle, direction and launch-angle helpers."""

from .angles import clamp_signed, clamp_unsigned, normalize_signed, normalize_unsigned
from .constants import DEG2RAD, RAD2DEG
from .directions import (
    angle_to_direction2,
    direction2_to_angle,
    direction3_to_pitch,
    direction3_to_yaw,
    yaw_pitch_to_direction3,
)
from .flight import FlightConfig, FlightState, Projectile, UnreachableTargetError
from .projectile import LaunchSolution, solve_flat, solve_spatial
from .quaternion import IDENTITY, basis, forward, from_axis_angle, right, up

__all__ = [
    "DEG2RAD",
    "RAD2DEG",
    "IDENTITY",
    "FlightConfig",
    "FlightState",
    "LaunchSolution",
    "Projectile",
    "UnreachableTargetError",
    "angle_to_direction2",
    "basis",
    "clamp_signed",
    "clamp_unsigned",
    "direction2_to_angle",
    "direction3_to_pitch",
    "direction3_to_yaw",
    "forward",
    "from_axis_angle",
    "normalize_signed",
    "normalize_unsigned",
    "right",
    "solve_flat",
    "solve_spatial",
    "up",
    "yaw_pitch_to_direction3",
]
