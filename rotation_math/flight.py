from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .directions import direction3_to_pitch, direction3_to_yaw, yaw_pitch_to_direction3
from .projectile import solve_spatial
from .vector_math import Vector, horizontal, magnitude, normalize, to_vector

logger = logging.getLogger(__name__)


class UnreachableTargetError(ValueError):
    """No launch angle reaches the target at the configured speed."""


@dataclass(slots=True)
class FlightConfig:
    speed: float = 20.0
    gravity: float = -9.8  # signed acceleration along +Y
    trail_length: int = 2000


@dataclass(slots=True)
class FlightState:
    position: Vector
    velocity: Vector
    time: float = 0.0

    @property
    def speed(self) -> float:
        return magnitude(self.velocity)

    @property
    def yaw(self) -> float:
        return direction3_to_yaw(self.velocity)

    @property
    def pitch(self) -> float:
        return direction3_to_pitch(normalize(self.velocity))


class Projectile:
    """Point mass launched at a yaw/pitch and falling under constant gravity."""

    def __init__(
        self,
        position: Vector,
        yaw: float,
        pitch: float,
        config: FlightConfig | None = None,
    ) -> None:
        if config is None:
            config = FlightConfig()
        if config.speed <= 0:
            raise ValueError("Launch speed must be positive")
        self.config = config
        self.origin = to_vector(position)
        self.launch_velocity = yaw_pitch_to_direction3(yaw, pitch) * config.speed
        self.state = FlightState(
            position=self.origin.copy(),
            velocity=self.launch_velocity.copy(),
        )

    @classmethod
    def aimed_at(
        cls,
        from_position: Iterable[float] | Vector,
        to_position: Iterable[float] | Vector,
        config: FlightConfig | None = None,
        high_arc: bool = True,
    ) -> "Projectile":
        """Launch from from_position on a trajectory passing through to_position."""
        if config is None:
            config = FlightConfig()
        origin = to_vector(from_position)
        target = to_vector(to_position)
        angle, success = solve_spatial(origin, target, config.speed, config.gravity, high_arc)
        if not success:
            logger.debug("Cannot aim from %s at %s", origin, target)
            raise UnreachableTargetError(
                f"Target {target.tolist()} is out of range at speed {config.speed}"
            )
        yaw = direction3_to_yaw(horizontal(target - origin))
        return cls(position=origin, yaw=yaw, pitch=angle, config=config)

    def _gravity_vector(self) -> Vector:
        return np.array([0.0, self.config.gravity, 0.0], dtype=np.float64)

    def position_at(self, t: float) -> Vector:
        """Position t seconds after launch."""
        return self.origin + self.launch_velocity * t + 0.5 * self._gravity_vector() * t * t

    def time_to_height(self, height: float) -> float:
        """First time after launch the projectile passes the given height."""
        rise = height - self.origin[1]
        vy = self.launch_velocity[1]
        gravity = self.config.gravity
        if gravity == 0:
            if vy == 0 or rise / vy <= 0:
                raise ValueError(f"Height {height} is never reached")
            return float(rise / vy)
        # 0.5 * g * t^2 + vy * t - rise = 0
        discriminant = vy * vy + 2.0 * gravity * rise
        if discriminant < 0:
            raise ValueError(f"Height {height} is above the apex")
        root = np.sqrt(discriminant)
        times = [t for t in ((-vy - root) / gravity, (-vy + root) / gravity) if t > 1e-12]
        if not times:
            raise ValueError(f"Height {height} is never reached")
        return float(min(times))

    def time_to_reach(self, target: Iterable[float] | Vector) -> float:
        """Seconds until the horizontal distance to target is covered.

        A vertical launch covers no horizontal distance, so the time the
        target height is first passed is returned instead.
        """
        target = to_vector(target)
        horizontal_speed = magnitude(horizontal(self.launch_velocity))
        if horizontal_speed < 1e-9:
            return self.time_to_height(target[1])
        return magnitude(horizontal(target - self.origin)) / horizontal_speed

    def update(self, dt: float) -> None:
        gravity = self._gravity_vector()
        self.state.position = self.state.position + self.state.velocity * dt + 0.5 * gravity * dt * dt
        self.state.velocity = self.state.velocity + gravity * dt
        self.state.time += dt

    def snapshot(self) -> FlightState:
        return FlightState(
            position=self.state.position.copy(),
            velocity=self.state.velocity.copy(),
            time=self.state.time,
        )
