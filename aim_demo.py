from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

import numpy as np
import pygame

from rotation_math.angles import clamp_signed
from rotation_math.directions import angle_to_direction2, direction3_to_yaw
from rotation_math.flight import FlightConfig, Projectile
from rotation_math.projectile import LaunchSolution, solve_spatial
from rotation_math.vector_math import horizontal

WIDTH, HEIGHT = 1100, 720
BACKGROUND_TOP = np.array([12, 18, 45])
BACKGROUND_BOTTOM = np.array([3, 5, 15])
GROUND_COLOR = (40, 90, 130)
LOW_ARC_COLOR = (120, 210, 255)
HIGH_ARC_COLOR = (255, 180, 90)
TARGET_COLOR = (255, 120, 200)
TRAIL_COLOR = (120, 255, 160)
TEXT_COLOR = (230, 235, 245)

FPS_TARGET = 120
PIXELS_PER_METER = 12.0
LAUNCHER_SCREEN = (80, 560)
COMPASS_CENTER = (WIDTH - 110, 110)
COMPASS_RADIUS = 70
ARC_SAMPLES = 80
SPEED_STEP = 0.5

logger = logging.getLogger(__name__)


@dataclass
class DemoSettings:
    flight: FlightConfig = field(default_factory=FlightConfig)
    min_pitch: float = -80.0
    max_pitch: float = 89.0
    high_arc: bool = True
    target: np.ndarray = field(default_factory=lambda: np.array([40.0, -10.0, 0.0]))


def world_to_screen(point: np.ndarray) -> tuple[int, int]:
    sx = LAUNCHER_SCREEN[0] + point[0] * PIXELS_PER_METER
    sy = LAUNCHER_SCREEN[1] - point[1] * PIXELS_PER_METER
    return int(sx), int(sy)


def screen_to_world(pos: tuple[int, int]) -> np.ndarray:
    x = (pos[0] - LAUNCHER_SCREEN[0]) / PIXELS_PER_METER
    y = (LAUNCHER_SCREEN[1] - pos[1]) / PIXELS_PER_METER
    return np.array([x, y, 0.0], dtype=np.float64)


def build_background() -> pygame.Surface:
    strip = pygame.Surface((1, HEIGHT))
    for y in range(HEIGHT):
        t = y / max(HEIGHT - 1, 1)
        color = BACKGROUND_TOP * (1 - t) + BACKGROUND_BOTTOM * t
        strip.set_at((0, y), tuple(color.astype(int)))
    return pygame.transform.smoothscale(strip, (WIDTH, HEIGHT))


def launch_yaw(target: np.ndarray) -> float:
    return direction3_to_yaw(horizontal(target))


def solve_arcs(settings: DemoSettings) -> tuple[LaunchSolution, LaunchSolution]:
    origin = np.zeros(3)
    config = settings.flight
    low = solve_spatial(origin, settings.target, config.speed, config.gravity, high_arc=False)
    high = solve_spatial(origin, settings.target, config.speed, config.gravity, high_arc=True)
    return low, high


def limit_pitch(solution: LaunchSolution, settings: DemoSettings) -> LaunchSolution:
    """Clamp a solved angle to the launcher's elevation range."""
    if not solution.success:
        return solution
    return LaunchSolution(clamp_signed(solution.angle, settings.min_pitch, settings.max_pitch), True)


def sample_arc(solution: LaunchSolution, settings: DemoSettings) -> list[tuple[int, int]]:
    projectile = Projectile(
        position=np.zeros(3), yaw=launch_yaw(settings.target), pitch=solution.angle, config=settings.flight
    )
    t_end = projectile.time_to_reach(settings.target)
    return [world_to_screen(projectile.position_at(t)) for t in np.linspace(0.0, t_end, ARC_SAMPLES)]


def draw_ground(surface: pygame.Surface) -> None:
    pygame.draw.line(surface, GROUND_COLOR, (0, LAUNCHER_SCREEN[1]), (WIDTH, LAUNCHER_SCREEN[1]), 2)
    pygame.draw.circle(surface, TEXT_COLOR, LAUNCHER_SCREEN, 6)


def draw_target(surface: pygame.Surface, target: np.ndarray) -> None:
    center = world_to_screen(target)
    pygame.draw.circle(surface, TARGET_COLOR, center, 10, 2)
    pygame.draw.circle(surface, TARGET_COLOR, center, 3)


def draw_arcs(
    surface: pygame.Surface,
    arcs: tuple[LaunchSolution, LaunchSolution],
    settings: DemoSettings,
) -> None:
    for solution, color, selected in zip(
        arcs, (LOW_ARC_COLOR, HIGH_ARC_COLOR), (not settings.high_arc, settings.high_arc)
    ):
        if not solution.success:
            continue
        points = sample_arc(solution, settings)
        if len(points) >= 2:
            pygame.draw.lines(surface, color, False, points, 3 if selected else 1)


def draw_compass(surface: pygame.Surface, angle: float | None) -> None:
    pygame.draw.circle(surface, GROUND_COLOR, COMPASS_CENTER, COMPASS_RADIUS, 1)
    if angle is None:
        return
    direction = angle_to_direction2(angle)
    tip = (
        int(COMPASS_CENTER[0] + direction[0] * COMPASS_RADIUS),
        int(COMPASS_CENTER[1] - direction[1] * COMPASS_RADIUS),
    )
    pygame.draw.line(surface, HIGH_ARC_COLOR, COMPASS_CENTER, tip, 3)


def draw_trail(surface: pygame.Surface, trail: deque[np.ndarray]) -> None:
    if len(trail) < 2:
        return
    pygame.draw.lines(surface, TRAIL_COLOR, False, [world_to_screen(p) for p in trail], 2)


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    arcs: tuple[LaunchSolution, LaunchSolution],
    settings: DemoSettings,
    fps: float | None = None,
) -> None:
    low, high = arcs

    def describe(solution: LaunchSolution) -> str:
        return f"{solution.angle:.2f}°" if solution.success else "out of range"

    hud_lines = [
        "Launch Angle Solver",
        "Click to place target | Space fire | Tab switch arc | Up/Down speed",
        f"Speed: {settings.flight.speed:.1f} m/s | Gravity: {settings.flight.gravity:.2f} m/s^2",
        f"Target: x={settings.target[0]:.1f} m  y={settings.target[1]:.1f} m",
        f"Low arc: {describe(low)} | High arc: {describe(high)}",
        f"Selected: {'high' if settings.high_arc else 'low'}",
    ]
    if fps is not None:
        hud_lines.append(f"FPS: {fps:.0f}/{FPS_TARGET}")
    for idx, text in enumerate(hud_lines):
        surface.blit(font.render(text, True, TEXT_COLOR), (16, 16 + idx * 20))


def fire(settings: DemoSettings, arcs: tuple[LaunchSolution, LaunchSolution]) -> Projectile | None:
    solution = limit_pitch(arcs[1] if settings.high_arc else arcs[0], settings)
    if not solution.success:
        logger.info("Target out of range at %.1f m/s", settings.flight.speed)
        return None
    return Projectile(
        position=np.zeros(3), yaw=launch_yaw(settings.target), pitch=solution.angle, config=settings.flight
    )


def handle_events(settings: DemoSettings, shots: list[Projectile], trail: deque[np.ndarray]) -> bool:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            settings.target = screen_to_world(event.pos)
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_TAB:
                settings.high_arc = not settings.high_arc
            if event.key == pygame.K_UP:
                settings.flight.speed += SPEED_STEP
            if event.key == pygame.K_DOWN:
                settings.flight.speed = max(SPEED_STEP, settings.flight.speed - SPEED_STEP)
            if event.key == pygame.K_SPACE:
                projectile = fire(settings, solve_arcs(settings))
                if projectile is not None:
                    trail.clear()
                    shots[:] = [projectile]
    return True


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.font.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Launch Angle Solver")
    font = pygame.font.SysFont("JetBrains Mono", 18)
    clock = pygame.time.Clock()

    background = build_background()
    settings = DemoSettings()
    shots: list[Projectile] = []
    trail: deque[np.ndarray] = deque(maxlen=settings.flight.trail_length)

    running = True
    while running:
        dt = clock.tick(FPS_TARGET) / 1000.0

        running = handle_events(settings, shots, trail)
        if not running:
            break

        for projectile in shots:
            projectile.update(dt)
            trail.append(projectile.state.position.copy())
        # drop shots that fell well below the target
        shots[:] = [p for p in shots if p.state.position[1] > settings.target[1] - 50.0]

        arcs = solve_arcs(settings)
        selected = arcs[1] if settings.high_arc else arcs[0]
        compass_angle = None
        if selected.success:
            # mirror the elevation when firing toward -X
            compass_angle = selected.angle if settings.target[0] >= 0 else 180.0 - selected.angle

        screen.blit(background, (0, 0))
        draw_ground(screen)
        draw_arcs(screen, arcs, settings)
        draw_target(screen, settings.target)
        draw_trail(screen, trail)
        draw_compass(screen, compass_angle)
        draw_hud(screen, font, arcs, settings, clock.get_fps())

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
