"""Interactive window: click inside the arena to drop spheres onto the ground."""

from __future__ import annotations

import argparse
import logging
import random
import time
from typing import Sequence

import pygame

from .bodies import Color, PhysicsBox, PhysicsSphere
from .clock import Clock
from .mathutils import Vector2
from .world import PhysicsWorld

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Physics Engine"
DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
GROUND_THICKNESS = 200.0
WALL_THICKNESS = 200.0
SPAWN_RADIUS = 30.0
SPAWN_POINT_COUNT = 32
TIME_STEP = 0.0003
BACKGROUND: Color = (0, 0, 0, 255)
LEFT_BUTTON = 1


def build_world(width: float = DEFAULT_WIDTH, height: float = DEFAULT_HEIGHT) -> PhysicsWorld:
    """Create a world with a ground box and two side walls for a window of the given size."""
    world = PhysicsWorld()

    ground = PhysicsBox(Vector2(0.0, height - GROUND_THICKNESS), width, GROUND_THICKNESS)
    ground.inverse_mass = 0.0
    world.ground = ground
    world.y_low = 0.0
    world.y_high = height - GROUND_THICKNESS
    world.objects.append(ground)

    wall_height = height - GROUND_THICKNESS
    left = PhysicsBox(Vector2(0.0, 0.0), WALL_THICKNESS, wall_height)
    left.inverse_mass = 0.0
    right = PhysicsBox(Vector2(width - WALL_THICKNESS, 0.0), WALL_THICKNESS, wall_height)
    right.inverse_mass = 0.0
    world.left_wall = left
    world.right_wall = right
    world.x_low = WALL_THICKNESS
    world.x_high = width - WALL_THICKNESS
    world.objects.append(left)
    world.objects.append(right)
    return world


def random_color(rng: random.Random) -> Color:
    """An opaque colour with random red, green and blue channels."""
    return (rng.randrange(256), rng.randrange(256), rng.randrange(256), 255)


def spawn_sphere(
    world: PhysicsWorld, x: float, y: float, rng: random.Random
) -> PhysicsSphere | None:
    """Add a sphere at ``(x, y)`` if the point lies inside the arena."""
    color = random_color(rng)
    if not world.in_bounds(x, y):
        return None
    sphere = PhysicsSphere(Vector2(float(x), float(y)), SPAWN_RADIUS, SPAWN_POINT_COUNT, color)
    world.add_object(sphere)
    return sphere


class App:
    """Owns the world, the window surface and the main loop."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        rng: random.Random | None = None,
        time_step: float = TIME_STEP,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.time_step = time_step
        self.world = build_world(width, height)
        self.surface: pygame.Surface | None = None
        self.running = True
        self.clock = Clock()
        self.delta_time = 0.0
        self._last_time = time.perf_counter()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
            x, y = event.pos
            spawn_sphere(self.world, x, y, self.rng)

    def step(self) -> None:
        """Advance the world by one fixed time step."""
        now = time.perf_counter()
        self.delta_time = now - self._last_time
        self._last_time = now
        self.world.update(self.time_step)

    def draw(self) -> None:
        """Render the scenery and every sphere onto the surface."""
        surface = self.surface
        if surface is None:
            raise RuntimeError("no surface to draw on")
        surface.fill(BACKGROUND)
        for box in (self.world.ground, self.world.left_wall, self.world.right_wall):
            if box is not None:
                rect = pygame.Rect(box.position.x, box.position.y, box.size.x, box.size.y)
                pygame.draw.rect(surface, box.color, rect)
        for obj in self.world.objects:
            if isinstance(obj, PhysicsSphere):
                center = obj.center_of_mass()
                pygame.draw.circle(surface, obj.color, (center.x, center.y), obj.radius)

    def run(self) -> None:
        """Open the window and loop until it is closed."""
        logger.debug("initialising window %dx%d", self.width, self.height)
        pygame.display.init()
        try:
            self.surface = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(WINDOW_TITLE)
            self._last_time = time.perf_counter()
            while self.running:
                with self.clock:
                    for event in pygame.event.get():
                        self.handle_event(event)
                    self.step()
                    self.draw()
                    pygame.display.flip()
        finally:
            self.surface = None
            pygame.display.quit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Drop spheres into a simple physics arena.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    App(args.width, args.height, random.Random(args.seed)).run()
    return 0