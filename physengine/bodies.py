"""Rigid bodies that take part in the simulation: spheres and boxes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Tuple

from .mathutils import Vector2

Color = Tuple[int, int, int, int]

DEFAULT_RADIUS = 10.0
DEFAULT_POINT_COUNT = 16
DEFAULT_SPHERE_FILL_COLOR: Color = (0, 0, 255, 255)

DEFAULT_WIDTH = 40.0
DEFAULT_HEIGHT = 20.0
DEFAULT_BOX_FILL_COLOR: Color = (255, 255, 255, 255)

SPHERE_GRAVITY_ACCELERATION = Vector2(0.0, 49.0)
BOX_GRAVITY_ACCELERATION = Vector2(0.0, 4600.0)


class ShapeType(IntEnum):
    UNSET = 0
    SPHERE = 1
    BOX = 2


class PhysicsObject(ABC):
    """A body with a position (top-left of its bounding box) and mass.

    The y axis points downwards.
    """

    shape_type: ShapeType = ShapeType.UNSET

    def __init__(self, position: Vector2, color: Color) -> None:
        self.position = position
        self.color = color
        self.force_accumulator = Vector2()
        self.inverse_mass = 1.0
        self.fixed = False
        self.initialized = False

    @abstractmethod
    def initialize(self) -> None:
        """Set the body's motion state for the first frame."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the body by ``delta_time`` seconds."""

    @abstractmethod
    def add_force(self, force: Vector2) -> None:
        """Accumulate a force acting on the body."""

    @abstractmethod
    def center_of_mass(self) -> Vector2:
        """Centre point of the body's shape."""

    def _integrate(self, delta_time: float) -> None:
        # Displacement approximated as v * dt for small time steps.
        velocity = self.velocity
        self.position = self.position + velocity * delta_time
        self.velocity = velocity + self.acceleration * delta_time


class PhysicsSphere(PhysicsObject):
    """A circular body."""

    shape_type = ShapeType.SPHERE

    def __init__(
        self,
        position: Vector2 = Vector2(),
        radius: float = DEFAULT_RADIUS,
        point_count: int = DEFAULT_POINT_COUNT,
        color: Color = DEFAULT_SPHERE_FILL_COLOR,
    ) -> None:
        super().__init__(position, color)
        self.radius = radius
        self.point_count = point_count
        self.velocity = Vector2()
        self.acceleration = Vector2()
        self.gravity = 9.8
        self.gravity_on = False
        self.damping = 0.99
        self.damping_on = True

    def initialize(self) -> None:
        self.velocity = Vector2()
        self.acceleration = SPHERE_GRAVITY_ACCELERATION

    def update(self, delta_time: float) -> None:
        self._integrate(delta_time)

    def add_force(self, force: Vector2) -> None:
        self.force_accumulator = self.force_accumulator + force

    def center_of_mass(self) -> Vector2:
        return self.position + Vector2(self.radius, self.radius)


class _Inert:
    """Attribute that always reads as a fixed value and ignores assignment."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        return self._value

    def __set__(self, instance: object, value: Any) -> None:
        pass


class PhysicsBox(PhysicsObject):
    """An axis-aligned rectangular body.

    Boxes never move on their own: their velocity, acceleration, gravity and
    damping read as zero or off, and assignments to them are ignored.
    """

    shape_type = ShapeType.BOX

    velocity = _Inert(Vector2())
    acceleration = _Inert(Vector2())
    gravity_on = _Inert(False)
    gravity = _Inert(0.0)
    damping_on = _Inert(False)
    damping = _Inert(0.0)

    def __init__(
        self,
        position: Vector2 = Vector2(),
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        color: Color = DEFAULT_BOX_FILL_COLOR,
    ) -> None:
        super().__init__(position, color)
        self.size = Vector2(width, height)

    def initialize(self) -> None:
        # Both assignments are absorbed: a box stays at rest.
        self.velocity = Vector2()
        self.acceleration = BOX_GRAVITY_ACCELERATION

    def update(self, delta_time: float) -> None:
        self._integrate(delta_time)

    def add_force(self, force: Vector2) -> None:
        """Boxes ignore applied forces."""

    def center_of_mass(self) -> Vector2:
        return self.position + self.size * 0.5