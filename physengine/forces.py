"""Force generators and the registry that applies them to bodies."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator

from .bodies import PhysicsObject
from .mathutils import Vector2, magnitude, normalized


class ForceGenerator(ABC):
    """Something that adds a force to a body each time step."""

    @abstractmethod
    def update_force(self, obj: PhysicsObject, duration: float) -> None:
        """Add this generator's force to ``obj`` for a step of ``duration``."""


class DragForce(ForceGenerator):
    """Drag opposing motion: F = -v̂ * (k1 * |v| + k2 * |v|^2)."""

    def __init__(self, k1: float, k2: float) -> None:
        self.k1 = k1
        self.k2 = k2

    def update_force(self, obj: PhysicsObject, duration: float) -> None:
        velocity = obj.velocity
        speed = magnitude(velocity)
        factor = self.k1 * speed + self.k2 * speed * speed
        direction = normalized(velocity)
        obj.add_force(direction * -factor)


class GravityForce(ForceGenerator):
    """Weight of a body: F = m * g."""

    def __init__(self, gravity: Vector2) -> None:
        self.gravity = gravity

    def update_force(self, obj: PhysicsObject, duration: float) -> None:
        inverse_mass = obj.inverse_mass
        mass = math.inf if inverse_mass == 0 else 1.0 / inverse_mass
        obj.add_force(self.gravity * mass)


@dataclass(frozen=True, eq=False)
class ForceRegistration:
    """A generator bound to the body it acts on."""

    obj: PhysicsObject
    generator: ForceGenerator


class ForceRegistry:
    """Keeps track of which generators act on which bodies."""

    def __init__(self) -> None:
        self._registrations: list[ForceRegistration] = []

    def add(self, obj: PhysicsObject, generator: ForceGenerator) -> None:
        self._registrations.append(ForceRegistration(obj, generator))

    def remove(self, obj: PhysicsObject, generator: ForceGenerator) -> None:
        """Drop every registration of ``generator`` on ``obj``."""
        self._registrations = [
            r
            for r in self._registrations
            if not (r.obj is obj and r.generator is generator)
        ]

    def clear(self) -> None:
        self._registrations.clear()

    def update_forces(self, duration: float) -> None:
        for registration in self._registrations:
            registration.generator.update_force(registration.obj, duration)

    def __len__(self) -> int:
        return len(self._registrations)

    def __iter__(self) -> Iterator[ForceRegistration]:
        return iter(self._registrations)