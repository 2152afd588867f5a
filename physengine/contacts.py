"""Contacts between bodies and the resolver that separates them."""

from __future__ import annotations

from typing import Iterable, Sequence

from .bodies import PhysicsObject
from .mathutils import Vector2, dot


class ObjectContact:
    """A contact involving one or two bodies.

    The normal points towards the first body. With a single body the contact
    is against immovable scenery.
    """

    def __init__(
        self,
        objects: Iterable[PhysicsObject],
        restitution: float,
        penetration: float,
        normal: Vector2,
    ) -> None:
        bodies = tuple(objects)[:2]
        if not bodies:
            raise ValueError("a contact needs at least one object")
        self.objects: tuple[PhysicsObject, ...] = bodies
        self.restitution = restitution
        self.penetration = penetration
        self.normal = normal

    def _relative(self, attribute: str) -> Vector2:
        value = getattr(self.objects[0], attribute)
        if len(self.objects) > 1:
            value = value - getattr(self.objects[1], attribute)
        return value

    def _total_inverse_mass(self) -> float:
        return sum(body.inverse_mass for body in self.objects)

    def resolve(self, delta_time: float) -> None:
        self.resolve_interpenetration(delta_time)
        self.resolve_velocity(delta_time)

    def separating_velocity(self) -> float:
        """Relative velocity along the normal; negative means closing."""
        return dot(self._relative("velocity"), self.normal)

    def resolve_velocity(self, delta_time: float) -> None:
        separating = self.separating_velocity()
        if separating > 0:
            return

        final_separating = -separating * self.restitution

        # Remove velocity built up by acceleration during this step alone.
        from_acceleration = dot(self._relative("acceleration"), self.normal) * delta_time
        if from_acceleration < 0:
            final_separating += self.restitution * from_acceleration
            if final_separating < 0:
                final_separating = 0.0

        delta_velocity = final_separating - separating
        total_inverse_mass = self._total_inverse_mass()
        if total_inverse_mass <= 0:
            return

        impulse_per_inverse_mass = self.normal * (delta_velocity / total_inverse_mass)
        first = self.objects[0]
        first.velocity = first.velocity + impulse_per_inverse_mass * first.inverse_mass
        if len(self.objects) > 1:
            second = self.objects[1]
            second.velocity = second.velocity - impulse_per_inverse_mass * second.inverse_mass

    def resolve_interpenetration(self, delta_time: float) -> None:
        """Move the bodies apart along the normal in inverse proportion to mass."""
        if self.penetration < 0:
            return
        total_inverse_mass = self._total_inverse_mass()
        if total_inverse_mass <= 0:
            return

        move_per_inverse_mass = self.normal * (self.penetration / total_inverse_mass)
        first = self.objects[0]
        first.position = first.position + move_per_inverse_mass * first.inverse_mass
        if len(self.objects) > 1:
            second = self.objects[1]
            second.position = second.position - move_per_inverse_mass * second.inverse_mass


class ContactResolver:
    """Resolves contacts, most severe closing velocity first."""

    def __init__(self, iterations: int = 0) -> None:
        self.iterations = iterations
        self.iterations_used = 0

    def resolve_contacts(self, contacts: Sequence[ObjectContact], delta_time: float) -> None:
        self.iterations_used = 0
        while self.iterations_used < self.iterations:
            worst = None
            max_closing = 0.0
            for contact in contacts:
                separating = contact.separating_velocity()
                if separating < max_closing:
                    max_closing = separating
                    worst = contact
            if worst is not None:
                worst.resolve(delta_time)
            self.iterations_used += 1