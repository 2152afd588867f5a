"""The physics world: bodies, collision checks and contact resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bodies import PhysicsBox, PhysicsObject, PhysicsSphere
from .contacts import ContactResolver, ObjectContact
from .mathutils import Vector2, clamp, dist_sq, magnitude_sq, newton_sqrt, normalized

NO_PENETRATION = -1.0

# The ground and the two walls occupy the first slots of the object list.
FIRST_DYNAMIC_INDEX = 3
DEFAULT_RESTITUTION = 0.4
DEFAULT_NORMAL = Vector2(0.0, -1.0)
_BOUNDARY_CONTACTS = {
    0: (Vector2(0.0, -1.0), 0.7),
    1: (Vector2(1.0, 0.0), 0.7),
    2: (Vector2(-1.0, 0.0), 0.7),
}


def check_sphere_box(sphere: PhysicsSphere, box: PhysicsBox) -> float:
    """Penetration of a sphere into an axis-aligned box, or a negative value."""
    sphere_center = sphere.center_of_mass()
    box_center = box.center_of_mass()
    half = box.size * 0.5
    closest = Vector2(
        clamp(sphere_center.x, box_center.x - half.x, box_center.x + half.x),
        clamp(sphere_center.y, box_center.y - half.y, box_center.y + half.y),
    )
    distance_sq = magnitude_sq(sphere_center - closest)
    radius = sphere.radius
    if radius * radius > distance_sq:
        return radius - newton_sqrt(distance_sq)
    return NO_PENETRATION


def check_sphere_sphere(first: PhysicsSphere, second: PhysicsSphere) -> float:
    """Penetration between two spheres, or a negative value."""
    reach = first.radius + second.radius
    distance_sq = dist_sq(first.center_of_mass(), second.center_of_mass())
    if reach * reach > distance_sq:
        return reach - newton_sqrt(distance_sq)
    return NO_PENETRATION


def check_box_box(first: PhysicsBox, second: PhysicsBox) -> float:
    """Boxes are never reported as penetrating each other."""
    return 0.0


def check_object_ground(obj: PhysicsObject, ground: PhysicsBox) -> float:
    """Penetration of any body into the ground box."""
    if isinstance(obj, PhysicsSphere):
        return check_sphere_box(obj, ground)
    if isinstance(obj, PhysicsBox):
        return check_box_box(obj, ground)
    return 0.0


def check_object_object(first: PhysicsObject, second: PhysicsObject) -> float:
    """Penetration between two bodies of any shape."""
    if isinstance(first, PhysicsSphere) and isinstance(second, PhysicsSphere):
        return check_sphere_sphere(first, second)
    if isinstance(first, PhysicsBox) and isinstance(second, PhysicsBox):
        return check_box_box(first, second)
    if isinstance(first, PhysicsSphere) and isinstance(second, PhysicsBox):
        return check_sphere_box(first, second)
    if isinstance(first, PhysicsBox) and isinstance(second, PhysicsSphere):
        return check_sphere_box(second, first)
    return 0.0


@dataclass(eq=False)
class PhysicsWorld:
    """Holds the bodies and steps the simulation."""

    ground: PhysicsBox | None = None
    left_wall: PhysicsBox | None = None
    right_wall: PhysicsBox | None = None
    x_low: float = 0.0
    x_high: float = 0.0
    y_low: float = 0.0
    y_high: float = 0.0
    objects: list[PhysicsObject] = field(default_factory=list)
    contacts: list[ObjectContact] = field(default_factory=list)
    resolver: ContactResolver = field(default_factory=ContactResolver)
    num_objects: int = 1
    step: int = 0

    def initialize(self) -> None:
        for obj in self.objects:
            obj.initialize()
            obj.initialized = True
        if self.ground is not None:
            self.ground.initialize()

    def update(self, delta_time: float) -> None:
        """Integrate dynamic bodies and resolve the contacts they make."""
        for i, body in reversed(list(enumerate(self.objects))):
            if i < FIRST_DYNAMIC_INDEX:
                break
            for j, other in reversed(list(enumerate(self.objects[:i]))):
                penetration = check_object_object(body, other)
                if penetration > 0:
                    self._record_contact(body, other, j, penetration)
                else:
                    body.update(delta_time)

        if self.contacts:
            self.resolver.iterations = len(self.contacts)
            self.resolver.resolve_contacts(self.contacts, delta_time)
            self.contacts.clear()

    def _record_contact(
        self, body: PhysicsObject, other: PhysicsObject, index: int, penetration: float
    ) -> None:
        movable = [obj for obj in (body, other) if obj.inverse_mass > 0]
        if not movable:
            return
        normal, restitution = _BOUNDARY_CONTACTS.get(
            index, (DEFAULT_NORMAL, DEFAULT_RESTITUTION)
        )
        if isinstance(body, PhysicsSphere) and isinstance(other, PhysicsSphere):
            normal = normalized(body.center_of_mass() - other.center_of_mass())
        self.contacts.append(ObjectContact(movable, restitution, penetration, normal))

    def add_object(self, obj: PhysicsObject) -> None:
        """Add a body, initialising it with unit mass if it is new."""
        if not obj.initialized:
            obj.initialize()
            obj.inverse_mass = 1.0
            obj.initialized = True
        self.objects.append(obj)
        self.num_objects += 1

    def in_bounds(self, x: float, y: float) -> bool:
        """Whether a point lies strictly inside the playable area."""
        return self.x_low < x < self.x_high and self.y_low < y < self.y_high