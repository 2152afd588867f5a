import math

import pytest

from physengine.bodies import PhysicsBox, PhysicsSphere
from physengine.contacts import ContactResolver, ObjectContact
from physengine.mathutils import Vector2

UP = Vector2(0.0, -1.0)


def _sphere(velocity=Vector2(), position=Vector2(100.0, 100.0)):
    sphere = PhysicsSphere(position)
    sphere.velocity = velocity
    return sphere


def test_empty_contact_rejected():
    with pytest.raises(ValueError):
        ObjectContact([], 0.5, 1.0, UP)


def test_only_two_objects_kept():
    bodies = [_sphere(), _sphere(), _sphere()]
    contact = ObjectContact(bodies, 0.5, 1.0, UP)
    assert contact.objects == (bodies[0], bodies[1])


def test_separating_velocity_single():
    contact = ObjectContact([_sphere(Vector2(0.0, 5.0))], 0.5, 1.0, UP)
    assert contact.separating_velocity() == -5.0


def test_separating_velocity_relative():
    a = _sphere(Vector2(0.0, 5.0))
    b = _sphere(Vector2(0.0, 5.0))
    contact = ObjectContact([a, b], 0.5, 1.0, UP)
    assert contact.separating_velocity() == 0.0


def test_resolve_velocity_bounces_with_restitution():
    restitution = 0.5
    contact = ObjectContact([_sphere(Vector2(0.0, 10.0))], restitution, 1.0, UP)
    before = contact.separating_velocity()
    contact.resolve_velocity(0.01)
    assert contact.separating_velocity() == pytest.approx(-restitution * before)


def test_resolve_velocity_leaves_separating_contact():
    sphere = _sphere(Vector2(0.0, -3.0))
    ObjectContact([sphere], 0.5, 1.0, UP).resolve_velocity(0.01)
    assert sphere.velocity == Vector2(0.0, -3.0)


def test_resolve_velocity_infinite_mass_unchanged():
    sphere = _sphere(Vector2(0.0, 10.0))
    sphere.inverse_mass = 0.0
    ObjectContact([sphere], 0.5, 1.0, UP).resolve_velocity(0.01)
    assert sphere.velocity == Vector2(0.0, 10.0)


def test_resolve_velocity_acceleration_buildup_clamped():
    sphere = _sphere(Vector2(0.0, 1.0))
    sphere.acceleration = Vector2(0.0, 1000.0)
    contact = ObjectContact([sphere], 0.5, 1.0, UP)
    contact.resolve_velocity(1.0)
    assert contact.separating_velocity() == pytest.approx(0.0)


def test_resolve_velocity_conserves_momentum():
    a = _sphere(Vector2(0.0, 5.0))
    b = _sphere(Vector2(0.0, -5.0))
    contact = ObjectContact([a, b], 0.8, 1.0, UP)
    total_before = a.velocity + b.velocity
    contact.resolve_velocity(0.01)
    total_after = a.velocity + b.velocity
    assert total_after.y == pytest.approx(total_before.y)
    assert contact.separating_velocity() > 0


def test_box_velocity_stays_zero():
    sphere = _sphere(Vector2(0.0, 5.0))
    box = PhysicsBox()
    ObjectContact([sphere, box], 0.5, 1.0, UP).resolve_velocity(0.01)
    assert box.velocity == Vector2()


def test_interpenetration_single_moves_by_penetration():
    sphere = _sphere()
    start = sphere.position
    ObjectContact([sphere], 0.5, 3.0, UP).resolve_interpenetration(0.01)
    moved = sphere.position - start
    assert math.hypot(moved.x, moved.y) == pytest.approx(3.0)
    assert moved.y < 0


def test_interpenetration_split_by_inverse_mass():
    a = _sphere()
    b = _sphere()
    b.inverse_mass = 3.0
    normal = Vector2(1.0, 0.0)
    start_a, start_b = a.position, b.position
    ObjectContact([a, b], 0.5, 4.0, normal).resolve_interpenetration(0.01)
    move_a = (a.position - start_a).x
    move_b = (b.position - start_b).x
    assert move_a - move_b == pytest.approx(4.0)
    assert move_b / move_a == pytest.approx(-b.inverse_mass / a.inverse_mass)


def test_negative_penetration_does_not_move():
    sphere = _sphere()
    start = sphere.position
    ObjectContact([sphere], 0.5, -1.0, UP).resolve_interpenetration(0.01)
    assert sphere.position == start


def test_resolve_moves_and_bounces():
    sphere = _sphere(Vector2(0.0, 10.0))
    start = sphere.position
    contact = ObjectContact([sphere], 0.5, 2.0, UP)
    contact.resolve(0.01)
    assert sphere.position.y < start.y
    assert contact.separating_velocity() > 0


def test_resolver_picks_most_severe():
    slow = _sphere(Vector2(0.0, 2.0))
    fast = _sphere(Vector2(0.0, 8.0))
    slow_contact = ObjectContact([slow], 0.5, -1.0, UP)
    fast_contact = ObjectContact([fast], 0.5, -1.0, UP)
    before = fast_contact.separating_velocity()
    resolver = ContactResolver(1)
    resolver.resolve_contacts([slow_contact, fast_contact], 0.01)
    assert slow.velocity == Vector2(0.0, 2.0)
    assert fast_contact.separating_velocity() == pytest.approx(-0.5 * before)
    assert resolver.iterations_used == 1


def test_resolver_zero_iterations():
    sphere = _sphere(Vector2(0.0, 8.0))
    ContactResolver().resolve_contacts([ObjectContact([sphere], 0.5, 1.0, UP)], 0.01)
    assert sphere.velocity == Vector2(0.0, 8.0)


def test_resolver_all_contacts_resolved():
    a = _sphere(Vector2(0.0, 2.0))
    b = _sphere(Vector2(0.0, 8.0))
    contacts = [ObjectContact([a], 0.5, -1.0, UP), ObjectContact([b], 0.5, -1.0, UP)]
    resolver = ContactResolver(len(contacts))
    resolver.resolve_contacts(contacts, 0.01)
    assert all(c.separating_velocity() > 0 for c in contacts)
    assert resolver.iterations_used == len(contacts)


def test_resolver_ignores_separating_contacts():
    sphere = _sphere(Vector2(0.0, -4.0))
    resolver = ContactResolver(3)
    resolver.resolve_contacts([ObjectContact([sphere], 0.5, 1.0, UP)], 0.01)
    assert sphere.velocity == Vector2(0.0, -4.0)
    assert resolver.iterations_used == 3