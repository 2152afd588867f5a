# physengine

physengine is a small 2D physics sandbox. Spheres fall under a constant
acceleration. They bounce off a floor and two walls, and they collide with each
other. When two bodies overlap, the engine pushes them apart along the contact
normal in proportion to their inverse masses. It then applies a restitution
impulse. Contacts are resolved in order of closing velocity, with the largest
closing velocity handled first.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the sandbox

```
physengine
```

This opens a 1920×1080 window that has a floor and a wall on each side.

- Left-click inside the open area to drop a sphere. Each sphere has a radius of 30 and a random colour.
- Clicks on the floor or on a wall are ignored.
- Close the window to quit.

Options:

- `--width`, `--height`: the size of the window, in pixels.
- `--seed`: a seed for the random sphere colours.

## Using the engine from code

```python
from physengine.app import build_world
from physengine.bodies import PhysicsSphere
from physengine.mathutils import Vector2

world = build_world(1920, 1080)           # floor and two walls, already placed
ball = PhysicsSphere(Vector2(400.0, 300.0), 30.0)
world.add_object(ball)                    # initialises the ball with unit mass

for _ in range(1000):
    world.update(0.0003)

print(ball.center_of_mass())
```

### Modules

- **`physengine.mathutils`**
  - `Vector2`: an immutable vector. It supports `+`, `-`, scalar `*` and `/`, and unary `-`.
  - Helper functions: `dot`, `magnitude`, `magnitude_sq`, `dist`, `dist_sq`, `normalized` and `clamp`.
  - `newton_sqrt`: an iterative square root. It raises `ValueError` for negative input.
- **`physengine.bodies`**
  - `PhysicsSphere` and `PhysicsBox`, both based on `PhysicsObject`.
  - Each body has a `position`, which is the top-left corner of its bounding box. It also has `inverse_mass` and `force_accumulator` attributes and a `center_of_mass()` method.
  - Spheres carry a velocity and an acceleration, and `update()` integrates them.
  - Boxes never move. Their velocity and acceleration always read as zero, and they ignore applied forces.
- **`physengine.forces`**
  - `GravityForce` and `DragForce` generators.
  - `ForceRegistry`, which pairs bodies with generators. Its `update_forces()` adds each generator's force to its body.
- **`physengine.contacts`**
  - `ObjectContact`, which separates one or two bodies and applies the restitution impulse.
  - `ContactResolver`, which repeatedly resolves the contact with the largest closing velocity.
- **`physengine.world`**
  - `PhysicsWorld`, together with the collision checks `check_sphere_box`, `check_sphere_sphere`, `check_box_box`, `check_object_ground` and `check_object_object`.
  - Each check returns the penetration depth. A value of zero or less means the bodies do not overlap.
  - `PhysicsWorld.in_bounds(x, y)` tells whether a point lies strictly inside the open area.
- **`physengine.clock`**
  - `Clock`, a stopwatch that reports elapsed seconds and frames per second. It can also be used as a `with` block.
- **`physengine.app`**
  - `build_world`, `spawn_sphere`, `random_color` and the `App` window loop.

## What it does not do

- Box-against-box collisions are never detected. `check_box_box` always returns 0.
- `PhysicsWorld.update` does not use the force generators or the force accumulator. Bodies move only by their own velocity and acceleration. `ForceRegistry` has to be driven separately, and `update()` does not read the forces it adds.
- Gravity and damping settings on spheres are stored but not applied during integration.
- Nothing is saved or loaded. The sandbox has no state beyond the running window.