"""Small 2D vector type and the numeric helpers used by the engine."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Iterator, TypeVar

T = TypeVar("T")

DEFAULT_SQRT_TOLERANCE = 0.001


@dataclass(frozen=True)
class Vector2:
    """An immutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


def clamp(value: T, low: T, high: T) -> T:
    """Return ``value`` limited to the closed range ``[low, high]``."""
    if value > high:
        return high
    if value < low:
        return low
    return value


def newton_sqrt(value: float, tolerance: float = DEFAULT_SQRT_TOLERANCE) -> float:
    """Square root by Newton's iteration, stopping when successive guesses
    differ by less than ``tolerance``."""
    if value < 0:
        raise ValueError(f"cannot take the square root of negative value {value}")
    if value == 0:
        return 0.0
    guess = float(value)
    while True:
        root = 0.5 * (guess + value / guess)
        if abs(root - guess) < tolerance:
            return root
        guess = root


def dist_sq(a: Vector2, b: Vector2) -> float:
    """Squared distance between two points."""
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def dist(a: Vector2, b: Vector2) -> float:
    """Distance between two points."""
    return newton_sqrt(dist_sq(a, b))


def magnitude_sq(v: Vector2) -> float:
    """Squared length of a vector."""
    return v.x * v.x + v.y * v.y


def magnitude(v: Vector2) -> float:
    """Length of a vector."""
    return newton_sqrt(magnitude_sq(v))


def normalized(v: Vector2) -> Vector2:
    """Unit vector in the direction of ``v``; the zero vector stays zero."""
    length = magnitude(v)
    if length == 0:
        return Vector2()
    return Vector2(v.x / length, v.y / length)


def dot(a: Vector2, b: Vector2) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y