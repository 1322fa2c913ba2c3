"""
2D vector primitives shared by the angle calculator and the arc layout.

Points are plain (x, y) pairs; Point2D is a NamedTuple so tuples and
Point2D values can be mixed freely.
"""

from math import hypot, isfinite, pi
from typing import NamedTuple

TWO_PI = 2 * pi


class Point2D(NamedTuple):
    """A 2D coordinate in a caller-defined space (usually display pixels)."""

    x: float
    y: float


def subtract(p, q) -> Point2D:
    """Return the vector from q to p."""
    return Point2D(p[0] - q[0], p[1] - q[1])


def dot(u, v) -> float:
    return u[0] * v[0] + u[1] * v[1]


def norm(v) -> float:
    return hypot(v[0], v[1])


def distance(p, q) -> float:
    """Euclidean distance between two points."""
    return norm(subtract(p, q))


def normalize_angle(theta: float) -> float:
    """
    Normalize an angle in radians into [0, 2π).

    Args:
        theta: Angle in radians, any finite value

    Returns:
        float: Equivalent angle in [0, 2π)

    Raises:
        ValueError: If theta is inf or nan
    """
    if not isfinite(theta):
        raise ValueError(f"Cannot normalize non-finite angle: {theta}")
    theta = theta % TWO_PI
    # Tiny negative inputs round up to exactly 2π
    if theta >= TWO_PI:
        return 0.0
    return theta


def to_degrees(radians: float) -> float:
    return radians * (180 / pi)
