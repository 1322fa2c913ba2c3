"""
Joint angle calculation.

Provides the interior angle between three points, used for every joint
angle reported by a bike fit (knee, hip, elbow).
"""

from math import acos

from .errors import DegenerateInputError
from .vector import dot, norm, subtract, to_degrees


def angle_between_points(a, b, c):
    """
    Calculate angle (degrees) at point b formed by a-b-c.

    Args:
        a: First limb endpoint as (x, y)
        b: Vertex point as (x, y) (angle is measured here)
        c: Second limb endpoint as (x, y)

    Returns:
        float: Unsigned interior angle in degrees, in [0, 180]

    Raises:
        DegenerateInputError: If b coincides with a or c
    """
    v1 = subtract(a, b)
    v2 = subtract(c, b)
    norm1 = norm(v1)
    norm2 = norm(v2)
    if norm1 == 0 or norm2 == 0:
        raise DegenerateInputError(
            f"Zero-length limb at vertex {tuple(b)}: a={tuple(a)}, c={tuple(c)}"
        )
    # Unit vectors keep the product in range for very large or small limbs
    u1 = (v1[0] / norm1, v1[1] / norm1)
    u2 = (v2[0] / norm2, v2[1] / norm2)
    # Clamp to avoid domain errors from floating-point overshoot
    cosang = max(-1.0, min(1.0, dot(u1, u2)))

    return to_degrees(acos(cosang))
