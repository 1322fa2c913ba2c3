"""
Arc indicator layout for joint angles.

Computes where an angle indicator should be drawn around a joint: the
start and sweep of the arc, its radius, and the point where the degree
label goes. Nothing here draws; see draw_angle for the OpenCV renderer.

Angles follow atan2 in the caller's coordinate space. On screen (y
pointing down) increasing angles turn clockwise, so the meaning of the
``clockwise`` flag depends on the renderer's arc convention.
"""

from dataclasses import dataclass
from math import atan2, cos, pi, sin

from .config import ARC_RADIUS_FRACTION, LABEL_RADIUS_FRACTION, MIN_DRAWABLE_RADIUS
from .vector import TWO_PI, Point2D, distance, normalize_angle


@dataclass(frozen=True)
class ArcLayout:
    """
    Geometry of one angle indicator.

    Attributes:
        center: Arc center (the joint vertex)
        start_angle: Arc start in radians, in [0, 2π)
        sweep_angle: Interior angle in radians, in [0, π]
        radius: Arc radius, 0 when a limb has zero length
        label_anchor: Center point for the degree label
    """

    center: Point2D
    start_angle: float
    sweep_angle: float
    radius: float
    label_anchor: Point2D

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle

    def is_drawable(self, min_radius: float = MIN_DRAWABLE_RADIUS) -> bool:
        return self.radius > min_radius


def compute_label_anchor(
    center,
    start_angle: float,
    sweep_angle: float,
    radius: float,
    radius_fraction: float = LABEL_RADIUS_FRACTION,
) -> Point2D:
    """
    Place a label on the bisector of an arc.

    The label sits at ``radius * radius_fraction`` from the center, so the
    default keeps it inside the wedge. The caller still has to offset by
    half the rendered text size to center the text on this point.

    Args:
        center: Arc center as (x, y)
        start_angle: Arc start in radians
        sweep_angle: Arc sweep in radians
        radius: Arc radius
        radius_fraction: Fraction of the radius to place the label at

    Returns:
        Point2D: Label anchor
    """
    mid_angle = start_angle + sweep_angle / 2
    label_radius = radius * radius_fraction
    return Point2D(
        center[0] + label_radius * cos(mid_angle),
        center[1] + label_radius * sin(mid_angle),
    )


def compute_arc(a, b, c, clockwise: bool) -> ArcLayout:
    """
    Compute the arc indicator for the angle a-b-c, centered at b.

    The sweep is always the interior angle (never reflex). The radius is
    scaled to the shorter limb so the arc never runs past it.

    Args:
        a: First limb endpoint as (x, y)
        b: Vertex as (x, y)
        c: Second limb endpoint as (x, y)
        clockwise: Start the arc at limb a (True) or limb c (False)

    Returns:
        ArcLayout: Arc geometry with the label anchor at half radius
    """
    angle_a = atan2(a[1] - b[1], a[0] - b[0])
    angle_c = atan2(c[1] - b[1], c[0] - b[0])

    norm_a = normalize_angle(angle_a)
    norm_c = normalize_angle(angle_c)

    sweep = norm_c - norm_a
    if sweep < 0:
        sweep += TWO_PI
    if sweep > pi:
        sweep = TWO_PI - sweep

    radius = min(distance(a, b), distance(c, b)) * ARC_RADIUS_FRACTION
    start_angle = norm_a if clockwise else norm_c
    center = Point2D(b[0], b[1])

    return ArcLayout(
        center=center,
        start_angle=start_angle,
        sweep_angle=sweep,
        radius=radius,
        label_anchor=compute_label_anchor(center, start_angle, sweep, radius),
    )
