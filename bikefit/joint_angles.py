"""
Joint angle calculation for a bike fit.

Names the angles a bike fit looks at (knee, hip, elbow) and evaluates
them over a mapping of joint names to display-space points.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, NamedTuple, Optional

from .angle import angle_between_points
from .arc_layout import ArcLayout, compute_arc
from .config import SIDES
from .errors import DegenerateInputError

logger = logging.getLogger(__name__)


class AngleDefinition(NamedTuple):
    """An angle measured at ``vertex`` between ``proximal`` and ``distal``."""

    name: str
    proximal: str
    vertex: str
    distal: str
    clockwise: bool


@dataclass(frozen=True)
class JointAngle:
    """Measured angle for one joint together with its arc indicator."""

    name: str
    degrees: float
    layout: ArcLayout


def _check_side(side: str) -> str:
    side = side.upper()
    if side not in SIDES:
        raise ValueError(f"Unknown body side: {side!r} (expected one of {SIDES})")
    return side


def bike_fit_angle_definitions(side: str = "RIGHT") -> list[AngleDefinition]:
    """
    Angle definitions for one side of a cyclist.

    Calculates angles for:
        - Knee (Hip-Knee-Ankle)
        - Hip (Shoulder-Hip-Knee)
        - Elbow (Shoulder-Elbow-Wrist)

    Args:
        side: "LEFT" or "RIGHT" (case-insensitive), the side facing the camera

    Returns:
        list: AngleDefinition per joint
    """
    s = _check_side(side)
    return [
        AngleDefinition("Knee", f"{s}_HIP", f"{s}_KNEE", f"{s}_ANKLE", False),
        AngleDefinition("Hip", f"{s}_SHOULDER", f"{s}_HIP", f"{s}_KNEE", True),
        AngleDefinition("Elbow", f"{s}_SHOULDER", f"{s}_ELBOW", f"{s}_WRIST", True),
    ]


def skeleton_segments(side: str = "RIGHT") -> list[tuple[str, ...]]:
    """
    Polylines connecting the joints of one side.

    Returns:
        list: Joint name sequences (ear-shoulder-elbow-wrist and
        shoulder-hip-knee-ankle)
    """
    s = _check_side(side)
    return [
        (f"{s}_EAR", f"{s}_SHOULDER", f"{s}_ELBOW", f"{s}_WRIST"),
        (f"{s}_SHOULDER", f"{s}_HIP", f"{s}_KNEE", f"{s}_ANKLE"),
    ]


def _resolve(joint_points: Mapping, definition: AngleDefinition):
    """Return the (a, b, c) points of a definition, or None if any is missing."""
    names = (definition.proximal, definition.vertex, definition.distal)
    missing = [name for name in names if name not in joint_points]
    if missing:
        logger.debug("Skipping %s: missing %s", definition.name, ", ".join(missing))
        return None
    return tuple(joint_points[name] for name in names)


def calculate_joint_angles(
    joint_points: Mapping,
    definitions: Optional[list[AngleDefinition]] = None,
) -> dict[str, float]:
    """
    Calculate joint angles for pose analysis.

    Angles whose joints are missing or coincide are left out of the
    result rather than reported as zero.

    Args:
        joint_points: Mapping of {joint_name: (x, y)}
        definitions: Angles to compute (default: right-side bike fit)

    Returns:
        dict: Joint angles as {name: angle_degrees}
    """
    if definitions is None:
        definitions = bike_fit_angle_definitions()

    angles = {}
    for definition in definitions:
        points = _resolve(joint_points, definition)
        if points is None:
            continue
        try:
            angles[definition.name] = angle_between_points(*points)
        except DegenerateInputError as e:
            logger.debug("Skipping %s: %s", definition.name, e)
    return angles


def layout_joint_arcs(
    joint_points: Mapping,
    definitions: Optional[list[AngleDefinition]] = None,
) -> dict[str, JointAngle]:
    """
    Calculate joint angles along with their arc indicators.

    Args:
        joint_points: Mapping of {joint_name: (x, y)} in display space
        definitions: Angles to compute (default: right-side bike fit)

    Returns:
        dict: {name: JointAngle}
    """
    if definitions is None:
        definitions = bike_fit_angle_definitions()

    results = {}
    for definition in definitions:
        points = _resolve(joint_points, definition)
        if points is None:
            continue
        try:
            degrees = angle_between_points(*points)
        except DegenerateInputError as e:
            logger.debug("Skipping %s: %s", definition.name, e)
            continue
        layout = compute_arc(*points, clockwise=definition.clockwise)
        logger.debug(
            "%s: %.1f deg, start=%.3f sweep=%.3f radius=%.1f",
            definition.name,
            degrees,
            layout.start_angle,
            layout.sweep_angle,
            layout.radius,
        )
        results[definition.name] = JointAngle(definition.name, degrees, layout)
    return results
