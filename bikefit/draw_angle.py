"""
Angle overlay drawing utility.

Draws arc indicators (filled wedge, outer arc, degree label) from
ArcLayout values, and a text panel listing the joint angles.
"""

import cv2

from .config import (
    ARC_COLOR,
    ARC_THICKNESS,
    LABEL_COLOR,
    LABEL_FONT_SCALE,
    LABEL_THICKNESS,
    PANEL_FONT_SCALE,
    PANEL_LINE_HEIGHT,
    PANEL_ORIGIN,
    PANEL_TEXT_COLOR,
    WEDGE_ALPHA,
)
from .vector import to_degrees

FONT = cv2.FONT_HERSHEY_SIMPLEX


def format_angle_label(radians):
    """Format an angle in radians as whole degrees."""
    return f"{int(round(to_degrees(radians)))}"


def _pixel(point):
    return (int(round(point[0])), int(round(point[1])))


def draw_angle_arc(frame, layout, label=None, color=ARC_COLOR, alpha=WEDGE_ALPHA):
    """
    Draw one angle indicator on the frame.

    The wedge is alpha-blended over the frame, then the outer arc is
    stroked and the label is centered on the layout's label anchor.
    OpenCV draws arcs towards increasing angle, starting at
    ``layout.start_angle``.

    Args:
        frame: OpenCV image/frame to draw on
        layout: ArcLayout from compute_arc()
        label: Text to draw (default: sweep in whole degrees)
        color: BGR color for the wedge and the arc
        alpha: Wedge opacity

    Returns:
        bool: False if the layout was too small to draw
    """
    if not layout.is_drawable():
        return False

    center = _pixel(layout.center)
    axes = (int(round(layout.radius)), int(round(layout.radius)))
    start = to_degrees(layout.start_angle)
    end = to_degrees(layout.end_angle)

    # Always sweeps towards increasing angle; see the clockwise note in DESIGN.md
    # (a counter-clockwise layout can land on the reflex side)
    # Filled wedge
    overlay = frame.copy()
    cv2.ellipse(overlay, center, axes, 0, start, end, color, -1, cv2.LINE_AA)
    cv2.addWeighted(overlay, alpha, frame, 1 - alpha, 0, frame)

    # Outer arc stroke only
    cv2.ellipse(frame, center, axes, 0, start, end, color, ARC_THICKNESS, cv2.LINE_AA)

    if label is None:
        label = format_angle_label(layout.sweep_angle)
    draw_centered_text(frame, label, layout.label_anchor)
    return True


def draw_shadowed_text(frame, text, origin, font_scale, color, thickness=1):
    """Draw text over a thicker black copy of itself for readability."""
    cv2.putText(frame, text, origin, FONT, font_scale, (0, 0, 0), thickness + 2, cv2.LINE_AA)
    cv2.putText(frame, text, origin, FONT, font_scale, color, thickness, cv2.LINE_AA)


def draw_centered_text(frame, text, anchor, color=LABEL_COLOR):
    """Draw text centered on anchor (cv2.putText positions the baseline-left corner)."""
    (text_w, text_h), _ = cv2.getTextSize(text, FONT, LABEL_FONT_SCALE, LABEL_THICKNESS)
    origin = (
        int(round(anchor[0] - text_w / 2)),
        int(round(anchor[1] + text_h / 2)),
    )
    draw_shadowed_text(frame, text, origin, LABEL_FONT_SCALE, color, LABEL_THICKNESS)


def draw_angle_overlay(frame, angles, origin=PANEL_ORIGIN):
    """
    Draw the measured joint angles as a list in the frame corner.

    Args:
        frame: OpenCV image/frame to draw on
        angles: Dict of {joint_name: angle_degrees}
        origin: Baseline position (x, y) of the first line

    Returns:
        int: Baseline y just below the last line
    """
    x, y = origin
    for name, angle in angles.items():
        draw_shadowed_text(frame, f"{name}: {angle:.1f}", (x, y), PANEL_FONT_SCALE, PANEL_TEXT_COLOR)
        y += PANEL_LINE_HEIGHT
    return y
