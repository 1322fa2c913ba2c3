"""
Bike-fit annotation pipeline.

Fits a photo into a display canvas, maps the detected joints into that
canvas, and draws the skeleton, angle arcs and angle panel.
"""

import logging
from typing import Mapping, Optional

import cv2
import numpy as np

from .config import DEFAULT_VIEW_SIZE
from .display_mapping import aspect_fit, map_joint_points
from .draw_angle import draw_angle_arc, draw_angle_overlay
from .draw_pose import draw_joint_connections, draw_joint_points
from .joint_angles import JointAngle, bike_fit_angle_definitions, layout_joint_arcs, skeleton_segments

logger = logging.getLogger(__name__)


def fit_image_to_view(image: np.ndarray, view_size: tuple[int, int]) -> np.ndarray:
    """
    Scale an image into a view canvas, keeping its aspect ratio.

    Args:
        image: BGR image
        view_size: (width, height) of the canvas

    Returns:
        np.ndarray: Canvas with the centered, letterboxed image
    """
    h, w = image.shape[:2]
    scale, x_offset, y_offset = aspect_fit((w, h), view_size)
    new_w = max(1, int(round(w * scale)))
    new_h = max(1, int(round(h * scale)))
    resized = cv2.resize(image, (new_w, new_h), interpolation=cv2.INTER_AREA)

    view_w, view_h = view_size
    canvas = np.zeros((view_h, view_w, 3), dtype=np.uint8)
    x0 = int(round(x_offset))
    y0 = int(round(y_offset))
    # Rounding can push the image one pixel past the canvas edge
    new_w = min(new_w, view_w - x0)
    new_h = min(new_h, view_h - y0)
    canvas[y0 : y0 + new_h, x0 : x0 + new_w] = resized[:new_h, :new_w]
    return canvas


def annotate_bike_fit(
    image: np.ndarray,
    joint_points: Mapping,
    side: str = "RIGHT",
    view_size: Optional[tuple[int, int]] = DEFAULT_VIEW_SIZE,
) -> tuple[np.ndarray, dict[str, JointAngle]]:
    """
    Draw the bike-fit overlay for one photo.

    Args:
        image: BGR image the joints were detected on
        joint_points: Mapping of {joint_name: (x, y)} in image pixels
        side: Body side facing the camera ("LEFT" or "RIGHT")
        view_size: (width, height) of the output canvas, or None to draw
            on a copy of the image at its own size

    Returns:
        tuple: (annotated canvas, {name: JointAngle})
    """
    h, w = image.shape[:2]
    if view_size is None:
        view_size = (w, h)
        canvas = image.copy()
    else:
        canvas = fit_image_to_view(image, view_size)

    display_points = map_joint_points(joint_points, (w, h), view_size)
    joint_angles = layout_joint_arcs(display_points, bike_fit_angle_definitions(side))

    for joint_angle in joint_angles.values():
        if not draw_angle_arc(canvas, joint_angle.layout):
            logger.debug("Arc for %s too small to draw", joint_angle.name)
    draw_joint_connections(canvas, display_points, skeleton_segments(side))
    draw_joint_points(canvas, display_points)
    draw_angle_overlay(canvas, {name: ja.degrees for name, ja in joint_angles.items()})

    return canvas, joint_angles
