"""
Image-to-display coordinate mapping.

Maps points from image pixels into a view that shows the image
aspect-fit (scaled uniformly and centered, with letterbox bars).
"""

from types import MappingProxyType
from typing import Mapping

from .vector import Point2D


def aspect_fit(image_size: tuple, view_size: tuple) -> tuple[float, float, float]:
    """
    Compute the aspect-fit transform of an image inside a view.

    Args:
        image_size: (width, height) of the image
        view_size: (width, height) of the view

    Returns:
        tuple: (scale, x_offset, y_offset)

    Raises:
        ValueError: If either size has a non-positive dimension
    """
    img_w, img_h = image_size
    view_w, view_h = view_size
    if img_w <= 0 or img_h <= 0 or view_w <= 0 or view_h <= 0:
        raise ValueError(f"Invalid sizes: image={image_size}, view={view_size}")

    scale = min(view_w / img_w, view_h / img_h)
    x_offset = (view_w - img_w * scale) / 2.0
    y_offset = (view_h - img_h * scale) / 2.0
    return scale, x_offset, y_offset


def map_to_display(point, image_size: tuple, view_size: tuple, flip_y: bool = False) -> Point2D:
    """
    Map an image point into view coordinates.

    Args:
        point: (x, y) in image pixels
        image_size: (width, height) of the image
        view_size: (width, height) of the view
        flip_y: Set when the image y axis points up (bottom-left origin)

    Returns:
        Point2D: Point in view coordinates
    """
    scale, x_offset, y_offset = aspect_fit(image_size, view_size)
    y = image_size[1] - point[1] if flip_y else point[1]
    return Point2D(point[0] * scale + x_offset, y * scale + y_offset)


def map_joint_points(
    joint_points: Mapping,
    image_size: tuple,
    view_size: tuple,
    flip_y: bool = False,
) -> Mapping[str, Point2D]:
    """Map every joint into view coordinates, returning a new read-only mapping."""
    return MappingProxyType(
        {
            name: map_to_display(point, image_size, view_size, flip_y)
            for name, point in joint_points.items()
        }
    )
