"""
Bike Fitter geometry engine.

This package computes joint angles and angle-indicator layouts from 2D
joint points, and provides the pose adapter, display mapping and OpenCV
drawing helpers used to annotate a bike-fit photo.
"""

from .angle import angle_between_points
from .annotate import annotate_bike_fit, fit_image_to_view
from .arc_layout import ArcLayout, compute_arc, compute_label_anchor
from .display_mapping import aspect_fit, map_joint_points, map_to_display
from .draw_angle import draw_angle_arc, draw_angle_overlay, format_angle_label
from .draw_pose import draw_joint_connections, draw_joint_points
from .errors import BikeFitError, DegenerateInputError
from .joint_angles import (
    AngleDefinition,
    JointAngle,
    bike_fit_angle_definitions,
    calculate_joint_angles,
    layout_joint_arcs,
    skeleton_segments,
)
from .keypoint_extractor import extract_joint_points, extract_pose_joint_points
from .logging_config import setup_logging
from .vector import Point2D, distance, dot, normalize_angle, to_degrees

__all__ = [
    "Point2D",
    "distance",
    "dot",
    "normalize_angle",
    "to_degrees",
    "BikeFitError",
    "DegenerateInputError",
    "angle_between_points",
    "ArcLayout",
    "compute_arc",
    "compute_label_anchor",
    "AngleDefinition",
    "JointAngle",
    "bike_fit_angle_definitions",
    "calculate_joint_angles",
    "layout_joint_arcs",
    "skeleton_segments",
    "extract_joint_points",
    "extract_pose_joint_points",
    "aspect_fit",
    "map_to_display",
    "map_joint_points",
    "draw_angle_arc",
    "draw_angle_overlay",
    "format_angle_label",
    "draw_joint_points",
    "draw_joint_connections",
    "annotate_bike_fit",
    "fit_image_to_view",
    "setup_logging",
]
