"""
Keypoint extraction utility.

Turns MediaPipe pose landmarks into an immutable mapping of joint names
to pixel coordinates. Landmarks below the visibility threshold are left
out, so downstream code sees them as missing rather than as (0, 0).
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from .config import MIN_VISIBILITY, POSE_LANDMARK_INDEX
from .vector import Point2D

logger = logging.getLogger(__name__)


def extract_joint_points(
    landmarks,
    frame_shape: tuple,
    joints: Optional[Mapping[str, int]] = None,
    min_visibility: float = MIN_VISIBILITY,
) -> Mapping[str, Point2D]:
    """
    Extract joint points from MediaPipe pose landmarks.

    Args:
        landmarks: Sequence of landmarks with normalized x, y (0-1) and an
            optional visibility, e.g. ``results.pose_landmarks.landmark``
        frame_shape: Tuple of (height, width) of the frame
        joints: Mapping of {joint_name: landmark_idx} (default: bike-fit joints)
        min_visibility: Landmarks below this visibility are dropped

    Returns:
        Mapping: Read-only {joint_name: Point2D} in pixel coordinates
    """
    if landmarks is None:
        return MappingProxyType({})

    if joints is None:
        joints = POSE_LANDMARK_INDEX

    h, w = frame_shape[:2]
    points = {}

    for name, idx in joints.items():
        if idx >= len(landmarks):
            continue
        landmark = landmarks[idx]
        visibility = getattr(landmark, "visibility", 1.0)
        if visibility < min_visibility:
            logger.debug("Dropping %s (visibility %.2f)", name, visibility)
            continue
        points[name] = Point2D(landmark.x * w, landmark.y * h)

    return MappingProxyType(points)


def extract_pose_joint_points(results, frame_shape: tuple, **kwargs) -> Mapping[str, Point2D]:
    """
    Extract joint points from MediaPipe Pose processing results.

    Args:
        results: MediaPipe Pose processing results
        frame_shape: Tuple of (height, width) of the frame
        **kwargs: Passed to extract_joint_points()

    Returns:
        Mapping: Read-only {joint_name: Point2D}, empty if no pose detected
    """
    if not results.pose_landmarks:
        return MappingProxyType({})
    return extract_joint_points(results.pose_landmarks.landmark, frame_shape, **kwargs)
