"""
Joint drawing utility.

Draws joint dots and the skeleton segments that connect them.
"""

import cv2

from .config import CONNECTION_COLOR, CONNECTION_THICKNESS, JOINT_COLOR, JOINT_RADIUS


def draw_joint_points(frame, joint_points):
    """
    Draw a filled circle for each joint.

    Args:
        frame: OpenCV image/frame to draw on
        joint_points: Mapping of {joint_name: (x, y)}
    """
    for point in joint_points.values():
        cv2.circle(
            frame,
            (int(round(point[0])), int(round(point[1]))),
            radius=JOINT_RADIUS,
            color=JOINT_COLOR,
            thickness=-1,
            lineType=cv2.LINE_AA,
        )


def draw_joint_connections(frame, joint_points, segments):
    """
    Draw lines connecting the joints of each segment in order.

    A line is only drawn between two consecutive joints that are both
    present, so a missing joint breaks the polyline instead of pulling it
    to the origin.

    Args:
        frame: OpenCV image/frame to draw on
        joint_points: Mapping of {joint_name: (x, y)}
        segments: Sequences of joint names, e.g. from skeleton_segments()

    Returns:
        int: Number of lines drawn
    """
    drawn = 0
    for segment in segments:
        for start_name, end_name in zip(segment, segment[1:]):
            if start_name not in joint_points or end_name not in joint_points:
                continue
            start = joint_points[start_name]
            end = joint_points[end_name]
            cv2.line(
                frame,
                (int(round(start[0])), int(round(start[1]))),
                (int(round(end[0])), int(round(end[1]))),
                color=CONNECTION_COLOR,
                thickness=CONNECTION_THICKNESS,
                lineType=cv2.LINE_AA,
            )
            drawn += 1
    return drawn
