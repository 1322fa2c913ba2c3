"""
Bike-fit photo analysis.

Runs MediaPipe Pose on a single photo of a cyclist, measures the knee,
hip and elbow angles on the side facing the camera, and saves the photo
with angle indicators drawn on it.
"""

import argparse
import logging
import os
import sys

import cv2
import mediapipe as mp

# Path setup for local imports
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from bikefit import annotate_bike_fit, extract_pose_joint_points, setup_logging  # noqa: E402
from bikefit.config import DEFAULT_VIEW_SIZE, MIN_VISIBILITY  # noqa: E402

mp_pose = mp.solutions.pose


def parse_view_size(value):
    """Parse a 'WIDTHxHEIGHT' string."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got {value!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"View size must be positive, got {value!r}")
    return width, height


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Measure bike-fit joint angles on a photo")
    p.add_argument("image", help="Path to the cyclist photo")
    p.add_argument("output", nargs="?", default=None, help="Annotated image path (default: <image>_bikefit.png)")
    p.add_argument("--side", default="right", choices=["left", "right"], help="Body side facing the camera")
    p.add_argument(
        "--view",
        type=parse_view_size,
        default=DEFAULT_VIEW_SIZE,
        help="Output canvas size as WIDTHxHEIGHT (default: %(default)s)",
    )
    p.add_argument("--native", action="store_true", help="Draw at the photo's own size instead of a canvas")
    p.add_argument("--min_visibility", type=float, default=MIN_VISIBILITY, help="Min landmark visibility")
    p.add_argument("--verbose", action="store_true", help="Log joint points and arc geometry")
    return p.parse_args(argv)


def detect_joint_points(image, min_visibility):
    """Run MediaPipe Pose once on a BGR image and return its joint points."""
    with mp_pose.Pose(
        static_image_mode=True,
        model_complexity=2,
        min_detection_confidence=0.5,
    ) as pose:
        results = pose.process(cv2.cvtColor(image, cv2.COLOR_BGR2RGB))
    return extract_pose_joint_points(results, image.shape, min_visibility=min_visibility)


def main(argv=None):
    """Main entry point for bike-fit photo analysis."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    print("=" * 60)
    print("  Bike Fitter: joint angle analysis")
    print("=" * 60)

    image = cv2.imread(args.image)
    if image is None:
        print(f"Error: Could not read image: {args.image}")
        return 1

    h, w = image.shape[:2]
    print(f"\nImage: {args.image} ({w}x{h})")

    joint_points = detect_joint_points(image, args.min_visibility)
    if not joint_points:
        print("Error: No pose detected.")
        return 1

    print(f"Joints detected: {len(joint_points)}")

    view_size = None if args.native else args.view
    annotated, joint_angles = annotate_bike_fit(image, joint_points, args.side.upper(), view_size)

    if not joint_angles:
        print("No joint angles could be measured (missing joints).")
    for name, joint_angle in joint_angles.items():
        print(f"  {name}: {joint_angle.degrees:.1f}°")

    output_path = args.output
    if output_path is None:
        stem, _ = os.path.splitext(args.image)
        output_path = f"{stem}_bikefit.png"

    if not cv2.imwrite(output_path, annotated):
        print(f"Error: Could not write image: {output_path}")
        return 1

    print(f"\nSaved: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
