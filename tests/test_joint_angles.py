import math

import pytest

from bikefit import (
    AngleDefinition,
    JointAngle,
    Point2D,
    angle_between_points,
    bike_fit_angle_definitions,
    calculate_joint_angles,
    layout_joint_arcs,
    skeleton_segments,
)


def test_right_side_definitions():
    definitions = {d.name: d for d in bike_fit_angle_definitions()}
    assert set(definitions) == {"Knee", "Hip", "Elbow"}
    assert definitions["Knee"] == AngleDefinition("Knee", "RIGHT_HIP", "RIGHT_KNEE", "RIGHT_ANKLE", False)
    assert definitions["Hip"].vertex == "RIGHT_HIP"
    assert definitions["Hip"].clockwise is True
    assert definitions["Elbow"].distal == "RIGHT_WRIST"


def test_side_is_case_insensitive():
    definitions = bike_fit_angle_definitions("left")
    assert all(d.vertex.startswith("LEFT_") for d in definitions)


def test_unknown_side_raises():
    with pytest.raises(ValueError):
        bike_fit_angle_definitions("front")
    with pytest.raises(ValueError):
        skeleton_segments("back")


def test_skeleton_segments():
    arm, leg = skeleton_segments("RIGHT")
    assert arm == ("RIGHT_EAR", "RIGHT_SHOULDER", "RIGHT_ELBOW", "RIGHT_WRIST")
    assert leg == ("RIGHT_SHOULDER", "RIGHT_HIP", "RIGHT_KNEE", "RIGHT_ANKLE")


def test_calculate_joint_angles(right_side_points):
    angles = calculate_joint_angles(right_side_points)
    assert set(angles) == {"Knee", "Hip", "Elbow"}
    p = right_side_points
    assert angles["Knee"] == pytest.approx(
        angle_between_points(p["RIGHT_HIP"], p["RIGHT_KNEE"], p["RIGHT_ANKLE"])
    )
    assert angles["Hip"] == pytest.approx(
        angle_between_points(p["RIGHT_SHOULDER"], p["RIGHT_HIP"], p["RIGHT_KNEE"])
    )


def test_right_angle_knee():
    points = {
        "RIGHT_HIP": Point2D(0, 0),
        "RIGHT_KNEE": Point2D(100, 0),
        "RIGHT_ANKLE": Point2D(100, 100),
    }
    assert calculate_joint_angles(points) == {"Knee": pytest.approx(90.0)}


def test_missing_joint_is_skipped(right_side_points):
    points = dict(right_side_points)
    del points["RIGHT_WRIST"]
    angles = calculate_joint_angles(points)
    assert "Elbow" not in angles
    assert set(angles) == {"Knee", "Hip"}


def test_degenerate_joint_is_skipped(right_side_points):
    points = dict(right_side_points)
    points["RIGHT_ANKLE"] = points["RIGHT_KNEE"]
    angles = calculate_joint_angles(points)
    assert "Knee" not in angles
    assert "Hip" in angles


def test_empty_mapping():
    assert calculate_joint_angles({}) == {}
    assert layout_joint_arcs({}) == {}


def test_custom_definitions():
    points = {"A": (1, 0), "B": (0, 0), "C": (-1, 0)}
    angles = calculate_joint_angles(points, [AngleDefinition("Straight", "A", "B", "C", True)])
    assert angles == {"Straight": pytest.approx(180.0)}


def test_layout_joint_arcs(right_side_points):
    results = layout_joint_arcs(right_side_points)
    assert set(results) == {"Knee", "Hip", "Elbow"}
    knee = results["Knee"]
    assert isinstance(knee, JointAngle)
    assert knee.layout.center == right_side_points["RIGHT_KNEE"]
    assert math.degrees(knee.layout.sweep_angle) == pytest.approx(knee.degrees, abs=1e-6)
    for joint_angle in results.values():
        assert 0.0 <= joint_angle.layout.sweep_angle <= math.pi
        assert joint_angle.layout.is_drawable()


def test_layout_follows_winding(right_side_points):
    p = right_side_points
    results = layout_joint_arcs(right_side_points)
    # Knee is counter-clockwise: starts at the ankle limb
    ankle_dir = math.atan2(p["RIGHT_ANKLE"].y - p["RIGHT_KNEE"].y, p["RIGHT_ANKLE"].x - p["RIGHT_KNEE"].x)
    assert results["Knee"].layout.start_angle == pytest.approx(ankle_dir % (2 * math.pi))
    # Hip is clockwise: starts at the shoulder limb
    shoulder_dir = math.atan2(p["RIGHT_SHOULDER"].y - p["RIGHT_HIP"].y, p["RIGHT_SHOULDER"].x - p["RIGHT_HIP"].x)
    assert results["Hip"].layout.start_angle == pytest.approx(shoulder_dir % (2 * math.pi))


def test_input_mapping_is_not_modified(right_side_points):
    before = dict(right_side_points)
    layout_joint_arcs(right_side_points)
    calculate_joint_angles(right_side_points)
    assert dict(right_side_points) == before
