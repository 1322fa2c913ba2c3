import argparse
import importlib.util
import os

import cv2
import numpy as np
import pytest

mp = pytest.importorskip("mediapipe")
if not hasattr(mp, "solutions"):
    pytest.skip("mediapipe build without the legacy solutions API", allow_module_level=True)

SCRIPT = os.path.join(os.path.dirname(__file__), "..", "src", "bike_fit.py")


@pytest.fixture(scope="module")
def bike_fit():
    spec = importlib.util.spec_from_file_location("bike_fit", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_parse_view_size(bike_fit):
    assert bike_fit.parse_view_size("640x480") == (640, 480)
    assert bike_fit.parse_view_size("800X600") == (800, 600)
    with pytest.raises(argparse.ArgumentTypeError):
        bike_fit.parse_view_size("640")
    with pytest.raises(argparse.ArgumentTypeError):
        bike_fit.parse_view_size("0x480")


def test_main_writes_annotated_image(bike_fit, monkeypatch, tmp_path, right_side_points, capsys):
    image_path = tmp_path / "rider.png"
    cv2.imwrite(str(image_path), np.full((480, 640, 3), 60, dtype=np.uint8))
    monkeypatch.setattr(bike_fit, "detect_joint_points", lambda image, min_visibility: right_side_points)

    assert bike_fit.main([str(image_path), "--view", "320x240"]) == 0

    output = cv2.imread(str(tmp_path / "rider_bikefit.png"))
    assert output.shape == (240, 320, 3)
    out = capsys.readouterr().out
    assert "Knee:" in out
    assert "Hip:" in out


def test_main_without_pose(bike_fit, monkeypatch, tmp_path, capsys):
    image_path = tmp_path / "empty.png"
    cv2.imwrite(str(image_path), np.zeros((10, 10, 3), dtype=np.uint8))
    monkeypatch.setattr(bike_fit, "detect_joint_points", lambda image, min_visibility: {})

    assert bike_fit.main([str(image_path)]) == 1
    assert "No pose detected" in capsys.readouterr().out


def test_main_unreadable_image(bike_fit, tmp_path):
    assert bike_fit.main([str(tmp_path / "missing.png")]) == 1
