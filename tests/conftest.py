from types import MappingProxyType

import pytest

from bikefit import Point2D


@pytest.fixture
def right_side_points():
    """A cyclist seen from the right, in display pixels (y down)."""
    return MappingProxyType(
        {
            "RIGHT_EAR": Point2D(300.0, 80.0),
            "RIGHT_SHOULDER": Point2D(260.0, 120.0),
            "RIGHT_ELBOW": Point2D(320.0, 190.0),
            "RIGHT_WRIST": Point2D(380.0, 200.0),
            "RIGHT_HIP": Point2D(120.0, 220.0),
            "RIGHT_KNEE": Point2D(220.0, 300.0),
            "RIGHT_ANKLE": Point2D(180.0, 420.0),
        }
    )
