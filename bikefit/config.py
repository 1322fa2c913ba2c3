"""
Bike-fit configuration constants.

Geometry fractions, landmark indices and drawing styles shared by the
library modules and the command-line script.
"""

# Arc radius as a fraction of the shorter adjoining limb
ARC_RADIUS_FRACTION = 0.75

# Label distance from the vertex as a fraction of the arc radius
LABEL_RADIUS_FRACTION = 0.5

# Arcs at or below this radius (pixels) are not drawn
MIN_DRAWABLE_RADIUS = 1e-6

# Landmarks below this visibility are treated as missing
MIN_VISIBILITY = 0.5

# MediaPipe Pose landmark indices for the joints a bike fit uses
POSE_LANDMARK_INDEX = {
    "LEFT_EAR": 7,
    "RIGHT_EAR": 8,
    "LEFT_SHOULDER": 11,
    "RIGHT_SHOULDER": 12,
    "LEFT_ELBOW": 13,
    "RIGHT_ELBOW": 14,
    "LEFT_WRIST": 15,
    "RIGHT_WRIST": 16,
    "LEFT_HIP": 23,
    "RIGHT_HIP": 24,
    "LEFT_KNEE": 25,
    "RIGHT_KNEE": 26,
    "LEFT_ANKLE": 27,
    "RIGHT_ANKLE": 28,
}

SIDES = ("LEFT", "RIGHT")

# Drawing styles (BGR)
JOINT_COLOR = (255, 255, 255)
JOINT_RADIUS = 3
CONNECTION_COLOR = (204, 204, 204)  # White at 80%
CONNECTION_THICKNESS = 2
ARC_COLOR = (0, 255, 0)
ARC_THICKNESS = 2
WEDGE_ALPHA = 0.4
LABEL_COLOR = (255, 255, 255)
LABEL_FONT_SCALE = 0.45
LABEL_THICKNESS = 1
PANEL_TEXT_COLOR = (0, 255, 255)
PANEL_FONT_SCALE = 0.6
PANEL_ORIGIN = (10, 30)
PANEL_LINE_HEIGHT = 25

# Display canvas (width, height) the photo is fitted into
DEFAULT_VIEW_SIZE = (960, 720)
