"""
Error types for the bike-fit geometry engine.
"""


class BikeFitError(Exception):
    """Base class for all bike-fit errors."""


class DegenerateInputError(BikeFitError, ValueError):
    """
    Raised when a joint triple has a zero-length limb.

    This happens when the vertex coincides with one of the limb endpoints,
    so the angle at the vertex is undefined.
    """
