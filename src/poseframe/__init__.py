"""Homogeneous frames from 6-parameter poses.

Build 4x4 rigid transforms from a translation and three rotation angles
composed in any of the twelve Tait-Bryan / proper Euler orders.
"""

from .core.errors import InvalidArgument, InvalidOrderToken, InvalidPoseShape, PoseFrameError
from .core.frames import AngleOrder, FrameBuilder, frame

__version__ = "0.1.0"

__all__ = [
    "AngleOrder",
    "FrameBuilder",
    "frame",
    "PoseFrameError",
    "InvalidArgument",
    "InvalidPoseShape",
    "InvalidOrderToken",
]
