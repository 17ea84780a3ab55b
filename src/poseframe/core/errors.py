"""Custom exception types for frame construction."""


class PoseFrameError(Exception):
    """Base exception for all poseframe errors."""

    pass


class InvalidArgument(PoseFrameError, ValueError):
    """An argument passed to a frame operation is invalid."""

    pass


class InvalidPoseShape(InvalidArgument):
    """Pose is not a sequence of exactly six numeric values."""

    pass


class InvalidOrderToken(InvalidArgument):
    """Rotation order is not one of the recognized angle conventions."""

    def __init__(self, token: object):
        self.token = token
        super().__init__(f"Undefined rotation order {token!r}")


class ConfigError(PoseFrameError):
    """Configuration-related errors."""

    pass


__all__ = [
    "PoseFrameError",
    "InvalidArgument",
    "InvalidPoseShape",
    "InvalidOrderToken",
    "ConfigError",
]
