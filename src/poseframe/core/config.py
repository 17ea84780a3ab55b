"""Configuration models and I/O for named frame sets.

Pydantic models for poses and frame sets with YAML/JSON I/O. Angles may be
given in degrees at input; frames are always built in radians.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .errors import ConfigError
from .frames import DEFAULT_ORDER, POSE_SIZE, AngleOrder, frame, validate_order, validate_pose
from .types import Frame
from .units import deg_to_rad


class AngleUnit(str, Enum):
    """Unit of the three pose angles."""

    RAD = "rad"
    DEG = "deg"


class FramePose(BaseModel):
    """A named 6-DOF pose and the order its angles compose in."""

    name: str = Field(description="Unique identifier")
    pose: list[float] = Field(
        default_factory=lambda: [0.0] * POSE_SIZE,
        description="[cx, cy, cz, ax, ay, az]",
    )
    order: AngleOrder = Field(default=DEFAULT_ORDER, description="Rotation order")
    angle_unit: AngleUnit = Field(default=AngleUnit.RAD, description="Unit of ax, ay, az")

    @field_validator("pose", mode="before")
    @classmethod
    def validate_pose_values(cls, v: Any) -> list[float]:
        return validate_pose(v).tolist()

    @field_validator("order", mode="before")
    @classmethod
    def validate_order_token(cls, v: Any) -> AngleOrder:
        return validate_order(v)

    def angles_rad(self) -> list[float]:
        """Pose with angles converted to radians."""
        if self.angle_unit is AngleUnit.RAD:
            return list(self.pose)
        return list(self.pose[:3]) + [deg_to_rad(a) for a in self.pose[3:]]

    def to_frame(self) -> Frame:
        """Build the homogeneous transform for this pose."""
        return frame(self.angles_rad(), self.order)


class FrameSet(BaseModel):
    """Collection of named poses."""

    frames: list[FramePose] = Field(default_factory=list, description="Poses to build")

    @model_validator(mode="after")
    def validate_frames(self) -> FrameSet:
        """Require at least one pose and unique names."""
        if not self.frames:
            raise ValueError("Frame set must have at least one pose")
        names = [f.name for f in self.frames]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate pose names: {', '.join(duplicates)}")
        return self

    def build_all(self) -> dict[str, Frame]:
        """Build every frame, keyed by pose name."""
        return {f.name: f.to_frame() for f in self.frames}


def frame_record(pose: FramePose, matrix: Frame | None = None) -> dict[str, Any]:
    """JSON-ready description of a built frame."""
    if matrix is None:
        matrix = pose.to_frame()
    return {
        "order": pose.order.value,
        "pose": list(pose.pose),
        "angle_unit": pose.angle_unit.value,
        "matrix": np.asarray(matrix).tolist(),
    }


def load_config(path: str | Path) -> FrameSet:
    """Load a frame set from a YAML or JSON file.

    Args:
        path: Path to configuration file

    Returns:
        Validated FrameSet

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If the file cannot be parsed, is empty, or is not a mapping
        ValueError: If config is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                # YAML also covers JSON content under other suffixes
                data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot parse config file {path}: {exc}") from exc

    if data is None:
        raise ConfigError(f"Config file is empty: {path}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    return FrameSet.model_validate(data)


def save_config(frame_set: FrameSet, path: str | Path) -> None:
    """Save a frame set to a YAML or JSON file (chosen by suffix)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = frame_set.model_dump(mode="json")

    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() in [".yaml", ".yml"]:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)


def round_trip_config(frame_set: FrameSet) -> FrameSet:
    """Serialize a frame set through YAML and load it back."""
    data = frame_set.model_dump(mode="json")
    yaml_str = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    return FrameSet.model_validate(yaml.safe_load(yaml_str))


__all__ = [
    "AngleUnit",
    "FramePose",
    "FrameSet",
    "frame_record",
    "load_config",
    "save_config",
    "round_trip_config",
]
