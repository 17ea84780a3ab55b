"""Test frame set configuration and round-trip serialization."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest
from poseframe.core.config import (
    AngleUnit,
    FramePose,
    FrameSet,
    frame_record,
    load_config,
    round_trip_config,
    save_config,
)
from poseframe.core.errors import ConfigError
from poseframe.core.frames import AngleOrder, frame

EXAMPLE_CONFIG = Path(__file__).resolve().parents[1] / "examples" / "frames.yaml"


def _sample_set() -> FrameSet:
    return FrameSet(
        frames=[
            FramePose(name="base"),
            FramePose(name="tool", pose=[100, 0, 250, 0, 90, 0], order="zyx", angle_unit="deg"),
            FramePose(name="camera", pose=[0.0, 50.0, 20.0, 0.3, 1.2, -0.4], order="zyz"),
        ]
    )


def test_pose_defaults():
    pose = FramePose(name="origin")

    assert pose.pose == [0.0] * 6
    assert pose.order is AngleOrder.XYZ
    assert pose.angle_unit is AngleUnit.RAD
    np.testing.assert_array_equal(pose.to_frame(), np.eye(4))


def test_empty_order_and_pose_default():
    pose = FramePose(name="p", pose=[], order="")

    assert pose.pose == [0.0] * 6
    assert pose.order is AngleOrder.XYZ


def test_degrees_converted_to_radians():
    deg = FramePose(name="d", pose=[1, 2, 3, 90, 45, -30], order="zxz", angle_unit="deg")
    rad = FramePose(name="r", pose=[1, 2, 3, np.pi / 2, np.pi / 4, -np.pi / 6], order="zxz")

    assert deg.angles_rad()[:3] == [1.0, 2.0, 3.0]
    np.testing.assert_allclose(deg.to_frame(), rad.to_frame(), atol=1e-12)


def test_invalid_pose_rejected():
    with pytest.raises(ValueError, match="exactly 6 values"):
        FramePose(name="bad", pose=[1, 2, 3])


def test_invalid_order_rejected():
    with pytest.raises(ValueError, match="abc"):
        FramePose(name="bad", order="abc")


def test_empty_frame_set_fails():
    with pytest.raises(ValueError, match="at least one pose"):
        FrameSet()


def test_duplicate_names_fail():
    with pytest.raises(ValueError, match="Duplicate pose names: a"):
        FrameSet(frames=[FramePose(name="a"), FramePose(name="a")])


def test_build_all():
    frames = _sample_set().build_all()

    assert list(frames) == ["base", "tool", "camera"]
    np.testing.assert_allclose(
        frames["camera"], frame([0.0, 50.0, 20.0, 0.3, 1.2, -0.4], "zyz"), atol=1e-12
    )


def test_frame_record():
    pose = FramePose(name="t", pose=[1, 2, 3, 0, 0, 0], order="yxy")
    record = frame_record(pose)

    assert record["order"] == "yxy"
    assert record["pose"] == [1.0, 2.0, 3.0, 0.0, 0.0, 0.0]
    assert record["angle_unit"] == "rad"
    assert record["matrix"][0] == [1.0, 0.0, 0.0, 1.0]
    json.dumps(record)


def test_yaml_round_trip():
    frame_set = _sample_set()
    loaded = round_trip_config(frame_set)

    assert loaded == frame_set
    assert loaded.frames[1].order is AngleOrder.ZYX
    assert loaded.frames[1].angle_unit is AngleUnit.DEG


@pytest.mark.parametrize("suffix", [".yaml", ".json"])
def test_save_and_load(tmp_path: Path, suffix: str):
    frame_set = _sample_set()
    path = tmp_path / "nested" / f"frames{suffix}"

    save_config(frame_set, path)
    loaded = load_config(path)

    assert loaded == frame_set


def test_load_example_config():
    frame_set = load_config(EXAMPLE_CONFIG)

    names = [f.name for f in frame_set.frames]
    assert names == ["base", "tool", "camera"]
    tool = frame_set.build_all()["tool"]
    np.testing.assert_allclose(tool[:3, 3], [100.0, 0.0, 250.0])


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_empty_file(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    with pytest.raises(ConfigError, match="empty"):
        load_config(path)


def test_load_non_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


def test_load_invalid_pose(tmp_path: Path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"frames": [{"name": "x", "pose": [1, 2]}]}))

    with pytest.raises(ValueError, match="exactly 6 values"):
        load_config(path)


def test_load_malformed_yaml(tmp_path: Path):
    path = tmp_path / "broken.yaml"
    path.write_text("frames: [\n  - name: a\n")

    with pytest.raises(ConfigError, match="Cannot parse"):
        load_config(path)


def test_load_malformed_json(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text('{"frames": [')

    with pytest.raises(ConfigError, match="Cannot parse"):
        load_config(path)


def test_load_non_string_key(tmp_path: Path):
    """Mapping keys that are not field names surface as validation errors."""
    path = tmp_path / "keys.yaml"
    path.write_text("1: 2\nframes: []\n")

    with pytest.raises(ValueError):
        load_config(path)


def test_boolean_pose_value_rejected():
    with pytest.raises(ValueError, match="booleans"):
        FramePose(name="flag", pose=[0, 0, 0, True, 0, 0])
