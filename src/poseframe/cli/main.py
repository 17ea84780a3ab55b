"""CLI main module with subcommands for build, orders, and run.

Usage:
    python -m poseframe.cli build 10 0 5 0 1.5708 0 --order zyx
    python -m poseframe.cli orders
    python -m poseframe.cli run --config frames.yaml --out out_dir
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np

from ..core.config import AngleUnit, FramePose, frame_record, load_config
from ..core.errors import PoseFrameError
from ..core.frames import AngleOrder
from ..core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def cmd_build(args: argparse.Namespace) -> int:
    """Build a single frame from command-line pose values."""
    try:
        pose = FramePose(
            name="cli",
            pose=args.pose or None,
            order=args.order,
            angle_unit=AngleUnit.DEG if args.degrees else AngleUnit.RAD,
        )
        matrix = pose.to_frame()
    except (PoseFrameError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Built frame", {"order": pose.order.value})
    if args.json:
        print(json.dumps(frame_record(pose, matrix), indent=2))
    else:
        print(np.array2string(matrix, precision=args.precision, suppress_small=True))
    return 0


def cmd_orders(args: argparse.Namespace) -> int:  # noqa: ARG001
    """List the recognized angle orders."""
    tait_bryan = [o.value for o in AngleOrder if o.is_tait_bryan]
    proper_euler = [o.value for o in AngleOrder if o.is_proper_euler]

    print("Tait-Bryan:   ", " ".join(tait_bryan))
    print("Proper Euler: ", " ".join(proper_euler))
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Build every frame in a config file and write ``frames.json``."""
    try:
        logger.info("Loading config", {"path": str(args.config)})
        frame_set = load_config(args.config)
        frames = {pose.name: frame_record(pose) for pose in frame_set.frames}

        out_path = Path(args.out)
        out_path.mkdir(parents=True, exist_ok=True)
        target = out_path / "frames.json"
        target.write_text(json.dumps(frames, indent=2), encoding="utf-8")
    except (PoseFrameError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Wrote frames", {"path": str(target), "count": len(frames)})
    print("Wrote", target)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poseframe",
        description="Homogeneous frames from 6-parameter poses",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log at debug level",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Optional JSON lines log file",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # Build subcommand
    parser_build = subparsers.add_parser(
        "build",
        help="Build one frame from pose values",
    )
    parser_build.add_argument(
        "pose",
        nargs="*",
        type=float,
        help="cx cy cz ax ay az (omit for the identity frame)",
    )
    parser_build.add_argument(
        "--order",
        default="xyz",
        help="Rotation order (default: xyz)",
    )
    parser_build.add_argument(
        "--degrees",
        action="store_true",
        help="Interpret angles in degrees",
    )
    parser_build.add_argument(
        "--json",
        action="store_true",
        help="Print the frame as JSON",
    )
    parser_build.add_argument(
        "--precision",
        type=int,
        default=6,
        help="Digits for text output (default: 6)",
    )
    parser_build.set_defaults(func=cmd_build)

    # Orders subcommand
    parser_orders = subparsers.add_parser(
        "orders",
        help="List recognized rotation orders",
    )
    parser_orders.set_defaults(func=cmd_orders)

    # Run subcommand
    parser_run = subparsers.add_parser(
        "run",
        help="Build all frames from a config file",
    )
    parser_run.add_argument(
        "--config",
        "-c",
        type=Path,
        required=True,
        help="Path to YAML/JSON config file",
    )
    parser_run.add_argument(
        "--out",
        "-o",
        type=Path,
        default=Path("output"),
        help="Output directory (default: output)",
    )
    parser_run.set_defaults(func=cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_file, logging.DEBUG if args.verbose else logging.WARNING)
    return int(args.func(args) or 0)


if __name__ == "__main__":
    sys.exit(main())
