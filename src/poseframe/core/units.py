"""Unit conversion utilities.

Frames take angles in radians. Translations are unit-agnostic; poses are
conventionally given in millimeters.
"""

import math


def deg_to_rad(value: float | int) -> float:
    """Convert degrees to radians."""
    return float(value) * math.pi / 180.0


def rad_to_deg(value: float | int) -> float:
    """Convert radians to degrees."""
    return float(value) * 180.0 / math.pi


def mm_to_m(value: float | int) -> float:
    """Convert millimeters to meters."""
    return float(value) / 1000.0


def m_to_mm(value: float | int) -> float:
    """Convert meters to millimeters."""
    return float(value) * 1000.0


__all__ = [
    "deg_to_rad",
    "rad_to_deg",
    "mm_to_m",
    "m_to_mm",
]
