"""Type definitions and aliases for frame construction."""

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

# A 6-vector [cx, cy, cz, ax, ay, az]
Pose = Sequence[float] | NDArray[np.float64]

# 4x4 homogeneous transform
Frame = NDArray[np.float64]

Position3D = tuple[float, float, float]

__all__ = [
    "Pose",
    "Frame",
    "Position3D",
]
