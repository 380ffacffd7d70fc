from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass
class ProjectionBands:
    """
    Pixel positions projected onto the dominant axis, split into the two
    extreme bands. Masks use the OpenCV convention (uint8, 0 or 255).
    """
    projection: np.ndarray  # (H, W) float32, t = x*dx + y*dy
    low: float
    high: float
    start_mask: np.ndarray  # t <= low
    end_mask: np.ndarray    # t >= high
