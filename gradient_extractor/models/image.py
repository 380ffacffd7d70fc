from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: 3-channel pixels (+ optional source path for bookkeeping).
    No OpenCV logic outside the repositories.
    """
    pixels: np.ndarray # Shape (H, W, 3), dtype uint8.
    path: Path | None = None # Source of the image.
    channel_order: str = "BGR" # "BGR" as decoded by OpenCV, "RGB" for PIL/in-memory callers.
