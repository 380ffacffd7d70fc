from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class DominantAxis:
    """
    Single orientation summarizing all strong local gradients of an image.

    dx, dy are a unit vector in image coordinates (x right, y down).
    angle is the compass-style value reported to callers: 0 points up and
    it grows clockwise, always in [0, 360).
    """
    dx: float
    dy: float
    radians: float       # raw dominant angle, image coordinates
    angle: float         # compass degrees
    strong_pixels: int   # pixels that passed the magnitude threshold
