from __future__ import annotations
from typing import Tuple
import logging
import math
import os
import numpy as np
from dotenv import load_dotenv

from ..models.image import Image
from ..models.dominant_axis import DominantAxis
from ..repositories.imaging_repository import ImagingRepository

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class GradientEstimationService:
    """
    Reduces the per-pixel gradients of a (blurred) image to one dominant
    orientation.

    *   Sobel derivatives on the luminance, converted to magnitude / angle.
    *   Only pixels above `magnitude_ratio * max(magnitude)` vote.
    *   Votes are combined with a circular mean of the doubled angle, so a
        gradient and its negation count as the same edge direction.
    """

    def __init__(self,
                 ksize: int | None = None,
                 magnitude_ratio: float | None = None,
                 min_strong_pixels: int | None = None,
                 imaging: ImagingRepository | None = None):
        self.ksize = ksize if ksize is not None else int(os.getenv("GRADIENT_DERIVATIVE_KSIZE", "5"))
        self.magnitude_ratio = magnitude_ratio if magnitude_ratio is not None else float(os.getenv("GRADIENT_MAGNITUDE_RATIO", "0.1"))
        self.min_strong_pixels = min_strong_pixels if min_strong_pixels is not None else int(os.getenv("GRADIENT_MIN_STRONG_PIXELS", "10"))
        self.imaging = imaging or ImagingRepository()

    # ─── Field computation ─────────────────────────────────────────
    def to_luminance(self, img: Image) -> np.ndarray:
        return self.imaging.to_grayscale(img.pixels, img.channel_order)

    def polar_gradients(self, gray: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Args:
            gray (np.ndarray): single-channel luminance (H, W).

        Returns:
            (magnitude, angle): two float64 (H, W) fields, angle in radians.
        """
        grad_x = self.imaging.directional_derivative(gray, 1, 0, self.ksize)
        grad_y = self.imaging.directional_derivative(gray, 0, 1, self.ksize)
        return self.imaging.cartesian_to_polar(grad_x, grad_y)

    def strong_gradient_mask(self, magnitude: np.ndarray) -> np.ndarray:
        _, max_val = self.imaging.min_max(magnitude)
        threshold = self.magnitude_ratio * max_val
        logger.debug(f"Magnitude max={max_val:.3f}, threshold={threshold:.3f}")
        return self.imaging.threshold(magnitude, threshold)

    # ─── Reduction ─────────────────────────────────────────────────
    @staticmethod
    def circular_mean_angle(angle: np.ndarray, mask: np.ndarray) -> float:
        """
        Half of the circular mean of 2*angle over the masked pixels.

        Doubling maps a and a + pi onto the same point of the circle, which
        removes the 180 degree ambiguity of gradient vectors. Returns 0.0
        when the mask is empty.
        """
        selected = angle[mask != 0]
        if selected.size == 0:
            return 0.0
        doubled = 2.0 * selected
        avg_cos = float(np.cos(doubled).sum()) / selected.size
        avg_sin = float(np.sin(doubled).sum()) / selected.size
        return 0.5 * math.atan2(avg_sin, avg_cos)

    def dominant_angle(self, magnitude: np.ndarray, angle: np.ndarray) -> Tuple[float, int]:
        """
        Returns (dominant angle in radians, number of strong pixels).
        Falls back to 0.0 when too few pixels carry a clear edge.
        """
        mask = self.strong_gradient_mask(magnitude)
        strong = self.imaging.count_nonzero(mask)
        if strong < self.min_strong_pixels:
            logger.debug(f"Only {strong} strong-gradient pixels, no dominant direction")
            return 0.0, strong
        return self.circular_mean_angle(angle, mask), strong

    @staticmethod
    def to_compass_angle(dx: float, dy: float) -> float:
        """
        Image-space direction -> compass degrees (0 = up, clockwise), in [0, 360).
        """
        cartesian = math.degrees(math.atan2(-dy, dx))  # flip y: image y grows downward
        angle = (90.0 - cartesian) % 360.0
        # a tiny negative value modulo 360 rounds to exactly 360.0
        return 0.0 if angle >= 360.0 else angle

    # ─── Public API ────────────────────────────────────────────────
    def estimate(self, img: Image) -> DominantAxis:
        gray = self.to_luminance(img)
        magnitude, angle = self.polar_gradients(gray)
        radians, strong = self.dominant_angle(magnitude, angle)

        dx = math.cos(radians)
        dy = math.sin(radians)
        axis = DominantAxis(dx=dx, dy=dy, radians=radians,
                            angle=self.to_compass_angle(dx, dy),
                            strong_pixels=strong)
        logger.debug(f"Dominant axis: {axis}")
        return axis
