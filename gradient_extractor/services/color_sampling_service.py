from __future__ import annotations
from typing import Tuple
import logging
import math
import numpy as np

from ..models.image import Image
from ..repositories.imaging_repository import ImagingRepository

logger = logging.getLogger(__name__)

BLACK: Tuple[int, int, int] = (0, 0, 0)


class ColorSamplingService:
    """
    Masked mean color of a band, quantized to "#rrggbb".
    """

    def __init__(self, imaging: ImagingRepository | None = None):
        self.imaging = imaging or ImagingRepository()

    @staticmethod
    def _quantize(value: float) -> int:
        # clamp, then round half away from zero
        return int(math.floor(min(max(value, 0.0), 255.0) + 0.5))

    def mean_rgb(self, img: Image, mask: np.ndarray) -> Tuple[int, int, int]:
        """
        Returns the (r, g, b) mean of the pixels selected by mask, or black if
        the mask selects nothing.
        """
        if self.imaging.count_nonzero(mask) == 0:
            logger.debug("Empty band mask, falling back to black")
            return BLACK

        c0, c1, c2 = (self._quantize(v) for v in self.imaging.masked_mean(img.pixels, mask))
        if img.channel_order == "BGR":
            return c2, c1, c0
        return c0, c1, c2

    @staticmethod
    def to_hex(rgb: Tuple[int, int, int]) -> str:
        r, g, b = rgb
        return f"#{r:02x}{g:02x}{b:02x}"

    def sample_hex(self, img: Image, mask: np.ndarray) -> str:
        return self.to_hex(self.mean_rgb(img, mask))
