from __future__ import annotations
from typing import Tuple
import logging
import os
import numpy as np
from dotenv import load_dotenv

from ..models.image import Image
from ..models.dominant_axis import DominantAxis
from ..models.projection_bands import ProjectionBands
from ..repositories.imaging_repository import ImagingRepository

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class AxisProjectionService:
    """
    Projects every pixel position onto the dominant axis and keeps the two
    extreme bands, dropping the ambiguous middle of the projected range.
    """

    def __init__(self,
                 band_fraction: float | None = None,
                 imaging: ImagingRepository | None = None):
        self.band_fraction = band_fraction if band_fraction is not None else float(os.getenv("GRADIENT_BAND_FRACTION", "0.15"))
        self.imaging = imaging or ImagingRepository()

    @staticmethod
    def project(shape: Tuple[int, int], dx: float, dy: float) -> np.ndarray:
        """
        t(x, y) = x*dx + y*dy over an (H, W) grid, row-major, float32.
        """
        height, width = shape
        xs = np.arange(width, dtype=np.float32)[np.newaxis, :]
        ys = np.arange(height, dtype=np.float32)[:, np.newaxis]
        return xs * np.float32(dx) + ys * np.float32(dy)

    def split(self, projection: np.ndarray) -> ProjectionBands:
        min_val, max_val = self.imaging.min_max(projection)
        span = max_val - min_val
        low = min_val + self.band_fraction * span
        high = max_val - self.band_fraction * span
        logger.debug(f"Projection range [{min_val:.2f}, {max_val:.2f}], bands <= {low:.2f} / >= {high:.2f}")

        # inclusive on both ends; min/max are the field's own extremes
        start_mask = self.imaging.in_range(projection, min_val, low)
        end_mask = self.imaging.in_range(projection, high, max_val)
        return ProjectionBands(projection=projection, low=low, high=high,
                               start_mask=start_mask, end_mask=end_mask)

    def bands(self, img: Image, axis: DominantAxis) -> ProjectionBands:
        """
        Uses the raw image-space (dx, dy), not the compass angle.
        """
        projection = self.project(img.pixels.shape[:2], axis.dx, axis.dy)
        return self.split(projection)
