from __future__ import annotations
from typing import Tuple
import logging
import os
from dotenv import load_dotenv

from ..models.image import Image
from ..errors import EmptyImageError
from ..repositories.imaging_repository import ImagingRepository

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class PreprocessingService:
    """
    Downsample to a fixed small width, then blur away local texture so only
    large-scale color transitions survive. The blurred image is also the one
    sampled for colors later on.
    """

    def __init__(self,
                 resize_width: int | None = None,
                 blur_sigma: float | None = None,
                 imaging: ImagingRepository | None = None):
        self.resize_width = resize_width if resize_width is not None else int(os.getenv("GRADIENT_RESIZE_WIDTH", "100"))
        self.blur_sigma = blur_sigma if blur_sigma is not None else float(os.getenv("GRADIENT_BLUR_SIGMA", "15"))
        self.imaging = imaging or ImagingRepository()

    def working_size(self, height: int, width: int) -> Tuple[int, int]:
        """
        Returns (width, height) of the downsampled image, aspect ratio kept.
        e.g. 200x100 -> 100x50
        """
        if height == 0 or width == 0:
            raise EmptyImageError(f"Cannot resize a {width}x{height} image")
        new_height = int(self.resize_width * height / width + 0.5)  # round half up
        return self.resize_width, max(1, new_height)

    def preprocess(self, img: Image) -> Image:
        height, width = img.pixels.shape[:2]
        new_width, new_height = self.working_size(height, width)
        logger.debug(f"Resizing {width}x{height} -> {new_width}x{new_height}")

        small = self.imaging.resize(img.pixels, new_width, new_height)
        blurred = self.imaging.gaussian_blur(small, self.blur_sigma)
        return Image(pixels=blurred, path=img.path, channel_order=img.channel_order)
