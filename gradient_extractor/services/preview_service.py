from __future__ import annotations
from pathlib import Path
from typing import Union
import math
import os
import numpy as np
from dotenv import load_dotenv

from ..models.image import Image
from ..models.gradient_result import GradientResult
from ..repositories.image_repository import ImageRepository

# Load environment variables
load_dotenv()


class PreviewService:
    """
    Renders a GradientResult back into pixels, using the CSS gradient-line
    geometry for the compass angle (line through the centre, length
    |W sin a| + |H cos a|).
    """

    def __init__(self,
                 width: int | None = None,
                 height: int | None = None,
                 image_repository: ImageRepository | None = None):
        self.width = width if width is not None else int(os.getenv("PREVIEW_WIDTH", "320"))
        self.height = height if height is not None else int(os.getenv("PREVIEW_HEIGHT", "180"))
        self.image_repository = image_repository or ImageRepository()

    def render(self, result: GradientResult, width: int | None = None, height: int | None = None) -> Image:
        width = width or self.width
        height = height or self.height

        theta = math.radians(result.angle)
        ux, uy = math.sin(theta), -math.cos(theta)  # compass -> image direction
        line_length = abs(width * ux) + abs(height * uy)

        # pixel centres relative to the image centre
        xs = (np.arange(width, dtype=np.float64) + 0.5 - width / 2.0)[np.newaxis, :]
        ys = (np.arange(height, dtype=np.float64) + 0.5 - height / 2.0)[:, np.newaxis]
        t = np.clip(0.5 + (xs * ux + ys * uy) / line_length, 0.0, 1.0)[..., np.newaxis]

        start = np.array(result.start_rgb, dtype=np.float64)
        end = np.array(result.end_rgb, dtype=np.float64)
        pixels = np.rint(start + (end - start) * t).astype(np.uint8)
        return Image(pixels=pixels, channel_order="RGB")

    def save(self, result: GradientResult, path: Union[str, Path]) -> Path:
        preview = self.render(result)
        preview.path = Path(path)
        self.image_repository.save(preview)
        return preview.path
