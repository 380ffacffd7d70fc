from __future__ import annotations
from pathlib import Path
from typing import Union, Iterable, Iterator
import logging
import os
import numpy as np
from PIL import Image as PILImage
from dotenv import load_dotenv

from ..models.image import Image
from ..errors import DecodeError
from .imaging_repository import ImagingRepository

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

_DEFAULT_EXTS = ".png,.jpg,.jpeg,.bmp,.webp,.tif,.tiff"


class ImageRepository:
    """
    Handles file I/O for Image entities.
    """
    def __init__(self, imaging: ImagingRepository | None = None):
        self.imaging = imaging or ImagingRepository()
        self.VALID_EXTS = {
            ext.strip().lower()
            for ext in os.getenv("VALID_IMAGE_EXTENSIONS", _DEFAULT_EXTS).split(",")
            if ext.strip()
        }

    @staticmethod
    def retrieve_image_dimensions(img: Image):
        return img.pixels.shape[:2]

    def load(self, path: str) -> Image:
        pixels = self.imaging.decode_file(path)
        if pixels is None:
            raise DecodeError(f"Image not found or unreadable: {path}")
        return Image(pixels=pixels, path=Path(path), channel_order="BGR")

    def load_bytes(self, data: bytes) -> Image:
        pixels = self.imaging.decode_bytes(data)
        if pixels is None:
            raise DecodeError(f"Could not decode {len(data)} bytes as an image")
        return Image(pixels=pixels, channel_order="BGR")

    @staticmethod
    def save(image: Image) -> None:
        pixels = image.pixels[:, :, ::-1] if image.channel_order == "BGR" else image.pixels
        PILImage.fromarray(np.ascontiguousarray(pixels)).save(image.path)

    def iter_paths(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Path]:
        """
        Yield image file paths one at a time, sorted for a stable order.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        allowed = {e.lower() for e in (exts or self.VALID_EXTS)}
        pattern = "**/*" if recursive else "*"

        for p in sorted(folder.glob(pattern)):
            if not p.is_file():
                continue
            if p.suffix.lower() not in allowed:
                logger.debug(f"Skipping due to extension: {p}")
                continue
            yield p
