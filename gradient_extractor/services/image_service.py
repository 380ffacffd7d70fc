from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, Union
import os
import numpy as np

from ..models.image import Image
from ..errors import InvalidInputError, EmptyImageError
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers and input validation. No gradient logic here."""
    def __init__(self, image_repository: ImageRepository | None = None):
        self.image_repository = image_repository or ImageRepository()

    @staticmethod
    def normalize_path(path) -> str:
        """
        Turn a str / bytes / PathLike reference into a filesystem string.

        Raises:
            InvalidInputError: the reference is not a path, contains a NUL byte,
                or cannot be encoded for the filesystem.
        """
        try:
            raw = os.fspath(path)
        except TypeError as err:
            raise InvalidInputError(f"Not a valid filepath: {path!r}") from err

        if isinstance(raw, bytes):
            try:
                raw = os.fsdecode(raw)
            except UnicodeDecodeError as err:
                raise InvalidInputError(f"Not a valid filepath: {path!r}") from err

        if not raw or "\x00" in raw:
            raise InvalidInputError(f"Not a valid filepath: {path!r}")
        try:
            raw.encode("utf-8")
        except UnicodeEncodeError as err:
            raise InvalidInputError(f"Not a valid filepath: {path!r}") from err
        return raw

    def load(self, path: str | Path) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(self.normalize_path(path))

    def load_bytes(self, data: bytes) -> Image:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidInputError(f"Expected encoded image bytes, got {type(data).__name__}")
        return self.image_repository.load_bytes(bytes(data))

    def get_image_dimensions(self, img: Image):
        return self.image_repository.retrieve_image_dimensions(img)

    def validate(self, img: Image) -> Image:
        """
        Checks that an in-memory image is something the pipeline can read.

        Raises:
            InvalidInputError: pixels are not a (H, W, 3) uint8 array or the
                channel order is unknown.
            EmptyImageError: zero width or height.
        """
        pixels = img.pixels
        if not isinstance(pixels, np.ndarray) or pixels.ndim != 3 or pixels.shape[2] != 3:
            shape = getattr(pixels, "shape", None)
            raise InvalidInputError(f"Expected (H, W, 3) pixels, got shape {shape}")
        if pixels.dtype != np.uint8:
            raise InvalidInputError(f"Expected uint8 pixels, got {pixels.dtype}")
        if img.channel_order not in ("BGR", "RGB"):
            raise InvalidInputError(f"Unknown channel order: {img.channel_order}")

        height, width = self.get_image_dimensions(img)
        if height == 0 or width == 0:
            raise EmptyImageError(f"Image is empty ({width}x{height}) at {img.path}")
        return img

    def stream_paths(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Path]:
        """
        Yield image paths lazily instead of returning a gigantic list.
        """
        return self.image_repository.iter_paths(folder,
                                                recursive=recursive,
                                                exts=exts)

