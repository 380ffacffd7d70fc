from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Union
import logging

from ..errors import GradientExtractionError
from ..models.gallery_entry import GalleryEntry
from ..services.image_service import ImageService
from .extract_gradient import extract_gradient_hex

logger = logging.getLogger(__name__)


def _as_path(reference):
    # unusable references (None, numbers) are kept as given
    try:
        return Path(reference)
    except TypeError:
        return reference


def extract_paths(
    paths: Iterable[Union[str, Path]],
    image_service: ImageService = ImageService(),
) -> List[GalleryEntry]:
    """
    Run the extraction over every path. A failing file does not stop the
    batch: its error is kept on the entry instead.
    """
    entries = []
    for path in paths:
        try:
            result = extract_gradient_hex(path, image_service=image_service)
        except GradientExtractionError as err:
            logger.warning(f"Skipping {path}: {err}")
            entries.append(GalleryEntry(path=_as_path(path), error=err))
            continue
        logger.info(f"{path}: {result.start_color} -> {result.end_color} @ {result.angle:.1f}°")
        entries.append(GalleryEntry(path=_as_path(path), result=result))
    return entries


def extract_gallery(
    folder: Union[str, Path],
    *,
    recursive: bool = False,
    exts: Iterable[str] | None = None,
    image_service: ImageService = ImageService(),
) -> List[GalleryEntry]:
    """
    Extract gradients for every image file in a folder (by extension).
    """
    paths = image_service.stream_paths(folder, recursive=recursive, exts=exts)
    return extract_paths(paths, image_service=image_service)
