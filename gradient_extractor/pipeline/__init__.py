from .extract_gradient import (
    extract_gradient_hex,
    extract_gradient_from_image,
    extract_gradient_from_bytes,
)
from .batch_extract import extract_paths, extract_gallery

__all__ = [
    "extract_gradient_hex",
    "extract_gradient_from_image",
    "extract_gradient_from_bytes",
    "extract_paths",
    "extract_gallery",
]
