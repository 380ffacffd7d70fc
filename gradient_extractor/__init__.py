"""
gradient_extractor: dominant two-color linear gradient of an image.

Usage:
    from gradient_extractor import extract_gradient_hex

    result = extract_gradient_hex("photo.jpg")
    result.start_color, result.end_color, result.angle
    result.to_css()   # e.g. "linear-gradient(152.3deg, #1d2b4f, #e8c39a)"
"""
from .errors import (
    GradientExtractionError,
    InvalidInputError,
    DecodeError,
    EmptyImageError,
    PrimitiveFailureError,
)
from .models import Image, GradientResult
from .pipeline import (
    extract_gradient_hex,
    extract_gradient_from_image,
    extract_gradient_from_bytes,
    extract_gallery,
)

__version__ = "1.0.0"

__all__ = [
    "GradientExtractionError",
    "InvalidInputError",
    "DecodeError",
    "EmptyImageError",
    "PrimitiveFailureError",
    "Image",
    "GradientResult",
    "extract_gradient_hex",
    "extract_gradient_from_image",
    "extract_gradient_from_bytes",
    "extract_gallery",
]
