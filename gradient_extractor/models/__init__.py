from .image import Image
from .dominant_axis import DominantAxis
from .projection_bands import ProjectionBands
from .gradient_result import GradientResult, hex_to_rgb
from .gallery_entry import GalleryEntry

__all__ = ["Image", "DominantAxis", "ProjectionBands", "GradientResult", "GalleryEntry", "hex_to_rgb"]
