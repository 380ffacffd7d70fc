from .imaging_repository import ImagingRepository
from .image_repository import ImageRepository

__all__ = ["ImagingRepository", "ImageRepository"]
