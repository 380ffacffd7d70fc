from .image_service import ImageService
from .preprocessing_service import PreprocessingService
from .gradient_estimation_service import GradientEstimationService
from .axis_projection_service import AxisProjectionService
from .color_sampling_service import ColorSamplingService
from .preview_service import PreviewService

__all__ = [
    "ImageService",
    "PreprocessingService",
    "GradientEstimationService",
    "AxisProjectionService",
    "ColorSamplingService",
    "PreviewService",
]
