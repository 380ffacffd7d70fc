from __future__ import annotations
from pathlib import Path
from typing import Union
import logging

from ..errors import GradientExtractionError
from ..models.image import Image
from ..models.gradient_result import GradientResult
from ..services.image_service import ImageService
from ..services.preprocessing_service import PreprocessingService
from ..services.gradient_estimation_service import GradientEstimationService
from ..services.axis_projection_service import AxisProjectionService
from ..services.color_sampling_service import ColorSamplingService

logger = logging.getLogger(__name__)


def _run_stage(stage: str, fn, *args):
    """
    Run one pipeline step; tag any pipeline error with the step name and let it through.
    """
    try:
        return fn(*args)
    except GradientExtractionError as err:
        if err.stage is None:
            err.stage = stage
        logger.debug(f"Stage '{stage}' failed: {err}")
        raise


def extract_gradient_from_image(
    img: Image,
    image_service: ImageService = ImageService(),
    preprocessing_service: PreprocessingService = PreprocessingService(),
    gradient_estimation_service: GradientEstimationService = GradientEstimationService(),
    axis_projection_service: AxisProjectionService = AxisProjectionService(),
    color_sampling_service: ColorSamplingService = ColorSamplingService(),
) -> GradientResult:
    """
    Dominant two-color linear gradient of an already decoded image.

    Linear and fail-fast: validate -> preprocess -> estimate -> project -> sample.
    No partial result is ever returned.
    """
    _run_stage("validate", image_service.validate, img)

    blurred = _run_stage("preprocess", preprocessing_service.preprocess, img)
    axis = _run_stage("estimate", gradient_estimation_service.estimate, blurred)
    bands = _run_stage("project", axis_projection_service.bands, blurred, axis)

    start_color = _run_stage("sample", color_sampling_service.sample_hex, blurred, bands.start_mask)
    end_color = _run_stage("sample", color_sampling_service.sample_hex, blurred, bands.end_mask)

    result = GradientResult(start_color=start_color, end_color=end_color, angle=axis.angle)
    logger.debug(f"Extracted {result} from {img.path}")
    return result


def extract_gradient_hex(
    image_path: Union[str, Path],
    image_service: ImageService = ImageService(),
    **services,
) -> GradientResult:
    """
    Decode the image at image_path and extract its dominant gradient.

    Raises:
        InvalidInputError: image_path is not a usable filesystem path.
        DecodeError: the file is missing or not a decodable image.
        EmptyImageError: the decoded image has zero width or height.
        PrimitiveFailureError: an OpenCV primitive failed.
    """
    img = _run_stage("decode", image_service.load, image_path)
    return extract_gradient_from_image(img, image_service=image_service, **services)


def extract_gradient_from_bytes(
    data: bytes,
    image_service: ImageService = ImageService(),
    **services,
) -> GradientResult:
    """Same as extract_gradient_hex, for encoded image bytes already in memory."""
    img = _run_stage("decode", image_service.load_bytes, data)
    return extract_gradient_from_image(img, image_service=image_service, **services)
