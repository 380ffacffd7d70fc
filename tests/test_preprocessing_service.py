import numpy as np
import pytest

from gradient_extractor.errors import EmptyImageError
from gradient_extractor.models.image import Image
from gradient_extractor.services.preprocessing_service import PreprocessingService


@pytest.fixture
def service():
    return PreprocessingService(resize_width=100, blur_sigma=15)


@pytest.mark.parametrize(
    "height, width, expected",
    [
        (100, 200, (100, 50)),
        (100, 100, (100, 100)),
        (300, 150, (100, 200)),
        (1, 3, (100, 33)),
        (1, 8, (100, 13)),      # 12.5 rounds up
        (1, 1000, (100, 1)),    # never a zero-height buffer
    ],
)
def test_working_size_keeps_aspect_ratio(service, height, width, expected):
    assert service.working_size(height, width) == expected


def test_working_size_rejects_empty(service):
    with pytest.raises(EmptyImageError):
        service.working_size(0, 10)
    with pytest.raises(EmptyImageError):
        service.working_size(10, 0)


def test_preprocess_output_shape_and_order(service, solid):
    img = Image(pixels=solid(100, 200, (10, 20, 30)), channel_order="RGB")

    blurred = service.preprocess(img)

    assert blurred.pixels.shape == (50, 100, 3)
    assert blurred.pixels.dtype == np.uint8
    assert blurred.channel_order == "RGB"


def test_preprocess_keeps_solid_color(service, solid):
    img = Image(pixels=solid(37, 53, (10, 120, 240)))

    blurred = service.preprocess(img)

    diff = np.abs(blurred.pixels.astype(int) - np.array([10, 120, 240]))
    assert diff.max() <= 1


def test_preprocess_does_not_modify_input(service, black_white_split):
    original = black_white_split.copy()
    service.preprocess(Image(pixels=black_white_split))
    assert np.array_equal(black_white_split, original)
