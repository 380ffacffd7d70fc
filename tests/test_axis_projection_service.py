import math

import numpy as np
import pytest

from gradient_extractor.models.dominant_axis import DominantAxis
from gradient_extractor.models.image import Image
from gradient_extractor.services.axis_projection_service import AxisProjectionService


@pytest.fixture
def service():
    return AxisProjectionService(band_fraction=0.15)


def test_project_horizontal():
    t = AxisProjectionService.project((2, 3), 1.0, 0.0)
    assert t.dtype == np.float32
    assert np.array_equal(t, np.array([[0, 1, 2], [0, 1, 2]], dtype=np.float32))


def test_project_vertical():
    t = AxisProjectionService.project((3, 2), 0.0, 1.0)
    assert np.array_equal(t, np.array([[0, 0], [1, 1], [2, 2]], dtype=np.float32))


def test_split_horizontal_bands(service):
    bands = service.split(AxisProjectionService.project((50, 100), 1.0, 0.0))

    assert bands.low == pytest.approx(14.85)
    assert bands.high == pytest.approx(84.15)
    assert bands.start_mask.shape == (50, 100)
    assert bands.end_mask.shape == (50, 100)

    start_cols = np.where(bands.start_mask.any(axis=0))[0]
    end_cols = np.where(bands.end_mask.any(axis=0))[0]
    assert list(start_cols) == list(range(0, 15))
    assert list(end_cols) == list(range(85, 100))
    assert np.count_nonzero(bands.start_mask) == 15 * 50
    assert np.count_nonzero(bands.end_mask) == 15 * 50


def test_split_vertical_bands(service):
    bands = service.split(AxisProjectionService.project((50, 100), 0.0, 1.0))

    start_rows = np.where(bands.start_mask.any(axis=1))[0]
    end_rows = np.where(bands.end_mask.any(axis=1))[0]
    assert list(start_rows) == list(range(0, 8))     # low = 7.35
    assert list(end_rows) == list(range(42, 50))     # high = 41.65


def test_diagonal_bands_are_disjoint_corners(service):
    d = math.cos(math.pi / 4)
    bands = service.split(AxisProjectionService.project((40, 40), d, d))

    assert not np.logical_and(bands.start_mask, bands.end_mask).any()
    assert bands.start_mask[0, 0] == 255
    assert bands.end_mask[39, 39] == 255
    assert bands.start_mask[39, 0] == 0


def test_single_pixel_selected_by_both_bands(service):
    bands = service.split(AxisProjectionService.project((1, 1), 1.0, 0.0))
    assert bands.start_mask[0, 0] == 255
    assert bands.end_mask[0, 0] == 255


def test_bands_use_raw_axis_on_image_grid(service):
    img = Image(pixels=np.zeros((10, 20, 3), dtype=np.uint8))
    axis = DominantAxis(dx=-1.0, dy=0.0, radians=math.pi, angle=270.0, strong_pixels=30)

    bands = service.bands(img, axis)

    assert bands.projection.shape == (10, 20)
    # pointing left: the start band is on the right edge
    assert bands.start_mask[:, -1].all()
    assert bands.end_mask[:, 0].all()
