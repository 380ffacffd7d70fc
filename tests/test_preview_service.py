import cv2
import numpy as np
import pytest

from gradient_extractor.models.gradient_result import GradientResult
from gradient_extractor.services.preview_service import PreviewService


@pytest.fixture
def service():
    return PreviewService(width=32, height=16)


def test_render_to_the_right(service):
    preview = service.render(GradientResult("#000000", "#ffffff", 90.0), width=10, height=4)
    pixels = preview.pixels

    assert pixels.shape == (4, 10, 3)
    assert preview.channel_order == "RGB"
    row = pixels[0, :, 0].astype(int)
    assert np.all(np.diff(row) >= 0)
    assert row[0] < 30 and row[-1] > 225
    assert all(np.array_equal(pixels[0], pixels[y]) for y in range(4))


def test_render_downward(service):
    preview = service.render(GradientResult("#ff0000", "#0000ff", 180.0), width=10, height=4)
    pixels = preview.pixels

    # red fades out from top to bottom, blue fades in
    assert pixels[0, 0, 0] > pixels[-1, 0, 0]
    assert pixels[0, 0, 2] < pixels[-1, 0, 2]
    assert all(np.array_equal(pixels[:, 0], pixels[:, x]) for x in range(10))


def test_render_default_size(service):
    preview = service.render(GradientResult("#123456", "#654321", 45.0))
    assert preview.pixels.shape == (16, 32, 3)


def test_save_writes_png(service, tmp_path):
    out = service.save(GradientResult("#ff0000", "#00ff00", 0.0), tmp_path / "preview.png")

    written = cv2.imread(str(out))
    assert written is not None
    assert written.shape == (16, 32, 3)
    # angle 0 points up: the end color (green) is at the top
    b, g, r = written[0, 16]
    assert g > r
