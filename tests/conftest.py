import os
import sys

import cv2
import numpy as np
import pytest

# Add the project root to sys.path so the tests run from a plain checkout too
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


@pytest.fixture
def write_image(tmp_path):
    """Write BGR pixels to tmp_path/<name> with OpenCV and return the path."""
    def _write(pixels, name="image.png"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        assert cv2.imwrite(str(path), pixels)
        return path
    return _write


@pytest.fixture
def solid():
    def _make(height, width, bgr):
        return np.full((height, width, 3), bgr, dtype=np.uint8)
    return _make


@pytest.fixture
def black_white_split():
    """8x8, left half black, right half white."""
    pixels = np.zeros((8, 8, 3), dtype=np.uint8)
    pixels[:, 4:] = 255
    return pixels
