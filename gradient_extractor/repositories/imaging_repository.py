# repositories/imaging_repository.py
from __future__ import annotations
from typing import Tuple
import cv2
import numpy as np

from ..errors import PrimitiveFailureError


class ImagingRepository:
    """
    Imaging primitives the pipeline is built on.

    • Thin wrappers over OpenCV, one method per primitive.
    • Any cv2.error is re-raised as PrimitiveFailureError naming the primitive.
    • Stateless: safe to share between threads as long as OpenCV is.
    """

    @staticmethod
    def _call(operation: str, fn, *args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except cv2.error as err:
            raise PrimitiveFailureError(operation, str(err).strip()) from err

    # ---------- geometry / filtering ----------
    def resize(self, pixels: np.ndarray, width: int, height: int) -> np.ndarray:
        # INTER_AREA: pixel-area averaging, no aliasing when shrinking.
        return self._call("resize", cv2.resize, pixels, (width, height),
                          interpolation=cv2.INTER_AREA)

    def gaussian_blur(self, pixels: np.ndarray, sigma: float) -> np.ndarray:
        return self._call("gaussian_blur", cv2.GaussianBlur, pixels, (0, 0),
                          sigmaX=sigma, sigmaY=sigma,
                          borderType=cv2.BORDER_REFLECT)

    def to_grayscale(self, pixels: np.ndarray, channel_order: str = "BGR") -> np.ndarray:
        code = cv2.COLOR_RGB2GRAY if channel_order == "RGB" else cv2.COLOR_BGR2GRAY
        return self._call("to_grayscale", cv2.cvtColor, pixels, code)

    def directional_derivative(self, gray: np.ndarray, dx: int, dy: int, ksize: int = 5) -> np.ndarray:
        """
        Sobel derivative as float64, zero-padded borders.
        """
        return self._call("directional_derivative", cv2.Sobel, gray, cv2.CV_64F,
                          dx, dy, ksize=ksize, borderType=cv2.BORDER_CONSTANT)

    def cartesian_to_polar(self, grad_x: np.ndarray, grad_y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Returns (magnitude, angle); angle in radians, [0, 2*pi), x right / y down.
        """
        magnitude, angle = self._call("cartesian_to_polar", cv2.cartToPolar,
                                      grad_x, grad_y, angleInDegrees=False)
        return magnitude, angle

    # ---------- statistics / masks ----------
    def min_max(self, field: np.ndarray) -> Tuple[float, float]:
        min_val, max_val, _, _ = self._call("min_max", cv2.minMaxLoc, field)
        return float(min_val), float(max_val)

    def threshold(self, field: np.ndarray, thr: float) -> np.ndarray:
        """
        uint8 mask (H, W): 255 where field > thr, else 0.
        """
        _, mask = self._call("threshold", cv2.threshold, field, thr, 255.0,
                             cv2.THRESH_BINARY)
        return mask.astype(np.uint8)

    def in_range(self, field: np.ndarray, lower: float, upper: float) -> np.ndarray:
        """
        uint8 mask (H, W): 255 where lower <= field <= upper.
        """
        return self._call("in_range", cv2.inRange, field,
                          np.array([lower], dtype=np.float64),
                          np.array([upper], dtype=np.float64))

    def count_nonzero(self, mask: np.ndarray) -> int:
        return int(self._call("count_nonzero", cv2.countNonZero, mask))

    def masked_mean(self, pixels: np.ndarray, mask: np.ndarray) -> Tuple[float, float, float]:
        """
        Per-channel mean of pixels where mask != 0, in the image's own channel order.
        """
        mean = self._call("masked_mean", cv2.mean, pixels, mask=mask)
        return float(mean[0]), float(mean[1]), float(mean[2])

    # ---------- decoding ----------
    def decode_file(self, path: str) -> np.ndarray | None:
        """
        BGR uint8 pixels, or None when the file is missing or not an image.
        """
        return self._call("decode", cv2.imread, path, cv2.IMREAD_COLOR)

    def decode_bytes(self, data: bytes) -> np.ndarray | None:
        buffer = np.frombuffer(data, dtype=np.uint8)
        if buffer.size == 0:
            return None
        return self._call("decode", cv2.imdecode, buffer, cv2.IMREAD_COLOR)
