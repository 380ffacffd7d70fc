from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from .gradient_result import GradientResult
from ..errors import GradientExtractionError


@dataclass
class GalleryEntry:
    """
    Outcome of one file in a batch run: exactly one of result / error is set.
    """
    path: Path  # raw reference when it is not a filesystem path
    result: GradientResult | None = None
    error: GradientExtractionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
