from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Tuple


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Parse "#rrggbb" into (r, g, b)."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb, got {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


@dataclass(frozen=True)
class GradientResult:
    """
    Final output of the pipeline.
    Colors are "#rrggbb" (lowercase), angle is compass degrees in [0, 360).
    """
    start_color: str
    end_color: str
    angle: float

    @property
    def start_rgb(self) -> Tuple[int, int, int]:
        return hex_to_rgb(self.start_color)

    @property
    def end_rgb(self) -> Tuple[int, int, int]:
        return hex_to_rgb(self.end_color)

    def to_dict(self) -> dict:
        return asdict(self)

    def to_css(self, precision: int = 1) -> str:
        # CSS <angle> for linear-gradient is the same convention: 0deg = up, clockwise.
        return f"linear-gradient({self.angle:.{precision}f}deg, {self.start_color}, {self.end_color})"
