# Area: Render
# PRD: docs/prd-rules.md
"""Board units → canvas pixels."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ViewTransform:
    """
    Maps board coordinates (unit hexagon, y up) onto a canvas
    (origin top-left, y down). ``scale`` leaves a margin around the
    board.
    """
    width: float = 600.0
    height: float = 600.0
    scale: float = 0.9

    def to_pixel(self, x: float, y: float) -> Tuple[float, float]:
        xs = (self.scale * x + 1) * self.width / 2
        ys = (-self.scale * y + 1) * self.height / 2
        return xs, ys
