# Area: Render
# PRD: docs/prd-rules.md
"""
triwall._render.shapes — Draw requests
======================================

The two shapes a drawing backend has to support. Both are painted
fill first, then stroke.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

Pixel = Tuple[float, float]


@dataclass(frozen=True)
class Circle:
    center: Pixel
    radius: float
    stroke: str
    fill: str


@dataclass(frozen=True)
class Polygon:
    points: Tuple[Pixel, ...]
    stroke: str
    fill: str


Shape = Union[Circle, Polygon]
