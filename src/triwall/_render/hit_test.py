# Area: Render
# PRD: docs/prd-rules.md
"""Pointer hit-testing against vertex discs."""

from __future__ import annotations
from typing import Optional, Sequence, Tuple


def is_point_on_vertex(
    point: Tuple[float, float],
    center: Tuple[float, float],
    radius: float,
) -> bool:
    """True if ``point`` lies inside or on the disc around ``center``."""
    px, py = point
    cx, cy = center
    return (px - cx) ** 2 + (py - cy) ** 2 <= radius ** 2


def find_hit(
    point: Tuple[float, float],
    centers: Sequence[Tuple[float, float]],
    radius: float,
) -> Optional[int]:
    """
    Return the index of the first vertex whose disc contains ``point``.

    Vertices are tested in creation order; with overlapping discs the
    lowest index wins.
    """
    for index, center in enumerate(centers):
        if is_point_on_vertex(point, center, radius):
            return index
    return None
