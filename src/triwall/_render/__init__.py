# Area: Render
# PRD: docs/prd-rules.md
"""
Frontend-independent rendering helpers.

This package contains:
- Shape draw requests (Circle, Polygon)
- Board → pixel transform and pointer hit-testing
- The scene builder turning a GameState into draw requests
"""

from .shapes import Circle, Polygon, Shape
from .view import ViewTransform
from .hit_test import find_hit, is_point_on_vertex
from .scene import build_scene, vertex_centers

__all__ = [
    "Circle",
    "Polygon",
    "Shape",
    "ViewTransform",
    "find_hit",
    "is_point_on_vertex",
    "build_scene",
    "vertex_centers",
]
