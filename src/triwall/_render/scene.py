# Area: Render
# PRD: docs/prd-rules.md
"""
triwall._render.scene — Game state → ordered draw requests
==========================================================

Builds the full frame for the current state. Layering, bottom to
top: board outline, owned faces, visible walls, vertices.
"""

from __future__ import annotations
import math
from typing import List, Tuple

from . import palette
from .shapes import Circle, Pixel, Polygon, Shape
from .view import ViewTransform
from .._board.entities import Edge, Face, GameState, Vertex
from .._board.geometry import BOARD_RADIUS


def build_scene(
    state: GameState,
    view: ViewTransform,
    vertex_radius: float = palette.DEFAULT_VERTEX_RADIUS,
    wall_width: float = palette.DEFAULT_WALL_WIDTH,
) -> List[Shape]:
    """Return every shape of the frame in painting order."""
    shapes: List[Shape] = [board_shape(view)]

    colors = {p.index: p.color for p in state.players}
    centers = vertex_centers(state, view)

    for face in state.faces:
        if face.owner is not None:
            shapes.append(face_shape(face, centers, colors[face.owner]))

    for edge in state.edges:
        if edge.visible:
            shapes.append(wall_shape(edge, centers, wall_width))

    for vertex in state.vertices:
        shapes.append(vertex_shape(vertex, centers[vertex.index], vertex_radius))

    return shapes


def vertex_centers(state: GameState, view: ViewTransform) -> List[Pixel]:
    return [view.to_pixel(*v.position) for v in state.vertices]


def board_shape(view: ViewTransform) -> Polygon:
    corners = []
    for i in range(6):
        theta = i * math.pi / 3
        corners.append(view.to_pixel(
            BOARD_RADIUS * math.cos(theta), BOARD_RADIUS * math.sin(theta)
        ))
    return Polygon(
        points=tuple(corners),
        stroke=palette.BOARD_STROKE,
        fill=palette.BOARD_FILL,
    )


def face_shape(face: Face, centers: List[Pixel], color: str) -> Polygon:
    return Polygon(
        points=tuple(centers[v] for v in face.vertices),
        stroke=color,
        fill=color,
    )


def wall_shape(edge: Edge, centers: List[Pixel], width: float) -> Polygon:
    """A wall is a thin rectangle centred on its edge."""
    (x1, y1), (x2, y2) = (centers[v] for v in edge.endpoints)
    length = math.hypot(x2 - x1, y2 - y1) or 1.0
    # unit normal scaled to half the width
    nx = -(y2 - y1) / length * width / 2
    ny = (x2 - x1) / length * width / 2
    points: Tuple[Pixel, ...] = (
        (x1 + nx, y1 + ny),
        (x2 + nx, y2 + ny),
        (x2 - nx, y2 - ny),
        (x1 - nx, y1 - ny),
    )
    return Polygon(points=points, stroke=palette.WALL_COLOR, fill=palette.WALL_COLOR)


def vertex_shape(vertex: Vertex, center: Pixel, radius: float) -> Circle:
    fill = palette.VERTEX_FILLS[vertex.status]
    if vertex.is_pending_origin:
        fill = palette.PENDING_ORIGIN_FILL
    return Circle(center=center, radius=radius, stroke=palette.VERTEX_STROKE, fill=fill)
