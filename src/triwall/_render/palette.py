# Area: Render
# PRD: docs/prd-rules.md
"""
triwall._render.palette — Colours and sizes
===========================================

CSS colour names, understood by browsers and by pygame alike.
"""

from .._board.entities import VertexStatus

# ══════════════════════════════════════════════════════════════
# VERTICES
# ══════════════════════════════════════════════════════════════

VERTEX_STROKE = "black"
VERTEX_FILLS = {
    VertexStatus.DEFAULT: "yellowgreen",
    VertexStatus.CANDIDATE: "skyblue",
    VertexStatus.WALL: "lavender",
}
PENDING_ORIGIN_FILL = "yellow"

# ══════════════════════════════════════════════════════════════
# WALLS AND BOARD
# ══════════════════════════════════════════════════════════════

WALL_COLOR = "azure"
BOARD_STROKE = "black"
BOARD_FILL = "gray"

DEFAULT_VERTEX_RADIUS = 10.0
DEFAULT_WALL_WIDTH = 10.0
