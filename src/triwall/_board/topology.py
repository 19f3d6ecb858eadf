# Area: Board
# PRD: docs/prd-rules.md
"""
triwall._board.topology — Immutable board topology
==================================================

Wraps the static tables in a frozen dataclass and answers the
structural questions the engine asks: which vertices are reachable
from a vertex, which line leads to a target, which edge joins two
vertices, and which vertices outline a face.

Reachability comes only from the directional lines. A vertex that
is geometrically close but not at the far end of a line is never a
legal target.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

from . import geometry
from ..errors import TopologyError

Point = Tuple[float, float]
Line = Tuple[int, ...]


@dataclass(frozen=True)
class BoardTopology:
    """
    Static structure of the board.

    Attributes:
        positions: Vertex positions in board units, by vertex index
        edges: Edge endpoints, by edge index
        faces: The three edge indices bounding each face, by face index
        lines: Directional lines of each vertex, by vertex index
    """

    positions: Tuple[Point, ...]
    edges: Tuple[Tuple[int, int], ...]
    faces: Tuple[Tuple[int, int, int], ...]
    lines: Tuple[Tuple[Line, ...], ...]
    _edge_lookup: Dict[FrozenSet[int], int] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        lookup = {frozenset(pair): idx for idx, pair in enumerate(self.edges)}
        object.__setattr__(self, "_edge_lookup", lookup)

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def face_count(self) -> int:
        return len(self.faces)

    def reachable(self, vertex: int) -> Tuple[int, ...]:
        """Far end of every directional line of ``vertex``."""
        return tuple(line[-1] for line in self.lines[vertex])

    def line_to(self, origin: int, target: int) -> Optional[Line]:
        """Return the line of ``origin`` whose far end is ``target``."""
        for line in self.lines[origin]:
            if line[-1] == target:
                return line
        return None

    def edge_between(self, a: int, b: int) -> Optional[int]:
        return self._edge_lookup.get(frozenset((a, b)))

    def incident_edges(self, vertex: int) -> Tuple[int, ...]:
        return tuple(
            idx for idx, (a, b) in enumerate(self.edges) if vertex in (a, b)
        )

    def face_vertices(self, face: int) -> Tuple[int, ...]:
        """Union of a face's edge endpoints, in first-seen order."""
        seen: List[int] = []
        for edge in self.faces[face]:
            for vertex in self.edges[edge]:
                if vertex not in seen:
                    seen.append(vertex)
        return tuple(seen)


def validate_topology(topology: BoardTopology) -> List[str]:
    """
    Check the structural invariants of a topology.

    Returns:
        A list of human-readable problems; empty when the topology is sound
    """
    problems: List[str] = []
    n_vertices = topology.vertex_count
    n_edges = topology.edge_count

    if len(topology.lines) != n_vertices:
        problems.append(
            f"{len(topology.lines)} line entries for {n_vertices} vertices"
        )

    for idx, (a, b) in enumerate(topology.edges):
        if not (0 <= a < n_vertices and 0 <= b < n_vertices) or a == b:
            problems.append(f"edge {idx} has invalid endpoints ({a}, {b})")

    for idx, face in enumerate(topology.faces):
        if len(set(face)) != 3:
            problems.append(f"face {idx} does not have 3 distinct edges: {face}")
            continue
        if any(not 0 <= e < n_edges for e in face):
            problems.append(f"face {idx} refers to unknown edge: {face}")
            continue
        vertices = topology.face_vertices(idx)
        if len(vertices) != 3:
            problems.append(
                f"face {idx} edges span {len(vertices)} vertices: {vertices}"
            )

    for vertex, lines in enumerate(topology.lines[:n_vertices]):
        if not lines:
            problems.append(f"vertex {vertex} has no directional lines")
        for line in lines:
            if not line:
                problems.append(f"vertex {vertex} has an empty line")
                continue
            prev = vertex
            for nxt in line:
                if not 0 <= nxt < n_vertices:
                    problems.append(f"line of vertex {vertex} leaves the board: {line}")
                    break
                if topology.edge_between(prev, nxt) is None:
                    problems.append(
                        f"line of vertex {vertex} has no edge between {prev} and {nxt}"
                    )
                prev = nxt

    return problems


def build_topology(
    positions=geometry.POSITIONS,
    edges=geometry.EDGES,
    faces=geometry.FACES,
    lines=geometry.LINES,
) -> BoardTopology:
    """
    Build and validate a topology from raw tables.

    Raises:
        TopologyError: If the tables violate any structural invariant
    """
    topology = BoardTopology(
        positions=tuple(tuple(p) for p in positions),
        edges=tuple(tuple(e) for e in edges),
        faces=tuple(tuple(f) for f in faces),
        lines=tuple(tuple(tuple(line) for line in ls) for ls in lines),
    )
    problems = validate_topology(topology)
    if problems:
        raise TopologyError(problems)
    return topology


# The one board this game is played on.
STANDARD_BOARD = build_topology()
