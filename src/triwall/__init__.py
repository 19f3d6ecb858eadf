"""
triwall — Wall-building territory game engine
=============================================

Rule engine for a turn-based game for 2 to 4 players on a hexagonal
board cut into 54 triangles. On each turn a player picks a vertex and
then one of the vertices it reaches in a straight line; every segment
in between becomes a wall. Closing the third wall of a triangle wins
it for the player who moved. When every triangle is taken, the player
with the most triangles wins.

Quick Start (terminal):
    $ triwall --players 2

Embedding:
    from triwall import initialize_game, RecordingAnnouncer, ShapeRecorder

    controller = initialize_game({"player_count": 2},
                                 renderer=ShapeRecorder(),
                                 announcer=RecordingAnnouncer())
    controller.click_vertex(0)
    controller.click_vertex(3)

Custom frontends implement three collaborators:

    from triwall import Renderer, Announcer, InputSource
    class MyRenderer(Renderer): ...   # render(shapes)

Type Definitions
----------------
Snapshot types are available for import:

    from triwall import GameSnapshot, FaceSnapshot, ScoreEntry
"""

from .controller import GameController, initialize_game
from .config import GameConfig, load_settings, resolve_player_count
from .collaborators import (
    Announcer,
    InputSource,
    RecordingAnnouncer,
    Renderer,
    ShapeRecorder,
    SurfaceOriginInput,
)
from ._render.shapes import Circle, Polygon, Shape
from ._engine.enums import HitOutcome, ResolverState
from ._board.entities import VertexStatus
from ._shared.announcer import ConsoleAnnouncer
from .errors import (
    TriwallError,
    TopologyError,
    ConfigError,
    GameFinishedError,
    FaceAlreadyOwnedError,
)
from .types import (
    ScoreEntry,
    FaceSnapshot,
    GameSnapshot,
)

__all__ = [
    # Main classes
    "GameController",
    "initialize_game",
    "GameConfig",
    "load_settings",
    "resolve_player_count",
    # Collaborators
    "Announcer",
    "InputSource",
    "RecordingAnnouncer",
    "Renderer",
    "ShapeRecorder",
    "SurfaceOriginInput",
    "ConsoleAnnouncer",
    # Shapes
    "Circle",
    "Polygon",
    "Shape",
    # Engine enums
    "HitOutcome",
    "ResolverState",
    "VertexStatus",
    # Errors
    "TriwallError",
    "TopologyError",
    "ConfigError",
    "GameFinishedError",
    "FaceAlreadyOwnedError",
    # Snapshot types
    "ScoreEntry",
    "FaceSnapshot",
    "GameSnapshot",
]
__version__ = "1.0.0"
