# Area: Engine
# PRD: docs/prd-rules.md
"""
triwall._engine.enums — Move state machine enums
================================================

Defines the states of the two-click move state machine and the
outcome reported for every hit it handles.
"""

from enum import Enum


class ResolverState(Enum):
    """
    States of the move resolver.

    State transitions:
    IDLE -> ORIGIN_SELECTED (on any vertex hit)
    ORIGIN_SELECTED -> IDLE (on hitting the origin again: cancel)
    ORIGIN_SELECTED -> IDLE (on hitting a reachable vertex: move)
    ORIGIN_SELECTED -> ORIGIN_SELECTED (on any other vertex: ignored)
    """
    IDLE = "IDLE"
    ORIGIN_SELECTED = "ORIGIN_SELECTED"


class HitOutcome(Enum):
    """
    What a single hit did.

    - IGNORED: nothing changed (miss, or a vertex that is neither the
      origin nor reachable from it)
    - SELECTED: the vertex became the pending origin
    - CANCELLED: the pending origin was released
    - COMPLETED: a wall was built from the origin to the vertex
    """
    IGNORED = "IGNORED"
    SELECTED = "SELECTED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"
