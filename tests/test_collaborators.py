# Area: Controller Tests
# PRD: docs/prd-rules.md
"""Tests for the built-in collaborators."""

import pytest

from triwall._render.shapes import Circle
from triwall.collaborators import (
    Announcer,
    InputSource,
    Renderer,
    ShapeRecorder,
    SurfaceOriginInput,
)


class TestSurfaceOriginInput:
    def test_default_is_identity(self):
        assert SurfaceOriginInput().to_board_point(12, 34) == (12, 34)

    def test_origin_subtracted(self):
        assert SurfaceOriginInput(10, 60).to_board_point(110, 160) == (100, 100)


class TestShapeRecorder:
    def test_keeps_last_frame(self):
        recorder = ShapeRecorder()
        dot = Circle(center=(1, 1), radius=1, stroke="black", fill="yellow")
        recorder.render([dot, dot])
        recorder.render((dot,))
        assert recorder.frames == 2
        assert recorder.shapes == [dot]


class TestAbstractCollaborators:
    @pytest.mark.parametrize("cls", [Renderer, Announcer, InputSource])
    def test_cannot_instantiate(self, cls):
        with pytest.raises(TypeError):
            cls()
