# Area: Render Tests
# PRD: docs/prd-rules.md
"""Tests for the board → canvas transform."""

import pytest

from triwall._render.view import ViewTransform


class TestViewTransform:
    def test_defaults(self):
        view = ViewTransform()
        assert (view.width, view.height, view.scale) == (600.0, 600.0, 0.9)

    def test_board_center_maps_to_canvas_center(self):
        assert ViewTransform().to_pixel(0.0, 0.0) == (300.0, 300.0)

    def test_x_axis_scaled_with_margin(self):
        assert ViewTransform().to_pixel(1.0, 0.0) == pytest.approx((570.0, 300.0))
        assert ViewTransform().to_pixel(-1.0, 0.0) == pytest.approx((30.0, 300.0))

    def test_y_axis_points_down(self):
        """Positive board y is towards the top of the canvas."""
        assert ViewTransform().to_pixel(0.0, 1.0) == pytest.approx((300.0, 30.0))

    def test_non_square_canvas(self):
        view = ViewTransform(width=800, height=400, scale=1.0)
        assert view.to_pixel(0.0, 0.0) == (400.0, 200.0)
        assert view.to_pixel(1.0, -1.0) == (800.0, 400.0)
