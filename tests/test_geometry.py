"""
Tests for chaosgame.model.geometry
"""
import pytest

from chaosgame.model.geometry import Point, is_inside_triangle, triangle_area, triangle_corners


class TestTriangleCorners:
    def test_default_canvas(self):
        top, left, right = triangle_corners(500, 500)
        assert top == Point(250, 0)
        assert left == Point(0, 500)
        assert right == Point(500, 500)

    def test_non_square_canvas(self):
        top, left, right = triangle_corners(800, 600)
        assert top == Point(400, 0)
        assert left == Point(0, 600)
        assert right == Point(800, 600)


class TestTriangleArea:
    def test_area(self, corners):
        assert triangle_area(*corners) == pytest.approx(125_000)

    def test_orientation_does_not_matter(self, top, bottom_left, bottom_right):
        assert triangle_area(top, bottom_left, bottom_right) == triangle_area(bottom_right, bottom_left, top)

    def test_degenerate(self):
        assert triangle_area(Point(0, 0), Point(1, 1), Point(2, 2)) == 0


class TestIsInsideTriangle:
    def test_centroid_inside(self, corners, centroid):
        assert is_inside_triangle(centroid, *corners)

    def test_canvas_corner_outside(self, corners):
        assert not is_inside_triangle(Point(10, 10), *corners)
        assert not is_inside_triangle(Point(490, 10), *corners)

    def test_outside_canvas(self, corners):
        assert not is_inside_triangle(Point(250, -1), *corners)
        assert not is_inside_triangle(Point(250, 501), *corners)

    def test_corners_count_as_inside(self, corners):
        for c in corners:
            assert is_inside_triangle(c, *corners)

    def test_edges_count_as_inside(self, corners):
        assert is_inside_triangle(Point(250, 500), *corners)
        assert is_inside_triangle(Point(125, 250), *corners)
        assert is_inside_triangle(Point(375, 250), *corners)

    def test_just_outside_slanted_edge(self, corners):
        # Left edge passes through (125, 250)
        assert not is_inside_triangle(Point(120, 250), *corners)


class TestPoint:
    def test_midpoint(self):
        assert Point(0, 0).midpoint(Point(10, 20)) == Point(5, 10)

    def test_midpoint_is_symmetric(self):
        a, b = Point(3, 7), Point(-1, 2)
        assert a.midpoint(b) == b.midpoint(a)

