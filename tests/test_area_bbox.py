"""
Unit tests for cheapruler.ruler area and bounding box operations.

Tests:
- Shoelace area with and without holes
- Point and bbox buffering
- Bbox containment, including antimeridian-crossing boxes
"""

import pytest
from shapely.geometry import Polygon as ShapelyPolygon

from cheapruler import Point, Polygon, Rect

SQUARE = [(0.0, 0.0), (0.1, 0.0), (0.1, 0.1), (0.0, 0.1), (0.0, 0.0)]
HOLE = [(0.02, 0.02), (0.04, 0.02), (0.04, 0.04), (0.02, 0.04), (0.02, 0.02)]


class TestArea:
    """Tests for area."""

    def test_square_closed_form(self, equator_ruler):
        """Test that a 0.1 x 0.1 degree square is 0.01 kx ky."""
        area = equator_ruler.area(Polygon(SQUARE))
        assert area == pytest.approx(0.01 * equator_ruler.kx * equator_ruler.ky, rel=1e-9)

    def test_square_area_in_km2(self, equator_ruler):
        assert equator_ruler.area(SQUARE) == pytest.approx(123.1, abs=0.1)

    def test_winding_does_not_matter(self, equator_ruler):
        assert equator_ruler.area(SQUARE[::-1]) == pytest.approx(equator_ruler.area(SQUARE))

    def test_open_ring(self, equator_ruler):
        """Test that the ring wraps from the last vertex to the first."""
        assert equator_ruler.area(SQUARE[:-1]) == pytest.approx(equator_ruler.area(SQUARE))

    def test_hole_subtracted(self, equator_ruler):
        r = equator_ruler
        area = r.area(Polygon(SQUARE, [HOLE]))
        assert area == pytest.approx((0.01 - 0.0004) * r.kx * r.ky, rel=1e-9)

    def test_hole_winding_does_not_matter(self, equator_ruler):
        same = equator_ruler.area(Polygon(SQUARE, [HOLE]))
        reversed_hole = equator_ruler.area(Polygon(SQUARE, [HOLE[::-1]]))
        assert reversed_hole == pytest.approx(same)

    def test_shapely_polygon(self, equator_ruler):
        r = equator_ruler
        shp = ShapelyPolygon(SQUARE, [HOLE])
        assert r.area(shp) == pytest.approx(shp.area * r.kx * r.ky, rel=1e-9)

    def test_empty_polygon(self, ruler):
        assert ruler.area(Polygon([])) == 0.0

    def test_meters_scale(self, equator_ruler):
        meters = equator_ruler.clone_with_unit("meters")
        assert meters.area(SQUARE) == pytest.approx(equator_ruler.area(SQUARE) * 1e6)

    def test_across_antimeridian(self, equator_ruler):
        ring = [(179.95, 0.0), (-179.95, 0.0), (-179.95, 0.1), (179.95, 0.1)]
        assert equator_ruler.area(ring) == pytest.approx(equator_ruler.area(SQUARE))


class TestBuffer:
    """Tests for buffer_point and buffer_bbox."""

    def test_buffer_point(self, ruler):
        rect = ruler.buffer_point((30.5, 32.8), 1.0)
        assert isinstance(rect, Rect)
        assert rect.min == (30.5 - 1.0 / ruler.kx, 32.8 - 1.0 / ruler.ky)
        assert rect.max == (30.5 + 1.0 / ruler.kx, 32.8 + 1.0 / ruler.ky)

    def test_buffer_point_is_anisotropic(self, ruler):
        """Test that the box is wider in degrees than it is tall."""
        rect = ruler.buffer_point((30.5, 32.8), 1.0)
        assert rect.max.x - rect.min.x > rect.max.y - rect.min.y

    def test_buffer_bbox(self, ruler):
        bbox = Rect(Point(30.0, 32.0), Point(31.0, 33.0))
        rect = ruler.buffer_bbox(bbox, 2.0)
        assert rect.min == (30.0 - 2.0 / ruler.kx, 32.0 - 2.0 / ruler.ky)
        assert rect.max == (31.0 + 2.0 / ruler.kx, 33.0 + 2.0 / ruler.ky)

    def test_buffer_bbox_from_bounds(self, ruler):
        rect = ruler.buffer_bbox((30.0, 32.0, 31.0, 33.0), 2.0)
        assert rect == ruler.buffer_bbox(Rect(Point(30.0, 32.0), Point(31.0, 33.0)), 2.0)


class TestInsideBbox:
    """Tests for inside_bbox."""

    def test_inside(self, ruler):
        assert ruler.inside_bbox((30.5, 32.5), Rect(Point(30.0, 32.0), Point(31.0, 33.0)))

    def test_outside(self, ruler):
        bbox = Rect(Point(30.0, 32.0), Point(31.0, 33.0))
        assert not ruler.inside_bbox((31.5, 32.5), bbox)
        assert not ruler.inside_bbox((30.5, 33.5), bbox)
        assert not ruler.inside_bbox((29.5, 32.5), bbox)

    def test_edges_inclusive(self, ruler):
        bbox = Rect(Point(30.0, 32.0), Point(31.0, 33.0))
        assert ruler.inside_bbox((30.0, 32.0), bbox)
        assert ruler.inside_bbox((31.0, 33.0), bbox)

    def test_accepts_bounds(self, ruler):
        assert ruler.inside_bbox((30.5, 32.5), (30.0, 32.0, 31.0, 33.0))

    def test_antimeridian_box(self, equator_ruler):
        """Test a box whose min longitude is east of its max longitude."""
        bbox = Rect(Point(179.0, -1.0), Point(-179.0, 1.0))
        assert equator_ruler.inside_bbox((179.5, 0.0), bbox)
        assert equator_ruler.inside_bbox((-179.5, 0.0), bbox)
        assert not equator_ruler.inside_bbox((0.0, 0.0), bbox)
        assert not equator_ruler.inside_bbox((179.5, 2.0), bbox)

    def test_buffer_then_contain(self, ruler):
        p = (30.5, 32.8)
        rect = ruler.buffer_point(p, 1.0)
        assert ruler.inside_bbox(ruler.destination(p, 0.9, 90.0), rect)
        assert not ruler.inside_bbox(ruler.destination(p, 1.1, 90.0), rect)
        assert not ruler.inside_bbox(ruler.destination(p, 1.1, 0.0), rect)
