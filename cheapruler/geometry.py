"""Geometry value types consumed and produced by the ruler, plus shapely interop."""

from dataclasses import dataclass, field
from typing import NamedTuple, Sequence

from shapely.geometry import LineString, box
from shapely.geometry import Polygon as ShapelyPolygon


class Point(NamedTuple):
    """A (longitude, latitude) pair in degrees."""

    x: float
    y: float


class Rect(NamedTuple):
    """Axis-aligned bounding box given by its min and max corners."""

    min: Point
    max: Point


class PointOnLine(NamedTuple):
    """Closest point on a line.

    index is the start vertex of the segment holding the point, t the
    position along that segment in [0, 1].
    """

    point: Point
    index: int
    t: float


def _ring(coords) -> tuple[Point, ...]:
    return tuple(Point(c[0], c[1]) for c in coords)


@dataclass(frozen=True)
class Polygon:
    """Exterior ring plus zero or more holes."""

    exterior: tuple[Point, ...]
    interiors: tuple[tuple[Point, ...], ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "exterior", _ring(self.exterior))
        object.__setattr__(self, "interiors",
                           tuple(_ring(r) for r in self.interiors))


def as_point(point) -> Point:
    """Return a Point from a Point, a (lon, lat) pair or a shapely Point."""
    if isinstance(point, Point):
        return point
    if hasattr(point, "coords"):
        point = point.coords[0]
    return Point(point[0], point[1])


def as_rect(rect) -> Rect:
    """Return a Rect from a Rect, a (min, max) pair or shapely-style bounds.

    Bounds are the 4-tuple (minx, miny, maxx, maxy) returned by
    shapely's .bounds.
    """
    if len(rect) == 4:
        return Rect(Point(rect[0], rect[1]), Point(rect[2], rect[3]))
    return Rect(as_point(rect[0]), as_point(rect[1]))


def as_line(line) -> list[Point]:
    """Return a line as a list of Points.

    Accepts a shapely LineString (or anything with .coords) or a sequence of
    (lon, lat) pairs. Z values are dropped.
    """
    coords = line.coords if hasattr(line, "coords") else line
    return [Point(c[0], c[1]) for c in coords]


def as_polygon(polygon) -> Polygon:
    """Return a Polygon from a Polygon, a shapely Polygon or a single ring."""
    if isinstance(polygon, Polygon):
        return polygon
    if hasattr(polygon, "exterior"):
        return Polygon(
            polygon.exterior.coords,
            tuple(ring.coords for ring in polygon.interiors),
        )
    return Polygon(polygon)


def to_linestring(line: Sequence[Point]) -> LineString:
    return LineString([(p[0], p[1]) for p in line])


def to_shapely_polygon(polygon: Polygon) -> ShapelyPolygon:
    return ShapelyPolygon(
        [(p.x, p.y) for p in polygon.exterior],
        [[(p.x, p.y) for p in ring] for ring in polygon.interiors],
    )


def rect_to_box(rect: Rect) -> ShapelyPolygon:
    """Convert a Rect to a shapely box.

    shapely has no notion of longitude wraparound, so a Rect crossing the
    antimeridian (min.x > max.x) comes back covering the numeric span between
    its corners instead.
    """
    return box(rect.min[0], rect.min[1], rect.max[0], rect.max[1])
