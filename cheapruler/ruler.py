"""Fast local approximations of geodesic measurements on the WGS84 ellipsoid.

A ruler is built once for a reference latitude.  It derives two multipliers
that turn degrees of longitude and latitude into linear units at that
latitude, then treats the neighbourhood as a flat plane.  Accurate at city
scale; error grows with distance from the reference latitude.

Point coordinates are (x = longitude, y = latitude) in degrees.
"""

import copy
import logging
import math

from .geometry import (
    Point,
    PointOnLine,
    Rect,
    as_line,
    as_point,
    as_polygon,
    as_rect,
)
from .tiles import tile_to_latitude
from .units import DistanceUnit, get_unit

logger = logging.getLogger(__name__)

RE = 6378.137                 # WGS84 equatorial radius, km
FE = 1.0 / 298.257223563      # flattening
E2 = FE * (2.0 - FE)          # eccentricity squared
RAD = math.pi / 180.0


def long_diff(a: float, b: float) -> float:
    """Return a - b in degrees, wrapped into [-180, 180].

    IEEE remainder: an exact half-turn rounds toward the even multiple, so
    both +180 and -180 can come back.
    """
    return math.remainder(a - b, 360.0)


def interpolate(a, b, t: float) -> Point:
    """Point at fraction t of the way from a to b, across the antimeridian if shorter."""
    a = as_point(a)
    b = as_point(b)
    dx = long_diff(b.x, a.x)
    dy = b.y - a.y
    return Point(a.x + dx * t, a.y + dy * t)


def _curvature(latitude: float) -> tuple[float, float]:
    # https://en.wikipedia.org/wiki/Earth_radius#Meridional
    coslat = math.cos(latitude * RAD)
    w2 = 1.0 / (1.0 - E2 * (1.0 - coslat * coslat))
    w = math.sqrt(w2)
    dkx = w * coslat              # normal radius of curvature
    dky = w * w2 * (1.0 - E2)     # meridional radius of curvature
    return dkx, dky


def _multipliers(dkx: float, dky: float, unit: DistanceUnit) -> tuple[float, float]:
    mul = unit.conversion_factor * RAD * RE
    return mul * dkx, mul * dky


def _fraction(offset: float, d: float) -> float:
    # zero-length segment: stay on its start vertex
    return offset / d if d else 0.0


class CheapRuler:
    """Measures distances, bearings and areas around one reference latitude.

    The unit may be a DistanceUnit or a name such as "meters" or "ft".
    """

    def __init__(self, latitude: float,
                 unit: DistanceUnit | str = DistanceUnit.KILOMETERS):
        self._unit = get_unit(unit)
        self._dkx, self._dky = _curvature(latitude)
        self._kx, self._ky = _multipliers(self._dkx, self._dky, self._unit)
        logger.debug("Ruler at latitude %.6f in %s: kx=%.6f ky=%.6f",
                     latitude, self._unit.name.lower(), self._kx, self._ky)

    @classmethod
    def from_tile(cls, y: int, z: int,
                  unit: DistanceUnit | str = DistanceUnit.KILOMETERS) -> "CheapRuler":
        """Build a ruler for the center latitude of tile row y at zoom z.

        Raises InvalidZoomError for z outside [0, 32).
        """
        latitude = tile_to_latitude(y, z)
        logger.debug("Tile row %d at zoom %d -> latitude %.6f", y, z, latitude)
        return cls(latitude, unit)

    # --- Multipliers and units ---

    @property
    def kx(self) -> float:
        return self._kx

    @property
    def ky(self) -> float:
        return self._ky

    @property
    def dkx(self) -> float:
        return self._dkx

    @property
    def dky(self) -> float:
        return self._dky

    @property
    def unit(self) -> DistanceUnit:
        return self._unit

    def change_unit(self, unit: DistanceUnit | str) -> None:
        """Switch this ruler to another unit in place."""
        self._unit = get_unit(unit)
        self._kx, self._ky = _multipliers(self._dkx, self._dky, self._unit)
        logger.debug("Ruler unit changed to %s", self._unit.name.lower())

    def clone_with_unit(self, unit: DistanceUnit | str) -> "CheapRuler":
        """Return a copy measuring in another unit; this ruler is unchanged."""
        clone = copy.copy(self)
        clone.change_unit(unit)
        return clone

    def __eq__(self, other):
        if not isinstance(other, CheapRuler):
            return NotImplemented
        return ((self._kx, self._ky, self._dkx, self._dky, self._unit)
                == (other._kx, other._ky, other._dkx, other._dky, other._unit))

    __hash__ = None

    def __repr__(self):
        return (f"CheapRuler(kx={self._kx!r}, ky={self._ky!r}, "
                f"unit={self._unit.name.lower()!r})")

    # --- Points ---

    def square_distance(self, a, b) -> float:
        """Square of the distance between two points."""
        a = as_point(a)
        b = as_point(b)
        dx = long_diff(a.x, b.x) * self._kx
        dy = (a.y - b.y) * self._ky
        return dx * dx + dy * dy

    def distance(self, a, b) -> float:
        """Distance between two points in ruler units."""
        return math.sqrt(self.square_distance(a, b))

    def bearing(self, a, b) -> float:
        """Bearing from a to b in degrees clockwise from north, in (-180, 180].

        Identical points give 0.0.
        """
        a = as_point(a)
        b = as_point(b)
        dx = long_diff(b.x, a.x) * self._kx
        dy = (b.y - a.y) * self._ky
        bearing = math.atan2(dx, dy) / RAD
        # -0.0 longitude delta heading south
        return 180.0 if bearing == -180.0 else bearing

    def destination(self, origin, dist: float, bearing: float) -> Point:
        """Point reached by travelling dist along bearing from origin."""
        a = bearing * RAD
        return self.offset(origin, math.sin(a) * dist, math.cos(a) * dist)

    def offset(self, origin, dx: float, dy: float) -> Point:
        """Point shifted by dx east and dy north (ruler units)."""
        origin = as_point(origin)
        return Point(origin.x + dx / self._kx, origin.y + dy / self._ky)

    # --- Lines ---

    def line_distance(self, line) -> float:
        """Total length of a line; 0.0 for fewer than two points."""
        points = as_line(line)
        total = 0.0
        for p0, p1 in zip(points, points[1:]):
            total += self.distance(p0, p1)
        return total

    def along(self, line, dist: float) -> Point | None:
        """Point at distance dist along the line.

        Clamps to the first point for dist <= 0 and to the last point past the
        end.  An empty line has no point to return and gives None.
        """
        points = as_line(line)
        if not points:
            return None
        if dist <= 0:
            return points[0]

        total = 0.0
        for p0, p1 in zip(points, points[1:]):
            d = self.distance(p0, p1)
            total += d
            if total > dist:
                return interpolate(p0, p1, (dist - (total - d)) / d)
        return points[-1]

    def _project(self, p: Point, a: Point, b: Point) -> tuple[float, float, float]:
        """Closest point to p on segment a-b as (x, y, t); t is unclamped."""
        x, y = a
        dx = long_diff(b.x, x) * self._kx
        dy = (b.y - y) * self._ky
        t = 0.0

        if dx != 0 or dy != 0:
            t = ((long_diff(p.x, x) * self._kx * dx + (p.y - y) * self._ky * dy)
                 / (dx * dx + dy * dy))
            if t > 1:
                x, y = b
            elif t > 0:
                x += (dx / self._kx) * t
                y += (dy / self._ky) * t

        return x, y, t

    def point_to_segment_distance(self, p, a, b) -> float:
        """Distance from p to the nearest point of segment a-b."""
        p = as_point(p)
        x, y, _ = self._project(p, as_point(a), as_point(b))
        return self.distance(p, Point(x, y))

    def point_on_line(self, line, point) -> PointOnLine | None:
        """Closest point on the line to point, with its segment index and t.

        Returns None when the line has fewer than two points.  On ties the
        lowest segment index wins.
        """
        points = as_line(line)
        if len(points) < 2:
            return None
        p = as_point(point)

        min_dist = math.inf
        min_x = min_y = min_t = 0.0
        min_i = 0

        for i in range(len(points) - 1):
            x, y, t = self._project(p, points[i], points[i + 1])
            d2 = self.square_distance(p, Point(x, y))
            if d2 < min_dist:
                min_dist = d2
                min_x, min_y = x, y
                min_i = i
                min_t = t

        return PointOnLine(Point(min_x, min_y), min_i, max(0.0, min(1.0, min_t)))

    def line_slice(self, start, stop, line) -> list[Point]:
        """Part of the line between the projections of start and stop.

        Follows the line's own direction whichever order start and stop come
        in.  Returns [] when the line has fewer than two points.
        """
        points = as_line(line)
        pol1 = self.point_on_line(points, start)
        pol2 = self.point_on_line(points, stop)
        if pol1 is None or pol2 is None:
            return []

        if (pol1.index, pol1.t) > (pol2.index, pol2.t):
            pol1, pol2 = pol2, pol1

        sliced = [pol1.point]
        left = pol1.index + 1
        right = pol2.index

        if left <= right and points[left] != sliced[0]:
            sliced.append(points[left])
        sliced.extend(points[left + 1:right + 1])

        if points[right] != pol2.point:
            sliced.append(pol2.point)
        return sliced

    def line_slice_along(self, start: float, stop: float, line) -> list[Point]:
        """Part of the line between two distances measured along it.

        Returns [] for an empty or single-point line, or when start lies
        beyond the end of the line.
        """
        points = as_line(line)
        total = 0.0
        sliced: list[Point] = []

        for p0, p1 in zip(points, points[1:]):
            d = self.distance(p0, p1)
            total += d

            if total > start and not sliced:
                sliced.append(interpolate(p0, p1, _fraction(start - (total - d), d)))

            if total >= stop:
                sliced.append(interpolate(p0, p1, _fraction(stop - (total - d), d)))
                return sliced

            if total > start:
                sliced.append(p1)

        return sliced

    # --- Polygons ---

    def area(self, polygon) -> float:
        """Area of a polygon minus its holes, in square ruler units.

        Rings may wind either way; each ring's sum is taken unsigned before
        holes are subtracted.
        """
        polygon = as_polygon(polygon)
        total = abs(_ring_sum(polygon.exterior))
        for ring in polygon.interiors:
            total -= abs(_ring_sum(ring))
        return (abs(total) / 2.0) * self._kx * self._ky

    # --- Bounding boxes ---

    def buffer_point(self, p, buffer: float) -> Rect:
        """Box around p extending buffer ruler units in every direction."""
        p = as_point(p)
        v = buffer / self._ky
        h = buffer / self._kx
        return Rect(Point(p.x - h, p.y - v), Point(p.x + h, p.y + v))

    def buffer_bbox(self, bbox, buffer: float) -> Rect:
        """bbox grown by buffer ruler units on every side."""
        bbox = as_rect(bbox)
        v = buffer / self._ky
        h = buffer / self._kx
        return Rect(
            Point(bbox.min.x - h, bbox.min.y - v),
            Point(bbox.max.x + h, bbox.max.y + v),
        )

    def inside_bbox(self, p, bbox) -> bool:
        """True if p lies in bbox, including boxes crossing the antimeridian."""
        p = as_point(p)
        bbox = as_rect(bbox)
        return (
            bbox.min.y <= p.y <= bbox.max.y
            and long_diff(p.x, bbox.min.x) >= 0
            and long_diff(p.x, bbox.max.x) <= 0
        )


def _ring_sum(ring) -> float:
    """Shoelace sum over a closed ring, wrapping from the last vertex to the first."""
    total = 0.0
    k = len(ring) - 1
    for j in range(len(ring)):
        total += long_diff(ring[j].x, ring[k].x) * (ring[j].y + ring[k].y)
        k = j
    return total
