"""cheapruler - fast city-scale geodesic approximations on the WGS84 ellipsoid."""

import logging

from .errors import CheapRulerError, InvalidZoomError, UnknownUnitError
from .geometry import Point, PointOnLine, Polygon, Rect
from .ruler import CheapRuler, interpolate, long_diff
from .units import DistanceUnit, get_unit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CheapRuler",
    "CheapRulerError",
    "DistanceUnit",
    "InvalidZoomError",
    "Point",
    "PointOnLine",
    "Polygon",
    "Rect",
    "UnknownUnitError",
    "get_unit",
    "interpolate",
    "long_diff",
]
