"""Web-Mercator tile coordinates -> reference latitude."""

import math

from .errors import InvalidZoomError

MAX_ZOOM = 31


def tile_to_latitude(y: int, z: int) -> float:
    """Return the latitude (degrees) at the vertical center of tile row y.

    Uses the slippy-map scheme: row 0 is the northernmost row at every zoom.
    """
    if z < 0 or z > MAX_ZOOM:
        raise InvalidZoomError(z)
    n = 1 << z

    lat_rad = math.atan(math.sinh(math.pi * (1 - 2 * (y + 0.5) / n)))
    return lat_rad / (math.pi / 180)
