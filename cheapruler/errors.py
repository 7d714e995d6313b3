"""Exceptions raised by cheapruler."""


class CheapRulerError(Exception):
    """Base class for all cheapruler errors."""


class InvalidZoomError(CheapRulerError, ValueError):
    """Tile zoom level outside [0, 32)."""

    def __init__(self, zoom: int):
        self.zoom = zoom
        super().__init__(f"zoom must be in [0, 32), got {zoom}")


class UnknownUnitError(CheapRulerError, ValueError):
    """Distance unit name that does not match any DistanceUnit."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown distance unit: {name!r}")
