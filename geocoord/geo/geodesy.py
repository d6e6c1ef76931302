"""Spherical geodesy between two decimal-degree points.

All functions work on plain decimal degrees so they can be used without
building :class:`~geocoord.geo.Coordinate` objects. Distances use the
haversine formula on a sphere of radius ``EARTH_RADIUS_METER``; no ellipsoid
correction is applied.

Bearings follow the planar convention of the ``bearing`` function below:
0° points north, positive angles turn east and negative angles turn west, so
the result lies in (-180, 180].
"""

from __future__ import annotations

import math
from enum import StrEnum

from geocoord.config import BEARING_PRECISION, EARTH_RADIUS_METER
from geocoord.errors import RangeError
from geocoord.unit import Degree, Meter, Radian

HALF_TURN = 180.0
FULL_TURN = 360.0
QUARTER_TURN = 90.0


class CompassDirection(StrEnum):
    """The eight 45° compass sectors."""

    NORTH = "N"
    NORTH_EAST = "NE"
    EAST = "E"
    SOUTH_EAST = "SE"
    SOUTH = "S"
    SOUTH_WEST = "SW"
    WEST = "W"
    NORTH_WEST = "NW"


# (lower bound inclusive, upper bound exclusive, direction); S covers the wrap
_COMPASS_SECTORS = (
    (-22.5, 22.5, CompassDirection.NORTH),
    (22.5, 67.5, CompassDirection.NORTH_EAST),
    (67.5, 112.5, CompassDirection.EAST),
    (112.5, 157.5, CompassDirection.SOUTH_EAST),
    (-157.5, -112.5, CompassDirection.SOUTH_WEST),
    (-112.5, -67.5, CompassDirection.WEST),
    (-67.5, -22.5, CompassDirection.NORTH_WEST),
)


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> Meter:
    """Great-circle distance between two points, unrounded.

    Args:
        lat1, lon1: Start point in decimal degrees.
        lat2, lon2: End point in decimal degrees.

    Returns:
        Meter: Distance along the sphere's surface.
    """
    phi1, phi2 = Degree(lat1), Degree(lat2)
    half_delta_phi = (phi2 - phi1) * 0.5
    half_delta_lambda = (Degree(lon2) - Degree(lon1)) * 0.5

    a = math.sin(half_delta_phi) ** 2 + math.sin(half_delta_lambda) ** 2 * math.cos(phi1) * math.cos(phi2)
    central_angle = Radian(2 * math.asin(math.sqrt(a)))
    return Meter(EARTH_RADIUS_METER) * float(central_angle)


def bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Heading in degrees from the first point toward the second.

    Identical points short-circuit to ``0.0``. The result is normalized into
    (-180, 180] and rounded to ``BEARING_PRECISION`` decimals.
    """
    if lat1 == lat2 and lon1 == lon2:
        return 0.0

    heading = Degree(QUARTER_TURN) - Radian(math.atan2(lat2 - lat1, lon2 - lon1))
    if heading > Degree(HALF_TURN):
        heading -= Degree(FULL_TURN)

    return round(heading.to(Degree), BEARING_PRECISION)


def compass_direction(degrees: float) -> CompassDirection:
    """Map a bearing in [-180, 180] onto an 8-point compass sector.

    Raises:
        RangeError: If ``degrees`` lies outside [-180, 180].
    """
    if not -HALF_TURN <= degrees <= HALF_TURN:
        raise RangeError(f'Unexpected angle "{degrees:.2f}" given.')

    for lower, upper, direction in _COMPASS_SECTORS:
        if lower <= degrees < upper:
            return direction
    return CompassDirection.SOUTH
