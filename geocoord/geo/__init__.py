"""Geographic values and spherical geodesy.

Components:
    Axis: Latitude or longitude marker with its hemisphere letters
    AngleValue: One decimal degree with derived DMS fields
    DmsFormat: Output layouts for DMS strings
    Coordinate: Immutable latitude/longitude pair
    CompassDirection: 8-point compass sectors

Typical Usage:
    >>> from geocoord.geo import Coordinate
    >>> dresden = Coordinate.from_string("51.0504, 13.7373")
    >>> cordoba = Coordinate.from_string("31°25′31.0764″S, 64°12′6.2748″W")
    >>> dresden.bearing_to(cordoba)
    -136.62
    >>> dresden.compass_direction(cordoba)
    <CompassDirection.SOUTH_WEST: 'SW'>
    >>> cordoba.latitude_dms("short2")
    'S31°25′31.0764″'
"""

from .angle_value import AngleValue, Axis, DmsFormat
from .geodesy import CompassDirection, bearing, compass_direction, haversine_distance
from .coordinate import RETURN_KILOMETERS, RETURN_METERS, Coordinate

__all__ = [
    "Axis",
    "AngleValue",
    "DmsFormat",
    "Coordinate",
    "CompassDirection",
    "RETURN_METERS",
    "RETURN_KILOMETERS",
    "bearing",
    "compass_direction",
    "haversine_distance",
]
