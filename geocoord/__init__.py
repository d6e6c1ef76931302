"""Parse free-form geographic coordinates and compare them.

geocoord reads a latitude/longitude pair from the notations people actually
paste around and normalizes it into decimal degrees:

    • decimal pairs: ``51.0504, 13.7373``, ``51,0504,13,7373``, ``51.0504:13.7373``
    • DMS in both layouts: ``51°3′1.44″N, 13°44′14.28″E`` and ``N51°3′1.44″,E13°44′14.28″``
    • ``POINT(...)`` envelopes around any of the above
    • map URLs carrying ``!3d<lat>!4d<lon>`` and short ``maps.app.goo.gl`` links
    • IANA timezone identifiers such as ``Europe/Berlin``

On top of that it offers spherical geodesy between two points: haversine
distance, bearing and an 8-point compass direction.

Package Layout:
    geocoord.unit: Typed float units (Degree, Radian, Meter, Kilometer)
    geocoord.geo: AngleValue, Coordinate and the geodesic functions
    geocoord.parser: CoordinateParser and its external collaborators
    geocoord.errors: Exception hierarchy
    geocoord.cli: ``geocoord`` console command

Usage:
    >>> from geocoord import Coordinate
    >>> dresden = Coordinate.from_string("51°3′1.44″N, 13°44′14.28″E")
    >>> new_york = Coordinate.from_values("40.690069", -74.045508)
    >>> dresden.distance_to(new_york, "kilometers")
    6482.638
    >>> dresden.compass_direction(new_york).value
    'W'
    >>> new_york.latitude_dms()
    '40°41′24.2484″N'
"""

from geocoord.errors import (
    CoordinateError,
    InputShapeError,
    MatchLengthError,
    ParseError,
    RangeError,
    RedirectResolutionError,
    TimezoneLookupError,
)
from geocoord.geo import AngleValue, Axis, CompassDirection, Coordinate, DmsFormat
from geocoord.parser import CoordinateParser, parse_coordinate

__version__ = "0.1.0"

__all__ = [
    "AngleValue",
    "Axis",
    "CompassDirection",
    "Coordinate",
    "CoordinateParser",
    "DmsFormat",
    "parse_coordinate",
    "CoordinateError",
    "InputShapeError",
    "MatchLengthError",
    "ParseError",
    "RangeError",
    "RedirectResolutionError",
    "TimezoneLookupError",
]
