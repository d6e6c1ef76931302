"""Latitude/longitude pair with geodesic operations.

A :class:`Coordinate` owns two :class:`AngleValue` instances and is immutable.
There is one named constructor per input shape:

    - :meth:`Coordinate.from_floats` for two decimal numbers,
    - :meth:`Coordinate.from_string` for one combined description,
    - :meth:`Coordinate.from_values` for two separate strings or numbers.

Textual input goes through :class:`~geocoord.parser.CoordinateParser`; pass a
parser explicitly to control how short links and timezones are resolved.

Example:
    >>> dresden = Coordinate.from_string("51°3′1.44″N, 13°44′14.28″E")
    >>> cape_town = Coordinate.from_floats(-33.940525, 18.414006)
    >>> dresden.distance_to(cape_town, "kilometers")
    9461.664
    >>> dresden.compass_direction(Coordinate.from_floats(40.690069, -74.045508))
    <CompassDirection.WEST: 'W'>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geocoord.config import DECIMAL_PRECISION, KILOMETER_PRECISION, METER_PRECISION
from geocoord.errors import InputShapeError, RangeError
from geocoord.unit import Kilometer, Meter

from .angle_value import AngleValue, Axis, DmsFormat
from .geodesy import CompassDirection, bearing, compass_direction, haversine_distance

if TYPE_CHECKING:
    from geocoord.parser import CoordinateParser

logger = logging.getLogger(__name__)

Number = int | float

RETURN_METERS = "meters"
RETURN_KILOMETERS = "kilometers"

_DISTANCE_UNITS: dict[str | type[Meter], tuple[type[Meter], int]] = {
    RETURN_METERS: (Meter, METER_PRECISION),
    RETURN_KILOMETERS: (Kilometer, KILOMETER_PRECISION),
    Meter: (Meter, METER_PRECISION),
    Kilometer: (Kilometer, KILOMETER_PRECISION),
}


def _is_number(value: object) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _as_text(value: str | float) -> str:
    if isinstance(value, str):
        return value
    return f"{float(value):.{DECIMAL_PRECISION}f}"


def _resolve_parser(parser: CoordinateParser | None) -> CoordinateParser:
    if parser is not None:
        return parser
    from geocoord.parser import default_parser

    return default_parser()


@dataclass(frozen=True)
class Coordinate:
    """Geographic point in decimal degrees.

    Attributes:
        latitude_value (AngleValue): North/south component.
        longitude_value (AngleValue): East/west component.
    """

    latitude_value: AngleValue
    longitude_value: AngleValue

    def __post_init__(self):
        if not isinstance(self.latitude_value, AngleValue) or not isinstance(self.longitude_value, AngleValue):
            raise InputShapeError("Unsupported parameters given.")
        if self.latitude_value.axis is not Axis.LATITUDE:
            raise RangeError(f'Expected a latitude value, got "{self.latitude_value.axis}".')
        if self.longitude_value.axis is not Axis.LONGITUDE:
            raise RangeError(f'Expected a longitude value, got "{self.longitude_value.axis}".')

    # -------------------------------- Construction --------------------------------
    @classmethod
    def from_floats(cls, latitude: float, longitude: float) -> Coordinate:
        """Build a coordinate from two decimal degrees.

        Raises:
            InputShapeError: If either argument is not a number.
            RangeError: If a value cannot be expressed in DMS.
        """
        if latitude is None and longitude is None:
            raise InputShapeError("No coordinates are given.")
        if not _is_number(latitude) or not _is_number(longitude):
            raise InputShapeError("Unsupported parameters given.")

        return cls(
            AngleValue.from_decimal(latitude, Axis.LATITUDE),
            AngleValue.from_decimal(longitude, Axis.LONGITUDE),
        )

    @classmethod
    def from_string(cls, text: str, parser: CoordinateParser | None = None) -> Coordinate:
        """Parse one combined description such as ``"51.0504, 13.7373"``.

        Args:
            text: Any format understood by :class:`~geocoord.parser.CoordinateParser`.
            parser: Parser to use; defaults to the shared default parser.

        Raises:
            InputShapeError: If ``text`` is missing or not a string.
            ParseError: If ``text`` does not resolve to a coordinate pair.
        """
        if text is None:
            raise InputShapeError("No coordinates are given.")
        if not isinstance(text, str):
            raise InputShapeError("Unsupported parameters given.")

        latitude, longitude = _resolve_parser(parser).parse(text)
        return cls.from_floats(latitude, longitude)

    @classmethod
    def from_values(
        cls, latitude: str | float, longitude: str | float, parser: CoordinateParser | None = None
    ) -> Coordinate:
        """Parse two separate values, e.g. ``("51°3′1.44″N", "13°44′14.28″E")``.

        The values are joined with a single space and parsed as one
        description, so each may be a string or a number. Numbers are
        written in fixed-point notation with ``DECIMAL_PRECISION`` decimals.

        Raises:
            InputShapeError: If a value is missing or of an unsupported type.
            ParseError: If the joined text does not resolve to a pair.
        """
        if latitude is None or longitude is None:
            raise InputShapeError("No coordinates are given.")
        for value in (latitude, longitude):
            if not isinstance(value, str) and not _is_number(value):
                raise InputShapeError("Unsupported parameters given.")

        return cls.from_string(f"{_as_text(latitude)} {_as_text(longitude)}", parser=parser)

    # -------------------------------- Accessors --------------------------------
    @property
    def latitude(self) -> float:
        return self.latitude_value.decimal

    @property
    def longitude(self) -> float:
        return self.longitude_value.decimal

    def latitude_dms(self, fmt: DmsFormat | str = DmsFormat.SHORT_1) -> str:
        return self.latitude_value.to_dms(fmt)

    def longitude_dms(self, fmt: DmsFormat | str = DmsFormat.SHORT_1) -> str:
        return self.longitude_value.to_dms(fmt)

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)

    # -------------------------------- Geodesy --------------------------------
    def distance_to(self, other: Coordinate, unit: str | type[Meter] = RETURN_METERS) -> float:
        """Haversine distance to ``other``.

        Args:
            other: Target coordinate.
            unit: ``"meters"``/``Meter`` (1 decimal) or
                ``"kilometers"``/``Kilometer`` (3 decimals).

        Raises:
            RangeError: If ``unit`` is not supported.
        """
        try:
            unit_type, precision = _DISTANCE_UNITS[unit]
        except (KeyError, TypeError) as exc:
            raise RangeError(f'The given return value "{unit}" is not supported.') from exc

        meters = haversine_distance(self.latitude, self.longitude, other.latitude, other.longitude)
        return round(meters.to(unit_type), precision)

    def bearing_to(self, other: Coordinate) -> float:
        """Heading toward ``other`` in degrees, within (-180, 180]."""
        return bearing(self.latitude, self.longitude, other.latitude, other.longitude)

    def compass_direction(self, other: Coordinate) -> CompassDirection:
        """8-point compass sector of :meth:`bearing_to`."""
        degrees = self.bearing_to(other)
        direction = compass_direction(degrees)
        logger.debug("Bearing %s -> %s is %.2f° (%s)", self, other, degrees, direction)
        return direction

    def __str__(self) -> str:
        return f"{self.latitude}, {self.longitude}"
