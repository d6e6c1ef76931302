"""Single latitude or longitude value with its DMS decomposition.

An :class:`AngleValue` is built once from a signed decimal degree and derives
its degrees/minutes/seconds/direction eagerly. The hemisphere letter always
agrees with the sign and the axis: negative latitudes are ``S``, negative
longitudes are ``W``.

Example:
    >>> value = AngleValue.from_decimal(-33.940525, Axis.LATITUDE)
    >>> value.degree, value.minutes, value.seconds, value.direction
    (33, 56, 25.89, 'S')
    >>> value.to_dms()
    '33°56′25.89″S'
    >>> value.to_dms(DmsFormat.SHORT_2)
    'S33°56′25.89″'
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum

from geocoord.config import (
    DEGREE_MAX,
    DEGREE_MIN,
    MINUTES_MAX,
    MINUTES_MIN,
    SECONDS_PER_DEGREE,
    SECONDS_PER_MINUTE,
    SECONDS_PRECISION,
)
from geocoord.errors import RangeError

DEGREE_SIGN = "°"
MINUTE_SIGN = "′"
SECOND_SIGN = "″"


class Axis(StrEnum):
    """Which of the two coordinate axes a value belongs to."""

    LATITUDE = "latitude"
    LONGITUDE = "longitude"

    @property
    def directions(self) -> tuple[str, str]:
        """Hemisphere letters as ``(positive, negative)``."""
        if self is Axis.LATITUDE:
            return ("N", "S")
        return ("E", "W")

    def direction_for(self, value: float) -> str:
        positive, negative = self.directions
        return negative if value < 0 else positive


class DmsFormat(StrEnum):
    """Output layouts for :meth:`AngleValue.to_dms`.

    SHORT_1 renders ``D°M′S″DIR`` (``51°3′1.44″N``), SHORT_2 renders
    ``DIRD°M′S″`` (``N51°3′1.44″``).
    """

    SHORT_1 = "short1"
    SHORT_2 = "short2"


def format_seconds(seconds: float) -> str:
    """Render seconds with up to six decimals and at least one.

    ``1.44`` stays ``"1.44"`` and ``1.0`` becomes ``"1.0"`` so the output can
    always be read back by the DMS patterns, which require a fraction.
    """
    text = f"{seconds:.{SECONDS_PRECISION}f}".rstrip("0")
    if text.endswith("."):
        text += "0"
    return text


def _decimal_to_dms(value: float) -> tuple[int, int, float]:
    magnitude = abs(value)
    degree = math.floor(magnitude)
    seconds_overall = (magnitude - degree) * SECONDS_PER_DEGREE
    minutes = math.floor(seconds_overall / SECONDS_PER_MINUTE)
    seconds = round(seconds_overall - minutes * SECONDS_PER_MINUTE, SECONDS_PRECISION)

    # rounding may push seconds up to a full minute
    if seconds >= SECONDS_PER_MINUTE:
        seconds = 0.0
        minutes += 1
    if minutes >= SECONDS_PER_MINUTE:
        minutes = 0
        degree += 1

    return int(degree), int(minutes), seconds


@dataclass(frozen=True)
class AngleValue:
    """Immutable decimal degree plus its derived DMS fields.

    Attributes:
        decimal (float): Signed decimal degree.
        axis (Axis): Latitude or longitude.
        degree (int): Whole degrees of the absolute value, 0..180.
        minutes (int): Whole minutes, 0..59.
        seconds (float): Remaining seconds rounded to six decimals, [0, 60).
        direction (str): Hemisphere letter consistent with sign and axis.

    Raises:
        RangeError: If the value is not finite or its degree/minutes fall
            outside the valid DMS bounds.
    """

    decimal: float
    axis: Axis
    degree: int = field(init=False)
    minutes: int = field(init=False)
    seconds: float = field(init=False)
    direction: str = field(init=False)

    def __post_init__(self):
        try:
            object.__setattr__(self, "axis", Axis(self.axis))
        except ValueError as exc:
            raise RangeError(f'Unsupported type "{self.axis}" given.') from exc

        if not math.isfinite(self.decimal):
            raise RangeError(f'Unsupported {self.axis} value "{self.decimal}" given.')

        degree, minutes, seconds = _decimal_to_dms(self.decimal)

        if not DEGREE_MIN <= degree <= DEGREE_MAX:
            raise RangeError(f'Unsupported degree "{degree}" given.')
        if not MINUTES_MIN <= minutes <= MINUTES_MAX:
            raise RangeError(f'Unsupported minutes "{minutes}" given.')

        object.__setattr__(self, "decimal", float(self.decimal))
        object.__setattr__(self, "degree", degree)
        object.__setattr__(self, "minutes", minutes)
        object.__setattr__(self, "seconds", seconds)
        object.__setattr__(self, "direction", self.axis.direction_for(self.decimal))

    @classmethod
    def from_decimal(cls, value: float, axis: Axis | str) -> AngleValue:
        """Create a value for ``axis`` from a signed decimal degree."""
        return cls(float(value), axis)

    def to_dms(self, fmt: DmsFormat | str = DmsFormat.SHORT_1) -> str:
        """Render the value in one of the supported DMS layouts.

        Args:
            fmt: A :class:`DmsFormat` member or its string key.

        Raises:
            RangeError: If ``fmt`` is not a known layout.
        """
        try:
            fmt = DmsFormat(fmt)
        except ValueError as exc:
            raise RangeError(f'Unknown format "{fmt}" given.') from exc

        body = f"{self.degree}{DEGREE_SIGN}{self.minutes}{MINUTE_SIGN}{format_seconds(self.seconds)}{SECOND_SIGN}"
        if fmt is DmsFormat.SHORT_1:
            return f"{body}{self.direction}"
        return f"{self.direction}{body}"

    def __str__(self) -> str:
        return self.to_dms()
