"""Turn regex match elements into decimal degrees.

Each converter checks the number of elements it receives and raises
:class:`~geocoord.errors.MatchLengthError` on a mismatch instead of reading
past or ignoring groups.
"""

from __future__ import annotations

import math

from geocoord.config import DECIMAL_PRECISION, SECONDS_PER_DEGREE, SECONDS_PER_MINUTE
from geocoord.errors import MatchLengthError, ParseError, RangeError
from geocoord.geo.angle_value import Axis

MATCHES_LENGTH_COORDINATE = 5
MATCHES_LENGTH_DMS = 6
MATCHES_LENGTH_DECIMAL = 3
MATCHES_LENGTH_LINK = 2


def check_length(elements: list[str], expected: int) -> None:
    if len(elements) != expected:
        raise MatchLengthError(expected, len(elements))


def _finite(text: str, match: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ParseError(match, text)
    return value


def float_from_parts(elements: list[str]) -> float:
    """Rebuild a float from ``[match, integer_part, fraction_digits]``.

    The fraction takes the sign of the integer part, including an explicit
    ``-0``, so ``-0.5`` yields ``-0.5``.

    Raises:
        ParseError: If the digits do not fit a finite float.
    """
    check_length(elements, MATCHES_LENGTH_DECIMAL)
    match, integer_part, fraction_digits = elements

    return _finite(f"{integer_part}.{fraction_digits}", match)


def point_from_parts(elements: list[str]) -> tuple[float, float]:
    """Rebuild ``(latitude, longitude)`` from a 5-element pair match."""
    check_length(elements, MATCHES_LENGTH_COORDINATE)
    match, lat_int, lat_frac, lon_int, lon_frac = elements

    return (
        round(float_from_parts([match, lat_int, lat_frac]), DECIMAL_PRECISION),
        round(float_from_parts([match, lon_int, lon_frac]), DECIMAL_PRECISION),
    )


def float_from_dms(elements: list[str], axis: Axis, leading_direction: bool = False) -> float:
    """Convert a DMS match into a signed decimal degree.

    Args:
        elements: ``[match, deg, min, sec_int, sec_frac, dir]``, or with the
            direction right after the match when ``leading_direction`` is set.
        axis: Axis the value belongs to; the direction letter must match it.
        leading_direction: True for the ``N51°3′1.44″`` layout.

    Raises:
        MatchLengthError: If ``elements`` does not have six entries.
        ParseError: If a component does not fit a finite float.
        RangeError: If the direction letter is not valid for ``axis``.
    """
    check_length(elements, MATCHES_LENGTH_DMS)

    if leading_direction:
        match, direction, degrees, minutes, sec_int, sec_frac = elements
    else:
        match, degrees, minutes, sec_int, sec_frac, direction = elements

    if direction not in axis.directions:
        raise RangeError(
            f'The given direction "{direction}" is not supported or does not match with the given type "{axis}".'
        )

    seconds = float_from_parts([match, sec_int, sec_frac])
    value = _finite(degrees, match) + _finite(minutes, match) / SECONDS_PER_MINUTE + seconds / SECONDS_PER_DEGREE

    # second letter of directions is the negative hemisphere
    if direction == axis.directions[1]:
        value = -value

    return value
