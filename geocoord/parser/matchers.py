"""Format matchers tried in order by :class:`~geocoord.parser.CoordinateParser`.

A matcher returns ``None`` when the input is not in its format, a
``(latitude, longitude)`` tuple when it is, and raises when the input is in
its format but cannot be converted.
"""

from __future__ import annotations

import logging
from typing import Protocol

from geocoord.config import DECIMAL_PRECISION
from geocoord.errors import ParseError, RedirectResolutionError
from geocoord.geo.angle_value import Axis

from . import patterns
from .converters import (
    MATCHES_LENGTH_LINK,
    check_length,
    float_from_dms,
    float_from_parts,
    point_from_parts,
)
from .resolvers import RedirectResolver, TimezoneLocator

logger = logging.getLogger(__name__)

Point = tuple[float, float]

POINTS_PER_PAIR = 2


class FormatMatcher(Protocol):
    name: str

    def match(self, text: str) -> Point | None: ...


class RedirectLinkMatcher:
    """Short map links, resolved through the ``Location`` response header."""

    name = "google-redirect-link"

    def __init__(self, resolver: RedirectResolver):
        self.resolver = resolver

    def match(self, text: str) -> Point | None:
        found = patterns.GOOGLE_REDIRECT_LINK.search(text)
        if found is None:
            return None

        elements = patterns.match_elements(found)
        check_length(elements, MATCHES_LENGTH_LINK)
        link = elements[1]

        headers = self.resolver.fetch_headers(link)
        location = patterns.GOOGLE_LOCATION_REDIRECT.search(headers)
        if location is None:
            raise RedirectResolutionError(text, message=f'Unable to parse header from google link "{link}".')

        return point_from_parts(patterns.match_elements(location))


class SpotLinkMatcher:
    """Map URLs copied from the browser, carrying ``!3d<lat>!4d<lon>``."""

    name = "google-spot-link"

    def match(self, text: str) -> Point | None:
        found = patterns.GOOGLE_SPOT_LINK.search(text)
        if found is None:
            return None
        return point_from_parts(patterns.match_elements(found))


class PointPairMatcher:
    """Two values separated by commas, colons or whitespace.

    An optional ``POINT(...)`` envelope is removed first. Decimal pairs using
    either ``.`` or ``,`` as decimal mark are matched as a whole; otherwise
    the text must split into exactly two tokens, each a DMS value (either
    layout) or a decimal degree. The first token is the latitude.
    """

    name = "point-pair"

    def match(self, text: str) -> Point | None:
        body = text
        envelope = patterns.POINT_ENVELOPE.fullmatch(body)
        if envelope is not None:
            body = envelope["body"].strip()

        pair = patterns.DECIMAL_DEGREE_PAIR.fullmatch(body)
        if pair is not None:
            return point_from_parts(patterns.match_elements(pair))

        tokens = patterns.SPLIT.split(body)
        if len(tokens) != POINTS_PER_PAIR or not all(tokens):
            return None

        latitude = self._convert(text, tokens[0], Axis.LATITUDE)
        longitude = self._convert(text, tokens[1], Axis.LONGITUDE)
        return (round(latitude, DECIMAL_PRECISION), round(longitude, DECIMAL_PRECISION))

    @staticmethod
    def _convert(text: str, token: str, axis: Axis) -> float:
        if (found := patterns.DMS_V1.fullmatch(token)) is not None:
            return float_from_dms(patterns.match_elements(found), axis)
        if (found := patterns.DMS_V2.fullmatch(token)) is not None:
            return float_from_dms(patterns.match_elements(found), axis, leading_direction=True)
        if (found := patterns.DECIMAL_DEGREE.fullmatch(token)) is not None:
            return float_from_parts(patterns.match_elements(found))
        raise ParseError(text, token)


class TimezoneMatcher:
    """IANA zone identifiers such as ``Europe/Berlin``."""

    name = "timezone"

    def __init__(self, locator: TimezoneLocator):
        self.locator = locator

    def match(self, text: str) -> Point | None:
        found = patterns.TIMEZONE.fullmatch(text)
        if found is None:
            return None

        latitude, longitude = self.locator.locate(found[1])
        return (round(latitude, DECIMAL_PRECISION), round(longitude, DECIMAL_PRECISION))
