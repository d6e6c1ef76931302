"""Coordinate text parsing.

Components:
    CoordinateParser: Ordered cascade of format matchers
    RedirectResolver / HttpxRedirectResolver: short link header lookup
    TimezoneLocator / ZoneTabLocator: timezone reference locations

Typical Usage:
    >>> from geocoord.parser import CoordinateParser
    >>> CoordinateParser().parse("-31,425299, -64,201743")
    (-31.425299, -64.201743)
"""

from .matchers import (
    FormatMatcher,
    PointPairMatcher,
    RedirectLinkMatcher,
    SpotLinkMatcher,
    TimezoneMatcher,
)
from .parser import CoordinateParser, default_parser, parse_coordinate
from .resolvers import (
    HttpxRedirectResolver,
    RedirectResolver,
    TimezoneLocator,
    ZoneTabLocator,
    iso6709_to_decimal,
)

__all__ = [
    "CoordinateParser",
    "default_parser",
    "parse_coordinate",
    "FormatMatcher",
    "RedirectLinkMatcher",
    "SpotLinkMatcher",
    "PointPairMatcher",
    "TimezoneMatcher",
    "RedirectResolver",
    "HttpxRedirectResolver",
    "TimezoneLocator",
    "ZoneTabLocator",
    "iso6709_to_decimal",
]
