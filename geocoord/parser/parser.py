"""Free-form coordinate parser.

:class:`CoordinateParser` tries an explicit, ordered list of format matchers
and returns the first result. The default order is:

    1. short map redirect links (``https://maps.app.goo.gl/...``)
    2. map URLs with ``!3d<lat>!4d<lon>`` segments
    3. point pairs: decimal, decimal-comma, DMS, optionally ``POINT(...)``
    4. IANA timezone identifiers

The order is a tie-break: a map URL that happens to contain separators is
claimed by step 2 before step 3 sees it.

Example:
    >>> parser = CoordinateParser()
    >>> parser.parse("POINT(51.0504 13.7373)")
    (51.0504, 13.7373)
    >>> parser.parse("N51°3′1.44″,E13°44′14.28″")
    (51.0504, 13.7373)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from geocoord.errors import ParseError

from .matchers import (
    FormatMatcher,
    Point,
    PointPairMatcher,
    RedirectLinkMatcher,
    SpotLinkMatcher,
    TimezoneMatcher,
)
from .resolvers import HttpxRedirectResolver, RedirectResolver, TimezoneLocator, ZoneTabLocator

logger = logging.getLogger(__name__)


class CoordinateParser:
    """Ordered cascade of format matchers.

    Args:
        resolver: Short link resolver; defaults to :class:`HttpxRedirectResolver`.
        locator: Timezone locator; defaults to :class:`ZoneTabLocator`.
        matchers: Replace the whole cascade. When given, ``resolver`` and
            ``locator`` are ignored.
    """

    def __init__(
        self,
        resolver: RedirectResolver | None = None,
        locator: TimezoneLocator | None = None,
        matchers: Sequence[FormatMatcher] | None = None,
    ):
        if matchers is None:
            matchers = (
                RedirectLinkMatcher(resolver or HttpxRedirectResolver()),
                SpotLinkMatcher(),
                PointPairMatcher(),
                TimezoneMatcher(locator or ZoneTabLocator()),
            )
        self.matchers: tuple[FormatMatcher, ...] = tuple(matchers)

    def parse(self, text: str) -> Point:
        """Parse ``text`` into ``(latitude, longitude)`` decimal degrees.

        Raises:
            ParseError: If no matcher recognizes the input, or a token of a
                recognized point pair cannot be classified.
            RangeError: If a DMS direction does not fit its axis.
        """
        coordinate = text.strip()
        if not coordinate:
            raise ParseError(text, message="Unable to parse an empty coordinate.")

        for matcher in self.matchers:
            point = matcher.match(coordinate)
            if point is not None:
                logger.debug("Parsed %r as %s: %s", coordinate, matcher.name, point)
                return point

        raise ParseError(coordinate)


_default_parser: CoordinateParser | None = None


def default_parser() -> CoordinateParser:
    """Shared parser with the network and ``zone.tab`` collaborators."""
    global _default_parser

    if _default_parser is None:
        _default_parser = CoordinateParser()
    return _default_parser


def parse_coordinate(text: str, parser: CoordinateParser | None = None) -> Point:
    """Parse ``text`` with ``parser`` or the shared default parser."""
    return (parser or default_parser()).parse(text)
