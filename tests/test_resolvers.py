"""
Tests for the redirect resolver and timezone locator.
"""

import unittest

import httpx

from geocoord.errors import ParseError, RedirectResolutionError, TimezoneLookupError
from geocoord.parser import CoordinateParser, HttpxRedirectResolver, ZoneTabLocator, iso6709_to_decimal

LOCATION = "https://www.google.com/maps/place/Malbork/data=!4m2!3m1!8m2!3d54.0730483!4d18.9924021"

ZONE_TAB = [
    "# tzdb timezone descriptions\n",
    "#\n",
    "DE\t+5230+01322\tEurope/Berlin\tmost of Germany\n",
    "JP\t+353916+1394441\tAsia/Tokyo\n",
    "US\t+404251-0740023\tAmerica/New_York\tEastern (most areas)\n",
    "\n",
]


class TestHttpxRedirectResolver(unittest.TestCase):
    """Test header retrieval over a mocked transport."""

    def test_returns_location_header(self):
        """Test that the redirect target is included in the header block."""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(302, headers={"Location": LOCATION})

        client = httpx.Client(transport=httpx.MockTransport(handler))
        resolver = HttpxRedirectResolver(client=client)

        headers = resolver.fetch_headers("https://maps.app.goo.gl/abc123")

        fields = dict(line.split(": ", 1) for line in headers.splitlines())
        self.assertEqual({name.lower(): value for name, value in fields.items()}["location"], LOCATION)
        self.assertEqual(len(requests), 1)
        self.assertEqual(str(requests[0].url), "https://maps.app.goo.gl/abc123")

    def test_redirect_not_followed(self):
        """Test that only one request is made."""
        calls = []

        def handler(request):
            calls.append(request.url)
            return httpx.Response(302, headers={"Location": LOCATION})

        client = httpx.Client(transport=httpx.MockTransport(handler))
        HttpxRedirectResolver(client=client).fetch_headers("https://maps.app.goo.gl/abc123")
        self.assertEqual(len(calls), 1)

    def test_transport_error(self):
        """Test that network failures become resolution errors."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        resolver = HttpxRedirectResolver(client=client)

        with self.assertRaises(RedirectResolutionError) as context:
            resolver.fetch_headers("https://maps.app.goo.gl/abc123")
        self.assertIsInstance(context.exception.__cause__, httpx.ConnectError)

    def test_parser_with_mocked_network(self):
        """Test a short link end to end through the parser."""
        client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(302, headers={"Location": LOCATION}))
        )
        parser = CoordinateParser(resolver=HttpxRedirectResolver(client=client))
        self.assertEqual(parser.parse("https://maps.app.goo.gl/abc123"), (54.073048, 18.992402))


class TestIso6709(unittest.TestCase):
    """Test zone.tab coordinate conversion."""

    def test_minutes_precision(self):
        """Test degrees and minutes."""
        latitude, longitude = iso6709_to_decimal("+5230+01322")
        self.assertEqual(latitude, 52.5)
        self.assertAlmostEqual(longitude, 13.366666666666667)

    def test_seconds_precision(self):
        """Test degrees, minutes and seconds."""
        latitude, longitude = iso6709_to_decimal("+404251-0740023")
        self.assertAlmostEqual(latitude, 40.714166666666667)
        self.assertAlmostEqual(longitude, -74.006388888888889)

    def test_invalid(self):
        """Test malformed input."""
        with self.assertRaises(ValueError):
            iso6709_to_decimal("52.5,13.4")


class TestZoneTabLocator(unittest.TestCase):
    """Test timezone lookup."""

    def test_locate_from_lines(self):
        """Test lookup from supplied table rows."""
        locator = ZoneTabLocator(lines=ZONE_TAB)
        latitude, longitude = locator.locate("Asia/Tokyo")
        self.assertAlmostEqual(latitude, 35.654444, places=6)
        self.assertAlmostEqual(longitude, 139.744722, places=6)
        self.assertEqual(len(locator.table), 3)

    def test_unknown_zone(self):
        """Test that unknown zones raise a parse error."""
        locator = ZoneTabLocator(lines=ZONE_TAB)
        with self.assertRaises(TimezoneLookupError) as context:
            locator.locate("Europe/Atlantis")
        self.assertIsInstance(context.exception, ParseError)
        self.assertEqual(context.exception.value, "Europe/Atlantis")

    def test_bundled_table(self):
        """Test the zone.tab shipped with pytz."""
        parser = CoordinateParser(locator=ZoneTabLocator())
        self.assertEqual(parser.parse("Europe/Berlin"), (52.5, 13.366667))
        self.assertEqual(parser.parse("America/Argentina/Cordoba"), (-31.4, -64.183333))


if __name__ == '__main__':
    unittest.main()
