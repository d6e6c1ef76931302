"""Regular expressions for the supported coordinate formats.

Element counts in the comments are the length of ``match_elements()`` for a
successful match: the full match followed by every capture group.
"""

import re

# Separators between latitude and longitude: comma, colon, whitespace.
SEPARATOR = r"[,:\s]+"
SPLIT = re.compile(SEPARATOR)

# "POINT(51.0504 13.7373)" envelope around a point pair.
POINT_ENVELOPE = re.compile(r"POINT\((?P<body>.*)\)", re.IGNORECASE)

# https://maps.app.goo.gl/PHq5axBaDdgRWj4T6 (2 elements)
GOOGLE_REDIRECT_LINK = re.compile(r"(https://maps\.app\.goo\.gl/[a-zA-Z0-9_-]+)(?:\?\S*)?$")

# ...!3d51.3123709!4d12.4132924... (5 elements)
GOOGLE_SPOT_LINK = re.compile(r"!3d(-?[0-9]+)\.([0-9]+)[^!]*!4d(-?[0-9]+)\.([0-9]+)")

# "location: https://www.google.com/maps/...!3d54.0730483!4d18.9924026..." (5 elements)
GOOGLE_LOCATION_REDIRECT = re.compile(
    r"^location:[ \t]*\S*?!3d(-?[0-9]+)\.([0-9]+)[^!\s]*!4d(-?[0-9]+)\.([0-9]+)",
    re.IGNORECASE | re.MULTILINE,
)

# "51.0504, 13.7373" and "51,0504,13,7373" (5 elements)
DECIMAL_DEGREE_PAIR = re.compile(r"(-?[0-9]+)[.,]([0-9]+)" + SEPARATOR + r"(-?[0-9]+)[.,]([0-9]+)")

# "51.0504", "-74.045508" (3 elements)
DECIMAL_DEGREE = re.compile(r"(-?[0-9]+)[.]([0-9]+)")

# "51°3′1.44″N" (6 elements)
DMS_V1 = re.compile(r"([0-9]+)°([0-9]+)[′']([0-9]+)[.]([0-9]+)[″\"]([NSEW])")

# "N51°3′1.44″" (6 elements)
DMS_V2 = re.compile(r"([NSEW])([0-9]+)°([0-9]+)[′']([0-9]+)[.]([0-9]+)[″\"]")

# "Europe/Berlin", "America/Argentina/Cordoba" (2 elements)
TIMEZONE = re.compile(r"([A-Za-z][A-Za-z_]*(?:/[A-Za-z0-9][A-Za-z0-9_+\-]*)+)")

# zone.tab ISO 6709 column: "+5230+01322", "+353916+1394441"
ISO_6709 = re.compile(
    r"(?P<lat_sign>[+-])(?P<lat_deg>[0-9]{2})(?P<lat_min>[0-9]{2})(?P<lat_sec>[0-9]{2})?"
    r"(?P<lon_sign>[+-])(?P<lon_deg>[0-9]{3})(?P<lon_min>[0-9]{2})(?P<lon_sec>[0-9]{2})?"
)


def match_elements(match: re.Match) -> list[str]:
    """Full match followed by all capture groups."""
    return [match.group(0), *match.groups()]
