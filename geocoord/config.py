"""Global constants for coordinate parsing and geodesic calculations."""

# Geodesy
EARTH_RADIUS_METER = 6_371_000  # mean radius, spherical model

# Rounding
DECIMAL_PRECISION = 6
SECONDS_PRECISION = 6
BEARING_PRECISION = 2
METER_PRECISION = 1
KILOMETER_PRECISION = 3

# DMS limits
DEGREE_MIN = 0
DEGREE_MAX = 180
MINUTES_MIN = 0
MINUTES_MAX = 59
SECONDS_PER_MINUTE = 60
SECONDS_PER_DEGREE = 3600

# Redirect resolution
REDIRECT_TIMEOUT = 10.0  # seconds
REDIRECT_USER_AGENT = "geocoord/0.1"
