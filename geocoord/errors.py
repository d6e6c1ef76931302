"""Exception hierarchy for coordinate parsing and geodesic operations.

Every failure raised by :mod:`geocoord` derives from :class:`CoordinateError`,
so callers can catch the whole family at once while still telling the
categories apart:

    - :class:`InputShapeError`: a constructor received the wrong arguments.
    - :class:`ParseError`: text did not resolve to a coordinate pair.
      :class:`RedirectResolutionError` and :class:`TimezoneLookupError` are the
      collaborator flavours of it.
    - :class:`RangeError`: a value fell outside its valid domain.
      :class:`MatchLengthError` marks a broken regex arity contract.
"""

from __future__ import annotations


class CoordinateError(Exception):
    """Base class for all geocoord errors."""


class InputShapeError(CoordinateError, TypeError):
    """Wrong argument count or type combination for a coordinate."""


class ParseError(CoordinateError, ValueError):
    """The given text does not match any supported coordinate format.

    Attributes:
        value (str): The original input.
        token (str | None): The sub-token that could not be classified.
    """

    def __init__(self, value: str, token: str | None = None, message: str | None = None):
        self.value = value
        self.token = token
        if message is None:
            if token is None:
                message = f'Unable to parse coordinate "{value}".'
            else:
                message = f'Unable to parse coordinate "{value}" ({token}).'
        super().__init__(message)


class RedirectResolutionError(ParseError):
    """A short map link could not be resolved to coordinates."""


class TimezoneLookupError(ParseError):
    """A timezone identifier has no known location."""


class RangeError(CoordinateError, ValueError):
    """A value is outside its allowed range or set."""


class MatchLengthError(RangeError):
    """A regex match produced an unexpected number of elements."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"The given length of matches must be {expected} (got {actual}).")
