"""External lookups used by the parser.

The parser only depends on the two protocols below. The default
implementations talk to the network (``httpx``) and read the ``zone.tab``
table bundled with ``pytz``; tests substitute fakes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import cached_property
from typing import Protocol

import httpx
import pytz

from geocoord.config import REDIRECT_TIMEOUT, REDIRECT_USER_AGENT, SECONDS_PER_DEGREE, SECONDS_PER_MINUTE
from geocoord.errors import RedirectResolutionError, TimezoneLookupError

from .patterns import ISO_6709

logger = logging.getLogger(__name__)


class RedirectResolver(Protocol):
    """Fetches the response headers of a short link without following it."""

    def fetch_headers(self, url: str) -> str:
        """Return the raw header block as ``name: value`` lines."""
        ...


class TimezoneLocator(Protocol):
    """Maps an IANA zone identifier to the location of its reference city."""

    def locate(self, zone: str) -> tuple[float, float]:
        """Return ``(latitude, longitude)`` in decimal degrees."""
        ...


class HttpxRedirectResolver:
    """Single ``GET`` with redirects disabled.

    No retries are attempted; a transport error is reported as
    :class:`~geocoord.errors.RedirectResolutionError`.

    Args:
        timeout: Request timeout in seconds.
        client: Optional preconfigured ``httpx.Client`` (e.g. with a mock
            transport). When omitted a short-lived client is used per call.
    """

    def __init__(self, timeout: float = REDIRECT_TIMEOUT, client: httpx.Client | None = None):
        self.timeout = timeout
        self._client = client

    def fetch_headers(self, url: str) -> str:
        logger.debug("Resolving redirect link %s", url)
        try:
            if self._client is not None:
                response = self._client.get(url, follow_redirects=False)
            else:
                with httpx.Client(timeout=self.timeout, headers={"User-Agent": REDIRECT_USER_AGENT}) as client:
                    response = client.get(url, follow_redirects=False)
        except httpx.HTTPError as exc:
            logger.warning("Unable to resolve redirect link %s: %s", url, exc)
            raise RedirectResolutionError(url, message=f'Unable to resolve link "{url}": {exc}') from exc

        return "\n".join(f"{name}: {value}" for name, value in response.headers.multi_items())


def iso6709_to_decimal(text: str) -> tuple[float, float]:
    """Convert a ``zone.tab`` coordinate such as ``+5230+01322``.

    Raises:
        ValueError: If ``text`` is not in ``±DDMM[SS]±DDDMM[SS]`` form.
    """
    match = ISO_6709.fullmatch(text)
    if match is None:
        raise ValueError(f'Invalid ISO 6709 coordinate "{text}".')

    def component(prefix: str) -> float:
        value = (
            int(match[f"{prefix}_deg"])
            + int(match[f"{prefix}_min"]) / SECONDS_PER_MINUTE
            + int(match[f"{prefix}_sec"] or 0) / SECONDS_PER_DEGREE
        )
        return -value if match[f"{prefix}_sign"] == "-" else value

    return component("lat"), component("lon")


class ZoneTabLocator:
    """Timezone locations from a ``zone.tab`` table.

    Args:
        lines: Table rows to use instead of the copy shipped with ``pytz``.
    """

    def __init__(self, lines: Iterable[str] | None = None):
        self._lines = lines

    def _read_lines(self) -> Iterable[str]:
        if self._lines is not None:
            return self._lines
        with pytz.open_resource("zone.tab") as handle:
            return handle.read().decode("utf-8").splitlines()

    @cached_property
    def table(self) -> dict[str, tuple[float, float]]:
        table = {}
        for line in self._read_lines():
            if not line.strip() or line.startswith("#"):
                continue
            fields = line.rstrip("\n").split("\t")
            if len(fields) < 3:
                continue
            table[fields[2]] = iso6709_to_decimal(fields[1])
        logger.debug("Loaded %d timezone locations", len(table))
        return table

    def locate(self, zone: str) -> tuple[float, float]:
        try:
            return self.table[zone]
        except KeyError as exc:
            logger.warning("Unknown timezone %s", zone)
            raise TimezoneLookupError(zone, message=f'Unable to parse timezone "{zone}".') from exc
