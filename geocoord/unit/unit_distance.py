"""Distance units for great-circle results.

Distances are stored in meters. ``Coordinate.distance_to`` accepts either of
these classes as its ``unit`` argument.

Example:
    >>> Meter(9461663.6).to(Kilometer)
    9461.6636
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: Meter (SI base unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0


class Kilometer(Meter):
    """Distance unit: Kilometer (1000 meters)."""

    SCALE_TO_SI = 1000.0
