"""Angular units used for bearings and the haversine computation.

Angles are stored in radians. :class:`Degree` accepts degrees while keeping
the radian value for trigonometry, so ``math.sin(Degree(30))`` is ``0.5``.
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0


class Degree(Radian):
    """Angular unit: Degree (1/360 of a full rotation)."""

    SCALE_TO_SI = pi / 180
