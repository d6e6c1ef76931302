"""Typed float units for angles and distances.

Modules:
    - unit_base: ``Unit`` with the family bookkeeping
    - unit_float: ``UnitFloat`` with SI storage
    - unit_angle: ``Radian`` and ``Degree``
    - unit_distance: ``Meter`` and ``Kilometer``

Example:
    >>> from geocoord.unit import Degree, Kilometer, Meter, Radian
    >>> Kilometer(2.5).to(Meter)
    2500.0
    >>> round(Degree(180).to(Radian), 5)
    3.14159
"""

from .unit_angle import Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Meter
from .unit_float import UnitFloat

__all__ = [
    "Unit",
    "UnitFloat",
    "Radian",
    "Degree",
    "Meter",
    "Kilometer",
]
