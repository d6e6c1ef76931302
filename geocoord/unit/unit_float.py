"""Float-based units with automatic SI conversion.

A :class:`UnitFloat` is a ``float`` holding its value in SI units (radians,
meters) while remembering which unit it was created in. Subtraction and
ordering are only allowed inside one unit family.

Example:
    >>> heading = Degree(90) - Radian(0.5)
    >>> round(heading.to(Degree), 2)
    61.35
    >>> (Meter(6_371_000) * 2).to(Kilometer)
    12742.0
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Base class for typed floats stored in SI units.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor converting the native value to SI.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates a root unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance directly from a value already in SI units."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to another unit of the same family.

        Args:
            unit_type: Target unit type.

        Returns:
            float: Value expressed in the target unit's scale.

        Raises:
            TypeError: If ``unit_type`` belongs to a different family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __mul__(self, k: Number) -> UnitFloat:
        if isinstance(k, Number):
            return type(self).from_si(float(self) * float(k))
        raise TypeError(f"Cannot scale {type(self).__name__} by {type(k).__name__}")

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

