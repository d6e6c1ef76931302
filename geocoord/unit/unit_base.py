"""Unit family bookkeeping for typed geographic quantities.

Every unit class belongs to a family (angle, length) whose root is the first
class in the MRO flagged with ``IS_FAMILY_ROOT``. A ``Kilometer`` can be
combined with a ``Meter`` but never with a ``Degree``.
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the unit family.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the base unit of a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.ROOT = next(
            (base for base in cls.mro() if base.__dict__.get("IS_FAMILY_ROOT", False)),
            cls,
        )

    @classmethod
    def _check_same_root(cls, unit_type: type[Unit]):
        """Raise ``TypeError`` if ``unit_type`` measures a different quantity."""
        if cls.ROOT is not unit_type.ROOT:
            msg = f"Incompatible units: {cls.ROOT.__name__} and {unit_type.ROOT.__name__}"
            raise TypeError(msg)
