"""Degree-space trigonometry over Angle values.

The solver only talks to the ``TrigFunctions`` protocol, so a deterministic
stand-in can replace ``DegreeTrig`` in tests.
"""

import math
from typing import Protocol

from .angle import Angle


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


class TrigFunctions(Protocol):
    def sin(self, angle: Angle) -> float: ...

    def cos(self, angle: Angle) -> float: ...

    def tan(self, angle: Angle) -> float: ...

    def acos(self, x: float) -> Angle: ...

    def acot(self, x: float) -> Angle: ...


class DegreeTrig:
    """``math``-backed implementation working in degrees."""

    def sin(self, angle: Angle) -> float:
        return math.sin(deg_to_rad(angle.to_float()))

    def cos(self, angle: Angle) -> float:
        return math.cos(deg_to_rad(angle.to_float()))

    def tan(self, angle: Angle) -> float:
        return math.tan(deg_to_rad(angle.to_float()))

    def acos(self, x: float) -> Angle:
        if not -1.0 <= x <= 1.0:
            raise ValueError(f"acos argument out of domain: {x}")
        return Angle.from_degrees(rad_to_deg(math.acos(x)))

    def acot(self, x: float) -> Angle:
        return Angle.from_degrees(rad_to_deg(math.atan2(1.0, x)))


DEGREE_TRIG = DegreeTrig()
