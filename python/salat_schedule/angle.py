"""Signed angles in decimal-degree or degree/minute/second form.

An Angle is immutable. The sign lives in ``neg``; the magnitude fields are
never negative. In degree/minute/second form minute and second always lie in
[0, 60).

The same type doubles as an hour count when used as a time offset:
``1°30'0"`` is one hour and thirty minutes.
"""

import math
import re
from dataclasses import dataclass, replace
from datetime import timedelta
from enum import StrEnum
from functools import total_ordering

from .exceptions import DivisionByZeroError, MalformedAngleTextError

ANGLE_TOLERANCE = 1e-9
SECOND_PRECISION = 9
SEXAGESIMAL = 60.0
SECONDS_PER_DEGREE = 3600.0

DEGREE_SYMBOL = "°"
MINUTE_SYMBOL = "'"
SECOND_SYMBOL = '"'
NEGATIVE_SYMBOL = "-"

_NUMBER = r"\d+(?:\.\d+)?"
_ANGLE_TEXT = re.compile(
    rf"(?P<neg>{NEGATIVE_SYMBOL})?(?P<degree>{_NUMBER}){DEGREE_SYMBOL}"
    rf"(?:(?P<minute>{_NUMBER}){MINUTE_SYMBOL}(?:(?P<second>{_NUMBER}){SECOND_SYMBOL})?)?"
)


class AngleType(StrEnum):
    DECIMAL = "decimal"
    DEGREE_MINUTE_SECOND = "degree_minute_second"


@total_ordering
@dataclass(frozen=True, eq=False)
class Angle:
    degree: float = 0.0
    minute: float = 0.0
    second: float = 0.0
    neg: bool = False
    angle_type: AngleType = AngleType.DECIMAL

    # Equality is tolerant, so there is no hash consistent with it.
    __hash__ = None

    def __post_init__(self):
        if not (self.degree >= 0 and self.minute >= 0 and self.second >= 0):
            raise ValueError(
                f"angle fields must be non-negative, got "
                f"({self.degree}, {self.minute}, {self.second}); use neg for the sign"
            )
        if self.angle_type == AngleType.DECIMAL:
            if self.minute or self.second:
                raise ValueError("a decimal angle carries no minute or second")
        elif self.minute >= SEXAGESIMAL or self.second >= SEXAGESIMAL:
            raise ValueError(
                f"minute and second must lie in [0, 60), got {self.minute}, {self.second}"
            )

    @classmethod
    def from_degrees(cls, value: float) -> "Angle":
        """Build a decimal angle from a signed number of degrees."""
        return cls(degree=float(abs(value)), neg=value < 0)

    @classmethod
    def from_dms(
        cls, degree: float, minute: float = 0.0, second: float = 0.0, neg: bool = False
    ) -> "Angle":
        """Build a degree/minute/second angle, carrying any overflow upwards."""
        if not (degree >= 0 and minute >= 0 and second >= 0):
            raise ValueError("degree, minute and second must be non-negative")
        return _normalized_dms(degree, minute, second, neg)

    @classmethod
    def from_timedelta(
        cls, delta: timedelta, angle_type: AngleType = AngleType.DEGREE_MINUTE_SECOND
    ) -> "Angle":
        """Express a duration as an hour count."""
        return cls.from_degrees(delta.total_seconds() / SECONDS_PER_DEGREE).to_type(
            angle_type
        )

    @classmethod
    def zero(cls, angle_type: AngleType = AngleType.DECIMAL) -> "Angle":
        return cls(angle_type=angle_type)

    def magnitude(self) -> float:
        """Absolute value in decimal degrees."""
        return (
            self.degree
            + self.minute / SEXAGESIMAL
            + self.second / SECONDS_PER_DEGREE
        )

    def to_float(self) -> float:
        """Signed value in decimal degrees."""
        return -self.magnitude() if self.neg else self.magnitude()

    def to_decimal(self) -> "Angle":
        if self.angle_type == AngleType.DECIMAL:
            return self
        return Angle(degree=self.magnitude(), neg=self.neg)

    def to_dms(self) -> "Angle":
        return _normalized_dms(self.degree, self.minute, self.second, self.neg)

    def to_type(self, angle_type: AngleType) -> "Angle":
        if angle_type == AngleType.DECIMAL:
            return self.to_decimal()
        return self.to_dms()

    def to_timedelta(self) -> timedelta:
        """Read the angle as a signed number of hours."""
        return timedelta(hours=self.to_float())

    def abs(self) -> "Angle":
        return replace(self, neg=False)

    def negate(self) -> "Angle":
        return replace(self, neg=not self.neg)

    def is_zero(self) -> bool:
        return self.magnitude() < ANGLE_TOLERANCE

    def is_negative(self) -> bool:
        return self.neg and not self.is_zero()

    def compare_magnitude(self, other: "Angle") -> int:
        """Compare absolute values only. Returns -1, 0 or 1."""
        diff = self.magnitude() - other.magnitude()
        if abs(diff) < ANGLE_TOLERANCE:
            return 0
        return 1 if diff > 0 else -1

    def compare(self, other: "Angle") -> int:
        """Signed comparison; zero and negative zero compare equal."""
        if self.is_zero() and other.is_zero():
            return 0
        if self.is_negative() != other.is_negative():
            return -1 if self.is_negative() else 1
        order = self.compare_magnitude(other)
        return -order if self.is_negative() else order

    def __eq__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self.compare(other) < 0

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return add_angles(self, other)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return sub_angles(self, other)

    def __truediv__(self, divisor):
        if isinstance(divisor, Angle) or not isinstance(divisor, (int, float)):
            return NotImplemented
        return div_angle(self, divisor)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    def __str__(self):
        return format_angle(self)


def _normalized_dms(degree: float, minute: float, second: float, neg: bool) -> Angle:
    """Push fractions downwards, round the second, then carry overflow upwards."""
    whole_degree = math.floor(degree)
    minute += (degree - whole_degree) * SEXAGESIMAL
    whole_minute = math.floor(minute)
    second += (minute - whole_minute) * SEXAGESIMAL
    second = round(second, SECOND_PRECISION)

    carry, second = divmod(second, SEXAGESIMAL)
    carry, whole_minute = divmod(whole_minute + carry, SEXAGESIMAL)
    return Angle(
        degree=float(whole_degree + carry),
        minute=float(whole_minute),
        second=abs(second),
        neg=neg,
        angle_type=AngleType.DEGREE_MINUTE_SECOND,
    )


# -----------------------------
# Arithmetic
# -----------------------------


def _common_type(a: Angle, b: Angle) -> AngleType:
    if AngleType.DEGREE_MINUTE_SECOND in (a.angle_type, b.angle_type):
        return AngleType.DEGREE_MINUTE_SECOND
    return AngleType.DECIMAL


def add_angles(a: Angle, b: Angle) -> Angle:
    """Sign-aware addition.

    Two non-negative operands are added in degree/minute/second form when
    either of them uses it, otherwise in decimal form. A single negative
    operand turns the sum into a subtraction of absolute values carried out
    in the positive operand's representation.
    """
    if a.neg and b.neg:
        return add_angles(a.abs(), b.abs()).negate()
    if a.neg:
        return sub_angles(b, a.abs().to_type(b.angle_type))
    if b.neg:
        return sub_angles(a, b.abs().to_type(a.angle_type))

    if _common_type(a, b) == AngleType.DECIMAL:
        return Angle(degree=a.degree + b.degree)

    a, b = a.to_dms(), b.to_dms()
    return _normalized_dms(
        a.degree + b.degree, a.minute + b.minute, a.second + b.second, False
    )


def sub_angles(a: Angle, b: Angle) -> Angle:
    """Sign-aware subtraction.

    Mixed signs reduce to additions of absolute values. For two non-negative
    operands the larger magnitude is always the minuend; when ``b`` is larger
    the operands are swapped once and the result negated.
    """
    if a.neg and b.neg:
        return sub_angles(b.abs(), a.abs())
    if a.neg:
        return add_angles(a.abs(), b).negate()
    if b.neg:
        return add_angles(a, b.abs())

    angle_type = _common_type(a, b)
    a, b = a.to_type(angle_type), b.to_type(angle_type)
    order = a.compare_magnitude(b)
    if order == 0:
        return Angle.zero(angle_type)
    if order < 0:
        return _sub_smaller(b, a).negate()
    return _sub_smaller(a, b)


def _sub_smaller(a: Angle, b: Angle) -> Angle:
    """Subtract ``b`` from the strictly larger, same-typed, non-negative ``a``."""
    if a.angle_type == AngleType.DECIMAL:
        return Angle(degree=a.degree - b.degree)

    degree, minute, second = _borrow(a, b)
    return _normalized_dms(
        degree - b.degree, minute - b.minute, second - b.second, False
    )


def _borrow(a: Angle, b: Angle) -> tuple[float, float, float]:
    """Align the minuend's fields against the subtrahend's, as in manual
    sexagesimal subtraction."""
    degree, minute, second = a.degree, a.minute, a.second
    if second < b.second:
        if minute < 1:
            degree, minute = degree - 1, minute + SEXAGESIMAL
        minute, second = minute - 1, second + SEXAGESIMAL
    if minute < b.minute:
        degree, minute = degree - 1, minute + SEXAGESIMAL
    return degree, minute, second


def div_angle(a: Angle, divisor: float) -> Angle:
    """Divide by a scalar through the decimal form, keeping ``a``'s representation.

    Dividing the degree/minute/second fields one by one gives a different
    (wrong) answer, so the fields are never divided individually.
    """
    if divisor == 0:
        raise DivisionByZeroError(f"cannot divide {a} by zero")
    return Angle.from_degrees(a.to_float() / divisor).to_type(a.angle_type)


# -----------------------------
# Text form
# -----------------------------


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.12f}".rstrip("0").rstrip(".")


def format_angle(angle: Angle) -> str:
    """Render as ``-D°`` or ``-D°M'S"``."""
    if angle.angle_type == AngleType.DEGREE_MINUTE_SECOND:
        # seconds that round to 60 carry into the minute
        angle = angle.to_dms()
    sign = NEGATIVE_SYMBOL if angle.neg else ""
    text = _format_number(angle.degree) + DEGREE_SYMBOL
    if angle.angle_type == AngleType.DEGREE_MINUTE_SECOND:
        text += (
            _format_number(angle.minute)
            + MINUTE_SYMBOL
            + _format_number(angle.second)
            + SECOND_SYMBOL
        )
    return sign + text


def parse_angle(text: str) -> Angle:
    """Parse the canonical text form.

    The representation follows the symbols present: a degree symbol alone
    gives a decimal angle, a minute symbol gives a degree/minute/second one.
    """
    if not isinstance(text, str):
        raise MalformedAngleTextError(text)
    match = _ANGLE_TEXT.fullmatch(text.strip())
    if match is None:
        raise MalformedAngleTextError(text)

    neg = match["neg"] is not None
    degree = float(match["degree"])
    if match["minute"] is None:
        return Angle(degree=degree, neg=neg)
    return Angle.from_dms(
        degree, float(match["minute"]), float(match["second"] or 0.0), neg=neg
    )
