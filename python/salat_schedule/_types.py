"""Frozen dataclasses and enums shared across the schedule pipeline."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import StrEnum
from typing import Callable

from .angle import Angle


class Salat(StrEnum):
    FAJR = "fajr"
    SUNRISE = "sunrise"
    DHUHR = "dhuhr"
    ASR = "asr"
    SUNSET = "sunset"
    MAGHRIB = "maghrib"
    ISHA = "isha"


class Mazhab(StrEnum):
    SHAFII = "shafii"
    HANAFI = "hanafi"

    @property
    def shadow_length(self) -> float:
        """Shadow-length factor used by the Asr formula."""
        match self:
            case Mazhab.SHAFII:
                return 1.0
            case Mazhab.HANAFI:
                return 2.0
            case _:
                raise ValueError(f"Unknown mazhab: {self}")


class ZenithKind(StrEnum):
    STANDARD = "standard"
    OFFSET = "offset"


class HigherLatitudeMethod(StrEnum):
    NONE = "none"
    REPORT = "report"
    MIDDLE_OF_NIGHT = "middle_of_night"
    ONE_SEVENTH = "one_seventh"
    ANGLE_BASED = "angle_based"
    NEAREST_LATITUDE = "nearest_latitude"


class RoundingTimeOption(StrEnum):
    NONE = "none"
    ROUND = "round"
    FLOOR = "floor"
    CEIL = "ceil"


@dataclass(frozen=True)
class ZenithSpec:
    """Sun depression for a twilight prayer, or a fixed interval after sunset.

    For ``ZenithKind.OFFSET`` the angle is read as an hour count.
    """

    angle: Angle
    kind: ZenithKind = ZenithKind.STANDARD

    @classmethod
    def standard(cls, degrees: float) -> "ZenithSpec":
        return cls(angle=Angle.from_degrees(degrees), kind=ZenithKind.STANDARD)

    @classmethod
    def offset_minutes(cls, minutes: float) -> "ZenithSpec":
        return cls(
            angle=Angle.from_timedelta(timedelta(minutes=minutes)),
            kind=ZenithKind.OFFSET,
        )


@dataclass(frozen=True)
class SolarDayState:
    day: date
    declination: Angle
    equation_of_time: timedelta
    transit: datetime  # UTC instant of solar noon


@dataclass(frozen=True)
class HighLatitudeRequest:
    """Everything a high-latitude policy may look at when solving failed."""

    salat: Salat
    zenith: Angle
    argument: float  # acos argument that fell outside [-1, 1]
    day_offset: Angle | None  # sunrise/sunset hours from noon; None when there is no night to split
    latitude: Angle
    resolve: Callable[[Angle], Angle]  # re-solves the failed equation at another latitude


@dataclass(frozen=True)
class DaySchedule:
    day: date
    times: dict[Salat, datetime | None]
