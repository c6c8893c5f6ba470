"""Low-precision solar ephemeris: declination and equation of time per day.

All angles in degrees, equation of time in hours unless otherwise noted.
"""

import logging
import math
from datetime import date, datetime, time, timedelta, timezone

from ._types import SolarDayState
from .angle import Angle
from .exceptions import MissingDateError
from .trig import deg_to_rad, rad_to_deg

log = logging.getLogger(__name__)

J2000 = 2451545.0
DEGREES_PER_HOUR = 15.0


def normalize_angle(angle: float) -> float:
    """Normalize angle to 0-360 degree range."""
    return angle % 360.0


def normalize_hour(hours: float) -> float:
    """Normalize hours to 0-24 range."""
    return hours % 24.0


def leap_year(year: int) -> bool:
    """Returns True if year is a leap year."""
    return (year % 400 == 0) or (year % 4 == 0 and year % 100 != 0)


def days_in_months(year: int) -> list[int]:
    """Returns a list of days per month for the given year."""
    return [31, 29 if leap_year(year) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def julian_date(year: int, month: int, day: int) -> float:
    """Julian date at 0h UT of the given Gregorian date."""
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + b
        - 1524.5
    )


def sun_position(jd: float) -> tuple[float, float]:
    """Solar declination and equation of time at a Julian date.

    Returns:
        (declination in degrees, equation of time in hours within [-12, 12))
    """
    d = jd - J2000
    g = normalize_angle(357.529 + 0.98560028 * d)
    q = normalize_angle(280.459 + 0.98564736 * d)
    ecliptic_longitude = normalize_angle(
        q + 1.915 * math.sin(deg_to_rad(g)) + 0.020 * math.sin(deg_to_rad(2 * g))
    )
    obliquity = 23.439 - 0.00000036 * d

    lam = deg_to_rad(ecliptic_longitude)
    eps = deg_to_rad(obliquity)
    right_ascension = rad_to_deg(math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam)))
    eqt = q / DEGREES_PER_HOUR - normalize_hour(right_ascension / DEGREES_PER_HOUR)
    # q and RA wrap independently at 360 degrees
    eqt = (eqt + 12.0) % 24.0 - 12.0
    declination = rad_to_deg(math.asin(math.sin(eps) * math.sin(lam)))
    return declination, eqt


def solar_day_state(day: date | None, longitude: Angle) -> SolarDayState:
    """Sun's declination and equation of time at local apparent noon."""
    if day is None:
        raise MissingDateError()
    if isinstance(day, datetime):
        day = day.date()

    lng = longitude.to_float()
    jd = julian_date(day.year, day.month, day.day) - lng / 360.0 + 0.5
    declination, eqt = sun_position(jd)
    transit_hours = 12.0 - lng / DEGREES_PER_HOUR - eqt
    transit = datetime.combine(day, time(), tzinfo=timezone.utc) + timedelta(
        hours=transit_hours
    )
    log.debug(
        "Solar day %s: declination=%.6f eqt=%.4f min transit=%s",
        day,
        declination,
        eqt * 60.0,
        transit.isoformat(),
    )
    return SolarDayState(
        day=day,
        declination=Angle.from_degrees(declination),
        equation_of_time=timedelta(hours=eqt),
        transit=transit,
    )


def iter_days(start: date | None, end: date | None):
    """Yield each date from start to end inclusive."""
    if start is None or end is None:
        raise MissingDateError()
    if end < start:
        raise ValueError(f"date range ends before it starts: {start} > {end}")
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def solar_day_states(
    start: date | None, end: date | None, longitude: Angle
) -> list[SolarDayState]:
    """One SolarDayState per day of the inclusive range."""
    return [solar_day_state(day, longitude) for day in iter_days(start, end)]
