"""Prayer-time schedules: from configuration to localized, rounded instants.

For each day: solar day state -> hour offsets from solar noon -> high-latitude
fallback where solving fails -> localization -> rounding.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime
from functools import cached_property
from typing import Callable, Iterable

from ._types import DaySchedule, HighLatitudeRequest, Salat, SolarDayState, ZenithKind
from .angle import Angle
from .config import ScheduleConfiguration
from .exceptions import UnsolvableHourAngleError
from .high_latitude import adjust
from .rounding import round_time
from .solver import (
    RIGHT_ANGLE,
    SUNRISE_SUNSET_ANGLE,
    asr_altitude,
    asr_offset,
    isha_offset,
    salat_hour_offset,
    sunrise_sunset_offset,
)

log = logging.getLogger(__name__)

ALL_SALATS = tuple(Salat)


class _DaySolver:
    """Solves the offsets of one day, sharing the sunrise/sunset offset."""

    def __init__(self, config: ScheduleConfiguration, state: SolarDayState):
        self.config = config
        self.state = state

    def _solve(
        self,
        salat: Salat,
        zenith: Angle,
        solve: Callable[[Angle], Angle],
        twilight: bool = False,
    ) -> Angle | None:
        try:
            return solve(self.config.latitude)
        except UnsolvableHourAngleError as exc:
            request = HighLatitudeRequest(
                salat=salat,
                zenith=zenith,
                argument=exc.argument,
                day_offset=self.horizon_offset if twilight else None,
                latitude=self.config.latitude,
                resolve=solve,
            )
            return adjust(self.config.higher_latitude_method, request)

    @cached_property
    def horizon_offset(self) -> Angle | None:
        """Hours between solar noon and sunrise (equally, sunset)."""
        config, decl = self.config, self.state.declination
        return self._solve(
            Salat.SUNRISE,
            Angle.from_degrees(SUNRISE_SUNSET_ANGLE),
            lambda lat: sunrise_sunset_offset(lat, decl, config.elevation, config.trig),
        )

    def _twilight_offset(self, salat: Salat, depression: Angle) -> Angle | None:
        config, decl = self.config, self.state.declination
        return self._solve(
            salat,
            depression,
            lambda lat: salat_hour_offset(depression, lat, decl, config.elevation, config.trig),
            twilight=True,
        )

    def offset(self, salat: Salat) -> Angle | None:
        """Signed hours from solar noon, or None when there is no such time."""
        config, decl = self.config, self.state.declination
        match salat:
            case Salat.FAJR:
                return _negated(self._twilight_offset(salat, config.fajr_zenith.angle))
            case Salat.SUNRISE:
                return _negated(self.horizon_offset)
            case Salat.DHUHR:
                return Angle.zero()
            case Salat.ASR:
                zenith = RIGHT_ANGLE - asr_altitude(
                    config.mazhab, config.latitude, decl, config.trig
                )
                return self._solve(
                    salat,
                    zenith,
                    lambda lat: asr_offset(config.mazhab, lat, decl, config.trig),
                )
            case Salat.SUNSET | Salat.MAGHRIB:
                return self.horizon_offset
            case Salat.ISHA:
                return self._isha_offset()
            case _:
                raise ValueError(f"Unknown salat: {salat}")

    def _isha_offset(self) -> Angle | None:
        config, decl, spec = self.config, self.state.declination, self.config.isha_zenith
        sunset = None
        if spec.kind == ZenithKind.OFFSET:
            sunset = self.horizon_offset
            if sunset is None:
                return None
        return self._solve(
            Salat.ISHA,
            spec.angle,
            lambda lat: isha_offset(spec, lat, decl, sunset, config.elevation, config.trig),
            twilight=True,
        )

    def instant(self, salat: Salat) -> datetime | None:
        offset = self.offset(salat)
        if offset is None:
            return None
        local = (self.state.transit + offset.to_timedelta()).astimezone(
            self.config.timezone
        )
        return round_time(local, self.config.rounding_time_option)


def _negated(offset: Angle | None) -> Angle | None:
    return None if offset is None else offset.negate()


def compute_day(
    config: ScheduleConfiguration, day: date, salats: Iterable[Salat] = ALL_SALATS
) -> DaySchedule:
    """Prayer times of ``day``. Every requested prayer is validated first."""
    salats = tuple(salats)
    for salat in salats:
        config.validate_by_salat(salat)

    solver = _DaySolver(config, config.solar_day(day))
    times = {salat: solver.instant(salat) for salat in salats}
    log.debug("Schedule for %s: %s", day, times)
    return DaySchedule(day=day, times=times)


def compute_schedule(
    config: ScheduleConfiguration,
    salats: Iterable[Salat] = ALL_SALATS,
    max_workers: int | None = None,
) -> dict[date, DaySchedule]:
    """Prayer times for every day of the configured range, keyed by date.

    Days are independent; with ``max_workers`` > 1 they are solved on a
    thread pool.
    """
    salats = tuple(salats)
    for salat in salats:
        config.validate_by_salat(salat)
    days = config.days()

    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            schedules = list(pool.map(lambda day: compute_day(config, day, salats), days))
    else:
        schedules = [compute_day(config, day, salats) for day in days]

    log.info("Computed %d day(s) from %s to %s", len(schedules), config.date_start, config.date_end)
    return {schedule.day: schedule for schedule in schedules}
