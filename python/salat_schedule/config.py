"""Schedule configuration and its fluent builder."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import date, timedelta, timezone, tzinfo

from ._types import (
    HigherLatitudeMethod,
    Mazhab,
    RoundingTimeOption,
    Salat,
    SolarDayState,
    ZenithSpec,
)
from .angle import Angle
from .ephemeris import iter_days, solar_day_state
from .exceptions import (
    MissingDateError,
    MissingFajrZenithError,
    MissingIshaZenithError,
    MissingLatitudeError,
    MissingLongitudeError,
    MissingMazhabError,
)
from .methods import SunZenith
from .periodical import Periodical
from .trig import DEGREE_TRIG, TrigFunctions

log = logging.getLogger(__name__)


class SolarDayCache:
    """Memoized SolarDayStates for one configuration, keyed by day and longitude.

    ``invalidate`` marks the cache stale; the next read drops every state
    computed before it. Concurrent readers are safe.
    """

    def __init__(self):
        self._states: dict[tuple[date, float], SolarDayState] = {}
        self._stale = False
        self._lock = threading.Lock()

    @property
    def stale(self) -> bool:
        return self._stale

    def invalidate(self):
        with self._lock:
            self._stale = True
        log.debug("Solar day cache invalidated")

    def get(self, day: date, longitude: Angle) -> SolarDayState:
        key = (day, longitude.to_float())
        with self._lock:
            if self._stale:
                self._states.clear()
                self._stale = False
            state = self._states.get(key)
        if state is None:
            state = solar_day_state(day, longitude)
            with self._lock:
                state = self._states.setdefault(key, state)
        return state

    def __len__(self):
        return len(self._states)


@dataclass(frozen=True)
class ScheduleConfiguration:
    date_start: date | None = None
    date_end: date | None = None
    periodical: Periodical = Periodical.DAILY
    latitude: Angle = field(default_factory=Angle)
    longitude: Angle = field(default_factory=Angle)
    elevation: float = 0.0
    timezone: tzinfo = timezone.utc
    fajr_zenith: ZenithSpec | None = None
    isha_zenith: ZenithSpec | None = None
    mazhab: Mazhab | None = None
    higher_latitude_method: HigherLatitudeMethod = HigherLatitudeMethod.NONE
    rounding_time_option: RoundingTimeOption = RoundingTimeOption.NONE
    trig: TrigFunctions = field(default=DEGREE_TRIG, compare=False, repr=False)
    cache: SolarDayCache = field(
        default_factory=SolarDayCache, compare=False, repr=False
    )

    def validate_by_salat(self, salat: Salat):
        """Check the inputs ``salat`` needs, before any arithmetic runs."""
        if self.date_start is None:
            raise MissingDateError()
        if self.latitude.is_zero():
            raise MissingLatitudeError()
        if self.longitude.is_zero():
            raise MissingLongitudeError()
        if salat == Salat.FAJR and not _zenith_set(self.fajr_zenith):
            raise MissingFajrZenithError()
        if salat == Salat.ISHA and not _zenith_set(self.isha_zenith):
            raise MissingIshaZenithError()
        if salat == Salat.ASR and self.mazhab is None:
            raise MissingMazhabError()

    def days(self) -> list[date]:
        return list(iter_days(self.date_start, self.date_end))

    def solar_day(self, day: date) -> SolarDayState:
        return self.cache.get(day, self.longitude)

    def solar_days(self) -> list[SolarDayState]:
        return [self.solar_day(day) for day in self.days()]


def _zenith_set(spec: ZenithSpec | None) -> bool:
    return spec is not None and not spec.angle.is_zero()


class ScheduleConfigurationBuilder:
    """Accumulates schedule inputs; ``build`` returns the finished configuration.

    Setters return the builder so calls can be chained. Any setter that
    changes what the sun positions depend on invalidates the solar-day cache
    of the configuration being built. ``build`` hands that cache over and
    starts a fresh one, so a built configuration is never touched again.
    """

    def __init__(self):
        self._date_start: date | None = None
        self._date_end: date | None = None
        self._periodical = Periodical.DAILY
        self._latitude = Angle()
        self._longitude = Angle()
        self._elevation = 0.0
        self._timezone: tzinfo | None = None
        self._fajr_zenith: ZenithSpec | None = None
        self._isha_zenith: ZenithSpec | None = None
        self._mazhab: Mazhab | None = None
        self._higher_latitude_method = HigherLatitudeMethod.NONE
        self._rounding_time_option = RoundingTimeOption.NONE
        self._trig: TrigFunctions = DEGREE_TRIG
        self._cache = SolarDayCache()

    def set_date_range(self, date_start: date, date_end: date | None = None):
        date_end = date_start if date_end is None else date_end
        self._date_start = date_start
        self._date_end = date_end
        self._periodical = Periodical.from_date_range(date_start, date_end)
        self._cache.invalidate()
        return self

    def set_now(self):
        today = date.today()
        return self.set_date_range(today, today)

    def set_date_periodical(self, date_start: date, periodical: Periodical):
        self._date_start, self._date_end = periodical.date_range(date_start)
        self._periodical = periodical
        self._cache.invalidate()
        return self

    def set_periodical(self, periodical: Periodical):
        if self._date_start is None:
            self._date_start = date.today()
        return self.set_date_periodical(self._date_start, periodical)

    def set_latitude_longitude(self, latitude: Angle, longitude: Angle):
        self._latitude = latitude
        self._longitude = longitude
        self._cache.invalidate()
        return self

    def set_elevation(self, elevation: float):
        self._elevation = elevation
        return self

    def set_mazhab(self, mazhab: Mazhab):
        self._mazhab = mazhab
        return self

    def set_higher_latitude_method(self, method: HigherLatitudeMethod):
        self._higher_latitude_method = method
        return self

    def set_rounding_time_option(self, option: RoundingTimeOption):
        self._rounding_time_option = option
        return self

    def set_timezone(self, tz: tzinfo):
        self._timezone = tz
        return self

    def set_timezone_offset(self, hours: float):
        """Use a fixed UTC offset, named like ``+0700`` or ``-0330``."""
        offset = Angle.from_degrees(hours)
        whole = offset.abs().to_dms()
        sign = "-" if offset.is_negative() else "+"
        name = f"{sign}{int(whole.degree):02d}{int(whole.minute):02d}"
        self._timezone = timezone(timedelta(hours=hours), name)
        return self

    def set_fajr_isha_zenith(self, fajr_zenith: Angle, isha_zenith: Angle):
        self._fajr_zenith = ZenithSpec(angle=fajr_zenith)
        self._isha_zenith = ZenithSpec(angle=isha_zenith)
        return self

    def set_sun_zenith(self, sun_zenith: SunZenith):
        self._fajr_zenith = sun_zenith.fajr_zenith
        self._isha_zenith = sun_zenith.isha_zenith
        return self

    def set_trig(self, trig: TrigFunctions):
        self._trig = trig
        return self

    def build(self) -> ScheduleConfiguration:
        if (
            self._date_start is not None
            and self._date_end is not None
            and self._date_end < self._date_start
        ):
            raise ValueError(
                f"date range ends before it starts: {self._date_start} > {self._date_end}"
            )
        if self._elevation < 0:
            raise ValueError(f"elevation must be non-negative, got {self._elevation}")

        longitude = self._longitude
        if longitude.angle_type != self._latitude.angle_type:
            longitude = longitude.to_type(self._latitude.angle_type)

        cache, self._cache = self._cache, SolarDayCache()
        return ScheduleConfiguration(
            date_start=self._date_start,
            date_end=self._date_end,
            periodical=self._periodical,
            latitude=self._latitude,
            longitude=longitude,
            elevation=self._elevation,
            timezone=self._timezone or timezone.utc,
            fajr_zenith=self._fajr_zenith,
            isha_zenith=self._isha_zenith,
            mazhab=self._mazhab,
            higher_latitude_method=self._higher_latitude_method,
            rounding_time_option=self._rounding_time_option,
            trig=self._trig,
            cache=cache,
        )
