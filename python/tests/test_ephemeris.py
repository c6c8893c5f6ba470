"""Solar ephemeris: Julian dates, declination and equation of time."""

from datetime import date, datetime, timedelta, timezone

import pytest

from salat_schedule.angle import Angle
from salat_schedule.ephemeris import (
    days_in_months,
    iter_days,
    julian_date,
    leap_year,
    normalize_angle,
    normalize_hour,
    solar_day_state,
    solar_day_states,
    sun_position,
)
from salat_schedule.exceptions import MissingDateError

MAKKAH_LONGITUDE = Angle.from_degrees(39.8262)


class TestCalendarHelpers:
    def test_leap_year(self):
        assert leap_year(2024)
        assert leap_year(2000)
        assert not leap_year(1900)
        assert not leap_year(2026)

    def test_days_in_months(self):
        assert sum(days_in_months(2024)) == 366
        assert sum(days_in_months(2026)) == 365
        assert days_in_months(2024)[1] == 29

    @pytest.mark.parametrize(
        "input_angle, expected",
        [(0.0, 0.0), (360.0, 0.0), (361.0, 1.0), (-1.0, 359.0), (-450.0, 270.0)],
    )
    def test_normalize_angle(self, input_angle, expected):
        assert normalize_angle(input_angle) == pytest.approx(expected)

    @pytest.mark.parametrize("hours, expected", [(25.0, 1.0), (-1.0, 23.0), (12.0, 12.0)])
    def test_normalize_hour(self, hours, expected):
        assert normalize_hour(hours) == pytest.approx(expected)


class TestJulianDate:
    def test_j2000(self):
        assert julian_date(2000, 1, 1) == 2451544.5

    def test_counts_leap_day(self):
        assert julian_date(2024, 3, 1) - julian_date(2024, 2, 28) == 2.0

    def test_consecutive_days(self):
        assert julian_date(2024, 1, 1) - julian_date(2023, 12, 31) == 1.0


class TestSunPosition:
    def test_summer_solstice(self):
        decl, _ = sun_position(julian_date(2024, 6, 21) + 0.5)
        assert decl == pytest.approx(23.434, abs=0.01)

    def test_winter_solstice(self):
        decl, _ = sun_position(julian_date(2024, 12, 21) + 0.5)
        assert decl == pytest.approx(-23.436, abs=0.01)

    def test_equation_of_time_bounded(self):
        start = julian_date(2024, 1, 1) + 0.5
        for n in range(366):
            _, eqt = sun_position(start + n)
            assert -14.5 <= eqt * 60.0 <= 16.7, f"Day {n}: {eqt * 60.0}"


class TestSolarDayState:
    @pytest.fixture
    def state(self):
        return solar_day_state(date(2024, 3, 20), MAKKAH_LONGITUDE)

    def test_declination(self, state):
        assert state.declination.to_float() == pytest.approx(0.103822, abs=1e-5)

    def test_equation_of_time(self, state):
        assert state.equation_of_time.total_seconds() / 60.0 == pytest.approx(-7.3546, abs=1e-3)

    def test_transit_is_utc_solar_noon(self, state):
        expected = datetime(2024, 3, 20, 9, 28, 3, tzinfo=timezone.utc)
        assert abs(state.transit - expected) < timedelta(seconds=1)

    def test_accepts_datetime(self, state):
        other = solar_day_state(datetime(2024, 3, 20, 23, 59), MAKKAH_LONGITUDE)
        assert other.day == date(2024, 3, 20)
        assert other.declination == state.declination

    def test_missing_date(self):
        with pytest.raises(MissingDateError):
            solar_day_state(None, MAKKAH_LONGITUDE)


class TestDayRange:
    def test_inclusive(self):
        days = list(iter_days(date(2024, 2, 27), date(2024, 3, 1)))
        assert days == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]

    def test_reversed_range(self):
        with pytest.raises(ValueError):
            list(iter_days(date(2024, 3, 2), date(2024, 3, 1)))

    def test_missing_end(self):
        with pytest.raises(MissingDateError):
            list(iter_days(date(2024, 3, 2), None))

    def test_one_state_per_day(self):
        states = solar_day_states(date(2024, 3, 18), date(2024, 3, 22), MAKKAH_LONGITUDE)
        assert [s.day.day for s in states] == [18, 19, 20, 21, 22]
        declinations = [s.declination.to_float() for s in states]
        assert declinations == sorted(declinations)  # rising through the March equinox
