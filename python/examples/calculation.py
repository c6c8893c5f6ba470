"""Demonstrate a prayer schedule for Makkah on March 20, 2024."""

import logging
from datetime import date

from salat_schedule._types import Mazhab, RoundingTimeOption
from salat_schedule.angle import parse_angle
from salat_schedule.config import ScheduleConfigurationBuilder
from salat_schedule.methods import SunZenith
from salat_schedule.schedule import compute_day


def main():
    logging.basicConfig(level=logging.INFO)

    latitude = parse_angle("21°25'21\"")
    longitude = parse_angle("39°49'34\"")
    day = date(2024, 3, 20)

    config = (
        ScheduleConfigurationBuilder()
        .set_date_range(day)
        .set_latitude_longitude(latitude, longitude)
        .set_elevation(277)
        .set_timezone_offset(3)
        .set_sun_zenith(SunZenith.MAKKAH)
        .set_mazhab(Mazhab.SHAFII)
        .set_rounding_time_option(RoundingTimeOption.ROUND)
        .build()
    )
    state = config.solar_day(day)
    schedule = compute_day(config, day)

    print("=== Prayer Schedule Example ===")
    print(f"Location: Makkah ({latitude}N, {longitude}E), elevation {config.elevation} m")
    print(f"Date: {day} ({SunZenith.MAKKAH.label}, Asr: {config.mazhab})")
    print()
    print("--- Solar Day ---")
    print(f"Declination: {state.declination.to_dms()}")
    print(f"Equation of Time: {state.equation_of_time.total_seconds() / 60.0:.2f} minutes")
    print(f"Solar noon (UTC): {state.transit:%H:%M:%S}")
    print()
    print("--- Times ---")
    for salat, instant in schedule.times.items():
        text = "--:--" if instant is None else f"{instant:%H:%M}"
        print(f"{salat.title():8} {text}")


if __name__ == "__main__":
    main()
