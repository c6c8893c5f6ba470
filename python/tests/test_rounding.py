"""Time rounding options."""

from datetime import datetime, timedelta, timezone

import pytest

from salat_schedule._types import RoundingTimeOption
from salat_schedule.rounding import round_time

TZ = timezone(timedelta(hours=3))


def at(hour, minute, second=0, microsecond=0):
    return datetime(2024, 3, 20, hour, minute, second, microsecond, tzinfo=TZ)


class TestRoundTime:
    @pytest.mark.parametrize(
        "option, instant, expected",
        [
            (RoundingTimeOption.NONE, at(5, 10, 19, 683000), at(5, 10, 19, 683000)),
            (RoundingTimeOption.ROUND, at(5, 10, 19, 683000), at(5, 10)),
            (RoundingTimeOption.ROUND, at(5, 10, 30), at(5, 11)),
            (RoundingTimeOption.ROUND, at(5, 10, 29, 999999), at(5, 10)),
            (RoundingTimeOption.FLOOR, at(5, 10, 59, 999999), at(5, 10)),
            (RoundingTimeOption.CEIL, at(5, 10, 0, 1), at(5, 11)),
            (RoundingTimeOption.CEIL, at(5, 10), at(5, 10)),
        ],
    )
    def test_options(self, option, instant, expected):
        assert round_time(instant, option) == expected

    def test_rolls_over_midnight(self):
        result = round_time(at(23, 59, 45), RoundingTimeOption.ROUND)
        assert result == datetime(2024, 3, 21, 0, 0, tzinfo=TZ)

    @pytest.mark.parametrize("option", list(RoundingTimeOption))
    def test_keeps_timezone(self, option):
        assert round_time(at(12, 28, 3), option).tzinfo is TZ
