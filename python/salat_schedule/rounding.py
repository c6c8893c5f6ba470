"""Snap computed prayer instants to whole minutes."""

from datetime import datetime, timedelta

from ._types import RoundingTimeOption

ONE_MINUTE = timedelta(minutes=1)
HALF_MINUTE = timedelta(seconds=30)


def round_time(instant: datetime, option: RoundingTimeOption) -> datetime:
    """Apply a rounding option. Keeps the instant's tzinfo."""
    floored = instant.replace(second=0, microsecond=0)
    match option:
        case RoundingTimeOption.NONE:
            return instant
        case RoundingTimeOption.FLOOR:
            return floored
        case RoundingTimeOption.CEIL:
            return floored if floored == instant else floored + ONE_MINUTE
        case RoundingTimeOption.ROUND:
            return floored + ONE_MINUTE if instant - floored >= HALF_MINUTE else floored
        case _:
            raise ValueError(f"Unknown rounding option: {option}")
