"""Fallback policies for days on which the hour-angle equation has no solution.

Exactly one policy, chosen at configuration time, is applied; a failed
policy is never retried with another one. Every policy returns an offset
from solar noon, or ``None`` when the prayer has to be reported as having
no time that day.
"""

import logging

from ._types import HigherLatitudeMethod, HighLatitudeRequest
from .angle import Angle
from .exceptions import UnsolvableHourAngleError

log = logging.getLogger(__name__)

NEAREST_LATITUDE_LIMIT = 48.5
DAY_HOURS = Angle.from_degrees(24.0)
MINUTES_PER_DEGREE = 60.0


def night_length(day_offset: Angle) -> Angle:
    """Hours from sunset to the next sunrise, given the sunset offset from noon."""
    return DAY_HOURS - day_offset - day_offset


def night_portion(method: HigherLatitudeMethod, zenith: Angle, night: Angle) -> Angle:
    """Share of the night allotted to a twilight prayer."""
    match method:
        case HigherLatitudeMethod.MIDDLE_OF_NIGHT:
            return night / 2
        case HigherLatitudeMethod.ONE_SEVENTH:
            return night / 7
        case HigherLatitudeMethod.ANGLE_BASED:
            return night / (MINUTES_PER_DEGREE / zenith.to_float())
        case _:
            raise ValueError(f"{method} does not split the night")


def nearest_latitude(latitude: Angle) -> Angle:
    """Closest latitude at which twilight is still expected to be solvable."""
    limit = Angle.from_degrees(NEAREST_LATITUDE_LIMIT)
    if latitude.abs() <= limit:
        return latitude
    return limit.negate() if latitude.is_negative() else limit


def adjust(method: HigherLatitudeMethod, request: HighLatitudeRequest) -> Angle | None:
    """Substitute an offset for a failed solve according to ``method``.

    Raises:
        UnsolvableHourAngleError: ``method`` is NONE.
    """
    match method:
        case HigherLatitudeMethod.NONE:
            raise UnsolvableHourAngleError(request.argument)
        case HigherLatitudeMethod.REPORT:
            offset = None
        case HigherLatitudeMethod.NEAREST_LATITUDE:
            offset = _resolve_at_nearest_latitude(request)
        case _:
            offset = _split_night(method, request)

    if offset is None:
        log.warning("No %s time: %s cannot approximate it", request.salat, method)
    else:
        log.info("%s approximated with %s: %s h from noon", request.salat, method, offset)
    return offset


def _split_night(method: HigherLatitudeMethod, request: HighLatitudeRequest) -> Angle | None:
    if request.day_offset is None:
        return None
    portion = night_portion(method, request.zenith, night_length(request.day_offset))
    return request.day_offset + portion


def _resolve_at_nearest_latitude(request: HighLatitudeRequest) -> Angle | None:
    latitude = nearest_latitude(request.latitude)
    try:
        return request.resolve(latitude)
    except UnsolvableHourAngleError as exc:
        log.debug("Still unsolvable at latitude %s: %s", latitude, exc)
        return None
