"""Zenith-to-time solving: hour-angle offsets from solar noon.

Every offset returned here is an Angle read as an hour count (see
``Angle.to_timedelta``); positive values are measured away from solar noon.
"""

import logging
import math

from ._types import Mazhab, ZenithKind, ZenithSpec
from .angle import Angle
from .exceptions import UnsolvableHourAngleError
from .trig import DEGREE_TRIG, TrigFunctions

log = logging.getLogger(__name__)

SUNRISE_SUNSET_ANGLE = 0.833
ELEVATION_DIP_FACTOR = 0.0347
DEGREES_PER_HOUR = 15.0
RIGHT_ANGLE = Angle.from_degrees(90.0)


def elevation_dip(elevation: float) -> Angle:
    """Horizon dip seen from ``elevation`` metres above the surroundings."""
    if elevation < 0:
        raise ValueError(f"elevation must be non-negative, got {elevation}")
    return Angle.from_degrees(ELEVATION_DIP_FACTOR * math.sqrt(elevation))


def effective_zenith(depression: Angle, elevation: float = 0.0) -> Angle:
    """Zenith angle for a sun ``depression`` below the horizon, widened by the dip."""
    return RIGHT_ANGLE + depression + elevation_dip(elevation)


def hour_angle_argument(
    zenith: Angle,
    latitude: Angle,
    declination: Angle,
    trig: TrigFunctions = DEGREE_TRIG,
) -> float:
    """Cosine of the hour angle at which the sun reaches ``zenith``."""
    return (trig.cos(zenith) - trig.sin(latitude) * trig.sin(declination)) / (
        trig.cos(latitude) * trig.cos(declination)
    )


def hour_angle_offset(
    zenith: Angle,
    latitude: Angle,
    declination: Angle,
    trig: TrigFunctions = DEGREE_TRIG,
) -> Angle:
    """Hours between solar noon and the moment the sun reaches ``zenith``.

    Raises:
        UnsolvableHourAngleError: the sun never reaches ``zenith`` that day.
    """
    argument = hour_angle_argument(zenith, latitude, declination, trig)
    if not -1.0 <= argument <= 1.0:
        raise UnsolvableHourAngleError(argument)
    offset = trig.acos(argument) / DEGREES_PER_HOUR
    log.debug("zenith=%s latitude=%s -> %s h", zenith, latitude, offset)
    return offset


def salat_hour_offset(
    depression: Angle,
    latitude: Angle,
    declination: Angle,
    elevation: float = 0.0,
    trig: TrigFunctions = DEGREE_TRIG,
) -> Angle:
    """Offset for a twilight prayer defined by a sun depression (Fajr, Isha)."""
    return hour_angle_offset(
        effective_zenith(depression, elevation), latitude, declination, trig
    )


def sunrise_sunset_offset(
    latitude: Angle,
    declination: Angle,
    elevation: float = 0.0,
    trig: TrigFunctions = DEGREE_TRIG,
) -> Angle:
    return salat_hour_offset(
        Angle.from_degrees(SUNRISE_SUNSET_ANGLE), latitude, declination, elevation, trig
    )


def asr_altitude(
    mazhab: Mazhab,
    latitude: Angle,
    declination: Angle,
    trig: TrigFunctions = DEGREE_TRIG,
) -> Angle:
    """Sun altitude at which an object's shadow is ``shadow_length`` times its
    height plus its noon shadow."""
    return trig.acot(mazhab.shadow_length + trig.tan((latitude - declination).abs()))


def asr_offset(
    mazhab: Mazhab,
    latitude: Angle,
    declination: Angle,
    trig: TrigFunctions = DEGREE_TRIG,
) -> Angle:
    zenith = RIGHT_ANGLE - asr_altitude(mazhab, latitude, declination, trig)
    return hour_angle_offset(zenith, latitude, declination, trig)


def isha_offset(
    spec: ZenithSpec,
    latitude: Angle,
    declination: Angle,
    sunset_offset: Angle | None,
    elevation: float = 0.0,
    trig: TrigFunctions = DEGREE_TRIG,
) -> Angle:
    """Isha either solves its zenith or follows sunset by a fixed interval.

    ``sunset_offset`` is only read for offset-based specs.
    """
    if spec.kind == ZenithKind.OFFSET:
        return sunset_offset + spec.angle
    return salat_hour_offset(spec.angle, latitude, declination, elevation, trig)
