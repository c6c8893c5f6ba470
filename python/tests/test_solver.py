"""Zenith-to-time solving."""

import pytest

from salat_schedule._types import Mazhab, ZenithSpec
from salat_schedule.angle import Angle, AngleType
from salat_schedule.exceptions import UnsolvableHourAngleError
from salat_schedule.solver import (
    asr_altitude,
    asr_offset,
    effective_zenith,
    elevation_dip,
    hour_angle_argument,
    hour_angle_offset,
    isha_offset,
    salat_hour_offset,
    sunrise_sunset_offset,
)

MAKKAH_LATITUDE = Angle.from_degrees(21.4225)
EQUINOX_DECLINATION = Angle.from_degrees(0.103822435)


def deg(value):
    return Angle.from_degrees(value)


class StubTrig:
    """Fixed trig answers; records every acos argument."""

    def __init__(self):
        self.acos_calls = []

    def sin(self, angle):
        return 0.0

    def cos(self, angle):
        return 1.0

    def tan(self, angle):
        return 0.0

    def acos(self, x):
        self.acos_calls.append(x)
        return Angle.from_degrees(45.0)

    def acot(self, x):
        return Angle.from_degrees(45.0)


class TestElevation:
    def test_sea_level_has_no_dip(self):
        assert elevation_dip(0.0).is_zero()

    def test_dip_grows_with_root_of_elevation(self):
        assert elevation_dip(100.0).to_float() == pytest.approx(0.347)
        assert elevation_dip(400.0).to_float() == pytest.approx(0.694)

    def test_negative_elevation(self):
        with pytest.raises(ValueError):
            elevation_dip(-1.0)

    def test_effective_zenith(self):
        assert effective_zenith(deg(18.0)) == deg(108.0)
        assert effective_zenith(deg(18.0), 100.0).to_float() == pytest.approx(108.347)

    def test_effective_zenith_keeps_dms(self):
        zenith = effective_zenith(Angle.from_dms(18, 30))
        assert zenith.angle_type == AngleType.DEGREE_MINUTE_SECOND
        assert zenith == Angle.from_dms(108, 30)


class TestHourAngle:
    def test_fajr_reference(self):
        offset = salat_hour_offset(deg(18.0), deg(21.42), deg(0.0))
        assert offset.to_float() == pytest.approx(7.292457976, abs=1e-6)

    def test_sunrise_reference(self):
        offset = sunrise_sunset_offset(MAKKAH_LATITUDE, EQUINOX_DECLINATION)
        assert offset.to_float() == pytest.approx(6.062371144, abs=1e-6)

    def test_elevation_widens_the_day(self):
        low = sunrise_sunset_offset(MAKKAH_LATITUDE, EQUINOX_DECLINATION)
        high = sunrise_sunset_offset(MAKKAH_LATITUDE, EQUINOX_DECLINATION, elevation=277.0)
        assert high > low

    def test_dms_inputs(self):
        decimal = salat_hour_offset(deg(18.0), deg(21.4225), deg(0.0))
        sexagesimal = salat_hour_offset(
            Angle.from_dms(18), Angle.from_dms(21, 25, 21), Angle.from_dms(0)
        )
        assert sexagesimal.to_float() == pytest.approx(decimal.to_float(), abs=1e-9)

    def test_unsolvable_near_pole(self):
        with pytest.raises(UnsolvableHourAngleError) as info:
            salat_hour_offset(deg(18.0), deg(65.0), deg(20.0))
        assert info.value.argument == pytest.approx(-1.558659750, abs=1e-6)

    @pytest.mark.parametrize(
        "latitude, declination",
        [
            (21.42, 0.0),
            (48.5, 23.43),
            (59.9, 23.43),
            (59.9, -23.43),
            (65.0, 20.0),
            (-69.6, -23.4),
            (0.0, 23.4),
            (80.0, 10.0),
        ],
    )
    def test_fails_exactly_outside_acos_domain(self, latitude, declination):
        zenith = effective_zenith(deg(18.0))
        argument = hour_angle_argument(zenith, deg(latitude), deg(declination))
        if -1.0 <= argument <= 1.0:
            assert hour_angle_offset(zenith, deg(latitude), deg(declination)).to_float() >= 0.0
        else:
            with pytest.raises(UnsolvableHourAngleError):
                hour_angle_offset(zenith, deg(latitude), deg(declination))

    def test_injected_trig(self):
        trig = StubTrig()
        offset = hour_angle_offset(deg(108.0), deg(21.42), deg(0.0), trig)
        assert trig.acos_calls == [1.0]
        assert offset == deg(3.0)


class TestAsr:
    def test_shadow_altitude(self):
        altitude = asr_altitude(Mazhab.SHAFII, MAKKAH_LATITUDE, EQUINOX_DECLINATION)
        assert altitude.to_float() == pytest.approx(35.727097541, abs=1e-6)

    @pytest.mark.parametrize(
        "mazhab, expected", [(Mazhab.SHAFII, 3.413591084), (Mazhab.HANAFI, 4.370068705)]
    )
    def test_reference(self, mazhab, expected):
        offset = asr_offset(mazhab, MAKKAH_LATITUDE, EQUINOX_DECLINATION)
        assert offset.to_float() == pytest.approx(expected, abs=1e-6)

    def test_hanafi_is_later(self):
        shafii = asr_offset(Mazhab.SHAFII, deg(40.0), deg(-10.0))
        hanafi = asr_offset(Mazhab.HANAFI, deg(40.0), deg(-10.0))
        assert hanafi > shafii

    def test_latitude_declination_symmetry(self):
        # only |latitude - declination| enters the shadow term
        a = asr_altitude(Mazhab.SHAFII, deg(10.0), deg(20.0))
        b = asr_altitude(Mazhab.SHAFII, deg(30.0), deg(20.0))
        assert a == b

    def test_shadow_lengths(self):
        assert Mazhab.SHAFII.shadow_length == 1.0
        assert Mazhab.HANAFI.shadow_length == 2.0


class TestIsha:
    def test_standard_solves_zenith(self):
        spec = ZenithSpec.standard(17)
        offset = isha_offset(spec, MAKKAH_LATITUDE, EQUINOX_DECLINATION, None)
        assert offset == salat_hour_offset(deg(17.0), MAKKAH_LATITUDE, EQUINOX_DECLINATION)

    def test_offset_follows_sunset(self):
        spec = ZenithSpec.offset_minutes(90)
        sunset = deg(6.0)
        offset = isha_offset(spec, MAKKAH_LATITUDE, EQUINOX_DECLINATION, sunset)
        assert offset == deg(7.5)

    def test_offset_never_solves(self):
        trig = StubTrig()
        isha_offset(ZenithSpec.offset_minutes(90), deg(80.0), deg(23.0), deg(12.0), trig=trig)
        assert trig.acos_calls == []
