"""Fajr/Isha zenith presets of the common calculation authorities."""

from enum import StrEnum

from ._types import ZenithSpec


class SunZenith(StrEnum):
    MWL = "MWL"
    ISNA = "ISNA"
    EGYPT = "Egypt"
    MAKKAH = "Makkah"
    KARACHI = "Karachi"
    KEMENAG = "Kemenag"

    @property
    def label(self) -> str:
        return METHODS[self]["name"]

    @property
    def fajr_zenith(self) -> ZenithSpec:
        return METHODS[self]["fajr"]

    @property
    def isha_zenith(self) -> ZenithSpec:
        return METHODS[self]["isha"]


METHODS = {
    SunZenith.MWL: {
        "name": "Muslim World League",
        "fajr": ZenithSpec.standard(18),
        "isha": ZenithSpec.standard(17),
    },
    SunZenith.ISNA: {
        "name": "Islamic Society of North America",
        "fajr": ZenithSpec.standard(15),
        "isha": ZenithSpec.standard(15),
    },
    SunZenith.EGYPT: {
        "name": "Egyptian General Authority of Survey",
        "fajr": ZenithSpec.standard(19.5),
        "isha": ZenithSpec.standard(17.5),
    },
    SunZenith.MAKKAH: {
        "name": "Umm al-Qura University, Makkah",
        "fajr": ZenithSpec.standard(18.5),
        "isha": ZenithSpec.offset_minutes(90),
    },
    SunZenith.KARACHI: {
        "name": "University of Islamic Sciences, Karachi",
        "fajr": ZenithSpec.standard(18),
        "isha": ZenithSpec.standard(18),
    },
    SunZenith.KEMENAG: {
        "name": "Kementerian Agama Republik Indonesia",
        "fajr": ZenithSpec.standard(20),
        "isha": ZenithSpec.standard(18),
    },
}
