"""Symbolic names for UN M.49 regions and ISO-3166 countries."""

import re
from enum import Enum

import pycountry

from georegions.tables import CONTAINMENT, REGION_NAMES

TERRITORIES: frozenset[str] = frozenset().union(*CONTAINMENT.values()) - frozenset(CONTAINMENT)
"""Every leaf of the containment table."""


def _friendly_name(name: str) -> str:
    return re.sub(r" +$", "", re.sub(r"\(.*?\)", "", name))


def _symbol(name: str) -> str:
    return re.sub(r"[^\w\d]", "", re.sub(r"\(.*?\)", "", name))


class RegionCode(Enum):
    """UN M.49 and CLDR region codes."""

    WORLD = "001"
    AFRICA = "002"
    NORTH_AMERICA = "003"
    SOUTH_AMERICA = "005"
    OCEANIA = "009"
    WESTERN_AFRICA = "011"
    CENTRAL_AMERICA = "013"
    EASTERN_AFRICA = "014"
    NORTHERN_AFRICA = "015"
    MIDDLE_AFRICA = "017"
    SOUTHERN_AFRICA = "018"
    AMERICAS = "019"
    NORTHERN_AMERICA = "021"
    CARIBBEAN = "029"
    EASTERN_ASIA = "030"
    SOUTHERN_ASIA = "034"
    SOUTH_EASTERN_ASIA = "035"
    SOUTHERN_EUROPE = "039"
    AUSTRALASIA = "053"
    MELANESIA = "054"
    MICRONESIA = "057"
    POLYNESIA = "061"
    ASIA = "142"
    CENTRAL_ASIA = "143"
    WESTERN_ASIA = "145"
    EUROPE = "150"
    EASTERN_EUROPE = "151"
    NORTHERN_EUROPE = "154"
    WESTERN_EUROPE = "155"
    SUB_SAHARAN_AFRICA = "202"
    LATIN_AMERICA = "419"
    EUROPEAN_UNION = "EU"
    OUTLYING_OCEANIA = "QO"

    def __str__(self) -> str:
        return REGION_NAMES[self.value]


class Country(Enum):
    """ISO-3166 countries and territories present in the containment table."""

    _ignore_ = "member CLS"  # pylint: disable=invalid-name
    CLS = vars()

    for member in pycountry.countries:
        if member.alpha_2 in TERRITORIES:
            CLS[_symbol(member.name)] = member.alpha_2  # type: ignore

    def __str__(self) -> str:
        country = pycountry.countries.get(alpha_2=self.value)  # type: ignore
        return _friendly_name(country.name)  # type: ignore
