"""Static territory containment data.

A snapshot of UN M.49 extended by CLDR territory containment. Keys are parent codes, values are
the immediate children of that parent. Leaves are ISO-3166 alpha-2 country and territory codes.

The relation is a directed acyclic graph rather than a tree: the CLDR groupings ``EU``, ``202``,
``003`` and ``419`` overlap the ordinary geographic subregions, so a territory may have more than
one parent.
"""

__all__ = ["CONTAINMENT", "ALIASES", "NON_COUNTRIES", "REGION_NAMES"]


def _group(members: str) -> frozenset[str]:
    return frozenset(members.split())


# pylint: disable=line-too-long
CONTAINMENT: dict[str, frozenset[str]] = {
    # World
    "001": _group("002 009 019 142 150 EU"),
    # Africa
    "002": _group("011 014 015 017 018 202"),
    "202": _group("011 014 017 018"),
    "011": _group("BF BJ CI CV GH GM GN GW LR ML MR NE NG SH SL SN TG"),
    "014": _group("BI DJ ER ET IO KE KM MG MU MW MZ RE RW SC SO SS TF TZ UG YT ZM ZW"),
    "015": _group("DZ EA EG EH IC LY MA SD TN"),
    "017": _group("AO CD CF CG CM GA GQ ST TD"),
    "018": _group("BW LS NA SZ ZA"),
    # Oceania
    "009": _group("053 054 057 061 QO"),
    "053": _group("AU CC CX HM NF NZ"),
    "054": _group("FJ NC PG SB VU"),
    "057": _group("FM GU KI MH MP NR PW UM"),
    "061": _group("AS CK NU PF PN TK TO TV WF WS"),
    "QO": _group("AC AQ CP DG TA"),
    # Americas
    "019": _group("003 005 013 021 029 419"),
    "003": _group("013 021 029"),
    "419": _group("005 013 029"),
    "005": _group("AR BO BR BV CL CO EC FK GF GS GY PE PY SR UY VE"),
    "013": _group("BZ CR GT HN MX NI PA SV"),
    "021": _group("BM CA GL PM US"),
    "029": _group("AG AI AW BB BL BQ BS CU CW DM DO GD GP HT JM KN KY LC MF MQ MS PR SX TC TT VC VG VI"),
    # Asia
    "142": _group("030 034 035 143 145"),
    "030": _group("CN HK JP KP KR MN MO TW"),
    "034": _group("AF BD BT IN IR LK MV NP PK"),
    "035": _group("BN ID KH LA MM MY PH SG TH TL VN"),
    "143": _group("KG KZ TJ TM UZ"),
    "145": _group("AE AM AZ BH CY GE IL IQ JO KW LB OM PS QA SA SY TR YE"),
    # Europe
    "150": _group("039 151 154 155"),
    "039": _group("AD AL BA ES GI GR HR IT ME MK MT PT RS SI SM VA XK"),
    "151": _group("BG BY CZ HU MD PL RO RU SK UA"),
    "154": _group("AX DK EE FI FO GB GG IE IM IS JE LT LV NO SE SJ"),
    "155": _group("AT BE CH DE FR LI LU MC NL"),
    # European Union
    "EU": _group("AT BE BG CY CZ DE DK EE ES FI FR GB GR HR HU IE IT LT LU LV MT NL PL PT RO SE SI SK"),
}
# pylint: enable=line-too-long

ALIASES: dict[str, str] = {
    "BU": "MM",
    "DD": "DE",
    "FX": "FR",
    "QU": "EU",
    "TP": "TL",
    "UK": "GB",
    "YD": "YE",
    "ZR": "CD",
}
"""Deprecated codes mapped to the single code that replaced them."""

NON_COUNTRIES: frozenset[str] = frozenset(
    {
        # groupings
        "EU",
        "EZ",
        "QO",
        "UN",
        "ZZ",
        # exceptionally reserved territories
        "AC",
        "CP",
        "DG",
        "EA",
        "IC",
        "TA",
        # deprecated
        "AN",
        "BU",
        "CS",
        "DD",
        "FX",
        "NT",
        "QU",
        "SU",
        "TP",
        "UK",
        "YD",
        "YU",
        "ZR",
    }
)
"""Codes that are never reported as countries."""

REGION_NAMES: dict[str, str] = {
    "001": "World",
    "002": "Africa",
    "003": "North America",
    "005": "South America",
    "009": "Oceania",
    "011": "Western Africa",
    "013": "Central America",
    "014": "Eastern Africa",
    "015": "Northern Africa",
    "017": "Middle Africa",
    "018": "Southern Africa",
    "019": "Americas",
    "021": "Northern America",
    "029": "Caribbean",
    "030": "Eastern Asia",
    "034": "Southern Asia",
    "035": "South-Eastern Asia",
    "039": "Southern Europe",
    "053": "Australasia",
    "054": "Melanesia",
    "057": "Micronesian Region",
    "061": "Polynesia",
    "142": "Asia",
    "143": "Central Asia",
    "145": "Western Asia",
    "150": "Europe",
    "151": "Eastern Europe",
    "154": "Northern Europe",
    "155": "Western Europe",
    "202": "Sub-Saharan Africa",
    "419": "Latin America",
    "EU": "European Union",
    "QO": "Outlying Oceania",
}
"""English names of every internal node of the containment table."""
