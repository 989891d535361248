#!/usr/bin/env python3
"""
GO Transit line name normalization.
Maps whatever the user typed (full line name, two-letter code, or a route
number) onto the code used in the published schedule table.
"""

from types import MappingProxyType


# Full line names, in the order GO lists them
LINE_NAMES = (
    ("Lakeshore West", "01-18"),
    ("Milton", "21"),
    ("Kitchener", "30-31-33"),
    ("Barrie", "63-65-68"),
    ("Richmond Hill", "61"),
    ("Stouffville", "70-71"),
    ("Lakeshore East", "09-90"),
)

ALIASES = MappingProxyType({
    # full names
    "lakeshore west": "01-18",
    "milton": "21",
    "kitchener": "30-31-33",
    "barrie": "63-65-68",
    "richmond hill": "61",
    "stouffville": "70-71",
    "lakeshore east": "09-90",
    # short names
    "lw": "01-18",
    "mi": "21",
    "ki": "30-31-33",
    "ba": "63-65-68",
    "rh": "61",
    "st": "70-71",
    "le": "09-90",
    # route numbers
    "1": "01-18",
    "01": "01-18",
    "18": "01-18",
    "30": "30-31-33",
    "31": "30-31-33",
    "33": "30-31-33",
    "63": "63-65-68",
    "65": "63-65-68",
    "68": "63-65-68",
    "70": "70-71",
    "71": "70-71",
    "9": "09-90",
    "09": "09-90",
    "90": "09-90",
    "41": "41-45-47-48",
    "45": "41-45-47-48",
    "47": "41-45-47-48",
    "48": "41-45-47-48",
    "52": "52-54-56",
    "54": "52-54-56",
    "56": "52-54-56",
})


def get_normalized_name(name: str) -> str:
    """
    Return the schedule code for a line alias.
    Unknown names come back lowercased so they can still be matched
    against the schedule table as-is.
    """
    lower_name = name.lower()
    return ALIASES.get(lower_name, lower_name)


def aliases_for(code: str) -> list[str]:
    """All aliases that normalize to the given code."""
    return [alias for alias, target in ALIASES.items() if target == code]
