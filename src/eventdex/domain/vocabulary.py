"""Static vocabularies shared by the species matcher and the date normalizer.

Everything here is plain data. The matcher receives these tables through
``MatchingRules`` so callers can swap them without touching the algorithm.
"""

from __future__ import annotations

from typing import Final

MONTHS: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Parenthetical qualifiers that distinguish physical forms of one dex entry.
KNOWN_FORMS: Final[frozenset[str]] = frozenset(
    {
        "Mow",
        "Alolan",
        "Wash",
        "Plant",
        "Sandy",
        "Trash",
        "Frost",
        "Sky",
        "Hero",
        "Speed",
        "Land",
        "Attack",
        "Origin",
        "Aria",
        "Burn",
        "Unbound",
        "Pa'u",
        "Dusk",
        "Armored",
        "Paldean",
        "Rainy",
        "Snowy",
        "Sunny",
        "Defense",
        "Chill",
        "Douse",
        "Shock",
        "Baile",
        "Sensu",
        "Galarian",
        "Hisuian",
        "Ordinary",
        "Large",
        "Small",
        "Super",
        "Midday",
        "Overcast",
        "Sunshine",
        "Altered",
        "Therian",
        "Pom-Pom",
        "Average",
        "Midnight",
        "Incarnate",
        "Standard",
    }
)

# Species whose bare name carries no form although every catalog entry has one.
SPECIAL_CASE_IDS: Final[dict[str, str]] = {
    "darmanitan": "darmanitan_standard",
    "giratina": "giratina_altered",
    "zacian": "zacian_hero",
    "zamazenta": "zamazenta_hero",
    "morpeko": "morpeko_full_belly",
    "pumpkaboo": "pumpkaboo_average",
    "gourgeist": "gourgeist_average",
}

# Substring corrections for misspellings seen on source pages.
NAME_OVERRIDES: Final[dict[str, str]] = {
    "palkida": "palkia",
}

# dex -> trailing token -> species id, for megas with lettered variants.
MEGA_VARIANTS: Final[dict[int, dict[str, str]]] = {
    6: {"x": "charizard_mega_x", "y": "charizard_mega_y"},
    150: {"x": "mewtwo_mega_x", "y": "mewtwo_mega_y"},
}

RAID_LEVEL_MAPPINGS: Final[dict[str, str]] = {
    "one-star": "1",
    "three-star": "3",
    "four-star": "4",
    "five-star": "5",
    "six-star": "6",
    "shadow": "Shadow",
}

# A line containing " raids" is prose, not a tier header, when it contains these.
TIER_LINE_EXCLUSIONS: Final[tuple[str, ...]] = ("will return to", "will appear in")

IGNORED_LINE_KEYWORDS: Final[tuple[str, ...]] = (" candy", "dynamax", "gigantamax")

WHITELIST_KEYWORDS: Final[tuple[str, ...]] = (
    "(sunny)",
    "(rainy)",
    "(snowy)",
    "sunny form",
    "rainy form",
    "snowy form",
    "to encounter",
)

BLACKLISTED_KEYWORDS: Final[tuple[str, ...]] = (
    "some trainers",
    "the following",
    "appearing",
    "lucky, you m",
    " tms",
    "and more",
    "wild encounters",
    "sunny",
    "event-themed",
    "rainy",
    "snow",
    "partly cloudy",
    "cloudy",
    "windy",
    "fog",
    "will be available",
)

TIMEZONE_ABBREVIATIONS: Final[tuple[str, ...]] = ("PDT", "PST", "EDT", "EST", "UTC", "GMT")

# Weekend events whose phrase omits the year fall back to this one.
WEEKEND_DEFAULT_YEAR: Final[int] = 2025
