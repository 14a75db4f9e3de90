"""Normalize natural-language event date phrases into absolute ranges.

Phrases come from event pages, e.g. ``"Saturday, June 21, 2025, from 2:00 p.m.
to 5:00 p.m. local time"``. Timezone suffixes are discarded, not converted:
every instant is the wall-clock time of the phrase, encoded as epoch
milliseconds without any offset applied.

``parse_date_range`` never raises. Anything it cannot read yields ``[]`` and
the caller decides whether a dateless event is kept.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from eventdex.domain import vocabulary
from eventdex.domain.normalization import collapse_whitespace, month_index

log = logging.getLogger(__name__)

_MERIDIEM = re.compile(r"\b([ap])\.m\.?", re.IGNORECASE)
_LEADING_WEEKDAY = re.compile(r"^[A-Za-z]+day,\s*")
_MONTH_COMMA_DAY = re.compile(r"\b([A-Za-z]+), (\d{1,2})\b")
_DASH_SEPARATOR = re.compile(r"\s*[\u2010-\u2014]\s*|\s+-\s+")
_TWO_DAY = re.compile(
    r"([A-Za-z]+ \d{1,2}),? and (?:[A-Za-z]+day, )?([A-Za-z]+ \d{1,2})(?:, (\d{4}))?,?"
    r" from (\d{1,2}:\d{2} [ap]m) to (\d{1,2}:\d{2} [ap]m)",
    re.IGNORECASE,
)
_TIME_ONLY = re.compile(r"^\d{1,2}:\d{2} [ap]m$", re.IGNORECASE)
_YEAR = re.compile(r", (\d{4})")
_AT_TIME = re.compile(r", at (\d{1,2}):(\d{2}) ([ap]m)", re.IGNORECASE)
_BARE_TIME = re.compile(r"(\d{1,2}):(\d{2}) ([ap]m)", re.IGNORECASE)


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def _utcnow() -> datetime:
    return datetime.now(UTC)


DEFAULT_CLOCK: Clock = _utcnow


@dataclass(frozen=True, slots=True, kw_only=True)
class DateRules:
    weekend_default_year: int = vocabulary.WEEKEND_DEFAULT_YEAR
    timezone_abbreviations: tuple[str, ...] = vocabulary.TIMEZONE_ABBREVIATIONS


DEFAULT_DATE_RULES = DateRules()


@dataclass(frozen=True, slots=True)
class DateRange:
    """Wall-clock interval in epoch milliseconds, ``start <= end``."""

    start: int
    end: int

    @classmethod
    def from_datetimes(cls, start: datetime, end: datetime) -> DateRange:
        return cls(start=_to_millis(start), end=_to_millis(end))

    @property
    def start_datetime(self) -> datetime:
        return _from_millis(self.start)

    @property
    def end_datetime(self) -> datetime:
        return _from_millis(self.end)


@dataclass(frozen=True, slots=True, kw_only=True)
class DateSide:
    """One side of a range as read from text; ``year`` is ``None`` when absent."""

    month: int
    day: int
    hour: int = 0
    minute: int = 0
    year: int | None = None

    def at_year(self, year: int) -> datetime | None:
        try:
            return datetime(year, self.month, self.day, self.hour, self.minute)  # noqa: DTZ001
        except ValueError:
            return None


def _to_millis(value: datetime) -> int:
    return int(value.replace(tzinfo=UTC).timestamp()) * 1000


def _from_millis(value: int) -> datetime:
    return datetime.fromtimestamp(value / 1000, tz=UTC).replace(tzinfo=None)


def normalize_phrase(phrase: str, *, rules: DateRules = DEFAULT_DATE_RULES) -> str:
    """Apply the prelude shared by every branch: spacing, am/pm, timezones, weekday."""

    text = phrase.replace("\u00a0", " ")
    text = _MERIDIEM.sub(lambda found: f"{found.group(1).lower()}m", text)
    text = collapse_whitespace(text).removesuffix(".")
    text = text.replace("local time", "")
    for abbreviation in rules.timezone_abbreviations:
        text = re.sub(rf"\b{abbreviation}\b", "", text)
    text = collapse_whitespace(text)
    return _LEADING_WEEKDAY.sub("", text)


def parse_date_range(
    phrase: str,
    *,
    rules: DateRules = DEFAULT_DATE_RULES,
    clock: Clock = DEFAULT_CLOCK,
) -> list[DateRange]:
    """Parse ``phrase`` into zero, one or two ranges.

    Two ranges only come from the weekend pattern ``"June 28, and Sunday, June 29,
    2025, from 10:00 a.m. to 6:00 p.m."`` where each day gets the same hours.
    """

    if not phrase or not phrase.strip():
        return []
    text = normalize_phrase(phrase, rules=rules)
    if " to " not in text:
        text = _DASH_SEPARATOR.sub(" to ", text)

    if " and " in text and " from " in text and " to " in text:
        weekend = _parse_two_day(text, rules)
        if weekend:
            return weekend

    text = _unify_from_to(text)
    if " and " in text:
        text = text.replace(" and ", " to ", 1)

    sides = text.split(" to ")
    if len(sides) > 2:
        log.debug("Unparseable date phrase (too many ranges): %r", phrase)
        return []
    sides = [_ensure_at_comma(side) for side in sides]
    if len(sides) == 2 and _TIME_ONLY.match(sides[1].strip()):
        sides[1] = f"{sides[0].split(', at')[0]}, at {sides[1].strip()}"

    start_side = parse_date_side(sides[0])
    end_side = parse_date_side(sides[1]) if len(sides) == 2 else start_side
    if start_side is None or end_side is None:
        log.debug("Unparseable date phrase: %r", phrase)
        return []

    bounds = _resolve_bounds(start_side, end_side, current_year=clock().year)
    if bounds is None:
        log.debug("Date phrase yields an invalid or inverted range: %r", phrase)
        return []
    return [DateRange.from_datetimes(*bounds)]


def _parse_two_day(text: str, rules: DateRules) -> list[DateRange]:
    found = _TWO_DAY.search(text)
    if found is None:
        return []
    first_day, second_day, year, start_time, end_time = found.groups()
    year = year or str(rules.weekend_default_year)
    ranges: list[DateRange] = []
    for day in (first_day, second_day):
        start = parse_date_side(f"{day}, {year}, at {start_time}")
        end = parse_date_side(f"{day}, {year}, at {end_time}")
        if start is None or end is None or start.year is None:
            return []
        start_at = start.at_year(start.year)
        end_at = end.at_year(start.year)
        if start_at is None or end_at is None or start_at > end_at:
            return []
        ranges.append(DateRange.from_datetimes(start_at, end_at))
    return ranges


def _unify_from_to(text: str) -> str:
    """Rewrite ``"<date> from T1 to T2"`` as ``"<date> at T1 to <date> at T2"``."""

    if " from " not in text or " to " not in text:
        return text
    segments = text.split(" to ")
    first = segments[0]
    if " from " not in first:
        return text
    first = first.replace(" from ", " at ", 1)
    prefix = first[: first.index(" at ") + len(" at ")]
    return " to ".join([first, prefix + segments[1], *segments[2:]])


def _ensure_at_comma(side: str) -> str:
    if ", at" not in side and " at " in side:
        return side.replace(" at ", ", at ", 1)
    return side


def _resolve_bounds(
    start: DateSide,
    end: DateSide,
    *,
    current_year: int,
) -> tuple[datetime, datetime] | None:
    end_year = end.year or start.year or current_year
    start_year = start.year or end.year or current_year
    start_at = start.at_year(start_year)
    end_at = end.at_year(end_year)
    if start_at is None or end_at is None:
        return None
    if start_at > end_at and start.year is None and end.year is not None:
        start_at = start.at_year(start_year - 1)
        if start_at is None:
            return None
    if start_at > end_at:
        return None
    return start_at, end_at


def _to_24_hour(hour: int, meridiem: str) -> int:
    meridiem = meridiem.lower()
    if meridiem == "pm" and hour != 12:
        return hour + 12
    if meridiem == "am" and hour == 12:
        return 0
    return hour


def parse_date_side(side: str) -> DateSide | None:
    """Read ``"June 21, 2025, at 2:00 pm"`` style text; ``None`` when unreadable."""

    text = _MONTH_COMMA_DAY.sub(r"\1 \2", side.strip(), count=1)
    text = _LEADING_WEEKDAY.sub("", text)

    year: int | None = None
    year_match = _YEAR.search(text)
    if year_match is not None:
        year = int(year_match.group(1))
        text = text.replace(year_match.group(0), "", 1)

    hour = minute = 0
    time_match = _AT_TIME.search(text) or _BARE_TIME.search(text)
    if time_match is not None:
        hour = _to_24_hour(int(time_match.group(1)), time_match.group(3))
        minute = int(time_match.group(2))

    tokens = text.split(", at")[0].split()
    if len(tokens) < 2:
        return None
    month = month_index(tokens[0])
    day = tokens[1].rstrip(",")
    if month is None or not day.isdigit():
        return None
    return DateSide(month=month + 1, day=int(day), hour=hour, minute=minute, year=year)


__all__ = [
    "DEFAULT_CLOCK",
    "DEFAULT_DATE_RULES",
    "Clock",
    "DateRange",
    "DateRules",
    "DateSide",
    "normalize_phrase",
    "parse_date_range",
    "parse_date_side",
]
