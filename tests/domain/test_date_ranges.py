from __future__ import annotations

from datetime import UTC, datetime

import pytest

from eventdex.domain.date_ranges import (
    Clock,
    DateRange,
    DateRules,
    normalize_phrase,
    parse_date_range,
    parse_date_side,
)


def _make_clock(reference: datetime) -> Clock:
    def _clock() -> datetime:
        return reference

    return _clock


FIXED_CLOCK = _make_clock(datetime(2031, 1, 1, 12, tzinfo=UTC))


def _ms(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> int:
    return int(datetime(year, month, day, hour, minute, tzinfo=UTC).timestamp()) * 1000


def _range(start: datetime, end: datetime) -> DateRange:
    return DateRange.from_datetimes(start, end)


def test_same_day_from_to_phrase() -> None:
    ranges = parse_date_range(
        "Saturday, June 21, 2025, from 2:00 p.m. to 5:00 p.m. local time",
        clock=FIXED_CLOCK,
    )

    assert ranges == [DateRange(start=_ms(2025, 6, 21, 14), end=_ms(2025, 6, 21, 17))]


def test_timezone_abbreviation_is_discarded() -> None:
    ranges = parse_date_range("June 21, 2025, from 2:00 p.m. to 5:00 p.m. PDT", clock=FIXED_CLOCK)

    assert ranges == [DateRange(start=_ms(2025, 6, 21, 14), end=_ms(2025, 6, 21, 17))]


def test_start_inherits_year_from_end() -> None:
    ranges = parse_date_range("July 15 to July 20, 2025", clock=FIXED_CLOCK)

    assert ranges == [DateRange(start=_ms(2025, 7, 15), end=_ms(2025, 7, 20))]


def test_two_day_weekend_yields_two_ranges() -> None:
    ranges = parse_date_range(
        "Saturday, June 28, and Sunday, June 29, 2025, from 10:00 a.m. to 6:00 p.m.",
        clock=FIXED_CLOCK,
    )

    assert ranges == [
        DateRange(start=_ms(2025, 6, 28, 10), end=_ms(2025, 6, 28, 18)),
        DateRange(start=_ms(2025, 6, 29, 10), end=_ms(2025, 6, 29, 18)),
    ]


def test_two_day_weekend_without_year_uses_configured_year() -> None:
    rules = DateRules(weekend_default_year=2026)

    ranges = parse_date_range(
        "June 28 and June 29 from 10:00 a.m. to 6:00 p.m.",
        rules=rules,
        clock=FIXED_CLOCK,
    )

    assert [item.start_datetime for item in ranges] == [
        datetime(2026, 6, 28, 10),  # noqa: DTZ001
        datetime(2026, 6, 29, 10),  # noqa: DTZ001
    ]


@pytest.mark.parametrize(
    ("phrase", "expected"),
    [
        (
            "Tuesday, July 15, at 10:00 a.m. to Sunday, July 20, 2025, at 8:00 p.m. local time",
            [DateRange(start=_ms(2025, 7, 15, 10), end=_ms(2025, 7, 20, 20))],
        ),
        (
            "Saturday, June 28, and Sunday, June 29, 2025, from 10:00 a.m. to 6:00 p.m."
            " local time each day",
            [
                DateRange(start=_ms(2025, 6, 28, 10), end=_ms(2025, 6, 28, 18)),
                DateRange(start=_ms(2025, 6, 29, 10), end=_ms(2025, 6, 29, 18)),
            ],
        ),
        (
            "June 28 and June 29, 2025, from 10:00 a.m. – 6:00 p.m.",
            [
                DateRange(start=_ms(2025, 6, 28, 10), end=_ms(2025, 6, 28, 18)),
                DateRange(start=_ms(2025, 6, 29, 10), end=_ms(2025, 6, 29, 18)),
            ],
        ),
    ],
)
def test_event_page_phrases(phrase: str, expected: list[DateRange]) -> None:
    assert parse_date_range(phrase, clock=FIXED_CLOCK) == expected


def test_time_only_end_borrows_start_date() -> None:
    ranges = parse_date_range("June 21, 2025, at 2:00 p.m. to 5:00 p.m.", clock=FIXED_CLOCK)

    assert ranges == [DateRange(start=_ms(2025, 6, 21, 14), end=_ms(2025, 6, 21, 17))]


@pytest.mark.parametrize("separator", [" - ", " – ", "—"])
def test_dash_reads_as_range_separator(separator: str) -> None:
    ranges = parse_date_range(f"July 1{separator}July 3, 2025", clock=FIXED_CLOCK)

    assert ranges == [DateRange(start=_ms(2025, 7, 1), end=_ms(2025, 7, 3))]


def test_december_to_january_span_decrements_start_year() -> None:
    ranges = parse_date_range("December 30 to January 2, 2026", clock=FIXED_CLOCK)

    assert ranges == [DateRange(start=_ms(2025, 12, 30), end=_ms(2026, 1, 2))]


def test_missing_year_uses_clock_year() -> None:
    ranges = parse_date_range("March 3 at 1:00 p.m. to March 3 at 4:00 p.m.", clock=FIXED_CLOCK)

    assert ranges == [DateRange(start=_ms(2031, 3, 3, 13), end=_ms(2031, 3, 3, 16))]


def test_non_breaking_spaces_are_normalized() -> None:
    ranges = parse_date_range("June\u00a021,\u00a02025, from 2:00\u00a0p.m. to 5:00 p.m.", clock=FIXED_CLOCK)

    assert ranges == [DateRange(start=_ms(2025, 6, 21, 14), end=_ms(2025, 6, 21, 17))]


@pytest.mark.parametrize(
    "phrase",
    [
        "",
        "   ",
        "TBD",
        "Coming soon!",
        "June 1 to June 2 to June 3",
        "July 20, 2025 to July 15, 2025",
        "February 30, 2025",
        "Smarch 3, 2025",
    ],
)
def test_unparseable_phrases_yield_no_ranges(phrase: str) -> None:
    assert parse_date_range(phrase, clock=FIXED_CLOCK) == []


def test_single_date_yields_zero_length_range() -> None:
    ranges = parse_date_range("June 21, 2025", clock=FIXED_CLOCK)

    assert ranges == [DateRange(start=_ms(2025, 6, 21), end=_ms(2025, 6, 21))]


def test_ranges_never_invert() -> None:
    phrases = [
        "Saturday, June 21, 2025, from 2:00 p.m. to 5:00 p.m. local time",
        "December 30 to January 2, 2026",
        "July 1 - July 3, 2025",
        "June 28 and June 29 from 10:00 a.m. to 6:00 p.m.",
    ]

    for phrase in phrases:
        for item in parse_date_range(phrase, clock=FIXED_CLOCK):
            assert item.start <= item.end


def test_normalize_phrase_prelude() -> None:
    text = normalize_phrase("Monday,  July 7, 2025, at 9:00 A.M. EDT.")

    assert text == "July 7, 2025, at 9:00 am"


@pytest.mark.parametrize(
    ("side", "expected"),
    [
        ("June 21, at 12:00 am", (6, 21, 0, 0, None)),
        ("June 21, at 12:30 pm", (6, 21, 12, 30, None)),
        ("June, 21, 2025", (6, 21, 0, 0, 2025)),
        ("Friday, October 3, 2025, at 6:00 pm", (10, 3, 18, 0, 2025)),
    ],
)
def test_parse_date_side(side: str, expected: tuple[int, int, int, int, int | None]) -> None:
    parsed = parse_date_side(side)

    assert parsed is not None
    assert (parsed.month, parsed.day, parsed.hour, parsed.minute, parsed.year) == expected


def test_date_range_round_trips_wall_clock_time() -> None:
    start = datetime(2025, 6, 21, 14)  # noqa: DTZ001
    end = datetime(2025, 6, 21, 17)  # noqa: DTZ001

    item = _range(start, end)

    assert item.start_datetime == start
    assert item.end_datetime == end
