"""Tests for the English parsers, run through the casual pipeline."""

from datetime import datetime

import pytest

from chronoparse.locales import en
from chronoparse.parsing.schemas import Component, Meridiem

# Wednesday 2025-01-15 12:00
REF = datetime(2025, 1, 15, 12, 0)


def parse_one(text: str, reference: datetime = REF):
    results = en.parse(text, reference)
    assert len(results) == 1, results
    return results[0]


class TestCasualDate:
    """Tests for ENCasualDateParser."""

    def test_now(self):
        result = parse_one("now")
        assert result.start.date == REF
        assert result.start.is_certain(Component.HOUR)

    def test_today_implies_noon(self):
        result = parse_one("today")
        assert result.start.date == datetime(2025, 1, 15, 12, 0)
        assert result.start.is_certain(Component.DAY)
        assert not result.start.is_certain(Component.HOUR)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("tomorrow", datetime(2025, 1, 16, 12, 0)),
            ("tmrw", datetime(2025, 1, 16, 12, 0)),
            ("yesterday", datetime(2025, 1, 14, 12, 0)),
            ("tonight", datetime(2025, 1, 15, 22, 0)),
            ("last night", datetime(2025, 1, 14, 22, 0)),
        ],
    )
    def test_keywords(self, text, expected):
        assert parse_one(text).start.date == expected

    def test_tonight_is_pm(self):
        assert parse_one("tonight").start.get(Component.MERIDIEM) == Meridiem.PM

    def test_requires_word_boundary(self):
        assert en.parse("snow", REF) == []


class TestTimeExpression:
    """Tests for ENTimeExpressionParser."""

    @pytest.mark.parametrize(
        "text,hour,minute",
        [
            ("at 3pm", 15, 0),
            ("6:30 p.m.", 18, 30),
            ("9:15am", 9, 15),
            ("12am", 0, 0),
            ("12pm", 12, 0),
            ("15:45", 15, 45),
            ("at 9", 9, 0),
            ("noon", 12, 0),
        ],
    )
    def test_times(self, text, hour, minute):
        resolved = parse_one(text).start.date
        assert (resolved.hour, resolved.minute) == (hour, minute)
        assert resolved.date() == REF.date()

    def test_seconds_and_fraction(self):
        resolved = parse_one("15:00:05.5").start.date
        assert (resolved.second, resolved.microsecond) == (5, 500000)

    def test_midnight_is_end_of_day(self):
        assert parse_one("midnight").start.date == datetime(2025, 1, 16, 0, 0)

    def test_meridiem_known_only_when_stated(self):
        assert parse_one("3pm").start.is_certain(Component.MERIDIEM)
        assert not parse_one("15:00").start.is_certain(Component.MERIDIEM)

    @pytest.mark.parametrize("text", ["15", "13pm", "25:00", "10:75"])
    def test_rejected(self, text):
        assert en.parse(text, REF) == []


class TestMonthName:
    """Tests for the month-name parsers."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("15 January 2025", datetime(2025, 1, 15, 12, 0)),
            ("3rd of March", datetime(2025, 3, 3, 12, 0)),
            ("January 15, 2024", datetime(2024, 1, 15, 12, 0)),
            ("Jan 15th", datetime(2025, 1, 15, 12, 0)),
            ("Sept. 9", datetime(2025, 9, 9, 12, 0)),
        ],
    )
    def test_dates(self, text, expected):
        assert parse_one(text).start.date == expected

    def test_month_and_year_implies_first_day(self):
        result = parse_one("in January 2026")
        assert result.start.date == datetime(2026, 1, 1, 12, 0)
        assert not result.start.is_certain(Component.DAY)

    def test_year_known_only_when_stated(self):
        assert parse_one("January 15, 2024").start.is_certain(Component.YEAR)
        assert not parse_one("January 15").start.is_certain(Component.YEAR)

    def test_invalid_day_for_month(self):
        assert en.parse("February 30, 2025", REF) == []


class TestSlashDate:
    """Tests for ENSlashDateFormatParser."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12/25/2024", datetime(2024, 12, 25, 12, 0)),
            ("25/12/2024", datetime(2024, 12, 25, 12, 0)),
            ("3/4", datetime(2025, 3, 4, 12, 0)),
            ("12/25/24", datetime(2024, 12, 25, 12, 0)),
        ],
    )
    def test_dates(self, text, expected):
        assert parse_one(text).start.date == expected

    def test_impossible_pair_rejected(self):
        assert en.parse("13/13/2024", REF) == []


class TestWeekday:
    """Tests for ENWeekdayParser (reference is a Wednesday)."""

    @pytest.mark.parametrize(
        "text,expected_day",
        [
            ("Friday", 17),
            ("this Wednesday", 15),
            ("next Wednesday", 22),
            ("next Friday", 17),
            ("last Monday", 13),
            ("last Wednesday", 8),
            ("Sunday", 19),
        ],
    )
    def test_resolution(self, text, expected_day):
        assert parse_one(text).start.date == datetime(2025, 1, expected_day, 12, 0)

    def test_weekday_is_known(self):
        result = parse_one("on Friday")
        assert result.start.get(Component.WEEKDAY) == 5
        assert result.start.is_certain(Component.WEEKDAY)

    def test_not_inside_words(self):
        assert en.parse("monthly", REF) == []


class TestISOWeekNumber:
    """Tests for ENISOWeekNumberParser."""

    @pytest.mark.parametrize(
        "text",
        ["week 15 of 2023", "2023-W15", "W15/2023", "the 15th week of 2023", "Week 15 '23"],
    )
    def test_forms(self, text):
        result = parse_one(text)
        assert result.start.date == datetime(2023, 4, 10, 12, 0)
        assert result.start.get(Component.ISO_WEEK) == 15
        assert result.start.is_certain(Component.ISO_WEEK_YEAR)

    def test_implied_week_year(self):
        result = parse_one("W10")
        assert result.start.date == datetime(2025, 3, 3, 12, 0)
        assert result.start.get(Component.ISO_WEEK_YEAR) == 2025
        assert not result.start.is_certain(Component.ISO_WEEK_YEAR)

    def test_missing_week_rejected(self):
        assert en.parse("week 53 of 2025", REF) == []


class TestRelativeWeek:
    """Tests for ENRelativeWeekParser."""

    @pytest.mark.parametrize(
        "text,expected,week,week_year",
        [
            ("this week", datetime(2025, 1, 13, 12, 0), 3, 2025),
            ("next week", datetime(2025, 1, 20, 12, 0), 4, 2025),
            ("last week", datetime(2025, 1, 6, 12, 0), 2, 2025),
            ("3 weeks ago", datetime(2024, 12, 23, 12, 0), 52, 2024),
            ("in 2 weeks", datetime(2025, 1, 27, 12, 0), 5, 2025),
            ("two weeks from now", datetime(2025, 1, 27, 12, 0), 5, 2025),
            ("the week after next", datetime(2025, 1, 27, 12, 0), 5, 2025),
        ],
    )
    def test_resolution(self, text, expected, week, week_year):
        result = parse_one(text)
        assert result.text == text
        assert result.start.date == expected
        assert result.start.get(Component.ISO_WEEK) == week
        assert result.start.get(Component.ISO_WEEK_YEAR) == week_year


class TestTimeUnits:
    """Tests for the within/ago duration parsers."""

    def test_within_minutes_fixes_time(self):
        result = parse_one("in 5 minutes")
        assert result.start.date == datetime(2025, 1, 15, 12, 5)
        assert result.start.is_certain(Component.MINUTE)

    def test_days_ago_implies_time(self):
        result = parse_one("3 days ago")
        assert result.start.date == datetime(2025, 1, 12, 12, 0)
        assert result.start.is_certain(Component.DAY)
        assert not result.start.is_certain(Component.HOUR)

    def test_hours_later(self):
        assert parse_one("2 hours later").start.date == datetime(2025, 1, 15, 14, 0)

    def test_within_days(self):
        assert parse_one("within 2 days").start.date == datetime(2025, 1, 17, 12, 0)

    def test_year_from_now_leaves_month_implied(self):
        result = parse_one("a year from now")
        assert result.start.date == datetime(2026, 1, 15, 12, 0)
        assert result.start.is_certain(Component.YEAR)
        assert not result.start.is_certain(Component.MONTH)

    def test_an_hour(self):
        assert parse_one("in an hour").start.date == datetime(2025, 1, 15, 13, 0)
