"""Tests for ForwardDateRefiner."""

from datetime import datetime

import pytest

from chronoparse.parsing.context import ParsingOptions
from chronoparse.parsing.schemas import Component
from chronoparse.refiners.forward_date import ForwardDateRefiner


@pytest.fixture
def refiner() -> ForwardDateRefiner:
    return ForwardDateRefiner()


@pytest.fixture
def forward_context(make_context):
    return make_context("Jan 13", options=ParsingOptions(forward_date=True))


def _month_day(context, month, day, extra=None):
    components = {Component.MONTH: month, Component.DAY: day, **(extra or {})}
    return context.create_parsing_result(0, context.text, components)


class TestForwardDate:
    """Tests for the forward-date window."""

    def test_disabled_by_default(self, refiner, make_context):
        context = make_context("Jan 13")
        result = _month_day(context, 1, 13)
        assert refiner.refine(context, [result])[0] is result

    @pytest.mark.parametrize("day", [12, 13, 14])
    def test_within_window_moves_to_next_year(self, refiner, forward_context, day):
        refined = refiner.refine(forward_context, [_month_day(forward_context, 1, day)])[0]

        assert refined.date() == datetime(2026, 1, day, 12, 0)
        assert refined.start.is_certain(Component.YEAR)
        assert "refiner/ForwardDate" in refined.start.tags

    def test_outside_window_unchanged(self, refiner, forward_context):
        result = _month_day(forward_context, 1, 11)
        assert refiner.refine(forward_context, [result])[0] is result

    def test_future_dates_unchanged(self, refiner, forward_context):
        result = _month_day(forward_context, 1, 20)
        assert refiner.refine(forward_context, [result])[0] is result

    def test_same_day_earlier_hour_unchanged(self, refiner, forward_context):
        result = _month_day(forward_context, 1, 15, {Component.HOUR: 9})
        assert refiner.refine(forward_context, [result])[0] is result

    def test_known_year_unchanged(self, refiner, forward_context):
        result = _month_day(forward_context, 1, 13, {Component.YEAR: 2025})
        assert refiner.refine(forward_context, [result])[0] is result

    def test_range_end_follows(self, refiner, forward_context):
        result = forward_context.create_parsing_result(
            0,
            "Jan 13 - Jan 14",
            {Component.MONTH: 1, Component.DAY: 13},
            {Component.MONTH: 1, Component.DAY: 14},
        )
        refined = refiner.refine(forward_context, [result])[0]

        assert refined.start.date() == datetime(2026, 1, 13, 12, 0)
        assert refined.end.date() == datetime(2026, 1, 14, 12, 0)
        assert not refined.end.is_certain(Component.YEAR)

    def test_leap_day_without_counterpart_unchanged(self, refiner, make_context):
        context = make_context(
            "Feb 29",
            reference_date=datetime(2024, 3, 2, 12, 0),
            options=ParsingOptions(forward_date=True),
        )
        result = _month_day(context, 2, 29)
        assert refiner.refine(context, [result])[0] is result


class TestForwardISOWeek:
    """Tests for ISO weeks without a stated week-year."""

    def test_past_week_moves_to_next_week_year(self, refiner, make_context):
        context = make_context(
            "W10",
            reference_date=datetime(2025, 3, 20, 12, 0),
            options=ParsingOptions(forward_date=True),
        )
        start = context.create_parsing_components({Component.ISO_WEEK: 10})
        start.imply(Component.ISO_WEEK_YEAR, 2025)
        result = context.create_parsing_result(0, "W10", start)

        refined = refiner.refine(context, [result])[0]

        assert refined.date() == datetime(2026, 3, 2, 12, 0)
        assert refined.start.get(Component.ISO_WEEK_YEAR) == 2026
        assert refined.start.is_certain(Component.ISO_WEEK_YEAR)

    def test_future_week_unchanged(self, refiner, make_context):
        context = make_context(
            "W20",
            reference_date=datetime(2025, 3, 20, 12, 0),
            options=ParsingOptions(forward_date=True),
        )
        start = context.create_parsing_components({Component.ISO_WEEK: 20})
        start.imply(Component.ISO_WEEK_YEAR, 2025)
        result = context.create_parsing_result(0, "W20", start)

        assert refiner.refine(context, [result])[0] is result

    def test_stated_week_year_unchanged(self, refiner, make_context):
        context = make_context(
            "W10 2025",
            reference_date=datetime(2025, 3, 20, 12, 0),
            options=ParsingOptions(forward_date=True),
        )
        result = context.create_parsing_result(
            0, "W10 2025", {Component.ISO_WEEK: 10, Component.ISO_WEEK_YEAR: 2025}
        )
        assert refiner.refine(context, [result])[0] is result
