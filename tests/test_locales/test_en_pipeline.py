"""End-to-end tests for the English casual and strict pipelines."""

from datetime import datetime, timedelta

import pytest
from dateutil.tz import tzutc

import chronoparse
from chronoparse.chrono import Chrono
from chronoparse.locales import en
from chronoparse.parsing.config import ParsingConfig
from chronoparse.parsing.context import ParsingOptions, ParsingReference
from chronoparse.parsing.schemas import Component

REF = datetime(2025, 1, 15, 12, 0)


class TestRanges:
    """Tests for range expressions."""

    def test_month_name_range(self):
        results = en.parse("Vacation January 15 to January 20, 2025 in Rome", REF)

        assert len(results) == 1
        assert results[0].text == "January 15 to January 20, 2025"
        assert results[0].index == 9
        assert results[0].start.date == datetime(2025, 1, 15, 12, 0)
        assert results[0].end.date == datetime(2025, 1, 20, 12, 0)
        assert not results[0].start.is_certain(Component.YEAR)
        assert results[0].end.is_certain(Component.YEAR)

    def test_combined_day_range(self):
        results = en.parse("Offsite January 15-20, 2025.", REF)

        assert len(results) == 1
        assert results[0].text == "January 15-20, 2025"
        assert results[0].end.date == datetime(2025, 1, 20, 12, 0)

    def test_weekday_range(self):
        result = en.parse("Friday to Monday", REF)[0]
        assert result.start.date == datetime(2025, 1, 17, 12, 0)
        assert result.end.date == datetime(2025, 1, 20, 12, 0)

    def test_slash_range(self):
        result = en.parse("3/1 - 3/5", REF)[0]
        assert result.text == "3/1 - 3/5"
        assert result.end.date == datetime(2025, 3, 5, 12, 0)

    def test_range_across_new_year(self):
        result = en.parse("Dec 28 - Jan 3", REF)[0]
        assert result.start.date == datetime(2025, 12, 28, 12, 0)
        assert result.end.date == datetime(2026, 1, 3, 12, 0)


class TestDateTimeMerge:
    """Tests for date + time expressions."""

    def test_date_comma_time(self):
        result = en.parse("Jan 15, 3pm", REF)[0]
        assert result.text == "Jan 15, 3pm"
        assert result.start.date == datetime(2025, 1, 15, 15, 0)

    def test_casual_date_at_time(self):
        result = en.parse("Lunch tomorrow at noon", REF)[0]
        assert result.text == "tomorrow at noon"
        assert result.start.date == datetime(2025, 1, 16, 12, 0)
        assert result.start.is_certain(Component.HOUR)

    def test_time_on_date(self):
        result = en.parse("3pm on Jan 16", REF)[0]
        assert result.text == "3pm on Jan 16"
        assert result.start.date == datetime(2025, 1, 16, 15, 0)

    def test_weekday_at_time(self):
        result = en.parse("next Friday at 3pm", REF)[0]
        assert result.text == "next Friday at 3pm"
        assert result.start.date == datetime(2025, 1, 17, 15, 0)

    def test_time_range_after_distant_date(self):
        result = en.parse("Jan 16 from 9am to 5pm", REF)
        # "from" is not a connector, so the date stays separate from the time range
        assert [r.text for r in result] == ["Jan 16", "9am to 5pm"]
        assert result[1].end.date == datetime(2025, 1, 15, 17, 0)


class TestTimezones:
    """Tests for timezone handling through the pipeline."""

    def test_trailing_abbreviation(self):
        result = en.parse("Jan 15, 3pm EST", REF)[0]
        assert result.text == "Jan 15, 3pm EST"
        assert result.start.date.utcoffset() == timedelta(hours=-5)

    def test_reference_timezone(self):
        reference = ParsingReference(datetime(2025, 1, 15, 23, 30), "JST")
        result = en.parse("tomorrow", reference)[0]

        assert result.start.date == datetime(2025, 1, 16, 12, 0).replace(
            tzinfo=result.start.date.tzinfo
        )
        assert result.start.date.utcoffset() == timedelta(hours=9)

    def test_reference_instant_converted_to_local_day(self):
        # 20:00 UTC is already the next day in Tokyo
        reference = ParsingReference(datetime(2025, 1, 15, 20, 0, tzinfo=tzutc()), "JST")
        result = en.parse("today", reference)[0]
        assert result.start.date.day == 16

    def test_iso_offset(self):
        result = en.parse("deploy at 2025-01-20T09:30:00Z", REF)[0]
        assert result.start.get(Component.TIMEZONE_OFFSET) == 0


class TestForwardDate:
    """Tests for forward-date mode."""

    def test_recent_past_moves_forward(self):
        options = ParsingOptions(forward_date=True)
        assert en.parse_date("Jan 13", REF, options) == datetime(2026, 1, 13, 12, 0)

    def test_off_by_default(self):
        assert en.parse_date("Jan 13", REF) == datetime(2025, 1, 13, 12, 0)

    def test_config_default(self):
        chrono = en.create_casual(ParsingConfig(forward_date=True))
        assert chrono.parse_date("Jan 13", REF) == datetime(2026, 1, 13, 12, 0)


class TestStrict:
    """Tests for the strict configuration."""

    def test_bare_time_rejected(self):
        assert en.strict.parse("at 3pm", REF) == []

    def test_casual_words_ignored(self):
        assert en.strict.parse("tomorrow or next week", REF) == []

    def test_full_date_with_time(self):
        result = en.strict.parse("January 15, 2025 at 3pm", REF)[0]
        assert result.start.date == datetime(2025, 1, 15, 15, 0)

    def test_month_and_year_rejected(self):
        assert en.strict.parse("January 2026", REF) == []

    def test_iso_accepted(self):
        assert len(en.strict.parse("2025-01-20", REF)) == 1


class TestMultipleResults:
    """Tests for texts with several references."""

    def test_results_in_text_order(self):
        results = en.parse("Either tomorrow or on Friday, not 2025-02-01.", REF)

        assert [r.text for r in results] == ["tomorrow", "on Friday", "2025-02-01"]
        assert [r.index for r in results] == sorted(r.index for r in results)

    def test_no_dates(self):
        assert en.parse("nothing to see here", REF) == []
        assert en.parse_date("nothing to see here", REF) is None


class TestPackageApi:
    """Tests for the top-level convenience API."""

    def test_parse_date(self):
        assert chronoparse.parse_date("tomorrow at 9am", REF) == datetime(2025, 1, 16, 9, 0)

    def test_default_instances(self):
        assert isinstance(chronoparse.casual, Chrono)
        assert isinstance(chronoparse.strict, Chrono)
        assert len(chronoparse.casual.parsers) > len(chronoparse.strict.parsers)

    def test_clone_then_extend(self):
        class Marker:
            def refine(self, context, results):
                return []

        custom = chronoparse.casual.clone().add_refiner(Marker())
        assert custom.parse("tomorrow", REF) == []
        assert len(chronoparse.casual.parse("tomorrow", REF)) == 1

    @pytest.mark.parametrize("reference", [datetime(2025, 1, 15), 1736942400, None])
    def test_reference_forms(self, reference):
        assert len(chronoparse.parse("tomorrow", reference)) == 1
