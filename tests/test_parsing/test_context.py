"""Tests for reference resolution and ParsingContext."""

import logging
from datetime import date, datetime, timedelta

import pytest
from dateutil.tz import tzutc

from chronoparse.parsing.context import (
    ParsingOptions,
    ParsingReference,
    ReferenceDateError,
    resolve_reference,
)
from chronoparse.parsing.schemas import Component


class TestResolveReference:
    """Tests for resolve_reference()."""

    def test_none_defaults_to_now(self):
        before = datetime.now()
        resolved = resolve_reference(None)
        after = datetime.now()

        assert before <= resolved.instant <= after
        assert resolved.timezone_offset is None

    def test_naive_datetime_passes_through(self, reference):
        resolved = resolve_reference(reference)

        assert resolved.instant == reference
        assert resolved.tzinfo is None
        assert resolved.wall_clock == reference

    def test_date_becomes_midnight(self):
        resolved = resolve_reference(date(2025, 1, 15))
        assert resolved.instant == datetime(2025, 1, 15, 0, 0)

    def test_epoch_seconds(self):
        resolved = resolve_reference(0)

        assert resolved.instant == datetime(1970, 1, 1, tzinfo=tzutc())
        assert resolved.wall_clock == datetime(1970, 1, 1)

    def test_naive_instant_with_timezone_is_local_wall_clock(self, reference):
        resolved = resolve_reference(ParsingReference(reference, "JST"))

        assert resolved.timezone_offset == 540
        assert resolved.instant.utcoffset() == timedelta(hours=9)
        assert resolved.wall_clock == reference

    def test_aware_instant_is_converted_to_timezone(self):
        instant = datetime(2025, 1, 15, 12, 0, tzinfo=tzutc())
        resolved = resolve_reference(ParsingReference(instant, "JST"))

        assert resolved.wall_clock == datetime(2025, 1, 15, 21, 0)

    def test_aware_instant_before_dst_switch_keeps_standard_offset(self):
        # 03:00 UTC on 2025-03-09 is still 22:00 EST on the 8th
        instant = datetime(2025, 3, 9, 3, 0, tzinfo=tzutc())
        resolved = resolve_reference(ParsingReference(instant, "ET"))

        assert resolved.timezone_offset == -300
        assert resolved.wall_clock == datetime(2025, 3, 8, 22, 0)

    def test_integer_offset(self, reference):
        resolved = resolve_reference(ParsingReference(reference, -180))
        assert resolved.timezone_offset == -180

    def test_default_timezone_applies_without_explicit_one(self, reference):
        assert resolve_reference(reference, "PST").timezone_offset == -480
        assert resolve_reference(ParsingReference(reference, "JST"), "PST").timezone_offset == 540

    def test_unknown_timezone_is_ignored(self, reference):
        resolved = resolve_reference(ParsingReference(reference, "Mars/Olympus"))

        assert resolved.timezone_offset is None
        assert resolved.instant.tzinfo is None

    def test_override_table_is_consulted(self, reference):
        resolved = resolve_reference(ParsingReference(reference, "HQ"), None, {"HQ": 60})
        assert resolved.timezone_offset == 60

    @pytest.mark.parametrize(
        "value",
        [True, "2025-01-15", datetime(1, 1, 1), datetime(9999, 6, 1), 10**20],
    )
    def test_rejects_unusable_references(self, value):
        with pytest.raises(ReferenceDateError):
            resolve_reference(value)

    def test_reference_error_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_reference(object())


class TestParsingContext:
    """Tests for ParsingContext helpers."""

    def test_create_parsing_result_from_mapping(self, make_context):
        context = make_context("on the 3rd")
        result = context.create_parsing_result(3, "the 3rd", {Component.DAY: 3})

        assert result.start.is_certain(Component.DAY)
        assert result.end is None
        assert result.reference is context.reference

    def test_debug_callable_sink(self, make_context):
        messages = []
        context = make_context(options=ParsingOptions(debug=messages.append))
        context.debug("hello")
        assert messages == ["hello"]

    def test_debug_true_logs(self, make_context, caplog):
        context = make_context(options=ParsingOptions(debug=True))
        with caplog.at_level(logging.DEBUG, logger="chronoparse.parsing.context"):
            context.debug("visible")
        assert "visible" in caplog.text

    def test_debug_off_is_silent(self, make_context, caplog):
        context = make_context()
        with caplog.at_level(logging.DEBUG, logger="chronoparse.parsing.context"):
            context.debug("hidden")
        assert "hidden" not in caplog.text

    def test_timezone_overrides_default_empty(self, context):
        assert dict(context.timezone_overrides) == {}
