"""Attach a trailing timezone abbreviation ("3pm EST") to a time result."""

from __future__ import annotations

import re

from chronoparse.calendars.timezones import get_timezone_abbr_map, to_timezone_offset
from chronoparse.parsing.components import ParsingResult
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component

_TIMEZONE_NAME_PATTERN = re.compile(r"\s*,?\s*\(?([A-Za-z]{2,5})\)?(?=\W|$)")


class TimezoneAbbrRefiner:
    """
    Extend time results over a following timezone abbreviation.

    Caller overrides (ParsingOptions.timezones) are consulted before the
    built-in table. Unknown words are left alone.
    """

    def refine(
        self, context: ParsingContext, results: list[ParsingResult]
    ) -> list[ParsingResult]:
        overrides = context.timezone_overrides
        table = get_timezone_abbr_map()
        return [self._refine_result(context, r, overrides, table) for r in results]

    def _refine_result(self, context, result, overrides, table) -> ParsingResult:
        start = result.start
        if not start.is_certain(Component.HOUR) or start.is_certain(Component.TIMEZONE_OFFSET):
            return result

        match = _TIMEZONE_NAME_PATTERN.match(context.text, result.end_index)
        if match is None:
            return result

        abbreviation = match.group(1)
        if abbreviation not in overrides and abbreviation not in table:
            return result

        # Naive wall clock: read as local time in the named zone
        offset = to_timezone_offset(abbreviation, start.wall_clock(), overrides)
        if offset is None:
            return result

        new_start = start.clone().assign(Component.TIMEZONE_OFFSET, offset)
        new_start.add_tag("refiner/ExtractTimezoneAbbr")
        new_end = None
        if result.end is not None:
            new_end = result.end.clone()
            if not new_end.is_certain(Component.TIMEZONE_OFFSET):
                new_end.assign(Component.TIMEZONE_OFFSET, offset)

        context.debug(f"TimezoneAbbr attached {abbreviation} ({offset}) to {result.text!r}")
        return ParsingResult.from_span(context, result.index, match.end(), new_start, new_end)
