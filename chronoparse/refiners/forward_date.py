"""Move year-ambiguous dates just behind the reference into the future.

Only active with ParsingOptions.forward_date. Two cases:

- ISO week without a stated week-year ("w10") that already lies in
  the past moves to the same week of the next week-year.
- A date without a stated year falling 1 to 3 calendar days before
  the reference moves to the next year.

Anything else passes through unchanged.
"""

from __future__ import annotations

from dataclasses import replace

from chronoparse.calendars.iso_week import iso_week_start
from chronoparse.parsing.components import ParsingComponents, ParsingResult
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component

# Inclusive window, in calendar days before the reference
FORWARD_WINDOW_DAYS = 3


class ForwardDateRefiner:
    def refine(
        self, context: ParsingContext, results: list[ParsingResult]
    ) -> list[ParsingResult]:
        if not context.options.forward_date:
            return list(results)
        return [self._refine_result(context, result) for result in results]

    def _refine_result(self, context: ParsingContext, result: ParsingResult) -> ParsingResult:
        start = result.start
        reference = context.reference.wall_clock

        if start.is_certain(Component.ISO_WEEK):
            if start.is_certain(Component.ISO_WEEK_YEAR):
                return result
            return self._forward_iso_week(context, result)

        if start.is_certain(Component.YEAR):
            return result

        resolved = start.wall_clock()
        if resolved is None or resolved >= reference:
            return result

        day_difference = (reference.date() - resolved.date()).days
        if not 0 < day_difference <= FORWARD_WINDOW_DAYS:
            return result

        shifted = start.clone().assign(Component.YEAR, start.get(Component.YEAR) + 1)
        if shifted.wall_clock() is None:
            # Feb 29 has no counterpart next year
            return result
        shifted.add_tag("refiner/ForwardDate")

        end = result.end
        if end is not None and not end.is_certain(Component.YEAR):
            end = end.clone().imply(Component.YEAR, end.get(Component.YEAR) + 1)

        context.debug(f"ForwardDate moved {result.text!r} to year {shifted.get(Component.YEAR)}")
        return replace(result, start=shifted, end=end)

    def _forward_iso_week(self, context: ParsingContext, result: ParsingResult) -> ParsingResult:
        start = result.start
        resolved = start.wall_clock()
        if resolved is None or resolved >= context.reference.wall_clock:
            return result

        week = start.get(Component.ISO_WEEK)
        week_year = start.get(Component.ISO_WEEK_YEAR)
        if week_year is None:
            return result
        target_week_year = week_year + 1
        try:
            monday = iso_week_start(week, target_week_year)
        except ValueError:
            return result

        shifted = start.clone()
        shifted.assign(Component.ISO_WEEK_YEAR, target_week_year)
        shifted.assign(Component.YEAR, monday.year)
        _set_keeping_certainty(shifted, Component.MONTH, monday.month)
        _set_keeping_certainty(shifted, Component.DAY, monday.day)
        shifted.add_tag("refiner/ForwardDate")

        context.debug(f"ForwardDate moved {result.text!r} to week-year {target_week_year}")
        return replace(result, start=shifted)


def _set_keeping_certainty(components: ParsingComponents, component: Component, value: int) -> None:
    if components.is_certain(component):
        components.assign(component, value)
    else:
        components.imply(component, value)
