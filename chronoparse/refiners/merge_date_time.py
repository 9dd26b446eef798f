"""Merge a date-only result and an adjacent time-only result."""

from __future__ import annotations

import re
from abc import abstractmethod

from chronoparse.parsing.components import ParsingComponents, ParsingResult
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import DATE_COMPONENTS, TIME_COMPONENTS, Component
from chronoparse.refiners.base import MergingRefiner


def is_date_only(result: ParsingResult) -> bool:
    return result.start.has_date_fields() and not result.start.has_time_fields()


def is_time_only(result: ParsingResult) -> bool:
    return result.start.has_time_fields() and not result.start.has_date_fields()


def merge_date_time_components(
    date_components: ParsingComponents, time_components: ParsingComponents
) -> ParsingComponents:
    """
    Combine date fields from one side with time fields from the other.

    Each field keeps the known/implied tag it had on its source side.
    """
    merged = ParsingComponents(date_components.reference)
    _copy_components(merged, date_components, DATE_COMPONENTS)
    _copy_components(merged, time_components, TIME_COMPONENTS)

    for tag in date_components.tags | time_components.tags:
        merged.add_tag(tag)
    return merged


def _copy_components(
    target: ParsingComponents,
    source: ParsingComponents,
    components: tuple[Component, ...],
) -> None:
    for component in components:
        value = source.get(component)
        if value is None:
            continue
        if source.is_certain(component):
            target.assign(component, value)
        else:
            target.imply(component, value)


class AbstractMergeDateTimeRefiner(MergingRefiner):
    """
    Base class for locale date/time merge refiners.

    "Jan 15, 3pm" and "3pm, Jan 15" both become one result whose start
    holds the date of one match and the time of the other.
    """

    @abstractmethod
    def pattern_between(self) -> re.Pattern[str]:
        """Regex that must fully match the text between date and time."""

    def should_merge_results(
        self,
        text_between: str,
        current: ParsingResult,
        next_result: ParsingResult,
        context: ParsingContext,
    ) -> bool:
        if len(text_between) > context.config.date_time_merge_max_gap:
            return False
        paired = (is_date_only(current) and is_time_only(next_result)) or (
            is_time_only(current) and is_date_only(next_result)
        )
        return paired and self.pattern_between().fullmatch(text_between) is not None

    def merge_results(
        self,
        text_between: str,
        current: ParsingResult,
        next_result: ParsingResult,
        context: ParsingContext,
    ) -> ParsingResult:
        if is_date_only(current):
            date_result, time_result = current, next_result
        else:
            date_result, time_result = next_result, current

        start = merge_date_time_components(date_result.start, time_result.start)

        end = None
        if date_result.end is not None or time_result.end is not None:
            end = merge_date_time_components(
                date_result.end or date_result.start,
                time_result.end or time_result.start,
            )

        start.add_tag("refiner/MergeDateTime")
        return ParsingResult.from_span(
            context, current.index, next_result.end_index, start, end
        )
