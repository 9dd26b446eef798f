"""Merge "<date> to <date>" pairs into a single range result."""

from __future__ import annotations

import re
from abc import abstractmethod
from datetime import timedelta

from chronoparse.parsing.components import ParsingComponents, ParsingResult, imply_similar_date
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component
from chronoparse.refiners.base import MergingRefiner

DEFAULT_RANGE_CONNECTORS = r"\s*(?:to|-|–|~|〜|through|until|till|til)\s*"

# Cross-implying these would describe a different day
_NOT_SHARED = frozenset({Component.WEEKDAY})


def _is_only_weekday(components: ParsingComponents) -> bool:
    return components.get_certain_components() == [Component.WEEKDAY]


def _is_date_with_unknown_year(components: ParsingComponents) -> bool:
    return components.is_certain(Component.MONTH) and not components.is_certain(Component.YEAR)


class AbstractMergeDateRangeRefiner(MergingRefiner):
    """
    Base class for locale range refiners.

    Locales supply the connector regex. Optionally they also supply a
    pattern that matches a whole range directly, such as "Jan 15-20";
    those results are added alongside the pairwise merges and the
    overlap-removal pass drops the pieces they cover.

    A backwards range is reordered by moving a weekday-only side by a
    week, then by shifting a side whose year is unknown, then by
    swapping. The weekday rules apply to parsers that assign only the
    weekday; the built-in ENWeekdayParser also assigns the full date, so
    its ranges ("Monday - Friday") go through the later rules.
    """

    @abstractmethod
    def pattern_between(self) -> re.Pattern[str]:
        """Regex that must fully match the text between range endpoints."""

    def combined_range_pattern(self, context: ParsingContext) -> str | None:
        return None

    def extract_combined_range(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingResult | None:
        return None

    def refine(
        self, context: ParsingContext, results: list[ParsingResult]
    ) -> list[ParsingResult]:
        merged = super().refine(context, results)

        pattern = self.combined_range_pattern(context)
        if pattern is None:
            return merged

        combined = []
        for match in re.finditer(pattern, context.text, re.IGNORECASE):
            result = self.extract_combined_range(context, match)
            if result is not None:
                combined.append(result)

        if not combined:
            return merged
        return sorted(merged + combined, key=lambda r: r.index)

    def should_merge_results(
        self,
        text_between: str,
        current: ParsingResult,
        next_result: ParsingResult,
        context: ParsingContext,
    ) -> bool:
        if current.is_range() or next_result.is_range():
            return False
        if len(text_between) > context.config.range_merge_max_gap:
            return False
        return self.pattern_between().fullmatch(text_between) is not None

    def merge_results(
        self,
        text_between: str,
        current: ParsingResult,
        next_result: ParsingResult,
        context: ParsingContext,
    ) -> ParsingResult:
        start = current.start.clone()
        end = next_result.start.clone()

        if not _is_only_weekday(start) and not _is_only_weekday(end):
            for component in end.get_certain_components():
                if component not in _NOT_SHARED and not start.is_certain(component):
                    start.imply(component, end.get(component))
            for component in start.get_certain_components():
                if component not in _NOT_SHARED and not end.is_certain(component):
                    end.imply(component, start.get(component))

        start_wall = start.wall_clock()
        end_wall = end.wall_clock()
        if start_wall is not None and end_wall is not None and start_wall > end_wall:
            if _is_only_weekday(end) and end_wall + timedelta(days=7) > start_wall:
                imply_similar_date(end, end_wall + timedelta(days=7))
            elif _is_only_weekday(start) and start_wall - timedelta(days=7) < end_wall:
                imply_similar_date(start, start_wall - timedelta(days=7))
            elif _is_date_with_unknown_year(end):
                end.imply(Component.YEAR, end.get(Component.YEAR) + 1)
            elif _is_date_with_unknown_year(start):
                start.imply(Component.YEAR, start.get(Component.YEAR) - 1)
            else:
                start, end = end, start

        start.add_tag("refiner/MergeDateRange")
        end.add_tag("refiner/MergeDateRange")
        return ParsingResult.from_span(
            context, current.index, next_result.end_index, start, end
        )
