"""Durations relative to the reference.

- Within: "in 5 minutes", "within 2 days", "for a year"
- Ago/later: "3 days ago", "2 hours later", "a week from now"
"""

from __future__ import annotations

import re
from datetime import datetime

from dateutil.relativedelta import relativedelta

from chronoparse.locales.en.constants import NUMBER_PATTERN, TIME_UNIT_PATTERN, parse_time_unit
from chronoparse.parsers.base import AbstractParserWithWordBoundaryChecking
from chronoparse.parsing.components import (
    ParsingComponents,
    assign_similar_date,
    assign_similar_time,
    imply_similar_time,
)
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component

_DURATION = rf"({NUMBER_PATTERN})\s*({TIME_UNIT_PATTERN})"


def create_relative_components(
    context: ParsingContext, delta: relativedelta
) -> ParsingComponents | None:
    """
    Components for reference + delta.

    Sub-day offsets fix the full time; day-or-longer offsets fix the
    date and imply the reference's time of day. Year offsets leave the
    month and day implied.
    """
    reference = context.reference.wall_clock
    try:
        target: datetime = reference + delta
    except (ValueError, OverflowError):
        return None

    components = context.create_parsing_components()
    if delta.hours or delta.minutes or delta.seconds:
        assign_similar_date(components, target)
        assign_similar_time(components, target)
    elif delta.years and not (delta.months or delta.days):
        components.assign(Component.YEAR, target.year)
        components.imply(Component.MONTH, target.month)
        components.imply(Component.DAY, target.day)
        imply_similar_time(components, target)
    else:
        assign_similar_date(components, target)
        imply_similar_time(components, target)
    return components


class ENTimeUnitWithinFormatParser(AbstractParserWithWordBoundaryChecking):
    def inner_pattern(self, context: ParsingContext) -> str:
        return (
            r"(?:within|in|for)\s+"
            r"(?:(?:about|around|roughly|approximately|just)\s*)?"
            rf"{_DURATION}(?=\W|$)"
        )

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents | None:
        delta = parse_time_unit(match.group(1), match.group(2))
        components = create_relative_components(context, delta)
        if components is None:
            return None
        return components.add_tag("parser/ENTimeUnitWithinFormatParser")


class ENTimeUnitAgoFormatParser(AbstractParserWithWordBoundaryChecking):
    def inner_pattern(self, context: ParsingContext) -> str:
        return rf"{_DURATION}\s+(ago|earlier|later|from\s+now|hence)(?=\W|$)"

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents | None:
        delta = parse_time_unit(match.group(1), match.group(2))
        if match.group(3).lower() in ("ago", "earlier"):
            delta = -delta
        components = create_relative_components(context, delta)
        if components is None:
            return None
        return components.add_tag("parser/ENTimeUnitAgoFormatParser")
