"""Weekday names with an optional this/last/next modifier."""

from __future__ import annotations

import re
from datetime import timedelta

from chronoparse.locales.en.constants import WEEKDAY_DICTIONARY, WEEKDAY_PATTERN
from chronoparse.parsers.base import AbstractParserWithWordBoundaryChecking
from chronoparse.parsing.components import ParsingComponents, assign_similar_date
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component

_PATTERN = (
    r"(?:on\s+)?"
    r"(?:(this|last|next|past|previous)\s+)?"
    rf"({WEEKDAY_PATTERN})\.?"
    r"(?=\W|$)"
)


class ENWeekdayParser(AbstractParserWithWordBoundaryChecking):
    """
    Resolves a weekday to a concrete date near the reference.

    Bare and "this" weekdays resolve to the next occurrence (today
    included); "next" is strictly after today and "last" strictly
    before.
    """

    def inner_pattern(self, context: ParsingContext) -> str:
        return _PATTERN

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents | None:
        weekday = WEEKDAY_DICTIONARY.get(match.group(2).lower())
        if weekday is None:
            return None

        modifier = (match.group(1) or "").lower()
        reference = context.reference.wall_clock
        # datetime.weekday() counts from Monday; Sunday is 0 here
        current = (reference.weekday() + 1) % 7
        day_diff = weekday - current

        if modifier in ("last", "past", "previous"):
            if day_diff >= 0:
                day_diff -= 7
        elif modifier == "next":
            if day_diff <= 0:
                day_diff += 7
        elif day_diff < 0:
            day_diff += 7

        components = context.create_parsing_components({Component.WEEKDAY: weekday})
        assign_similar_date(components, reference + timedelta(days=day_diff))
        return components.add_tag("parser/ENWeekdayParser")
