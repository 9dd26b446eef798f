"""Weeks relative to the reference: "this week", "next week", "in 2 weeks",
"3 weeks ago", "2 weeks from now", "the week before last".

Resolves to the Monday of the target ISO week, at an implied noon.
"""

from __future__ import annotations

import re

from chronoparse.calendars.iso_week import iso_week_of, iso_week_start, shift_iso_week
from chronoparse.locales.en.constants import NUMBER_PATTERN, parse_number
from chronoparse.parsers.base import AbstractParserWithWordBoundaryChecking
from chronoparse.parsing.components import ParsingComponents, assign_similar_date
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component

_PATTERN = (
    r"(?:"
    r"(?P<modifier>this|last|next|previous|past)\s+week"
    r"|"
    rf"(?P<ago>{NUMBER_PATTERN})\s+weeks?\s+ago"
    r"|"
    rf"in\s+(?P<later>{NUMBER_PATTERN})\s+weeks?"
    r"|"
    rf"(?P<from_now>{NUMBER_PATTERN})\s+weeks?\s+from\s+now"
    r"|"
    r"the\s+week\s+(?P<two_away>before\s+last|after\s+next)"
    r")"
    r"(?=\W|$)"
)

_MODIFIER_OFFSETS = {
    "this": 0,
    "last": -1,
    "previous": -1,
    "past": -1,
    "next": 1,
}


class ENRelativeWeekParser(AbstractParserWithWordBoundaryChecking):
    def inner_pattern(self, context: ParsingContext) -> str:
        return _PATTERN

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents | None:
        groups = match.groupdict()

        if groups["modifier"]:
            week_offset = _MODIFIER_OFFSETS[groups["modifier"].lower()]
        elif groups["ago"]:
            week_offset = -parse_number(groups["ago"])
        elif groups["later"]:
            week_offset = parse_number(groups["later"])
        elif groups["from_now"]:
            week_offset = parse_number(groups["from_now"])
        elif groups["two_away"]:
            week_offset = -2 if groups["two_away"].lower().startswith("before") else 2
        else:
            return None

        this_week, this_week_year = iso_week_of(context.reference.wall_clock.date())
        try:
            week, week_year = shift_iso_week(this_week, this_week_year, week_offset)
            monday = iso_week_start(week, week_year)
        except (ValueError, OverflowError):
            return None

        components = context.create_parsing_components(
            {Component.ISO_WEEK: week, Component.ISO_WEEK_YEAR: week_year}
        )
        assign_similar_date(components, monday)
        return components.add_tag("parser/ENRelativeWeekParser")
