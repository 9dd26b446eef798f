"""ISO week references: "week 15", "Week 15 of 2023", "2023-W15", "W42/2024",
"the 15th week", "week #15", "Week 15 '23".

Without a year the reference's ISO week-year is implied.
"""

from __future__ import annotations

import re

from chronoparse.calendars.iso_week import iso_week_of, iso_week_start
from chronoparse.locales.en.constants import ORDINAL_SUFFIX_PATTERN
from chronoparse.parsers.base import AbstractParserWithWordBoundaryChecking
from chronoparse.parsing.components import ParsingComponents
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component

_YEAR = r"(?:\d{4}|'\d{2})"

_PATTERN = (
    r"(?:"
    # week 15 / week number 42 / week #15 / week 15 of 2023 / Week 15 '23
    rf"week\s*(?:number\s*|no\.?\s*|#\s*)?(?P<week_a>\d{{1,2}})(?!\d)"
    rf"(?:\s*(?:of\s+|,\s*)?(?P<year_a>{_YEAR}))?"
    r"|"
    # 2023-W15 / 2024W42
    r"(?P<year_b>\d{4})-?W(?P<week_b>\d{1,2})"
    r"|"
    # W15 / W15-2023 / W42/2024
    rf"W(?P<week_c>\d{{1,2}})(?:[-/](?P<year_c>{_YEAR}|\d{{2}}))?"
    r"|"
    # the 15th week (of 2023)
    rf"(?:the\s+)?(?P<week_d>\d{{1,2}}){ORDINAL_SUFFIX_PATTERN}\s+week"
    rf"(?:\s+of\s+(?P<year_d>{_YEAR}))?"
    r")"
    r"(?=\W|$)"
)


def _parse_year(text: str) -> int:
    text = text.lstrip("'")
    year = int(text)
    return year + 2000 if len(text) == 2 else year


class ENISOWeekNumberParser(AbstractParserWithWordBoundaryChecking):
    def inner_pattern(self, context: ParsingContext) -> str:
        return _PATTERN

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents | None:
        groups = match.groupdict()
        week_text = next(groups[k] for k in ("week_a", "week_b", "week_c", "week_d") if groups[k])
        year_text = next(
            (groups[k] for k in ("year_a", "year_b", "year_c", "year_d") if groups[k]), None
        )

        week = int(week_text)
        if not 1 <= week <= 53:
            return None

        components = context.create_parsing_components({Component.ISO_WEEK: week})
        if year_text is not None:
            week_year = _parse_year(year_text)
            components.assign(Component.ISO_WEEK_YEAR, week_year)
        else:
            week_year = iso_week_of(context.reference.wall_clock.date())[1]
            components.imply(Component.ISO_WEEK_YEAR, week_year)

        try:
            monday = iso_week_start(week, week_year)
        except ValueError:
            context.debug(f"Week {week} does not exist in {week_year}")
            return None

        components.imply(Component.YEAR, monday.year)
        components.imply(Component.MONTH, monday.month)
        components.imply(Component.DAY, monday.day)
        return components.add_tag("parser/ENISOWeekNumberParser")
