"""Numeric slash dates: MM/DD, MM/DD/YYYY, MM/DD/YY.

Read month-first. When the first number cannot be a month but the
second can ("25/12/2024"), the pair is read day-first instead.
"""

from __future__ import annotations

import re

from chronoparse.parsers.base import AbstractParserWithWordBoundaryChecking
from chronoparse.parsers.patterns import find_most_likely_adjacent_year
from chronoparse.parsing.components import ParsingComponents
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component

_PATTERN = r"(?<!/)(\d{1,2})/(\d{1,2})(?:/(\d{4}|\d{2}))?(?![/\d])(?=\W|$)"


class ENSlashDateFormatParser(AbstractParserWithWordBoundaryChecking):
    def inner_pattern(self, context: ParsingContext) -> str:
        return _PATTERN

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents | None:
        month = int(match.group(1))
        day = int(match.group(2))
        if month > 12 and day <= 12:
            month, day = day, month
        if not 1 <= month <= 12 or not 1 <= day <= 31:
            return None

        components = context.create_parsing_components(
            {Component.MONTH: month, Component.DAY: day}
        )
        if match.group(3) is not None:
            year = find_most_likely_adjacent_year(
                int(match.group(3)), context.reference.wall_clock.year
            )
            components.assign(Component.YEAR, year)

        return components.add_tag("parser/ENSlashDateFormatParser")
