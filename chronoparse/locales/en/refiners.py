"""English merge refiners."""

from __future__ import annotations

import re

from chronoparse.locales.en.constants import MONTH_PATTERN, ORDINAL_SUFFIX_PATTERN, parse_month
from chronoparse.parsing.components import ParsingResult
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component
from chronoparse.refiners.merge_date_range import AbstractMergeDateRangeRefiner
from chronoparse.refiners.merge_date_time import AbstractMergeDateTimeRefiner

_RANGE_CONNECTOR = re.compile(r"\s*(?:to|-|–|~|through|until|till|til)\s*", re.IGNORECASE)
_DATE_TIME_CONNECTOR = re.compile(r"\s*(?:T|at|after|before|on|of|,|-)?\s*", re.IGNORECASE)

# "January 15-20, 2025", "Jan 3 to 5"
_COMBINED_RANGE_PATTERN = (
    rf"(?:(?<=\W)|^)({MONTH_PATTERN})\.?\s*"
    rf"(\d{{1,2}})(?!\d){ORDINAL_SUFFIX_PATTERN}?"
    r"\s*(?:-|–|~|to|through|until)\s*"
    rf"(\d{{1,2}})(?!\d){ORDINAL_SUFFIX_PATTERN}?"
    r"(?!\s*(?::|[ap]\.?\s?m\b))"
    r"(?:\s*,?\s*(\d{4})(?!\d))?"
    r"(?=\W|$)"
)


class ENMergeDateRangeRefiner(AbstractMergeDateRangeRefiner):
    def pattern_between(self) -> re.Pattern[str]:
        return _RANGE_CONNECTOR

    def combined_range_pattern(self, context: ParsingContext) -> str | None:
        return _COMBINED_RANGE_PATTERN

    def extract_combined_range(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingResult | None:
        month = parse_month(match.group(1))
        start_day = int(match.group(2))
        end_day = int(match.group(3))
        if not 1 <= start_day < end_day <= 31:
            return None

        shared = {Component.MONTH: month}
        if match.group(4) is not None:
            shared[Component.YEAR] = int(match.group(4))

        start = context.create_parsing_components({**shared, Component.DAY: start_day})
        end = context.create_parsing_components({**shared, Component.DAY: end_day})
        start.add_tag("refiner/ENMergeDateRangeRefiner")
        end.add_tag("refiner/ENMergeDateRangeRefiner")
        return ParsingResult.from_span(context, match.start(), match.end(), start, end)


class ENMergeDateTimeRefiner(AbstractMergeDateTimeRefiner):
    def pattern_between(self) -> re.Pattern[str]:
        return _DATE_TIME_CONNECTOR
