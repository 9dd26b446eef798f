"""Dates written with a month name.

- Little endian: "15 January 2025", "3rd of March"
- Middle endian: "January 15, 2025", "Jan 15th"
- Month and year: "January 2025", "Sept 2024"

Without a year the reference year is implied.
"""

from __future__ import annotations

import re

from chronoparse.locales.en.constants import MONTH_PATTERN, ORDINAL_SUFFIX_PATTERN, parse_month
from chronoparse.parsers.base import AbstractParserWithWordBoundaryChecking
from chronoparse.parsing.components import ParsingComponents
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component

_YEAR_PATTERN = r"(\d{4})(?!\d)"


def _build_components(
    context: ParsingContext, day: int | None, month: int, year_text: str | None
) -> ParsingComponents | None:
    if day is not None and not 1 <= day <= 31:
        return None

    components = context.create_parsing_components()
    components.assign(Component.MONTH, month)
    if day is not None:
        components.assign(Component.DAY, day)
    else:
        components.imply(Component.DAY, 1)

    if year_text is not None:
        components.assign(Component.YEAR, int(year_text))
    return components


class ENMonthNameLittleEndianParser(AbstractParserWithWordBoundaryChecking):
    def inner_pattern(self, context: ParsingContext) -> str:
        return (
            rf"(?:on\s+)?(?:the\s+)?(\d{{1,2}})(?!\d){ORDINAL_SUFFIX_PATTERN}?"
            rf"\s*(?:of\s+)?({MONTH_PATTERN})\.?"
            rf"(?:\s*,?\s*{_YEAR_PATTERN})?"
            r"(?=\W|$)"
        )

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents | None:
        components = _build_components(
            context, int(match.group(1)), parse_month(match.group(2)), match.group(3)
        )
        if components is None:
            return None
        return components.add_tag("parser/ENMonthNameLittleEndianParser")


class ENMonthNameMiddleEndianParser(AbstractParserWithWordBoundaryChecking):
    def inner_pattern(self, context: ParsingContext) -> str:
        return (
            rf"(?:on\s+)?({MONTH_PATTERN})\.?\s*(?:the\s+)?"
            rf"(\d{{1,2}})(?!\d){ORDINAL_SUFFIX_PATTERN}?"
            r"(?!\s*(?::|[ap]\.?\s?m\b))"
            rf"(?:\s*,\s*{_YEAR_PATTERN}|\s+{_YEAR_PATTERN})?"
            r"(?=\W|$)"
        )

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents | None:
        year_text = match.group(3) or match.group(4)
        components = _build_components(
            context, int(match.group(2)), parse_month(match.group(1)), year_text
        )
        if components is None:
            return None
        return components.add_tag("parser/ENMonthNameMiddleEndianParser")


class ENMonthNameParser(AbstractParserWithWordBoundaryChecking):
    """Month with a year and no day, e.g. "in January 2025"."""

    def inner_pattern(self, context: ParsingContext) -> str:
        return rf"(?:in\s+)?({MONTH_PATTERN})\.?\s*,?\s*{_YEAR_PATTERN}(?=\W|$)"

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents | None:
        components = _build_components(
            context, None, parse_month(match.group(1)), match.group(2)
        )
        if components is None:
            return None
        return components.add_tag("parser/ENMonthNameParser")
