"""ISO-8601 date/time parser.

Matches YYYY-MM-DD with an optional Thh:mm[:ss[.fff]] time and a Z or
+hh[:mm] offset, e.g. "2025-01-15", "2025-01-15T09:30:00.250+05:30".
"""

from __future__ import annotations

import re

from chronoparse.parsers.base import AbstractParserWithWordBoundaryChecking
from chronoparse.parsing.components import ParsingComponents
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component

_PATTERN = (
    r"([0-9]{4})\-([0-9]{1,2})\-([0-9]{1,2})"
    r"(?:T([0-9]{1,2}):([0-9]{1,2})"
    r"(?::([0-9]{1,2})(?:\.(\d{1,4}))?)?"
    r"([zZ]|([+-]\d{2}):?(\d{2})?)?"
    r")?"
    r"(?=\W|$)"
)

_YEAR_GROUP = 1
_MONTH_GROUP = 2
_DAY_GROUP = 3
_HOUR_GROUP = 4
_MINUTE_GROUP = 5
_SECOND_GROUP = 6
_MILLISECOND_GROUP = 7
_TZD_GROUP = 8
_TZD_HOUR_OFFSET_GROUP = 9
_TZD_MINUTE_OFFSET_GROUP = 10


class ISOFormatParser(AbstractParserWithWordBoundaryChecking):
    """Parses ISO-8601 timestamps. Shared by every locale."""

    def inner_pattern(self, context: ParsingContext) -> str:
        return _PATTERN

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents:
        components = context.create_parsing_components(
            {
                Component.YEAR: int(match.group(_YEAR_GROUP)),
                Component.MONTH: int(match.group(_MONTH_GROUP)),
                Component.DAY: int(match.group(_DAY_GROUP)),
            }
        )

        if match.group(_HOUR_GROUP) is not None:
            components.assign(Component.HOUR, int(match.group(_HOUR_GROUP)))
            components.assign(Component.MINUTE, int(match.group(_MINUTE_GROUP)))

            if match.group(_SECOND_GROUP) is not None:
                components.assign(Component.SECOND, int(match.group(_SECOND_GROUP)))

            if match.group(_MILLISECOND_GROUP) is not None:
                # Fractional seconds: ".5" is 500ms, ".2504" truncates to 250ms
                fraction = match.group(_MILLISECOND_GROUP)[:3].ljust(3, "0")
                components.assign(Component.MILLISECOND, int(fraction))

            if match.group(_TZD_GROUP) is not None:
                components.assign(Component.TIMEZONE_OFFSET, _parse_offset(match))

        return components.add_tag("parser/ISOFormatParser")


def _parse_offset(match: re.Match[str]) -> int:
    if match.group(_TZD_GROUP).upper() == "Z":
        return 0
    hour_text = match.group(_TZD_HOUR_OFFSET_GROUP)
    minutes = int(match.group(_TZD_MINUTE_OFFSET_GROUP) or 0)
    sign = -1 if hour_text.startswith("-") else 1
    return sign * (abs(int(hour_text)) * 60 + minutes)
