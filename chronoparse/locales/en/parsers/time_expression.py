"""Clock times: "3pm", "at 9", "6:30 p.m.", "15:00:05", "noon", "midnight"."""

from __future__ import annotations

import re

from chronoparse.parsers.base import AbstractParserWithWordBoundaryChecking
from chronoparse.parsing.components import ParsingComponents
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component, Meridiem

_PATTERN = (
    r"(?:(at|@)\s*)?"
    r"(?:"
    r"(noon|midday|midnight)"
    r"|"
    r"(\d{1,2})"
    r"(?::(\d{2})(?::(\d{2})(?:\.(\d{1,6}))?)?)?"
    r"(?:\s*(a\.?\s?m\.?|p\.?\s?m\.?))?"
    r")"
    r"(?=\W|$)"
)

_PREFIX_GROUP = 1
_NAMED_TIME_GROUP = 2
_HOUR_GROUP = 3
_MINUTE_GROUP = 4
_SECOND_GROUP = 5
_MILLISECOND_GROUP = 6
_MERIDIEM_GROUP = 7


class ENTimeExpressionParser(AbstractParserWithWordBoundaryChecking):
    """
    Parses a single clock time.

    A bare number counts as a time only with a minute part, an am/pm
    marker, or an "at" prefix, so "15" alone is never an hour.
    """

    def inner_pattern(self, context: ParsingContext) -> str:
        return _PATTERN

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents | None:
        components = context.create_parsing_components()

        named = match.group(_NAMED_TIME_GROUP)
        if named is not None:
            if named.lower() == "midnight":
                # 24:00 resolves to the start of the following day
                components.assign(Component.HOUR, 24)
                components.assign(Component.MINUTE, 0)
                components.assign(Component.MERIDIEM, Meridiem.AM)
            else:
                components.assign(Component.HOUR, 12)
                components.assign(Component.MINUTE, 0)
                components.assign(Component.MERIDIEM, Meridiem.PM)
            return components.add_tag("parser/ENTimeExpressionParser")

        minute_text = match.group(_MINUTE_GROUP)
        meridiem_text = match.group(_MERIDIEM_GROUP)
        if minute_text is None and meridiem_text is None and match.group(_PREFIX_GROUP) is None:
            return None

        hour = int(match.group(_HOUR_GROUP))
        minute = int(minute_text) if minute_text is not None else 0
        if hour > 24 or minute > 59:
            return None

        if meridiem_text is not None:
            if hour == 0 or hour > 12:
                return None
            if meridiem_text.lower().startswith("a"):
                components.assign(Component.MERIDIEM, Meridiem.AM)
                if hour == 12:
                    hour = 0
            else:
                components.assign(Component.MERIDIEM, Meridiem.PM)
                if hour != 12:
                    hour += 12
        elif hour < 12:
            components.imply(Component.MERIDIEM, Meridiem.AM)
        else:
            components.imply(Component.MERIDIEM, Meridiem.PM)

        components.assign(Component.HOUR, hour)
        if minute_text is not None:
            components.assign(Component.MINUTE, minute)

        if match.group(_SECOND_GROUP) is not None:
            second = int(match.group(_SECOND_GROUP))
            if second > 59:
                return None
            components.assign(Component.SECOND, second)

        if match.group(_MILLISECOND_GROUP) is not None:
            fraction = match.group(_MILLISECOND_GROUP)[:3].ljust(3, "0")
            components.assign(Component.MILLISECOND, int(fraction))

        return components.add_tag("parser/ENTimeExpressionParser")
