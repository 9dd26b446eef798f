"""Casual date words: now, today, tonight, tomorrow, yesterday, last night."""

from __future__ import annotations

import re
from datetime import timedelta

from chronoparse.parsers.base import AbstractParserWithWordBoundaryChecking
from chronoparse.parsing.components import (
    ParsingComponents,
    assign_similar_date,
    assign_similar_time,
)
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component, Meridiem

_PATTERN = r"(now|today|tonight|tomorrow|tmrw?|yesterday|last\s*night)(?=\W|$)"


class ENCasualDateParser(AbstractParserWithWordBoundaryChecking):
    def inner_pattern(self, context: ParsingContext) -> str:
        return _PATTERN

    def inner_extract(
        self, context: ParsingContext, match: re.Match[str]
    ) -> ParsingComponents | None:
        reference = context.reference.wall_clock
        keyword = re.sub(r"\s+", " ", match.group(1).lower())
        components = context.create_parsing_components()

        match keyword:
            case "now":
                assign_similar_date(components, reference)
                assign_similar_time(components, reference)
            case "today":
                assign_similar_date(components, reference)
            case "tonight":
                assign_similar_date(components, reference)
                components.imply(Component.HOUR, 22)
                components.imply(Component.MERIDIEM, Meridiem.PM)
            case "tomorrow" | "tmr" | "tmrw":
                assign_similar_date(components, reference + timedelta(days=1))
            case "yesterday":
                assign_similar_date(components, reference - timedelta(days=1))
            case "last night" | "lastnight":
                assign_similar_date(components, reference - timedelta(days=1))
                components.imply(Component.HOUR, 22)
                components.imply(Component.MERIDIEM, Meridiem.PM)
            case _:
                return None

        return components.add_tag("parser/ENCasualDateParser")
