"""Reject results whose known fields cannot describe a real date/time."""

from __future__ import annotations

from chronoparse.calendars.validity import is_valid_date
from chronoparse.parsing.components import ParsingComponents, ParsingResult
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component
from chronoparse.refiners.base import Filter


def _out_of_range(
    components: ParsingComponents, component: Component, low: int, high: int
) -> bool:
    if not components.is_certain(component):
        return False
    return not low <= components.get(component) <= high


def is_valid_components(components: ParsingComponents) -> bool:
    """
    Check known fields against calendar limits.

    Day is checked against the real length of its month, using the
    resolved (known or implied) month and year.
    """
    if _out_of_range(components, Component.YEAR, 0, 9999):
        return False
    if _out_of_range(components, Component.MONTH, 1, 12):
        return False

    if components.is_certain(Component.DAY):
        day = components.get(Component.DAY)
        if not 1 <= day <= 31:
            return False
        month = components.get(Component.MONTH)
        year = components.get(Component.YEAR)
        if month is not None and year is not None and 1 <= month <= 12:
            if not is_valid_date(year, month, day):
                return False

    if _out_of_range(components, Component.HOUR, 0, 24):
        return False
    if components.get(Component.HOUR) == 24 and components.is_certain(Component.HOUR):
        for component in (Component.MINUTE, Component.SECOND, Component.MILLISECOND):
            if components.get(component):
                return False

    if _out_of_range(components, Component.MINUTE, 0, 59):
        return False
    if _out_of_range(components, Component.SECOND, 0, 59):
        return False
    return True


class UnlikelyFormatFilter(Filter):
    """
    Drop results with impossible fields.

    In strict mode also drops results that do not name a day (or
    weekday) and a month, such as a bare "3pm".
    """

    def __init__(self, strict_mode: bool = False):
        self.strict_mode = strict_mode

    def is_valid(self, context: ParsingContext, result: ParsingResult) -> bool:
        if not is_valid_components(result.start):
            context.debug(f"UnlikelyFormatFilter removed {result.text!r}: invalid start")
            return False
        if result.end is not None and not is_valid_components(result.end):
            context.debug(f"UnlikelyFormatFilter removed {result.text!r}: invalid end")
            return False
        if self.strict_mode and not self._is_strictly_specific(result.start):
            context.debug(f"UnlikelyFormatFilter removed {result.text!r}: not specific")
            return False
        return True

    @staticmethod
    def _is_strictly_specific(components: ParsingComponents) -> bool:
        has_day = components.is_certain(Component.DAY) or components.is_certain(
            Component.WEEKDAY
        )
        return has_day and components.is_certain(Component.MONTH)
