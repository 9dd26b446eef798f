"""Public schemas for parsed date results.

Defines the component vocabulary shared by parsers and refiners, and
the frozen result models returned to callers.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Component(str, Enum):
    """Calendar/time fields a parser can fill."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    WEEKDAY = "weekday"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    MERIDIEM = "meridiem"
    TIMEZONE_OFFSET = "timezone_offset"
    ISO_WEEK = "iso_week"
    ISO_WEEK_YEAR = "iso_week_year"


class Meridiem(int, Enum):
    AM = 0
    PM = 1


class Weekday(int, Enum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


# Fields copied from the date side / time side when merging results
DATE_COMPONENTS: tuple[Component, ...] = (
    Component.YEAR,
    Component.MONTH,
    Component.DAY,
    Component.WEEKDAY,
    Component.ISO_WEEK,
    Component.ISO_WEEK_YEAR,
)
TIME_COMPONENTS: tuple[Component, ...] = (
    Component.HOUR,
    Component.MINUTE,
    Component.SECOND,
    Component.MILLISECOND,
    Component.MERIDIEM,
    Component.TIMEZONE_OFFSET,
)


class ParsedResultDate(BaseModel):
    """
    One resolved side (start or end) of a parsed result.

    Attributes:
        date: Resolved datetime. Aware when a timezone is known.
        known_values: Fields stated in the text.
        implied_values: Fields filled from the reference or defaults.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime
    known_values: dict[Component, int] = Field(default_factory=dict)
    implied_values: dict[Component, int] = Field(default_factory=dict)

    def get(self, component: Component) -> int | None:
        if component in self.known_values:
            return self.known_values[component]
        return self.implied_values.get(component)

    def is_certain(self, component: Component) -> bool:
        return component in self.known_values

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "known_values": {c.value: v for c, v in self.known_values.items()},
            "implied_values": {c.value: v for c, v in self.implied_values.items()},
        }


class ParsedResult(BaseModel):
    """
    A date reference found in text.

    Attributes:
        index: Offset of the match in the input text.
        text: Matched substring.
        start: Resolved start of the reference.
        end: Resolved end when the reference is a range.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    text: str
    start: ParsedResultDate
    end: ParsedResultDate | None = None

    @property
    def end_index(self) -> int:
        return self.index + len(self.text)

    @property
    def date(self) -> datetime:
        return self.start.date

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "text": self.text,
            "start": self.start.to_dict(),
            "end": self.end.to_dict() if self.end else None,
        }
