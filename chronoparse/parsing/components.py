"""Certainty-tagged value model and raw parsing results.

ParsingComponents holds the fields a parser recognised, each tagged as
known (stated in the text) or implied (filled from the reference or a
default). ParsingResult ties a pair of components to the span of text
that produced them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

from dateutil.tz import tzoffset

from chronoparse.calendars.iso_week import iso_week_of, iso_week_start
from chronoparse.parsing.schemas import Component, ParsedResult, ParsedResultDate

if TYPE_CHECKING:
    from chronoparse.parsing.context import ParsingContext, ReferenceWithTimezone


class ParsingComponents:
    """
    Mutable field map for one side of a candidate match.

    Construction implies the reference's calendar date and a noon
    default time. Parsers then assign what the text states.

    Usage:
        components = ParsingComponents(reference)
        components.assign(Component.MONTH, 3)
        components.imply(Component.YEAR, 2025)
        components.date()  # -> datetime(2025, 3, <ref day>, 12, 0)
    """

    def __init__(
        self,
        reference: ReferenceWithTimezone,
        known_components: Mapping[Component, int] | None = None,
    ):
        self.reference = reference
        self._known: dict[Component, int] = {}
        self._implied: dict[Component, int] = {}
        self._tags: set[str] = set()

        wall = reference.wall_clock
        self.imply(Component.DAY, wall.day)
        self.imply(Component.MONTH, wall.month)
        self.imply(Component.YEAR, wall.year)
        self.imply(Component.HOUR, 12)
        self.imply(Component.MINUTE, 0)
        self.imply(Component.SECOND, 0)
        self.imply(Component.MILLISECOND, 0)

        if known_components:
            for component, value in known_components.items():
                self.assign(component, value)

    @classmethod
    def from_public(
        cls, reference: ReferenceWithTimezone, parsed: ParsedResultDate
    ) -> ParsingComponents:
        """Rebuild components from a public result, keeping certainty."""
        components = cls(reference)
        for component, value in parsed.implied_values.items():
            components.imply(component, value)
        for component, value in parsed.known_values.items():
            components.assign(component, value)
        return components

    def __repr__(self) -> str:
        return f"ParsingComponents(known={self._known!r}, implied={self._implied!r})"

    def get(self, component: Component) -> int | None:
        if component in self._known:
            return self._known[component]
        return self._implied.get(component)

    def is_certain(self, component: Component) -> bool:
        return component in self._known

    def assign(self, component: Component, value: int) -> ParsingComponents:
        self._known[component] = value
        self._implied.pop(component, None)
        return self

    def imply(self, component: Component, value: int) -> ParsingComponents:
        """Set a default. Never overrides a known value."""
        if component not in self._known:
            self._implied[component] = value
        return self

    def set_certain(self, component: Component) -> ParsingComponents:
        """
        Promote an implied value to known.

        Raises:
            KeyError: If the component has no implied value.
        """
        if component in self._known:
            return self
        self._known[component] = self._implied.pop(component)
        return self

    def delete(self, *components: Component) -> ParsingComponents:
        for component in components:
            self._known.pop(component, None)
            self._implied.pop(component, None)
        return self

    def get_certain_components(self) -> list[Component]:
        return list(self._known)

    @property
    def known_values(self) -> dict[Component, int]:
        return dict(self._known)

    @property
    def implied_values(self) -> dict[Component, int]:
        return dict(self._implied)

    @property
    def tags(self) -> frozenset[str]:
        return frozenset(self._tags)

    def add_tag(self, tag: str) -> ParsingComponents:
        self._tags.add(tag)
        return self

    def clone(self) -> ParsingComponents:
        copy = ParsingComponents.__new__(ParsingComponents)
        copy.reference = self.reference
        copy._known = dict(self._known)
        copy._implied = dict(self._implied)
        copy._tags = set(self._tags)
        return copy

    def has_date_fields(self) -> bool:
        return any(
            self.is_certain(c)
            for c in (
                Component.DAY,
                Component.MONTH,
                Component.YEAR,
                Component.WEEKDAY,
                Component.ISO_WEEK,
            )
        )

    def has_time_fields(self) -> bool:
        return self.is_certain(Component.HOUR)

    def wall_clock(self) -> datetime | None:
        """
        Resolve to a naive datetime in the reference's local time.

        Returns:
            The datetime, or None if the fields do not form a real date.
        """
        try:
            return self._resolve_wall_clock()
        except (ValueError, OverflowError):
            return None

    def _resolve_wall_clock(self) -> datetime | None:
        iso_week = self.get(Component.ISO_WEEK)
        if iso_week is not None and not self.is_certain(Component.DAY):
            week_year = self.get(Component.ISO_WEEK_YEAR)
            if week_year is None:
                week_year = iso_week_of(self.reference.wall_clock.date())[1]
            monday = iso_week_start(iso_week, week_year)
            year, month, day = monday.year, monday.month, monday.day
        else:
            year = self.get(Component.YEAR)
            month = self.get(Component.MONTH)
            day = self.get(Component.DAY)
            if year is None or month is None or day is None:
                return None

        hour = self.get(Component.HOUR) or 0
        rollover = hour == 24
        if rollover:
            hour = 0

        resolved = datetime(
            year,
            month,
            day,
            hour,
            self.get(Component.MINUTE) or 0,
            self.get(Component.SECOND) or 0,
            (self.get(Component.MILLISECOND) or 0) * 1000,
        )
        if rollover:
            resolved += timedelta(days=1)
        return resolved

    def date(self) -> datetime | None:
        """
        Resolve to a datetime.

        Aware in the stated offset when one is known, otherwise in the
        reference's timezone; naive when the reference is naive.
        """
        wall = self.wall_clock()
        if wall is None:
            return None
        offset = self.get(Component.TIMEZONE_OFFSET)
        if offset is not None:
            return wall.replace(tzinfo=tzoffset(None, offset * 60))
        return wall.replace(tzinfo=self.reference.tzinfo)

    def to_public(self) -> ParsedResultDate | None:
        resolved = self.date()
        if resolved is None:
            return None
        return ParsedResultDate(
            date=resolved,
            known_values=self.known_values,
            implied_values=self.implied_values,
        )


@dataclass(frozen=True)
class ParsingResult:
    """
    A raw match: a span of input text and the components it produced.

    Refiners never mutate a ParsingResult; they derive new ones.

    Attributes:
        reference: Reference the components were resolved against.
        index: Offset of the span in the input text.
        text: The span itself.
        start: Components of the start (or only) side.
        end: Components of the end side for ranges.
    """

    reference: ReferenceWithTimezone
    index: int
    text: str
    start: ParsingComponents
    end: ParsingComponents | None = None

    @classmethod
    def from_span(
        cls,
        context: ParsingContext,
        index: int,
        end_index: int,
        start: ParsingComponents,
        end: ParsingComponents | None = None,
    ) -> ParsingResult:
        """Build a result whose text is sliced from the original input."""
        return cls(
            reference=context.reference,
            index=index,
            text=context.text[index:end_index],
            start=start,
            end=end,
        )

    @classmethod
    def from_public(
        cls, reference: ReferenceWithTimezone, parsed: ParsedResult
    ) -> ParsingResult:
        return cls(
            reference=reference,
            index=parsed.index,
            text=parsed.text,
            start=ParsingComponents.from_public(reference, parsed.start),
            end=ParsingComponents.from_public(reference, parsed.end) if parsed.end else None,
        )

    @property
    def end_index(self) -> int:
        return self.index + len(self.text)

    def is_range(self) -> bool:
        return self.end is not None

    def date(self) -> datetime | None:
        return self.start.date()

    def to_public(self) -> ParsedResult | None:
        start = self.start.to_public()
        if start is None:
            return None
        end = self.end.to_public() if self.end is not None else None
        return ParsedResult(index=self.index, text=self.text, start=start, end=end)


def assign_similar_date(components: ParsingComponents, target: date) -> None:
    components.assign(Component.YEAR, target.year)
    components.assign(Component.MONTH, target.month)
    components.assign(Component.DAY, target.day)


def imply_similar_date(components: ParsingComponents, target: date) -> None:
    components.imply(Component.YEAR, target.year)
    components.imply(Component.MONTH, target.month)
    components.imply(Component.DAY, target.day)


def assign_similar_time(components: ParsingComponents, target: datetime) -> None:
    components.assign(Component.HOUR, target.hour)
    components.assign(Component.MINUTE, target.minute)
    components.assign(Component.SECOND, target.second)
    components.assign(Component.MILLISECOND, target.microsecond // 1000)


def imply_similar_time(components: ParsingComponents, target: datetime) -> None:
    components.imply(Component.HOUR, target.hour)
    components.imply(Component.MINUTE, target.minute)
    components.imply(Component.SECOND, target.second)
    components.imply(Component.MILLISECOND, target.microsecond // 1000)
