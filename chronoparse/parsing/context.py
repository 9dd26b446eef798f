"""Reference instant, per-call options, and the shared parsing context.

A ParsingContext is built once per parse call and handed read-only to
every parser and refiner.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time, tzinfo

from dateutil.tz import tzoffset, tzutc

from chronoparse.calendars.timezones import AmbiguousTimezone, to_timezone_offset
from chronoparse.parsing.components import ParsingComponents, ParsingResult
from chronoparse.parsing.config import ParsingConfig
from chronoparse.parsing.schemas import Component

logger = logging.getLogger(__name__)

# Leaves room for +/- one year of arithmetic inside datetime's range
MIN_REFERENCE_YEAR = 2
MAX_REFERENCE_YEAR = 9998


class ReferenceDateError(ValueError):
    """Raised when a reference instant cannot anchor a parse."""


@dataclass(frozen=True)
class ParsingReference:
    """
    Reference instant with an optional timezone.

    Attributes:
        instant: The "now" that relative expressions resolve against.
        timezone: Offset in minutes, abbreviation, or IANA name.
    """

    instant: datetime | date | int | float | None = None
    timezone: int | str | None = None


@dataclass(frozen=True)
class ParsingOptions:
    """
    Per-call switches.

    Attributes:
        forward_date: Move year-ambiguous dates just before the
            reference into the following year.
        debug: True to log pipeline decisions, or a callable sink.
        timezones: Abbreviation overrides, consulted before the
            built-in table.
    """

    forward_date: bool = False
    debug: bool | Callable[[str], None] | None = None
    timezones: Mapping[str, int | AmbiguousTimezone] | None = None


@dataclass(frozen=True)
class ReferenceWithTimezone:
    """Resolved reference: the instant plus its offset, if any."""

    instant: datetime
    timezone_offset: int | None = None

    @property
    def tzinfo(self) -> tzinfo | None:
        if self.timezone_offset is not None:
            return tzoffset(None, self.timezone_offset * 60)
        return self.instant.tzinfo

    @property
    def wall_clock(self) -> datetime:
        """The reference as a naive local datetime in its own timezone."""
        if self.instant.tzinfo is None:
            return self.instant
        return self.instant.astimezone(self.tzinfo).replace(tzinfo=None)


def _coerce_instant(value: object, aware_now: bool) -> datetime:
    if value is None:
        return datetime.now(tzutc()) if aware_now else datetime.now()
    if isinstance(value, bool):
        raise ReferenceDateError(f"Unsupported reference date: {value!r}")
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=tzutc())
        except (OverflowError, OSError, ValueError) as e:
            raise ReferenceDateError(f"Reference timestamp out of range: {value!r}") from e
    raise ReferenceDateError(f"Unsupported reference date type: {type(value).__name__}")


def resolve_reference(
    reference_date: ParsingReference | datetime | date | int | float | None = None,
    default_timezone: int | str | None = None,
    overrides: Mapping[str, int | AmbiguousTimezone] | None = None,
) -> ReferenceWithTimezone:
    """
    Validate a caller's reference and resolve its timezone.

    Naive instants paired with a timezone are read as wall-clock time
    in that timezone.

    Raises:
        ReferenceDateError: If the reference is of an unsupported type or
            too close to the ends of the representable calendar.
    """
    timezone = default_timezone
    if isinstance(reference_date, ParsingReference):
        if reference_date.timezone is not None:
            timezone = reference_date.timezone
        reference_date = reference_date.instant

    instant = _coerce_instant(reference_date, aware_now=timezone is not None)
    if not MIN_REFERENCE_YEAR <= instant.year <= MAX_REFERENCE_YEAR:
        raise ReferenceDateError(
            f"Reference year {instant.year} outside "
            f"{MIN_REFERENCE_YEAR}..{MAX_REFERENCE_YEAR}"
        )

    offset = to_timezone_offset(timezone, instant, overrides)
    if timezone is not None and offset is None:
        logger.debug(f"Unknown reference timezone {timezone!r}, ignoring")
    if offset is not None and instant.tzinfo is None:
        instant = instant.replace(tzinfo=tzoffset(None, offset * 60))

    return ReferenceWithTimezone(instant=instant, timezone_offset=offset)


@dataclass(frozen=True)
class ParsingContext:
    """
    Everything parsers and refiners may read during one parse call.

    Attributes:
        text: The full input text.
        reference: Resolved reference instant.
        options: Per-call options.
        config: Pipeline defaults and merge limits.
    """

    text: str
    reference: ReferenceWithTimezone
    options: ParsingOptions = field(default_factory=ParsingOptions)
    config: ParsingConfig = field(default_factory=ParsingConfig)

    @property
    def timezone_overrides(self) -> Mapping[str, int | AmbiguousTimezone]:
        return self.options.timezones or {}

    def create_parsing_components(
        self, components: Mapping[Component, int] | None = None
    ) -> ParsingComponents:
        return ParsingComponents(self.reference, components)

    def create_parsing_result(
        self,
        index: int,
        text: str,
        start: ParsingComponents | Mapping[Component, int] | None = None,
        end: ParsingComponents | Mapping[Component, int] | None = None,
    ) -> ParsingResult:
        if not isinstance(start, ParsingComponents):
            start = self.create_parsing_components(start)
        if end is not None and not isinstance(end, ParsingComponents):
            end = self.create_parsing_components(end)
        return ParsingResult(
            reference=self.reference, index=index, text=text, start=start, end=end
        )

    def debug(self, message: str) -> None:
        sink = self.options.debug
        if callable(sink):
            sink(message)
        elif sink:
            logger.debug(message)
