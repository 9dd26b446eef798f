"""English locale.

Components:
- casual: Chrono with every English parser
- strict: Chrono limited to explicit dates, rejecting results without
  a day and month

Usage:
    from chronoparse.locales import en

    en.parse("Lunch tomorrow at noon", datetime(2025, 1, 15))
    en.strict.parse("2025-01-20 and next week")  # only the ISO date
"""

from __future__ import annotations

from datetime import datetime

from chronoparse.chrono import Chrono, ReferenceInput
from chronoparse.configuration import include_common_configuration
from chronoparse.locales.en.parsers import (
    ENCasualDateParser,
    ENISOWeekNumberParser,
    ENMonthNameLittleEndianParser,
    ENMonthNameMiddleEndianParser,
    ENMonthNameParser,
    ENRelativeWeekParser,
    ENSlashDateFormatParser,
    ENTimeExpressionParser,
    ENTimeUnitAgoFormatParser,
    ENTimeUnitWithinFormatParser,
    ENWeekdayParser,
)
from chronoparse.locales.en.refiners import ENMergeDateRangeRefiner, ENMergeDateTimeRefiner
from chronoparse.parsers.base import Parser
from chronoparse.parsing.config import ParsingConfig
from chronoparse.parsing.context import ParsingOptions
from chronoparse.parsing.schemas import ParsedResult
from chronoparse.refiners.base import Refiner


def create_configuration(
    strict_mode: bool = True,
) -> tuple[list[Parser], list[Refiner]]:
    """Parsers and refiners for explicit English dates only."""
    parsers: list[Parser] = [
        ENMonthNameLittleEndianParser(),
        ENMonthNameMiddleEndianParser(),
        ENMonthNameParser(),
        ENSlashDateFormatParser(),
        ENTimeExpressionParser(),
    ]
    refiners: list[Refiner] = [
        ENMergeDateTimeRefiner(),
        ENMergeDateRangeRefiner(),
    ]
    return include_common_configuration(parsers, refiners, strict_mode)


def create_casual_configuration() -> tuple[list[Parser], list[Refiner]]:
    """Strict parsers plus casual and relative expressions."""
    parsers, refiners = create_configuration(strict_mode=False)
    # Insert after the ISO parser so explicit formats keep their order
    parsers[1:1] = [
        ENCasualDateParser(),
        ENWeekdayParser(),
        ENISOWeekNumberParser(),
        ENRelativeWeekParser(),
        ENTimeUnitWithinFormatParser(),
        ENTimeUnitAgoFormatParser(),
    ]
    return parsers, refiners


def create_casual(config: ParsingConfig | None = None) -> Chrono:
    return Chrono(*create_casual_configuration(), config=config)


def create_strict(config: ParsingConfig | None = None) -> Chrono:
    return Chrono(*create_configuration(strict_mode=True), config=config)


casual = create_casual()
strict = create_strict()


def parse(
    text: str,
    reference_date: ReferenceInput = None,
    options: ParsingOptions | None = None,
) -> list[ParsedResult]:
    return casual.parse(text, reference_date, options)


def parse_date(
    text: str,
    reference_date: ReferenceInput = None,
    options: ParsingOptions | None = None,
) -> datetime | None:
    return casual.parse_date(text, reference_date, options)


__all__ = [
    "ENMergeDateRangeRefiner",
    "ENMergeDateTimeRefiner",
    "casual",
    "create_casual",
    "create_casual_configuration",
    "create_configuration",
    "create_strict",
    "parse",
    "parse_date",
    "strict",
]
