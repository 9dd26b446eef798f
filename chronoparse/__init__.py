"""chronoparse - natural-language date extraction.

Finds date and time references in free text ("next Friday at 3pm",
"in 2 weeks", "January 15 to January 20, 2025") and resolves them
against a reference instant.

Components:
- Chrono: Parser/refiner pipeline
- parsing: Value model, results, reference context
- parsers / refiners: Extension points and common implementations
- calendars: ISO week, month-length and timezone algorithms
- locales.en: English parsers and the default casual/strict instances

Usage:
    import chronoparse

    chronoparse.parse_date("tomorrow at 9am", datetime(2025, 1, 15))
    # -> datetime(2025, 1, 16, 9, 0)
"""

from chronoparse.chrono import Chrono
from chronoparse.locales.en import casual, parse, parse_date, strict
from chronoparse.parsing import (
    Component,
    Meridiem,
    ParsedResult,
    ParsedResultDate,
    ParsingComponents,
    ParsingContext,
    ParsingOptions,
    ParsingReference,
    ParsingResult,
    ReferenceDateError,
    Weekday,
)

__version__ = "0.1.0"

__all__ = [
    "Chrono",
    "Component",
    "Meridiem",
    "ParsedResult",
    "ParsedResultDate",
    "ParsingComponents",
    "ParsingContext",
    "ParsingOptions",
    "ParsingReference",
    "ParsingResult",
    "ReferenceDateError",
    "Weekday",
    "casual",
    "parse",
    "parse_date",
    "strict",
]
