"""English parsers."""

from chronoparse.locales.en.parsers.casual_date import ENCasualDateParser
from chronoparse.locales.en.parsers.iso_week_number import ENISOWeekNumberParser
from chronoparse.locales.en.parsers.month_name import (
    ENMonthNameLittleEndianParser,
    ENMonthNameMiddleEndianParser,
    ENMonthNameParser,
)
from chronoparse.locales.en.parsers.relative_week import ENRelativeWeekParser
from chronoparse.locales.en.parsers.slash_date import ENSlashDateFormatParser
from chronoparse.locales.en.parsers.time_expression import ENTimeExpressionParser
from chronoparse.locales.en.parsers.time_unit import (
    ENTimeUnitAgoFormatParser,
    ENTimeUnitWithinFormatParser,
)
from chronoparse.locales.en.parsers.weekday import ENWeekdayParser

__all__ = [
    "ENCasualDateParser",
    "ENISOWeekNumberParser",
    "ENMonthNameLittleEndianParser",
    "ENMonthNameMiddleEndianParser",
    "ENMonthNameParser",
    "ENRelativeWeekParser",
    "ENSlashDateFormatParser",
    "ENTimeExpressionParser",
    "ENTimeUnitAgoFormatParser",
    "ENTimeUnitWithinFormatParser",
    "ENWeekdayParser",
]
