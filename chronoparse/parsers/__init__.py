"""Parser contract and locale-independent parsers.

Components:
- base: Parser protocol, ExtractedValue union, word-boundary base class
- iso_format: ISO-8601 parser shared by every locale
- patterns: Regex helpers for dictionary-driven parsers
"""

from chronoparse.parsers.base import (
    AbstractParserWithWordBoundaryChecking,
    ExtractedValue,
    Parser,
)
from chronoparse.parsers.iso_format import ISOFormatParser

__all__ = [
    "AbstractParserWithWordBoundaryChecking",
    "ExtractedValue",
    "ISOFormatParser",
    "Parser",
]
