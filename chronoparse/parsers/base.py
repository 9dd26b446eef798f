"""Parser contract.

A parser contributes one regex pattern and an extraction function. The
pipeline scans the text with the pattern and calls extract() for every
match; extract() returns whatever the match resolves to, or None to
reject it.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from chronoparse.parsing.components import ParsingComponents, ParsingResult
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component, ParsedResult

# What extract() may return. None rejects the match.
ExtractedValue = (
    ParsingComponents | Mapping[Component, int] | ParsingResult | ParsedResult | None
)


@runtime_checkable
class Parser(Protocol):
    """Anything with a pattern and an extract() method can be a parser."""

    def pattern(self, context: ParsingContext) -> str: ...

    def extract(self, context: ParsingContext, match: re.Match[str]) -> ExtractedValue: ...


class AbstractParserWithWordBoundaryChecking(ABC):
    """
    Base class for parsers whose matches must start on a word boundary.

    The guard is a zero-width lookbehind, so capture group numbers in
    inner_pattern() are unchanged.
    """

    _BOUNDARY = r"(?:(?<=\W)|^)"

    @abstractmethod
    def inner_pattern(self, context: ParsingContext) -> str:
        """Regex for the parser's expression, without the boundary guard."""

    @abstractmethod
    def inner_extract(self, context: ParsingContext, match: re.Match[str]) -> ExtractedValue:
        """Turn a match into components, or None to reject it."""

    def pattern(self, context: ParsingContext) -> str:
        return f"{self._BOUNDARY}{self.inner_pattern(context)}"

    def extract(self, context: ParsingContext, match: re.Match[str]) -> ExtractedValue:
        return self.inner_extract(context, match)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
