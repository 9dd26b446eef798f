"""Helpers for building parser regexes from dictionaries."""

from __future__ import annotations

import re
from collections.abc import Iterable


def match_any_pattern(words: Iterable[str]) -> str:
    """
    Build a non-capturing alternation of literal words.

    Longer words come first so "sept" wins over "sep".

    Example:
        match_any_pattern({"jan": 1, "january": 1}) -> "(?:january|jan)"
    """
    ordered = sorted(words, key=lambda w: (-len(w), w))
    return "(?:" + "|".join(_escape_words(w) for w in ordered) + ")"


def _escape_words(phrase: str) -> str:
    # Multi-word phrases match any run of whitespace between words
    return r"\s+".join(re.escape(part) for part in phrase.split())


def find_most_likely_adjacent_year(year_number: int, reference_year: int) -> int:
    """Expand a two-digit year to the century closest to the reference."""
    if year_number >= 100:
        return year_number
    century = reference_year - reference_year % 100
    candidates = (century - 100 + year_number, century + year_number, century + 100 + year_number)
    return min(candidates, key=lambda y: abs(y - reference_year))
