"""English dictionaries shared by the EN parsers."""

from __future__ import annotations

from dateutil.relativedelta import relativedelta

from chronoparse.parsers.patterns import match_any_pattern

WEEKDAY_DICTIONARY: dict[str, int] = {
    "sunday": 0, "sun": 0,
    "monday": 1, "mon": 1,
    "tuesday": 2, "tues": 2, "tue": 2,
    "wednesday": 3, "wed": 3,
    "thursday": 4, "thurs": 4, "thur": 4, "thu": 4,
    "friday": 5, "fri": 5,
    "saturday": 6, "sat": 6,
}

MONTH_DICTIONARY: dict[str, int] = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sept": 9, "sep": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

INTEGER_WORD_DICTIONARY: dict[str, int] = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5, "six": 6,
    "seven": 7, "eight": 8, "nine": 9, "ten": 10, "eleven": 11, "twelve": 12,
}

# Time units as relativedelta keyword arguments
TIME_UNIT_DICTIONARY: dict[str, str] = {
    "sec": "seconds", "secs": "seconds", "second": "seconds", "seconds": "seconds",
    "min": "minutes", "mins": "minutes", "minute": "minutes", "minutes": "minutes",
    "hr": "hours", "hrs": "hours", "hour": "hours", "hours": "hours",
    "day": "days", "days": "days",
    "wk": "weeks", "wks": "weeks", "week": "weeks", "weeks": "weeks",
    "mo": "months", "month": "months", "months": "months",
    "yr": "years", "yrs": "years", "year": "years", "years": "years",
}

WEEKDAY_PATTERN = match_any_pattern(WEEKDAY_DICTIONARY)
MONTH_PATTERN = match_any_pattern(MONTH_DICTIONARY)
TIME_UNIT_PATTERN = match_any_pattern(TIME_UNIT_DICTIONARY)
NUMBER_PATTERN = (
    r"(?:\d+|" + match_any_pattern([*INTEGER_WORD_DICTIONARY, "an", "a"]) + r")"
)
ORDINAL_SUFFIX_PATTERN = r"(?:st|nd|rd|th)"


def parse_number(text: str) -> int:
    """Parse "3", "three" or "a"/"an" (one)."""
    text = text.strip().lower()
    if text in INTEGER_WORD_DICTIONARY:
        return INTEGER_WORD_DICTIONARY[text]
    if text in ("a", "an"):
        return 1
    return int(text)


def parse_month(text: str) -> int:
    return MONTH_DICTIONARY[text.lower().rstrip(".")]


def parse_time_unit(number_text: str, unit_text: str) -> relativedelta:
    """Build a relativedelta from "3" + "days"."""
    unit = TIME_UNIT_DICTIONARY[unit_text.lower()]
    return relativedelta(**{unit: parse_number(number_text)})
