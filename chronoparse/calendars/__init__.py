"""Calendar algorithms used by parsers and refiners.

Components:
- iso_week: ISO-8601 week start and week-of-date arithmetic
- validity: Leap years and month lengths
- timezones: DST-aware timezone abbreviation table
"""

from chronoparse.calendars.iso_week import (
    iso_week_of,
    iso_week_start,
    shift_iso_week,
    weeks_in_iso_year,
)
from chronoparse.calendars.timezones import (
    AmbiguousTimezone,
    get_last_weekday_of_month,
    get_nth_weekday_of_month,
    get_timezone_abbr_map,
    to_timezone_offset,
)
from chronoparse.calendars.validity import days_in_month, is_leap_year, is_valid_date

__all__ = [
    "AmbiguousTimezone",
    "days_in_month",
    "get_last_weekday_of_month",
    "get_nth_weekday_of_month",
    "get_timezone_abbr_map",
    "is_leap_year",
    "is_valid_date",
    "iso_week_of",
    "iso_week_start",
    "shift_iso_week",
    "to_timezone_offset",
    "weeks_in_iso_year",
]
