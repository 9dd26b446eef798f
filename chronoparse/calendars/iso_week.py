"""ISO-8601 week arithmetic.

Weeks start on Monday and week 1 is the week holding the year's first
Thursday, so the week-year can differ from the calendar year around
New Year.
"""

from datetime import date, timedelta


def iso_week_start(week: int, week_year: int) -> date:
    """
    Get the Monday of an ISO week.

    Raises:
        ValueError: If the week-year has no such week (e.g. week 53 of
            a 52-week year).
    """
    return date.fromisocalendar(week_year, week, 1)


def iso_week_of(d: date) -> tuple[int, int]:
    """Return (week, week_year) for a date."""
    iso = d.isocalendar()
    return iso.week, iso.year


def weeks_in_iso_year(week_year: int) -> int:
    # Dec 28 always falls in the last ISO week of its year
    return date(week_year, 12, 28).isocalendar().week


def shift_iso_week(week: int, week_year: int, offset: int) -> tuple[int, int]:
    """Move an ISO week by a number of weeks, crossing week-years as needed."""
    monday = iso_week_start(week, week_year) + timedelta(weeks=offset)
    return iso_week_of(monday)
