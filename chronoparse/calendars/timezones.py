"""Timezone abbreviation resolution.

Maps abbreviations such as "EST" or "CET" to UTC offsets in minutes.
Some abbreviations ("ET", "CT", "CET") name a zone rather than a fixed
offset; those are AmbiguousTimezone entries whose offset depends on
whether the instant falls inside the zone's yearly DST window.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from types import MappingProxyType

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta
from dateutil.tz import gettz, tzoffset, tzutc

# Indexed by weekday number (0 = Sunday)
_DATEUTIL_WEEKDAYS = (SU, MO, TU, WE, TH, FR, SA)
_SUNDAY = 0


@dataclass(frozen=True)
class AmbiguousTimezone:
    """
    A zone whose offset switches between standard and daylight time.

    Attributes:
        offset_during_dst: Offset in minutes inside the DST window.
        offset_non_dst: Offset in minutes outside it.
        dst_start: Returns the UTC instant DST begins in a given year.
        dst_end: Returns the UTC instant DST ends in a given year.
    """

    offset_during_dst: int
    offset_non_dst: int
    dst_start: Callable[[int], datetime]
    dst_end: Callable[[int], datetime]

    def offset_at(self, instant: datetime) -> int:
        """Offset at an instant. Naive values are local standard time."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=tzoffset(None, self.offset_non_dst * 60))
        instant = instant.astimezone(tzutc())
        if self.dst_start(instant.year) <= instant < self.dst_end(instant.year):
            return self.offset_during_dst
        return self.offset_non_dst


TimezoneAbbrMap = Mapping[str, "int | AmbiguousTimezone"]


def get_nth_weekday_of_month(
    year: int, month: int, weekday: int, n: int, hour: int = 0
) -> datetime:
    """
    Get the nth occurrence of a weekday in a month, at the given UTC hour.

    Example:
        get_nth_weekday_of_month(2025, 3, 0, 2, hour=2)  # second Sunday
        -> 2025-03-09 02:00 UTC
    """
    first = datetime(year, month, 1, hour, tzinfo=tzutc())
    return first + relativedelta(weekday=_DATEUTIL_WEEKDAYS[weekday](+n))


def get_last_weekday_of_month(
    year: int, month: int, weekday: int, hour: int = 0
) -> datetime:
    """Get the last occurrence of a weekday in a month, at the given UTC hour."""
    first = datetime(year, month, 1, hour, tzinfo=tzutc())
    return first + relativedelta(day=31, weekday=_DATEUTIL_WEEKDAYS[weekday](-1))


def _us_dst_zone(dst_offset: int, standard_offset: int) -> AmbiguousTimezone:
    # Second Sunday of March to first Sunday of November, 02:00 local
    start_hour = 2 - standard_offset // 60
    end_hour = 2 - dst_offset // 60
    return AmbiguousTimezone(
        offset_during_dst=dst_offset,
        offset_non_dst=standard_offset,
        dst_start=lambda year: get_nth_weekday_of_month(year, 3, _SUNDAY, 2, hour=start_hour),
        dst_end=lambda year: get_nth_weekday_of_month(year, 11, _SUNDAY, 1, hour=end_hour),
    )


def _eu_dst_zone(dst_offset: int, standard_offset: int) -> AmbiguousTimezone:
    # Last Sunday of March to last Sunday of October, 01:00 UTC
    return AmbiguousTimezone(
        offset_during_dst=dst_offset,
        offset_non_dst=standard_offset,
        dst_start=lambda year: get_last_weekday_of_month(year, 3, _SUNDAY, hour=1),
        dst_end=lambda year: get_last_weekday_of_month(year, 10, _SUNDAY, hour=1),
    )


@lru_cache(maxsize=1)
def get_timezone_abbr_map() -> TimezoneAbbrMap:
    """
    Get the built-in abbreviation table.

    Built once and returned as a read-only mapping.
    """
    table: dict[str, int | AmbiguousTimezone] = {
        "ACDT": 630,
        "ACST": 570,
        "ADT": -180,
        "AEDT": 660,
        "AEST": 600,
        "AFT": 270,
        "AKDT": -480,
        "AKST": -540,
        "ALMT": 360,
        "AMST": -180,
        "AMT": -240,
        "ANAST": 720,
        "ANAT": 720,
        "AQTT": 300,
        "ART": -180,
        "AST": -240,
        "AWDT": 540,
        "AWST": 480,
        "AZOST": 0,
        "AZOT": -60,
        "AZST": 300,
        "AZT": 240,
        "BNT": 480,
        "BOT": -240,
        "BRST": -120,
        "BRT": -180,
        "BST": 60,
        "BTT": 360,
        "CAST": 480,
        "CAT": 120,
        "CCT": 390,
        "CDT": -300,
        "CEST": 120,
        "CET": _eu_dst_zone(120, 60),
        "CHADT": 825,
        "CHAST": 765,
        "CKT": -600,
        "CLST": -180,
        "CLT": -240,
        "COT": -300,
        "CST": -360,
        "CT": _us_dst_zone(-300, -360),
        "CVT": -60,
        "CXT": 420,
        "ChST": 600,
        "DAVT": 420,
        "EASST": -300,
        "EAST": -360,
        "EAT": 180,
        "ECT": -300,
        "EDT": -240,
        "EEST": 180,
        "EET": 120,
        "EGST": 0,
        "EGT": -60,
        "EST": -300,
        "ET": _us_dst_zone(-240, -300),
        "GMT": 0,
        "HKT": 480,
        "HST": -600,
        "IST": 330,
        "JST": 540,
        "KST": 540,
        "MDT": -360,
        "MSK": 180,
        "MST": -420,
        "MT": _us_dst_zone(-360, -420),
        "NZDT": 780,
        "NZST": 720,
        "PDT": -420,
        "PST": -480,
        "PT": _us_dst_zone(-420, -480),
        "SGT": 480,
        "UTC": 0,
        "WEST": 60,
        "WET": 0,
    }
    return MappingProxyType(table)


def to_timezone_offset(
    timezone: int | str | None,
    instant: datetime | None = None,
    overrides: TimezoneAbbrMap | None = None,
) -> int | None:
    """
    Resolve a timezone to an offset in minutes east of UTC.

    Lookup order: integer offsets as-is, then overrides, then the
    built-in abbreviation table, then IANA zone names.

    Args:
        timezone: Offset in minutes, abbreviation, or IANA name.
        instant: Instant used to pick DST vs standard offsets. Naive
            values are wall-clock time in the zone being resolved.
            Defaults to now.
        overrides: Caller-supplied abbreviations, checked first.

    Returns:
        Offset in minutes, or None if the timezone is unknown.
    """
    if timezone is None or isinstance(timezone, bool):
        return None
    if isinstance(timezone, int):
        return timezone
    if not timezone:
        return None

    moment = instant if instant is not None else datetime.now(tzutc())

    if overrides and timezone in overrides:
        matched = overrides[timezone]
    else:
        matched = get_timezone_abbr_map().get(timezone)

    if isinstance(matched, AmbiguousTimezone):
        return matched.offset_at(moment)
    if isinstance(matched, int):
        return matched

    zone = gettz(timezone)
    if zone is None:
        return None
    if moment.tzinfo is None:
        offset = moment.replace(tzinfo=zone).utcoffset()
    else:
        offset = moment.astimezone(zone).utcoffset()
    if offset is None:
        return None
    return int(offset.total_seconds() // 60)
