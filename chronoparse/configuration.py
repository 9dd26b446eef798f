"""Shared parser/refiner setup applied around every locale."""

from __future__ import annotations

from chronoparse.parsers.base import Parser
from chronoparse.parsers.iso_format import ISOFormatParser
from chronoparse.refiners.base import Refiner
from chronoparse.refiners.forward_date import ForwardDateRefiner
from chronoparse.refiners.overlap_removal import OverlapRemovalRefiner
from chronoparse.refiners.timezone_abbr import TimezoneAbbrRefiner
from chronoparse.refiners.unlikely_format import UnlikelyFormatFilter


def include_common_configuration(
    parsers: list[Parser],
    refiners: list[Refiner],
    strict_mode: bool = False,
) -> tuple[list[Parser], list[Refiner]]:
    """
    Wrap locale parsers and refiners with the common ones.

    Parsers: ISO format first, then the locale's.
    Refiners: overlap removal, the locale's merges, timezone
    abbreviations, overlap removal again (merges can create new
    overlaps), forward date, then the unlikely-format filter last.
    """
    common_parsers: list[Parser] = [ISOFormatParser(), *parsers]
    common_refiners: list[Refiner] = [
        OverlapRemovalRefiner(),
        *refiners,
        TimezoneAbbrRefiner(),
        OverlapRemovalRefiner(),
        ForwardDateRefiner(),
        UnlikelyFormatFilter(strict_mode),
    ]
    return common_parsers, common_refiners
