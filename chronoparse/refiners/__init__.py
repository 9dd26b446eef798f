"""Refiners: ordered post-processing of raw parse results.

Components:
- base: Refiner protocol, Filter and MergingRefiner shapes
- merge_date_range: "<date> to <date>" range merging
- merge_date_time: Date + time merging
- timezone_abbr: Trailing timezone abbreviations
- overlap_removal: Non-overlap guarantee
- forward_date: Forward-date heuristic
- unlikely_format: Calendar validity and strict-mode filter
"""

from chronoparse.refiners.base import Filter, MergingRefiner, Refiner
from chronoparse.refiners.forward_date import ForwardDateRefiner
from chronoparse.refiners.merge_date_range import (
    DEFAULT_RANGE_CONNECTORS,
    AbstractMergeDateRangeRefiner,
)
from chronoparse.refiners.merge_date_time import AbstractMergeDateTimeRefiner
from chronoparse.refiners.overlap_removal import OverlapRemovalRefiner
from chronoparse.refiners.timezone_abbr import TimezoneAbbrRefiner
from chronoparse.refiners.unlikely_format import UnlikelyFormatFilter

__all__ = [
    "AbstractMergeDateRangeRefiner",
    "AbstractMergeDateTimeRefiner",
    "DEFAULT_RANGE_CONNECTORS",
    "Filter",
    "ForwardDateRefiner",
    "MergingRefiner",
    "OverlapRemovalRefiner",
    "Refiner",
    "TimezoneAbbrRefiner",
    "UnlikelyFormatFilter",
]
