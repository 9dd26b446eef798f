"""Core parsing data model.

Components:
- schemas: Component vocabulary and public result models
- components: Certainty-tagged value model and raw results
- context: Reference instant, options, and per-call context
- config: Pipeline defaults from the environment
"""

from chronoparse.parsing.components import ParsingComponents, ParsingResult
from chronoparse.parsing.config import ParsingConfig
from chronoparse.parsing.context import (
    ParsingContext,
    ParsingOptions,
    ParsingReference,
    ReferenceDateError,
    ReferenceWithTimezone,
    resolve_reference,
)
from chronoparse.parsing.schemas import (
    DATE_COMPONENTS,
    TIME_COMPONENTS,
    Component,
    Meridiem,
    ParsedResult,
    ParsedResultDate,
    Weekday,
)

__all__ = [
    "Component",
    "DATE_COMPONENTS",
    "Meridiem",
    "ParsedResult",
    "ParsedResultDate",
    "ParsingComponents",
    "ParsingConfig",
    "ParsingContext",
    "ParsingOptions",
    "ParsingReference",
    "ParsingResult",
    "ReferenceDateError",
    "ReferenceWithTimezone",
    "TIME_COMPONENTS",
    "Weekday",
    "resolve_reference",
]
