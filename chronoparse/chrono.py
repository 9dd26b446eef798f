"""Pipeline orchestrator.

Runs every parser over the text, sorts the raw results, threads them
through the refiners in order, and converts the survivors into public
ParsedResult objects.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Iterable, Mapping
from datetime import date, datetime

from chronoparse.config.settings import get_settings
from chronoparse.observability.metrics import get_metrics
from chronoparse.parsers.base import ExtractedValue, Parser
from chronoparse.parsing.components import ParsingComponents, ParsingResult
from chronoparse.parsing.config import ParsingConfig
from chronoparse.parsing.context import (
    ParsingContext,
    ParsingOptions,
    ParsingReference,
    resolve_reference,
)
from chronoparse.parsing.schemas import ParsedResult
from chronoparse.refiners.base import Refiner

logger = logging.getLogger(__name__)

ReferenceInput = ParsingReference | datetime | date | int | float | None


class Chrono:
    """
    A configured parser/refiner pipeline.

    Instances are cheap to clone; add_parser() and add_refiner() only
    affect the instance they are called on.

    Usage:
        chrono = Chrono(parsers=[ISOFormatParser()], refiners=[OverlapRemovalRefiner()])
        results = chrono.parse("Due 2025-01-20", datetime(2025, 1, 15))
        results[0].start.date  # -> datetime(2025, 1, 20, 12, 0)
    """

    def __init__(
        self,
        parsers: Iterable[Parser] | None = None,
        refiners: Iterable[Refiner] | None = None,
        config: ParsingConfig | None = None,
    ):
        self.parsers: list[Parser] = list(parsers or [])
        self.refiners: list[Refiner] = list(refiners or [])
        self.config = config or ParsingConfig()

    def clone(self) -> Chrono:
        return Chrono(list(self.parsers), list(self.refiners), self.config)

    def add_parser(self, parser: Parser) -> Chrono:
        self.parsers.append(parser)
        return self

    def add_refiner(self, refiner: Refiner) -> Chrono:
        self.refiners.append(refiner)
        return self

    def parse_date(
        self,
        text: str,
        reference_date: ReferenceInput = None,
        options: ParsingOptions | None = None,
    ) -> datetime | None:
        """Return the start of the first result, or None."""
        results = self.parse(text, reference_date, options)
        return results[0].start.date if results else None

    def parse(
        self,
        text: str,
        reference_date: ReferenceInput = None,
        options: ParsingOptions | None = None,
    ) -> list[ParsedResult]:
        """
        Find every date reference in text.

        Args:
            text: Input text.
            reference_date: Instant relative expressions resolve against.
                Defaults to now.
            options: Per-call options. Defaults come from ParsingConfig.

        Returns:
            Non-overlapping results sorted by position in the text.

        Raises:
            ReferenceDateError: If the reference date is unusable.
        """
        started = time.perf_counter()

        if options is None:
            options = ParsingOptions(
                forward_date=self.config.forward_date,
                debug=self.config.debug,
            )
        reference = resolve_reference(
            reference_date, self.config.default_timezone, options.timezones
        )
        context = ParsingContext(
            text=text, reference=reference, options=options, config=self.config
        )

        results: list[ParsingResult] = []
        for parser in self.parsers:
            results.extend(self._execute_parser(context, parser))
        results.sort(key=lambda r: r.index)
        raw_count = len(results)

        for refiner in self.refiners:
            before = len(results)
            results = refiner.refine(context, results)
            context.debug(f"{type(refiner).__name__}: {before} -> {len(results)} results")

        parsed = [p for p in (r.to_public() for r in results) if p is not None]

        if get_settings().metrics_enabled:
            get_metrics().record_parse(raw_count, len(parsed), time.perf_counter() - started)
        return parsed

    @staticmethod
    def _execute_parser(context: ParsingContext, parser: Parser) -> list[ParsingResult]:
        name = type(parser).__name__
        try:
            regex = re.compile(parser.pattern(context), re.IGNORECASE)
        except re.error as e:
            context.debug(f"{name} pattern failed to compile: {e}")
            logger.warning(f"Skipping {name}: pattern failed to compile: {e}")
            if get_settings().metrics_enabled:
                get_metrics().record_parser_error(name)
            return []

        text = context.text
        results: list[ParsingResult] = []
        position = 0

        while position <= len(text):
            regex_match = regex.search(text, position)
            if regex_match is None:
                break

            if regex_match.end() == regex_match.start():
                position = regex_match.start() + 1
                continue

            result = _to_parsing_result(
                context, regex_match, parser.extract(context, regex_match)
            )
            if result is None:
                position = regex_match.start() + 1
                continue

            context.debug(f"{name} extracted {result.text!r} at {result.index}")
            results.append(result)
            position = regex_match.end()

        return results


def _to_parsing_result(
    context: ParsingContext, regex_match: re.Match[str], value: ExtractedValue
) -> ParsingResult | None:
    match value:
        case None:
            return None
        case ParsingResult():
            return value
        case ParsedResult():
            return ParsingResult.from_public(context.reference, value)
        case ParsingComponents() | Mapping():
            return context.create_parsing_result(
                regex_match.start(), regex_match.group(0), value
            )
        case _:
            raise TypeError(f"Parser returned unsupported value: {type(value).__name__}")
