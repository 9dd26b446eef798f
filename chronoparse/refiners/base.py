"""Refiner contract and the two reusable refiner shapes.

A refiner takes the complete, index-sorted list of raw results and
returns a new complete list. Filters drop results; merging refiners
fold adjacent pairs into one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from chronoparse.parsing.components import ParsingResult
from chronoparse.parsing.context import ParsingContext


@runtime_checkable
class Refiner(Protocol):
    def refine(
        self, context: ParsingContext, results: list[ParsingResult]
    ) -> list[ParsingResult]: ...


class Filter(ABC):
    """Refiner that keeps only results passing is_valid()."""

    @abstractmethod
    def is_valid(self, context: ParsingContext, result: ParsingResult) -> bool: ...

    def refine(
        self, context: ParsingContext, results: list[ParsingResult]
    ) -> list[ParsingResult]:
        return [r for r in results if self.is_valid(context, r)]


class MergingRefiner(ABC):
    """
    Refiner that merges adjacent result pairs.

    Walks the list left to right. When should_merge_results() accepts
    the current result and its successor, both are replaced by
    merge_results() and the merged result becomes the current one.
    Subclasses keep merges non-greedy by rejecting already-merged
    shapes in should_merge_results().
    """

    @abstractmethod
    def should_merge_results(
        self,
        text_between: str,
        current: ParsingResult,
        next_result: ParsingResult,
        context: ParsingContext,
    ) -> bool: ...

    @abstractmethod
    def merge_results(
        self,
        text_between: str,
        current: ParsingResult,
        next_result: ParsingResult,
        context: ParsingContext,
    ) -> ParsingResult: ...

    def refine(
        self, context: ParsingContext, results: list[ParsingResult]
    ) -> list[ParsingResult]:
        if len(results) < 2:
            return list(results)

        merged: list[ParsingResult] = []
        current = results[0]

        for next_result in results[1:]:
            if next_result.index >= current.end_index:
                text_between = context.text[current.end_index : next_result.index]
                if self.should_merge_results(text_between, current, next_result, context):
                    current = self.merge_results(text_between, current, next_result, context)
                    context.debug(
                        f"{type(self).__name__} merged {current.text!r} at {current.index}"
                    )
                    continue

            merged.append(current)
            current = next_result

        merged.append(current)
        return merged
