"""Resolve overlapping results so every character belongs to at most one."""

from __future__ import annotations

from chronoparse.parsing.components import ParsingResult
from chronoparse.parsing.context import ParsingContext
from chronoparse.parsing.schemas import Component


def _overlaps(a: ParsingResult, b: ParsingResult) -> bool:
    return a.index < b.end_index and b.index < a.end_index


def _has_same_range(a: ParsingResult, b: ParsingResult) -> bool:
    return a.index == b.index and a.end_index == b.end_index


def _strictly_contains(outer: ParsingResult, inner: ParsingResult) -> bool:
    return (
        outer.index <= inner.index
        and inner.end_index <= outer.end_index
        and not _has_same_range(outer, inner)
    )


def _has_iso_week(result: ParsingResult) -> bool:
    return result.start.is_certain(Component.ISO_WEEK) or result.start.is_certain(
        Component.ISO_WEEK_YEAR
    )


def _certainty_count(result: ParsingResult) -> int:
    count = len(result.start.get_certain_components())
    if result.end is not None:
        count += len(result.end.get_certain_components())
    return count


def _preference(result: ParsingResult, position: int) -> tuple:
    """Sort key where the larger value is the preferred result."""
    return (
        _has_iso_week(result),
        _certainty_count(result),
        result.is_range(),
        len(result.text),
        -result.index,
        -position,
    )


class OverlapRemovalRefiner:
    """
    Drop results that overlap a better one.

    A result strictly inside another loses. Results with the same span,
    or that partially overlap, are ranked by: ISO week certainty, then
    number of known fields, then being a range, then text length, then
    earliest position.
    """

    def refine(
        self, context: ParsingContext, results: list[ParsingResult]
    ) -> list[ParsingResult]:
        if len(results) < 2:
            return list(results)

        order = sorted(
            range(len(results)),
            key=lambda i: (results[i].index, -results[i].end_index, -len(results[i].text)),
        )

        selected: list[tuple[int, ParsingResult]] = []
        for position in order:
            candidate = results[position]
            overlapping = [(p, r) for p, r in selected if _overlaps(r, candidate)]

            if all(self._beats(candidate, position, r, p) for p, r in overlapping):
                beaten = {p for p, _ in overlapping}
                selected = [(p, r) for p, r in selected if p not in beaten]
                selected.append((position, candidate))
                for _, r in overlapping:
                    context.debug(f"OverlapRemoval dropped {r.text!r} for {candidate.text!r}")
            else:
                context.debug(f"OverlapRemoval dropped {candidate.text!r}")

        selected.sort(key=lambda item: (item[1].index, item[1].end_index))
        return [r for _, r in selected]

    @staticmethod
    def _beats(
        candidate: ParsingResult, position: int, other: ParsingResult, other_position: int
    ) -> bool:
        if _strictly_contains(candidate, other):
            return True
        if _strictly_contains(other, candidate):
            return False
        return _preference(candidate, position) > _preference(other, other_position)
