"""
Command-line interface for chronoparse.

Usage:
    chronoparse parse "Lunch tomorrow at noon"
    chronoparse parse --reference 2025-01-15T12:00 --json "next Friday"
    chronoparse date --forward-date "Jan 2"
    chronoparse --debug parse "in 2 weeks"
"""

import json
import os
import sys
from datetime import datetime

import click

from chronoparse.chrono import Chrono
from chronoparse.config.settings import get_settings
from chronoparse.locales import en
from chronoparse.observability.logging import setup_logging
from chronoparse.parsing.context import ParsingOptions, ParsingReference, ReferenceDateError
from chronoparse.parsing.schemas import ParsedResult


def _parse_reference(ctx: click.Context, param: click.Parameter, value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"not an ISO 8601 datetime: {value!r}")


def _common_options(func):
    func = click.option("--reference", callback=_parse_reference, help="Reference instant (ISO 8601)")(func)
    func = click.option("--timezone", default=None, help="Reference timezone (abbreviation or IANA name)")(func)
    func = click.option("--forward-date", is_flag=True, help="Prefer future dates for ambiguous input")(func)
    func = click.option("--strict", is_flag=True, help="Only accept explicit dates")(func)
    return func


def _run(
    text: str,
    reference: datetime | None,
    timezone: str | None,
    forward_date: bool,
    strict: bool,
) -> list[ParsedResult]:
    chrono: Chrono = en.strict if strict else en.casual
    settings = get_settings()
    options = ParsingOptions(forward_date=forward_date, debug=settings.debug)
    reference_date = ParsingReference(reference, timezone) if timezone else reference

    try:
        return chrono.parse(text, reference_date, options)
    except ReferenceDateError as e:
        raise click.BadParameter(str(e), param_hint="--reference")


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """chronoparse - find dates in natural-language text."""
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        os.environ["DEBUG"] = "true"
        get_settings.cache_clear()

    setup_logging()


@main.command()
@click.argument("text")
@_common_options
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per result")
def parse(
    text: str,
    reference: datetime | None,
    timezone: str | None,
    forward_date: bool,
    strict: bool,
    as_json: bool,
) -> None:
    """List every date reference found in TEXT."""
    results = _run(text, reference, timezone, forward_date, strict)

    if as_json:
        for result in results:
            click.echo(json.dumps(result.to_dict()))
        return

    if not results:
        click.echo(click.style("No dates found", fg="yellow"))
        return

    for result in results:
        line = f"[{result.index}] {result.text!r}: {result.start.date.isoformat()}"
        if result.end is not None:
            line += f" -> {result.end.date.isoformat()}"
        click.echo(line)


@main.command()
@click.argument("text")
@_common_options
def date(
    text: str,
    reference: datetime | None,
    timezone: str | None,
    forward_date: bool,
    strict: bool,
) -> None:
    """Print the first date found in TEXT."""
    results = _run(text, reference, timezone, forward_date, strict)
    if not results:
        click.echo(click.style("No date found", fg="red"), err=True)
        sys.exit(1)
    click.echo(results[0].start.date.isoformat())


if __name__ == "__main__":
    main()
