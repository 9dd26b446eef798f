"""Pytest fixtures for chronoparse tests."""

from datetime import datetime
from typing import Callable, Generator

import pytest

from chronoparse.config.settings import Settings, get_settings
from chronoparse.parsing.config import ParsingConfig
from chronoparse.parsing.context import ParsingContext, ParsingOptions, resolve_reference

# Wednesday, in ISO week 3 of 2025
REFERENCE = datetime(2025, 1, 15, 12, 0)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so env changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(
        environment="development",
        log_level="DEBUG",
        metrics_enabled=False,
    )


@pytest.fixture
def reference() -> datetime:
    """Naive reference instant used across tests."""
    return REFERENCE


@pytest.fixture
def make_context() -> Callable[..., ParsingContext]:
    """Factory for parsing contexts over a given text."""

    def _make(
        text: str = "",
        reference_date=REFERENCE,
        options: ParsingOptions | None = None,
        config: ParsingConfig | None = None,
    ) -> ParsingContext:
        options = options or ParsingOptions()
        return ParsingContext(
            text=text,
            reference=resolve_reference(reference_date, None, options.timezones),
            options=options,
            config=config or ParsingConfig(),
        )

    return _make


@pytest.fixture
def context(make_context) -> ParsingContext:
    """Context over empty text at the default reference."""
    return make_context()
