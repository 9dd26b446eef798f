"""Configuration for the parsing pipeline.

Uses Pydantic settings for environment-based configuration, following
the same pattern as the application settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParsingConfig(BaseSettings):
    """
    Defaults for the parsing pipeline.

    All settings can be overridden via environment variables with CHRONO_ prefix.
    Example: CHRONO_FORWARD_DATE=true

    Attributes:
        forward_date: Default forward-date mode when a call passes no options.
        debug: Default debug mode when a call passes no options.
        default_timezone: Reference timezone used when the caller gives none.
        date_time_merge_max_gap: Maximum characters between a date and a
            time for them to merge.
        range_merge_max_gap: Maximum characters between the two sides of
            a range.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHRONO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    forward_date: bool = Field(
        default=False,
        description="Resolve year-ambiguous past dates into the future.",
    )
    debug: bool = Field(
        default=False,
        description="Log pipeline decisions at DEBUG level.",
    )
    default_timezone: str | None = Field(
        default=None,
        description="Offset abbreviation or IANA name for references without one.",
    )
    date_time_merge_max_gap: int = Field(
        default=5,
        ge=0,
        le=20,
        description="Maximum gap in characters between merged date and time.",
    )
    range_merge_max_gap: int = Field(
        default=12,
        ge=1,
        le=40,
        description="Maximum gap in characters between range endpoints.",
    )
