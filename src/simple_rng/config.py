"""
simple_rng Configuration

Loads configuration from environment variables and .env files.

Environment:
    SIMPLE_RNG_SEED       Fixed seed used by Rng.from_env (replay a run)
    SIMPLE_RNG_STD        "false" selects constrained mode (no time seeding)
    SIMPLE_RNG_LOG_LEVEL  Level for the simple_rng logger
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from simple_rng.clock import TimeSource, system_time_ns
from simple_rng.constants import WORD_MASK
from simple_rng.errors import TimeSeedingDisabledError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """simple_rng settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_RNG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Fixed seed for Rng.from_env; unset means seed from the time source
    seed: int | None = Field(default=None, ge=0, le=WORD_MASK)

    # Full-featured mode. False is the constrained mode for environments
    # without a usable time facility: Rng.from_time is unavailable.
    std: bool = True

    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the package logger."""
    settings = settings or get_settings()
    logging.getLogger("simple_rng").setLevel(settings.log_level.upper())


def time_seeding_enabled() -> bool:
    """Whether time-based seeding is available in the current mode."""
    return get_settings().std


def seed_from_env_or_time(time_source: TimeSource = system_time_ns) -> int:
    """Pick a seed from SIMPLE_RNG_SEED or, failing that, the time source.

    TigerStyle: Always log the seed for reproducibility.
    Replay any run by setting SIMPLE_RNG_SEED=<seed>.

    Raises:
        TimeSeedingDisabledError: No seed is configured and the package is
            running in constrained mode.
    """
    settings = get_settings()

    if settings.seed is not None:
        logger.info(f"Using seed from environment: {settings.seed}")
        return settings.seed

    if not settings.std:
        raise TimeSeedingDisabledError(
            "SIMPLE_RNG_SEED is not set and time seeding is disabled (SIMPLE_RNG_STD=false)"
        )

    seed = time_source() & WORD_MASK
    logger.info(f"Generated seed from time source (replay with SIMPLE_RNG_SEED={seed})")
    return seed
