"""
Configuration management using pydantic-settings.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TypeVar

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from coinselection.constants import MAX_INPUT_COUNT
from coinselection.models import CoinSelection
from coinselection.options import CoinSelectionOptions, fixed_input_limit

E = TypeVar("E")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COINSELECTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    max_input_count: int = Field(default=MAX_INPUT_COUNT, ge=0, le=MAX_INPUT_COUNT)


def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = "INFO") -> None:
    """Configure loguru logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )


def options_from_settings(
    validate: Callable[[CoinSelection], E | None], settings: Settings | None = None
) -> CoinSelectionOptions[E]:
    """Build selection options with the input limit taken from settings."""
    if settings is None:
        settings = get_settings()
    return CoinSelectionOptions(
        maximum_input_count=fixed_input_limit(settings.max_input_count),
        validate=validate,
    )
