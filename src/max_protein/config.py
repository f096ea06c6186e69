"""Application configuration."""

import logging
import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_MASK_WIDTH = 64


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    usda_abbrev_path: str = "ABBREV.txt"
    usda_abbrev_url: str | None = None
    default_budget_kcal: int = 2000
    filter_min_kcal: int = 1
    filter_max_kcal: int = 2500
    greedy_max_foods: int = 6000
    exhaustive_max_foods: int = 20
    benchmark_sizes: str = "5,10,15,20"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("exhaustive_max_foods")
    @classmethod
    def _exhaustive_fits_mask(cls, value: int) -> int:
        if not 0 <= value < _MASK_WIDTH:
            raise ValueError(
                f"exhaustive_max_foods must be between 0 and {_MASK_WIDTH - 1}"
            )
        return value

    @field_validator("benchmark_sizes")
    @classmethod
    def _benchmark_sizes_parse(cls, value: str) -> str:
        parse_benchmark_sizes(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def parse_benchmark_sizes(raw: str | None) -> list[int]:
    """Parse a comma-separated list of catalog sizes."""
    if raw is None:
        return []
    sizes: list[int] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if not value:
            continue
        if not value.isdigit():
            raise ValueError(f"Invalid catalog size: {value!r}")
        sizes.append(int(value))
    return sizes
