"""Tests for configuration parsing."""

import pytest
from pydantic import ValidationError

from max_protein.config import Settings, parse_benchmark_sizes


def test_parse_benchmark_sizes() -> None:
    assert parse_benchmark_sizes(" 5, 10,,25 ") == [5, 10, 25]
    assert parse_benchmark_sizes("") == []
    assert parse_benchmark_sizes(None) == []


def test_parse_benchmark_sizes_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="Invalid catalog size"):
        parse_benchmark_sizes("5,ten")


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_BUDGET_KCAL", "1800")
    monkeypatch.setenv("EXHAUSTIVE_MAX_FOODS", "18")

    settings = Settings()

    assert settings.default_budget_kcal == 1800
    assert settings.exhaustive_max_foods == 18


def test_settings_reject_exhaustive_limit_over_mask_width() -> None:
    with pytest.raises(ValidationError):
        Settings(exhaustive_max_foods=64)


def test_settings_reject_malformed_benchmark_sizes() -> None:
    with pytest.raises(ValidationError, match="Invalid catalog size"):
        Settings(benchmark_sizes="5,ten")


def test_settings_default_exhaustive_limit(monkeypatch) -> None:
    monkeypatch.delenv("EXHAUSTIVE_MAX_FOODS", raising=False)
    monkeypatch.delenv("BENCHMARK_SIZES", raising=False)

    settings = Settings(_env_file=None)

    assert settings.exhaustive_max_foods == 18
    assert parse_benchmark_sizes(settings.benchmark_sizes) == [5, 10, 15, 20]


def test_settings_normalize_log_level() -> None:
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_settings_reject_unknown_log_level() -> None:
    with pytest.raises(ValidationError, match="Unknown log level"):
        Settings(log_level="LOUD")
