"""Pydantic models for the planning API."""

from pydantic import BaseModel, Field

from max_protein.domain.planning import Algorithm


class PlanPayload(BaseModel):
    """Planning request payload; omitted limits fall back to settings."""

    algorithm: Algorithm = Algorithm.GREEDY
    budget_kcal: int | None = Field(default=None, ge=0)
    min_kcal: int | None = None
    max_kcal: int | None = None
    max_foods: int | None = Field(default=None, ge=0)


class BenchmarkPayload(BaseModel):
    """Benchmark request payload."""

    algorithm: Algorithm = Algorithm.EXHAUSTIVE
    sizes: list[int] | None = None
    budget_kcal: int | None = Field(default=None, ge=0)
    min_kcal: int | None = None
    max_kcal: int | None = None
