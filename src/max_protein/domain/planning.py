"""Domain models for planning runs."""

from dataclasses import dataclass
from enum import Enum

from max_protein.domain.foods import Selection


class Algorithm(Enum):
    """Available selection algorithms."""

    GREEDY = "greedy"
    EXHAUSTIVE = "exhaustive"


@dataclass(frozen=True)
class PlanRequest:
    """Parameters for a single planning run."""

    algorithm: Algorithm
    budget_kcal: int
    min_kcal: int
    max_kcal: int
    max_foods: int


@dataclass(frozen=True)
class PlanResult:
    """Outcome of a planning run."""

    request: PlanRequest
    catalog_size: int
    selection: Selection
    elapsed_seconds: float


@dataclass(frozen=True)
class BenchmarkRow:
    """Timing of one algorithm run at a given catalog size."""

    algorithm: Algorithm
    n: int
    elapsed_seconds: float
    total_kcal: int
    total_protein_g: int
