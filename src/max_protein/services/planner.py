"""Planning service that filters the catalog and times selection runs."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from max_protein.domain.foods import FoodCatalog, Selection
from max_protein.domain.planning import (
    Algorithm,
    BenchmarkRow,
    PlanRequest,
    PlanResult,
)
from max_protein.services.catalog import CatalogService
from max_protein.services.selection import (
    CatalogTooLargeError,
    select_exhaustive,
    select_greedy,
)

_logger = logging.getLogger(__name__)

_SELECTORS: dict[Algorithm, Callable[[FoodCatalog, int], Selection]] = {
    Algorithm.GREEDY: select_greedy,
    Algorithm.EXHAUSTIVE: select_exhaustive,
}


@dataclass
class PlannerService:
    """Runs the selectors against the loaded food catalog."""

    catalog_service: CatalogService
    greedy_max_foods: int = 6000
    exhaustive_max_foods: int = 20
    clock: Callable[[], float] = time.perf_counter

    def plan(self, request: PlanRequest) -> PlanResult:
        """Filter the catalog and run the requested algorithm on it."""
        self._check_size(request.algorithm, request.max_foods)
        catalog = self.catalog_service.filtered(
            request.min_kcal, request.max_kcal, request.max_foods
        )
        selection, elapsed = self._timed(
            request.algorithm, catalog, request.budget_kcal
        )
        totals = selection.totals
        _logger.info(
            "Planned %s: n=%s budget=%s kcal=%s protein=%s elapsed=%.6fs",
            request.algorithm.value,
            len(catalog),
            request.budget_kcal,
            totals.kcal,
            totals.protein_g,
            elapsed,
        )
        return PlanResult(
            request=request,
            catalog_size=len(catalog),
            selection=selection,
            elapsed_seconds=elapsed,
        )

    def benchmark(  # noqa: PLR0913
        self,
        algorithm: Algorithm,
        sizes: list[int],
        budget_kcal: int,
        min_kcal: int,
        max_kcal: int,
    ) -> list[BenchmarkRow]:
        """Time one algorithm over increasing catalog sizes."""
        for size in sizes:
            self._check_size(algorithm, size)
        rows = []
        for size in sizes:
            catalog = self.catalog_service.filtered(min_kcal, max_kcal, size)
            selection, elapsed = self._timed(algorithm, catalog, budget_kcal)
            totals = selection.totals
            rows.append(
                BenchmarkRow(
                    algorithm=algorithm,
                    n=len(catalog),
                    elapsed_seconds=elapsed,
                    total_kcal=totals.kcal,
                    total_protein_g=totals.protein_g,
                )
            )
            _logger.info(
                "Benchmark %s: n=%s elapsed=%.6fs",
                algorithm.value,
                len(catalog),
                elapsed,
            )
        return rows

    def _timed(
        self, algorithm: Algorithm, catalog: FoodCatalog, budget_kcal: int
    ) -> tuple[Selection, float]:
        started = self.clock()
        selection = _SELECTORS[algorithm](catalog, budget_kcal)
        return selection, self.clock() - started

    def _check_size(self, algorithm: Algorithm, size: int) -> None:
        if size < 0:
            raise ValueError(f"Catalog size must be non-negative, got {size}")
        limit = (
            self.exhaustive_max_foods
            if algorithm is Algorithm.EXHAUSTIVE
            else self.greedy_max_foods
        )
        if size > limit:
            if algorithm is Algorithm.EXHAUSTIVE:
                raise CatalogTooLargeError(size, limit + 1)
            raise ValueError(f"Greedy runs are limited to {limit} foods, got {size}")
