"""Food catalog loading and filtering."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from max_protein.domain.foods import Food, FoodCatalog

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Source of food records."""

    def load_foods(self) -> list[Food]:
        """Return every valid food in source order."""


def filter_foods(
    source: Iterable[Food], min_kcal: int, max_kcal: int, total_size: int
) -> FoodCatalog:
    """Return the first ``total_size`` foods with ``min_kcal < kcal <= max_kcal``.

    Used to drop foods without calories and to bound the input size of the
    exhaustive search.
    """
    kept: list[Food] = []
    if total_size <= 0:
        return FoodCatalog()
    for food in source:
        if min_kcal < food.kcal <= max_kcal:
            kept.append(food)
            if len(kept) == total_size:
                break
    return FoodCatalog.of(kept)


@dataclass
class CatalogService:
    """Loads the full food catalog once and serves filtered views."""

    repository: FoodRepository
    _catalog: FoodCatalog | None = field(default=None, init=False, repr=False)

    def get_catalog(self) -> FoodCatalog:
        """Return the full catalog, loading it on first use."""
        if self._catalog is None:
            self._catalog = FoodCatalog.of(self.repository.load_foods())
            _logger.info("Food catalog ready: foods=%s", len(self._catalog))
        return self._catalog

    def filtered(self, min_kcal: int, max_kcal: int, total_size: int) -> FoodCatalog:
        """Return a filtered view of the full catalog."""
        return filter_foods(self.get_catalog(), min_kcal, max_kcal, total_size)

    def reset(self) -> None:
        """Drop the memoized catalog so the next call reloads it."""
        self._catalog = None
