"""Greedy and exhaustive protein maximization under a calorie budget.

Both selectors are pure: they read the catalog, never mutate it, and return a
fresh :class:`Selection` whose aggregate calories never exceed the budget.
"""

from collections.abc import Iterable

from max_protein.domain.foods import Food, FoodCatalog, FoodTotals, Selection

# Masks are n-bit integers that must fit in an unsigned 64-bit word.
MASK_WIDTH = 64


class CatalogTooLargeError(ValueError):
    """Raised when a catalog is too large for exhaustive search."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            f"Exhaustive search needs fewer than {limit} foods, got {size}; "
            "filter the catalog first"
        )
        self.size = size
        self.limit = limit


def aggregate(foods: Iterable[Food]) -> FoodTotals:
    """Return total kilocalories and protein of ``foods``."""
    total_kcal = 0
    total_protein_g = 0
    for food in foods:
        total_kcal += food.kcal
        total_protein_g += food.protein_g
    return FoodTotals(kcal=total_kcal, protein_g=total_protein_g)


def select_greedy(catalog: FoodCatalog, budget: int) -> Selection:
    """Pick foods by descending protein while they fit the budget.

    Each round takes the remaining food with the greatest protein (the first
    one in catalog order on ties), removes it, and keeps it only if it still
    fits. Discarded foods are never reconsidered, so the result is not
    guaranteed to be optimal.
    """
    _check_budget(budget)
    todo = list(range(len(catalog)))
    chosen: list[int] = []
    used_kcal = 0
    while todo:
        best_position = 0
        best_protein_g = catalog[todo[0]].protein_g
        for position in range(1, len(todo)):
            protein_g = catalog[todo[position]].protein_g
            if protein_g > best_protein_g:
                best_position = position
                best_protein_g = protein_g
        index = todo.pop(best_position)
        food = catalog[index]
        if used_kcal + food.kcal <= budget:
            chosen.append(index)
            used_kcal += food.kcal
    return Selection(catalog=catalog, indices=tuple(chosen))


def select_exhaustive(catalog: FoodCatalog, budget: int) -> Selection:
    """Return the subset with the most protein that fits the budget.

    Every subset is tried in ascending bitmask order (bit ``j`` set means
    food ``j`` is included); the first subset found with the highest protein
    wins. Runs in O(2**n * n), so callers must keep ``n`` small.
    """
    _check_budget(budget)
    n = len(catalog)
    if n >= MASK_WIDTH:
        raise CatalogTooLargeError(n, MASK_WIDTH)

    best: tuple[int, ...] | None = None
    best_protein_g = 0
    for bits in range(1 << n):
        candidate = tuple(j for j in range(n) if (bits >> j) & 1)
        totals = aggregate(catalog[j] for j in candidate)
        if totals.kcal > budget:
            continue
        if best is None or totals.protein_g > best_protein_g:
            best = candidate
            best_protein_g = totals.protein_g
    return Selection(catalog=catalog, indices=best or ())


def _check_budget(budget: int) -> None:
    if budget < 0:
        raise ValueError(f"Calorie budget must be non-negative, got {budget}")
