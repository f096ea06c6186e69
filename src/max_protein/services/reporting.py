"""Plain-text rendering of selections and benchmarks."""

from max_protein.domain.foods import Food, Selection
from max_protein.domain.planning import BenchmarkRow, PlanResult


def format_food(food: Food) -> str:
    """Render one food on a single line."""
    return (
        f"{food.description} (100 g where each {food.amount} is {food.amount_g} g)"
        f" kcal={food.kcal} protein={food.protein_g} g"
    )


def format_selection(selection: Selection) -> str:
    """Render each selected food followed by the totals."""
    lines = [format_food(food) for food in selection]
    totals = selection.totals
    lines.append(f"total kcal={totals.kcal} total_protein={totals.protein_g} g")
    return "\n".join(lines)


def format_plan(result: PlanResult) -> str:
    """Render a plan with a header line describing the run."""
    header = (
        f"{result.request.algorithm.value}_max_protein, "
        f"n={result.catalog_size}, "
        f"budget={result.request.budget_kcal} kcal, "
        f"elapsed time={result.elapsed_seconds:.6f} seconds"
    )
    return f"{header}\n{format_selection(result.selection)}"


def format_benchmark(rows: list[BenchmarkRow]) -> str:
    """Render benchmark timings, one run per line."""
    return "\n".join(
        f"{row.algorithm.value}_max_protein, n={row.n}, "
        f"elapsed time={row.elapsed_seconds:.6f} seconds, "
        f"protein={row.total_protein_g} g"
        for row in rows
    )
