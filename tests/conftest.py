"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from max_protein.config import Settings
from max_protein.containers import AppContainer
from max_protein.domain.foods import Food, FoodCatalog
from max_protein.services.catalog import CatalogService, FoodRepository
from max_protein.services.planner import PlannerService

ABBREV_FIELD_COUNT = 53


def make_food(kcal: int, protein_g: int, description: str = "food") -> Food:
    return Food(
        description=description,
        amount="1 cup",
        amount_g=100,
        kcal=kcal,
        protein_g=protein_g,
    )


def make_catalog(*pairs: tuple[int, int]) -> FoodCatalog:
    """Build a catalog from ``(kcal, protein_g)`` pairs."""
    return FoodCatalog.of(
        make_food(kcal, protein_g, description=f"food {index}")
        for index, (kcal, protein_g) in enumerate(pairs)
    )


def make_abbrev_line(  # noqa: PLR0913
    description: str = "~CHEESE,CHEDDAR~",
    kcal: str = "403",
    protein_g: str = "24.9",
    amount_g: str = "132",
    amount: str = "~1 cup, diced~",
    field_count: int = ABBREV_FIELD_COUNT,
) -> str:
    fields = ["~01009~"] + ["0"] * (max(field_count, ABBREV_FIELD_COUNT) - 1)
    fields[1] = description
    fields[3] = kcal
    fields[4] = protein_g
    fields[48] = amount_g
    fields[49] = amount
    return "^".join(fields[:field_count])


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: list[Food] = field(default_factory=list)
    load_calls: int = 0

    def load_foods(self) -> list[Food]:
        self.load_calls += 1
        return list(self.foods)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        usda_abbrev_path="missing-ABBREV.txt",
        default_budget_kcal=2000,
        filter_min_kcal=1,
        filter_max_kcal=2500,
        greedy_max_foods=6000,
        exhaustive_max_foods=12,
        benchmark_sizes="2,4",
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository(
        foods=[
            make_food(0, 0, "Water"),
            make_food(1650, 120, "Whey powder"),
            make_food(800, 60, "Chicken breast"),
            make_food(700, 55, "Tuna"),
            make_food(300, 25, "Greek yogurt"),
            make_food(150, 13, "Eggs"),
            make_food(3000, 200, "Protein bar box"),
        ]
    )


@pytest.fixture
def container(
    settings: Settings, food_repository: InMemoryFoodRepository
) -> AppContainer:
    catalog_service = CatalogService(food_repository)
    planner_service = PlannerService(
        catalog_service=catalog_service,
        greedy_max_foods=settings.greedy_max_foods,
        exhaustive_max_foods=settings.exhaustive_max_foods,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog_service=catalog_service,
        planner_service=planner_service,
        downloader=None,
        close_resources=close_resources,
    )
