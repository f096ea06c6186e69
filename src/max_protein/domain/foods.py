"""Domain models for foods, catalogs and selections."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import NamedTuple, overload


class InvalidFoodError(ValueError):
    """Raised when a food record violates its invariants."""


@dataclass(frozen=True)
class Food:
    """One food item in the USDA database.

    Values are per sample: ``amount`` describes a sample (e.g. "1 cup") that
    weighs ``amount_g`` grams.
    """

    description: str
    amount: str
    amount_g: int
    kcal: int
    protein_g: int

    def __post_init__(self) -> None:
        if not self.description:
            raise InvalidFoodError("Food description must be non-empty")
        if not self.amount:
            raise InvalidFoodError(
                f"Food amount must be non-empty: {self.description!r}"
            )
        for name in ("amount_g", "kcal", "protein_g"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidFoodError(
                    f"Food {name} must be non-negative: "
                    f"{self.description!r} has {value}"
                )


class FoodTotals(NamedTuple):
    """Total kilocalories and protein of a group of foods."""

    kcal: int
    protein_g: int


@dataclass(frozen=True)
class FoodCatalog:
    """Ordered, immutable collection of foods."""

    foods: tuple[Food, ...] = ()

    @classmethod
    def of(cls, foods: Iterable[Food]) -> "FoodCatalog":
        """Build a catalog preserving the iteration order of ``foods``."""
        return cls(tuple(foods))

    def __len__(self) -> int:
        return len(self.foods)

    def __iter__(self) -> Iterator[Food]:
        return iter(self.foods)

    @overload
    def __getitem__(self, index: int) -> Food: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Food, ...]: ...

    def __getitem__(self, index: int | slice) -> Food | tuple[Food, ...]:
        return self.foods[index]


@dataclass(frozen=True)
class Selection:
    """Foods chosen from a catalog, referenced by catalog index."""

    catalog: FoodCatalog = field(repr=False)
    indices: tuple[int, ...] = ()

    @property
    def foods(self) -> tuple[Food, ...]:
        return tuple(self.catalog[index] for index in self.indices)

    @property
    def totals(self) -> FoodTotals:
        foods = self.foods
        return FoodTotals(
            kcal=sum(food.kcal for food in foods),
            protein_g=sum(food.protein_g for food in foods),
        )

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[Food]:
        return iter(self.foods)
