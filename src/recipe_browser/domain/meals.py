"""Meal domain models."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class MealSummary:
    """Lightweight list entry for a meal."""

    id: str
    name: str
    thumbnail_url: str


@dataclass(frozen=True)
class MealDetail:
    """Full meal record with its ingredient mapping.

    Ingredients are held as (name, measure) pairs ordered by name, so two
    records with the same mapping compare and hash equal.
    """

    id: str
    name: str
    instructions: str
    ingredient_pairs: tuple[tuple[str, str], ...] = ()
    video_url: str | None = None
    image_url: str | None = None
    source_url: str | None = None

    def __post_init__(self) -> None:
        pairs = dict(self.ingredient_pairs)
        object.__setattr__(self, "ingredient_pairs", tuple(sorted(pairs.items())))

    @property
    def ingredients(self) -> Mapping[str, str]:
        """Read-only ingredient name to measure mapping."""
        return MappingProxyType(dict(self.ingredient_pairs))

    def sorted_ingredients(self) -> list[tuple[str, str]]:
        """Return (ingredient, measure) pairs ordered by ingredient name."""
        return list(self.ingredient_pairs)
