"""Pydantic response models for the catalog API."""

from pydantic import BaseModel

from recipe_browser.domain.meals import MealDetail, MealSummary


class MealSummaryOut(BaseModel):
    """Meal list entry."""

    id: str
    name: str
    thumbnail_url: str

    @classmethod
    def from_domain(cls, meal: MealSummary) -> "MealSummaryOut":
        return cls(id=meal.id, name=meal.name, thumbnail_url=meal.thumbnail_url)


class MealListOut(BaseModel):
    """Dessert list response."""

    meals: list[MealSummaryOut]


class IngredientOut(BaseModel):
    """Ingredient with its measure."""

    name: str
    measure: str


class MealDetailOut(BaseModel):
    """Meal detail response."""

    id: str
    name: str
    instructions: str
    ingredients: list[IngredientOut]
    video_url: str | None = None
    image_url: str | None = None
    source_url: str | None = None

    @classmethod
    def from_domain(cls, meal: MealDetail) -> "MealDetailOut":
        return cls(
            id=meal.id,
            name=meal.name,
            instructions=meal.instructions,
            ingredients=[
                IngredientOut(name=name, measure=measure)
                for name, measure in meal.sorted_ingredients()
            ],
            video_url=meal.video_url,
            image_url=meal.image_url,
            source_url=meal.source_url,
        )
