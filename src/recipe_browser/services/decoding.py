"""Decoding of TheMealDB payloads into meal domain records."""

from recipe_browser.domain.errors import EmptyResponseError, MissingFieldError
from recipe_browser.domain.meals import MealDetail, MealSummary

MAX_INGREDIENTS = 20


def decode_summary_list(raw: dict[str, object]) -> list[MealSummary]:
    """Decode a filter response into meal summaries, in source order."""
    return [
        MealSummary(
            id=_required_string(meal, "idMeal"),
            name=_required_string(meal, "strMeal"),
            thumbnail_url=_required_string(meal, "strMealThumb"),
        )
        for meal in _meal_list(raw)
    ]


def decode_detail(raw: dict[str, object]) -> MealDetail:
    """Decode a lookup response, returning its first match."""
    meals = raw.get("meals")
    if meals is None:
        raise EmptyResponseError()
    if not isinstance(meals, list):
        raise MissingFieldError("meals")
    if not meals:
        raise EmptyResponseError()
    return decode_detail_record(meals[0])


def decode_detail_record(record: object) -> MealDetail:
    """Decode a single meal object from a lookup response."""
    if not isinstance(record, dict):
        raise MissingFieldError("meals")
    return MealDetail(
        id=_required_string(record, "idMeal"),
        name=_required_string(record, "strMeal"),
        instructions=_required_string(record, "strInstructions"),
        ingredient_pairs=tuple(extract_ingredients(record).items()),
        video_url=_string_field(record, "strYoutube"),
        image_url=_string_field(record, "strMealThumb"),
        source_url=_string_field(record, "strSource"),
    )


def extract_ingredients(record: dict[str, object]) -> dict[str, str]:
    """Collect the numbered ingredient/measure pairs that are both filled in.

    Empty strings count as missing, whitespace does not. A repeated
    ingredient keeps the measure from its highest index.
    """
    ingredients: dict[str, str] = {}
    for index in range(1, MAX_INGREDIENTS + 1):
        ingredient = _string_field(record, f"strIngredient{index}")
        measure = _string_field(record, f"strMeasure{index}")
        if ingredient and measure:
            ingredients[ingredient] = measure
    return ingredients


def _meal_list(raw: dict[str, object]) -> list[dict[str, object]]:
    meals = raw.get("meals")
    if not isinstance(meals, list):
        raise MissingFieldError("meals")
    for meal in meals:
        if not isinstance(meal, dict):
            raise MissingFieldError("meals")
    return meals


def _string_field(record: dict[str, object], key: str) -> str | None:
    """Return a string field, or None when absent, null or another type."""
    value = record.get(key)
    if isinstance(value, str):
        return value
    return None


def _required_string(record: dict[str, object], key: str) -> str:
    value = _string_field(record, key)
    if value is None:
        raise MissingFieldError(key)
    return value
