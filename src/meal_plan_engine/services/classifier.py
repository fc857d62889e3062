"""Detection of the raw day payload shapes produced by the model."""

from collections.abc import Mapping

from meal_plan_engine.domain.formats import PayloadFormat
from meal_plan_engine.domain.plans import MEAL_TYPES


def is_legacy_format(data: object) -> bool:
    """Return whether ``data`` has a ``meals`` mapping with recipe-bearing slots."""
    if not _has_day_name(data):
        return False
    meals = data.get("meals")
    if not isinstance(meals, Mapping):
        return False
    for meal_type in MEAL_TYPES:
        meal = meals.get(meal_type)
        if not isinstance(meal, Mapping) or not isinstance(meal.get("recipe"), str):
            return False
    return True


def is_new_ai_format(data: object) -> bool:
    """Return whether ``data`` has a ``meals`` list and a ``totals`` mapping."""
    if not _has_day_name(data):
        return False
    meals = data.get("meals")
    if not isinstance(meals, list) or not meals:
        return False
    first = meals[0]
    if not isinstance(first, Mapping) or not isinstance(first.get("name"), str):
        return False
    return isinstance(data.get("totals"), Mapping)


def is_standard_format(data: object) -> bool:
    """Return whether ``data`` already carries canonical slot lists."""
    if not _has_day_name(data):
        return False
    return all(isinstance(data.get(meal_type), list) for meal_type in MEAL_TYPES)


def classify_day(data: object) -> PayloadFormat:
    """Classify a raw day record, most specific shape first."""
    if is_legacy_format(data):
        return PayloadFormat.LEGACY_AI
    if is_new_ai_format(data):
        return PayloadFormat.NEW_AI
    if is_standard_format(data):
        return PayloadFormat.STANDARD
    return PayloadFormat.UNRECOGNIZED


def _has_day_name(data: object) -> bool:
    return isinstance(data, Mapping) and isinstance(data.get("day"), str)
