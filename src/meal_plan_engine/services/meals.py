"""Normalization of model-generated meals into canonical meal options."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass

from meal_plan_engine.defaults import (
    DEFAULT_ENGINE_DEFAULTS,
    EngineDefaults,
    MacroTotals,
)
from meal_plan_engine.domain.formats import InvalidFormatError, PayloadFormat
from meal_plan_engine.domain.plans import MealOption
from meal_plan_engine.services.estimator import IngredientNames, NutritionEstimator

_logger = logging.getLogger(__name__)


@dataclass
class MealNormalizer:
    """Converts one raw meal record into a ``MealOption``."""

    estimator: NutritionEstimator
    defaults: EngineDefaults = DEFAULT_ENGINE_DEFAULTS
    debug: bool = False

    def normalize(
        self, raw_meal: object, meal_type: str, variant: PayloadFormat
    ) -> MealOption:
        """Normalize a legacy or new-AI meal.

        Missing or mistyped fields resolve to defaults. Any other failure is
        logged together with the raw record and re-raised.
        """
        if variant not in {PayloadFormat.LEGACY_AI, PayloadFormat.NEW_AI}:
            raise InvalidFormatError(
                f"Cannot normalize a meal of format {variant}", detected=variant
            )
        meal = raw_meal if isinstance(raw_meal, Mapping) else {}
        try:
            if variant is PayloadFormat.LEGACY_AI:
                option = self._from_legacy(meal, meal_type)
            else:
                option = self._from_new_ai(meal, meal_type)
        except Exception:
            _logger.exception(
                "Meal normalization failed (%s, %s): %s", variant, meal_type, raw_meal
            )
            raise
        if self.debug:
            _logger.info(
                "Normalized %s meal: title=%s calories=%s",
                meal_type,
                option.title,
                option.calories,
            )
        return option

    def _from_legacy(self, meal: Mapping[str, object], meal_type: str) -> MealOption:
        names = self._ingredient_names(meal)
        title = _text(meal.get("recipe"), self.defaults.meal_title_placeholder)
        estimate = self.estimator.estimate(meal)
        return MealOption(
            title=title,
            description=_describe(names),
            prep_time_minutes=self._prep_minutes(meal_type),
            recipe_name=title,
            foods=self.estimator.estimated_foods(names, estimate),
            calories=estimate.calories,
            protein=estimate.protein,
        )

    def _from_new_ai(self, meal: Mapping[str, object], meal_type: str) -> MealOption:
        ingredients = meal.get("ingredients")
        names = self._ingredient_names(
            ingredients if isinstance(ingredients, Mapping) else {}
        )
        title = _text(meal.get("name"), self.defaults.meal_title_placeholder)
        totals = self._supplied_totals(meal.get("total"))
        return MealOption(
            title=title,
            description=_describe(names),
            prep_time_minutes=self._prep_minutes(meal_type),
            recipe_name=title,
            foods=self.estimator.supplied_foods(names, totals),
            calories=totals.calories,
            protein=totals.protein,
        )

    def _ingredient_names(self, source: Mapping[str, object]) -> IngredientNames:
        return IngredientNames(
            protein=_text(source.get("protein"), self.defaults.protein_placeholder),
            carb=_text(source.get("carb"), self.defaults.carb_placeholder),
            vegetable=_text(
                source.get("vegetable"), self.defaults.vegetable_placeholder
            ),
        )

    def _supplied_totals(self, raw_total: object) -> MacroTotals:
        fallback = self.defaults.missing_total
        if not isinstance(raw_total, Mapping):
            return fallback
        return MacroTotals(
            calories=_positive(raw_total.get("calories"), fallback.calories),
            protein=_positive(raw_total.get("protein"), fallback.protein),
            carbs=_positive(raw_total.get("carbs"), fallback.carbs),
            fats=_positive(raw_total.get("fats"), fallback.fats),
        )

    def _prep_minutes(self, meal_type: str) -> int:
        return self.defaults.prep_minutes.get(
            meal_type, self.defaults.default_prep_minutes
        )


def _describe(names: IngredientNames) -> str:
    return f"{names.protein} con {names.carb.lower()} y {names.vegetable.lower()}"


def _text(value: object, placeholder: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return placeholder


def _positive(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return default
    if not math.isfinite(value) or value <= 0:
        return default
    return float(value)
