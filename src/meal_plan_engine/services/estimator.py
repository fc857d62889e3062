"""Heuristic nutrition estimates for model-generated meals."""

import math
from collections.abc import Mapping
from dataclasses import dataclass

from meal_plan_engine.defaults import (
    DEFAULT_ENGINE_DEFAULTS,
    EngineDefaults,
    MacroTotals,
)
from meal_plan_engine.domain.plans import FoodItem


@dataclass(frozen=True)
class NutritionEstimate:
    """Estimated meal totals."""

    calories: float
    protein: float


@dataclass(frozen=True)
class IngredientNames:
    """The three ingredient slots every generated meal is built from."""

    protein: str
    carb: str
    vegetable: str


@dataclass
class NutritionEstimator:
    """Looks up approximate nutrition and splits it across ingredients."""

    defaults: EngineDefaults = DEFAULT_ENGINE_DEFAULTS

    def estimate(self, meal: Mapping[str, object]) -> NutritionEstimate:
        """Estimate calories and protein from a meal's ingredient names.

        Unknown or missing names fall back to the default table entries, so
        this never fails for a mapping input.
        """
        protein_name = _name(meal, "protein")
        carb_name = _name(meal, "carb")
        protein_calories, protein_grams = self.defaults.protein_table.get(
            protein_name, self.defaults.default_protein
        )
        carb_calories = self.defaults.carb_table.get(
            carb_name, self.defaults.default_carb_calories
        )
        return NutritionEstimate(
            calories=(
                protein_calories + carb_calories + self.defaults.vegetable_calories
            ),
            protein=protein_grams,
        )

    def estimated_foods(
        self, names: IngredientNames, estimate: NutritionEstimate
    ) -> list[FoodItem]:
        """Split an estimated meal across its three ingredients."""
        protein_share, carb_share, vegetable_share = (
            self.defaults.estimated_calorie_split
        )
        carb_calories = estimate.calories * carb_share
        quantity, unit = self._protein_portion(names.protein)
        return [
            FoodItem(
                name=names.protein,
                quantity=quantity,
                unit=unit,
                calories=estimate.calories * protein_share,
                protein=estimate.protein,
                carbs=0,
                fats=5,
            ),
            FoodItem(
                name=names.carb,
                quantity=self.defaults.carb_portion_grams,
                unit=self.defaults.unit_grams,
                calories=carb_calories,
                protein=2,
                carbs=carb_calories / self.defaults.calories_per_gram_carbs,
                fats=1,
            ),
            FoodItem(
                name=names.vegetable,
                quantity=self.defaults.vegetable_portion_grams,
                unit=self.defaults.unit_grams,
                calories=estimate.calories * vegetable_share,
                protein=1,
                carbs=5,
                fats=0,
            ),
        ]

    def supplied_foods(
        self, names: IngredientNames, totals: MacroTotals
    ) -> list[FoodItem]:
        """Pro-rate meal totals supplied by the model across its ingredients."""
        defaults = self.defaults
        splits = zip(
            defaults.supplied_calorie_split,
            defaults.supplied_protein_split,
            defaults.supplied_carbs_split,
            defaults.supplied_fats_split,
            strict=True,
        )
        portions = [
            self._protein_portion(names.protein),
            (defaults.carb_portion_grams, defaults.unit_grams),
            (defaults.vegetable_portion_grams, defaults.unit_grams),
        ]
        foods: list[FoodItem] = []
        for name, (quantity, unit), (calories, protein, carbs, fats) in zip(
            (names.protein, names.carb, names.vegetable), portions, splits, strict=True
        ):
            foods.append(
                FoodItem(
                    name=name,
                    quantity=quantity,
                    unit=unit,
                    calories=_round_half_up(totals.calories * calories),
                    protein=_round_half_up(totals.protein * protein),
                    carbs=_round_half_up(totals.carbs * carbs),
                    fats=_round_half_up(totals.fats * fats),
                )
            )
        return foods

    def _protein_portion(self, name: str) -> tuple[float, str]:
        if self.defaults.egg_keyword in name.lower():
            return self.defaults.egg_portion_units, self.defaults.unit_pieces
        return self.defaults.protein_portion_grams, self.defaults.unit_grams


def _name(meal: Mapping[str, object], key: str) -> str | None:
    value = meal.get(key)
    return value if isinstance(value, str) else None


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
