"""Shopping list aggregation over a week of assembled day plans."""

from collections import Counter
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from meal_plan_engine.defaults import DEFAULT_ENGINE_DEFAULTS, EngineDefaults
from meal_plan_engine.domain.plans import DayMealPlan, ShoppingListItem

GRAMS_PER_KILOGRAM = 1000


@dataclass
class ShoppingListAggregator:
    """Counts ingredient occurrences and estimates quantities to buy."""

    defaults: EngineDefaults = DEFAULT_ENGINE_DEFAULTS

    def aggregate(self, days: list[DayMealPlan]) -> list[ShoppingListItem]:
        """Return one estimated shopping entry per distinct ingredient.

        A meal counts each ingredient name once, however many of its foods
        share that name. Entries keep first-occurrence order.
        """
        occurrences: Counter[str] = Counter()
        for day in days:
            for meal in day.meals():
                names = dict.fromkeys(
                    food.name for food in meal.foods if food.name.strip()
                )
                occurrences.update(list(names))
        return [
            ShoppingListItem(
                category=self.categorize(name),
                name=name,
                quantity=self.estimate_quantity(name, count),
                estimated=True,
            )
            for name, count in occurrences.items()
        ]

    def categorize(self, name: str) -> str:
        """Return the shopping category for an ingredient name."""
        return self.defaults.ingredient_categories.get(
            name, self.defaults.fallback_category
        )

    def estimate_quantity(self, name: str, count: int) -> str:
        """Format the quantity to buy for ``count`` meal occurrences."""
        defaults = self.defaults
        lowered = name.lower()
        if defaults.egg_keyword in lowered:
            return f"{count * defaults.eggs_per_occurrence} {defaults.unit_pieces}"
        if any(keyword in lowered for keyword in defaults.meat_keywords):
            return _format_weight(count * defaults.meat_grams_per_occurrence)
        if any(keyword in lowered for keyword in defaults.grain_keywords):
            return _format_weight(count * defaults.grain_grams_per_occurrence)
        if self.categorize(name) == "vegetables":
            return _format_weight(count * defaults.vegetable_grams_per_occurrence)
        return f"{count * defaults.other_grams_per_occurrence}g"


def _format_weight(grams: int) -> str:
    if grams >= GRAMS_PER_KILOGRAM:
        kilograms = (Decimal(grams) / GRAMS_PER_KILOGRAM).quantize(
            Decimal("0.1"), rounding=ROUND_HALF_UP
        )
        return f"{kilograms}kg"
    return f"{grams}g"
