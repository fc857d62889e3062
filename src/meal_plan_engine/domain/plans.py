"""Canonical meal plan models."""

from dataclasses import dataclass
from datetime import datetime

CANONICAL_DAY_KEYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

MEAL_TYPES = ("breakfast", "lunch", "dinner")

SHOPPING_CATEGORIES = ("proteins", "grains", "vegetables", "pantry")


@dataclass(frozen=True)
class FoodItem:
    """One ingredient contribution within a meal."""

    name: str
    quantity: float
    unit: str
    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class MealOption:
    """A single meal option for a slot of the day."""

    title: str
    description: str
    prep_time_minutes: int
    recipe_name: str
    foods: list[FoodItem]
    calories: float
    protein: float


@dataclass(frozen=True)
class DayMealPlan:
    """Meals planned for one day."""

    id: str
    day: str
    breakfast: list[MealOption]
    lunch: list[MealOption]
    dinner: list[MealOption]
    total_calories: float
    total_protein: float
    created_at: datetime
    updated_at: datetime

    def meals(self) -> list[MealOption]:
        """Return every meal option of the day in slot order."""
        return [*self.breakfast, *self.lunch, *self.dinner]


@dataclass(frozen=True)
class ShoppingListItem:
    """Display-ready shopping list entry."""

    category: str
    name: str
    quantity: str
    estimated: bool = True


@dataclass(frozen=True)
class WeeklyMealPlan:
    """A generated plan spanning one or more days."""

    id: str
    name: str
    description: str
    days: list[DayMealPlan]
    shopping_list: list[ShoppingListItem]
    prep_tips: list[str]
    created_at: datetime
    updated_at: datetime
