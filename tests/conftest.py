"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, datetime

import pytest

from meal_plan_engine.config import Settings
from meal_plan_engine.containers import EngineContainer, build_container
from meal_plan_engine.defaults import MacroTotals
from meal_plan_engine.domain.plans import FoodItem
from meal_plan_engine.services.estimator import IngredientNames, NutritionEstimator

FIXED_NOW = datetime(2026, 10, 19, 8, 30, tzinfo=UTC)


def fixed_clock() -> datetime:
    return FIXED_NOW


@dataclass
class ExplodingEstimator(NutritionEstimator):
    """Estimator that fails while splitting supplied totals."""

    def supplied_foods(
        self, names: IngredientNames, totals: MacroTotals
    ) -> list[FoodItem]:
        raise RuntimeError("split failed")


def legacy_meal(
    protein: str = "Huevos",
    carb: str = "Tostadas integrales",
    vegetable: str = "Tomates",
    recipe: str = "Huevos revueltos con tostadas",
) -> dict[str, object]:
    return {
        "protein": protein,
        "carb": carb,
        "vegetable": vegetable,
        "recipe": recipe,
    }


def legacy_day(day: str = "Lunes", **meals: dict[str, object]) -> dict[str, object]:
    return {
        "day": day,
        "meals": {
            "breakfast": meals.get("breakfast", legacy_meal()),
            "lunch": meals.get(
                "lunch",
                legacy_meal(
                    protein="Pechuga de pollo",
                    carb="Arroz",
                    vegetable="Espinacas",
                    recipe="Pollo con arroz",
                ),
            ),
            "dinner": meals.get(
                "dinner",
                legacy_meal(
                    protein="Salmón",
                    carb="Patatas",
                    vegetable="Lechuga",
                    recipe="Salmón al horno",
                ),
            ),
        },
    }


def new_ai_meal(
    name: str = "Tortilla de huevos",
    protein: str = "Huevos",
    carb: str = "Avena",
    vegetable: str = "Espinacas",
    total: dict[str, object] | None = None,
) -> dict[str, object]:
    return {
        "name": name,
        "ingredients": {"protein": protein, "carb": carb, "vegetable": vegetable},
        "total": total
        if total is not None
        else {"calories": 450, "protein": 30, "carbs": 40, "fats": 15},
    }


def new_ai_day(
    day: str = "Martes",
    meals: list[object] | None = None,
    totals: dict[str, object] | None = None,
) -> dict[str, object]:
    return {
        "day": day,
        "meals": meals
        if meals is not None
        else [
            new_ai_meal(),
            new_ai_meal(name="Pollo con quinoa", protein="Pollo", carb="Quinoa"),
            new_ai_meal(name="Atún con pasta", protein="Atún", carb="Pasta"),
        ],
        "totals": totals
        if totals is not None
        else {"calories": 1800, "protein": 140, "carbs": 150, "fats": 60},
    }


def standard_day(day: str = "wednesday") -> dict[str, object]:
    meal = {
        "title": "Yogur con fruta",
        "description": "Yogur griego con frutos rojos",
        "prepTime": 5,
        "recipe": "Yogur con fruta",
        "foods": [
            {
                "name": "Yogur griego",
                "quantity": 200,
                "unit": "g",
                "calories": 190,
                "protein": 20,
                "carbs": 8,
                "fats": 9,
            }
        ],
        "calories": 190,
        "protein": 20,
    }
    return {
        "id": f"{day}-stored",
        "day": day,
        "breakfast": [meal],
        "lunch": [],
        "dinner": [],
        "totalCalories": 190,
        "totalProtein": 20,
        "createdAt": "2026-10-01T09:00:00+00:00",
        "updatedAt": "2026-10-02T09:00:00+00:00",
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="DEBUG", debug=False)


@pytest.fixture
def container(settings: Settings) -> EngineContainer:
    return build_container(settings, clock=fixed_clock)


@pytest.fixture(autouse=True)
def engine_logger_state() -> Iterator[logging.Logger]:
    logger = logging.getLogger("meal_plan_engine")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def engine_records(
    container: EngineContainer, caplog: pytest.LogCaptureFixture
) -> pytest.LogCaptureFixture:
    """Send engine records to caplog once the container configured logging."""
    logging.getLogger("meal_plan_engine").propagate = True
    return caplog
