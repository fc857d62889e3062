"""Dependency container wiring for the engine."""

from dataclasses import dataclass

from meal_plan_engine.app_logging import configure_logging
from meal_plan_engine.config import Settings
from meal_plan_engine.defaults import DEFAULT_ENGINE_DEFAULTS, EngineDefaults
from meal_plan_engine.services.days import Clock, DayAssembler, utc_now
from meal_plan_engine.services.estimator import NutritionEstimator
from meal_plan_engine.services.meals import MealNormalizer
from meal_plan_engine.services.shopping import ShoppingListAggregator
from meal_plan_engine.services.weekly import WeeklyPlanAssembler


@dataclass
class EngineContainer:
    """Holds the engine's services."""

    settings: Settings
    defaults: EngineDefaults
    estimator: NutritionEstimator
    meal_normalizer: MealNormalizer
    day_assembler: DayAssembler
    shopping_aggregator: ShoppingListAggregator
    weekly_assembler: WeeklyPlanAssembler


def build_container(
    settings: Settings | None = None,
    defaults: EngineDefaults | None = None,
    clock: Clock | None = None,
) -> EngineContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    resolved_defaults = defaults or DEFAULT_ENGINE_DEFAULTS
    resolved_clock = clock or utc_now
    estimator = NutritionEstimator(defaults=resolved_defaults)
    meal_normalizer = MealNormalizer(
        estimator=estimator,
        defaults=resolved_defaults,
        debug=resolved_settings.debug,
    )
    day_assembler = DayAssembler(
        normalizer=meal_normalizer,
        defaults=resolved_defaults,
        clock=resolved_clock,
        debug=resolved_settings.debug,
    )
    shopping_aggregator = ShoppingListAggregator(defaults=resolved_defaults)
    weekly_assembler = WeeklyPlanAssembler(
        day_assembler=day_assembler,
        aggregator=shopping_aggregator,
        defaults=resolved_defaults,
        clock=resolved_clock,
        debug=resolved_settings.debug,
    )
    return EngineContainer(
        settings=resolved_settings,
        defaults=resolved_defaults,
        estimator=estimator,
        meal_normalizer=meal_normalizer,
        day_assembler=day_assembler,
        shopping_aggregator=shopping_aggregator,
        weekly_assembler=weekly_assembler,
    )
