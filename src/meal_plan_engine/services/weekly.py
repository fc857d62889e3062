"""Assembly of weekly meal plans."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from meal_plan_engine.defaults import DEFAULT_ENGINE_DEFAULTS, EngineDefaults
from meal_plan_engine.domain.formats import InvalidFormatError, PayloadFormat
from meal_plan_engine.domain.plans import WeeklyMealPlan
from meal_plan_engine.services.days import Clock, DayAssembler, utc_now
from meal_plan_engine.services.shopping import ShoppingListAggregator

_logger = logging.getLogger(__name__)

_WRAPPER_KEYS = ("nutritionPlan", "weeklyPlan")


@dataclass
class WeeklyPlanAssembler:
    """Builds a ``WeeklyMealPlan`` and its shopping list from raw days."""

    day_assembler: DayAssembler
    aggregator: ShoppingListAggregator
    defaults: EngineDefaults = DEFAULT_ENGINE_DEFAULTS
    clock: Clock = utc_now
    debug: bool = False

    def assemble(self, raw_days: list[object]) -> WeeklyMealPlan:
        """Assemble every day, then aggregate shopping over the canonical days."""
        days = [self.day_assembler.assemble(raw_day) for raw_day in raw_days]
        shopping_list = self.aggregator.aggregate(days)
        now = self.clock()
        plan = WeeklyMealPlan(
            id=f"ai-weekly-plan-{int(now.timestamp() * 1000)}",
            name=self.defaults.weekly_plan_name,
            description=self.defaults.weekly_plan_description,
            days=days,
            shopping_list=shopping_list,
            prep_tips=list(self.defaults.prep_tips),
            created_at=now,
            updated_at=now,
        )
        if self.debug:
            _logger.info(
                "Assembled weekly plan %s: days=%s shopping_items=%s",
                plan.id,
                len(days),
                len(shopping_list),
            )
        return plan

    def assemble_payload(self, payload: object) -> WeeklyMealPlan:
        """Assemble a plan from the model's wrapper object or a bare day list.

        ``days`` may sit at the top level or under ``weeklyPlan`` and/or
        ``nutritionPlan``.
        """
        return self.assemble(extract_days(payload))


def extract_days(payload: object) -> list[object]:
    """Return the list of raw day records held by a model payload."""
    if isinstance(payload, list):
        return payload
    current = payload
    for key in _WRAPPER_KEYS:
        if isinstance(current, Mapping) and isinstance(current.get(key), Mapping):
            current = current[key]
    days = current.get("days") if isinstance(current, Mapping) else None
    if not isinstance(days, list):
        _logger.warning("Plan payload without a days list: %s", payload)
        raise InvalidFormatError(
            "Plan payload does not contain a list of days",
            detected=PayloadFormat.UNRECOGNIZED,
        )
    return days
