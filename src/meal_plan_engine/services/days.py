"""Assembly of canonical day plans from raw model payloads."""

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import ValidationError

from meal_plan_engine.defaults import DEFAULT_ENGINE_DEFAULTS, EngineDefaults
from meal_plan_engine.domain.formats import InvalidFormatError, PayloadFormat
from meal_plan_engine.domain.payloads import StandardDayPayload, StandardMealPayload
from meal_plan_engine.domain.plans import MEAL_TYPES, DayMealPlan, FoodItem, MealOption
from meal_plan_engine.services.classifier import classify_day
from meal_plan_engine.services.meals import MealNormalizer

_logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


@dataclass
class DayAssembler:
    """Builds a ``DayMealPlan`` from any recognized day payload."""

    normalizer: MealNormalizer
    defaults: EngineDefaults = DEFAULT_ENGINE_DEFAULTS
    clock: Clock = utc_now
    debug: bool = False

    def assemble(self, raw_day: object) -> DayMealPlan:
        """Classify ``raw_day`` and build the matching canonical plan."""
        variant = classify_day(raw_day)
        match variant:
            case PayloadFormat.LEGACY_AI:
                build = self._from_legacy
            case PayloadFormat.NEW_AI:
                build = self._from_new_ai
            case PayloadFormat.STANDARD:
                build = self._from_standard
            case PayloadFormat.UNRECOGNIZED:
                _logger.warning("Unrecognized day payload: %s", raw_day)
                raise InvalidFormatError(
                    "Day payload does not match any known format", detected=variant
                )
        plan = build(raw_day)
        if self.debug:
            _logger.info(
                "Assembled day %s from %s payload: meals=%s calories=%s",
                plan.day,
                variant,
                len(plan.meals()),
                plan.total_calories,
            )
        return plan

    def resolve_day_key(self, day_name: str) -> str:
        """Map a localized day name to its canonical key.

        Unknown names pass through lower-cased.
        """
        return self.defaults.day_names.get(day_name, day_name.lower())

    def _from_legacy(self, raw_day: Mapping[str, object]) -> DayMealPlan:
        meals = raw_day["meals"]
        options = [
            self.normalizer.normalize(
                meals.get(meal_type), meal_type, PayloadFormat.LEGACY_AI
            )
            for meal_type in MEAL_TYPES
        ]
        breakfast, lunch, dinner = options
        return self._build(
            day_key=self.resolve_day_key(raw_day["day"]),
            variant=PayloadFormat.LEGACY_AI,
            breakfast=[breakfast],
            lunch=[lunch],
            dinner=[dinner],
            total_calories=sum(option.calories for option in options),
            total_protein=sum(option.protein for option in options),
        )

    def _from_new_ai(self, raw_day: Mapping[str, object]) -> DayMealPlan:
        meals = raw_day["meals"]
        slots: dict[str, list[MealOption]] = {}
        for index, meal_type in enumerate(MEAL_TYPES):
            raw_meal = meals[index] if index < len(meals) else None
            if isinstance(raw_meal, Mapping):
                slots[meal_type] = [
                    self.normalizer.normalize(
                        raw_meal, meal_type, PayloadFormat.NEW_AI
                    )
                ]
            else:
                slots[meal_type] = []
        totals = raw_day["totals"]
        return self._build(
            day_key=self.resolve_day_key(raw_day["day"]),
            variant=PayloadFormat.NEW_AI,
            breakfast=slots["breakfast"],
            lunch=slots["lunch"],
            dinner=slots["dinner"],
            total_calories=_number_or_zero(totals.get("calories")),
            total_protein=_number_or_zero(totals.get("protein")),
        )

    def _from_standard(self, raw_day: Mapping[str, object]) -> DayMealPlan:
        try:
            payload = StandardDayPayload.model_validate(raw_day)
        except ValidationError:
            _logger.exception("Standard day is malformed: %s", raw_day)
            raise
        breakfast, lunch, dinner = (
            [
                _meal_from_payload(meal, self.defaults.meal_title_placeholder)
                for meal in slot
            ]
            for slot in (payload.breakfast, payload.lunch, payload.dinner)
        )
        first_options = [slot[0] for slot in (breakfast, lunch, dinner) if slot]
        total_calories = payload.total_calories
        if total_calories is None:
            total_calories = sum(option.calories for option in first_options)
        total_protein = payload.total_protein
        if total_protein is None:
            total_protein = sum(option.protein for option in first_options)
        day_key = self.resolve_day_key(payload.day)
        created_at = payload.created_at or self.clock()
        return DayMealPlan(
            id=payload.id or f"{day_key}-plan-{PayloadFormat.STANDARD}",
            day=day_key,
            breakfast=breakfast,
            lunch=lunch,
            dinner=dinner,
            total_calories=total_calories,
            total_protein=total_protein,
            created_at=created_at,
            updated_at=payload.updated_at or created_at,
        )

    def _build(  # noqa: PLR0913
        self,
        *,
        day_key: str,
        variant: PayloadFormat,
        breakfast: list[MealOption],
        lunch: list[MealOption],
        dinner: list[MealOption],
        total_calories: float,
        total_protein: float,
    ) -> DayMealPlan:
        now = self.clock()
        return DayMealPlan(
            id=f"{day_key}-plan-{variant}",
            day=day_key,
            breakfast=breakfast,
            lunch=lunch,
            dinner=dinner,
            total_calories=total_calories,
            total_protein=total_protein,
            created_at=now,
            updated_at=now,
        )


def _meal_from_payload(meal: StandardMealPayload, placeholder: str) -> MealOption:
    title = meal.title or placeholder
    return MealOption(
        title=title,
        description=meal.description,
        prep_time_minutes=meal.prep_time_minutes,
        recipe_name=meal.recipe_name or title,
        foods=[FoodItem(**food.model_dump()) for food in meal.foods],
        calories=meal.calories,
        protein=meal.protein,
    )


def _number_or_zero(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0
    if not math.isfinite(value):
        return 0
    return value
