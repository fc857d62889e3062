"""Models for already-canonical day payloads.

Only the shape of a day is enforced: the three slots must be lists of meal
mappings. Leaf values that are missing or mistyped resolve to defaults.
"""

import math
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _amount(value: object) -> float:
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return 0.0
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


def _text_or_none(value: object) -> str | None:
    return value if isinstance(value, str) and value.strip() else None


class StandardFoodPayload(BaseModel):
    """Food entry of a stored day plan."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    quantity: float = Field(default=0.0, ge=0.0)
    unit: str = "g"
    calories: float = Field(default=0.0, ge=0.0)
    protein: float = Field(default=0.0, ge=0.0)
    carbs: float = Field(default=0.0, ge=0.0)
    fats: float = Field(default=0.0, ge=0.0)

    @field_validator("quantity", "calories", "protein", "carbs", "fats", mode="before")
    @classmethod
    def non_negative_amount(cls, value: object) -> float:
        return _amount(value)

    @field_validator("name", mode="before")
    @classmethod
    def text_name(cls, value: object) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("unit", mode="before")
    @classmethod
    def text_unit(cls, value: object) -> str:
        return _text_or_none(value) or "g"


class StandardMealPayload(BaseModel):
    """Meal option of a stored day plan.

    ``title`` stays ``None`` when absent so the caller can apply its own
    placeholder.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str = ""
    prep_time_minutes: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("prepTimeMinutes", "prepTime"),
    )
    recipe_name: str | None = Field(
        default=None, validation_alias=AliasChoices("recipeName", "recipe")
    )
    foods: list[StandardFoodPayload] = Field(default_factory=list)
    calories: float = 0.0
    protein: float = 0.0

    @field_validator("title", "recipe_name", mode="before")
    @classmethod
    def optional_text(cls, value: object) -> str | None:
        return _text_or_none(value)

    @field_validator("description", mode="before")
    @classmethod
    def text_description(cls, value: object) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("prep_time_minutes", mode="before")
    @classmethod
    def whole_minutes(cls, value: object) -> int:
        return int(_amount(value))

    @field_validator("calories", "protein", mode="before")
    @classmethod
    def non_negative_amount(cls, value: object) -> float:
        return _amount(value)

    @field_validator("foods", mode="before")
    @classmethod
    def food_list(cls, value: object) -> object:
        return [] if value is None else value


class StandardDayPayload(BaseModel):
    """Day plan already in canonical shape, e.g. re-imported from storage."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    day: str
    breakfast: list[StandardMealPayload]
    lunch: list[StandardMealPayload]
    dinner: list[StandardMealPayload]
    total_calories: float | None = Field(default=None, alias="totalCalories")
    total_protein: float | None = Field(default=None, alias="totalProtein")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    @field_validator("id", mode="before")
    @classmethod
    def optional_id(cls, value: object) -> str | None:
        return _text_or_none(value)

    @field_validator("total_calories", "total_protein", mode="before")
    @classmethod
    def optional_total(cls, value: object) -> float | None:
        # unusable totals are derived from the meals instead
        if isinstance(value, bool) or not isinstance(value, int | float):
            return None
        if not math.isfinite(value) or value < 0:
            return None
        return float(value)

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def optional_timestamp(cls, value: object) -> datetime | None:
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            return None
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
