"""Heuristic constants used by the meal plan engine."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _frozen(values: dict) -> Mapping:
    return MappingProxyType(values)


@dataclass(frozen=True)
class MacroTotals:
    """Meal-level totals supplied by, or assumed for, a model payload."""

    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class EngineDefaults:
    """Single table of every default and lookup used during normalization.

    Services receive an instance instead of reading module globals, so a test
    can swap any value with ``dataclasses.replace``.
    """

    protein_table: Mapping[str, tuple[float, float]] = field(
        default_factory=lambda: _frozen(
            {
                "Huevos": (140, 12),
                "Pechuga de pollo": (200, 40),
                "Garbanzos": (150, 8),
                "Atún": (180, 35),
                "Salmón": (220, 25),
                "Ternera": (250, 35),
            }
        )
    )
    default_protein: tuple[float, float] = (150, 20)
    carb_table: Mapping[str, float] = field(
        default_factory=lambda: _frozen(
            {
                "Tostadas integrales": 140,
                "Pasta": 200,
                "Bulgur": 180,
                "Arroz": 200,
                "Patatas": 150,
            }
        )
    )
    default_carb_calories: float = 150
    vegetable_calories: float = 30

    # calorie split (protein source, carb source, vegetable)
    estimated_calorie_split: tuple[float, float, float] = (0.6, 0.3, 0.1)
    supplied_calorie_split: tuple[float, float, float] = (0.4, 0.4, 0.2)
    supplied_protein_split: tuple[float, float, float] = (0.8, 0.1, 0.1)
    supplied_carbs_split: tuple[float, float, float] = (0.0, 0.8, 0.2)
    supplied_fats_split: tuple[float, float, float] = (0.3, 0.2, 0.1)
    calories_per_gram_carbs: float = 4

    protein_portion_grams: float = 150
    egg_portion_units: float = 2
    carb_portion_grams: float = 80
    vegetable_portion_grams: float = 200
    egg_keyword: str = "huevos"
    unit_grams: str = "g"
    unit_pieces: str = "unidades"

    protein_placeholder: str = "Proteína"
    carb_placeholder: str = "Carbohidrato"
    vegetable_placeholder: str = "Verdura"
    meal_title_placeholder: str = "Comida sin nombre"
    missing_total: MacroTotals = MacroTotals(
        calories=300, protein=20, carbs=30, fats=10
    )

    prep_minutes: Mapping[str, int] = field(
        default_factory=lambda: _frozen({"breakfast": 10, "lunch": 25, "dinner": 15})
    )
    default_prep_minutes: int = 15

    day_names: Mapping[str, str] = field(
        default_factory=lambda: _frozen(
            {
                "Lunes": "monday",
                "Martes": "tuesday",
                "Miércoles": "wednesday",
                "Jueves": "thursday",
                "Viernes": "friday",
                "Sábado": "saturday",
                "Domingo": "sunday",
            }
        )
    )

    ingredient_categories: Mapping[str, str] = field(
        default_factory=lambda: _frozen(
            {
                "Huevos": "proteins",
                "Pechuga de pollo": "proteins",
                "Pollo": "proteins",
                "Garbanzos": "proteins",
                "Atún": "proteins",
                "Salmón": "proteins",
                "Ternera": "proteins",
                "Tostadas integrales": "grains",
                "Pasta": "grains",
                "Bulgur": "grains",
                "Arroz": "grains",
                "Patatas": "vegetables",
                "Tomates": "vegetables",
                "Espinacas": "vegetables",
                "Pimientos": "vegetables",
                "Cebolla": "vegetables",
                "Lechuga": "vegetables",
            }
        )
    )
    fallback_category: str = "pantry"
    meat_keywords: tuple[str, ...] = ("pollo", "ternera", "salmón", "atún", "pescado")
    grain_keywords: tuple[str, ...] = ("arroz", "pasta", "quinoa", "avena")
    eggs_per_occurrence: int = 2
    meat_grams_per_occurrence: int = 150
    grain_grams_per_occurrence: int = 80
    vegetable_grams_per_occurrence: int = 200
    other_grams_per_occurrence: int = 100

    weekly_plan_name: str = "Plan Semanal Generado por IA"
    weekly_plan_description: str = (
        "Plan nutricional personalizado creado con inteligencia artificial"
    )
    prep_tips: tuple[str, ...] = (
        "Plan generado por IA basado en tus preferencias",
        "Ajusta las porciones según tu apetito",
        "Puedes intercambiar comidas del mismo tipo entre días",
    )


DEFAULT_ENGINE_DEFAULTS = EngineDefaults()
