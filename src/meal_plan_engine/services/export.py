"""Conversion of canonical plans into JSON-ready payloads."""

from meal_plan_engine.domain.plans import (
    DayMealPlan,
    FoodItem,
    MealOption,
    ShoppingListItem,
    WeeklyMealPlan,
)


def plan_to_payload(plan: WeeklyMealPlan) -> dict[str, object]:
    """Serialize a weekly plan with camelCase keys for storage."""
    return {
        "id": plan.id,
        "name": plan.name,
        "description": plan.description,
        "days": [day_to_payload(day) for day in plan.days],
        "shoppingList": [_shopping_item(item) for item in plan.shopping_list],
        "prepTips": list(plan.prep_tips),
        "createdAt": plan.created_at.isoformat(),
        "updatedAt": plan.updated_at.isoformat(),
    }


def day_to_payload(day: DayMealPlan) -> dict[str, object]:
    """Serialize a day plan in the shape recognized as the standard format."""
    return {
        "id": day.id,
        "day": day.day,
        "breakfast": [_meal(option) for option in day.breakfast],
        "lunch": [_meal(option) for option in day.lunch],
        "dinner": [_meal(option) for option in day.dinner],
        "totalCalories": day.total_calories,
        "totalProtein": day.total_protein,
        "createdAt": day.created_at.isoformat(),
        "updatedAt": day.updated_at.isoformat(),
    }


def _meal(option: MealOption) -> dict[str, object]:
    return {
        "title": option.title,
        "description": option.description,
        "prepTimeMinutes": option.prep_time_minutes,
        "recipeName": option.recipe_name,
        "foods": [_food(food) for food in option.foods],
        "calories": option.calories,
        "protein": option.protein,
    }


def _food(food: FoodItem) -> dict[str, object]:
    return {
        "name": food.name,
        "quantity": food.quantity,
        "unit": food.unit,
        "calories": food.calories,
        "protein": food.protein,
        "carbs": food.carbs,
        "fats": food.fats,
    }


def _shopping_item(item: ShoppingListItem) -> dict[str, object]:
    return {
        "category": item.category,
        "name": item.name,
        "quantity": item.quantity,
        "estimated": item.estimated,
    }
