from __future__ import annotations

from fos.application.dto.responses import FoodResponse
from fos.domain.menu.entities import Food


def to_food_response(food: Food) -> FoodResponse:
    food_type = food.food_type
    return FoodResponse(
        id=int(food_type.food_type_id),
        name=food_type.name,
        category=food_type.category,
        description=food_type.description,
        image=food_type.image,
        sizes={size: float(price) for size, price in food.sizes.items()},
    )


def to_food_responses(foods: list[Food]) -> list[FoodResponse]:
    return [to_food_response(food) for food in foods]
