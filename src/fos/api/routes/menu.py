from __future__ import annotations

from fastapi import APIRouter, Depends

from fos.api.dependencies import food_of_the_day_use_case, list_foods_use_case
from fos.application.dto.responses import FoodResponse
from fos.application.use_cases.food_of_the_day import GetFoodOfTheDay
from fos.application.use_cases.list_foods import ListFoods

router = APIRouter(prefix="/api")


@router.get("/foods", response_model=list[FoodResponse])
def list_foods(use_case: ListFoods = Depends(list_foods_use_case)) -> list[FoodResponse]:
    return use_case.execute()


@router.get("/food-of-the-day", response_model=FoodResponse)
def food_of_the_day(
    use_case: GetFoodOfTheDay = Depends(food_of_the_day_use_case),
) -> FoodResponse:
    return use_case.execute()
