from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from fos.application.dto.responses import FoodResponse
from fos.application.mappers.menu_mapper import to_food_response
from fos.application.ports.repositories import CatalogRepository, StorageError
from fos.application.use_cases.list_foods import CatalogFetchFailedError
from fos.domain.menu.rotation import pick_food_of_the_day

logger = logging.getLogger(__name__)


class FoodNotFoundError(Exception):
    pass


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GetFoodOfTheDay:
    """Rotate through the catalog one food per UTC day.

    The catalog is read on every call, so adding a food shifts the rotation
    for every following day.
    """

    def __init__(
        self,
        repository: CatalogRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self) -> FoodResponse:
        today = self._clock().astimezone(timezone.utc).date()
        try:
            food_types = self._repository.list_food_types()
            food_type = pick_food_of_the_day(food_types, today)
            if food_type is None:
                raise FoodNotFoundError("catalog is empty")
            food = self._repository.get_food(food_type.food_type_id)
        except StorageError as exc:
            logger.exception("food_of_the_day_fetch_failed")
            raise CatalogFetchFailedError("Failed to fetch food of the day") from exc

        if food is None:
            raise FoodNotFoundError(f"food {food_type.food_type_id} not found")
        return to_food_response(food)
