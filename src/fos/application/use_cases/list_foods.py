from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from fos.application.dto.responses import FoodResponse
from fos.application.mappers.menu_mapper import to_food_responses
from fos.application.ports.cache import CacheStore
from fos.application.ports.repositories import CatalogRepository, StorageError

logger = logging.getLogger(__name__)

FOODS_CACHE_KEY = "catalog:foods"

_FOODS_ADAPTER = TypeAdapter(list[FoodResponse])


class CatalogFetchFailedError(Exception):
    pass


class ListFoods:
    def __init__(
        self,
        repository: CatalogRepository,
        cache: CacheStore,
        ttl_seconds: int = 300,
    ) -> None:
        self._repository = repository
        self._cache = cache
        self._ttl_seconds = ttl_seconds

    def _cache_get(self, key: str) -> str | None:
        try:
            return self._cache.get(key)
        except Exception:
            logger.warning("catalog_cache_get_failed", exc_info=True)
            return None

    def _cache_set(self, key: str, value: str) -> None:
        try:
            self._cache.set(key, value, ttl_seconds=self._ttl_seconds)
        except Exception:
            logger.warning("catalog_cache_set_failed", exc_info=True)

    def execute(self) -> list[FoodResponse]:
        payload = self._cache_get(FOODS_CACHE_KEY)
        if payload:
            try:
                return _FOODS_ADAPTER.validate_json(payload)
            except ValidationError:
                pass

        try:
            foods = self._repository.list_foods()
        except StorageError as exc:
            logger.exception("foods_fetch_failed")
            raise CatalogFetchFailedError("Failed to fetch foods") from exc

        response = to_food_responses(foods)
        self._cache_set(FOODS_CACHE_KEY, _FOODS_ADAPTER.dump_json(response).decode("utf-8"))
        return response
