from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy import Engine

from fos.application.ports.cache import CacheStore
from fos.application.ports.repositories import CatalogRepository, OrderRepository
from fos.application.use_cases.contact import SubmitContactForm
from fos.application.use_cases.create_order import CreateOrder
from fos.application.use_cases.food_of_the_day import GetFoodOfTheDay
from fos.application.use_cases.get_order import GetOrder
from fos.application.use_cases.list_foods import ListFoods
from fos.application.use_cases.list_orders import ListOrders
from fos.config import Settings
from fos.infrastructure.db.repositories.catalog_repo import SqlAlchemyCatalogRepository
from fos.infrastructure.db.repositories.order_repo import SqlAlchemyOrderRepository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_engine(request: Request) -> Engine:
    return request.app.state.engine


def get_cache_store(request: Request) -> CacheStore:
    return request.app.state.cache_store


def get_order_repository(engine: Engine = Depends(get_engine)) -> OrderRepository:
    return SqlAlchemyOrderRepository(engine)


def get_catalog_repository(engine: Engine = Depends(get_engine)) -> CatalogRepository:
    return SqlAlchemyCatalogRepository(engine)


def create_order_use_case(
    order_repository: OrderRepository = Depends(get_order_repository),
) -> CreateOrder:
    return CreateOrder(order_repository=order_repository)


def get_order_use_case(
    order_repository: OrderRepository = Depends(get_order_repository),
) -> GetOrder:
    return GetOrder(order_repository=order_repository)


def list_orders_use_case(
    order_repository: OrderRepository = Depends(get_order_repository),
    settings: Settings = Depends(get_settings),
) -> ListOrders:
    return ListOrders(order_repository=order_repository, page_size=settings.order_page_size)


def list_foods_use_case(
    repository: CatalogRepository = Depends(get_catalog_repository),
    cache: CacheStore = Depends(get_cache_store),
    settings: Settings = Depends(get_settings),
) -> ListFoods:
    return ListFoods(repository=repository, cache=cache, ttl_seconds=settings.catalog_cache_ttl)


def food_of_the_day_use_case(
    repository: CatalogRepository = Depends(get_catalog_repository),
) -> GetFoodOfTheDay:
    return GetFoodOfTheDay(repository=repository)


def contact_use_case() -> SubmitContactForm:
    return SubmitContactForm()
