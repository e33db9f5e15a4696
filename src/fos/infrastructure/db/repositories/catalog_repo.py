from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from fos.application.ports.repositories import CatalogRepository, StorageError
from fos.domain.common.ids import FoodTypeId
from fos.domain.common.money import parse_amount
from fos.domain.menu.entities import Food, FoodType, FoodVariant
from fos.infrastructure.db.models.menu import FoodModel, FoodTypeModel


class SqlAlchemyCatalogRepository(CatalogRepository):
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_food_types(self) -> list[FoodType]:
        statement = select(FoodTypeModel).order_by(FoodTypeModel.food_type_id)
        try:
            with Session(self._engine) as session:
                models = list(session.execute(statement).scalars().all())
                return [_to_food_type(model) for model in models]
        except SQLAlchemyError as exc:
            raise StorageError("failed to list food types") from exc

    def list_foods(self) -> list[Food]:
        statement = (
            select(FoodTypeModel)
            .options(selectinload(FoodTypeModel.variants))
            .order_by(FoodTypeModel.food_type_id)
        )
        try:
            with Session(self._engine) as session:
                models = list(session.execute(statement).scalars().all())
                return [_to_food(model) for model in models]
        except SQLAlchemyError as exc:
            raise StorageError("failed to list foods") from exc

    def get_food(self, food_type_id: FoodTypeId) -> Food | None:
        statement = (
            select(FoodTypeModel)
            .options(selectinload(FoodTypeModel.variants))
            .where(FoodTypeModel.food_type_id == int(food_type_id))
        )
        try:
            with Session(self._engine) as session:
                model = session.execute(statement).scalar_one_or_none()
                if model is None:
                    return None
                return _to_food(model)
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to read food {food_type_id}") from exc


def _to_food_type(model: FoodTypeModel) -> FoodType:
    return FoodType(
        food_type_id=FoodTypeId(model.food_type_id),
        name=model.name,
        category=model.category,
        description=model.ingredients,
    )


def _to_variant(model: FoodModel) -> FoodVariant:
    try:
        return FoodVariant(
            food_type_id=FoodTypeId(model.food_type_id),
            size=model.size,
            price=parse_amount(model.price),
        )
    except ValueError as exc:
        raise StorageError(f"invalid price for food {model.food_type_id}: {exc}") from exc


def _to_food(model: FoodTypeModel) -> Food:
    sizes: dict[str, Decimal] = {}
    for variant in map(_to_variant, model.variants):
        sizes[variant.size] = variant.price
    return Food(food_type=_to_food_type(model), sizes=sizes)
