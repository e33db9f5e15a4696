from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Sequence

from sqlalchemy import Engine, Row, and_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fos.application.ports.repositories import OrderLineRow, OrderRepository, StorageError
from fos.domain.common.ids import OrderId
from fos.domain.order.cart import CartSelection, normalize_cart
from fos.domain.order.entities import OrderHeader, OrderStamp
from fos.infrastructure.db.models.menu import FoodModel, FoodTypeModel
from fos.infrastructure.db.models.order import OrderDetailModel, OrderModel

logger = logging.getLogger(__name__)

_HEADER_COLUMNS = (OrderModel.order_id, OrderModel.date, OrderModel.time)

# Order ids are 64-bit signed integers in every supported store.
MAX_STORE_INTEGER = 2**63 - 1


def _storable(value: int) -> bool:
    return -MAX_STORE_INTEGER - 1 <= value <= MAX_STORE_INTEGER


class SqlAlchemyOrderRepository(OrderRepository):
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create_order(
        self,
        selections: Sequence[CartSelection],
        created_at: datetime,
    ) -> OrderId:
        """Insert the header and its normalized lines in one transaction.

        ``InvalidItemError`` from the normalizer and any database error leave
        nothing behind; the latter is re-raised as ``StorageError``.
        """
        stamp = OrderStamp.from_datetime(created_at)
        try:
            with Session(self._engine) as session, session.begin():
                order_model = OrderModel(date=stamp.date, time=stamp.time)
                session.add(order_model)
                session.flush()
                order_id = order_model.order_id

                for line in normalize_cart(selections).values():
                    session.add(
                        OrderDetailModel(
                            order_id=order_id,
                            food_type_id=line.food_type_id,
                            size=line.size,
                            quantity=line.quantity,
                        )
                    )
        except (SQLAlchemyError, OverflowError) as exc:
            # sqlite3 raises OverflowError for food ids beyond 64 bits.
            raise StorageError("order transaction failed") from exc

        return OrderId(order_id)

    def get_header(self, order_id: OrderId) -> OrderHeader | None:
        if not _storable(int(order_id)):
            return None
        statement = select(*_HEADER_COLUMNS).where(OrderModel.order_id == int(order_id)).limit(1)
        try:
            with Session(self._engine) as session:
                row = session.execute(statement).one_or_none()
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to read order {order_id}") from exc

        if row is None:
            return None
        return _to_header(row)

    def get_line_rows(self, order_id: OrderId) -> list[OrderLineRow]:
        if not _storable(int(order_id)):
            return []
        statement = (
            select(
                FoodTypeModel.food_type_id,
                FoodTypeModel.name,
                FoodTypeModel.category,
                FoodTypeModel.ingredients,
                OrderDetailModel.quantity,
                FoodModel.price,
                (OrderDetailModel.quantity * FoodModel.price).label("total"),
                FoodModel.size,
            )
            .select_from(OrderDetailModel)
            .join(
                FoodModel,
                and_(
                    OrderDetailModel.food_type_id == FoodModel.food_type_id,
                    OrderDetailModel.size == FoodModel.size,
                ),
            )
            .join(FoodTypeModel, FoodModel.food_type_id == FoodTypeModel.food_type_id)
            .where(OrderDetailModel.order_id == int(order_id))
            .order_by(OrderDetailModel.food_type_id, OrderDetailModel.size)
        )
        try:
            with Session(self._engine) as session:
                rows = session.execute(statement).all()
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to read lines for order {order_id}") from exc

        return [
            OrderLineRow(
                food_type_id=row.food_type_id,
                name=row.name,
                category=row.category,
                description=row.ingredients,
                quantity=row.quantity,
                price=row.price,
                total=row.total,
                size=row.size,
            )
            for row in rows
        ]

    def list_headers(self, limit: int, offset: int) -> list[OrderHeader]:
        if offset > MAX_STORE_INTEGER:
            return []
        statement = (
            select(*_HEADER_COLUMNS)
            .order_by(OrderModel.order_id.desc())
            .limit(limit)
            .offset(max(offset, 0))
        )
        try:
            with Session(self._engine) as session:
                rows = session.execute(statement).all()
        except SQLAlchemyError as exc:
            raise StorageError("failed to list orders") from exc
        return [_to_header(row) for row in rows]

    def list_all_headers(self) -> list[OrderHeader]:
        statement = select(*_HEADER_COLUMNS).order_by(OrderModel.order_id)
        try:
            with Session(self._engine) as session:
                rows = session.execute(statement).all()
        except SQLAlchemyError as exc:
            raise StorageError("failed to list orders") from exc
        return [_to_header(row) for row in rows]


def _to_header(row: Row[Any]) -> OrderHeader:
    return OrderHeader(order_id=OrderId(row.order_id), date=row.date, time=row.time)
