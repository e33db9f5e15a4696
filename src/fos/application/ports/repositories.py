from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, Sequence

from fos.domain.common.ids import FoodTypeId, OrderId
from fos.domain.menu.entities import Food, FoodType
from fos.domain.order.cart import CartSelection
from fos.domain.order.entities import OrderHeader


class CatalogRepository(Protocol):
    def list_food_types(self) -> list[FoodType]: ...

    def list_foods(self) -> list[Food]: ...

    def get_food(self, food_type_id: FoodTypeId) -> Food | None: ...


class OrderRepository(Protocol):
    def create_order(
        self,
        selections: Sequence[CartSelection],
        created_at: datetime,
    ) -> OrderId: ...

    def get_header(self, order_id: OrderId) -> OrderHeader | None: ...

    def get_line_rows(self, order_id: OrderId) -> list[OrderLineRow]: ...

    def list_headers(self, limit: int, offset: int) -> list[OrderHeader]: ...

    def list_all_headers(self) -> list[OrderHeader]: ...


class StorageError(Exception):
    pass


@dataclass(frozen=True)
class OrderLineRow:
    """One joined order_details/foods/food_types row as the store returns it.

    Numeric columns are left as whatever the driver produced; the order
    mapper coerces them.
    """

    food_type_id: Any
    name: str
    category: str
    description: str | None
    quantity: Any
    price: Any
    total: Any
    size: str
