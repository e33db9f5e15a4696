from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from fos.domain.common.ids import FoodTypeId, OrderId
from fos.domain.common.money import ZERO

ORDER_DATE_FORMAT = "%d/%m/%Y"
ORDER_TIME_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class OrderHeader:
    order_id: OrderId
    date: str
    time: str


@dataclass(frozen=True)
class OrderStamp:
    date: str
    time: str

    @classmethod
    def from_datetime(cls, now: datetime) -> OrderStamp:
        return cls(
            date=now.strftime(ORDER_DATE_FORMAT),
            time=now.strftime(ORDER_TIME_FORMAT),
        )


@dataclass(frozen=True)
class OrderItem:
    food_type_id: FoodTypeId
    name: str
    category: str
    description: str | None
    quantity: int
    price: Decimal
    total: Decimal
    size: str
    image: str

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("quantity must be >= 1")
        if self.total != self.price * self.quantity:
            raise ValueError("total must equal price * quantity")


@dataclass(frozen=True)
class OrderDetail:
    header: OrderHeader
    items: list[OrderItem]
    total: Decimal = ZERO

    def __post_init__(self) -> None:
        expected_total = sum((item.total for item in self.items), ZERO)
        if self.total != expected_total:
            raise ValueError("order total must equal sum of item totals")


def create_order_detail(header: OrderHeader, items: list[OrderItem]) -> OrderDetail:
    total = sum((item.total for item in items), ZERO)
    return OrderDetail(header=header, items=items, total=total)
