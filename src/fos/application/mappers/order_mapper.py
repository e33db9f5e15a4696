from __future__ import annotations

from typing import Sequence

from fos.application.dto.responses import (
    OrderDetailResponse,
    OrderHeaderResponse,
    OrderItemResponse,
    OrderSummaryResponse,
)
from fos.application.ports.repositories import OrderLineRow, StorageError
from fos.domain.common.ids import FoodTypeId
from fos.domain.common.money import parse_amount, parse_quantity
from fos.domain.menu.entities import food_image_path
from fos.domain.order.entities import (
    OrderDetail,
    OrderHeader,
    OrderItem,
    create_order_detail,
)


def to_order_item(row: OrderLineRow) -> OrderItem:
    try:
        food_type_id = FoodTypeId(parse_quantity(row.food_type_id))
        quantity = parse_quantity(row.quantity)
        price = parse_amount(row.price)
        parse_amount(row.total)
    except ValueError as exc:
        raise StorageError(f"non-numeric value in order line: {exc}") from exc

    # The joined total may come back as a float; price * quantity is exact.
    try:
        return OrderItem(
            food_type_id=food_type_id,
            name=row.name,
            category=row.category,
            description=row.description,
            quantity=quantity,
            price=price,
            total=price * quantity,
            size=row.size,
            image=food_image_path(food_type_id),
        )
    except ValueError as exc:
        raise StorageError(f"invalid order line: {exc}") from exc


def assemble_order(header: OrderHeader, rows: Sequence[OrderLineRow]) -> OrderDetail:
    return create_order_detail(header=header, items=[to_order_item(row) for row in rows])


def to_order_header_response(header: OrderHeader) -> OrderHeaderResponse:
    return OrderHeaderResponse(
        order_id=int(header.order_id),
        date=header.date,
        time=header.time,
    )


def to_order_detail_response(detail: OrderDetail) -> OrderDetailResponse:
    header = detail.header
    return OrderDetailResponse(
        order=OrderSummaryResponse(
            total=float(detail.total),
            order_id=int(header.order_id),
            date=header.date,
            time=header.time,
        ),
        orderItems=[
            OrderItemResponse(
                foodTypeId=int(item.food_type_id),
                name=item.name,
                category=item.category,
                description=item.description,
                quantity=item.quantity,
                price=float(item.price),
                total=float(item.total),
                size=item.size,
                image=item.image,
            )
            for item in detail.items
        ],
    )
