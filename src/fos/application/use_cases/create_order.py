from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable

from pydantic import ValidationError

from fos.application.dto.requests import CartItemRequest, CreateOrderRequest
from fos.application.dto.responses import CreateOrderResponse
from fos.application.metrics.order_lifecycle import (
    record_order_create_failure,
    record_order_created,
)
from fos.application.ports.repositories import OrderRepository, StorageError
from fos.domain.order.cart import CartSelection, InvalidItemError

logger = logging.getLogger(__name__)


class InvalidOrderError(Exception):
    pass


class OrderCreationFailedError(Exception):
    pass


def _to_selection(item: Any) -> CartSelection:
    """Unreadable entries become empty selections for the normalizer to reject."""
    try:
        parsed = CartItemRequest.model_validate(item)
    except ValidationError:
        return CartSelection(food_type_id=None, size=None)
    return CartSelection(
        food_type_id=parsed.food.id if parsed.food is not None else None,
        size=parsed.size,
    )


class CreateOrder:
    def __init__(
        self,
        order_repository: OrderRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._order_repository = order_repository
        self._clock = clock

    def execute(self, request_dto: CreateOrderRequest) -> CreateOrderResponse:
        created_at = self._clock()
        cart = request_dto.cart
        if not isinstance(cart, list) or not cart:
            record_order_create_failure("invalid_order")
            raise InvalidOrderError("Invalid order data")

        selections = [_to_selection(item) for item in cart]

        try:
            order_id = self._order_repository.create_order(
                selections=selections,
                created_at=created_at,
            )
        except InvalidItemError:
            record_order_create_failure("invalid_item")
            raise
        except StorageError as exc:
            record_order_create_failure("storage")
            logger.exception("order_create_failed")
            raise OrderCreationFailedError("Failed to create order") from exc

        record_order_created(len(selections))
        logger.info(
            "order_created",
            extra={"order_id": int(order_id), "cart_size": len(selections)},
        )
        return CreateOrderResponse(orderId=int(order_id))
