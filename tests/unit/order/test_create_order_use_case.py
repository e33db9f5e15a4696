from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Sequence

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from fos.application.dto.requests import CreateOrderRequest
from fos.application.ports.repositories import StorageError
from fos.application.use_cases.create_order import (
    CreateOrder,
    InvalidOrderError,
    OrderCreationFailedError,
)
from fos.domain.common.ids import OrderId
from fos.domain.order.cart import CartSelection, InvalidItemError, normalize_cart


class FakeOrderRepository:
    def __init__(self, error: Exception | None = None) -> None:
        self._error = error
        self.calls: list[tuple[list[CartSelection], datetime]] = []
        self.committed: dict[OrderId, dict] = {}
        self._next_id = 41

    def create_order(self, selections: Sequence[CartSelection], created_at: datetime) -> OrderId:
        self.calls.append((list(selections), created_at))
        if self._error is not None:
            raise self._error
        lines = normalize_cart(selections)
        self._next_id += 1
        order_id = OrderId(self._next_id)
        self.committed[order_id] = lines
        return order_id


FIXED_NOW = datetime(2026, 10, 18, 19, 5, 3)


def _request(cart) -> CreateOrderRequest:
    return CreateOrderRequest.model_validate({"cart": cart})


def test_create_order_returns_new_order_id() -> None:
    repository = FakeOrderRepository()
    use_case = CreateOrder(order_repository=repository, clock=lambda: FIXED_NOW)

    response = use_case.execute(
        _request(
            [
                {"food": {"id": 3}, "size": "Medium"},
                {"food": {"id": 3}, "size": "medium"},
            ]
        )
    )

    assert response.orderId == 42
    selections, created_at = repository.calls[0]
    assert created_at == FIXED_NOW
    assert selections == [
        CartSelection(food_type_id=3, size="Medium"),
        CartSelection(food_type_id=3, size="medium"),
    ]
    [line] = repository.committed[OrderId(42)].values()
    assert (line.food_type_id, line.size, line.quantity) == (3, "medium", 2)


@pytest.mark.parametrize("cart", [None, [], "x", {"a": 1}, 5])
def test_create_order_rejects_empty_cart_before_touching_storage(cart) -> None:
    repository = FakeOrderRepository()
    use_case = CreateOrder(order_repository=repository, clock=lambda: FIXED_NOW)

    with pytest.raises(InvalidOrderError):
        use_case.execute(_request(cart))

    assert repository.calls == []


def test_create_order_propagates_invalid_item() -> None:
    repository = FakeOrderRepository()
    use_case = CreateOrder(order_repository=repository, clock=lambda: FIXED_NOW)

    with pytest.raises(InvalidItemError):
        use_case.execute(
            _request(
                [
                    {"food": {"id": 1}, "size": "small"},
                    {"food": {"id": 2}, "size": "large"},
                    {"food": {"id": 4}},
                ]
            )
        )

    assert repository.committed == {}


def test_create_order_passes_missing_food_to_normalizer() -> None:
    repository = FakeOrderRepository()
    use_case = CreateOrder(order_repository=repository, clock=lambda: FIXED_NOW)

    with pytest.raises(InvalidItemError):
        use_case.execute(_request([{"size": "small"}]))

    assert repository.calls[0][0] == [CartSelection(food_type_id=None, size="small")]


def test_create_order_hides_storage_error_text() -> None:
    repository = FakeOrderRepository(error=StorageError("UNIQUE constraint failed: secret"))
    use_case = CreateOrder(order_repository=repository, clock=lambda: FIXED_NOW)

    with pytest.raises(OrderCreationFailedError) as exc_info:
        use_case.execute(_request([{"food": {"id": 1}, "size": "small"}]))

    assert str(exc_info.value) == "Failed to create order"
    assert isinstance(exc_info.value.__cause__, StorageError)
    assert len(repository.calls) == 1


def test_create_order_turns_non_object_entries_into_invalid_items() -> None:
    repository = FakeOrderRepository()
    use_case = CreateOrder(order_repository=repository, clock=lambda: FIXED_NOW)

    with pytest.raises(InvalidItemError):
        use_case.execute(_request([{"food": {"id": 1}, "size": "small"}, 1, "pizza"]))

    assert repository.calls[0][0] == [
        CartSelection(food_type_id=1, size="small"),
        CartSelection(food_type_id=None, size=None),
        CartSelection(food_type_id=None, size=None),
    ]
    assert repository.committed == {}
