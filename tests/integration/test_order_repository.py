from __future__ import annotations

import re
import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import Engine, func, select
from sqlalchemy.orm import Session

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from fos.application.mappers.order_mapper import assemble_order
from fos.application.ports.repositories import StorageError
from fos.domain.common.ids import OrderId
from fos.domain.order.cart import CartSelection, InvalidItemError
from fos.infrastructure.db.models.order import OrderDetailModel, OrderModel
from fos.infrastructure.db.repositories.order_repo import (
    MAX_STORE_INTEGER,
    SqlAlchemyOrderRepository,
)

CREATED_AT = datetime(2026, 10, 18, 7, 4, 9)


def _row_counts(engine: Engine) -> tuple[int, int]:
    with Session(engine) as session:
        orders = session.execute(select(func.count()).select_from(OrderModel)).scalar_one()
        details = session.execute(select(func.count()).select_from(OrderDetailModel)).scalar_one()
    return orders, details


def test_create_order_persists_header_and_merged_lines(
    order_repository: SqlAlchemyOrderRepository,
) -> None:
    order_id = order_repository.create_order(
        [
            CartSelection(food_type_id=1, size="small"),
            CartSelection(food_type_id=1, size="SMALL"),
            CartSelection(food_type_id=2, size="large"),
        ],
        created_at=CREATED_AT,
    )

    header = order_repository.get_header(order_id)
    assert header is not None
    assert header.date == "18/10/2026"
    assert header.time == "07:04:09"

    rows = order_repository.get_line_rows(order_id)
    assert [(row.food_type_id, row.size, row.quantity) for row in rows] == [
        (1, "small", 2),
        (2, "large", 1),
    ]


def test_order_ids_increase(order_repository: SqlAlchemyOrderRepository) -> None:
    first = order_repository.create_order([CartSelection(1, "small")], created_at=CREATED_AT)
    second = order_repository.create_order([CartSelection(2, "small")], created_at=CREATED_AT)

    assert second > first


def test_total_matches_catalog_prices(order_repository: SqlAlchemyOrderRepository) -> None:
    order_id = order_repository.create_order(
        [
            CartSelection(food_type_id=3, size="Medium"),
            CartSelection(food_type_id=3, size="medium"),
            CartSelection(food_type_id=5, size="large"),
        ],
        created_at=CREATED_AT,
    )

    header = order_repository.get_header(order_id)
    assert header is not None
    detail = assemble_order(header, order_repository.get_line_rows(order_id))

    assert [(item.food_type_id, item.size, item.quantity) for item in detail.items] == [
        (3, "medium", 2),
        (5, "large", 1),
    ]
    assert [item.price for item in detail.items] == [Decimal("16.50"), Decimal("21.50")]
    assert detail.total == Decimal("54.50")
    assert detail.total == sum(item.price * item.quantity for item in detail.items)


def test_invalid_item_mid_cart_rolls_back_everything(
    engine: Engine,
    order_repository: SqlAlchemyOrderRepository,
) -> None:
    order_repository.create_order([CartSelection(1, "small")], created_at=CREATED_AT)
    before = _row_counts(engine)

    with pytest.raises(InvalidItemError):
        order_repository.create_order(
            [
                CartSelection(food_type_id=1, size="small"),
                CartSelection(food_type_id=2, size="medium"),
                CartSelection(food_type_id=3, size=None),
            ],
            created_at=CREATED_AT,
        )

    assert _row_counts(engine) == before
    assert [header.order_id for header in order_repository.list_all_headers()] == [1]


def test_unknown_variant_rolls_back_and_reports_storage_error(
    engine: Engine,
    order_repository: SqlAlchemyOrderRepository,
) -> None:
    with pytest.raises(StorageError):
        order_repository.create_order(
            [
                CartSelection(food_type_id=1, size="small"),
                CartSelection(food_type_id=999, size="small"),
            ],
            created_at=CREATED_AT,
        )

    assert _row_counts(engine) == (0, 0)
    assert order_repository.get_header(OrderId(1)) is None


def test_get_header_for_missing_order(order_repository: SqlAlchemyOrderRepository) -> None:
    order_repository.create_order([CartSelection(1, "small")], created_at=CREATED_AT)

    assert order_repository.get_header(OrderId(999999)) is None
    assert order_repository.get_line_rows(OrderId(999999)) == []


def test_list_headers_paginates_newest_first(order_repository: SqlAlchemyOrderRepository) -> None:
    for _ in range(25):
        order_repository.create_order([CartSelection(2, "medium")], created_at=CREATED_AT)

    first_page = order_repository.list_headers(limit=20, offset=0)
    second_page = order_repository.list_headers(limit=20, offset=20)

    assert [header.order_id for header in first_page] == list(range(25, 5, -1))
    assert [header.order_id for header in second_page] == [5, 4, 3, 2, 1]
    assert second_page[0].order_id < first_page[-1].order_id


def test_header_time_format(order_repository: SqlAlchemyOrderRepository) -> None:
    order_id = order_repository.create_order(
        [CartSelection(1, "large")],
        created_at=datetime(2026, 1, 2, 23, 59, 1),
    )

    header = order_repository.get_header(order_id)
    assert header is not None
    assert re.fullmatch(r"\d{2}/\d{2}/\d{4}", header.date)
    assert (header.date, header.time) == ("02/01/2026", "23:59:01")


def test_ids_outside_store_range_read_as_missing(
    order_repository: SqlAlchemyOrderRepository,
) -> None:
    order_repository.create_order([CartSelection(food_type_id=1, size="small")], datetime.now())

    for order_id in (MAX_STORE_INTEGER + 1, -MAX_STORE_INTEGER - 2):
        assert order_repository.get_header(OrderId(order_id)) is None
        assert order_repository.get_line_rows(OrderId(order_id)) == []
    assert order_repository.list_headers(limit=20, offset=MAX_STORE_INTEGER + 1) == []
