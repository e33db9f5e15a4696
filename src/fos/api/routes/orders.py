from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from fos.api.dependencies import (
    create_order_use_case,
    get_order_use_case,
    list_orders_use_case,
)
from fos.application.dto.requests import CreateOrderRequest
from fos.application.dto.responses import (
    CreateOrderResponse,
    OrderDetailResponse,
    OrderHeaderResponse,
)
from fos.application.use_cases.create_order import CreateOrder
from fos.application.use_cases.get_order import GetOrder
from fos.application.use_cases.list_orders import ListOrders
from fos.domain.common.ids import OrderId

router = APIRouter(prefix="/api")


@router.post("/order", response_model=CreateOrderResponse)
def create_order(
    request_dto: CreateOrderRequest,
    use_case: CreateOrder = Depends(create_order_use_case),
) -> CreateOrderResponse:
    return use_case.execute(request_dto)


@router.get("/order", response_model=OrderDetailResponse)
def get_order(
    order_id: int = Query(alias="id"),
    use_case: GetOrder = Depends(get_order_use_case),
) -> OrderDetailResponse:
    return use_case.execute(OrderId(order_id))


@router.get("/past-order/{order_id}", response_model=OrderDetailResponse)
def get_past_order(
    order_id: int,
    use_case: GetOrder = Depends(get_order_use_case),
) -> OrderDetailResponse:
    return use_case.execute_sequential(OrderId(order_id))


@router.get("/past-orders", response_model=list[OrderHeaderResponse])
def list_past_orders(
    page: str | None = None,
    use_case: ListOrders = Depends(list_orders_use_case),
) -> list[OrderHeaderResponse]:
    return use_case.execute(page)


@router.get("/orders", response_model=list[OrderHeaderResponse])
def list_orders(use_case: ListOrders = Depends(list_orders_use_case)) -> list[OrderHeaderResponse]:
    return use_case.execute_all()
