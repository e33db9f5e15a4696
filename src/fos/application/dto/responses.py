from __future__ import annotations

from pydantic import BaseModel, Field


class FoodResponse(BaseModel):
    id: int
    name: str
    category: str
    description: str | None = None
    image: str
    sizes: dict[str, float] = Field(default_factory=dict)


class CreateOrderResponse(BaseModel):
    orderId: int


class OrderHeaderResponse(BaseModel):
    order_id: int
    date: str
    time: str


class OrderSummaryResponse(BaseModel):
    total: float
    order_id: int
    date: str
    time: str


class OrderItemResponse(BaseModel):
    foodTypeId: int
    name: str
    category: str
    description: str | None = None
    quantity: int
    price: float
    total: float
    size: str
    image: str


class OrderDetailResponse(BaseModel):
    order: OrderSummaryResponse
    orderItems: list[OrderItemResponse] = Field(default_factory=list)


class ContactResponse(BaseModel):
    success: str
