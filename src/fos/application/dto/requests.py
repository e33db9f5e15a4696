from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class CartFoodRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int | None = None


class CartItemRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    food: CartFoodRequest | None = None
    size: str | None = None


class CreateOrderRequest(BaseModel):
    # Left untyped so a malformed cart is reported as an invalid order.
    cart: Any = None


class ContactRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    message: str | None = None
