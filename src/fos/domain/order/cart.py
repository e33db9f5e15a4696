"""Cart normalization.

A cart is an ordered list of selections, one per item the customer picked.
Picking the same food in the same size twice means a quantity of two, so the
normalizer folds selections into one line per ``(food_type_id, size)`` with
sizes compared case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple

from fos.domain.common.ids import FoodTypeId


class InvalidItemError(Exception):
    pass


@dataclass(frozen=True)
class CartSelection:
    food_type_id: int | None
    size: str | None


class CartLineKey(NamedTuple):
    food_type_id: FoodTypeId
    size: str


@dataclass(frozen=True)
class CartLine:
    food_type_id: FoodTypeId
    size: str
    quantity: int


def normalize_size(size: str) -> str:
    return size.strip().lower()


def normalize_cart(selections: Iterable[CartSelection]) -> dict[CartLineKey, CartLine]:
    """Fold cart selections into quantified lines keyed by food and size.

    The returned dict keeps first-seen order. Raises ``InvalidItemError`` on
    the first selection without a food id or size; callers running inside a
    transaction rely on that to abort before anything is committed.
    """
    lines: dict[CartLineKey, CartLine] = {}
    for position, selection in enumerate(selections):
        food_type_id = selection.food_type_id
        if not food_type_id or isinstance(food_type_id, bool):
            raise InvalidItemError(f"cart item {position} has no food id")
        if not isinstance(selection.size, str) or not selection.size.strip():
            raise InvalidItemError(f"cart item {position} has no size")

        key = CartLineKey(FoodTypeId(int(food_type_id)), normalize_size(selection.size))
        existing = lines.get(key)
        quantity = 1 if existing is None else existing.quantity + 1
        lines[key] = CartLine(food_type_id=key.food_type_id, size=key.size, quantity=quantity)
    return lines
