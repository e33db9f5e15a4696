from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from fos.domain.order.cart import (
    CartLine,
    CartLineKey,
    CartSelection,
    InvalidItemError,
    normalize_cart,
)


def test_normalize_cart_merges_same_food_and_size_case_insensitively() -> None:
    lines = normalize_cart(
        [
            CartSelection(food_type_id=1, size="small"),
            CartSelection(food_type_id=1, size="SMALL"),
            CartSelection(food_type_id=2, size="large"),
        ]
    )

    assert list(lines.values()) == [
        CartLine(food_type_id=1, size="small", quantity=2),
        CartLine(food_type_id=2, size="large", quantity=1),
    ]


def test_normalize_cart_keeps_first_seen_order() -> None:
    lines = normalize_cart(
        [
            CartSelection(food_type_id=5, size="medium"),
            CartSelection(food_type_id=2, size="small"),
            CartSelection(food_type_id=5, size="Medium"),
        ]
    )

    assert list(lines) == [CartLineKey(5, "medium"), CartLineKey(2, "small")]
    assert lines[CartLineKey(5, "medium")].quantity == 2


def test_normalize_cart_does_not_collide_on_ambiguous_keys() -> None:
    lines = normalize_cart(
        [
            CartSelection(food_type_id=1, size="2_small"),
            CartSelection(food_type_id=12, size="small"),
        ]
    )

    assert len(lines) == 2
    assert all(line.quantity == 1 for line in lines.values())


def test_normalize_cart_quantities_match_selection_counts() -> None:
    selections = [
        CartSelection(food_type_id=3, size=size)
        for size in ["small", "Small", "large", "SMALL", "large", "medium"]
    ]

    lines = normalize_cart(selections)

    assert {key: line.quantity for key, line in lines.items()} == {
        CartLineKey(3, "small"): 3,
        CartLineKey(3, "large"): 2,
        CartLineKey(3, "medium"): 1,
    }
    assert sum(line.quantity for line in lines.values()) == len(selections)


@pytest.mark.parametrize(
    "selection",
    [
        CartSelection(food_type_id=None, size="small"),
        CartSelection(food_type_id=0, size="small"),
        CartSelection(food_type_id=1, size=None),
        CartSelection(food_type_id=1, size=""),
        CartSelection(food_type_id=1, size="   "),
    ],
)
def test_normalize_cart_rejects_incomplete_items(selection: CartSelection) -> None:
    with pytest.raises(InvalidItemError):
        normalize_cart([CartSelection(food_type_id=1, size="small"), selection])
