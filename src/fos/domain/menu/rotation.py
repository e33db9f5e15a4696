from __future__ import annotations

from datetime import date
from typing import Sequence, TypeVar

ROTATION_EPOCH = date(1970, 1, 1)

T = TypeVar("T")


def days_since_epoch(today: date) -> int:
    return (today - ROTATION_EPOCH).days


def pick_food_of_the_day(foods: Sequence[T], today: date) -> T | None:
    if not foods:
        return None
    return foods[days_since_epoch(today) % len(foods)]
