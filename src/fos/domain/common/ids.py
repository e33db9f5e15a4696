from __future__ import annotations

from typing import NewType

FoodTypeId = NewType("FoodTypeId", int)
OrderId = NewType("OrderId", int)
