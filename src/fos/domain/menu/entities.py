from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from fos.domain.common.ids import FoodTypeId


def food_image_path(food_type_id: FoodTypeId | int) -> str:
    return f"/foods/{food_type_id}.webp"


@dataclass(frozen=True)
class FoodType:
    food_type_id: FoodTypeId
    name: str
    category: str
    description: str | None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("name must be non-empty")

    @property
    def image(self) -> str:
        return food_image_path(self.food_type_id)


@dataclass(frozen=True)
class FoodVariant:
    food_type_id: FoodTypeId
    size: str
    price: Decimal

    def __post_init__(self) -> None:
        if not self.size.strip():
            raise ValueError("size must be non-empty")
        if self.price < 0:
            raise ValueError("price must be >= 0")


@dataclass(frozen=True)
class Food:
    food_type: FoodType
    sizes: dict[str, Decimal] = field(default_factory=dict)

    @property
    def food_type_id(self) -> FoodTypeId:
        return self.food_type.food_type_id

    def price_for(self, size: str) -> Decimal | None:
        return self.sizes.get(size.lower())
