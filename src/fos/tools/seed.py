from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Engine, inspect
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from fos.infrastructure.db.models.menu import FoodModel, FoodTypeModel
from fos.infrastructure.db.session import get_engine

FOOD_TYPES: list[dict[str, object]] = [
    {
        "food_type_id": 1,
        "name": "The Margherita Pizza",
        "category": "Classic",
        "ingredients": "Tomato, mozzarella, basil",
    },
    {
        "food_type_id": 2,
        "name": "The Pepperoni Pizza",
        "category": "Classic",
        "ingredients": "Mozzarella Cheese, Pepperoni",
    },
    {
        "food_type_id": 3,
        "name": "The Hawaiian Pizza",
        "category": "Classic",
        "ingredients": "Sliced Ham, Pineapple, Mozzarella Cheese",
    },
    {
        "food_type_id": 4,
        "name": "The Five Cheese Pizza",
        "category": "Veggie",
        "ingredients": "Mozzarella, Provolone, Smoked Gouda, Romano, Blue Cheese",
    },
    {
        "food_type_id": 5,
        "name": "The Spicy Italian Pizza",
        "category": "Supreme",
        "ingredients": "Capocollo, Tomatoes, Goat Cheese, Artichokes, Peperoncini",
    },
]

SIZE_PRICES: dict[str, Decimal] = {
    "small": Decimal("12.00"),
    "medium": Decimal("16.00"),
    "large": Decimal("20.50"),
}


def _variants() -> list[dict[str, object]]:
    return [
        {
            "food_type_id": food_type["food_type_id"],
            "size": size,
            "price": price + Decimal(int(food_type["food_type_id"]) - 1) / 4,
        }
        for food_type in FOOD_TYPES
        for size, price in SIZE_PRICES.items()
    ]


def _insert(engine: Engine):
    if engine.dialect.name == "postgresql":
        return postgresql.insert
    if engine.dialect.name == "sqlite":
        return sqlite.insert
    raise RuntimeError(f"seeding is not supported for dialect {engine.dialect.name}")


def seed_catalog(engine: Engine) -> None:
    insert = _insert(engine)
    with Session(engine) as session, session.begin():
        for food_type in FOOD_TYPES:
            session.execute(
                insert(FoodTypeModel)
                .values(**food_type)
                .on_conflict_do_update(
                    index_elements=[FoodTypeModel.food_type_id],
                    set_={
                        "name": food_type["name"],
                        "category": food_type["category"],
                        "ingredients": food_type["ingredients"],
                    },
                )
            )

        for variant in _variants():
            session.execute(
                insert(FoodModel)
                .values(**variant)
                .on_conflict_do_update(
                    index_elements=[FoodModel.food_type_id, FoodModel.size],
                    set_={"price": variant["price"]},
                )
            )


def main() -> None:
    engine = get_engine(timeout_seconds=2.0)
    required_tables = {"food_types", "foods", "orders", "order_details"}
    if not required_tables.issubset(set(inspect(engine).get_table_names())):
        print("no schema yet")
        return

    seed_catalog(engine)
    print("seed complete")


if __name__ == "__main__":
    main()
