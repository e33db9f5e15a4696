from __future__ import annotations

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class FoodTypeModel(Base):
    __tablename__ = "food_types"

    food_type_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    ingredients: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    variants: Mapped[list["FoodModel"]] = relationship(
        back_populates="food_type",
        order_by="FoodModel.price",
    )


class FoodModel(Base):
    __tablename__ = "foods"

    food_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("food_types.food_type_id", ondelete="CASCADE"),
        primary_key=True,
    )
    size: Mapped[str] = mapped_column(String(20), primary_key=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    food_type: Mapped[FoodTypeModel] = relationship(back_populates="variants")
