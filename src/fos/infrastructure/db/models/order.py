from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, ForeignKeyConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fos.infrastructure.db.models.menu import Base


class OrderModel(Base):
    __tablename__ = "orders"

    order_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[str] = mapped_column(String(10), nullable=False)
    time: Mapped[str] = mapped_column(String(8), nullable=False)

    details: Mapped[list["OrderDetailModel"]] = relationship(back_populates="order")


class OrderDetailModel(Base):
    __tablename__ = "order_details"
    __table_args__ = (
        ForeignKeyConstraint(
            ["food_type_id", "size"],
            ["foods.food_type_id", "foods.size"],
            name="fk_order_details_food",
        ),
        CheckConstraint("quantity >= 1", name="ck_order_details_quantity_positive"),
    )

    order_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("orders.order_id", ondelete="CASCADE"),
        primary_key=True,
    )
    food_type_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    size: Mapped[str] = mapped_column(String(20), primary_key=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    order: Mapped[OrderModel] = relationship(back_populates="details")
