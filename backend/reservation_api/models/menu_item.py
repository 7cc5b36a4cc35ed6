"""
Menu item model.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reservation_shared.config.constants import FieldLengths

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .order import OrderItem
    from .restaurant import Restaurant


class MenuItem(TimestampMixin, Base):
    __tablename__ = "menu_item"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Stale updates raise StaleDataError
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)
    __mapper_args__ = {"version_id_col": version_id}

    restaurant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("restaurant.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(
        String(FieldLengths.MENU_ITEM_NAME), nullable=False, index=True
    )
    description: Mapped[str] = mapped_column(
        String(FieldLengths.MENU_ITEM_DESCRIPTION), nullable=False
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    restaurant: Mapped["Restaurant"] = relationship(back_populates="menu_items")
    order_items: Mapped[list["OrderItem"]] = relationship(
        back_populates="menu_item", passive_deletes="all", order_by="OrderItem.id"
    )
