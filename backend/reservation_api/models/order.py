"""
Order Models: Order, OrderItem.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .employee import Employee
    from .menu_item import MenuItem
    from .reservation import Reservation


class Order(TimestampMixin, Base):
    """
    An order taken by an employee during a reservation.
    """

    # "order" is a reserved SQL keyword
    __tablename__ = "restaurant_order"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Stale updates raise StaleDataError
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)
    __mapper_args__ = {"version_id_col": version_id}

    reservation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("reservation.id"), nullable=False, index=True
    )
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employee.id"), nullable=False, index=True
    )
    order_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    total_amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    reservation: Mapped["Reservation"] = relationship(back_populates="orders")
    employee: Mapped["Employee"] = relationship(back_populates="orders")
    order_items: Mapped[list["OrderItem"]] = relationship(
        back_populates="order", passive_deletes="all", order_by="OrderItem.id"
    )


class OrderItem(TimestampMixin, Base):
    """One menu item line within an order."""

    __tablename__ = "order_item"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Stale updates raise StaleDataError
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)
    __mapper_args__ = {"version_id_col": version_id}

    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("restaurant_order.id"), nullable=False, index=True
    )
    menu_item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("menu_item.id"), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    order: Mapped["Order"] = relationship(back_populates="order_items")
    menu_item: Mapped["MenuItem"] = relationship(back_populates="order_items")
