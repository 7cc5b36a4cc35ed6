"""
Reservation model.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .customer import Customer
    from .order import Order
    from .restaurant import Restaurant
    from .table import ReservationTable


class Reservation(TimestampMixin, Base):
    """
    A customer's booking at a restaurant.
    Owns its orders and table assignments.
    """

    __tablename__ = "reservation"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Stale updates raise StaleDataError
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)
    __mapper_args__ = {"version_id_col": version_id}

    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customer.id"), nullable=False, index=True
    )
    restaurant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("restaurant.id"), nullable=False, index=True
    )
    reservation_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    party_size: Mapped[int] = mapped_column(Integer, nullable=False)

    customer: Mapped["Customer"] = relationship(back_populates="reservations")
    restaurant: Mapped["Restaurant"] = relationship(back_populates="reservations")
    orders: Mapped[list["Order"]] = relationship(
        back_populates="reservation", passive_deletes="all", order_by="Order.id"
    )
    reservation_tables: Mapped[list["ReservationTable"]] = relationship(
        back_populates="reservation", passive_deletes="all", order_by="ReservationTable.id"
    )

    __table_args__ = (
        CheckConstraint("party_size >= 1", name="ck_reservation_party_size"),
        Index("ix_reservation_party_size", "party_size"),
    )
