"""
Employee model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reservation_shared.config.constants import FieldLengths

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .order import Order
    from .restaurant import Restaurant


class Employee(TimestampMixin, Base):
    """
    Restaurant staff member.
    "manager" is a position value, not a separate type.
    """

    __tablename__ = "employee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Stale updates raise StaleDataError
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)
    __mapper_args__ = {"version_id_col": version_id}

    restaurant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("restaurant.id"), nullable=False, index=True
    )
    first_name: Mapped[str] = mapped_column(
        String(FieldLengths.EMPLOYEE_NAME), nullable=False, index=True
    )
    last_name: Mapped[str] = mapped_column(String(FieldLengths.EMPLOYEE_NAME), nullable=False)
    position: Mapped[str] = mapped_column(String(FieldLengths.EMPLOYEE_POSITION), nullable=False)

    restaurant: Mapped["Restaurant"] = relationship(back_populates="employees")
    orders: Mapped[list["Order"]] = relationship(
        back_populates="employee", passive_deletes="all", order_by="Order.id"
    )
