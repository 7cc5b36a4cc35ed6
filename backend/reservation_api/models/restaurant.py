"""
Restaurant model.

A restaurant is referenced by its employees, tables, menu items and
reservations. Deleting it is refused by the database while any remain.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reservation_shared.config.constants import FieldLengths

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .employee import Employee
    from .menu_item import MenuItem
    from .reservation import Reservation
    from .table import Table


class Restaurant(TimestampMixin, Base):
    __tablename__ = "restaurant"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Stale updates raise StaleDataError
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)
    __mapper_args__ = {"version_id_col": version_id}

    name: Mapped[str] = mapped_column(
        String(FieldLengths.RESTAURANT_NAME), nullable=False, index=True
    )
    address: Mapped[str] = mapped_column(String(FieldLengths.RESTAURANT_ADDRESS), nullable=False)
    phone_number: Mapped[str] = mapped_column(
        String(FieldLengths.RESTAURANT_PHONE), nullable=False
    )
    opening_hours: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False)

    employees: Mapped[list["Employee"]] = relationship(
        back_populates="restaurant", passive_deletes="all", order_by="Employee.id"
    )
    tables: Mapped[list["Table"]] = relationship(
        back_populates="restaurant", passive_deletes="all", order_by="Table.id"
    )
    menu_items: Mapped[list["MenuItem"]] = relationship(
        back_populates="restaurant", passive_deletes="all", order_by="MenuItem.id"
    )
    reservations: Mapped[list["Reservation"]] = relationship(
        back_populates="restaurant", passive_deletes="all", order_by="Reservation.id"
    )
