"""
Table model and its link to reservations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .reservation import Reservation
    from .restaurant import Restaurant


class Table(TimestampMixin, Base):
    """
    Physical table in a restaurant.
    """

    # "table" is a reserved SQL keyword
    __tablename__ = "restaurant_table"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Stale updates raise StaleDataError
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)
    __mapper_args__ = {"version_id_col": version_id}

    restaurant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("restaurant.id"), nullable=False, index=True
    )
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)

    restaurant: Mapped["Restaurant"] = relationship(back_populates="tables")
    reservation_tables: Mapped[list["ReservationTable"]] = relationship(
        back_populates="table", passive_deletes="all", order_by="ReservationTable.id"
    )


class ReservationTable(TimestampMixin, Base):
    """A table assigned to a reservation."""

    __tablename__ = "reservation_table"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    reservation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("reservation.id"), nullable=False, index=True
    )
    table_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("restaurant_table.id"), nullable=False, index=True
    )

    reservation: Mapped["Reservation"] = relationship(back_populates="reservation_tables")
    table: Mapped["Table"] = relationship(back_populates="reservation_tables")

    __table_args__ = (
        UniqueConstraint("reservation_id", "table_id", name="uq_reservation_table"),
    )
