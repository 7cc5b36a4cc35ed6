"""
Customer model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reservation_shared.config.constants import FieldLengths

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .reservation import Reservation


class Customer(TimestampMixin, Base):
    """A guest who books reservations."""

    __tablename__ = "customer"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Stale updates raise StaleDataError
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)
    __mapper_args__ = {"version_id_col": version_id}

    first_name: Mapped[str] = mapped_column(String(FieldLengths.CUSTOMER_NAME), nullable=False)
    last_name: Mapped[str] = mapped_column(String(FieldLengths.CUSTOMER_NAME), nullable=False)
    email: Mapped[str] = mapped_column(
        String(FieldLengths.CUSTOMER_EMAIL), nullable=False, index=True
    )
    phone_number: Mapped[str] = mapped_column(String(FieldLengths.CUSTOMER_PHONE), nullable=False)

    reservations: Mapped[list["Reservation"]] = relationship(
        back_populates="customer", passive_deletes="all", order_by="Reservation.id"
    )
