"""
Reservation Repository - Data access for reservations.
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload

from reservation_api.models import Order, Reservation
from .base import BaseRepository, is_storable_id


class ReservationRepository(BaseRepository[Reservation]):
    """
    Repository for Reservation entities.

    The detail query loads table assignments and orders with their items.
    """

    @property
    def model(self) -> type[Reservation]:
        return Reservation

    def _detail_options(self):
        return (
            selectinload(Reservation.reservation_tables),
            selectinload(Reservation.orders).selectinload(Order.order_items),
        )

    def find_by_customer(self, customer_id: int) -> Sequence[Reservation]:
        if not is_storable_id(customer_id):
            return []
        query = (
            select(Reservation)
            .where(Reservation.customer_id == customer_id)
            .order_by(Reservation.id)
        )
        return self._db.execute(query).scalars().all()

    def find_with_customer_and_restaurant(self) -> Sequence[Reservation]:
        query = (
            select(Reservation)
            .options(joinedload(Reservation.customer), joinedload(Reservation.restaurant))
            .order_by(Reservation.id)
        )
        return self._db.execute(query).scalars().unique().all()


def get_reservation_repository(db: Session) -> ReservationRepository:
    return ReservationRepository(db)
