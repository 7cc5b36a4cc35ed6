"""
Customer Repository - Data access for customers.
"""

from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.orm import Session, selectinload

from reservation_api.models import Customer, Reservation
from reservation_shared.config.constants import Limits
from .base import BaseRepository, RepositoryFilters


@dataclass
class CustomerFilters(RepositoryFilters):
    """Filters specific to customers."""

    email: str | None = None


class CustomerRepository(BaseRepository[Customer]):
    search_fields = ("first_name", "last_name", "email")

    @property
    def model(self) -> type[Customer]:
        return Customer

    def _apply_filters(self, query: Select, filters: RepositoryFilters) -> Select:
        if isinstance(filters, CustomerFilters) and filters.email:
            query = query.where(Customer.email == filters.email.strip())
        return query

    def _detail_options(self):
        return (selectinload(Customer.reservations),)

    def find_with_party_size_over(self, party_size: int) -> Sequence[Customer]:
        """Distinct customers holding a reservation larger than party_size."""
        if party_size >= Limits.MAX_COUNT:
            return []
        has_large_reservation = (
            select(Reservation.id)
            .where(
                Reservation.customer_id == Customer.id,
                Reservation.party_size > party_size,
            )
            .exists()
        )
        query = select(Customer).where(has_large_reservation).order_by(Customer.id)
        return self._db.execute(query).scalars().all()


def get_customer_repository(db: Session) -> CustomerRepository:
    return CustomerRepository(db)
