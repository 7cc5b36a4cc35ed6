"""
Restaurant Repository - Data access for restaurants.
"""

from dataclasses import dataclass

from sqlalchemy import Select
from sqlalchemy.orm import Session, selectinload

from reservation_api.models import Restaurant
from .base import BaseRepository, RepositoryFilters


@dataclass
class RestaurantFilters(RepositoryFilters):
    """Filters specific to restaurants."""

    name: str | None = None


class RestaurantRepository(BaseRepository[Restaurant]):
    """
    Repository for Restaurant entities.

    The detail query eagerly loads employees, tables, menu items
    and reservations.
    """

    search_fields = ("name", "address", "phone_number")

    @property
    def model(self) -> type[Restaurant]:
        return Restaurant

    def _apply_filters(self, query: Select, filters: RepositoryFilters) -> Select:
        if isinstance(filters, RestaurantFilters) and filters.name:
            query = query.where(Restaurant.name == filters.name.strip())
        return query

    def _detail_options(self):
        return (
            selectinload(Restaurant.employees),
            selectinload(Restaurant.tables),
            selectinload(Restaurant.menu_items),
            selectinload(Restaurant.reservations),
        )


def get_restaurant_repository(db: Session) -> RestaurantRepository:
    return RestaurantRepository(db)
