"""
Menu Item Repository - Data access for menu items.
"""

from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from reservation_api.models import MenuItem, Order, OrderItem
from .base import BaseRepository, RepositoryFilters, is_storable_id


@dataclass
class MenuItemFilters(RepositoryFilters):
    """Filters specific to menu items."""

    name: str | None = None


class MenuItemRepository(BaseRepository[MenuItem]):
    search_fields = ("name", "description")

    @property
    def model(self) -> type[MenuItem]:
        return MenuItem

    def _apply_filters(self, query: Select, filters: RepositoryFilters) -> Select:
        if isinstance(filters, MenuItemFilters) and filters.name:
            query = query.where(MenuItem.name == filters.name.strip())
        return query

    def find_by_reservation(self, reservation_id: int) -> Sequence[MenuItem]:
        """Distinct menu items ordered within a reservation."""
        if not is_storable_id(reservation_id):
            return []
        ordered_ids = (
            select(OrderItem.menu_item_id)
            .join(Order, OrderItem.order_id == Order.id)
            .where(Order.reservation_id == reservation_id)
        )
        query = select(MenuItem).where(MenuItem.id.in_(ordered_ids)).order_by(MenuItem.id)
        return self._db.execute(query).scalars().all()


def get_menu_item_repository(db: Session) -> MenuItemRepository:
    return MenuItemRepository(db)
