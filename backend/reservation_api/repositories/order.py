"""
Order Repositories - Data access for orders and order items.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session, selectinload

from reservation_api.models import Order, OrderItem
from .base import BaseRepository, RepositoryFilters, is_storable_id


@dataclass
class OrderFilters(RepositoryFilters):
    """Filters specific to orders."""

    # Orders placed on this calendar day
    order_date: date | None = None


class OrderRepository(BaseRepository[Order]):
    @property
    def model(self) -> type[Order]:
        return Order

    def _apply_filters(self, query: Select, filters: RepositoryFilters) -> Select:
        if isinstance(filters, OrderFilters) and filters.order_date:
            start = datetime.combine(filters.order_date, time.min)
            query = query.where(
                Order.order_date >= start,
                Order.order_date < start + timedelta(days=1),
            )
        return query

    def _list_options(self):
        return (selectinload(Order.order_items),)

    def _detail_options(self):
        return (selectinload(Order.order_items),)

    def find_by_reservation(self, reservation_id: int) -> Sequence[Order]:
        """Orders of a reservation with their items and menu items."""
        if not is_storable_id(reservation_id):
            return []
        query = (
            select(Order)
            .where(Order.reservation_id == reservation_id)
            .options(selectinload(Order.order_items).selectinload(OrderItem.menu_item))
            .order_by(Order.id)
        )
        return self._db.execute(query).scalars().all()

    def average_total_for_employee(self, employee_id: int) -> float:
        """Average total amount of an employee's orders, 0 when there are none."""
        if not is_storable_id(employee_id):
            return 0.0
        query = select(func.avg(Order.total_amount)).where(Order.employee_id == employee_id)
        average = self._db.scalar(query)
        return float(average) if average is not None else 0.0


class OrderItemRepository(BaseRepository[OrderItem]):
    @property
    def model(self) -> type[OrderItem]:
        return OrderItem


def get_order_repository(db: Session) -> OrderRepository:
    return OrderRepository(db)


def get_order_item_repository(db: Session) -> OrderItemRepository:
    return OrderItemRepository(db)
