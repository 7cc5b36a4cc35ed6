"""
Order Services: orders and their items.
"""

from __future__ import annotations

from reservation_api.models import Order, OrderItem
from reservation_api.repositories import (
    EmployeeRepository,
    MenuItemRepository,
    OrderItemRepository,
    OrderRepository,
    ReservationRepository,
)
from reservation_api.schemas import (
    OrderCreate,
    OrderItemCreate,
    OrderItemOutput,
    OrderItemUpdate,
    OrderOutput,
    OrderUpdate,
)
from reservation_api.services.base_service import CrudService, Reference
from reservation_api.services.mappers import ORDER_ITEM_MAPPER, ORDER_MAPPER


class OrderService(CrudService[Order, OrderCreate, OrderUpdate, OrderOutput]):
    """An order needs its reservation, then its employee."""

    def __init__(
        self,
        repo: OrderRepository,
        reservations: ReservationRepository,
        employees: EmployeeRepository,
    ):
        super().__init__(
            repo=repo,
            mapper=ORDER_MAPPER,
            update_schema=OrderUpdate,
            entity_name="Order",
            references=[
                Reference("reservationId", "reservation_id", "Reservation", reservations),
                Reference("employeeId", "employee_id", "Employee", employees),
            ],
        )


class OrderItemService(CrudService[OrderItem, OrderItemCreate, OrderItemUpdate, OrderItemOutput]):
    """An order item needs its menu item, then its order."""

    def __init__(
        self,
        repo: OrderItemRepository,
        menu_items: MenuItemRepository,
        orders: OrderRepository,
    ):
        super().__init__(
            repo=repo,
            mapper=ORDER_ITEM_MAPPER,
            update_schema=OrderItemUpdate,
            entity_name="Order item",
            references=[
                Reference("menuItemId", "menu_item_id", "Menu item", menu_items),
                Reference("orderId", "order_id", "Order", orders),
            ],
        )
