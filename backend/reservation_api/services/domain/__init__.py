"""
Domain services.

Structure:
    Router (thin controller)
        ↓
    Service (business logic)
        ↓
    Repository (data access)
        ↓
    Model (entity)

Usage:
    from reservation_api.services.domain import TableService

    service = TableService(get_table_repository(db), get_restaurant_repository(db))
    tables, meta = service.list_all(RepositoryFilters(page_size=5))
"""

from .customer_service import CustomerService
from .restaurant_service import RestaurantService
from .table_service import TableService
from .employee_service import EmployeeService
from .menu_item_service import MenuItemService
from .reservation_service import ReservationService
from .order_service import OrderService, OrderItemService
from .user_service import UserService

__all__ = [
    "CustomerService",
    "RestaurantService",
    "TableService",
    "EmployeeService",
    "MenuItemService",
    "ReservationService",
    "OrderService",
    "OrderItemService",
    "UserService",
]
