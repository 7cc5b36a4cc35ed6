"""
Repository Pattern implementation.
One repository per entity; list queries share paging, filtering and search.

Usage:
    from reservation_api.repositories import CustomerFilters, get_customer_repository

    repo = get_customer_repository(db)
    customers, meta = repo.get_all(CustomerFilters(email="ana@example.com", page_size=5))
    customer = repo.get_by_id(123)
"""

from .base import (
    BaseRepository,
    PaginationMetaData,
    RepositoryFilters,
    clamp_page_number,
    clamp_page_size,
)
from .customer import CustomerRepository, CustomerFilters, get_customer_repository
from .restaurant import RestaurantRepository, RestaurantFilters, get_restaurant_repository
from .table import TableRepository, get_table_repository
from .employee import EmployeeRepository, EmployeeFilters, get_employee_repository
from .menu_item import MenuItemRepository, MenuItemFilters, get_menu_item_repository
from .reservation import ReservationRepository, get_reservation_repository
from .order import (
    OrderRepository,
    OrderItemRepository,
    OrderFilters,
    get_order_repository,
    get_order_item_repository,
)
from .user import UserRepository, get_user_repository

__all__ = [
    # Base
    "BaseRepository",
    "PaginationMetaData",
    "RepositoryFilters",
    "clamp_page_number",
    "clamp_page_size",
    # Customer
    "CustomerRepository",
    "CustomerFilters",
    "get_customer_repository",
    # Restaurant
    "RestaurantRepository",
    "RestaurantFilters",
    "get_restaurant_repository",
    # Table
    "TableRepository",
    "get_table_repository",
    # Employee
    "EmployeeRepository",
    "EmployeeFilters",
    "get_employee_repository",
    # Menu item
    "MenuItemRepository",
    "MenuItemFilters",
    "get_menu_item_repository",
    # Reservation
    "ReservationRepository",
    "get_reservation_repository",
    # Order / order item
    "OrderRepository",
    "OrderItemRepository",
    "OrderFilters",
    "get_order_repository",
    "get_order_item_repository",
    # User
    "UserRepository",
    "get_user_repository",
]
