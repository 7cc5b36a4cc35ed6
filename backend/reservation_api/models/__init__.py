"""
SQLAlchemy ORM Models Package.

- base: Base class and TimestampMixin
- customer: Customer
- restaurant: Restaurant
- table: Table, ReservationTable
- employee: Employee
- menu_item: MenuItem
- reservation: Reservation
- order: Order, OrderItem
- user: User
"""

from .base import Base, TimestampMixin

from .customer import Customer
from .restaurant import Restaurant
from .table import Table, ReservationTable
from .employee import Employee
from .menu_item import MenuItem
from .reservation import Reservation
from .order import Order, OrderItem
from .user import User

__all__ = [
    "Base",
    "TimestampMixin",
    "Customer",
    "Restaurant",
    "Table",
    "ReservationTable",
    "Employee",
    "MenuItem",
    "Reservation",
    "Order",
    "OrderItem",
    "User",
]
