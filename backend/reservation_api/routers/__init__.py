"""
API routers, one per resource group.

All routes are prefixed with /api. Every router except users requires a
bearer token.
"""

from .customers import router as customers_router
from .restaurants import router as restaurants_router
from .tables import router as tables_router
from .employees import router as employees_router
from .menu_items import router as menu_items_router
from .orders import router as orders_router
from .order_items import router as order_items_router
from .reservations import router as reservations_router
from .users import router as users_router

ALL_ROUTERS = [
    users_router,
    customers_router,
    restaurants_router,
    tables_router,
    employees_router,
    menu_items_router,
    orders_router,
    order_items_router,
    reservations_router,
]

__all__ = ["ALL_ROUTERS"]
