"""
FastAPI dependency factories wiring repositories into services.

Every service is built per request around the request's database session:

    @router.get("/{table_id}")
    def get_table(table_id: int, service: TableService = Depends(get_table_service)):
        return service.get(table_id)
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from reservation_api.repositories import (
    get_customer_repository,
    get_employee_repository,
    get_menu_item_repository,
    get_order_item_repository,
    get_order_repository,
    get_reservation_repository,
    get_restaurant_repository,
    get_table_repository,
    get_user_repository,
)
from reservation_api.services.domain import (
    CustomerService,
    EmployeeService,
    MenuItemService,
    OrderItemService,
    OrderService,
    ReservationService,
    RestaurantService,
    TableService,
    UserService,
)
from reservation_shared.config.settings import Settings, get_settings
from reservation_shared.infrastructure.db import get_db


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(get_customer_repository(db))


def get_restaurant_service(db: Session = Depends(get_db)) -> RestaurantService:
    return RestaurantService(get_restaurant_repository(db))


def get_table_service(db: Session = Depends(get_db)) -> TableService:
    return TableService(get_table_repository(db), get_restaurant_repository(db))


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(
        get_employee_repository(db),
        restaurants=get_restaurant_repository(db),
        orders=get_order_repository(db),
    )


def get_menu_item_service(db: Session = Depends(get_db)) -> MenuItemService:
    return MenuItemService(get_menu_item_repository(db), get_restaurant_repository(db))


def get_reservation_service(db: Session = Depends(get_db)) -> ReservationService:
    return ReservationService(
        get_reservation_repository(db),
        restaurants=get_restaurant_repository(db),
        customers=get_customer_repository(db),
        orders=get_order_repository(db),
        menu_items=get_menu_item_repository(db),
    )


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(
        get_order_repository(db),
        reservations=get_reservation_repository(db),
        employees=get_employee_repository(db),
    )


def get_order_item_service(db: Session = Depends(get_db)) -> OrderItemService:
    return OrderItemService(
        get_order_item_repository(db),
        menu_items=get_menu_item_repository(db),
        orders=get_order_repository(db),
    )


def get_user_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(get_user_repository(db), settings)
