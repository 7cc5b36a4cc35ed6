"""
Request and response schemas for the reservation API.

Every entity has:
- ``*Create``: the POST body
- ``*Update``: the patchable fields, used as the patch "update view"
- ``*Output``: the flat representation returned by list/get/create

Some entities also have a ``*Detail`` output embedding related rows.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from reservation_shared.config.constants import FieldLengths, Limits, MIN_PARTY_SIZE
from reservation_shared.utils.schemas import CamelModel


# =============================================================================
# Customer
# =============================================================================


class CustomerCreate(CamelModel):
    first_name: str = Field(min_length=1, max_length=FieldLengths.CUSTOMER_NAME)
    last_name: str = Field(min_length=1, max_length=FieldLengths.CUSTOMER_NAME)
    email: str = Field(min_length=1, max_length=FieldLengths.CUSTOMER_EMAIL)
    phone_number: str = Field(min_length=1, max_length=FieldLengths.CUSTOMER_PHONE)


class CustomerUpdate(CamelModel):
    first_name: str = Field(min_length=1, max_length=FieldLengths.CUSTOMER_NAME)
    last_name: str = Field(min_length=1, max_length=FieldLengths.CUSTOMER_NAME)


class CustomerOutput(CamelModel):
    customer_id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str


# =============================================================================
# Restaurant
# =============================================================================


class RestaurantCreate(CamelModel):
    name: str = Field(min_length=1, max_length=FieldLengths.RESTAURANT_NAME)
    address: str = Field(min_length=1, max_length=FieldLengths.RESTAURANT_ADDRESS)
    phone_number: str = Field(min_length=1, max_length=FieldLengths.RESTAURANT_PHONE)
    opening_hours: Decimal = Field(ge=0, max_digits=5, decimal_places=2)


class RestaurantUpdate(RestaurantCreate):
    pass


class RestaurantOutput(CamelModel):
    restaurant_id: int
    name: str
    address: str
    phone_number: str
    opening_hours: float


# =============================================================================
# Table
# =============================================================================


class TableCreate(CamelModel):
    restaurant_id: int
    capacity: int = Field(ge=1, le=Limits.MAX_COUNT)


class TableUpdate(CamelModel):
    capacity: int = Field(ge=1, le=Limits.MAX_COUNT)


class ReservationTableOutput(CamelModel):
    reservation_table_id: int
    reservation_id: int
    table_id: int


class TableOutput(CamelModel):
    table_id: int
    restaurant_id: int
    capacity: int


class TableDetail(TableOutput):
    reservation_tables: list[ReservationTableOutput] = []


# =============================================================================
# Employee
# =============================================================================


class EmployeeCreate(CamelModel):
    restaurant_id: int
    first_name: str = Field(min_length=1, max_length=FieldLengths.EMPLOYEE_NAME)
    last_name: str = Field(min_length=1, max_length=FieldLengths.EMPLOYEE_NAME)
    position: str = Field(min_length=1, max_length=FieldLengths.EMPLOYEE_POSITION)


class EmployeeUpdate(CamelModel):
    first_name: str = Field(min_length=1, max_length=FieldLengths.EMPLOYEE_NAME)
    last_name: str = Field(min_length=1, max_length=FieldLengths.EMPLOYEE_NAME)
    position: str = Field(min_length=1, max_length=FieldLengths.EMPLOYEE_POSITION)


class EmployeeOutput(CamelModel):
    employee_id: int
    restaurant_id: int
    first_name: str
    last_name: str
    position: str


class AverageOrderAmount(CamelModel):
    employee_id: int
    average_order_amount: float


# =============================================================================
# Menu item
# =============================================================================


class MenuItemCreate(CamelModel):
    restaurant_id: int
    name: str = Field(min_length=1, max_length=FieldLengths.MENU_ITEM_NAME)
    description: str = Field(min_length=1, max_length=FieldLengths.MENU_ITEM_DESCRIPTION)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class MenuItemUpdate(CamelModel):
    name: str = Field(min_length=1, max_length=FieldLengths.MENU_ITEM_NAME)
    description: str = Field(min_length=1, max_length=FieldLengths.MENU_ITEM_DESCRIPTION)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class MenuItemOutput(CamelModel):
    menu_item_id: int
    restaurant_id: int
    name: str
    description: str
    price: float


# =============================================================================
# Order item
# =============================================================================


class OrderItemCreate(CamelModel):
    menu_item_id: int
    order_id: int
    quantity: int = Field(ge=1, le=Limits.MAX_COUNT)


class OrderItemUpdate(CamelModel):
    quantity: int = Field(ge=1, le=Limits.MAX_COUNT)


class OrderItemOutput(CamelModel):
    order_item_id: int
    order_id: int
    menu_item_id: int
    quantity: int


class OrderItemDetail(OrderItemOutput):
    menu_item: MenuItemOutput


# =============================================================================
# Order
# =============================================================================


class OrderCreate(CamelModel):
    reservation_id: int
    employee_id: int
    order_date: datetime = Field(default_factory=datetime.now)
    total_amount: int = Field(ge=0, le=Limits.MAX_COUNT)


class OrderUpdate(CamelModel):
    order_date: datetime
    total_amount: int = Field(ge=0, le=Limits.MAX_COUNT)


class OrderOutput(CamelModel):
    order_id: int
    reservation_id: int
    employee_id: int
    order_date: datetime
    total_amount: int
    order_items: list[OrderItemOutput] = []


class OrderDetail(OrderOutput):
    order_items: list[OrderItemDetail] = []


# =============================================================================
# Reservation
# =============================================================================


class ReservationCreate(CamelModel):
    # Party size is checked by the service once references are resolved, so a
    # missing restaurant or customer is reported before a bad party size.
    restaurant_id: int
    customer_id: int
    reservation_date: datetime = Field(default_factory=datetime.now)
    party_size: int


class ReservationUpdate(CamelModel):
    reservation_date: datetime
    party_size: int = Field(ge=MIN_PARTY_SIZE, le=Limits.MAX_COUNT)


class ReservationOutput(CamelModel):
    reservation_id: int
    restaurant_id: int
    customer_id: int
    reservation_date: datetime
    party_size: int


class ReservationDetail(ReservationOutput):
    reservation_tables: list[ReservationTableOutput] = []
    orders: list[OrderOutput] = []


class ReservationWithCustomerAndRestaurant(ReservationOutput):
    customer: CustomerOutput
    restaurant: RestaurantOutput


# =============================================================================
# Aggregates
# =============================================================================


class CustomerDetail(CustomerOutput):
    reservations: list[ReservationOutput] = []


class RestaurantDetail(RestaurantOutput):
    employees: list[EmployeeOutput] = []
    tables: list[TableOutput] = []
    menu_items: list[MenuItemOutput] = []
    reservations: list[ReservationOutput] = []
