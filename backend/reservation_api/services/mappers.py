"""
Explicit mapping between ORM entities and API schemas.

Each entity gets plain functions:
- ``*_to_output``: entity -> response schema
- ``*_from_create``: create schema -> new entity
- ``*_to_update``: entity -> update view (patchable fields only)
- ``apply_*_update``: validated update view -> entity, touching only the
  patchable fields

They are bundled per entity in an ``EntityMapper`` consumed by the CRUD
services.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from reservation_api.models import (
    Customer,
    Employee,
    MenuItem,
    Order,
    OrderItem,
    Reservation,
    ReservationTable,
    Restaurant,
    Table,
)
from reservation_api.schemas import (
    CustomerCreate,
    CustomerDetail,
    CustomerOutput,
    CustomerUpdate,
    EmployeeCreate,
    EmployeeOutput,
    EmployeeUpdate,
    MenuItemCreate,
    MenuItemOutput,
    MenuItemUpdate,
    OrderCreate,
    OrderDetail,
    OrderItemCreate,
    OrderItemDetail,
    OrderItemOutput,
    OrderItemUpdate,
    OrderOutput,
    OrderUpdate,
    ReservationCreate,
    ReservationDetail,
    ReservationOutput,
    ReservationTableOutput,
    ReservationUpdate,
    ReservationWithCustomerAndRestaurant,
    RestaurantCreate,
    RestaurantDetail,
    RestaurantOutput,
    RestaurantUpdate,
    TableCreate,
    TableDetail,
    TableOutput,
    TableUpdate,
)


@dataclass(frozen=True)
class EntityMapper:
    """The mapping functions of one entity."""

    to_output: Callable[[Any], Any]
    from_create: Callable[[Any], Any]
    to_update: Callable[[Any], Any]
    apply_update: Callable[[Any, Any], None]
    # Single-entity GET; defaults to to_output
    to_detail: Callable[[Any], Any] | None = None


# =============================================================================
# Customer
# =============================================================================


def customer_to_output(customer: Customer) -> CustomerOutput:
    return CustomerOutput(
        customer_id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        email=customer.email,
        phone_number=customer.phone_number,
    )


def customer_to_detail(customer: Customer) -> CustomerDetail:
    return CustomerDetail(
        **customer_to_output(customer).model_dump(),
        reservations=[reservation_to_output(r) for r in customer.reservations],
    )


def customer_from_create(body: CustomerCreate) -> Customer:
    return Customer(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        phone_number=body.phone_number,
    )


def customer_to_update(customer: Customer) -> CustomerUpdate:
    return CustomerUpdate.model_construct(
        first_name=customer.first_name,
        last_name=customer.last_name,
    )


def apply_customer_update(customer: Customer, update: CustomerUpdate) -> None:
    customer.first_name = update.first_name
    customer.last_name = update.last_name


# =============================================================================
# Restaurant
# =============================================================================


def restaurant_to_output(restaurant: Restaurant) -> RestaurantOutput:
    return RestaurantOutput(
        restaurant_id=restaurant.id,
        name=restaurant.name,
        address=restaurant.address,
        phone_number=restaurant.phone_number,
        opening_hours=float(restaurant.opening_hours),
    )


def restaurant_to_detail(restaurant: Restaurant) -> RestaurantDetail:
    return RestaurantDetail(
        **restaurant_to_output(restaurant).model_dump(),
        employees=[employee_to_output(e) for e in restaurant.employees],
        tables=[table_to_output(t) for t in restaurant.tables],
        menu_items=[menu_item_to_output(m) for m in restaurant.menu_items],
        reservations=[reservation_to_output(r) for r in restaurant.reservations],
    )


def restaurant_from_create(body: RestaurantCreate) -> Restaurant:
    return Restaurant(
        name=body.name,
        address=body.address,
        phone_number=body.phone_number,
        opening_hours=body.opening_hours,
    )


def restaurant_to_update(restaurant: Restaurant) -> RestaurantUpdate:
    return RestaurantUpdate.model_construct(
        name=restaurant.name,
        address=restaurant.address,
        phone_number=restaurant.phone_number,
        opening_hours=restaurant.opening_hours,
    )


def apply_restaurant_update(restaurant: Restaurant, update: RestaurantUpdate) -> None:
    restaurant.name = update.name
    restaurant.address = update.address
    restaurant.phone_number = update.phone_number
    restaurant.opening_hours = update.opening_hours


# =============================================================================
# Table
# =============================================================================


def reservation_table_to_output(link: ReservationTable) -> ReservationTableOutput:
    return ReservationTableOutput(
        reservation_table_id=link.id,
        reservation_id=link.reservation_id,
        table_id=link.table_id,
    )


def table_to_output(table: Table) -> TableOutput:
    return TableOutput(
        table_id=table.id,
        restaurant_id=table.restaurant_id,
        capacity=table.capacity,
    )


def table_to_detail(table: Table) -> TableDetail:
    return TableDetail(
        **table_to_output(table).model_dump(),
        reservation_tables=[reservation_table_to_output(rt) for rt in table.reservation_tables],
    )


def table_from_create(body: TableCreate) -> Table:
    return Table(restaurant_id=body.restaurant_id, capacity=body.capacity)


def table_to_update(table: Table) -> TableUpdate:
    return TableUpdate.model_construct(capacity=table.capacity)


def apply_table_update(table: Table, update: TableUpdate) -> None:
    table.capacity = update.capacity


# =============================================================================
# Employee
# =============================================================================


def employee_to_output(employee: Employee) -> EmployeeOutput:
    return EmployeeOutput(
        employee_id=employee.id,
        restaurant_id=employee.restaurant_id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        position=employee.position,
    )


def employee_from_create(body: EmployeeCreate) -> Employee:
    return Employee(
        restaurant_id=body.restaurant_id,
        first_name=body.first_name,
        last_name=body.last_name,
        position=body.position,
    )


def employee_to_update(employee: Employee) -> EmployeeUpdate:
    return EmployeeUpdate.model_construct(
        first_name=employee.first_name,
        last_name=employee.last_name,
        position=employee.position,
    )


def apply_employee_update(employee: Employee, update: EmployeeUpdate) -> None:
    employee.first_name = update.first_name
    employee.last_name = update.last_name
    employee.position = update.position


# =============================================================================
# Menu item
# =============================================================================


def menu_item_to_output(menu_item: MenuItem) -> MenuItemOutput:
    return MenuItemOutput(
        menu_item_id=menu_item.id,
        restaurant_id=menu_item.restaurant_id,
        name=menu_item.name,
        description=menu_item.description,
        price=float(menu_item.price),
    )


def menu_item_from_create(body: MenuItemCreate) -> MenuItem:
    return MenuItem(
        restaurant_id=body.restaurant_id,
        name=body.name,
        description=body.description,
        price=body.price,
    )


def menu_item_to_update(menu_item: MenuItem) -> MenuItemUpdate:
    return MenuItemUpdate.model_construct(
        name=menu_item.name,
        description=menu_item.description,
        price=menu_item.price,
    )


def apply_menu_item_update(menu_item: MenuItem, update: MenuItemUpdate) -> None:
    menu_item.name = update.name
    menu_item.description = update.description
    menu_item.price = update.price


# =============================================================================
# Order item
# =============================================================================


def order_item_to_output(order_item: OrderItem) -> OrderItemOutput:
    return OrderItemOutput(
        order_item_id=order_item.id,
        order_id=order_item.order_id,
        menu_item_id=order_item.menu_item_id,
        quantity=order_item.quantity,
    )


def order_item_to_detail(order_item: OrderItem) -> OrderItemDetail:
    return OrderItemDetail(
        **order_item_to_output(order_item).model_dump(),
        menu_item=menu_item_to_output(order_item.menu_item),
    )


def order_item_from_create(body: OrderItemCreate) -> OrderItem:
    return OrderItem(
        order_id=body.order_id,
        menu_item_id=body.menu_item_id,
        quantity=body.quantity,
    )


def order_item_to_update(order_item: OrderItem) -> OrderItemUpdate:
    return OrderItemUpdate.model_construct(quantity=order_item.quantity)


def apply_order_item_update(order_item: OrderItem, update: OrderItemUpdate) -> None:
    order_item.quantity = update.quantity


# =============================================================================
# Order
# =============================================================================


def order_to_output(order: Order) -> OrderOutput:
    return OrderOutput(
        order_id=order.id,
        reservation_id=order.reservation_id,
        employee_id=order.employee_id,
        order_date=order.order_date,
        total_amount=order.total_amount,
        order_items=[order_item_to_output(i) for i in order.order_items],
    )


def order_to_detail(order: Order) -> OrderDetail:
    """Order with each item's menu item embedded."""
    return OrderDetail(
        order_id=order.id,
        reservation_id=order.reservation_id,
        employee_id=order.employee_id,
        order_date=order.order_date,
        total_amount=order.total_amount,
        order_items=[order_item_to_detail(i) for i in order.order_items],
    )


def order_from_create(body: OrderCreate) -> Order:
    return Order(
        reservation_id=body.reservation_id,
        employee_id=body.employee_id,
        order_date=body.order_date,
        total_amount=body.total_amount,
    )


def order_to_update(order: Order) -> OrderUpdate:
    return OrderUpdate.model_construct(
        order_date=order.order_date,
        total_amount=order.total_amount,
    )


def apply_order_update(order: Order, update: OrderUpdate) -> None:
    order.order_date = update.order_date
    order.total_amount = update.total_amount


# =============================================================================
# Reservation
# =============================================================================


def reservation_to_output(reservation: Reservation) -> ReservationOutput:
    return ReservationOutput(
        reservation_id=reservation.id,
        restaurant_id=reservation.restaurant_id,
        customer_id=reservation.customer_id,
        reservation_date=reservation.reservation_date,
        party_size=reservation.party_size,
    )


def reservation_to_detail(reservation: Reservation) -> ReservationDetail:
    return ReservationDetail(
        **reservation_to_output(reservation).model_dump(),
        reservation_tables=[
            reservation_table_to_output(rt) for rt in reservation.reservation_tables
        ],
        orders=[order_to_output(o) for o in reservation.orders],
    )


def reservation_with_customer_and_restaurant(
    reservation: Reservation,
) -> ReservationWithCustomerAndRestaurant:
    return ReservationWithCustomerAndRestaurant(
        **reservation_to_output(reservation).model_dump(),
        customer=customer_to_output(reservation.customer),
        restaurant=restaurant_to_output(reservation.restaurant),
    )


def reservation_from_create(body: ReservationCreate) -> Reservation:
    return Reservation(
        restaurant_id=body.restaurant_id,
        customer_id=body.customer_id,
        reservation_date=body.reservation_date,
        party_size=body.party_size,
    )


def reservation_to_update(reservation: Reservation) -> ReservationUpdate:
    return ReservationUpdate.model_construct(
        reservation_date=reservation.reservation_date,
        party_size=reservation.party_size,
    )


def apply_reservation_update(reservation: Reservation, update: ReservationUpdate) -> None:
    reservation.reservation_date = update.reservation_date
    reservation.party_size = update.party_size


# =============================================================================
# Per-entity bundles
# =============================================================================

CUSTOMER_MAPPER = EntityMapper(
    to_output=customer_to_output,
    from_create=customer_from_create,
    to_update=customer_to_update,
    apply_update=apply_customer_update,
    to_detail=customer_to_detail,
)

RESTAURANT_MAPPER = EntityMapper(
    to_output=restaurant_to_output,
    from_create=restaurant_from_create,
    to_update=restaurant_to_update,
    apply_update=apply_restaurant_update,
    to_detail=restaurant_to_detail,
)

TABLE_MAPPER = EntityMapper(
    to_output=table_to_output,
    from_create=table_from_create,
    to_update=table_to_update,
    apply_update=apply_table_update,
    to_detail=table_to_detail,
)

EMPLOYEE_MAPPER = EntityMapper(
    to_output=employee_to_output,
    from_create=employee_from_create,
    to_update=employee_to_update,
    apply_update=apply_employee_update,
)

MENU_ITEM_MAPPER = EntityMapper(
    to_output=menu_item_to_output,
    from_create=menu_item_from_create,
    to_update=menu_item_to_update,
    apply_update=apply_menu_item_update,
)

ORDER_MAPPER = EntityMapper(
    to_output=order_to_output,
    from_create=order_from_create,
    to_update=order_to_update,
    apply_update=apply_order_update,
)

ORDER_ITEM_MAPPER = EntityMapper(
    to_output=order_item_to_output,
    from_create=order_item_from_create,
    to_update=order_item_to_update,
    apply_update=apply_order_item_update,
)

RESERVATION_MAPPER = EntityMapper(
    to_output=reservation_to_output,
    from_create=reservation_from_create,
    to_update=reservation_to_update,
    apply_update=apply_reservation_update,
    to_detail=reservation_to_detail,
)
