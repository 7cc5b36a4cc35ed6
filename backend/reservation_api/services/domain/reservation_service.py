"""
Reservation Service.

Business rules:
- A reservation needs an existing restaurant, then an existing customer
- Party size is at least 1, checked once both references resolve
"""

from __future__ import annotations

from reservation_api.models import Reservation
from reservation_api.repositories import (
    CustomerRepository,
    MenuItemRepository,
    OrderRepository,
    ReservationRepository,
    RestaurantRepository,
)
from reservation_api.schemas import (
    CustomerOutput,
    MenuItemOutput,
    OrderDetail,
    ReservationCreate,
    ReservationOutput,
    ReservationUpdate,
    ReservationWithCustomerAndRestaurant,
)
from reservation_api.services.base_service import CrudService, Reference
from reservation_api.services.mappers import (
    RESERVATION_MAPPER,
    customer_to_output,
    menu_item_to_output,
    order_to_detail,
    reservation_to_output,
    reservation_with_customer_and_restaurant,
)
from reservation_shared.config.constants import Limits, MIN_PARTY_SIZE
from reservation_shared.utils.exceptions import NotFoundError, ValidationError


class ReservationService(
    CrudService[Reservation, ReservationCreate, ReservationUpdate, ReservationOutput]
):
    def __init__(
        self,
        repo: ReservationRepository,
        restaurants: RestaurantRepository,
        customers: CustomerRepository,
        orders: OrderRepository,
        menu_items: MenuItemRepository,
    ):
        super().__init__(
            repo=repo,
            mapper=RESERVATION_MAPPER,
            update_schema=ReservationUpdate,
            entity_name="Reservation",
            references=[
                Reference("restaurantId", "restaurant_id", "Restaurant", restaurants),
                Reference("customerId", "customer_id", "Customer", customers),
            ],
        )
        self._reservations = repo
        self._customers = customers
        self._orders = orders
        self._menu_items = menu_items

    def _validate_create(self, body: ReservationCreate) -> None:
        if body.party_size < MIN_PARTY_SIZE:
            raise ValidationError(
                "Party size must be greater than zero.",
                errors=[
                    {
                        "field": "partySize",
                        "rule": "greater_than_equal",
                        "message": "Party size must be greater than zero.",
                    }
                ],
            )
        if body.party_size > Limits.MAX_COUNT:
            raise ValidationError(
                "Party size is too large.",
                errors=[
                    {
                        "field": "partySize",
                        "rule": "less_than_equal",
                        "message": f"Party size must be at most {Limits.MAX_COUNT}.",
                    }
                ],
            )

    def list_by_customer(self, customer_id: int) -> list[ReservationOutput]:
        """
        Raises:
            NotFoundError: If the customer has no reservations.
        """
        reservations = self._reservations.find_by_customer(customer_id)
        if not reservations:
            raise NotFoundError("Reservations for customer", customer_id)
        return [reservation_to_output(r) for r in reservations]

    def list_with_customer_and_restaurant(self) -> list[ReservationWithCustomerAndRestaurant]:
        return [
            reservation_with_customer_and_restaurant(r)
            for r in self._reservations.find_with_customer_and_restaurant()
        ]

    def customers_with_party_size_over(self, party_size: int) -> list[CustomerOutput]:
        """
        Customers with at least one reservation larger than party_size.

        Raises:
            ValidationError: If party_size is not positive.
        """
        if party_size <= 0:
            raise ValidationError(
                "Party size must be greater than zero.",
                errors=[
                    {
                        "field": "partySize",
                        "rule": "greater_than",
                        "message": "Party size must be greater than zero.",
                    }
                ],
            )
        return [customer_to_output(c) for c in self._customers.find_with_party_size_over(party_size)]

    def orders_for(self, reservation_id: int) -> list[OrderDetail]:
        """Orders with their items and menu items."""
        self.ensure_exists(reservation_id)
        return [order_to_detail(o) for o in self._orders.find_by_reservation(reservation_id)]

    def menu_items_for(self, reservation_id: int) -> list[MenuItemOutput]:
        """Distinct menu items ordered within the reservation."""
        self.ensure_exists(reservation_id)
        return [menu_item_to_output(m) for m in self._menu_items.find_by_reservation(reservation_id)]
