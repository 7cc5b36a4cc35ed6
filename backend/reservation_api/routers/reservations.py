"""
Reservation endpoints, including the reservation-centric queries.

Static routes are declared before /{reservation_id}.
"""

from fastapi import APIRouter, Body, Depends, Response, status

from reservation_api.dependencies import get_reservation_service
from reservation_api.repositories import RepositoryFilters
from reservation_api.routers._common import PageParams, get_page_params, set_pagination_header
from reservation_api.schemas import (
    CustomerOutput,
    MenuItemOutput,
    OrderDetail,
    ReservationCreate,
    ReservationDetail,
    ReservationOutput,
    ReservationWithCustomerAndRestaurant,
)
from reservation_api.services.domain import ReservationService
from reservation_shared.security.auth import current_user
from reservation_shared.utils.schemas import PatchOperation


router = APIRouter(
    prefix="/api/reservations",
    tags=["reservations"],
    dependencies=[Depends(current_user)],
)


@router.get("", response_model=list[ReservationOutput])
def list_reservations(
    response: Response,
    page: PageParams = Depends(get_page_params),
    service: ReservationService = Depends(get_reservation_service),
) -> list[ReservationOutput]:
    reservations, meta = service.list_all(RepositoryFilters(**page.to_filter_kwargs()))
    set_pagination_header(response, meta)
    return reservations


@router.get(
    "/with-customer-and-restaurant",
    response_model=list[ReservationWithCustomerAndRestaurant],
)
def list_with_customer_and_restaurant(
    service: ReservationService = Depends(get_reservation_service),
) -> list[ReservationWithCustomerAndRestaurant]:
    return service.list_with_customer_and_restaurant()


@router.get("/customer/{customer_id}", response_model=list[ReservationOutput])
def list_by_customer(
    customer_id: int,
    service: ReservationService = Depends(get_reservation_service),
) -> list[ReservationOutput]:
    """Reservations of one customer; 404 when there are none."""
    return service.list_by_customer(customer_id)


@router.get("/customers-by-party-size/{party_size}", response_model=list[CustomerOutput])
def customers_by_party_size(
    party_size: int,
    service: ReservationService = Depends(get_reservation_service),
) -> list[CustomerOutput]:
    """Customers with a reservation larger than party_size."""
    return service.customers_with_party_size_over(party_size)


@router.get("/{reservation_id}", response_model=ReservationDetail)
def get_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service),
) -> ReservationDetail:
    return service.get(reservation_id)


@router.get("/{reservation_id}/orders", response_model=list[OrderDetail])
def list_reservation_orders(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service),
) -> list[OrderDetail]:
    return service.orders_for(reservation_id)


@router.get("/{reservation_id}/menu-items", response_model=list[MenuItemOutput])
def list_reservation_menu_items(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service),
) -> list[MenuItemOutput]:
    return service.menu_items_for(reservation_id)


@router.post("", response_model=ReservationOutput)
def create_reservation(
    body: ReservationCreate,
    service: ReservationService = Depends(get_reservation_service),
) -> ReservationOutput:
    """
    Create a reservation.

    restaurantId is checked first, then customerId, then partySize.
    """
    return service.create(body)


@router.patch("/{reservation_id}", status_code=status.HTTP_204_NO_CONTENT)
def patch_reservation(
    reservation_id: int,
    operations: list[PatchOperation] = Body(...),
    service: ReservationService = Depends(get_reservation_service),
) -> None:
    service.patch(reservation_id, operations)


@router.delete("/{reservation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service),
) -> None:
    service.delete(reservation_id)
