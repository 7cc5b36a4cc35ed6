"""
Order endpoints.
"""

from datetime import date

from fastapi import APIRouter, Body, Depends, Query, Response, status

from reservation_api.dependencies import get_order_service
from reservation_api.repositories import OrderFilters
from reservation_api.routers._common import PageParams, get_page_params, set_pagination_header
from reservation_api.schemas import OrderCreate, OrderOutput
from reservation_api.services.domain import OrderService
from reservation_shared.security.auth import current_user
from reservation_shared.utils.schemas import PatchOperation


router = APIRouter(
    prefix="/api/orders",
    tags=["orders"],
    dependencies=[Depends(current_user)],
)


@router.get("", response_model=list[OrderOutput])
def list_orders(
    response: Response,
    order_date: date | None = Query(default=None, alias="orderDate"),
    page: PageParams = Depends(get_page_params),
    service: OrderService = Depends(get_order_service),
) -> list[OrderOutput]:
    """List orders, optionally only those placed on orderDate."""
    orders, meta = service.list_all(OrderFilters(order_date=order_date, **page.to_filter_kwargs()))
    set_pagination_header(response, meta)
    return orders


@router.get("/{order_id}", response_model=OrderOutput)
def get_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),
) -> OrderOutput:
    """Order with its items."""
    return service.get(order_id)


@router.post("", response_model=OrderOutput)
def create_order(
    body: OrderCreate,
    service: OrderService = Depends(get_order_service),
) -> OrderOutput:
    """Create an order; reservationId and employeeId must exist."""
    return service.create(body)


@router.patch("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def patch_order(
    order_id: int,
    operations: list[PatchOperation] = Body(...),
    service: OrderService = Depends(get_order_service),
) -> None:
    service.patch(order_id, operations)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),
) -> None:
    service.delete(order_id)
