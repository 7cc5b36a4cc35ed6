"""
Order item endpoints.
"""

from fastapi import APIRouter, Body, Depends, Response, status

from reservation_api.dependencies import get_order_item_service
from reservation_api.repositories import RepositoryFilters
from reservation_api.routers._common import PageParams, get_page_params, set_pagination_header
from reservation_api.schemas import OrderItemCreate, OrderItemOutput
from reservation_api.services.domain import OrderItemService
from reservation_shared.security.auth import current_user
from reservation_shared.utils.schemas import PatchOperation


router = APIRouter(
    prefix="/api/order-items",
    tags=["order-items"],
    dependencies=[Depends(current_user)],
)


@router.get("", response_model=list[OrderItemOutput])
def list_order_items(
    response: Response,
    page: PageParams = Depends(get_page_params),
    service: OrderItemService = Depends(get_order_item_service),
) -> list[OrderItemOutput]:
    order_items, meta = service.list_all(RepositoryFilters(**page.to_filter_kwargs()))
    set_pagination_header(response, meta)
    return order_items


@router.get("/{order_item_id}", response_model=OrderItemOutput)
def get_order_item(
    order_item_id: int,
    service: OrderItemService = Depends(get_order_item_service),
) -> OrderItemOutput:
    return service.get(order_item_id)


@router.post("", response_model=OrderItemOutput)
def create_order_item(
    body: OrderItemCreate,
    service: OrderItemService = Depends(get_order_item_service),
) -> OrderItemOutput:
    """Create an order item; menuItemId and orderId must exist."""
    return service.create(body)


@router.patch("/{order_item_id}", status_code=status.HTTP_204_NO_CONTENT)
def patch_order_item(
    order_item_id: int,
    operations: list[PatchOperation] = Body(...),
    service: OrderItemService = Depends(get_order_item_service),
) -> None:
    service.patch(order_item_id, operations)


@router.delete("/{order_item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order_item(
    order_item_id: int,
    service: OrderItemService = Depends(get_order_item_service),
) -> None:
    service.delete(order_item_id)
