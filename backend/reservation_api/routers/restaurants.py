"""
Restaurant endpoints.
"""

from fastapi import APIRouter, Body, Depends, Query, Response, status

from reservation_api.dependencies import get_restaurant_service
from reservation_api.repositories import RestaurantFilters
from reservation_api.routers._common import PageParams, get_page_params, set_pagination_header
from reservation_api.schemas import RestaurantCreate, RestaurantDetail, RestaurantOutput
from reservation_api.services.domain import RestaurantService
from reservation_shared.security.auth import current_user
from reservation_shared.utils.schemas import PatchOperation


router = APIRouter(
    prefix="/api/restaurants",
    tags=["restaurants"],
    dependencies=[Depends(current_user)],
)


@router.get("", response_model=list[RestaurantOutput])
def list_restaurants(
    response: Response,
    name: str | None = Query(default=None),
    page: PageParams = Depends(get_page_params),
    service: RestaurantService = Depends(get_restaurant_service),
) -> list[RestaurantOutput]:
    restaurants, meta = service.list_all(RestaurantFilters(name=name, **page.to_filter_kwargs()))
    set_pagination_header(response, meta)
    return restaurants


@router.get("/{restaurant_id}", response_model=RestaurantDetail)
def get_restaurant(
    restaurant_id: int,
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantDetail:
    """Restaurant with its employees, tables, menu items and reservations."""
    return service.get(restaurant_id)


@router.post("", response_model=RestaurantOutput)
def create_restaurant(
    body: RestaurantCreate,
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantOutput:
    return service.create(body)


@router.patch("/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT)
def patch_restaurant(
    restaurant_id: int,
    operations: list[PatchOperation] = Body(...),
    service: RestaurantService = Depends(get_restaurant_service),
) -> None:
    service.patch(restaurant_id, operations)


@router.delete("/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_restaurant(
    restaurant_id: int,
    service: RestaurantService = Depends(get_restaurant_service),
) -> None:
    service.delete(restaurant_id)
