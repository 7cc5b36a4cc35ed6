"""
Menu item endpoints.
"""

from fastapi import APIRouter, Body, Depends, Query, Response, status

from reservation_api.dependencies import get_menu_item_service
from reservation_api.repositories import MenuItemFilters
from reservation_api.routers._common import PageParams, get_page_params, set_pagination_header
from reservation_api.schemas import MenuItemCreate, MenuItemOutput
from reservation_api.services.domain import MenuItemService
from reservation_shared.security.auth import current_user
from reservation_shared.utils.schemas import PatchOperation


router = APIRouter(
    prefix="/api/menu-items",
    tags=["menu-items"],
    dependencies=[Depends(current_user)],
)


@router.get("", response_model=list[MenuItemOutput])
def list_menu_items(
    response: Response,
    name: str | None = Query(default=None),
    page: PageParams = Depends(get_page_params),
    service: MenuItemService = Depends(get_menu_item_service),
) -> list[MenuItemOutput]:
    menu_items, meta = service.list_all(MenuItemFilters(name=name, **page.to_filter_kwargs()))
    set_pagination_header(response, meta)
    return menu_items


@router.get("/{menu_item_id}", response_model=MenuItemOutput)
def get_menu_item(
    menu_item_id: int,
    service: MenuItemService = Depends(get_menu_item_service),
) -> MenuItemOutput:
    return service.get(menu_item_id)


@router.post("", response_model=MenuItemOutput)
def create_menu_item(
    body: MenuItemCreate,
    service: MenuItemService = Depends(get_menu_item_service),
) -> MenuItemOutput:
    return service.create(body)


@router.patch("/{menu_item_id}", status_code=status.HTTP_204_NO_CONTENT)
def patch_menu_item(
    menu_item_id: int,
    operations: list[PatchOperation] = Body(...),
    service: MenuItemService = Depends(get_menu_item_service),
) -> None:
    service.patch(menu_item_id, operations)


@router.delete("/{menu_item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_menu_item(
    menu_item_id: int,
    service: MenuItemService = Depends(get_menu_item_service),
) -> None:
    service.delete(menu_item_id)
