"""
Menu Item Service.
"""

from __future__ import annotations

from reservation_api.models import MenuItem
from reservation_api.repositories import MenuItemRepository, RestaurantRepository
from reservation_api.schemas import MenuItemCreate, MenuItemOutput, MenuItemUpdate
from reservation_api.services.base_service import CrudService, Reference
from reservation_api.services.mappers import MENU_ITEM_MAPPER


class MenuItemService(CrudService[MenuItem, MenuItemCreate, MenuItemUpdate, MenuItemOutput]):
    def __init__(self, repo: MenuItemRepository, restaurants: RestaurantRepository):
        super().__init__(
            repo=repo,
            mapper=MENU_ITEM_MAPPER,
            update_schema=MenuItemUpdate,
            entity_name="Menu item",
            references=[
                Reference("restaurantId", "restaurant_id", "Restaurant", restaurants),
            ],
        )
