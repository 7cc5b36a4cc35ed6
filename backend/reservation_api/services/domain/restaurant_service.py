"""
Restaurant Service.
"""

from __future__ import annotations

from reservation_api.models import Restaurant
from reservation_api.repositories import RestaurantRepository
from reservation_api.schemas import RestaurantCreate, RestaurantOutput, RestaurantUpdate
from reservation_api.services.base_service import CrudService
from reservation_api.services.mappers import RESTAURANT_MAPPER


class RestaurantService(
    CrudService[Restaurant, RestaurantCreate, RestaurantUpdate, RestaurantOutput]
):
    """
    Service for restaurant management.

    GET by id returns the restaurant with its employees, tables,
    menu items and reservations.
    """

    def __init__(self, repo: RestaurantRepository):
        super().__init__(
            repo=repo,
            mapper=RESTAURANT_MAPPER,
            update_schema=RestaurantUpdate,
            entity_name="Restaurant",
        )
