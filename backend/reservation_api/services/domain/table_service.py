"""
Table Service.
"""

from __future__ import annotations

from reservation_api.models import Table
from reservation_api.repositories import RestaurantRepository, TableRepository
from reservation_api.schemas import TableCreate, TableOutput, TableUpdate
from reservation_api.services.base_service import CrudService, Reference
from reservation_api.services.mappers import TABLE_MAPPER


class TableService(CrudService[Table, TableCreate, TableUpdate, TableOutput]):
    def __init__(self, repo: TableRepository, restaurants: RestaurantRepository):
        super().__init__(
            repo=repo,
            mapper=TABLE_MAPPER,
            update_schema=TableUpdate,
            entity_name="Table",
            references=[
                Reference("restaurantId", "restaurant_id", "Restaurant", restaurants),
            ],
        )
