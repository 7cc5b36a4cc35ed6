"""
Customer Service.
"""

from __future__ import annotations

from reservation_api.models import Customer
from reservation_api.repositories import CustomerRepository
from reservation_api.schemas import CustomerCreate, CustomerOutput, CustomerUpdate
from reservation_api.services.base_service import CrudService
from reservation_api.services.mappers import CUSTOMER_MAPPER


class CustomerService(CrudService[Customer, CustomerCreate, CustomerUpdate, CustomerOutput]):
    """Customers have no references; GET by id embeds their reservations."""

    def __init__(self, repo: CustomerRepository):
        super().__init__(
            repo=repo,
            mapper=CUSTOMER_MAPPER,
            update_schema=CustomerUpdate,
            entity_name="Customer",
        )
