"""
Employee Service.
"""

from __future__ import annotations

from reservation_api.models import Employee
from reservation_api.repositories import (
    EmployeeRepository,
    OrderRepository,
    RestaurantRepository,
)
from reservation_api.schemas import (
    AverageOrderAmount,
    EmployeeCreate,
    EmployeeOutput,
    EmployeeUpdate,
)
from reservation_api.services.base_service import CrudService, Reference
from reservation_api.services.mappers import EMPLOYEE_MAPPER, employee_to_output


class EmployeeService(CrudService[Employee, EmployeeCreate, EmployeeUpdate, EmployeeOutput]):
    """
    Service for employee management.

    Business rules:
    - An employee belongs to an existing restaurant
    - Managers are employees whose position is "manager"
    """

    def __init__(
        self,
        repo: EmployeeRepository,
        restaurants: RestaurantRepository,
        orders: OrderRepository,
    ):
        super().__init__(
            repo=repo,
            mapper=EMPLOYEE_MAPPER,
            update_schema=EmployeeUpdate,
            entity_name="Employee",
            references=[
                Reference("restaurantId", "restaurant_id", "Restaurant", restaurants),
            ],
        )
        self._employees = repo
        self._orders = orders

    def list_managers(self) -> list[EmployeeOutput]:
        return [employee_to_output(e) for e in self._employees.find_managers()]

    def average_order_amount(self, employee_id: int) -> AverageOrderAmount:
        """
        Raises:
            NotFoundError: If the employee does not exist.
        """
        self.ensure_exists(employee_id)
        return AverageOrderAmount(
            employee_id=employee_id,
            average_order_amount=self._orders.average_total_for_employee(employee_id),
        )
