"""
Employee Repository - Data access for employees.
"""

from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from reservation_api.models import Employee
from reservation_shared.config.constants import Positions
from .base import BaseRepository, RepositoryFilters


@dataclass
class EmployeeFilters(RepositoryFilters):
    """Filters specific to employees."""

    # Matches the first name
    name: str | None = None


class EmployeeRepository(BaseRepository[Employee]):
    search_fields = ("first_name", "last_name", "position")

    @property
    def model(self) -> type[Employee]:
        return Employee

    def _apply_filters(self, query: Select, filters: RepositoryFilters) -> Select:
        if isinstance(filters, EmployeeFilters) and filters.name:
            query = query.where(Employee.first_name == filters.name.strip())
        return query

    def find_managers(self) -> Sequence[Employee]:
        """Employees whose position is "manager", in any letter case."""
        query = (
            select(Employee)
            .where(func.lower(Employee.position) == Positions.MANAGER)
            .order_by(Employee.id)
        )
        return self._db.execute(query).scalars().all()


def get_employee_repository(db: Session) -> EmployeeRepository:
    return EmployeeRepository(db)
