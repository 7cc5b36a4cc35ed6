"""
Employee endpoints.

Static routes (/managers) are declared before /{employee_id}.
"""

from fastapi import APIRouter, Body, Depends, Query, Response, status

from reservation_api.dependencies import get_employee_service
from reservation_api.repositories import EmployeeFilters
from reservation_api.routers._common import PageParams, get_page_params, set_pagination_header
from reservation_api.schemas import AverageOrderAmount, EmployeeCreate, EmployeeOutput
from reservation_api.services.domain import EmployeeService
from reservation_shared.security.auth import current_user
from reservation_shared.utils.schemas import PatchOperation


router = APIRouter(
    prefix="/api/employees",
    tags=["employees"],
    dependencies=[Depends(current_user)],
)


@router.get("", response_model=list[EmployeeOutput])
def list_employees(
    response: Response,
    name: str | None = Query(default=None, description="Exact first name"),
    page: PageParams = Depends(get_page_params),
    service: EmployeeService = Depends(get_employee_service),
) -> list[EmployeeOutput]:
    employees, meta = service.list_all(EmployeeFilters(name=name, **page.to_filter_kwargs()))
    set_pagination_header(response, meta)
    return employees


@router.get("/managers", response_model=list[EmployeeOutput])
def list_managers(
    service: EmployeeService = Depends(get_employee_service),
) -> list[EmployeeOutput]:
    """Employees whose position is manager, in any letter case."""
    return service.list_managers()


@router.get("/{employee_id}", response_model=EmployeeOutput)
def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeOutput:
    return service.get(employee_id)


@router.get("/{employee_id}/average-order-amount", response_model=AverageOrderAmount)
def get_average_order_amount(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> AverageOrderAmount:
    """Average total of the employee's orders, 0 when there are none."""
    return service.average_order_amount(employee_id)


@router.post("", response_model=EmployeeOutput)
def create_employee(
    body: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeOutput:
    return service.create(body)


@router.patch("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def patch_employee(
    employee_id: int,
    operations: list[PatchOperation] = Body(...),
    service: EmployeeService = Depends(get_employee_service),
) -> None:
    service.patch(employee_id, operations)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> None:
    service.delete(employee_id)
