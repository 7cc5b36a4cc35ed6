"""
Customer endpoints.

Thin router: paging, filtering and the patch protocol live in the
service and repository layers.
"""

from fastapi import APIRouter, Body, Depends, Query, Response, status

from reservation_api.dependencies import get_customer_service
from reservation_api.repositories import CustomerFilters
from reservation_api.routers._common import PageParams, get_page_params, set_pagination_header
from reservation_api.schemas import CustomerCreate, CustomerDetail, CustomerOutput
from reservation_api.services.domain import CustomerService
from reservation_shared.security.auth import current_user
from reservation_shared.utils.schemas import PatchOperation


router = APIRouter(
    prefix="/api/customers",
    tags=["customers"],
    dependencies=[Depends(current_user)],
)


@router.get("", response_model=list[CustomerOutput])
def list_customers(
    response: Response,
    email: str | None = Query(default=None),
    page: PageParams = Depends(get_page_params),
    service: CustomerService = Depends(get_customer_service),
) -> list[CustomerOutput]:
    """List customers, optionally filtered by exact email and a search term."""
    customers, meta = service.list_all(CustomerFilters(email=email, **page.to_filter_kwargs()))
    set_pagination_header(response, meta)
    return customers


@router.get("/{customer_id}", response_model=CustomerDetail)
def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerDetail:
    """Customer with their reservations."""
    return service.get(customer_id)


@router.post("", response_model=CustomerOutput)
def create_customer(
    body: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerOutput:
    return service.create(body)


@router.patch("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def patch_customer(
    customer_id: int,
    operations: list[PatchOperation] = Body(...),
    service: CustomerService = Depends(get_customer_service),
) -> None:
    """Patchable fields: firstName, lastName."""
    service.patch(customer_id, operations)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
) -> None:
    service.delete(customer_id)
