"""
Table endpoints.
"""

from fastapi import APIRouter, Body, Depends, Response, status

from reservation_api.dependencies import get_table_service
from reservation_api.repositories import RepositoryFilters
from reservation_api.routers._common import PageParams, get_page_params, set_pagination_header
from reservation_api.schemas import TableCreate, TableDetail, TableOutput
from reservation_api.services.domain import TableService
from reservation_shared.security.auth import current_user
from reservation_shared.utils.schemas import PatchOperation


router = APIRouter(
    prefix="/api/tables",
    tags=["tables"],
    dependencies=[Depends(current_user)],
)


@router.get("", response_model=list[TableOutput])
def list_tables(
    response: Response,
    page: PageParams = Depends(get_page_params),
    service: TableService = Depends(get_table_service),
) -> list[TableOutput]:
    tables, meta = service.list_all(RepositoryFilters(**page.to_filter_kwargs()))
    set_pagination_header(response, meta)
    return tables


@router.get("/{table_id}", response_model=TableDetail)
def get_table(
    table_id: int,
    service: TableService = Depends(get_table_service),
) -> TableDetail:
    return service.get(table_id)


@router.post("", response_model=TableOutput)
def create_table(
    body: TableCreate,
    service: TableService = Depends(get_table_service),
) -> TableOutput:
    """Create a table; restaurantId must exist."""
    return service.create(body)


@router.patch("/{table_id}", status_code=status.HTTP_204_NO_CONTENT)
def patch_table(
    table_id: int,
    operations: list[PatchOperation] = Body(...),
    service: TableService = Depends(get_table_service),
) -> None:
    service.patch(table_id, operations)


@router.delete("/{table_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_table(
    table_id: int,
    service: TableService = Depends(get_table_service),
) -> None:
    service.delete(table_id)
