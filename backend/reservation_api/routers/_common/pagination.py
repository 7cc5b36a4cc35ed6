"""
Standardized pagination for all list endpoints.

Usage:
    from reservation_api.routers._common.pagination import (
        PageParams, get_page_params, set_pagination_header,
    )

    @router.get("")
    def list_tables(
        response: Response,
        page: PageParams = Depends(get_page_params),
        service: TableService = Depends(get_table_service),
    ):
        tables, meta = service.list_all(RepositoryFilters(**page.to_filter_kwargs()))
        set_pagination_header(response, meta)
        return tables
"""

import json
from dataclasses import dataclass
from typing import Any

from fastapi import Query, Response

from reservation_api.repositories import (
    PaginationMetaData,
    clamp_page_number,
    clamp_page_size,
)
from reservation_shared.config.constants import Limits, PAGINATION_HEADER


@dataclass
class PageParams:
    """
    Paging and search query parameters.

    Out-of-range values are clamped rather than rejected.
    """

    page_number: int = Limits.DEFAULT_PAGE_NUMBER
    page_size: int = Limits.DEFAULT_PAGE_SIZE
    search: str | None = None

    def __post_init__(self):
        self.page_number = clamp_page_number(self.page_number)
        self.page_size = clamp_page_size(self.page_size)

    def to_filter_kwargs(self) -> dict[str, Any]:
        return {
            "page_number": self.page_number,
            "page_size": self.page_size,
            "search": self.search,
        }


def get_page_params(
    page_number: int = Query(
        default=Limits.DEFAULT_PAGE_NUMBER,
        alias="pageNumber",
        description="1-based page number",
    ),
    page_size: int = Query(
        default=Limits.DEFAULT_PAGE_SIZE,
        alias="pageSize",
        description=f"Items per page, at most {Limits.MAX_PAGE_SIZE}",
    ),
    search: str | None = Query(
        default=None,
        alias="searchQuery",
        description="Case-insensitive substring match over the resource's search fields",
    ),
) -> PageParams:
    """FastAPI dependency for paging parameters."""
    return PageParams(page_number=page_number, page_size=page_size, search=search)


def set_pagination_header(response: Response, meta: PaginationMetaData) -> None:
    """Describe the returned page in the X-Pagination header."""
    response.headers[PAGINATION_HEADER] = json.dumps(meta.to_dict())
