"""
Base Repository implementation.
Provides the shared paging, filtering and search behavior of every list
endpoint, plus single-entity access for the services.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session
from sqlalchemy.orm.interfaces import ORMOption

from reservation_shared.config.constants import Limits
from reservation_shared.infrastructure.db import safe_commit


ModelT = TypeVar("ModelT")


def clamp_page_number(page_number: int) -> int:
    """Pages are 1-based; anything below 1 means the first page."""
    return min(max(Limits.DEFAULT_PAGE_NUMBER, page_number), Limits.MAX_PAGE_NUMBER)


def clamp_page_size(page_size: int) -> int:
    """Clamp into [MIN_PAGE_SIZE, MAX_PAGE_SIZE]."""
    return min(max(Limits.MIN_PAGE_SIZE, page_size), Limits.MAX_PAGE_SIZE)


def is_storable_id(entity_id: int) -> bool:
    """Ids outside [1, MAX_ID] can never match a row."""
    return 1 <= entity_id <= Limits.MAX_ID


@dataclass
class RepositoryFilters:
    """
    Base filters for list queries.

    Values are normalized on construction so a caller that bypasses the
    transport layer still cannot request an unbounded page.
    """

    page_number: int = Limits.DEFAULT_PAGE_NUMBER
    page_size: int = Limits.DEFAULT_PAGE_SIZE

    # Case-insensitive substring match over the entity's search fields
    search: str | None = None

    def __post_init__(self):
        """Validate and normalize filters."""
        self.page_number = clamp_page_number(self.page_number)
        self.page_size = clamp_page_size(self.page_size)
        self.search = (self.search or "").strip()[:Limits.MAX_SEARCH_TERM_LENGTH] or None

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


@dataclass
class PaginationMetaData:
    """Out-of-band description of one page of a list result."""

    current_page: int
    total_pages: int
    page_size: int
    total_count: int

    @classmethod
    def from_filters(cls, filters: RepositoryFilters, total_count: int) -> "PaginationMetaData":
        return cls(
            current_page=filters.page_number,
            total_pages=math.ceil(total_count / filters.page_size),
            page_size=filters.page_size,
            total_count=total_count,
        )

    def to_dict(self) -> dict[str, Any]:
        """camelCase keys, as sent in the X-Pagination header."""
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "pageSize": self.page_size,
            "totalCount": self.total_count,
        }


class BaseRepository(ABC, Generic[ModelT]):
    """
    Abstract base repository with common operations.

    Subclasses must implement:
    - model: the SQLAlchemy model class

    Subclasses may override:
    - search_fields: columns matched by the search term
    - _apply_filters(): the entity's primary filter
    - _list_options() / _detail_options(): eager loading
    """

    search_fields: tuple[str, ...] = ()

    def __init__(self, db: Session):
        self._db = db

    @property
    @abstractmethod
    def model(self) -> type[ModelT]:
        """Return the SQLAlchemy model class."""
        ...

    def _base_query(self) -> Select:
        return select(self.model)

    def _apply_filters(self, query: Select, filters: RepositoryFilters) -> Select:
        """Apply entity-specific filters to query."""
        return query

    def _apply_search(self, query: Select, search: str | None) -> Select:
        if not search or not self.search_fields:
            return query

        return query.where(
            or_(
                *(
                    getattr(self.model, name).icontains(search, autoescape=True)
                    for name in self.search_fields
                )
            )
        )

    def _list_options(self) -> Sequence[ORMOption]:
        """Loader options for list results."""
        return ()

    def _detail_options(self) -> Sequence[ORMOption]:
        """Loader options for a single entity with its relations."""
        return ()

    def _filtered_query(self, filters: RepositoryFilters) -> Select:
        query = self._apply_filters(self._base_query(), filters)
        return self._apply_search(query, filters.search)

    def get_all(
        self,
        filters: RepositoryFilters | None = None,
    ) -> tuple[Sequence[ModelT], PaginationMetaData]:
        """
        One page of entities matching filters, ordered by id.

        Issues a COUNT over the filtered query and one bounded fetch.

        Returns:
            (entities, pagination metadata)
        """
        filters = filters or RepositoryFilters()
        query = self._filtered_query(filters)

        total_count = self.count(filters)

        page_query = (
            query.options(*self._list_options())
            .order_by(self.model.id)
            .offset(filters.offset)
            .limit(filters.page_size)
        )
        entities = self._db.execute(page_query).scalars().unique().all()

        return entities, PaginationMetaData.from_filters(filters, total_count)

    def count(self, filters: RepositoryFilters | None = None) -> int:
        """Count entities matching filters."""
        filters = filters or RepositoryFilters()
        subquery = self._filtered_query(filters).subquery()
        return self._db.scalar(select(func.count()).select_from(subquery)) or 0

    def get_by_id(self, entity_id: int) -> ModelT | None:
        if not is_storable_id(entity_id):
            return None
        return self._db.get(self.model, entity_id)

    def get_detail(self, entity_id: int) -> ModelT | None:
        """Find entity by ID with its relations loaded."""
        if not is_storable_id(entity_id):
            return None
        query = (
            self._base_query()
            .where(self.model.id == entity_id)
            .options(*self._detail_options())
        )
        return self._db.execute(query).scalars().unique().one_or_none()

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists."""
        if not is_storable_id(entity_id):
            return False
        query = select(func.count()).select_from(self.model).where(self.model.id == entity_id)
        return (self._db.scalar(query) or 0) > 0

    def add(self, entity: ModelT) -> ModelT:
        """
        Stage a new entity and assign its identity.
        Nothing is committed until save_changes().
        """
        self._db.add(entity)
        self._db.flush()
        return entity

    def delete(self, entity: ModelT) -> None:
        """Hard delete. Committed by save_changes()."""
        self._db.delete(entity)

    def save_changes(self) -> None:
        """Commit the unit of work, rolling back on failure."""
        safe_commit(self._db)

    def refresh(self, entity: ModelT) -> ModelT:
        self._db.refresh(entity)
        return entity
