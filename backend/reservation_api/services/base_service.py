"""
Base service for the CRUD resources.

Architecture:
    Router (thin) -> Service (orchestration) -> Repository (data access) -> Model

A service is built from its repository, the entity's mapping functions, its
update schema and the ordered list of references a new entity must satisfy.
Everything is passed in explicitly; see reservation_api.dependencies.

Usage:
    class TableService(CrudService[Table, TableCreate, TableUpdate, TableOutput]):
        def __init__(self, repo: TableRepository, restaurants: RestaurantRepository):
            super().__init__(
                repo=repo,
                mapper=TABLE_MAPPER,
                update_schema=TableUpdate,
                entity_name="Table",
                references=[Reference("restaurantId", "restaurant_id", "Restaurant", restaurants)],
            )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from reservation_api.repositories import BaseRepository, PaginationMetaData, RepositoryFilters
from reservation_api.services.mappers import EntityMapper
from reservation_api.services.patching import UpdateView, apply_operations, validate_view
from reservation_shared.config.logging import get_logger
from reservation_shared.utils.exceptions import (
    ConflictError,
    NotFoundError,
    ReferenceNotFoundError,
)
from reservation_shared.utils.schemas import PatchOperation

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


@dataclass(frozen=True)
class Reference:
    """
    A foreign id a create body must resolve.

    Attributes:
        field: request field name, reported when missing ("restaurantId")
        attribute: attribute on the create schema ("restaurant_id")
        entity: human-readable entity name ("Restaurant")
        repo: repository used for the existence check
    """

    field: str
    attribute: str
    entity: str
    repo: BaseRepository


class CrudService(Generic[ModelT, CreateT, UpdateT, OutputT]):
    """
    List, get, create, patch and delete for one entity.

    Hooks:
    - _validate_create(body): domain rules checked after references resolve
    """

    def __init__(
        self,
        repo: BaseRepository[ModelT],
        mapper: EntityMapper,
        update_schema: type[UpdateT],
        entity_name: str,
        references: Sequence[Reference] = (),
    ):
        self._repo = repo
        self._mapper = mapper
        self._update_schema = update_schema
        self._entity_name = entity_name
        self._references = tuple(references)

    @property
    def repo(self) -> BaseRepository[ModelT]:
        return self._repo

    @property
    def entity_name(self) -> str:
        return self._entity_name

    # =========================================================================
    # Read Operations
    # =========================================================================

    def list_all(self, filters: RepositoryFilters) -> tuple[list[OutputT], PaginationMetaData]:
        entities, meta = self._repo.get_all(filters)
        return [self._mapper.to_output(e) for e in entities], meta

    def get_entity(self, entity_id: int) -> ModelT:
        """
        Raises:
            NotFoundError: If entity not found.
        """
        entity = self._repo.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self._entity_name, entity_id)
        return entity

    def get(self, entity_id: int) -> Any:
        """Entity with its relations, in its detail representation."""
        entity = self._repo.get_detail(entity_id)
        if entity is None:
            raise NotFoundError(self._entity_name, entity_id)
        to_detail = self._mapper.to_detail or self._mapper.to_output
        return to_detail(entity)

    def ensure_exists(self, entity_id: int) -> None:
        if not self._repo.exists(entity_id):
            raise NotFoundError(self._entity_name, entity_id)

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, body: CreateT) -> OutputT:
        """
        Create an entity once every reference resolves.

        References are checked in declared order and the first missing one
        is reported. The checks and the insert share one transaction.

        Raises:
            ReferenceNotFoundError: If a referenced entity does not exist.
            ValidationError: If a domain rule fails.
        """
        self._check_references(body)
        self._validate_create(body)

        entity = self._repo.add(self._mapper.from_create(body))
        self._repo.save_changes()
        self._repo.refresh(entity)

        logger.info(f"{self._entity_name} created", entity_id=entity.id)
        return self._mapper.to_output(entity)

    def patch(self, entity_id: int, operations: Sequence[PatchOperation]) -> None:
        """
        Fetch, apply the patch to the update view, validate, copy back, persist.

        The entity is only touched after validation succeeds, so a failed
        patch leaves the stored row unchanged.

        Raises:
            NotFoundError: If entity not found.
            MalformedPatchError: If an operation cannot be applied.
            ValidationError: If the patched values break a constraint.
            ConflictError: If the row changed since it was read.
        """
        entity = self.get_entity(entity_id)
        if not operations:
            return

        view = UpdateView.of(self._mapper.to_update(entity))
        apply_operations(view, operations)
        update = validate_view(view, self._update_schema)

        self._mapper.apply_update(entity, update)
        try:
            self._repo.save_changes()
        except StaleDataError:
            raise ConflictError(
                f"{self._entity_name} was modified by another request",
                entity=self._entity_name,
                entity_id=entity_id,
            )

        logger.info(f"{self._entity_name} patched", entity_id=entity_id, ops=len(operations))

    def delete(self, entity_id: int) -> None:
        """
        Hard delete.

        Raises:
            NotFoundError: If entity not found.
            ConflictError: If other rows still reference the entity.
        """
        entity = self.get_entity(entity_id)
        self._repo.delete(entity)
        try:
            self._repo.save_changes()
        except IntegrityError:
            raise ConflictError(
                f"{self._entity_name} with ID {entity_id} is still referenced",
                entity=self._entity_name,
                entity_id=entity_id,
            )

        logger.info(f"{self._entity_name} deleted", entity_id=entity_id)

    # =========================================================================
    # Hooks
    # =========================================================================

    def _check_references(self, body: CreateT) -> None:
        for reference in self._references:
            referenced_id = getattr(body, reference.attribute)
            if not reference.repo.exists(referenced_id):
                raise ReferenceNotFoundError(
                    reference.field,
                    reference.entity,
                    referenced_id,
                    creating=self._entity_name,
                )

    def _validate_create(self, body: CreateT) -> None:
        """Override for domain rules on create."""
        pass
