"""
Lifecycle Service

Generic CRUD + soft delete + purge engine shared by every administrable
entity kind. Each operation opens the unit of work, re-reads what it needs
from the store and returns a Result; nothing is cached between calls.

Code uniqueness is checked read-then-write. Two concurrent creates with the
same code can both pass the check; SQL stores reject the second one through
the partial unique index on live codes.
"""

import logging
from datetime import datetime, UTC
from typing import Generic, List, Optional

from libs.result import Error, Result, Return
from src.app.repositories.entity_repository import IEntityRepository
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_context import IUserContext

from .binding import EntityBinding, TDetail, TEntity, TListItem, TRequest
from .errors import (
    CODE_CONFLICT,
    HAS_LIVE_CHILDREN,
    INVALID_ARGUMENT,
    NOT_FOUND,
    NOT_SOFT_DELETED,
    PARENT_NOT_FOUND,
)

logger = logging.getLogger(__name__)


class LifecycleService(Generic[TEntity, TListItem, TDetail, TRequest]):
    """
    Lifecycle operations for one entity kind.

    Business Rules:
    - code is unique among non-deleted entities of the kind
    - soft delete (set_status) is reversible and idempotent
    - purge (delete) only succeeds on an already soft-deleted entity
    - a parent is only purged when none of its children are live;
      soft-deleted children are purged together with it
    - every successful mutation stamps last_updated / last_updated_by
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_context: IUserContext,
        binding: EntityBinding[TEntity, TListItem, TDetail, TRequest],
    ):
        if uow is None:
            raise ValueError("uow is required")
        if user_context is None:
            raise ValueError("user_context is required")
        if binding is None:
            raise ValueError("binding is required")

        self.uow = uow
        self.user_context = user_context
        self.binding = binding

    @property
    def _entities(self) -> IEntityRepository[TEntity]:
        return getattr(self.uow, self.binding.collection)

    def _not_found(self, entity_id: int) -> Error:
        return Error(
            NOT_FOUND,
            f"{self.binding.entity_name} not found",
            reason=f"No {self.binding.entity_name.lower()} with id {entity_id}",
        )

    def _stamp(self, entity: TEntity, created: bool = False) -> None:
        now = datetime.now(UTC)
        user_id = self.user_context.user_id
        if created:
            entity.created = now
            entity.created_by = user_id
        entity.last_updated = now
        entity.last_updated_by = user_id

    async def _code_taken(self, code: str, exclude_id: Optional[int] = None) -> bool:
        live = await self._entities.find_by(code=code, deleted=False)
        return any(entity.id != exclude_id for entity in live)

    def _code_conflict(self, code: str) -> Error:
        return Error(
            CODE_CONFLICT,
            f"{self.binding.entity_name} with such code already exists",
            reason=f"Code '{code}' is used by another live {self.binding.entity_name.lower()}",
        )

    async def _check_parent(self, parent_id: int) -> Optional[Error]:
        parent = self.binding.parent
        repository = getattr(self.uow, parent.collection)
        if await repository.get_by_id(parent_id) is None:
            return Error(
                PARENT_NOT_FOUND,
                f"Parent of {self.binding.entity_name.lower()} not found",
                reason=f"No {parent.collection} entry with id {parent_id}",
            )
        return None

    async def list_items(self) -> Result[List[TListItem]]:
        """
        List every entity of the kind in store order.

        Soft-deleted entities are included; their flag is part of the view.
        """
        async with self.uow:
            entities = await self._entities.get_all()
            return Return.ok([self.binding.to_list_item(e) for e in entities])

    async def list_slice(
        self, offset: int, limit: Optional[int] = None
    ) -> Result[List[TListItem]]:
        """List up to `limit` entities starting at `offset`; no limit means all"""
        if offset < 0 or (limit is not None and limit < 0):
            return Return.err(
                Error(INVALID_ARGUMENT, "offset and limit must not be negative")
            )

        async with self.uow:
            entities = await self._entities.get_all(offset=offset, limit=limit)
            return Return.ok([self.binding.to_list_item(e) for e in entities])

    async def list_by_parent(self, parent_id: int) -> Result[List[TListItem]]:
        """
        List entities referencing `parent_id`.

        An unknown parent yields an empty list rather than an error.
        """
        parent = self.binding.parent
        if parent is None:
            return Return.err(
                Error(
                    INVALID_ARGUMENT,
                    f"{self.binding.entity_name} has no parent reference",
                )
            )

        async with self.uow:
            entities = await self._entities.find_by(**{parent.field: parent_id})
            return Return.ok([self.binding.to_list_item(e) for e in entities])

    async def get(self, entity_id: int) -> Result[TDetail]:
        """Get the detail view; soft-deleted entities remain gettable"""
        async with self.uow:
            entity = await self._entities.get_by_id(entity_id)
            if entity is None:
                return Return.err(self._not_found(entity_id))

            return Return.ok(self.binding.to_detail(entity))

    async def create(self, request: TRequest) -> Result[TDetail]:
        """
        Create a new entity from the request.

        Errors:
            - CODE_CONFLICT: a live entity already uses request.code
            - PARENT_NOT_FOUND: the referenced parent does not exist
        """
        if request is None:
            return Return.err(Error(INVALID_ARGUMENT, "request is required"))

        async with self.uow:
            if await self._code_taken(request.code):
                return Return.err(self._code_conflict(request.code))

            if self.binding.parent is not None:
                error = await self._check_parent(
                    getattr(request, self.binding.parent.field)
                )
                if error:
                    return Return.err(error)

            entity = self.binding.from_request(request)
            self._stamp(entity, created=True)
            entity = await self._entities.create(entity)

            await self.uow.commit()

            logger.info(
                f"Created {self.binding.entity_name} id={entity.id} code={entity.code}"
            )
            return Return.ok(self.binding.to_detail(entity))

    async def update(self, entity_id: int, request: TRequest) -> Result[TDetail]:
        """
        Overwrite the mutable fields of an existing entity.

        Errors:
            - NOT_FOUND: no entity with entity_id (checked first)
            - CODE_CONFLICT: another live entity already uses request.code
            - PARENT_NOT_FOUND: the newly referenced parent does not exist
        """
        if request is None:
            return Return.err(Error(INVALID_ARGUMENT, "request is required"))

        async with self.uow:
            entity = await self._entities.get_by_id(entity_id)
            if entity is None:
                return Return.err(self._not_found(entity_id))

            if await self._code_taken(request.code, exclude_id=entity.id):
                return Return.err(self._code_conflict(request.code))

            parent = self.binding.parent
            if parent is not None:
                parent_id = getattr(request, parent.field)
                if parent_id != getattr(entity, parent.field):
                    error = await self._check_parent(parent_id)
                    if error:
                        return Return.err(error)

            self.binding.apply_request(entity, request)
            self._stamp(entity)
            entity = await self._entities.update(entity)

            await self.uow.commit()

            logger.info(f"Updated {self.binding.entity_name} id={entity.id}")
            return Return.ok(self.binding.to_detail(entity))

    async def set_status(self, entity_id: int, deleted: bool) -> Result[TDetail]:
        """
        Soft delete (deleted=True) or restore (deleted=False) an entity.

        Idempotent: repeating the same status succeeds and re-stamps the
        entity. Restoring fails with CODE_CONFLICT when a live entity has
        taken the code in the meantime.
        """
        async with self.uow:
            entity = await self._entities.get_by_id(entity_id)
            if entity is None:
                error = self._not_found(entity_id)
                return Return.err(
                    Error(
                        self.binding.set_status_missing_code,
                        error.message,
                        reason=error.reason,
                    )
                )

            if not deleted and entity.deleted:
                if await self._code_taken(entity.code, exclude_id=entity.id):
                    return Return.err(self._code_conflict(entity.code))

            entity.deleted = deleted
            self._stamp(entity)
            entity = await self._entities.update(entity)

            await self.uow.commit()

            logger.info(
                f"Set {self.binding.entity_name} id={entity.id} deleted={deleted}"
            )
            return Return.ok(self.binding.to_detail(entity))

    async def delete(self, entity_id: int) -> Result[None]:
        """
        Purge a soft-deleted entity.

        Errors:
            - NOT_FOUND: no entity with entity_id
            - NOT_SOFT_DELETED: the entity is still live
            - HAS_LIVE_CHILDREN: live children still reference the entity
        """
        async with self.uow:
            entity = await self._entities.get_by_id(entity_id)
            if entity is None:
                return Return.err(self._not_found(entity_id))

            if not entity.deleted:
                return Return.err(
                    Error(
                        NOT_SOFT_DELETED,
                        f"{self.binding.entity_name} must be deleted before it is purged",
                    )
                )

            children = self.binding.children
            if children is not None:
                repository = getattr(self.uow, children.collection)
                dependants = await repository.find_by(**{children.field: entity_id})
                live = [child for child in dependants if not child.deleted]
                if live:
                    return Return.err(
                        Error(
                            HAS_LIVE_CHILDREN,
                            f"{self.binding.entity_name} still has live {children.collection}",
                            reason=f"{len(live)} live {children.collection} reference id {entity_id}",
                        )
                    )

                for child in dependants:
                    await repository.delete(child)

            await self._entities.delete(entity)

            await self.uow.commit()

            logger.info(f"Purged {self.binding.entity_name} id={entity_id}")
            return Return.ok(None)
