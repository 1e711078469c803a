"""
Entity bindings for the lifecycle service.

A binding is the only thing that differs between the hive, section,
category and product services: which repository to use, how to map
entities to views, and which parent/child references to enforce.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from src.domain.base import AuditedEntity

from .errors import NOT_FOUND

TEntity = TypeVar("TEntity", bound=AuditedEntity)
TListItem = TypeVar("TListItem")
TDetail = TypeVar("TDetail")
TRequest = TypeVar("TRequest")


@dataclass(frozen=True)
class Reference:
    """A foreign-key style link between two entity kinds.

    ``collection`` names the UnitOfWork repository on the other side and
    ``field`` names the attribute holding the parent id. For a parent
    reference the field lives on this entity (and on its request); for a
    child reference it lives on the child entity.
    """

    collection: str
    field: str


@dataclass(frozen=True)
class EntityBinding(Generic[TEntity, TListItem, TDetail, TRequest]):
    entity_name: str
    collection: str

    to_list_item: Callable[[TEntity], TListItem]
    to_detail: Callable[[TEntity], TDetail]
    from_request: Callable[[TRequest], TEntity]
    apply_request: Callable[[TEntity, TRequest], None]

    parent: Optional[Reference] = None
    children: Optional[Reference] = None

    # Error code returned by set_status when the id does not exist
    set_status_missing_code: str = NOT_FOUND
