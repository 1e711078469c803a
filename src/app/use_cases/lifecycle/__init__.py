"""Generic entity lifecycle: CRUD, soft delete and purge."""

from .binding import EntityBinding, Reference
from .errors import (
    CODE_CONFLICT,
    HAS_LIVE_CHILDREN,
    INVALID_ARGUMENT,
    NOT_FOUND,
    NOT_SOFT_DELETED,
    PARENT_NOT_FOUND,
    ErrorKind,
    error_kind,
)
from .lifecycle_service import LifecycleService

__all__ = [
    "EntityBinding",
    "Reference",
    "LifecycleService",
    "ErrorKind",
    "error_kind",
    "NOT_FOUND",
    "PARENT_NOT_FOUND",
    "CODE_CONFLICT",
    "NOT_SOFT_DELETED",
    "HAS_LIVE_CHILDREN",
    "INVALID_ARGUMENT",
]
