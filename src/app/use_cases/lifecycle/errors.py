"""
Lifecycle error codes.

Every failure returned by a lifecycle service carries one of these codes.
Codes are grouped into three kinds which the API layer maps to status codes.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Classification of an error code"""

    not_found = "not_found"
    conflict = "conflict"
    invalid_argument = "invalid_argument"


NOT_FOUND = "NOT_FOUND"
PARENT_NOT_FOUND = "PARENT_NOT_FOUND"

CODE_CONFLICT = "CODE_CONFLICT"
NOT_SOFT_DELETED = "NOT_SOFT_DELETED"
HAS_LIVE_CHILDREN = "HAS_LIVE_CHILDREN"

INVALID_ARGUMENT = "INVALID_ARGUMENT"

ERROR_KINDS = {
    NOT_FOUND: ErrorKind.not_found,
    PARENT_NOT_FOUND: ErrorKind.not_found,
    CODE_CONFLICT: ErrorKind.conflict,
    NOT_SOFT_DELETED: ErrorKind.conflict,
    HAS_LIVE_CHILDREN: ErrorKind.conflict,
    INVALID_ARGUMENT: ErrorKind.invalid_argument,
}


def error_kind(code: str) -> Optional[ErrorKind]:
    """Return the kind of a lifecycle error code, or None if unknown"""
    return ERROR_KINDS.get(code)
