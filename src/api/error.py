from fastapi import status
from libs.result import Error
from src.app.use_cases.lifecycle import ErrorKind, error_kind
from src.domain.base import MAX_ID

STATUS_BY_KIND = {
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    ErrorKind.conflict: status.HTTP_409_CONFLICT,
    ErrorKind.invalid_argument: status.HTTP_400_BAD_REQUEST,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Raise the client or server error matching a use case error code"""
    kind = error_kind(error.code)
    if kind is None:
        raise ServerError(error)
    raise ClientError(error, status_code=STATUS_BY_KIND[kind])


def ensure_valid_id(entity_id: int):
    """Reject identities outside 1..MAX_ID before they reach a service"""
    if entity_id < 1 or entity_id > MAX_ID:
        raise ClientError(
            Error("INVALID_ID", f"Invalid id value: {entity_id}"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
