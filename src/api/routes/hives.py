"""
Hive API Routes

CRUD, soft delete and purge for hives.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from src.api.error import ensure_valid_id, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_context import IUserContext
from src.app.use_cases.hives import (
    Hive,
    HiveListItem,
    HiveSectionListItem,
    HiveSectionService,
    HiveService,
    UpdateHiveRequest,
)
from src.depends import get_unit_of_work, get_user_context

router = APIRouter(prefix="/hives", tags=["Hives"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[HiveListItem])
async def get_hives(
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    List Hives

    Returns every hive, including soft-deleted ones.

    Raises:
        - 500 Internal Server Error: Server error
    """
    service = HiveService(uow, user_context)
    result = await service.list_items()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{hive_id}", status_code=status.HTTP_200_OK, response_model=Hive)
async def get_hive(
    hive_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Get Hive

    Raises:
        - 400 Bad Request: hive_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(hive_id)

    service = HiveService(uow, user_context)
    result = await service.get(hive_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{hive_id}/sections",
    status_code=status.HTTP_200_OK,
    response_model=List[HiveSectionListItem],
)
async def get_hive_sections(
    hive_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    List Sections of a Hive

    An unknown hive yields an empty list.

    Raises:
        - 400 Bad Request: hive_id outside 1..MAX_ID
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(hive_id)

    service = HiveSectionService(uow, user_context)
    result = await service.list_by_hive(hive_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{hive_id}/status/{deleted}", status_code=status.HTTP_204_NO_CONTENT)
async def set_hive_status(
    hive_id: int,
    deleted: bool,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Set Hive Deleted Status

    Soft deletes (true) or restores (false) a hive. Idempotent.

    Raises:
        - 400 Bad Request: hive_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: CODE_CONFLICT when restoring over a reused code
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(hive_id)

    service = HiveService(uow, user_context)
    result = await service.set_status(hive_id, deleted)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Hive)
async def add_hive(
    request: UpdateHiveRequest,
    http_request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Create Hive

    Raises:
        - 400 Bad Request: Missing or invalid body
        - 409 Conflict: CODE_CONFLICT
        - 500 Internal Server Error: Server error
    """
    service = HiveService(uow, user_context)
    result = await service.create(request)

    if result.is_err():
        raise_for_error(result.error)

    hive = result.value
    response.headers["Location"] = f"{http_request.url.path.rstrip('/')}/{hive.id}"
    return hive


@router.put("/{hive_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_hive(
    hive_id: int,
    request: UpdateHiveRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Update Hive

    Raises:
        - 400 Bad Request: hive_id outside 1..MAX_ID or invalid body
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: CODE_CONFLICT
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(hive_id)

    service = HiveService(uow, user_context)
    result = await service.update(hive_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{hive_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_hive(
    hive_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Purge Hive

    Permanently removes a soft-deleted hive together with its soft-deleted
    sections.

    Raises:
        - 400 Bad Request: hive_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: NOT_SOFT_DELETED or HAS_LIVE_CHILDREN
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(hive_id)

    service = HiveService(uow, user_context)
    result = await service.delete(hive_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
