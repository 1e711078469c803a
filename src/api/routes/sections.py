"""
Hive Section API Routes

CRUD, soft delete and purge for hive sections.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from src.api.error import ensure_valid_id, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_context import IUserContext
from src.app.use_cases.hives import (
    HiveSection,
    HiveSectionListItem,
    HiveSectionService,
    UpdateHiveSectionRequest,
)
from src.depends import get_unit_of_work, get_user_context

router = APIRouter(prefix="/sections", tags=["Hive Sections"])


@router.get(
    "", status_code=status.HTTP_200_OK, response_model=List[HiveSectionListItem]
)
async def get_hive_sections(
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    List Hive Sections

    Raises:
        - 500 Internal Server Error: Server error
    """
    service = HiveSectionService(uow, user_context)
    result = await service.list_items()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{hive_section_id}", status_code=status.HTTP_200_OK, response_model=HiveSection
)
async def get_hive_section(
    hive_section_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Get Hive Section

    Raises:
        - 400 Bad Request: hive_section_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(hive_section_id)

    service = HiveSectionService(uow, user_context)
    result = await service.get(hive_section_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/{hive_section_id}/status/{deleted}", status_code=status.HTTP_204_NO_CONTENT
)
async def set_hive_section_status(
    hive_section_id: int,
    deleted: bool,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Set Hive Section Deleted Status

    Raises:
        - 400 Bad Request: hive_section_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: CODE_CONFLICT when restoring over a reused code
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(hive_section_id)

    service = HiveSectionService(uow, user_context)
    result = await service.set_status(hive_section_id, deleted)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=HiveSection)
async def add_hive_section(
    request: UpdateHiveSectionRequest,
    http_request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Create Hive Section

    Raises:
        - 400 Bad Request: Missing or invalid body
        - 404 Not Found: PARENT_NOT_FOUND (store_hive_id does not exist)
        - 409 Conflict: CODE_CONFLICT
        - 500 Internal Server Error: Server error
    """
    service = HiveSectionService(uow, user_context)
    result = await service.create(request)

    if result.is_err():
        raise_for_error(result.error)

    section = result.value
    response.headers["Location"] = f"{http_request.url.path.rstrip('/')}/{section.id}"
    return section


@router.put("/{hive_section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_hive_section(
    hive_section_id: int,
    request: UpdateHiveSectionRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Update Hive Section

    Raises:
        - 400 Bad Request: hive_section_id outside 1..MAX_ID or invalid body
        - 404 Not Found: NOT_FOUND or PARENT_NOT_FOUND
        - 409 Conflict: CODE_CONFLICT
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(hive_section_id)

    service = HiveSectionService(uow, user_context)
    result = await service.update(hive_section_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{hive_section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_hive_section(
    hive_section_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Purge Hive Section

    Raises:
        - 400 Bad Request: hive_section_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: NOT_SOFT_DELETED
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(hive_section_id)

    service = HiveSectionService(uow, user_context)
    result = await service.delete(hive_section_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
