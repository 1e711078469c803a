"""
Product Category API Routes

CRUD, soft delete and purge for product categories.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from src.api.error import ensure_valid_id, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_context import IUserContext
from src.app.use_cases.products import (
    ProductCatalogueService,
    ProductCategory,
    ProductCategoryListItem,
    ProductCategoryService,
    ProductListItem,
    UpdateProductCategoryRequest,
)
from src.depends import get_unit_of_work, get_user_context

router = APIRouter(prefix="/categories", tags=["Product Categories"])


@router.get(
    "", status_code=status.HTTP_200_OK, response_model=List[ProductCategoryListItem]
)
async def get_categories(
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    List Product Categories

    Raises:
        - 500 Internal Server Error: Server error
    """
    service = ProductCategoryService(uow, user_context)
    result = await service.list_items()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{category_id}", status_code=status.HTTP_200_OK, response_model=ProductCategory
)
async def get_category(
    category_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Get Product Category

    Raises:
        - 400 Bad Request: category_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(category_id)

    service = ProductCategoryService(uow, user_context)
    result = await service.get(category_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{category_id}/products",
    status_code=status.HTTP_200_OK,
    response_model=List[ProductListItem],
)
async def get_category_products(
    category_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    List Products of a Category

    An unknown category yields an empty list.

    Raises:
        - 400 Bad Request: category_id outside 1..MAX_ID
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(category_id)

    service = ProductCatalogueService(uow, user_context)
    result = await service.list_by_category(category_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{category_id}/status/{deleted}", status_code=status.HTTP_204_NO_CONTENT)
async def set_category_status(
    category_id: int,
    deleted: bool,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Set Product Category Deleted Status

    Raises:
        - 400 Bad Request: category_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: CODE_CONFLICT when restoring over a reused code
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(category_id)

    service = ProductCategoryService(uow, user_context)
    result = await service.set_status(category_id, deleted)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProductCategory)
async def add_category(
    request: UpdateProductCategoryRequest,
    http_request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Create Product Category

    Raises:
        - 400 Bad Request: Missing or invalid body
        - 409 Conflict: CODE_CONFLICT
        - 500 Internal Server Error: Server error
    """
    service = ProductCategoryService(uow, user_context)
    result = await service.create(request)

    if result.is_err():
        raise_for_error(result.error)

    category = result.value
    response.headers["Location"] = f"{http_request.url.path.rstrip('/')}/{category.id}"
    return category


@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_category(
    category_id: int,
    request: UpdateProductCategoryRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Update Product Category

    Raises:
        - 400 Bad Request: category_id outside 1..MAX_ID or invalid body
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: CODE_CONFLICT
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(category_id)

    service = ProductCategoryService(uow, user_context)
    result = await service.update(category_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Purge Product Category

    Permanently removes a soft-deleted category together with its
    soft-deleted products.

    Raises:
        - 400 Bad Request: category_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: NOT_SOFT_DELETED or HAS_LIVE_CHILDREN
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(category_id)

    service = ProductCategoryService(uow, user_context)
    result = await service.delete(category_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
