"""
Catalogue Product API Routes

CRUD, soft delete and purge for catalogue products.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from src.api.error import ensure_valid_id, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_context import IUserContext
from src.app.use_cases.products import (
    Product,
    ProductCatalogueService,
    ProductListItem,
    UpdateProductRequest,
)
from src.depends import get_unit_of_work, get_user_context
from src.domain.base import MAX_ID

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ProductListItem])
async def get_products(
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
    start: Optional[int] = Query(None, ge=0, le=MAX_ID, description="Index of the first product"),
    amount: Optional[int] = Query(None, ge=0, le=MAX_ID, description="Number of products to return"),
):
    """
    List Catalogue Products

    Query Parameters:
        - start: Offset of the first product (default 0)
        - amount: Maximum number of products (default all)

    Raises:
        - 400 Bad Request: Negative start or amount
        - 500 Internal Server Error: Server error
    """
    service = ProductCatalogueService(uow, user_context)
    if start is None and amount is None:
        result = await service.list_items()
    else:
        result = await service.list_products(start or 0, amount)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{product_id}", status_code=status.HTTP_200_OK, response_model=Product)
async def get_product(
    product_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Get Catalogue Product

    Raises:
        - 400 Bad Request: product_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(product_id)

    service = ProductCatalogueService(uow, user_context)
    result = await service.get(product_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{product_id}/status/{deleted}", status_code=status.HTTP_204_NO_CONTENT)
async def set_product_status(
    product_id: int,
    deleted: bool,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Set Catalogue Product Deleted Status

    Raises:
        - 400 Bad Request: product_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: CODE_CONFLICT when restoring over a reused code
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(product_id)

    service = ProductCatalogueService(uow, user_context)
    result = await service.set_status(product_id, deleted)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Product)
async def add_product(
    request: UpdateProductRequest,
    http_request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Create Catalogue Product

    Raises:
        - 400 Bad Request: Missing or invalid body
        - 404 Not Found: PARENT_NOT_FOUND (category_id does not exist)
        - 409 Conflict: CODE_CONFLICT
        - 500 Internal Server Error: Server error
    """
    service = ProductCatalogueService(uow, user_context)
    result = await service.create(request)

    if result.is_err():
        raise_for_error(result.error)

    product = result.value
    response.headers["Location"] = f"{http_request.url.path.rstrip('/')}/{product.id}"
    return product


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: int,
    request: UpdateProductRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Update Catalogue Product

    Raises:
        - 400 Bad Request: product_id outside 1..MAX_ID or invalid body
        - 404 Not Found: NOT_FOUND or PARENT_NOT_FOUND
        - 409 Conflict: CODE_CONFLICT
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(product_id)

    service = ProductCatalogueService(uow, user_context)
    result = await service.update(product_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_context: IUserContext = Depends(get_user_context),
):
    """
    Purge Catalogue Product

    Raises:
        - 400 Bad Request: product_id outside 1..MAX_ID
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: NOT_SOFT_DELETED
        - 500 Internal Server Error: Server error
    """
    ensure_valid_id(product_id)

    service = ProductCatalogueService(uow, user_context)
    result = await service.delete(product_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
