"""
Unit tests for ProductCategoryService

Categories 1-3 own the seeded products; category 4 owns none.
"""

import pytest

from src.app.use_cases.lifecycle import (
    CODE_CONFLICT,
    HAS_LIVE_CHILDREN,
    NOT_FOUND,
    NOT_SOFT_DELETED,
)
from src.app.use_cases.products import (
    ProductCategoryService,
    UpdateProductCategoryRequest,
)


@pytest.mark.asyncio
async def test_list_categories(seeded_uow, user_context):
    service = ProductCategoryService(seeded_uow, user_context)

    result = await service.list_items()

    assert result.is_ok()
    assert [item.code for item in result.value] == ["C01", "C02", "C03", "C04"]


@pytest.mark.asyncio
async def test_create_then_get(seeded_uow, user_context):
    service = ProductCategoryService(seeded_uow, user_context)

    created = await service.create(
        UpdateProductCategoryRequest(code="C10", name="Candles", description="Beeswax")
    )

    assert created.is_ok()
    fetched = await service.get(created.value.id)
    assert fetched.value.name == "Candles"
    assert fetched.value.description == "Beeswax"
    assert fetched.value.last_updated_by == user_context.user_id


@pytest.mark.asyncio
async def test_create_with_live_code(seeded_uow, user_context):
    service = ProductCategoryService(seeded_uow, user_context)

    result = await service.create(UpdateProductCategoryRequest(code="C02", name="Wax"))

    assert result.is_err()
    assert result.error.code == CODE_CONFLICT


@pytest.mark.asyncio
async def test_update_missing_category(seeded_uow, user_context):
    service = ProductCategoryService(seeded_uow, user_context)

    result = await service.update(
        999, UpdateProductCategoryRequest(code="C02", name="Ghost")
    )

    assert result.is_err()
    assert result.error.code == NOT_FOUND


@pytest.mark.asyncio
async def test_update_clears_description(seeded_uow, user_context):
    service = ProductCategoryService(seeded_uow, user_context)

    result = await service.update(1, UpdateProductCategoryRequest(code="C01", name="Honey"))

    assert result.is_ok()
    assert result.value.description is None


@pytest.mark.asyncio
async def test_purge_requires_soft_delete(seeded_uow, user_context):
    service = ProductCategoryService(seeded_uow, user_context)

    result = await service.delete(4)

    assert result.is_err()
    assert result.error.code == NOT_SOFT_DELETED


@pytest.mark.asyncio
async def test_purge_empty_category(seeded_uow, user_context):
    service = ProductCategoryService(seeded_uow, user_context)
    await service.set_status(4, True)

    result = await service.delete(4)

    assert result.is_ok()
    assert len((await service.list_items()).value) == 3


@pytest.mark.asyncio
async def test_purge_blocked_by_live_products(seeded_uow, user_context):
    service = ProductCategoryService(seeded_uow, user_context)
    await service.set_status(1, True)

    result = await service.delete(1)

    assert result.is_err()
    assert result.error.code == HAS_LIVE_CHILDREN
    assert len(seeded_uow.products.entities) == 13


@pytest.mark.asyncio
async def test_purge_removes_soft_deleted_products(seeded_uow, user_context):
    for product in seeded_uow.products.entities:
        if product.category_id == 1:
            product.deleted = True
    service = ProductCategoryService(seeded_uow, user_context)
    await service.set_status(1, True)

    result = await service.delete(1)

    assert result.is_ok()
    assert all(p.category_id != 1 for p in seeded_uow.products.entities)
    assert len(seeded_uow.products.entities) == 8
