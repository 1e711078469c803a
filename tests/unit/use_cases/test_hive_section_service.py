"""
Unit tests for HiveSectionService

Sections reference their hive through store_hive_id.
"""

import pytest

from src.app.use_cases.hives import HiveSectionService, UpdateHiveSectionRequest
from src.app.use_cases.lifecycle import (
    CODE_CONFLICT,
    NOT_FOUND,
    NOT_SOFT_DELETED,
    PARENT_NOT_FOUND,
)


@pytest.mark.asyncio
async def test_create_section_in_existing_hive(seeded_uow, user_context):
    service = HiveSectionService(seeded_uow, user_context)

    result = await service.create(
        UpdateHiveSectionRequest(
            code="S20", name="Cold room", hive_section_count=3, store_hive_id=1
        )
    )

    assert result.is_ok()
    section = result.value
    assert section.store_hive_id == 1
    assert section.hive_section_count == 3

    fetched = await service.get(section.id)
    assert fetched.value.code == "S20"


@pytest.mark.asyncio
async def test_create_section_in_missing_hive(seeded_uow, user_context):
    service = HiveSectionService(seeded_uow, user_context)

    result = await service.create(
        UpdateHiveSectionRequest(code="S20", name="Orphan", store_hive_id=999)
    )

    assert result.is_err()
    assert result.error.code == PARENT_NOT_FOUND
    assert len(seeded_uow.sections.entities) == 6


@pytest.mark.asyncio
async def test_create_section_with_live_code(seeded_uow, user_context):
    service = HiveSectionService(seeded_uow, user_context)

    result = await service.create(
        UpdateHiveSectionRequest(code="S01", name="Duplicate", store_hive_id=1)
    )

    assert result.is_err()
    assert result.error.code == CODE_CONFLICT


@pytest.mark.asyncio
async def test_list_by_hive(seeded_uow, user_context):
    service = HiveSectionService(seeded_uow, user_context)

    result = await service.list_by_hive(2)

    assert result.is_ok()
    assert [item.id for item in result.value] == [1, 4]
    assert all(item.store_hive_id == 2 for item in result.value)


@pytest.mark.asyncio
async def test_list_by_unknown_hive_is_empty(seeded_uow, user_context):
    service = HiveSectionService(seeded_uow, user_context)

    result = await service.list_by_hive(999)

    assert result.is_ok()
    assert result.value == []


@pytest.mark.asyncio
async def test_move_section_to_another_hive(seeded_uow, user_context):
    service = HiveSectionService(seeded_uow, user_context)

    result = await service.update(
        1, UpdateHiveSectionRequest(code="S01", name="Section 1", store_hive_id=5)
    )

    assert result.is_ok()
    assert result.value.store_hive_id == 5
    assert [item.id for item in (await service.list_by_hive(5)).value] == [1]


@pytest.mark.asyncio
async def test_move_section_to_missing_hive(seeded_uow, user_context):
    service = HiveSectionService(seeded_uow, user_context)

    result = await service.update(
        1, UpdateHiveSectionRequest(code="S01", name="Section 1", store_hive_id=999)
    )

    assert result.is_err()
    assert result.error.code == PARENT_NOT_FOUND
    assert seeded_uow.sections.entities[0].store_hive_id == 2


@pytest.mark.asyncio
async def test_update_missing_section(seeded_uow, user_context):
    service = HiveSectionService(seeded_uow, user_context)

    result = await service.update(
        999, UpdateHiveSectionRequest(code="S99", name="Ghost", store_hive_id=1)
    )

    assert result.is_err()
    assert result.error.code == NOT_FOUND


@pytest.mark.asyncio
async def test_soft_delete_then_purge_section(seeded_uow, user_context):
    service = HiveSectionService(seeded_uow, user_context)

    live_purge = await service.delete(3)
    assert live_purge.error.code == NOT_SOFT_DELETED

    assert (await service.set_status(3, True)).is_ok()
    assert (await service.delete(3)).is_ok()

    result = await service.list_items()
    assert len(result.value) == 5
