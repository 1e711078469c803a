from typing import List

from libs.result import Result
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_context import IUserContext
from src.app.use_cases.lifecycle import EntityBinding, LifecycleService, Reference
from src.domain.entities import StoreHiveSection

from .dtos import HiveSection, HiveSectionListItem, UpdateHiveSectionRequest


def to_hive_section_list_item(entity: StoreHiveSection) -> HiveSectionListItem:
    return HiveSectionListItem(
        id=entity.id,
        code=entity.code,
        name=entity.name,
        is_deleted=entity.deleted,
        store_hive_id=entity.store_hive_id,
        last_updated=entity.last_updated,
    )


def to_hive_section(entity: StoreHiveSection) -> HiveSection:
    return HiveSection(
        id=entity.id,
        code=entity.code,
        name=entity.name,
        hive_section_count=entity.hive_section_count,
        is_deleted=entity.deleted,
        store_hive_id=entity.store_hive_id,
        last_updated=entity.last_updated,
        last_updated_by=entity.last_updated_by,
    )


def new_hive_section(request: UpdateHiveSectionRequest) -> StoreHiveSection:
    return StoreHiveSection(
        code=request.code,
        name=request.name,
        hive_section_count=request.hive_section_count,
        store_hive_id=request.store_hive_id,
    )


def apply_hive_section_request(
    entity: StoreHiveSection, request: UpdateHiveSectionRequest
) -> None:
    entity.code = request.code
    entity.name = request.name
    entity.hive_section_count = request.hive_section_count
    entity.store_hive_id = request.store_hive_id


HIVE_SECTION_BINDING = EntityBinding(
    entity_name="HiveSection",
    collection="sections",
    to_list_item=to_hive_section_list_item,
    to_detail=to_hive_section,
    from_request=new_hive_section,
    apply_request=apply_hive_section_request,
    parent=Reference(collection="hives", field="store_hive_id"),
)


class HiveSectionService(
    LifecycleService[
        StoreHiveSection, HiveSectionListItem, HiveSection, UpdateHiveSectionRequest
    ]
):
    """Hive section lifecycle; sections must reference an existing hive"""

    def __init__(self, uow: UnitOfWork, user_context: IUserContext):
        super().__init__(uow, user_context, HIVE_SECTION_BINDING)

    async def list_by_hive(self, hive_id: int) -> Result[List[HiveSectionListItem]]:
        """List sections of a hive; an unknown hive gives an empty list"""
        return await self.list_by_parent(hive_id)
