from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_context import IUserContext
from src.app.use_cases.lifecycle import EntityBinding, LifecycleService, Reference
from src.domain.entities import StoreHive

from .dtos import Hive, HiveListItem, UpdateHiveRequest


def to_hive_list_item(entity: StoreHive) -> HiveListItem:
    return HiveListItem(
        id=entity.id,
        code=entity.code,
        name=entity.name,
        is_deleted=entity.deleted,
        last_updated=entity.last_updated,
    )


def to_hive(entity: StoreHive) -> Hive:
    return Hive(
        id=entity.id,
        code=entity.code,
        name=entity.name,
        address=entity.address,
        is_deleted=entity.deleted,
        last_updated=entity.last_updated,
        last_updated_by=entity.last_updated_by,
    )


def new_hive(request: UpdateHiveRequest) -> StoreHive:
    return StoreHive(code=request.code, name=request.name, address=request.address)


def apply_hive_request(entity: StoreHive, request: UpdateHiveRequest) -> None:
    entity.code = request.code
    entity.name = request.name
    entity.address = request.address


HIVE_BINDING = EntityBinding(
    entity_name="Hive",
    collection="hives",
    to_list_item=to_hive_list_item,
    to_detail=to_hive,
    from_request=new_hive,
    apply_request=apply_hive_request,
    children=Reference(collection="sections", field="store_hive_id"),
)


class HiveService(LifecycleService[StoreHive, HiveListItem, Hive, UpdateHiveRequest]):
    """Hive lifecycle; purge is blocked while the hive has live sections"""

    def __init__(self, uow: UnitOfWork, user_context: IUserContext):
        super().__init__(uow, user_context, HIVE_BINDING)
