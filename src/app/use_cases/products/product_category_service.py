from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_context import IUserContext
from src.app.use_cases.lifecycle import EntityBinding, LifecycleService, Reference
from src.domain import entities

from .dtos import ProductCategory, ProductCategoryListItem, UpdateProductCategoryRequest


def to_category_list_item(entity: entities.ProductCategory) -> ProductCategoryListItem:
    return ProductCategoryListItem(
        id=entity.id,
        code=entity.code,
        name=entity.name,
        is_deleted=entity.deleted,
        last_updated=entity.last_updated,
    )


def to_category(entity: entities.ProductCategory) -> ProductCategory:
    return ProductCategory(
        id=entity.id,
        code=entity.code,
        name=entity.name,
        description=entity.description,
        is_deleted=entity.deleted,
        last_updated=entity.last_updated,
        last_updated_by=entity.last_updated_by,
    )


def new_category(request: UpdateProductCategoryRequest) -> entities.ProductCategory:
    return entities.ProductCategory(
        code=request.code, name=request.name, description=request.description
    )


def apply_category_request(
    entity: entities.ProductCategory, request: UpdateProductCategoryRequest
) -> None:
    entity.code = request.code
    entity.name = request.name
    entity.description = request.description


PRODUCT_CATEGORY_BINDING = EntityBinding(
    entity_name="ProductCategory",
    collection="categories",
    to_list_item=to_category_list_item,
    to_detail=to_category,
    from_request=new_category,
    apply_request=apply_category_request,
    children=Reference(collection="products", field="category_id"),
)


class ProductCategoryService(
    LifecycleService[
        entities.ProductCategory,
        ProductCategoryListItem,
        ProductCategory,
        UpdateProductCategoryRequest,
    ]
):
    """Product category lifecycle; purge is blocked while live products remain"""

    def __init__(self, uow: UnitOfWork, user_context: IUserContext):
        super().__init__(uow, user_context, PRODUCT_CATEGORY_BINDING)
