from typing import List, Optional

from libs.result import Result
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.user_context import IUserContext
from src.app.use_cases.lifecycle import EntityBinding, LifecycleService, Reference
from src.domain.entities import CatalogueProduct

from .dtos import Product, ProductListItem, UpdateProductRequest


def to_product_list_item(entity: CatalogueProduct) -> ProductListItem:
    return ProductListItem(
        id=entity.id,
        code=entity.code,
        manufacturer_code=entity.manufacturer_code,
        name=entity.name,
        category_id=entity.category_id,
        is_deleted=entity.deleted,
    )


def to_product(entity: CatalogueProduct) -> Product:
    return Product(
        id=entity.id,
        code=entity.code,
        manufacturer_code=entity.manufacturer_code,
        name=entity.name,
        description=entity.description,
        category_id=entity.category_id,
        is_deleted=entity.deleted,
        last_updated=entity.last_updated,
        last_updated_by=entity.last_updated_by,
    )


def new_product(request: UpdateProductRequest) -> CatalogueProduct:
    return CatalogueProduct(
        code=request.code,
        manufacturer_code=request.manufacturer_code,
        name=request.name,
        description=request.description,
        category_id=request.category_id,
    )


def apply_product_request(entity: CatalogueProduct, request: UpdateProductRequest) -> None:
    entity.code = request.code
    entity.manufacturer_code = request.manufacturer_code
    entity.name = request.name
    entity.description = request.description
    entity.category_id = request.category_id


PRODUCT_BINDING = EntityBinding(
    entity_name="Product",
    collection="products",
    to_list_item=to_product_list_item,
    to_detail=to_product,
    from_request=new_product,
    apply_request=apply_product_request,
    parent=Reference(collection="categories", field="category_id"),
)


class ProductCatalogueService(
    LifecycleService[CatalogueProduct, ProductListItem, Product, UpdateProductRequest]
):
    """Catalogue product lifecycle; products must reference an existing category"""

    def __init__(self, uow: UnitOfWork, user_context: IUserContext):
        super().__init__(uow, user_context, PRODUCT_BINDING)

    async def list_products(
        self, start: int, amount: Optional[int] = None
    ) -> Result[List[ProductListItem]]:
        """List `amount` products starting at position `start`"""
        return await self.list_slice(start, amount)

    async def list_by_category(self, category_id: int) -> Result[List[ProductListItem]]:
        """List products of a category; an unknown category gives an empty list"""
        return await self.list_by_parent(category_id)
