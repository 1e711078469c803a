"""Product management use cases: categories and catalogue products."""

from .dtos import (
    Product,
    ProductCategory,
    ProductCategoryListItem,
    ProductListItem,
    UpdateProductCategoryRequest,
    UpdateProductRequest,
)
from .product_catalogue_service import PRODUCT_BINDING, ProductCatalogueService
from .product_category_service import PRODUCT_CATEGORY_BINDING, ProductCategoryService

__all__ = [
    "ProductCategoryService",
    "ProductCatalogueService",
    "PRODUCT_CATEGORY_BINDING",
    "PRODUCT_BINDING",
    "ProductCategory",
    "ProductCategoryListItem",
    "UpdateProductCategoryRequest",
    "Product",
    "ProductListItem",
    "UpdateProductRequest",
]
