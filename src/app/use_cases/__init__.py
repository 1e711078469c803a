"""
Use Cases

Organized into domain folders:
- lifecycle/: Generic CRUD, soft delete and purge engine
- hives/: Hive management (hives, hive sections)
- products/: Product management (categories, catalogue products)

Import from subdirectories for DTOs and bindings.
"""

from .hives import HiveSectionService, HiveService
from .products import ProductCatalogueService, ProductCategoryService

__all__ = [
    # Hive management
    "HiveService",
    "HiveSectionService",
    # Product management
    "ProductCategoryService",
    "ProductCatalogueService",
]
