"""
Warehouse Domain Entities

Hive management (hives, sections) and product management
(categories, catalogue products), one entity per file.
"""

from .hive import StoreHive
from .hive_section import StoreHiveSection
from .product_category import ProductCategory
from .catalogue_product import CatalogueProduct

__all__ = [
    "StoreHive",
    "StoreHiveSection",
    "ProductCategory",
    "CatalogueProduct",
]
