"""
CatalogueProduct Entity
"""

from typing import Optional

from sqlalchemy import text
from sqlmodel import Field, Index

from ..base import AuditedEntity


class CatalogueProduct(AuditedEntity, table=True):
    """
    CatalogueProduct entity - a product listed under a category.

    Business Rules:
    - code is unique among non-deleted products
    - manufacturer_code is informational and not unique
    """

    __tablename__ = "catalogue_products"

    code: str = Field(max_length=10)
    manufacturer_code: str = Field(default="", max_length=10)
    name: str = Field(max_length=60)
    description: Optional[str] = Field(default=None, max_length=300)

    category_id: int = Field(
        foreign_key="product_categories.id", nullable=False, index=True
    )

    __table_args__ = (
        Index(
            "ux_catalogue_product_code_live",
            "code",
            unique=True,
            sqlite_where=text("deleted = 0"),
            postgresql_where=text("deleted = false"),
        ),
    )
