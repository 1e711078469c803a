"""
ProductCategory Entity

Groups catalogue products.
"""

from typing import Optional

from sqlalchemy import text
from sqlmodel import Field, Index

from ..base import AuditedEntity


class ProductCategory(AuditedEntity, table=True):
    """
    ProductCategory entity - parent of catalogue products.

    Business Rules:
    - code is unique among non-deleted categories
    - can only be purged after soft delete and once no live products remain
    """

    __tablename__ = "product_categories"

    code: str = Field(max_length=5)
    name: str = Field(max_length=60)
    description: Optional[str] = Field(default=None, max_length=300)

    __table_args__ = (
        Index(
            "ux_product_category_code_live",
            "code",
            unique=True,
            sqlite_where=text("deleted = 0"),
            postgresql_where=text("deleted = false"),
        ),
    )
