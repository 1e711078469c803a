"""
Product Management DTOs (Data Transfer Objects)

Request and view models for product categories and catalogue products.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.domain.base import MAX_ID


# ============================================================================
# Product categories
# ============================================================================


class ProductCategoryListItem(BaseModel):
    """Product category row in a list view"""

    id: int
    code: str
    name: str
    is_deleted: bool
    last_updated: datetime


class ProductCategory(BaseModel):
    """Product category detail view"""

    id: int
    code: str
    name: str
    description: Optional[str]
    is_deleted: bool
    last_updated: datetime
    last_updated_by: int


class UpdateProductCategoryRequest(BaseModel):
    """Create or update product category payload"""

    code: str = Field(..., min_length=1, max_length=5)
    name: str = Field(..., min_length=1, max_length=60)
    description: Optional[str] = Field(None, max_length=300)


# ============================================================================
# Catalogue products
# ============================================================================


class ProductListItem(BaseModel):
    """Catalogue product row in a list view"""

    id: int
    code: str
    manufacturer_code: str
    name: str
    category_id: int
    is_deleted: bool


class Product(BaseModel):
    """Catalogue product detail view"""

    id: int
    code: str
    manufacturer_code: str
    name: str
    description: Optional[str]
    category_id: int
    is_deleted: bool
    last_updated: datetime
    last_updated_by: int


class UpdateProductRequest(BaseModel):
    """Create or update catalogue product payload"""

    code: str = Field(..., min_length=1, max_length=10)
    manufacturer_code: str = Field("", max_length=10)
    name: str = Field(..., min_length=1, max_length=60)
    description: Optional[str] = Field(None, max_length=300)
    category_id: int = Field(..., ge=1, le=MAX_ID)
