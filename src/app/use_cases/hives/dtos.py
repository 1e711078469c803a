"""
Hive Management DTOs (Data Transfer Objects)

Request and view models for hives and hive sections.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.domain.base import MAX_ID


# ============================================================================
# Hives
# ============================================================================


class HiveListItem(BaseModel):
    """Hive row in a list view"""

    id: int
    code: str
    name: str
    is_deleted: bool
    last_updated: datetime


class Hive(BaseModel):
    """Hive detail view"""

    id: int
    code: str
    name: str
    address: str
    is_deleted: bool
    last_updated: datetime
    last_updated_by: int


class UpdateHiveRequest(BaseModel):
    """Create or update hive payload"""

    code: str = Field(..., min_length=1, max_length=5)
    name: str = Field(..., min_length=1, max_length=60)
    address: str = Field("", max_length=300)


# ============================================================================
# Hive sections
# ============================================================================


class HiveSectionListItem(BaseModel):
    """Hive section row in a list view"""

    id: int
    code: str
    name: str
    is_deleted: bool
    store_hive_id: int
    last_updated: datetime


class HiveSection(BaseModel):
    """Hive section detail view"""

    id: int
    code: str
    name: str
    hive_section_count: int
    is_deleted: bool
    store_hive_id: int
    last_updated: datetime
    last_updated_by: int


class UpdateHiveSectionRequest(BaseModel):
    """Create or update hive section payload"""

    code: str = Field(..., min_length=1, max_length=5)
    name: str = Field(..., min_length=1, max_length=60)
    hive_section_count: int = Field(0, ge=0)
    store_hive_id: int = Field(..., ge=1, le=MAX_ID)
