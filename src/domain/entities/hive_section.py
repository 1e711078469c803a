"""
StoreHiveSection Entity

A storage section inside a hive.
"""

from sqlalchemy import text
from sqlmodel import Field, Index

from ..base import AuditedEntity


class StoreHiveSection(AuditedEntity, table=True):
    """
    StoreHiveSection entity - belongs to exactly one hive.

    Business Rules:
    - code is unique among non-deleted sections
    - store_hive_id is a plain updatable field, not a structural move
    """

    __tablename__ = "hive_sections"

    code: str = Field(max_length=5)
    name: str = Field(max_length=60)
    hive_section_count: int = Field(default=0)

    store_hive_id: int = Field(foreign_key="hives.id", nullable=False, index=True)

    __table_args__ = (
        Index(
            "ux_hive_section_code_live",
            "code",
            unique=True,
            sqlite_where=text("deleted = 0"),
            postgresql_where=text("deleted = false"),
        ),
    )
