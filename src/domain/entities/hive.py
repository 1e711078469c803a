"""
StoreHive Entity

A warehouse building that owns hive sections.
"""

from sqlalchemy import text
from sqlmodel import Field, Index

from ..base import AuditedEntity


class StoreHive(AuditedEntity, table=True):
    """
    StoreHive entity - a warehouse that owns zero or more sections.

    Business Rules:
    - code is unique among non-deleted hives
    - can only be purged after soft delete and once no live sections remain
    """

    __tablename__ = "hives"

    code: str = Field(max_length=5)
    name: str = Field(max_length=60)
    address: str = Field(default="", max_length=300)

    __table_args__ = (
        Index(
            "ux_hive_code_live",
            "code",
            unique=True,
            sqlite_where=text("deleted = 0"),
            postgresql_where=text("deleted = false"),
        ),
    )
