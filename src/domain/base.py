from datetime import datetime, UTC
from typing import Optional

from sqlmodel import Field, SQLModel

# Largest identity an INTEGER primary key can hold
MAX_ID = 2**63 - 1


def utcnow() -> datetime:
    return datetime.now(UTC)


class AuditedEntity(SQLModel):
    """
    Columns shared by every administrable entity.

    ``deleted`` is the soft-delete flag; rows are only removed by a purge.
    ``created_by`` / ``last_updated_by`` hold the acting user id.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    deleted: bool = Field(default=False, index=True)

    created: datetime = Field(default_factory=utcnow)
    created_by: int = Field(default=0)
    last_updated: datetime = Field(default_factory=utcnow)
    last_updated_by: int = Field(default=0)
