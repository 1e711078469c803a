from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

from src.domain.base import AuditedEntity

TEntity = TypeVar("TEntity", bound=AuditedEntity)


class IEntityRepository(ABC, Generic[TEntity]):
    """Entity repository interface - one instance per entity kind"""

    @abstractmethod
    async def get_all(
        self, offset: int = 0, limit: Optional[int] = None
    ) -> List[TEntity]:
        """Get entities in store order, optionally sliced"""
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[TEntity]:
        """Get entity by ID"""
        pass

    @abstractmethod
    async def find_by(self, **criteria: Any) -> List[TEntity]:
        """Get entities whose fields equal every given criterion"""
        pass

    @abstractmethod
    async def create(self, entity: TEntity) -> TEntity:
        """Create a new entity, assigning its ID"""
        pass

    @abstractmethod
    async def update(self, entity: TEntity) -> TEntity:
        """Update existing entity"""
        pass

    @abstractmethod
    async def delete(self, entity: TEntity) -> None:
        """Remove entity permanently"""
        pass
