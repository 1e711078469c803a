from typing import Any, Generic, List, Optional, Type

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.entity_repository import IEntityRepository, TEntity


class EntityRepository(IEntityRepository[TEntity], Generic[TEntity]):
    """Entity repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession, model: Type[TEntity]):
        self.session = session
        self.model = model

    async def get_all(
        self, offset: int = 0, limit: Optional[int] = None
    ) -> List[TEntity]:
        """Get entities in store order, optionally sliced"""
        stmt = select(self.model).order_by(self.model.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: int) -> Optional[TEntity]:
        """Get entity by ID"""
        stmt = select(self.model).where(self.model.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by(self, **criteria: Any) -> List[TEntity]:
        """Get entities whose fields equal every given criterion"""
        stmt = select(self.model).filter_by(**criteria).order_by(self.model.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, entity: TEntity) -> TEntity:
        """Create a new entity"""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: TEntity) -> TEntity:
        """Update existing entity"""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: TEntity) -> None:
        """Remove entity permanently"""
        await self.session.delete(entity)
        await self.session.flush()
