from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.entity_repository import EntityRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    CatalogueProduct,
    ProductCategory,
    StoreHive,
    StoreHiveSection,
)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.hives = EntityRepository(self.session, StoreHive)
        self.sections = EntityRepository(self.session, StoreHiveSection)
        self.categories = EntityRepository(self.session, ProductCategory)
        self.products = EntityRepository(self.session, CatalogueProduct)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
