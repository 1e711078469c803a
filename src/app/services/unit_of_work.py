from abc import ABC, abstractmethod

from src.app.repositories.entity_repository import IEntityRepository
from src.domain.entities import (
    CatalogueProduct,
    ProductCategory,
    StoreHive,
    StoreHiveSection,
)


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    hives: IEntityRepository[StoreHive]
    sections: IEntityRepository[StoreHiveSection]
    categories: IEntityRepository[ProductCategory]
    products: IEntityRepository[CatalogueProduct]

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
