import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.user_context import RequestUserContext
from tests.fixtures.fake_repository import FakeUnitOfWork
from tests.fixtures.json_loader import TestDataLoader

ACTING_USER_ID = 7


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def user_context():
    return RequestUserContext(ACTING_USER_ID)


@pytest.fixture
def seeded_uow():
    """Fake store seeded with 13 hives, 6 sections, 4 categories and 13 products"""
    return FakeUnitOfWork(
        hives=TestDataLoader.entities("hives"),
        sections=TestDataLoader.entities("sections"),
        categories=TestDataLoader.entities("categories"),
        products=TestDataLoader.entities("products"),
    )
