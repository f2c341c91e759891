from uuid import uuid4

import pytest

from docrepo.persistence.context import MongoContext
from tests.test_integration.mocks.client import AsyncMockClient
from tests.test_integration.mocks.model import MockModel, PlainMockModel
from tests.test_integration.mocks.repo import MockRepo, PlainMockRepo


@pytest.fixture
def context() -> MongoContext:
    return MongoContext(AsyncMockClient(), f'docrepo_{uuid4().hex}')


@pytest.fixture
def mock_repo(context: MongoContext) -> MockRepo:
    return MockRepo(context, MockModel)


@pytest.fixture
def plain_repo(context: MongoContext) -> PlainMockRepo:
    return PlainMockRepo(context, PlainMockModel)
