from docrepo.repositories.base import Repository, SoftDeleteRepository
from tests.test_integration.mocks.model import MockModel, PlainMockModel


class MockRepo(SoftDeleteRepository[MockModel]): ...


class PlainMockRepo(Repository[PlainMockModel]): ...
