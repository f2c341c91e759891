import pytest
from pymongo.errors import DuplicateKeyError

from docrepo.exceptions.common import AlreadyExistsError, NotFoundError
from tests.test_integration.mocks.service import MockModelService


class FakeRepo: ...


@pytest.fixture
def service() -> MockModelService:
    return MockModelService(FakeRepo())  # type: ignore[arg-type]


async def _raise_duplicate() -> None:
    raise DuplicateKeyError(
        'E11000 duplicate key error',
        11000,
        {'keyPattern': {'_id': 1}, 'keyValue': {'_id': 'A1'}},
    )


async def test_duplicate_key_uses_registered_message(service: MockModelService) -> None:
    with pytest.raises(AlreadyExistsError) as exc_info:
        await service._execute(_raise_duplicate())

    err = exc_info.value
    assert err.message == 'Mock model already exists.'
    assert err.key_pattern == {'_id': 1}
    assert err.key_value == {'_id': 'A1'}
    assert isinstance(err.__cause__, DuplicateKeyError)


def test_duplicate_key_without_details_falls_back(service: MockModelService) -> None:
    err = service._translate_duplicate_key_error(DuplicateKeyError('dup', 11000))
    assert err.message == 'Entity already exists.'
    assert err.key_pattern == {}


@pytest.mark.parametrize('result', [None, False])
def test_require_rejects_missing_results(service: MockModelService, result: object) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        service._require(result, 'A1')
    assert exc_info.value.pk == 'A1'
    assert exc_info.value.message == 'MockModel not found.'


def test_require_passes_values_through(service: MockModelService) -> None:
    assert service._require(0) == 0
    assert service._require(True) is True
