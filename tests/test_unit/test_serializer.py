from datetime import UTC, datetime

import pytest

from tests.test_integration.mocks.model import MockModel
from tests.test_integration.mocks.schema import (
    MockModelDocumentSchema,
    MockModelListItemSchema,
    MockModelResponseSchema,
)
from tests.test_integration.mocks.service import MockModelService


class FakeRepo: ...


@pytest.fixture
def service() -> MockModelService:
    return MockModelService(FakeRepo())  # type: ignore[arg-type]


def test_detail_schema_by_default(service: MockModelService) -> None:
    entity = MockModel(id='A1', name='x')
    assert service.serialize_one(entity) == MockModelResponseSchema(id='A1', name='x')


def test_schema_false_returns_entity(service: MockModelService) -> None:
    entity = MockModel(id='A1', name='x')
    assert service.serialize_one(entity, schema=False) is entity
    assert service.serialize_many([entity], schema=False) == [entity]


def test_underscore_id_alias_reads_stored_identifier(service: MockModelService) -> None:
    stamp = datetime(2024, 5, 1, tzinfo=UTC)
    rendered = service.serialize_one(
        MockModel(id='A1', name='x', deleted_at=stamp),
        schema=MockModelDocumentSchema,
    )
    assert isinstance(rendered, MockModelDocumentSchema)
    assert rendered.id == 'A1'
    assert rendered.deleted_at == stamp


def test_active_entity_has_no_marker_in_output(service: MockModelService) -> None:
    rendered = service.serialize_one(MockModel(id='A1', name='x'), schema=MockModelDocumentSchema)
    assert rendered.deleted_at is None


def test_many_prefers_list_schema(
    service: MockModelService,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    entities = [MockModel(id='A1', name='x'), MockModel(id='A2', name='y')]
    assert service.serialize_many(entities) == [
        MockModelResponseSchema(id='A1', name='x'),
        MockModelResponseSchema(id='A2', name='y'),
    ]

    monkeypatch.setattr(MockModelService, 'list_schema', MockModelListItemSchema)
    assert service.serialize_many(entities) == [
        MockModelListItemSchema(id='A1'),
        MockModelListItemSchema(id='A2'),
    ]
    assert service.serialize_one(entities[0]) == MockModelResponseSchema(id='A1', name='x')
