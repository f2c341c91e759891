from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from docrepo.models.base import Entity, Identifiable, SoftDeletable, SoftDeletableEntity
from tests.test_integration.mocks.model import MockModel, PlainMockModel


class OrderLine(Entity):
    sku: str


def test_collection_name_defaults_to_snake_case() -> None:
    assert OrderLine.collection_name() == 'order_line'
    assert PlainMockModel.collection_name() == 'plain_mock_model'


def test_collection_name_override() -> None:
    assert MockModel.collection_name() == 'mock_models'


def test_default_id_is_object_id_hex() -> None:
    entity = OrderLine(sku='s-1')
    assert len(entity.id) == 24
    assert entity.id != OrderLine(sku='s-1').id


def test_id_is_stored_as_underscore_id() -> None:
    entity = OrderLine(id='L1', sku='s-1')
    assert entity.to_document() == {'_id': 'L1', 'sku': 's-1'}
    assert OrderLine.from_document({'_id': 'L1', 'sku': 's-1'}) == entity


def test_id_is_immutable() -> None:
    entity = OrderLine(id='L1', sku='s-1')
    with pytest.raises(ValidationError):
        entity.id = 'L2'


def test_active_soft_deletable_document_has_no_marker() -> None:
    entity = MockModel(id='A1', name='x')
    assert entity.to_document() == {'_id': 'A1', 'name': 'x'}
    assert not entity.is_deleted


def test_deleted_soft_deletable_document_keeps_marker() -> None:
    stamp = datetime(2024, 5, 1, tzinfo=UTC)
    entity = MockModel(id='A1', name='x', deleted_at=stamp)
    assert entity.to_document()['deleted_at'] == stamp
    assert entity.is_deleted


def test_capability_protocols() -> None:
    assert isinstance(OrderLine(sku='s'), Identifiable)
    assert not isinstance(OrderLine(sku='s'), SoftDeletable)
    assert isinstance(MockModel(name='x'), SoftDeletable)
    assert issubclass(MockModel, SoftDeletableEntity)
