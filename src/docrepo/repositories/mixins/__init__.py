from .query import (
    CollectionMixin,
    CountableMixin,
    FilterableMixin,
    OrderableMixin,
    PrimaryKeyMixin,
    RetrievableMixin,
)
from .write import (
    CreatableMixin,
    DeleteMixin,
    SoftDeleteMixin,
    UpdateMixin,
)

__all__ = [
    'CollectionMixin',
    'CountableMixin',
    'CreatableMixin',
    'DeleteMixin',
    'FilterableMixin',
    'OrderableMixin',
    'PrimaryKeyMixin',
    'RetrievableMixin',
    'SoftDeleteMixin',
    'UpdateMixin',
]
