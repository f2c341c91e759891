from collections.abc import Callable
from typing import Any, TypeAlias, TypeVar

from docrepo.models.base import Entity, SoftDeletableEntity

ModelType = TypeVar('ModelType', bound=Entity)
SoftModelType = TypeVar('SoftModelType', bound=SoftDeletableEntity)

FilterDocument: TypeAlias = dict[str, Any]
FilterFactory: TypeAlias = Callable[[type[ModelType]], FilterDocument]
FilterSpec: TypeAlias = FilterDocument | FilterFactory[ModelType]

UpdateDocument: TypeAlias = dict[str, Any]

# (field, pymongo.ASCENDING | pymongo.DESCENDING)
OrderClause: TypeAlias = tuple[str, int]
OrderFactory: TypeAlias = Callable[[type[ModelType]], OrderClause]
OrderSpec: TypeAlias = OrderClause | OrderFactory[ModelType]
