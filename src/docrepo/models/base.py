import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any, ClassVar, Protocol, Self, runtime_checkable

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

_camel_boundary = re.compile(r'(?<!^)(?=[A-Z])')


def new_id() -> str:
    return str(ObjectId())


@runtime_checkable
class Identifiable(Protocol):
    id: str


@runtime_checkable
class SoftDeletable(Identifiable, Protocol):
    deleted_at: datetime | None


class Entity(BaseModel):
    """Document-backed entity identified by a string ``_id``."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    __collection__: ClassVar[str | None] = None

    id: str = Field(default_factory=new_id, alias='_id', frozen=True)

    @classmethod
    def collection_name(cls) -> str:
        return cls.__collection__ or _camel_boundary.sub('_', cls.__name__).lower()

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Self:
        return cls.model_validate(document)

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class SoftDeletableEntity(Entity):
    """Entity that is marked deleted via ``deleted_at`` instead of being removed.

    The stored document carries no ``deleted_at`` key while the entity is active.
    """

    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def to_document(self) -> dict[str, Any]:
        document = super().to_document()
        if document.get('deleted_at') is None:
            document.pop('deleted_at', None)
        return document
