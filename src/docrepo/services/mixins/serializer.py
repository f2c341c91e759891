from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, Literal, Protocol, TypeVar

from docrepo.models.base import Entity
from docrepo.repositories.types import ModelType
from docrepo.schemas.base import BaseResponseSchema

ResponseSchema = TypeVar('ResponseSchema', bound=BaseResponseSchema)

SchemaChoice = type[BaseResponseSchema] | Literal[False] | None


def entity_payload(entity: Entity) -> dict[str, Any]:
    """Stored document of ``entity``, keyed so both ``id`` and ``_id`` fields resolve."""
    document = entity.to_document()
    document['id'] = entity.id
    return document


class SerializerProtocol(Protocol[ModelType]):
    def serialize_one(
        self,
        obj: ModelType,
        *,
        schema: SchemaChoice = None,
    ) -> BaseResponseSchema | ModelType: ...

    def serialize_many(
        self,
        objs: Iterable[ModelType],
        *,
        schema: SchemaChoice = None,
    ) -> list[BaseResponseSchema | ModelType]: ...


class SerializerMixin(Generic[ModelType, ResponseSchema]):
    """Renders entities through response schemas built from the stored document.

    ``schema=False`` returns the entity untouched. ``None`` picks ``detail_schema``
    for single entities and ``list_schema`` (falling back to ``detail_schema``) for
    collections. Without any schema configured the entity is returned as is.
    """

    detail_schema: type[ResponseSchema] | None = None
    list_schema: type[ResponseSchema] | None = None

    def _pick_schema(
        self,
        schema: SchemaChoice,
        *,
        many: bool,
    ) -> type[BaseResponseSchema] | None:
        if schema is False:
            return None
        if schema is not None:
            return schema
        if many and self.list_schema is not None:
            return self.list_schema
        return self.detail_schema

    def serialize_one(
        self,
        obj: ModelType,
        *,
        schema: SchemaChoice = None,
    ) -> BaseResponseSchema | ModelType:
        target = self._pick_schema(schema, many=False)
        if target is None:
            return obj
        return target.model_validate(entity_payload(obj))

    def serialize_many(
        self,
        objs: Iterable[ModelType],
        *,
        schema: SchemaChoice = None,
    ) -> list[BaseResponseSchema | ModelType]:
        target = self._pick_schema(schema, many=True)
        if target is None:
            return list(objs)
        return [target.model_validate(entity_payload(obj)) for obj in objs]
