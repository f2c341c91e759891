from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from pymongo import ReturnDocument

from ..expressions import set_, unset
from ..filters import DELETED_FIELD, deleted, id_eq, not_deleted, not_deleted_and_id_eq
from ..types import FilterSpec, ModelType, OrderSpec, SoftModelType, UpdateDocument
from .query import (
    CollectionMixin,
    CountableMixin,
    FilterableMixin,
    PrimaryKeyMixin,
    RetrievableMixin,
)

log = logging.getLogger(__name__)


class CreatableMixin(CollectionMixin[ModelType]):
    async def create(self, data: ModelType | Mapping[str, Any]) -> ModelType:
        entity = self._build_entity(data)
        await self.collection.insert_one(entity.to_document())
        return entity

    async def bulk_create(
        self,
        payload: Iterable[ModelType | Mapping[str, Any]],
    ) -> list[ModelType]:
        entities = [self._build_entity(data) for data in payload]
        if entities:
            await self.collection.insert_many([entity.to_document() for entity in entities])
        return entities


class UpdateMixin(
    PrimaryKeyMixin[ModelType],
    CollectionMixin[ModelType],
    FilterableMixin[ModelType],
):
    async def update(self, pk: str, update: UpdateDocument) -> ModelType | None:
        document = await self.collection.find_one_and_update(
            id_eq(pk, self.pk_attribute),
            update,
            return_document=ReturnDocument.AFTER,
        )
        return self._load_optional(document)

    async def apply_update(self, pk: str, update: UpdateDocument) -> bool:
        """Apply ``update`` to the document ``pk`` and report whether one matched."""
        result = await self.collection.update_one(id_eq(pk, self.pk_attribute), update)
        return result.matched_count > 0

    async def update_by(
        self,
        update: UpdateDocument,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
    ) -> int:
        result = await self.collection.update_many(self.build_filter(filters), update)
        return result.matched_count


class DeleteMixin(
    PrimaryKeyMixin[ModelType],
    CollectionMixin[ModelType],
    FilterableMixin[ModelType],
):
    async def delete(self, pk: str) -> bool:
        result = await self.collection.delete_one(id_eq(pk, self.pk_attribute))
        return result.deleted_count > 0

    async def delete_by(
        self,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
    ) -> int:
        result = await self.collection.delete_many(self.build_filter(filters))
        return result.deleted_count


class SoftDeleteMixin(
    RetrievableMixin[SoftModelType],
    UpdateMixin[SoftModelType],
    DeleteMixin[SoftModelType],
    CountableMixin[SoftModelType],
):
    """Marks documents deleted with a UTC timestamp and hides them from reads.

    Reads (``get``, ``get_all``, ``list``, ``count``, ``retrieve_one_by``) only see
    active documents. ``delete`` and ``undelete`` address a document by id whatever
    its state, so deleting twice refreshes the timestamp.
    """

    def _not_deleted(self) -> tuple[FilterSpec[SoftModelType], ...]:
        return (not_deleted(),)

    async def delete(self, pk: str) -> bool:
        matched = await self.apply_update(
            pk,
            set_(DELETED_FIELD, datetime.now(UTC)),
        )
        log.debug('Soft delete of %s %r matched=%s', self.model.__name__, pk, matched)
        return matched

    async def undelete(self, pk: str) -> bool:
        matched = await self.apply_update(pk, unset(DELETED_FIELD))
        log.debug('Undelete of %s %r matched=%s', self.model.__name__, pk, matched)
        return matched

    async def delete_by(
        self,
        *,
        filters: Iterable[FilterSpec[SoftModelType]] | None = None,
    ) -> int:
        return await self.update_by(
            set_(DELETED_FIELD, datetime.now(UTC)),
            filters=(*self._not_deleted(), *(filters or ())),
        )

    async def hard_delete(self, pk: str) -> bool:
        return await super().delete(pk)

    async def get(self, pk: str) -> SoftModelType | None:
        composite = not_deleted_and_id_eq(pk, id_field=self.pk_attribute)
        return await self.find_one(self.build_filter((composite,)))

    async def get_all(self) -> list[SoftModelType]:
        return await self.find(self.build_filter(self._not_deleted()))

    async def get_deleted(self, pk: str) -> SoftModelType | None:
        return await self.find_one(
            self.build_filter((deleted(), id_eq(pk, self.pk_attribute))),
        )

    async def get_all_deleted(self) -> list[SoftModelType]:
        return await self.find(self.build_filter((deleted(),)))

    async def list(
        self,
        *,
        filters: Iterable[FilterSpec[SoftModelType]] | None = None,
        limit: int | None = None,
        offset: int = 0,
        ordering: Iterable[OrderSpec[SoftModelType]] | None = None,
    ) -> list[SoftModelType]:
        return await super().list(
            filters=(*self._not_deleted(), *(filters or ())),
            limit=limit,
            offset=offset,
            ordering=ordering,
        )

    async def retrieve_one_by(
        self,
        *,
        filters: Iterable[FilterSpec[SoftModelType]] | None = None,
        ordering: Iterable[OrderSpec[SoftModelType]] | None = None,
    ) -> SoftModelType | None:
        return await super().retrieve_one_by(
            filters=(*self._not_deleted(), *(filters or ())),
            ordering=ordering,
        )

    async def count(
        self,
        *,
        filters: Iterable[FilterSpec[SoftModelType]] | None = None,
    ) -> int:
        return await super().count(filters=(*self._not_deleted(), *(filters or ())))
