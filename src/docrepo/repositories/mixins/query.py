from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Generic

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING

from docrepo.persistence.context import MongoContext

from ..expressions import and_
from ..filters import id_eq
from ..types import FilterDocument, FilterSpec, ModelType, OrderClause, OrderSpec


class CollectionMixin(Generic[ModelType]):
    """Binds a repository to the collection that stores ``model``."""

    model: type[ModelType]
    context: MongoContext

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.context.get_collection(self.model)

    def _load(self, document: Mapping[str, Any]) -> ModelType:
        return self.model.from_document(document)

    def _load_optional(self, document: Mapping[str, Any] | None) -> ModelType | None:
        if document is None:
            return None
        return self._load(document)

    def _build_entity(self, data: ModelType | Mapping[str, Any]) -> ModelType:
        if isinstance(data, self.model):
            return data
        return self.model.model_validate(data)


class FilterableMixin(Generic[ModelType]):
    model: type[ModelType]
    default_filters: Sequence[FilterSpec[ModelType]] = ()

    def _resolve_filter(self, spec: FilterSpec[ModelType]) -> FilterDocument:
        return spec(self.model) if callable(spec) else spec

    def merge_filters(
        self,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
    ) -> tuple[FilterDocument, ...]:
        custom = tuple(filters or ())
        specs = (*self.default_filters, *custom)
        return tuple(self._resolve_filter(spec) for spec in specs)

    def build_filter(
        self,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
    ) -> FilterDocument:
        return and_(*self.merge_filters(filters))


class OrderableMixin(Generic[ModelType]):
    model: type[ModelType]
    default_ordering: Sequence[OrderSpec[ModelType]] = ()
    fallback_sort_attribute: str | None = '_id'

    def _resolve_order(self, spec: OrderSpec[ModelType]) -> OrderClause:
        return spec(self.model) if callable(spec) else spec

    def merge_ordering(
        self,
        ordering: Iterable[OrderSpec[ModelType]] | None = None,
        *,
        fallback: bool = False,
    ) -> list[OrderClause]:
        custom = tuple(ordering or ())
        specs = (*self.default_ordering, *custom)
        resolved = [self._resolve_order(spec) for spec in specs]
        if not resolved and fallback and self.fallback_sort_attribute:
            resolved.append((self.fallback_sort_attribute, ASCENDING))
        return resolved


class PrimaryKeyMixin(Generic[ModelType]):
    model: type[ModelType]
    pk_attribute: str = '_id'


class RetrievableMixin(
    PrimaryKeyMixin[ModelType],
    CollectionMixin[ModelType],
    FilterableMixin[ModelType],
    OrderableMixin[ModelType],
):
    default_limit: int = 50

    async def _find(
        self,
        filter: FilterDocument,
        *,
        limit: int | None,
        offset: int,
        sort: list[OrderClause],
    ) -> list[ModelType]:
        # Mongo reads a zero limit as "no limit"; only None may mean unbounded.
        if limit is not None and limit <= 0:
            msg = 'limit must be a positive integer'
            raise ValueError(msg)
        if offset < 0:
            msg = 'offset must be zero or a positive integer'
            raise ValueError(msg)
        cursor = self.collection.find(
            filter,
            sort=sort or None,
            skip=offset,
            limit=0 if limit is None else limit,
        )
        documents = await cursor.to_list(length=None)
        return [self._load(document) for document in documents]

    async def find_one(
        self,
        filter: FilterDocument,
        *,
        ordering: Iterable[OrderSpec[ModelType]] | None = None,
    ) -> ModelType | None:
        sort = self.merge_ordering(ordering)
        document = await self.collection.find_one(filter, sort=sort or None)
        return self._load_optional(document)

    async def find(
        self,
        filter: FilterDocument | None = None,
        *,
        limit: int | None = None,
        offset: int = 0,
        ordering: Iterable[OrderSpec[ModelType]] | None = None,
    ) -> list[ModelType]:
        return await self._find(
            filter or {},
            limit=limit,
            offset=offset,
            sort=self.merge_ordering(ordering),
        )

    async def get(self, pk: str) -> ModelType | None:
        return await self.find_one(self.build_filter((id_eq(pk, self.pk_attribute),)))

    async def get_all(self) -> list[ModelType]:
        return await self.find(self.build_filter())

    async def list(
        self,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
        limit: int | None = None,
        offset: int = 0,
        ordering: Iterable[OrderSpec[ModelType]] | None = None,
    ) -> list[ModelType]:
        return await self._find(
            self.build_filter(filters),
            limit=self.default_limit if limit is None else limit,
            offset=offset,
            sort=self.merge_ordering(ordering, fallback=True),
        )

    async def retrieve_one_by(
        self,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
        ordering: Iterable[OrderSpec[ModelType]] | None = None,
    ) -> ModelType | None:
        return await self.find_one(self.build_filter(filters), ordering=ordering)


class CountableMixin(
    CollectionMixin[ModelType],
    FilterableMixin[ModelType],
):
    async def count(
        self,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
    ) -> int:
        return await self.collection.count_documents(self.build_filter(filters))
