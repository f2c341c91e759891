from collections.abc import Iterable
from typing import Literal

from docrepo.repositories.types import FilterSpec, ModelType, OrderSpec
from docrepo.schemas.base import BaseResponseSchema

from .accessors import RepositoryAccessorMixin
from .executor import ExecutorMixin
from .serializer import SerializerProtocol


class RetrievalServiceMixin(
    ExecutorMixin[ModelType],
    RepositoryAccessorMixin[ModelType],
    SerializerProtocol[ModelType],
):
    async def retrieve_raw(self, pk: str) -> ModelType:
        return self._require(await self.repo.get(pk), pk)

    async def retrieve_optional(self, pk: str) -> ModelType | None:
        return await self.repo.get(pk)

    async def retrieve_one_raw_by(
        self,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
        ordering: Iterable[OrderSpec[ModelType]] | None = None,
    ) -> ModelType:
        entity = await self.repo.retrieve_one_by(filters=filters, ordering=ordering)
        return self._require(entity)

    async def retrieve(
        self,
        pk: str,
        *,
        schema: type[BaseResponseSchema] | Literal[False] | None = None,
    ) -> BaseResponseSchema | ModelType:
        entity = await self.retrieve_raw(pk)
        return self.serialize_one(entity, schema=schema)

    async def retrieve_all(
        self,
        *,
        schema: type[BaseResponseSchema] | Literal[False] | None = None,
    ) -> list[BaseResponseSchema | ModelType]:
        return self.serialize_many(await self.repo.get_all(), schema=schema)
