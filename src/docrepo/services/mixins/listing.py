from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from docrepo.repositories.types import FilterSpec, ModelType, OrderSpec
from docrepo.schemas.base import BaseResponseSchema

from .accessors import RepositoryAccessorMixin
from .serializer import SerializerProtocol


class ListingServiceMixin(
    RepositoryAccessorMixin[ModelType],
    SerializerProtocol[ModelType],
):
    async def list_raw(
        self,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
        limit: int | None = None,
        offset: int = 0,
        ordering: Iterable[OrderSpec[ModelType]] | None = None,
    ) -> list[ModelType]:
        return await self.repo.list(
            filters=filters,
            limit=limit,
            offset=offset,
            ordering=ordering,
        )

    async def list(
        self,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
        limit: int | None = None,
        offset: int = 0,
        ordering: Iterable[OrderSpec[ModelType]] | None = None,
        schema: type[BaseResponseSchema] | Literal[False] | None = None,
    ) -> list[BaseResponseSchema | ModelType]:
        rows = await self.list_raw(
            filters=filters,
            limit=limit,
            offset=offset,
            ordering=ordering,
        )
        return self.serialize_many(rows, schema=schema)
