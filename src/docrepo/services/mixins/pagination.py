from collections.abc import Iterable
from typing import Literal

from docrepo.repositories.types import FilterSpec, ModelType, OrderSpec
from docrepo.schemas.base import (
    BaseResponseSchema,
    PaginatedResponseSchema,
    PaginationMetaSchema,
)

from .listing import ListingServiceMixin


class PaginationServiceMixin(
    ListingServiceMixin[ModelType],
):
    async def paginate(
        self,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
        limit: int = 20,
        offset: int = 0,
        ordering: Iterable[OrderSpec[ModelType]] | None = None,
        schema: type[BaseResponseSchema] | Literal[False] | None = None,
    ) -> PaginatedResponseSchema[BaseResponseSchema | ModelType]:
        # Validate before touching the database.
        PaginationMetaSchema.calculate(total=0, limit=limit, offset=offset)
        filters = tuple(filters or ())
        data = await self.list_raw(
            filters=filters,
            limit=limit,
            offset=offset,
            ordering=ordering,
        )
        serialized = self.serialize_many(data, schema=schema)
        total = await self.repo.count(filters=filters)
        meta = PaginationMetaSchema.calculate(total=total, limit=limit, offset=offset)
        return PaginatedResponseSchema(meta=meta, data=serialized)
