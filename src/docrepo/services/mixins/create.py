from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel as PydanticModel

from docrepo.repositories.types import ModelType
from docrepo.schemas.base import BaseResponseSchema

from .accessors import RepositoryAccessorMixin
from .executor import ExecutorMixin
from .payload import PayloadMixin
from .serializer import SerializerProtocol


class CreateServiceMixin(
    ExecutorMixin[ModelType],
    RepositoryAccessorMixin[ModelType],
    PayloadMixin[ModelType],
    SerializerProtocol[ModelType],
):
    async def create_raw(self, data: PydanticModel | dict[str, Any]) -> ModelType:
        payload = self._dump_payload(data, exclude_unset=False)
        return await self._execute(self.repo.create(payload))

    async def create(
        self,
        data: PydanticModel | dict[str, Any],
        *,
        schema: type[BaseResponseSchema] | Literal[False] | None = None,
    ) -> BaseResponseSchema | ModelType:
        entity = await self.create_raw(data)
        return self.serialize_one(entity, schema=schema)

    async def bulk_create_raw(
        self,
        items: Iterable[PydanticModel | dict[str, Any]],
    ) -> list[ModelType]:
        payload = [self._dump_payload(data, exclude_unset=False) for data in items]
        return await self._execute(self.repo.bulk_create(payload))

    async def bulk_create(
        self,
        items: Iterable[PydanticModel | dict[str, Any]],
        *,
        schema: type[BaseResponseSchema] | Literal[False] | None = None,
    ) -> list[BaseResponseSchema | ModelType]:
        entities = await self.bulk_create_raw(items)
        return self.serialize_many(entities, schema=schema)
