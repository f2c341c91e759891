from typing import Any, Literal

from pydantic import BaseModel as PydanticModel

from docrepo.repositories.expressions import combine_updates, set_
from docrepo.repositories.types import ModelType
from docrepo.schemas.base import BaseResponseSchema

from .accessors import RepositoryAccessorMixin
from .executor import ExecutorMixin
from .payload import PayloadMixin
from .serializer import SerializerProtocol


class UpdateServiceMixin(
    ExecutorMixin[ModelType],
    RepositoryAccessorMixin[ModelType],
    PayloadMixin[ModelType],
    SerializerProtocol[ModelType],
):
    async def update_raw(self, pk: str, data: PydanticModel | dict[str, Any]) -> ModelType:
        payload = self._strip_protected(self._dump_payload(data, exclude_unset=True))
        if not payload:
            # Mongo rejects an empty $set.
            return self._require(await self.repo.get(pk), pk)
        update = combine_updates(*(set_(field, value) for field, value in payload.items()))
        entity = await self._execute(self.repo.update(pk, update))
        return self._require(entity, pk)

    async def update(
        self,
        pk: str,
        data: PydanticModel | dict[str, Any],
        *,
        schema: type[BaseResponseSchema] | Literal[False] | None = None,
    ) -> BaseResponseSchema | ModelType:
        entity = await self.update_raw(pk, data)
        return self.serialize_one(entity, schema=schema)
