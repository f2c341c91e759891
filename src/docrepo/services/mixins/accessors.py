from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Generic, Protocol

from docrepo.repositories.types import (
    FilterSpec,
    ModelType,
    OrderSpec,
    SoftModelType,
    UpdateDocument,
)


class RepositoryProtocol(Protocol[ModelType]):
    model: type[ModelType]
    pk_attribute: str

    async def list(
        self,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
        limit: int | None = None,
        offset: int = 0,
        ordering: Iterable[OrderSpec[ModelType]] | None = None,
    ) -> list[ModelType]: ...

    async def count(
        self,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
    ) -> int: ...

    async def get(self, pk: str) -> ModelType | None: ...

    async def get_all(self) -> list[ModelType]: ...

    async def retrieve_one_by(
        self,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
        ordering: Iterable[OrderSpec[ModelType]] | None = None,
    ) -> ModelType | None: ...

    async def create(self, data: ModelType | Mapping[str, Any]) -> ModelType: ...

    async def bulk_create(
        self,
        payload: Iterable[ModelType | Mapping[str, Any]],
    ) -> list[ModelType]: ...

    async def update(self, pk: str, update: UpdateDocument) -> ModelType | None: ...

    async def update_by(
        self,
        update: UpdateDocument,
        *,
        filters: Iterable[FilterSpec[ModelType]] | None = None,
    ) -> int: ...

    async def delete(self, pk: str) -> bool: ...


class SoftDeleteRepositoryProtocol(
    RepositoryProtocol[SoftModelType],
    Protocol[SoftModelType],
):
    async def undelete(self, pk: str) -> bool: ...

    async def hard_delete(self, pk: str) -> bool: ...

    async def get_deleted(self, pk: str) -> SoftModelType | None: ...

    async def get_all_deleted(self) -> list[SoftModelType]: ...


class RepositoryAccessorMixin(Generic[ModelType]):
    repo: RepositoryProtocol[ModelType]
