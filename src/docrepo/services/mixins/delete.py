import logging

from docrepo.repositories.types import ModelType, SoftModelType

from .accessors import RepositoryAccessorMixin, SoftDeleteRepositoryProtocol
from .executor import ExecutorMixin

log = logging.getLogger(__name__)


class DeleteServiceMixin(
    ExecutorMixin[ModelType],
    RepositoryAccessorMixin[ModelType],
):
    async def delete(self, pk: str) -> None:
        self._require(await self.repo.delete(pk), pk)


class SoftDeleteServiceMixin(
    DeleteServiceMixin[SoftModelType],
):
    repo: SoftDeleteRepositoryProtocol[SoftModelType]

    async def soft_delete(self, pk: str) -> None:
        await self.delete(pk)

    async def restore(self, pk: str) -> SoftModelType:
        self._require(await self.repo.undelete(pk), pk)
        return self._require(await self.repo.get(pk), pk)

    async def hard_delete(self, pk: str) -> None:
        self._require(await self.repo.hard_delete(pk), pk)
        log.info('Permanently removed %s %r', self.repo.model.__name__, pk)

    async def retrieve_deleted(self, pk: str) -> SoftModelType:
        return self._require(await self.repo.get_deleted(pk), pk)
