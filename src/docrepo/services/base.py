from docrepo.repositories.types import ModelType, SoftModelType

from .mixins.accessors import RepositoryProtocol, SoftDeleteRepositoryProtocol
from .mixins.create import CreateServiceMixin
from .mixins.delete import DeleteServiceMixin, SoftDeleteServiceMixin
from .mixins.pagination import PaginationServiceMixin
from .mixins.retrieval import RetrievalServiceMixin
from .mixins.serializer import ResponseSchema, SerializerMixin
from .mixins.update import UpdateServiceMixin


class RepositoryService(
    SerializerMixin[ModelType, ResponseSchema],
    PaginationServiceMixin[ModelType],
    RetrievalServiceMixin[ModelType],
    CreateServiceMixin[ModelType],
    UpdateServiceMixin[ModelType],
    DeleteServiceMixin[ModelType],
):
    """Turnkey async service that glues repository access and serialization together."""

    def __init__(self, repo: RepositoryProtocol[ModelType]) -> None:
        self.repo = repo


class SoftDeleteRepositoryService(
    RepositoryService[SoftModelType, ResponseSchema],
    SoftDeleteServiceMixin[SoftModelType],
):
    """Repository service variant that exposes soft-delete helpers."""

    def __init__(self, repo: SoftDeleteRepositoryProtocol[SoftModelType]) -> None:
        super().__init__(repo)
