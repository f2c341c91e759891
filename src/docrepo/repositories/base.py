from docrepo.persistence.context import MongoContext

from .config import RepoConfig
from .mixins import (
    CountableMixin,
    CreatableMixin,
    DeleteMixin,
    RetrievableMixin,
    SoftDeleteMixin,
    UpdateMixin,
)
from .types import ModelType, SoftModelType


class Repository(
    RetrievableMixin[ModelType],
    CreatableMixin[ModelType],
    UpdateMixin[ModelType],
    DeleteMixin[ModelType],
    CountableMixin[ModelType],
):
    """Composition-friendly base repository built out of mixins."""

    def __init__(
        self,
        context: MongoContext,
        model: type[ModelType],
        *,
        config: RepoConfig[ModelType] | None = None,
    ) -> None:
        self.context = context
        self.model = model
        if config is not None:
            config.apply(self)


class SoftDeleteRepository(
    SoftDeleteMixin[SoftModelType],
    Repository[SoftModelType],
):
    """Repository variant whose ``delete`` only marks documents as deleted."""
