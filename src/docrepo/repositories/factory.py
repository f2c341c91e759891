from typing import cast

from docrepo.persistence.context import MongoContext

from .base import Repository, SoftDeleteRepository
from .config import RepoConfig
from .types import ModelType


def build_repository(
    context: MongoContext,
    model: type[ModelType],
    *,
    config: RepoConfig[ModelType] | None = None,
    soft_delete: bool = False,
    repo_cls: type[Repository[ModelType]] | None = None,
) -> Repository[ModelType]:
    """Create a repository with optional config overrides."""
    if repo_cls is None:
        repo_cls = cast(
            type[Repository[ModelType]],
            SoftDeleteRepository if soft_delete else Repository,
        )
    return repo_cls(context, model, config=config)
