import pytest

from docrepo.persistence.context import MongoContext
from docrepo.repositories.base import Repository, SoftDeleteRepository
from docrepo.repositories.config import RepoConfig
from docrepo.repositories.factory import build_repository
from tests.test_integration.mocks.model import MockModel, PlainMockModel


def test_repo_config_rejects_non_positive_limit() -> None:
    with pytest.raises(ValueError, match='default_limit must be a positive integer'):
        RepoConfig(default_limit=0)


def test_build_repository_picks_class(context: MongoContext) -> None:
    plain = build_repository(context, PlainMockModel)
    soft = build_repository(context, MockModel, soft_delete=True)
    assert type(plain) is Repository
    assert type(soft) is SoftDeleteRepository


def test_build_repository_applies_config(context: MongoContext) -> None:
    config = RepoConfig[PlainMockModel](
        default_filters=[{'rank': {'$gte': 1}}],
        default_limit=5,
    )
    repo = build_repository(context, PlainMockModel, config=config)
    assert repo.default_limit == 5
    assert repo.default_filters == ({'rank': {'$gte': 1}},)
    assert repo.pk_attribute == '_id'
    assert Repository.default_limit == 50


def test_build_repository_honours_repo_cls(context: MongoContext) -> None:
    class CustomRepo(Repository[PlainMockModel]): ...

    repo = build_repository(context, PlainMockModel, repo_cls=CustomRepo)
    assert isinstance(repo, CustomRepo)


def test_repo_config_cannot_rename_deleted_marker() -> None:
    with pytest.raises(TypeError):
        RepoConfig(deleted_attribute='removed_on')  # type: ignore[call-arg]
