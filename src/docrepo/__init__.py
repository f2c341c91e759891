from docrepo.models import Entity, SoftDeletableEntity
from docrepo.persistence import MongoContext, MongoSettings
from docrepo.repositories import RepoConfig, Repository, SoftDeleteRepository, build_repository
from docrepo.services import RepositoryService, SoftDeleteRepositoryService

__all__ = [
    'Entity',
    'MongoContext',
    'MongoSettings',
    'RepoConfig',
    'Repository',
    'RepositoryService',
    'SoftDeletableEntity',
    'SoftDeleteRepository',
    'SoftDeleteRepositoryService',
    'build_repository',
]
