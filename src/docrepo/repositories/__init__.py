from .base import Repository, SoftDeleteRepository
from .config import RepoConfig
from .factory import build_repository
from .filters import deleted, id_eq, not_deleted, not_deleted_and_id_eq

__all__ = [
    'RepoConfig',
    'Repository',
    'SoftDeleteRepository',
    'build_repository',
    'deleted',
    'id_eq',
    'not_deleted',
    'not_deleted_and_id_eq',
]
