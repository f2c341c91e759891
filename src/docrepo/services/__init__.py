from .base import RepositoryService, SoftDeleteRepositoryService

__all__ = [
    'RepositoryService',
    'SoftDeleteRepositoryService',
]
