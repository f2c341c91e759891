from .common import AlreadyExistsError, DocRepoError, NotFoundError

__all__ = [
    'AlreadyExistsError',
    'DocRepoError',
    'NotFoundError',
]
