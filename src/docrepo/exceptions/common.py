from collections.abc import Mapping
from typing import Any, Generic, TypeVar

PKType = TypeVar('PKType')


class DocRepoError(Exception):
    """Base class for errors raised by the service layer."""


class NotFoundError(DocRepoError, Generic[PKType]):
    def __init__(self, message: str = 'Entity not found.', *, pk: PKType | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.pk = pk


class AlreadyExistsError(DocRepoError):
    def __init__(
        self,
        message: str = 'Entity already exists.',
        *,
        key_pattern: Mapping[str, Any] | None = None,
        key_value: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.key_pattern = dict(key_pattern or {})
        self.key_value = dict(key_value or {})
