from collections.abc import Awaitable
from typing import ClassVar, Generic, TypeVar

from pymongo.errors import DuplicateKeyError

from docrepo.exceptions.common import AlreadyExistsError, NotFoundError
from docrepo.repositories.types import ModelType

ResultT = TypeVar('ResultT')


class ExecutorMixin(Generic[ModelType]):
    """Turns repository results into service-level errors."""

    _duplicate_key_errors: ClassVar[dict[str, str]] = {}

    @property
    def _not_found_error(self) -> str:
        return f'{self.__class__.__name__.removesuffix("Service")} not found.'

    async def _execute(self, operation: Awaitable[ResultT]) -> ResultT:
        try:
            return await operation
        except DuplicateKeyError as err:
            raise self._translate_duplicate_key_error(err) from err

    def _require(self, result: ResultT | None, pk: str | None = None) -> ResultT:
        if result is None or result is False:
            raise NotFoundError[str](self._not_found_error, pk=pk)
        return result

    def _translate_duplicate_key_error(self, err: DuplicateKeyError) -> AlreadyExistsError:
        details = err.details or {}
        key_pattern = details.get('keyPattern') or {}
        index_name = '_'.join(key_pattern) or None
        return AlreadyExistsError(
            self._duplicate_key_errors.get(index_name or '', 'Entity already exists.'),
            key_pattern=key_pattern,
            key_value=details.get('keyValue'),
        )
