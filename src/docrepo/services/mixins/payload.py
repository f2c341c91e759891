from typing import Any, Generic

from pydantic import BaseModel as PydanticModel

from docrepo.repositories.filters import DELETED_FIELD
from docrepo.repositories.types import ModelType


class PayloadMixin(Generic[ModelType]):
    # Identity and the soft-delete marker are managed by the repository.
    protected_fields: frozenset[str] = frozenset({'id', '_id', DELETED_FIELD})

    @staticmethod
    def _dump_payload(
        data: PydanticModel | dict[str, Any],
        *,
        exclude_unset: bool,
    ) -> dict[str, Any]:
        if isinstance(data, dict):
            return dict(data)
        return data.model_dump(exclude_unset=exclude_unset)

    def _strip_protected(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {key: value for key, value in payload.items() if key not in self.protected_fields}
