import math
from typing import Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict

DataT = TypeVar('DataT')


class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class BaseRequestSchema(BaseSchema):
    model_config = ConfigDict(extra='forbid')


class BaseResponseSchema(BaseSchema): ...


class PaginationMetaSchema(BaseSchema):
    total: int
    limit: int
    offset: int
    current_page: int
    last_page: int

    @classmethod
    def calculate(cls, *, total: int, limit: int, offset: int) -> Self:
        if limit <= 0:
            msg = 'limit must be a positive integer'
            raise ValueError(msg)
        if offset < 0:
            msg = 'offset must be zero or a positive integer'
            raise ValueError(msg)
        last_page = max(1, math.ceil(total / limit))
        current_page = min(offset // limit + 1, last_page)
        return cls(
            total=total,
            limit=limit,
            offset=offset,
            current_page=current_page,
            last_page=last_page,
        )


class PaginatedResponseSchema(BaseSchema, Generic[DataT]):
    meta: PaginationMetaSchema
    data: list[DataT]
