from .base import (
    BaseRequestSchema,
    BaseResponseSchema,
    BaseSchema,
    PaginatedResponseSchema,
    PaginationMetaSchema,
)

__all__ = [
    'BaseRequestSchema',
    'BaseResponseSchema',
    'BaseSchema',
    'PaginatedResponseSchema',
    'PaginationMetaSchema',
]
