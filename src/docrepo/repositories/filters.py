from .expressions import and_, eq, exists, not_
from .types import FilterDocument

ID_FIELD = '_id'
DELETED_FIELD = 'deleted_at'


def deleted(field: str = DELETED_FIELD) -> FilterDocument:
    """Match soft-deleted documents, whatever the marker's value."""
    return exists(field)


def not_deleted(field: str = DELETED_FIELD) -> FilterDocument:
    return not_(deleted(field))


def id_eq(pk: str, field: str = ID_FIELD) -> FilterDocument:
    return eq(field, pk)


def not_deleted_and_id_eq(
    pk: str,
    *,
    id_field: str = ID_FIELD,
    deleted_field: str = DELETED_FIELD,
) -> FilterDocument:
    return and_(not_deleted(deleted_field), id_eq(pk, id_field))
