from .base import Entity, Identifiable, SoftDeletable, SoftDeletableEntity, new_id

__all__ = [
    'Entity',
    'Identifiable',
    'SoftDeletable',
    'SoftDeletableEntity',
    'new_id',
]
