"""Building blocks for MongoDB query and update documents.

Every helper returns a fresh ``dict``; nothing here talks to the database.
"""

from typing import Any

from .types import FilterDocument, UpdateDocument


def eq(field: str, value: Any) -> FilterDocument:
    return {field: value}


def exists(field: str, *, present: bool = True) -> FilterDocument:
    return {field: {'$exists': present}}


def and_(*predicates: FilterDocument) -> FilterDocument:
    # ``{}`` matches everything, so it can be dropped from a conjunction.
    clauses = [predicate for predicate in predicates if predicate]
    if not clauses:
        return {}
    if len(clauses) == 1:
        return dict(clauses[0])
    return {'$and': clauses}


def not_(predicate: FilterDocument) -> FilterDocument:
    # Mongo has no top-level $not; $nor over a single clause negates it.
    return {'$nor': [predicate]}


def set_(field: str, value: Any) -> UpdateDocument:
    return {'$set': {field: value}}


def unset(field: str) -> UpdateDocument:
    return {'$unset': {field: ''}}


def combine_updates(*updates: UpdateDocument) -> UpdateDocument:
    merged: UpdateDocument = {}
    for update in updates:
        for operator, fields in update.items():
            merged.setdefault(operator, {}).update(fields)
    return merged
