from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from typing import Any, Generic

from .types import FilterSpec, ModelType, OrderSpec


@dataclass(slots=True, frozen=True)
class RepoConfig(Generic[ModelType]):
    """Per-instance overrides for repository class defaults; ``None`` keeps the default."""

    default_filters: Sequence[FilterSpec[ModelType]] | None = None
    default_ordering: Sequence[OrderSpec[ModelType]] | None = None
    default_limit: int | None = None
    pk_attribute: str | None = None

    def __post_init__(self) -> None:
        if self.default_limit is not None and self.default_limit <= 0:
            msg = 'default_limit must be a positive integer'
            raise ValueError(msg)

    def apply(self, repo: Any) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if value is None:
                continue
            if field.name in {'default_filters', 'default_ordering'}:
                value = tuple(value)
            setattr(repo, field.name, value)
