"""Paginated collections returned by list endpoints."""

from __future__ import annotations

from collections import abc
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError


class PaginationMeta(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    total: Optional[int] = Field(default=None, validation_alias=AliasChoices("total", "total_count"))
    offset: Optional[int] = None
    limit: Optional[int] = None


class Collection(abc.Sequence):
    """One page of list results.

    Items are held in an immutable tuple in server order, so the collection
    can be iterated any number of times. ``len()`` and ``count()`` describe
    this page only; ``total`` is the server-side figure from the metadata.
    Fetching the next page is up to the caller (advance ``offset`` by
    ``limit`` and list again).
    """

    def __init__(self, data: Sequence[Dict[str, Any]], meta: Optional[Mapping[str, Any]] = None) -> None:
        self._data = tuple(data)
        self._meta: Optional[Dict[str, Any]] = dict(meta) if isinstance(meta, abc.Mapping) else None
        try:
            self._pagination = PaginationMeta.model_validate(self._meta or {})
        except ValidationError:
            # Unusable pagination figures leave the page without metadata.
            self._pagination = PaginationMeta()

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __repr__(self) -> str:
        return f"Collection(count={len(self._data)}, total={self.total}, offset={self.offset}, limit={self.limit})"

    def count(self, value: Any = None) -> int:  # type: ignore[override]
        """Number of items in this page (or occurrences of ``value`` when given)."""
        if value is not None:
            return self._data.count(value)
        return len(self._data)

    def all(self) -> List[Dict[str, Any]]:
        return list(self._data)

    @property
    def meta(self) -> Optional[Dict[str, Any]]:
        return self._meta

    @property
    def total(self) -> Optional[int]:
        return self._pagination.total

    @property
    def offset(self) -> Optional[int]:
        return self._pagination.offset

    @property
    def limit(self) -> Optional[int]:
        return self._pagination.limit

    def has_more(self) -> bool:
        total, offset, limit = self.total, self.offset, self.limit
        if total is None or offset is None or limit is None:
            return False
        return offset + limit < total


__all__ = ["Collection", "PaginationMeta"]
