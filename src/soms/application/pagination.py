"""Offset-based pagination shared by every listing use case."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from soms.application.validation import ensure_valid, validate_page_request

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A bounded slice of a larger result set plus count metadata."""

    items: list[T]
    current_page: int
    total_pages: int
    total_count: int

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    def map(self, convert: Callable[[T], U]) -> Page[U]:
        return Page(
            items=[convert(item) for item in self.items],
            current_page=self.current_page,
            total_pages=self.total_pages,
            total_count=self.total_count,
        )


def paginate(source: Iterable[T], page: int, size: int) -> Page[T]:
    """Return page *page* (1-based) of *size* records from *source*.

    Counts are taken over the whole source.  A page past the end is empty
    rather than an error.
    """
    ensure_valid(validate_page_request(page, size))

    records: Sequence[T] = source if isinstance(source, Sequence) else list(source)
    total_count = len(records)
    start = (page - 1) * size

    return Page(
        items=list(records[start:start + size]),
        current_page=page,
        total_pages=math.ceil(total_count / size),
        total_count=total_count,
    )
