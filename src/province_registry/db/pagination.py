"""
province_registry.db.pagination

Offset/limit paging primitives.

Responsibilities:
- Translate a 1-based (page, size) request into offset/limit.
- Carry a bounded result together with the total row count.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int
    size: int

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"page size must be >= 1, got {self.size}")

    @property
    def offset(self) -> int:
        # Pages below 1 read the first page.
        return (max(self.page, 1) - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size


@dataclass(slots=True)
class Page(Generic[T]):
    """
    Result of a list read. Unpaginated reads leave `page`/`size` as None and
    report `total == len(items)`.
    """

    items: list[T]
    total: int
    page: int | None = None
    size: int | None = None

    @property
    def paginated(self) -> bool:
        return self.size is not None

    @property
    def pages(self) -> int:
        if not self.size:
            return 1 if self.total else 0
        return math.ceil(self.total / self.size)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
