"""Pagination — page requests, page metadata and the generic PagedResult view.

Invariants:
    - page_number >= 1 and 1 <= page_size <= MAX_PAGE_SIZE after PageRequest clamping
    - total_pages == ceil(total_count / page_size); 0 when total_count == 0
    - len(items) <= page_size; pages past the end are empty with consistent metadata
    - PagedResult owns nothing persistent — it is rebuilt from the source every call

Design Decisions:
    - Clamp, don't reject: out-of-range page numbers/sizes are normalised (ADR: lenient query params)
    - Counting and slicing live in the shell (repositories/paging.py); this module only does the math
"""

import json
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50


def total_pages(total_count: int, page_size: int) -> int:
    """Ceiling division of total_count by page_size."""
    return -(-total_count // page_size)


@dataclass(frozen=True)
class PageRequest:
    """Normalised page coordinates."""
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        object.__setattr__(self, "page_number", max(self.page_number, 1))
        object.__setattr__(
            self, "page_size", min(max(self.page_size, 1), MAX_PAGE_SIZE),
        )

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


@dataclass(frozen=True)
class PageMeta:
    """Pagination metadata reported alongside every paged result."""
    current_page: int
    page_size: int
    total_count: int
    total_pages: int

    def to_dict(self) -> dict:
        return {
            "current_page": self.current_page,
            "page_size": self.page_size,
            "total_count": self.total_count,
            "total_pages": self.total_pages,
        }

    def to_header(self) -> str:
        """camelCase JSON for the `Pagination` response header."""
        return json.dumps({
            "currentPage": self.current_page,
            "itemsPerPage": self.page_size,
            "totalItems": self.total_count,
            "totalPages": self.total_pages,
        })


@dataclass
class PagedResult(Generic[T]):
    """One ordered slice of a filtered result set plus its metadata."""
    current_page: int
    page_size: int
    total_count: int
    total_pages: int
    items: list[T] = field(default_factory=list)

    @classmethod
    def from_slice(
        cls, items: list[T], total_count: int, request: PageRequest,
    ) -> "PagedResult[T]":
        return cls(
            current_page=request.page_number,
            page_size=request.page_size,
            total_count=total_count,
            total_pages=total_pages(total_count, request.page_size),
            items=list(items)[:request.page_size],
        )

    @property
    def meta(self) -> PageMeta:
        return PageMeta(
            self.current_page, self.page_size,
            self.total_count, self.total_pages,
        )
