"""Pagination Schemas — envelope shared by every paged endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from dating_api.core.pagination import PageMeta

ItemT = TypeVar("ItemT")


class PaginationResponse(BaseModel):
    current_page: int
    page_size: int
    total_count: int
    total_pages: int

    @classmethod
    def from_meta(cls, meta: PageMeta) -> "PaginationResponse":
        return cls(**meta.to_dict())


class PagedResponse(BaseModel, Generic[ItemT]):
    """Items of one page plus pagination metadata."""
    items: list[ItemT]
    pagination: PaginationResponse
