"""Paging Shell — counts and slices an ordered statement into a PagedResult.

Invariants:
    - total_count counts the full filtered statement before slicing
    - The caller's ORDER BY is kept for the slice and dropped for the count
    - offset = (page_number - 1) * page_size, limit = page_size

Design Decisions:
    - Count via subquery: works for any filtered select, including IN-subquery filters
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from dating_api.core.pagination import PageRequest, PagedResult


async def paginate(
    db: AsyncSession, stmt: Select, request: PageRequest,
) -> PagedResult:
    """Run `stmt` as one page of `request`."""
    count_stmt = select(func.count()).select_from(
        stmt.order_by(None).subquery(),
    )
    total_count = (await db.execute(count_stmt)).scalar_one()

    result = await db.execute(
        stmt.offset(request.offset).limit(request.page_size),
    )
    items = list(result.scalars().all())
    return PagedResult.from_slice(items, total_count, request)
