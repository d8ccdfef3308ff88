"""User Repository — user lookup and the discovery filter pipeline.

Invariants:
    - Discovery never returns the requester
    - Filters are conjunctive: gender, likers, likees, derived-age bounds
    - Ordering is descending on the chosen key, then id ascending for stable pages

Design Decisions:
    - Sort key dispatch through an explicit UserSortOrder -> column mapping
    - Age filter expressed as birth-date bounds (core/age.py) so COUNT and
      OFFSET/LIMIT run in the database
"""

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dating_api.core.discovery import DiscoveryParams, UserSortOrder, age_bounds
from dating_api.core.pagination import PagedResult
from dating_api.models.user import User
from dating_api.repositories.likes import likee_ids_of, liker_ids_of
from dating_api.repositories.paging import paginate

_SORT_COLUMNS = {
    UserSortOrder.CREATED: User.created,
    UserSortOrder.LAST_ACTIVE: User.last_active,
}


class SqlUserRepository:
    """UserRepository over SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: int) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def add(self, user: User) -> None:
        self.db.add(user)

    async def page_discovery(
        self, params: DiscoveryParams, today: date,
    ) -> PagedResult[User]:
        stmt = (
            select(User)
            .where(User.id != params.user_id)
            .where(User.gender == params.gender.value)
        )
        if params.likers:
            stmt = stmt.where(User.id.in_(liker_ids_of(params.user_id)))
        if params.likees:
            stmt = stmt.where(User.id.in_(likee_ids_of(params.user_id)))

        bounds = age_bounds(params, today)
        if bounds:
            earliest_exclusive, latest_inclusive = bounds
            stmt = stmt.where(
                User.date_of_birth > earliest_exclusive,
                User.date_of_birth <= latest_inclusive,
            )

        stmt = stmt.order_by(_SORT_COLUMNS[params.order_by].desc(), User.id)
        return await paginate(self.db, stmt, params.page)
