"""Like Repository — directed like edges and the id sets discovery filters on.

Invariants:
    - likers_of(U): edges with likee_id == U (who likes U)
    - likees_of(U): edges with liker_id == U (who U likes)
    - liker_ids_of/likee_ids_of return SELECTs usable inside IN (...) filters
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from dating_api.models.like import Like


def liker_ids_of(user_id: int) -> Select:
    """Ids of users who like `user_id`."""
    return select(Like.liker_id).where(Like.likee_id == user_id)


def likee_ids_of(user_id: int) -> Select:
    """Ids of users `user_id` likes."""
    return select(Like.likee_id).where(Like.liker_id == user_id)


class SqlLikeRepository:
    """LikeRepository over SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_edge(self, liker_id: int, likee_id: int) -> Like | None:
        result = await self.db.execute(
            select(Like)
            .where(Like.liker_id == liker_id)
            .where(Like.likee_id == likee_id)
        )
        return result.scalar_one_or_none()

    async def likers_of(self, user_id: int) -> list[Like]:
        result = await self.db.execute(
            select(Like).where(Like.likee_id == user_id),
        )
        return list(result.scalars().all())

    async def likees_of(self, user_id: int) -> list[Like]:
        result = await self.db.execute(
            select(Like).where(Like.liker_id == user_id),
        )
        return list(result.scalars().all())

    async def add(self, liker_id: int, likee_id: int) -> Like:
        like = Like(liker_id=liker_id, likee_id=likee_id)
        self.db.add(like)
        return like
