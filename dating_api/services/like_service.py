"""Like Service — creates directed like edges and reads the like graph.

Invariants:
    - A second like for the same (liker, likee) raises DuplicateLikeError
    - Liking a non-existent user raises UnknownRecipientError
    - Self-likes are not rejected here
    - Nothing is committed when a check fails

Design Decisions:
    - Duplicate check runs before the recipient lookup; a racing duplicate is
      caught by the composite primary key and surfaces as PersistenceError
"""

import logging

from dating_api.core.domain_types import UserId
from dating_api.core.errors import (
    DuplicateLikeError, ErrorContext, PersistenceError, UnknownRecipientError,
)
from dating_api.core.repository_protocols import (
    LikeEdge, LikeRepository, UnitOfWork, UserRepository,
)

logger = logging.getLogger(__name__)


class LikeService:
    """Like graph operations."""

    def __init__(
        self, users: UserRepository, likes: LikeRepository, uow: UnitOfWork,
    ):
        self.users = users
        self.likes = likes
        self.uow = uow

    async def find_edge(self, liker_id: UserId, likee_id: UserId) -> LikeEdge | None:
        return await self.likes.find_edge(liker_id, likee_id)

    async def likers_of(self, user_id: UserId) -> list[LikeEdge]:
        return await self.likes.likers_of(user_id)

    async def likees_of(self, user_id: UserId) -> list[LikeEdge]:
        return await self.likes.likees_of(user_id)

    async def create_like(self, liker_id: UserId, likee_id: UserId) -> LikeEdge:
        """Add the edge liker -> likee and commit."""
        if await self.likes.find_edge(liker_id, likee_id) is not None:
            logger.warning(
                "Duplicate like rejected",
                extra={"user_id": liker_id, "target_user_id": likee_id},
            )
            raise DuplicateLikeError(
                liker_id, likee_id, ErrorContext(user_id=liker_id),
            )
        if await self.users.get(likee_id) is None:
            raise UnknownRecipientError(likee_id, ErrorContext(user_id=liker_id))

        like = await self.likes.add(liker_id, likee_id)
        if not await self.uow.save_all():
            raise PersistenceError("no rows changed", "like")
        logger.info(
            "Like created",
            extra={"user_id": liker_id, "target_user_id": likee_id},
        )
        return like
