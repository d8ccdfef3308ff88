"""User Service — profile reads/updates and last-active tracking.

Invariants:
    - Only the user themself can update their profile
    - record_activity stamps last_active from the Clock and never fails the request

Design Decisions:
    - Profile updates receive an explicit dict of allowed fields (validated by
      the API schema), applied with setattr on known columns only
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from dating_api.core.clock import Clock
from dating_api.core.domain_types import UserId
from dating_api.core.errors import (
    DatingError, ErrorContext, ForbiddenError, PersistenceError, ResourceNotFoundError,
)
from dating_api.core.repository_protocols import UnitOfWork, UserLike, UserRepository

logger = logging.getLogger(__name__)

PROFILE_FIELDS = frozenset({
    "known_as", "city", "country", "introduction", "looking_for", "interests",
})


class UserService:
    """User profile operations."""

    def __init__(self, users: UserRepository, uow: UnitOfWork, clock: Clock):
        self.users = users
        self.uow = uow
        self.clock = clock

    async def get_user(self, user_id: UserId) -> UserLike:
        user = await self.users.get(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user

    async def update_profile(
        self, user_id: UserId, acting_user_id: UserId, changes: dict,
    ) -> UserLike:
        user = await self.get_user(user_id)
        if user.id != acting_user_id:
            raise ForbiddenError(
                "Profiles can only be updated by their owner",
                ErrorContext(user_id=acting_user_id, resource_id=user_id),
            )
        for name, value in changes.items():
            if name in PROFILE_FIELDS:
                setattr(user, name, value)
        if not await self.uow.save_all():
            raise PersistenceError("no rows changed", f"user {user_id}")
        logger.info("Profile updated", extra={"user_id": user_id})
        return user

    async def record_activity(self, user_id: UserId) -> None:
        """Stamp last_active for the acting user."""
        try:
            user = await self.users.get(user_id)
            if user is None:
                return
            user.last_active = self.clock.now()
            await self.uow.save_all()
        except (DatingError, SQLAlchemyError) as e:
            logger.warning(
                f"Could not record activity: {e}", extra={"user_id": user_id},
            )
