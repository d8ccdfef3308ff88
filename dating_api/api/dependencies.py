"""API Dependencies — acting user, clock and service wiring for routes.

Invariants:
    - The acting user id comes from the X-User-Id header set by the auth gateway
    - Every service instance is bound to the request's AsyncSession
    - Routes acting on /users/{user_id}/... require user_id == acting user

Design Decisions:
    - get_clock is a dependency so tests override "now" in one place
    - track_activity wraps the acting user dependency: last_active is stamped
      after the route body succeeds
"""

from typing import AsyncGenerator

from fastapi import Depends, Header, Response
from sqlalchemy.ext.asyncio import AsyncSession

from dating_api.config import Settings, get_settings
from dating_api.core.clock import Clock, SystemClock
from dating_api.core.domain_types import UserId
from dating_api.core.errors import ErrorContext, ForbiddenError
from dating_api.core.pagination import PageMeta
from dating_api.infrastructure.database import get_db
from dating_api.repositories.likes import SqlLikeRepository
from dating_api.repositories.messages import SqlMessageRepository
from dating_api.repositories.photos import SqlPhotoRepository
from dating_api.repositories.unit_of_work import SqlUnitOfWork
from dating_api.repositories.users import SqlUserRepository
from dating_api.services.discovery_service import DiscoveryService
from dating_api.services.like_service import LikeService
from dating_api.services.mailbox_service import MailboxService
from dating_api.services.photo_service import PhotoService
from dating_api.services.user_service import UserService

_system_clock = SystemClock()


def get_clock() -> Clock:
    return _system_clock


async def get_current_user_id(
    x_user_id: int = Header(alias="X-User-Id"),
) -> UserId:
    return UserId(x_user_id)


async def track_activity(
    acting_user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[UserId, None]:
    """Yield the acting user id, then stamp their last_active."""
    yield acting_user_id
    if not settings.track_last_active:
        return
    service = UserService(SqlUserRepository(db), SqlUnitOfWork(db), clock)
    await service.record_activity(acting_user_id)


def require_self(user_id: int, acting_user_id: UserId) -> None:
    if user_id != acting_user_id:
        raise ForbiddenError(
            "Cannot act on behalf of another user",
            ErrorContext(user_id=acting_user_id, resource_id=user_id),
        )


def add_pagination_header(response: Response, meta: PageMeta) -> None:
    response.headers["Pagination"] = meta.to_header()
    response.headers["Access-Control-Expose-Headers"] = "Pagination"


def get_discovery_service(
    db: AsyncSession = Depends(get_db), clock: Clock = Depends(get_clock),
) -> DiscoveryService:
    return DiscoveryService(SqlUserRepository(db), clock)


def get_like_service(db: AsyncSession = Depends(get_db)) -> LikeService:
    return LikeService(
        SqlUserRepository(db), SqlLikeRepository(db), SqlUnitOfWork(db),
    )


def get_mailbox_service(
    db: AsyncSession = Depends(get_db), clock: Clock = Depends(get_clock),
) -> MailboxService:
    return MailboxService(
        SqlUserRepository(db), SqlMessageRepository(db), SqlUnitOfWork(db), clock,
    )


def get_photo_service(
    db: AsyncSession = Depends(get_db), clock: Clock = Depends(get_clock),
) -> PhotoService:
    return PhotoService(
        SqlUserRepository(db), SqlPhotoRepository(db), SqlUnitOfWork(db), clock,
    )


def get_user_service(
    db: AsyncSession = Depends(get_db), clock: Clock = Depends(get_clock),
) -> UserService:
    return UserService(SqlUserRepository(db), SqlUnitOfWork(db), clock)
