"""Photo Service — photo records with exactly one main photo per user.

Invariants:
    - The first photo a user adds becomes the main photo
    - set_main_photo demotes the current main photo in the same commit, flushed
      before the promotion so the one-main-per-user index never sees two
    - Concurrent first uploads that both claim main fail the commit with PersistenceError
    - The main photo cannot be deleted
    - Only the owner can add, promote or delete photos

Design Decisions:
    - Binary upload to the media host happens upstream; this service registers
      the resulting url and public_id
"""

import logging

from dating_api.core.clock import Clock
from dating_api.core.domain_types import PhotoId, UserId
from dating_api.core.errors import (
    BusinessRuleError, ErrorContext, ForbiddenError,
    PersistenceError, ResourceNotFoundError,
)
from dating_api.core.repository_protocols import (
    PhotoLike, PhotoRepository, UnitOfWork, UserRepository,
)

logger = logging.getLogger(__name__)


def _require_owner(owner_id: UserId, acting_user_id: UserId) -> None:
    if owner_id != acting_user_id:
        raise ForbiddenError(
            "Photos can only be changed by their owner",
            ErrorContext(user_id=acting_user_id, resource_id=owner_id),
        )


class PhotoService:
    """Photo management for a user's profile."""

    def __init__(
        self,
        users: UserRepository,
        photos: PhotoRepository,
        uow: UnitOfWork,
        clock: Clock,
    ):
        self.users = users
        self.photos = photos
        self.uow = uow
        self.clock = clock

    async def get_photo(self, photo_id: PhotoId) -> PhotoLike:
        photo = await self.photos.get(photo_id)
        if photo is None:
            raise ResourceNotFoundError("Photo", photo_id)
        return photo

    async def get_user_photo(self, owner_id: UserId, photo_id: PhotoId) -> PhotoLike:
        """A photo seen through its owner; photos of other users do not exist here."""
        photo = await self.photos.get(photo_id)
        if photo is None or photo.user_id != owner_id:
            raise ResourceNotFoundError("Photo", photo_id)
        return photo

    async def _get_owned(
        self, owner_id: UserId, acting_user_id: UserId, photo_id: PhotoId,
    ) -> PhotoLike:
        _require_owner(owner_id, acting_user_id)
        photo = await self.get_photo(photo_id)
        if photo.user_id != owner_id:
            raise ForbiddenError(
                "Photo belongs to another user",
                ErrorContext(user_id=acting_user_id, resource_id=photo_id),
            )
        return photo

    async def list_photos(self, owner_id: UserId) -> list[PhotoLike]:
        if await self.users.get(owner_id) is None:
            raise ResourceNotFoundError("User", owner_id)
        return await self.photos.list_for_user(owner_id)

    async def add_photo(
        self,
        owner_id: UserId,
        acting_user_id: UserId,
        url: str,
        description: str | None = None,
        public_id: str | None = None,
    ) -> PhotoLike:
        if await self.users.get(owner_id) is None:
            raise ResourceNotFoundError("User", owner_id)
        _require_owner(owner_id, acting_user_id)

        has_main = await self.photos.get_main_for_user(owner_id) is not None
        photo = await self.photos.add(
            owner_id, url, description, public_id,
            is_main=not has_main, date_added=self.clock.now(),
        )
        if not await self.uow.save_all():
            raise PersistenceError("no rows changed", "photo")
        logger.info(
            "Photo added",
            extra={"user_id": owner_id, "photo_id": photo.id},
        )
        return photo

    async def set_main_photo(
        self, owner_id: UserId, acting_user_id: UserId, photo_id: PhotoId,
    ) -> PhotoLike:
        photo = await self._get_owned(owner_id, acting_user_id, photo_id)
        if photo.is_main:
            raise BusinessRuleError(
                "This is already the main photo", "PHOTO_ALREADY_MAIN",
                ErrorContext(user_id=acting_user_id, resource_id=photo_id),
            )
        current_main = await self.photos.get_main_for_user(owner_id)
        if current_main is not None:
            await self.photos.demote(current_main)
        photo.is_main = True
        if not await self.uow.save_all():
            raise PersistenceError("no rows changed", "main photo")
        logger.info(
            "Main photo changed",
            extra={"user_id": owner_id, "photo_id": photo_id},
        )
        return photo

    async def delete_photo(
        self, owner_id: UserId, acting_user_id: UserId, photo_id: PhotoId,
    ) -> None:
        photo = await self._get_owned(owner_id, acting_user_id, photo_id)
        if photo.is_main:
            raise BusinessRuleError(
                "You cannot delete the main photo", "MAIN_PHOTO_DELETE",
                ErrorContext(user_id=acting_user_id, resource_id=photo_id),
            )
        await self.photos.remove(photo)
        if not await self.uow.save_all():
            raise PersistenceError("no rows changed", "photo deletion")
        logger.info(
            "Photo deleted",
            extra={"user_id": owner_id, "photo_id": photo_id},
        )
