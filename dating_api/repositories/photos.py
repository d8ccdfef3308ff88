"""Photo Repository — photo rows and main-photo lookup."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dating_api.models.photo import Photo


class SqlPhotoRepository:
    """PhotoRepository over SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, photo_id: int) -> Photo | None:
        result = await self.db.execute(select(Photo).where(Photo.id == photo_id))
        return result.scalar_one_or_none()

    async def get_main_for_user(self, user_id: int) -> Photo | None:
        result = await self.db.execute(
            select(Photo)
            .where(Photo.user_id == user_id)
            .where(Photo.is_main.is_(True))
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: int) -> list[Photo]:
        result = await self.db.execute(
            select(Photo).where(Photo.user_id == user_id).order_by(Photo.id),
        )
        return list(result.scalars().all())

    async def add(
        self, user_id: int, url: str, description: str | None,
        public_id: str | None, is_main: bool, date_added: datetime,
    ) -> Photo:
        photo = Photo(
            user_id=user_id,
            url=url,
            description=description,
            public_id=public_id,
            is_main=is_main,
            date_added=date_added,
        )
        self.db.add(photo)
        return photo

    async def demote(self, photo: Photo) -> None:
        """Clear is_main and flush, so a later promotion never overlaps it."""
        photo.is_main = False
        await self.db.flush()

    async def remove(self, photo: Photo) -> None:
        await self.db.delete(photo)
