"""User ORM — profile, activity timestamps and owned photos.

Invariants:
    - id is an integer primary key
    - gender is "male" or "female" (Gender enum values)
    - age is never stored; it is derived from date_of_birth at query time
    - at most one photo per user has is_main = true (enforced by PhotoService)

Design Decisions:
    - photos loaded with selectin: list responses need the main photo url without N+1
    - created/last_active indexed: they are the two discovery sort keys
"""

from datetime import date, datetime, timezone

from sqlalchemy import String, Text, Date, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dating_api.db.base import Base


class User(Base):
    """Registered member of the dating service."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    known_as: Mapped[str | None] = mapped_column(String(50), nullable=True)
    gender: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    introduction: Mapped[str | None] = mapped_column(Text, nullable=True)
    looking_for: Mapped[str | None] = mapped_column(Text, nullable=True)
    interests: Mapped[str | None] = mapped_column(Text, nullable=True)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )
    last_active: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    photos: Mapped[list["Photo"]] = relationship(
        "Photo", back_populates="user",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Photo.id",
    )

    @property
    def main_photo_url(self) -> str | None:
        for photo in self.photos:
            if photo.is_main:
                return photo.url
        return None
