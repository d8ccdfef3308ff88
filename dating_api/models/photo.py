"""Photo ORM — image records owned by a user.

Invariants:
    - Belongs to exactly one user (user_id, cascade on user delete)
    - public_id is the media-host identifier; null for externally hosted urls
    - At most one row per user has is_main (partial unique index uq_photos_user_id_main)

Design Decisions:
    - Upload to the media host happens outside this service; only the resulting url is stored
"""

from datetime import datetime, timezone

from sqlalchemy import String, Boolean, DateTime, Integer, ForeignKey, Index, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dating_api.db.base import Base


class Photo(Base):
    """Photo registered for a user profile."""
    __tablename__ = "photos"
    __table_args__ = (
        Index(
            "uq_photos_user_id_main", "user_id", unique=True,
            postgresql_where=text("is_main"), sqlite_where=text("is_main"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    url: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    date_added: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    is_main: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    public_id: Mapped[str | None] = mapped_column(String(200), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="photos")
