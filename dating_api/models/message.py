"""Message ORM — direct message with per-party soft deletion and read state.

Invariants:
    - Created unread (is_read=False, read_at=None)
    - sender_deleted / recipient_deleted set independently, never cleared
    - Row is physically removed once both deletion flags are true

Design Decisions:
    - Transitions live in core/mailbox.py; this model only holds state
"""

from datetime import datetime, timezone

from sqlalchemy import Text, Boolean, DateTime, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from dating_api.db.base import Base


class Message(Base):
    """Direct message between two users."""
    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sender_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    recipient_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    sent_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    read_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    sender_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    recipient_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
