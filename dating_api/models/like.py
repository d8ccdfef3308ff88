"""Like ORM — directed edge "liker expressed interest in likee".

Invariants:
    - Composite primary key (liker_id, likee_id): one edge per ordered pair
    - Mutual like is two independent edges
    - Self-loops are not rejected at this layer

Design Decisions:
    - RESTRICT on user delete: removing a user must clean up likes explicitly
    - likee_id indexed separately: likers_of() filters on it
"""

from sqlalchemy import Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from dating_api.db.base import Base


class Like(Base):
    """Directed like edge between two users."""
    __tablename__ = "likes"

    liker_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"), primary_key=True,
    )
    likee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"),
        primary_key=True, index=True,
    )
