"""Initial schema — users, photos, likes, messages.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("known_as", sa.String(50), nullable=True),
        sa.Column("gender", sa.String(10), nullable=False),
        sa.Column("date_of_birth", sa.Date, nullable=False),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("country", sa.String(100), nullable=True),
        sa.Column("introduction", sa.Text, nullable=True),
        sa.Column("looking_for", sa.Text, nullable=True),
        sa.Column("interests", sa.Text, nullable=True),
        sa.Column("created", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("last_active", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )
    op.create_index("ix_users_gender", "users", ["gender"])
    op.create_index("ix_users_created", "users", ["created"])
    op.create_index("ix_users_last_active", "users", ["last_active"])

    op.create_table(
        "photos",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("url", sa.String(500), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("date_added", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("is_main", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("public_id", sa.String(200), nullable=True),
    )
    op.create_index("ix_photos_user_id", "photos", ["user_id"])
    op.create_index(
        "uq_photos_user_id_main", "photos", ["user_id"], unique=True,
        postgresql_where=sa.text("is_main"), sqlite_where=sa.text("is_main"),
    )

    op.create_table(
        "likes",
        sa.Column("liker_id", sa.Integer, sa.ForeignKey("users.id", ondelete="RESTRICT"), primary_key=True),
        sa.Column("likee_id", sa.Integer, sa.ForeignKey("users.id", ondelete="RESTRICT"), primary_key=True),
    )
    op.create_index("ix_likes_likee_id", "likes", ["likee_id"])

    op.create_table(
        "messages",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("sender_id", sa.Integer, sa.ForeignKey("users.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("recipient_id", sa.Integer, sa.ForeignKey("users.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("is_read", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("read_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("sender_deleted", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("recipient_deleted", sa.Boolean, nullable=False, server_default="false"),
    )
    op.create_index("ix_messages_sender_id", "messages", ["sender_id"])
    op.create_index("ix_messages_recipient_id", "messages", ["recipient_id"])
    op.create_index("ix_messages_sent_at", "messages", ["sent_at"])


def downgrade() -> None:
    op.drop_table("messages")
    op.drop_table("likes")
    op.drop_table("photos")
    op.drop_table("users")
