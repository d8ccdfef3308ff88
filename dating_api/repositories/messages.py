"""Message Repository — message rows, mailbox containers and two-party threads.

Invariants:
    - Container filters match core/mailbox.in_container exactly
    - Thread filter matches core/mailbox.is_visible_in_thread exactly
    - All listings are most-recent-first (sent_at desc, id desc)
"""

from datetime import datetime

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from dating_api.core.mailbox import MessageContainer
from dating_api.core.pagination import PageRequest, PagedResult
from dating_api.models.message import Message
from dating_api.repositories.paging import paginate


def _inbox(user_id: int):
    return and_(
        Message.recipient_id == user_id,
        Message.is_read.is_(True),
        Message.recipient_deleted.is_(False),
    )


def _outbox(user_id: int):
    return and_(
        Message.sender_id == user_id,
        Message.sender_deleted.is_(False),
    )


def _unread(user_id: int):
    return and_(
        Message.recipient_id == user_id,
        Message.is_read.is_(False),
        Message.recipient_deleted.is_(False),
    )


_CONTAINER_FILTERS = {
    MessageContainer.INBOX: _inbox,
    MessageContainer.OUTBOX: _outbox,
    MessageContainer.UNREAD: _unread,
}

_NEWEST_FIRST = (Message.sent_at.desc(), Message.id.desc())


class SqlMessageRepository:
    """MessageRepository over SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, message_id: int) -> Message | None:
        result = await self.db.execute(
            select(Message).where(Message.id == message_id),
        )
        return result.scalar_one_or_none()

    async def add(
        self, sender_id: int, recipient_id: int, content: str, sent_at: datetime,
    ) -> Message:
        message = Message(
            sender_id=sender_id,
            recipient_id=recipient_id,
            content=content,
            sent_at=sent_at,
            is_read=False,
            sender_deleted=False,
            recipient_deleted=False,
        )
        self.db.add(message)
        return message

    async def remove(self, message: Message) -> None:
        await self.db.delete(message)

    async def page_for_user(
        self, user_id: int, container: MessageContainer, page: PageRequest,
    ) -> PagedResult[Message]:
        stmt = (
            select(Message)
            .where(_CONTAINER_FILTERS[container](user_id))
            .order_by(*_NEWEST_FIRST)
        )
        return await paginate(self.db, stmt, page)

    async def thread(self, user_id: int, other_id: int) -> list[Message]:
        stmt = (
            select(Message)
            .where(or_(
                and_(
                    Message.sender_id == user_id,
                    Message.recipient_id == other_id,
                    Message.sender_deleted.is_(False),
                ),
                and_(
                    Message.sender_id == other_id,
                    Message.recipient_id == user_id,
                    Message.recipient_deleted.is_(False),
                ),
            ))
            .order_by(*_NEWEST_FIRST)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
