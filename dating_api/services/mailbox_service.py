"""Mailbox Service — sending, listing, reading and soft-deleting messages.

Invariants:
    - mark_read: recipient only (ForbiddenError otherwise), read_at from the Clock
    - delete_message: sets the acting party's flag; removes the row once both
      flags are set, in the same commit
    - Listings are read-only and re-query storage every call

Design Decisions:
    - mark_read tolerates a no-op save (a repeated read changes nothing);
      delete_message does not — a repeated delete by the same party is a
      save failure, matching how the flag change is confirmed
"""

import logging

from dating_api.core.clock import Clock
from dating_api.core.domain_types import MessageId, UserId
from dating_api.core.errors import (
    ErrorContext, ForbiddenError, PersistenceError,
    ResourceNotFoundError, UnknownRecipientError,
)
from dating_api.core.mailbox import (
    MessageContainer, MessageLike, apply_delete, apply_read, is_participant,
)
from dating_api.core.pagination import (
    DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, PageRequest, PagedResult,
)
from dating_api.core.repository_protocols import (
    MessageRepository, UnitOfWork, UserRepository,
)

logger = logging.getLogger(__name__)


class MailboxService:
    """Direct-messaging operations for one acting user at a time."""

    def __init__(
        self,
        users: UserRepository,
        messages: MessageRepository,
        uow: UnitOfWork,
        clock: Clock,
    ):
        self.users = users
        self.messages = messages
        self.uow = uow
        self.clock = clock

    async def _get_or_404(self, message_id: MessageId) -> MessageLike:
        message = await self.messages.get(message_id)
        if message is None:
            raise ResourceNotFoundError("Message", message_id)
        return message

    async def send_message(
        self, sender_id: UserId, recipient_id: UserId, content: str,
    ) -> MessageLike:
        if await self.users.get(recipient_id) is None:
            raise UnknownRecipientError(recipient_id, ErrorContext(user_id=sender_id))
        message = await self.messages.add(
            sender_id, recipient_id, content, self.clock.now(),
        )
        if not await self.uow.save_all():
            raise PersistenceError("no rows changed", "message")
        logger.info(
            "Message sent",
            extra={"user_id": sender_id, "target_user_id": recipient_id,
                   "message_id": message.id},
        )
        return message

    async def get_message(
        self, message_id: MessageId, acting_user_id: UserId,
    ) -> MessageLike:
        message = await self._get_or_404(message_id)
        if not is_participant(message, acting_user_id):
            raise ForbiddenError(
                "Message belongs to other users",
                ErrorContext(user_id=acting_user_id, resource_id=message_id),
            )
        return message

    async def page_messages(
        self,
        user_id: UserId,
        container: MessageContainer = MessageContainer.UNREAD,
        page_number: int = DEFAULT_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PagedResult:
        return await self.messages.page_for_user(
            user_id, container, PageRequest(page_number, page_size),
        )

    async def get_thread(
        self, user_id: UserId, other_id: UserId,
    ) -> list[MessageLike]:
        return await self.messages.thread(user_id, other_id)

    async def mark_read(
        self, message_id: MessageId, acting_user_id: UserId,
    ) -> MessageLike:
        message = await self._get_or_404(message_id)
        apply_read(message, acting_user_id, self.clock.now())
        await self.uow.save_all()
        logger.info(
            "Message marked read",
            extra={"user_id": acting_user_id, "message_id": message_id},
        )
        return message

    async def delete_message(
        self, message_id: MessageId, acting_user_id: UserId,
    ) -> bool:
        """Soft-delete for the acting party. Returns True if the row was removed."""
        message = await self._get_or_404(message_id)
        removable = apply_delete(message, acting_user_id)
        if removable:
            await self.messages.remove(message)
        if not await self.uow.save_all():
            raise PersistenceError("no rows changed", "message deletion")
        logger.info(
            "Message removed" if removable else "Message soft-deleted",
            extra={"user_id": acting_user_id, "message_id": message_id},
        )
        return removable
