"""Mailbox Rules — read/delete state machine and per-viewer visibility of messages.

Invariants:
    - Only the recipient can mark a message read (is_read=True, read_at=now)
    - Each party sets only its own deletion flag; flags are never cleared
    - A message is eligible for physical removal only when BOTH flags are set
    - Inbox:  recipient == U, is_read,     not recipient_deleted
    - Outbox: sender == U,                 not sender_deleted
    - Unread: recipient == U, not is_read, not recipient_deleted
    - Thread(U, V): (U -> V, not sender_deleted) or (V -> U, not recipient_deleted)

Design Decisions:
    - Transitions mutate the passed object in place and raise ForbiddenError on
      wrong actors; the shell decides when to commit
    - Predicates here mirror the SQL filters in repositories/messages.py
      so both can be checked against each other in tests
    - Thread deletion is asymmetric as observed: a party's deletion hides the
      message only from that party's own view
"""

from datetime import datetime
from enum import Enum
from typing import Protocol

from dating_api.core.errors import ErrorContext, ForbiddenError


class MessageContainer(str, Enum):
    """Named mailbox views relative to a viewing user."""
    INBOX = "inbox"
    OUTBOX = "outbox"
    UNREAD = "unread"

    @classmethod
    def from_param(cls, value: str | None) -> "MessageContainer":
        return _CONTAINER_PARAMS.get((value or "").lower(), cls.UNREAD)


_CONTAINER_PARAMS: dict[str, MessageContainer] = {
    "inbox": MessageContainer.INBOX,
    "outbox": MessageContainer.OUTBOX,
    "unread": MessageContainer.UNREAD,
}


class MessageLike(Protocol):
    """Structural contract for message rows (ORM model or test double)."""
    id: int
    sender_id: int
    recipient_id: int
    is_read: bool
    read_at: datetime | None
    sender_deleted: bool
    recipient_deleted: bool


def is_participant(message: MessageLike, user_id: int) -> bool:
    return user_id in (message.sender_id, message.recipient_id)


def apply_read(message: MessageLike, acting_user_id: int, now: datetime) -> None:
    """Recipient-only transition to read."""
    if message.recipient_id != acting_user_id:
        raise ForbiddenError(
            "Only the recipient can mark a message as read",
            ErrorContext(user_id=acting_user_id, resource_id=message.id),
        )
    message.is_read = True
    message.read_at = now


def apply_delete(message: MessageLike, acting_user_id: int) -> bool:
    """Set the acting party's deletion flag. Returns True when both flags are set."""
    if not is_participant(message, acting_user_id):
        raise ForbiddenError(
            "Only the sender or recipient can delete a message",
            ErrorContext(user_id=acting_user_id, resource_id=message.id),
        )
    if message.sender_id == acting_user_id:
        message.sender_deleted = True
    if message.recipient_id == acting_user_id:
        message.recipient_deleted = True
    return message.sender_deleted and message.recipient_deleted


def in_container(
    message: MessageLike, container: MessageContainer, user_id: int,
) -> bool:
    if container is MessageContainer.INBOX:
        return (
            message.recipient_id == user_id
            and message.is_read
            and not message.recipient_deleted
        )
    if container is MessageContainer.OUTBOX:
        return message.sender_id == user_id and not message.sender_deleted
    return (
        message.recipient_id == user_id
        and not message.is_read
        and not message.recipient_deleted
    )


def is_visible_in_thread(
    message: MessageLike, viewer_id: int, other_id: int,
) -> bool:
    """Whether `message` shows up in viewer's thread with other."""
    sent = (
        message.sender_id == viewer_id
        and message.recipient_id == other_id
        and not message.sender_deleted
    )
    received = (
        message.sender_id == other_id
        and message.recipient_id == viewer_id
        and not message.recipient_deleted
    )
    return sent or received
