"""Message Routes — mailbox containers, threads, sending, reading and deleting.

Invariants:
    - Every route acts for /users/{user_id} and requires user_id == acting user
    - Deletion is a POST (soft delete for the acting party), not a DELETE
    - Paged responses carry metadata in the body and in the Pagination header
"""

from fastapi import APIRouter, Depends, Query, Response, status

from dating_api.api.dependencies import (
    add_pagination_header, get_mailbox_service, require_self, track_activity,
)
from dating_api.core.domain_types import MessageId, UserId
from dating_api.core.mailbox import MessageContainer
from dating_api.core.pagination import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from dating_api.schemas.message import MessageCreate, MessageResponse
from dating_api.schemas.pagination import PagedResponse, PaginationResponse
from dating_api.services.mailbox_service import MailboxService

router = APIRouter(prefix="/api/v1/users/{user_id}/messages", tags=["messages"])


@router.get("", response_model=PagedResponse[MessageResponse])
async def list_messages(
    user_id: int,
    response: Response,
    message_container: str | None = Query(None, alias="messageContainer"),
    page_number: int = Query(DEFAULT_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize"),
    acting_user_id: UserId = Depends(track_activity),
    service: MailboxService = Depends(get_mailbox_service),
):
    """Page through the acting user's inbox, outbox or unread messages."""
    require_self(user_id, acting_user_id)
    page = await service.page_messages(
        acting_user_id,
        MessageContainer.from_param(message_container),
        page_number=page_number,
        page_size=page_size,
    )
    add_pagination_header(response, page.meta)
    return PagedResponse[MessageResponse](
        items=[MessageResponse.model_validate(m) for m in page.items],
        pagination=PaginationResponse.from_meta(page.meta),
    )


@router.get("/thread/{recipient_id}", response_model=list[MessageResponse])
async def get_thread(
    user_id: int,
    recipient_id: int,
    acting_user_id: UserId = Depends(track_activity),
    service: MailboxService = Depends(get_mailbox_service),
):
    """Conversation between the acting user and recipient_id, newest first."""
    require_self(user_id, acting_user_id)
    messages = await service.get_thread(acting_user_id, UserId(recipient_id))
    return [MessageResponse.model_validate(m) for m in messages]


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    user_id: int,
    message_id: int,
    acting_user_id: UserId = Depends(track_activity),
    service: MailboxService = Depends(get_mailbox_service),
):
    require_self(user_id, acting_user_id)
    message = await service.get_message(MessageId(message_id), acting_user_id)
    return MessageResponse.model_validate(message)


@router.post(
    "", response_model=MessageResponse, status_code=status.HTTP_201_CREATED,
)
async def send_message(
    user_id: int,
    body: MessageCreate,
    acting_user_id: UserId = Depends(track_activity),
    service: MailboxService = Depends(get_mailbox_service),
):
    """Send a message from the acting user."""
    require_self(user_id, acting_user_id)
    message = await service.send_message(
        acting_user_id, UserId(body.recipient_id), body.content,
    )
    return MessageResponse.model_validate(message)


@router.post("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(
    user_id: int,
    message_id: int,
    acting_user_id: UserId = Depends(track_activity),
    service: MailboxService = Depends(get_mailbox_service),
):
    """Hide a message from the acting user's views."""
    require_self(user_id, acting_user_id)
    await service.delete_message(MessageId(message_id), acting_user_id)


@router.post("/{message_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_message_read(
    user_id: int,
    message_id: int,
    acting_user_id: UserId = Depends(track_activity),
    service: MailboxService = Depends(get_mailbox_service),
):
    require_self(user_id, acting_user_id)
    await service.mark_read(MessageId(message_id), acting_user_id)
