"""User Routes — discovery listing, profiles and likes.

Invariants:
    - Discovery is always relative to the acting user (X-User-Id)
    - Paged responses carry metadata in the body and in the Pagination header
    - Only the acting user can like on their own behalf or update their profile
"""

from fastapi import APIRouter, Depends, Query, Response, status

from dating_api.api.dependencies import (
    add_pagination_header, get_clock, get_discovery_service, get_like_service,
    get_user_service, require_self, track_activity,
)
from dating_api.core.clock import Clock
from dating_api.core.domain_types import Gender, UserId
from dating_api.core.pagination import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from dating_api.schemas.pagination import PagedResponse, PaginationResponse
from dating_api.schemas.user import UserForDetail, UserForList, UserUpdate
from dating_api.services.discovery_service import DiscoveryService
from dating_api.services.like_service import LikeService
from dating_api.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=PagedResponse[UserForList])
async def list_users(
    response: Response,
    gender: Gender | None = Query(None),
    min_age: int | None = Query(None, ge=0, le=150, alias="minAge"),
    max_age: int | None = Query(None, ge=0, le=150, alias="maxAge"),
    order_by: str | None = Query(None, alias="orderBy"),
    likers: bool = Query(False),
    likees: bool = Query(False),
    page_number: int = Query(DEFAULT_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize"),
    acting_user_id: UserId = Depends(track_activity),
    service: DiscoveryService = Depends(get_discovery_service),
    clock: Clock = Depends(get_clock),
):
    """Discover users for the acting user."""
    page = await service.page_users(
        acting_user_id,
        gender=gender,
        min_age=min_age,
        max_age=max_age,
        order_by=order_by,
        likers=likers,
        likees=likees,
        page_number=page_number,
        page_size=page_size,
    )
    add_pagination_header(response, page.meta)
    today = clock.today()
    return PagedResponse[UserForList](
        items=[UserForList.from_user(u, today) for u in page.items],
        pagination=PaginationResponse.from_meta(page.meta),
    )


@router.get("/{user_id}", response_model=UserForDetail)
async def get_user(
    user_id: int,
    acting_user_id: UserId = Depends(track_activity),
    service: UserService = Depends(get_user_service),
    clock: Clock = Depends(get_clock),
):
    """Get a user's full profile."""
    user = await service.get_user(UserId(user_id))
    return UserForDetail.from_user(user, clock.today())


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: int,
    body: UserUpdate,
    acting_user_id: UserId = Depends(track_activity),
    service: UserService = Depends(get_user_service),
):
    """Update the acting user's own profile."""
    await service.update_profile(
        UserId(user_id), acting_user_id, body.model_dump(exclude_unset=True),
    )


@router.post("/{user_id}/like/{recipient_id}")
async def like_user(
    user_id: int,
    recipient_id: int,
    acting_user_id: UserId = Depends(track_activity),
    service: LikeService = Depends(get_like_service),
):
    """Like another user."""
    require_self(user_id, acting_user_id)
    await service.create_like(acting_user_id, UserId(recipient_id))
    return {}
