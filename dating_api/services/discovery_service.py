"""Discovery Service — resolves discovery defaults and runs the paged user query.

Invariants:
    - The requester must exist (their gender drives the default target gender)
    - "today" for age derivation is read once per query from the Clock

Design Decisions:
    - Default resolution is pure (core/discovery.py); this class only does the IO around it
"""

import logging

from dating_api.core.clock import Clock
from dating_api.core.discovery import (
    DiscoveryParams, UserSortOrder, resolve_target_gender,
)
from dating_api.core.domain_types import Gender, UserId
from dating_api.core.errors import ResourceNotFoundError
from dating_api.core.pagination import (
    DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, PageRequest, PagedResult,
)
from dating_api.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)


class DiscoveryService:
    """User discovery for a requesting user."""

    def __init__(self, users: UserRepository, clock: Clock):
        self.users = users
        self.clock = clock

    async def page_users(
        self,
        requester_id: UserId,
        gender: Gender | None = None,
        min_age: int | None = None,
        max_age: int | None = None,
        order_by: str | None = None,
        likers: bool = False,
        likees: bool = False,
        page_number: int = DEFAULT_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PagedResult:
        requester = await self.users.get(requester_id)
        if requester is None:
            raise ResourceNotFoundError("User", requester_id)

        params = DiscoveryParams(
            user_id=requester_id,
            gender=resolve_target_gender(gender, Gender(requester.gender)),
            min_age=min_age,
            max_age=max_age,
            order_by=UserSortOrder.from_param(order_by),
            likers=likers,
            likees=likees,
            page=PageRequest(page_number, page_size),
        )
        page = await self.users.page_discovery(params, self.clock.today())
        logger.debug(
            f"Discovery page {page.current_page}/{page.total_pages}",
            extra={"user_id": requester_id, "total_count": page.total_count},
        )
        return page
