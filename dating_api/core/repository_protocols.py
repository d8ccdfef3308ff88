"""Boundary Protocols — contracts between core/services and the storage shell.

Invariants:
    - Core NEVER imports from the shell — dependency arrows point inward only
    - One protocol per entity kind; no generic "add any entity" method
    - Repositories stage changes; only UnitOfWork.save_all() commits
    - save_all() returns False when there was nothing to commit

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, the pure rules in core/ stay sync
"""

from datetime import date, datetime
from typing import Protocol

from dating_api.core.discovery import DiscoveryParams
from dating_api.core.mailbox import MessageContainer, MessageLike
from dating_api.core.pagination import PageRequest, PagedResult


class UserLike(Protocol):
    """Structural contract for user rows."""
    id: int
    gender: str
    date_of_birth: date
    created: datetime
    last_active: datetime


class PhotoLike(Protocol):
    """Structural contract for photo rows."""
    id: int
    user_id: int
    is_main: bool
    public_id: str | None


class LikeEdge(Protocol):
    """Structural contract for like edges."""
    liker_id: int
    likee_id: int


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def get(self, user_id: int) -> UserLike | None: ...
    async def add(self, user: UserLike) -> None: ...
    async def page_discovery(
        self, params: DiscoveryParams, today: date,
    ) -> PagedResult: ...


class LikeRepository(Protocol):
    """Contract for the directed like graph."""
    async def find_edge(self, liker_id: int, likee_id: int) -> LikeEdge | None: ...
    async def likers_of(self, user_id: int) -> list[LikeEdge]: ...
    async def likees_of(self, user_id: int) -> list[LikeEdge]: ...
    async def add(self, liker_id: int, likee_id: int) -> LikeEdge: ...


class MessageRepository(Protocol):
    """Contract for message persistence and mailbox views."""
    async def get(self, message_id: int) -> MessageLike | None: ...
    async def add(
        self, sender_id: int, recipient_id: int, content: str, sent_at: datetime,
    ) -> MessageLike: ...
    async def remove(self, message: MessageLike) -> None: ...
    async def page_for_user(
        self, user_id: int, container: MessageContainer, page: PageRequest,
    ) -> PagedResult: ...
    async def thread(self, user_id: int, other_id: int) -> list[MessageLike]: ...


class PhotoRepository(Protocol):
    """Contract for photo persistence."""
    async def get(self, photo_id: int) -> PhotoLike | None: ...
    async def get_main_for_user(self, user_id: int) -> PhotoLike | None: ...
    async def list_for_user(self, user_id: int) -> list[PhotoLike]: ...
    async def add(
        self, user_id: int, url: str, description: str | None,
        public_id: str | None, is_main: bool, date_added: datetime,
    ) -> PhotoLike: ...
    async def demote(self, photo: PhotoLike) -> None: ...
    async def remove(self, photo: PhotoLike) -> None: ...


class UnitOfWork(Protocol):
    """Atomic commit of everything staged by the repositories."""
    async def save_all(self) -> bool: ...
