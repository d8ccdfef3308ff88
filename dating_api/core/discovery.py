"""Discovery Rules — pure decisions behind the user-discovery pipeline.

Invariants:
    - Target gender defaults to the opposite of the requester's own gender
    - Age filter applies whenever min_age or max_age is supplied; a missing
      bound takes its default (18 / 99)
    - Sort order is a closed enumeration; unknown/absent values fall back to LAST_ACTIVE
    - Every sort is descending

Design Decisions:
    - Explicit mapping dict for order_by (ADR: no free-form string dispatch)
    - DiscoveryParams is a frozen dataclass: the pipeline input is a value, not a request object
    - Absent bounds are None rather than 18/99 so an explicit 18..99 query
      still excludes a 17- or 100-year-old
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from dating_api.core.age import birth_date_range
from dating_api.core.domain_types import Gender, UserId
from dating_api.core.pagination import PageRequest

DEFAULT_MIN_AGE = 18
DEFAULT_MAX_AGE = 99


class UserSortOrder(str, Enum):
    """Discovery sort strategies (always newest first)."""
    CREATED = "created"
    LAST_ACTIVE = "lastActive"

    @classmethod
    def from_param(cls, value: str | None) -> "UserSortOrder":
        return _SORT_ORDER_PARAMS.get(value or "", cls.LAST_ACTIVE)


_SORT_ORDER_PARAMS: dict[str, UserSortOrder] = {
    "created": UserSortOrder.CREATED,
    "lastActive": UserSortOrder.LAST_ACTIVE,
}


@dataclass(frozen=True)
class DiscoveryParams:
    """Inputs of a discovery query, after defaults are resolved."""
    user_id: UserId
    gender: Gender
    min_age: int | None = None
    max_age: int | None = None
    order_by: UserSortOrder = UserSortOrder.LAST_ACTIVE
    likers: bool = False
    likees: bool = False
    page: PageRequest = field(default_factory=PageRequest)


def resolve_target_gender(
    requested: Gender | None, requester_gender: Gender,
) -> Gender:
    """Explicit gender wins; otherwise the requester's opposite."""
    return requested if requested is not None else requester_gender.opposite


def age_filter_requested(min_age: int | None, max_age: int | None) -> bool:
    return min_age is not None or max_age is not None


def age_bounds(params: DiscoveryParams, today: date) -> tuple[date, date] | None:
    """Birth-date bounds for the age filter, or None when it does not apply."""
    if not age_filter_requested(params.min_age, params.max_age):
        return None
    min_age = DEFAULT_MIN_AGE if params.min_age is None else params.min_age
    max_age = DEFAULT_MAX_AGE if params.max_age is None else params.max_age
    return birth_date_range(min_age, max_age, today)
