"""User Schemas — list/detail projections and profile updates.

Invariants:
    - age is derived from date_of_birth against the request Clock, never stored
    - UserUpdate carries only profile fields; identity, gender and dates are immutable here
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from dating_api.core.age import calculate_age
from dating_api.models.user import User
from dating_api.schemas.photo import PhotoResponse


class UserForList(BaseModel):
    """Discovery card."""
    id: int
    username: str
    known_as: str | None
    gender: str
    age: int
    city: str | None
    country: str | None
    created: datetime
    last_active: datetime
    photo_url: str | None

    @classmethod
    def from_user(cls, user: User, today: date) -> "UserForList":
        return cls(
            id=user.id,
            username=user.username,
            known_as=user.known_as,
            gender=user.gender,
            age=calculate_age(user.date_of_birth, today),
            city=user.city,
            country=user.country,
            created=user.created,
            last_active=user.last_active,
            photo_url=user.main_photo_url,
        )


class UserForDetail(UserForList):
    """Full profile with photos."""
    introduction: str | None
    looking_for: str | None
    interests: str | None
    photos: list[PhotoResponse]

    @classmethod
    def from_user(cls, user: User, today: date) -> "UserForDetail":
        card = UserForList.from_user(user, today)
        return cls(
            **card.model_dump(),
            introduction=user.introduction,
            looking_for=user.looking_for,
            interests=user.interests,
            photos=[PhotoResponse.model_validate(p) for p in user.photos],
        )


class UserUpdate(BaseModel):
    """Profile fields a user may change."""
    known_as: str | None = Field(None, max_length=50)
    city: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    introduction: str | None = Field(None, max_length=5000)
    looking_for: str | None = Field(None, max_length=5000)
    interests: str | None = Field(None, max_length=5000)
