"""Photo Schemas — photo registration and responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PhotoCreate(BaseModel):
    """Photo already uploaded to the media host."""
    url: str = Field(min_length=1, max_length=500)
    description: str | None = Field(None, max_length=500)
    public_id: str | None = Field(None, max_length=200)


class PhotoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    url: str
    description: str | None
    date_added: datetime
    is_main: bool
    public_id: str | None
