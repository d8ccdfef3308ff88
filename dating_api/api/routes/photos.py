"""Photo Routes — list, register, promote to main and delete profile photos.

Invariants:
    - Mutations require user_id == acting user (enforced by PhotoService)
    - Binary upload is not handled here; clients post the media-host url
"""

from fastapi import APIRouter, Depends, status

from dating_api.api.dependencies import get_photo_service, track_activity
from dating_api.core.domain_types import PhotoId, UserId
from dating_api.schemas.photo import PhotoCreate, PhotoResponse
from dating_api.services.photo_service import PhotoService

router = APIRouter(prefix="/api/v1/users/{user_id}/photos", tags=["photos"])


@router.get("", response_model=list[PhotoResponse])
async def list_photos(
    user_id: int,
    acting_user_id: UserId = Depends(track_activity),
    service: PhotoService = Depends(get_photo_service),
):
    photos = await service.list_photos(UserId(user_id))
    return [PhotoResponse.model_validate(p) for p in photos]


@router.get("/{photo_id}", response_model=PhotoResponse)
async def get_photo(
    user_id: int,
    photo_id: int,
    acting_user_id: UserId = Depends(track_activity),
    service: PhotoService = Depends(get_photo_service),
):
    photo = await service.get_user_photo(UserId(user_id), PhotoId(photo_id))
    return PhotoResponse.model_validate(photo)


@router.post(
    "", response_model=PhotoResponse, status_code=status.HTTP_201_CREATED,
)
async def add_photo(
    user_id: int,
    body: PhotoCreate,
    acting_user_id: UserId = Depends(track_activity),
    service: PhotoService = Depends(get_photo_service),
):
    """Register a photo; the first one becomes the main photo."""
    photo = await service.add_photo(
        UserId(user_id), acting_user_id,
        body.url, body.description, body.public_id,
    )
    return PhotoResponse.model_validate(photo)


@router.post("/{photo_id}/setMain", status_code=status.HTTP_204_NO_CONTENT)
async def set_main_photo(
    user_id: int,
    photo_id: int,
    acting_user_id: UserId = Depends(track_activity),
    service: PhotoService = Depends(get_photo_service),
):
    await service.set_main_photo(UserId(user_id), acting_user_id, PhotoId(photo_id))


@router.delete("/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_photo(
    user_id: int,
    photo_id: int,
    acting_user_id: UserId = Depends(track_activity),
    service: PhotoService = Depends(get_photo_service),
):
    await service.delete_photo(UserId(user_id), acting_user_id, PhotoId(photo_id))
