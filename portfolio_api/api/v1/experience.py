"""Work experience endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.api.deps import require_admin
from portfolio_api.models.content import Experience
from portfolio_api.schemas.auth import TokenPayload
from portfolio_api.schemas.common import Envelope
from portfolio_api.schemas.experience import ExperienceCreate, ExperienceUpdate
from portfolio_api.services.stores import experiences

router = APIRouter()


@router.get(
    "",
    response_model=Envelope[list[Experience]],
    response_model_exclude_none=True,
    summary="List work experience",
)
async def list_experience() -> Envelope:
    """List positions, most recent start date first."""
    items = await experiences.find_many(sort=[("startDate", -1)])
    return Envelope(data=items)


@router.post(
    "",
    response_model=Envelope[Experience],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Add a position",
)
async def create_experience(
    experience_data: ExperienceCreate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    experience = await experiences.insert(Experience(**experience_data.model_dump()))
    return Envelope(data=experience, message="Experience created successfully")


@router.get(
    "/{experience_id}",
    response_model=Envelope[Experience],
    response_model_exclude_none=True,
    summary="Get a position",
)
async def get_experience(experience_id: str) -> Envelope:
    return Envelope(data=await experiences.get(experience_id))


@router.put(
    "/{experience_id}",
    response_model=Envelope[Experience],
    response_model_exclude_none=True,
    summary="Update a position",
)
async def update_experience(
    experience_id: str,
    experience_data: ExperienceUpdate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    experiences.object_id(experience_id)
    to_set, to_unset = experiences.split_changes(experience_data)
    if not to_set and not to_unset:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update",
        )

    experience = await experiences.update(experience_id, to_set, to_unset)
    return Envelope(data=experience, message="Experience updated successfully")


@router.delete(
    "/{experience_id}",
    response_model=Envelope,
    response_model_exclude_none=True,
    summary="Delete a position",
)
async def delete_experience(
    experience_id: str,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    await experiences.delete(experience_id)
    return Envelope(message="Experience deleted successfully")
