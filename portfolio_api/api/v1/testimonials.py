"""Testimonial endpoints."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from portfolio_api.api.deps import get_optional_payload, require_admin
from portfolio_api.core.text import regex_search
from portfolio_api.models.content import Testimonial
from portfolio_api.schemas.auth import TokenPayload
from portfolio_api.schemas.common import Envelope
from portfolio_api.schemas.testimonial import TestimonialCreate, TestimonialUpdate
from portfolio_api.services.documents import all_of, visibility_query
from portfolio_api.services.stores import testimonials

router = APIRouter()


@router.get(
    "",
    response_model=Envelope[list[Testimonial]],
    response_model_exclude_none=True,
    summary="List testimonials",
)
async def list_testimonials(
    search: Optional[str] = None,
    relationship: Optional[str] = None,
    status_filter: Optional[Literal["draft", "published", "all"]] = Query(None, alias="status"),
    payload: Optional[TokenPayload] = Depends(get_optional_payload),
) -> Envelope:
    query = all_of(
        visibility_query(status_filter, payload is not None and payload.is_admin),
        {"relationship": relationship} if relationship and relationship != "all" else None,
        regex_search(search, ["name", "content", "company", "role"]),
    )
    items = await testimonials.find_many(query, sort=[("createdAt", -1)])
    return Envelope(data=items)


@router.post(
    "",
    response_model=Envelope[Testimonial],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a testimonial",
)
async def create_testimonial(
    testimonial_data: TestimonialCreate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    testimonial = await testimonials.insert(Testimonial(**testimonial_data.model_dump()))
    return Envelope(data=testimonial, message="Testimonial created successfully")


@router.get(
    "/{testimonial_id}",
    response_model=Envelope[Testimonial],
    response_model_exclude_none=True,
    summary="Get a testimonial",
)
async def get_testimonial(testimonial_id: str) -> Envelope:
    return Envelope(data=await testimonials.get(testimonial_id))


@router.put(
    "/{testimonial_id}",
    response_model=Envelope[Testimonial],
    response_model_exclude_none=True,
    summary="Update a testimonial",
)
async def update_testimonial(
    testimonial_id: str,
    testimonial_data: TestimonialUpdate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    """Apply a partial update; an empty ``project`` clears the field."""
    testimonials.object_id(testimonial_id)
    to_set, to_unset = testimonials.split_changes(testimonial_data)
    if not to_set and not to_unset:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update",
        )

    testimonial = await testimonials.update(testimonial_id, to_set, to_unset)
    return Envelope(data=testimonial, message="Testimonial updated successfully")


@router.delete(
    "/{testimonial_id}",
    response_model=Envelope,
    response_model_exclude_none=True,
    summary="Delete a testimonial",
)
async def delete_testimonial(
    testimonial_id: str,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    await testimonials.delete(testimonial_id)
    return Envelope(message="Testimonial deleted successfully")
