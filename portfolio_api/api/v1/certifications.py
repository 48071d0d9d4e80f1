"""Certification endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.api.deps import require_admin
from portfolio_api.models.content import Certification
from portfolio_api.schemas.auth import TokenPayload
from portfolio_api.schemas.certification import CertificationCreate, CertificationUpdate
from portfolio_api.schemas.common import Envelope
from portfolio_api.services.stores import certifications

router = APIRouter()


@router.get(
    "",
    response_model=Envelope[list[Certification]],
    response_model_exclude_none=True,
    summary="List certifications",
)
async def list_certifications() -> Envelope:
    """List certifications, most recently issued first."""
    items = await certifications.find_many(sort=[("issueDate", -1)])
    return Envelope(data=items)


@router.post(
    "",
    response_model=Envelope[Certification],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Add a certification",
)
async def create_certification(
    certification_data: CertificationCreate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    """Add a certification; credential ids must be unique when given."""
    if certification_data.credential_id and await certifications.find_one(
        {"credentialId": certification_data.credential_id}
    ):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A certification with this credential ID already exists",
        )

    certification = await certifications.insert(
        Certification(**certification_data.model_dump())
    )
    return Envelope(data=certification, message="Certification created successfully")


@router.get(
    "/{certification_id}",
    response_model=Envelope[Certification],
    response_model_exclude_none=True,
    summary="Get a certification",
)
async def get_certification(certification_id: str) -> Envelope:
    return Envelope(data=await certifications.get(certification_id))


@router.put(
    "/{certification_id}",
    response_model=Envelope[Certification],
    response_model_exclude_none=True,
    summary="Update a certification",
)
async def update_certification(
    certification_id: str,
    certification_data: CertificationUpdate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    oid = certifications.object_id(certification_id)
    to_set, to_unset = certifications.split_changes(certification_data)
    if not to_set and not to_unset:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update",
        )

    credential_id = to_set.get("credentialId")
    if credential_id and await certifications.find_one(
        {"credentialId": credential_id, "_id": {"$ne": oid}}
    ):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A certification with this credential ID already exists",
        )

    certification = await certifications.update(certification_id, to_set, to_unset)
    return Envelope(data=certification, message="Certification updated successfully")


@router.delete(
    "/{certification_id}",
    response_model=Envelope,
    response_model_exclude_none=True,
    summary="Delete a certification",
)
async def delete_certification(
    certification_id: str,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    await certifications.delete(certification_id)
    return Envelope(message="Certification deleted successfully")
