"""Contact form and inbox endpoints."""

import logging
from typing import Optional

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from portfolio_api.api.deps import require_admin
from portfolio_api.config import settings
from portfolio_api.core.rate_limiter import check_rate_limit, get_client_ip
from portfolio_api.models.contact import Contact, ContactReply, ContactStatus
from portfolio_api.schemas.auth import TokenPayload
from portfolio_api.schemas.common import AffectedCount, Envelope
from portfolio_api.schemas.contact import (
    AIReplyDraft,
    ContactBulkAction,
    ContactCreate,
    ContactCreated,
    ContactReplyCreate,
    ContactUpdate,
)
from portfolio_api.services.ai_reply import AIReplyError, build_prompt, generate_reply
from portfolio_api.services.stores import contacts

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=Envelope[ContactCreated],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Submit the contact or hire-me form",
)
async def submit_contact(
    contact_data: ContactCreate,
    request: Request,
) -> Envelope:
    """Store a public enquiry.

    Submissions are limited per client IP; the limiter is shared across
    both forms.
    """
    ip_address = get_client_ip(request)
    allowed, _, reset = await check_rate_limit(
        f"contact:{ip_address}",
        settings.CONTACT_RATE_LIMIT_REQUESTS,
        settings.CONTACT_RATE_LIMIT_WINDOW,
    )
    if not allowed:
        logger.warning(f"Contact form rate limit exceeded for {ip_address}")
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many requests. Please try again later.",
            headers={"Retry-After": str(reset)},
        )

    contact = await contacts.insert(
        Contact(
            **contact_data.model_dump(),
            ip_address=ip_address,
            user_agent=request.headers.get("user-agent"),
        )
    )
    return Envelope(
        data=ContactCreated(id=contact.id),
        message="Message sent successfully! I'll get back to you soon.",
    )


@router.get(
    "",
    response_model=Envelope[list[Contact]],
    response_model_exclude_none=True,
    summary="List received messages",
)
async def list_contacts(
    status_filter: Optional[ContactStatus] = Query(None, alias="status"),
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    query = {"status": status_filter.value} if status_filter else {}
    items = await contacts.find_many(query, sort=[("createdAt", -1)])
    return Envelope(data=items)


@router.post(
    "/bulk",
    response_model=Envelope[AffectedCount],
    response_model_exclude_none=True,
    summary="Delete or re-status several messages",
)
async def bulk_contacts(
    action: ContactBulkAction,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    """Apply one action to many messages; malformed ids are skipped."""
    ids = [ObjectId(value) for value in action.ids if ObjectId.is_valid(value)]
    if not ids:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid contact IDs provided",
        )

    query = {"_id": {"$in": ids}}
    if action.action == "delete":
        result = await contacts.collection.delete_many(query)
        affected = result.deleted_count
        message = f"{affected} contact(s) deleted successfully."
    else:
        result = await contacts.collection.update_many(
            query, {"$set": {"status": action.status}}
        )
        affected = result.modified_count
        message = f"{affected} contact(s) updated to '{action.status}'."

    logger.info(f"Bulk {action.action} affected {affected} contact(s)")
    return Envelope(data=AffectedCount(affected_count=affected), message=message)


@router.patch(
    "/reply/{contact_id}",
    response_model=Envelope[Contact],
    response_model_exclude_none=True,
    summary="Record a reply to a message",
)
async def reply_to_contact(
    contact_id: str,
    reply_data: ContactReplyCreate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    """Attach the reply and mark the message replied; no email is sent."""
    reply = ContactReply(
        message=reply_data.message,
        subject=reply_data.subject,
        admin=reply_data.admin,
    )
    contact = await contacts.update(
        contact_id,
        {
            "reply": reply.model_dump(by_alias=True, exclude_none=True),
            "status": ContactStatus.REPLIED.value,
        },
        touch=False,
    )
    return Envelope(data=contact, message="Reply recorded successfully")


@router.get(
    "/generate-ai-reply/{contact_id}",
    response_model=Envelope[AIReplyDraft],
    response_model_exclude_none=True,
    summary="Draft a reply with the language model",
)
async def generate_ai_reply(
    contact_id: str,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    contact = await contacts.get(contact_id)

    try:
        draft = await generate_reply(build_prompt(contact))
    except AIReplyError as e:
        logger.error(f"AI draft generation failed for contact {contact_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate AI draft.",
        )

    return Envelope(
        data=AIReplyDraft(generated_reply=draft),
        message="AI draft generated successfully.",
    )


@router.get(
    "/{contact_id}",
    response_model=Envelope[Contact],
    response_model_exclude_none=True,
    summary="Get a message",
)
async def get_contact(
    contact_id: str,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    return Envelope(data=await contacts.get(contact_id))


@router.put(
    "/{contact_id}",
    response_model=Envelope[Contact],
    response_model_exclude_none=True,
    summary="Update a message",
)
async def update_contact(
    contact_id: str,
    contact_data: ContactUpdate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    contacts.object_id(contact_id)
    to_set, to_unset = contacts.split_changes(contact_data)
    if not to_set and not to_unset:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update",
        )

    contact = await contacts.update(contact_id, to_set, to_unset, touch=False)
    return Envelope(data=contact, message="Contact updated successfully")


@router.delete(
    "/{contact_id}",
    response_model=Envelope,
    response_model_exclude_none=True,
    summary="Delete a message",
)
async def delete_contact(
    contact_id: str,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    await contacts.delete(contact_id)
    return Envelope(message="Contact deleted successfully")
