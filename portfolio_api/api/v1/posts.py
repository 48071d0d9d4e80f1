"""Blog post endpoints."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from portfolio_api.api.deps import get_optional_payload, require_admin
from portfolio_api.core.text import regex_search
from portfolio_api.models.content import Post
from portfolio_api.schemas.auth import TokenPayload
from portfolio_api.schemas.common import Envelope
from portfolio_api.schemas.post import PostCreate, PostUpdate
from portfolio_api.services.documents import all_of, id_or_slug_query, visibility_query
from portfolio_api.services.stores import posts

router = APIRouter()

SEARCH_FIELDS = ["title", "content", "tags"]


@router.get(
    "",
    response_model=Envelope[list[Post]],
    response_model_exclude_none=True,
    summary="List posts",
)
async def list_posts(
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    search: Optional[str] = None,
    status_filter: Optional[Literal["draft", "published", "all"]] = Query(None, alias="status"),
    payload: Optional[TokenPayload] = Depends(get_optional_payload),
) -> Envelope:
    """List posts, newest first."""
    query = all_of(
        visibility_query(status_filter, payload is not None and payload.is_admin),
        {"category": category} if category and category != "all" else None,
        {"featured": True} if featured else None,
        regex_search(search, SEARCH_FIELDS),
    )
    items = await posts.find_many(query, sort=[("createdAt", -1)])
    return Envelope(data=items)


@router.post(
    "",
    response_model=Envelope[Post],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
)
async def create_post(
    post_data: PostCreate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    """Create a post; the slug is derived from the title."""
    slug = await posts.unique_slug(post_data.title)
    post = await posts.insert(Post(**post_data.model_dump(), slug=slug))
    return Envelope(data=post, message="Post created successfully")


@router.get(
    "/{id_or_slug}",
    response_model=Envelope[Post],
    response_model_exclude_none=True,
    summary="Get a post",
)
async def get_post(id_or_slug: str) -> Envelope:
    """Fetch a post by id or slug, counting the view."""
    post = await posts.increment(id_or_slug_query(id_or_slug), "views")
    if post is None:
        raise posts.not_found()
    return Envelope(data=post)


@router.post(
    "/{post_id}/view",
    response_model=Envelope,
    response_model_exclude_none=True,
    summary="Record a post view",
)
async def record_view(post_id: str) -> Envelope:
    post = await posts.increment({"_id": posts.object_id(post_id)}, "views")
    if post is None:
        raise posts.not_found()
    return Envelope(message="View recorded")


@router.put(
    "/{post_id}",
    response_model=Envelope[Post],
    response_model_exclude_none=True,
    summary="Update a post",
)
async def update_post(
    post_id: str,
    post_data: PostUpdate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    """Apply a partial update; a new title also renames the slug."""
    oid = posts.object_id(post_id)
    to_set, to_unset = posts.split_changes(post_data)
    if not to_set and not to_unset:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update",
        )

    if "title" in to_set:
        to_set["slug"] = await posts.unique_slug(to_set["title"], exclude=oid)

    post = await posts.update(post_id, to_set, to_unset)
    return Envelope(data=post, message="Post updated successfully")


@router.delete(
    "/{post_id}",
    response_model=Envelope,
    response_model_exclude_none=True,
    summary="Delete a post",
)
async def delete_post(
    post_id: str,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    await posts.delete(post_id)
    return Envelope(message="Post deleted successfully")
