"""Project endpoints."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from portfolio_api.api.deps import get_optional_payload, require_admin
from portfolio_api.core.text import regex_search
from portfolio_api.models.content import Project
from portfolio_api.schemas.auth import TokenPayload
from portfolio_api.schemas.common import Envelope
from portfolio_api.schemas.project import ProjectCreate, ProjectUpdate
from portfolio_api.services.documents import all_of, id_or_slug_query, visibility_query
from portfolio_api.services.stores import projects

router = APIRouter()

SEARCH_FIELDS = ["title", "description", "tags"]


@router.get(
    "",
    response_model=Envelope[list[Project]],
    response_model_exclude_none=True,
    summary="List projects",
)
async def list_projects(
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    search: Optional[str] = None,
    status_filter: Optional[Literal["draft", "published", "all"]] = Query(None, alias="status"),
    payload: Optional[TokenPayload] = Depends(get_optional_payload),
) -> Envelope:
    """List projects, newest first."""
    query = all_of(
        visibility_query(status_filter, payload is not None and payload.is_admin),
        {"category": category} if category and category != "all" else None,
        {"featured": True} if featured else None,
        regex_search(search, SEARCH_FIELDS),
    )
    items = await projects.find_many(query, sort=[("createdAt", -1)])
    return Envelope(data=items)


@router.post(
    "",
    response_model=Envelope[Project],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
)
async def create_project(
    project_data: ProjectCreate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    """Create a project; the slug is derived from the title."""
    slug = await projects.unique_slug(project_data.title)
    project = await projects.insert(Project(**project_data.model_dump(), slug=slug))
    return Envelope(data=project, message="Project created successfully")


@router.get(
    "/{id_or_slug}",
    response_model=Envelope[Project],
    response_model_exclude_none=True,
    summary="Get a project",
)
async def get_project(id_or_slug: str) -> Envelope:
    """Fetch a project by id or slug, counting the view."""
    project = await projects.increment(id_or_slug_query(id_or_slug), "views")
    if project is None:
        raise projects.not_found()
    return Envelope(data=project)


@router.post(
    "/{project_id}/view",
    response_model=Envelope,
    response_model_exclude_none=True,
    summary="Record a project view",
)
async def record_view(project_id: str) -> Envelope:
    project = await projects.increment({"_id": projects.object_id(project_id)}, "views")
    if project is None:
        raise projects.not_found()
    return Envelope(message="View recorded")


@router.put(
    "/{project_id}",
    response_model=Envelope[Project],
    response_model_exclude_none=True,
    summary="Update a project",
)
async def update_project(
    project_id: str,
    project_data: ProjectUpdate,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    """Apply a partial update; a new title also renames the slug."""
    oid = projects.object_id(project_id)
    to_set, to_unset = projects.split_changes(project_data)
    if not to_set and not to_unset:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update",
        )

    if "title" in to_set:
        to_set["slug"] = await projects.unique_slug(to_set["title"], exclude=oid)

    project = await projects.update(project_id, to_set, to_unset)
    return Envelope(data=project, message="Project updated successfully")


@router.delete(
    "/{project_id}",
    response_model=Envelope,
    response_model_exclude_none=True,
    summary="Delete a project",
)
async def delete_project(
    project_id: str,
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    await projects.delete(project_id)
    return Envelope(message="Project deleted successfully")
