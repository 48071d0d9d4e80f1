"""Admin dashboard endpoints."""

import asyncio

from fastapi import APIRouter, Depends

from portfolio_api.api.deps import require_admin
from portfolio_api.schemas.auth import TokenPayload
from portfolio_api.schemas.common import Envelope
from portfolio_api.schemas.dashboard import (
    AdminStats,
    DashboardData,
    RecentActivity,
    StatsOverview,
)
from portfolio_api.services.documents import DocumentStore
from portfolio_api.services.stores import contacts, posts, projects, testimonials

router = APIRouter()

PUBLISHED = {"status": "published"}


async def engagement_totals(store: DocumentStore) -> tuple[int, int]:
    """Sum views and likes over the published documents of a collection."""
    pipeline = [
        {"$match": PUBLISHED},
        {"$group": {"_id": None, "totalViews": {"$sum": "$views"}, "totalLikes": {"$sum": "$likes"}}},
    ]
    async for row in store.collection.aggregate(pipeline):
        return row.get("totalViews", 0), row.get("totalLikes", 0)
    return 0, 0


@router.get(
    "/dashboard",
    response_model=Envelope[DashboardData],
    response_model_exclude_none=True,
    summary="Dashboard content",
)
async def get_dashboard(admin: TokenPayload = Depends(require_admin)) -> Envelope:
    """All projects, posts and contact messages, regardless of status."""
    project_list, post_list, contact_list = await asyncio.gather(
        projects.find_many(sort=[("createdAt", -1)]),
        posts.find_many(sort=[("createdAt", -1)]),
        contacts.find_many(sort=[("createdAt", -1)]),
    )
    return Envelope(
        data=DashboardData(projects=project_list, posts=post_list, contact=contact_list)
    )


@router.get(
    "/admin/stats",
    response_model=Envelope[AdminStats],
    response_model_exclude_none=True,
    summary="Dashboard statistics",
)
async def get_stats(admin: TokenPayload = Depends(require_admin)) -> Envelope:
    (
        project_count,
        post_count,
        testimonial_count,
        contact_count,
        new_contact_count,
    ) = await asyncio.gather(
        projects.count(PUBLISHED),
        posts.count(PUBLISHED),
        testimonials.count(PUBLISHED),
        contacts.count(),
        contacts.count({"status": "new"}),
    )
    (project_views, project_likes), (post_views, post_likes) = await asyncio.gather(
        engagement_totals(projects),
        engagement_totals(posts),
    )
    recent_contacts, recent_posts = await asyncio.gather(
        contacts.find_many(sort=[("createdAt", -1)], limit=5),
        posts.find_many(PUBLISHED, sort=[("createdAt", -1)], limit=3),
    )

    stats = AdminStats(
        overview=StatsOverview(
            projects=project_count,
            posts=post_count,
            testimonials=testimonial_count,
            contacts=contact_count,
            new_contacts=new_contact_count,
            total_views=project_views + post_views,
            total_likes=project_likes + post_likes,
        ),
        recent=RecentActivity(contacts=recent_contacts, posts=recent_posts),
    )
    return Envelope(data=stats)
