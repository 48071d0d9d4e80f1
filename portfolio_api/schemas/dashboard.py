"""Admin dashboard schemas."""

from portfolio_api.models.base import CamelModel
from portfolio_api.models.contact import Contact
from portfolio_api.models.content import Post, Project


class DashboardData(CamelModel):
    """Everything the admin overview page renders."""

    projects: list[Project]
    posts: list[Post]
    contact: list[Contact]


class StatsOverview(CamelModel):
    projects: int
    posts: int
    testimonials: int
    contacts: int
    new_contacts: int
    total_views: int
    total_likes: int


class RecentActivity(CamelModel):
    contacts: list[Contact]
    posts: list[Post]


class AdminStats(CamelModel):
    overview: StatsOverview
    recent: RecentActivity
