"""API router aggregation."""

from fastapi import APIRouter

from portfolio_api.api.v1.auth import router as auth_router
from portfolio_api.api.v1.certifications import router as certifications_router
from portfolio_api.api.v1.contact import router as contact_router
from portfolio_api.api.v1.dashboard import router as dashboard_router
from portfolio_api.api.v1.experience import router as experience_router
from portfolio_api.api.v1.posts import router as posts_router
from portfolio_api.api.v1.projects import router as projects_router
from portfolio_api.api.v1.resume import router as resume_router
from portfolio_api.api.v1.testimonials import router as testimonials_router
from portfolio_api.api.v1.upload import router as upload_router

api_router = APIRouter()

# Include all routers
api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
api_router.include_router(projects_router, prefix="/projects", tags=["Projects"])
api_router.include_router(posts_router, prefix="/posts", tags=["Posts"])
api_router.include_router(testimonials_router, prefix="/testimonials", tags=["Testimonials"])
api_router.include_router(experience_router, prefix="/experience", tags=["Experience"])
api_router.include_router(
    certifications_router, prefix="/certifications", tags=["Certifications"]
)
api_router.include_router(contact_router, prefix="/contact", tags=["Contact"])
api_router.include_router(upload_router, tags=["Media"])
api_router.include_router(resume_router, prefix="/resume", tags=["Media"])
api_router.include_router(dashboard_router, tags=["Dashboard"])
