"""Document stores shared by the routers."""

from portfolio_api.db.mongodb import (
    CERTIFICATIONS,
    CONTACTS,
    EXPERIENCE,
    POSTS,
    PROJECTS,
    TESTIMONIALS,
    USERS,
)
from portfolio_api.models.contact import Contact
from portfolio_api.models.content import (
    Certification,
    Experience,
    Post,
    Project,
    Testimonial,
)
from portfolio_api.models.user import User
from portfolio_api.services.documents import DocumentStore

projects = DocumentStore(PROJECTS, Project, "project")
posts = DocumentStore(POSTS, Post, "post")
testimonials = DocumentStore(TESTIMONIALS, Testimonial, "testimonial")
experiences = DocumentStore(EXPERIENCE, Experience, "experience")
certifications = DocumentStore(CERTIFICATIONS, Certification, "certification")
contacts = DocumentStore(CONTACTS, Contact, "contact")
users = DocumentStore(
    USERS, User, "user", conflict_status=409, conflict_detail="User already exists"
)

