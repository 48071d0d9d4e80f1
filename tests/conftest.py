"""Pytest fixtures and configuration."""

from collections.abc import AsyncGenerator
from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from portfolio_api.config import settings
from portfolio_api.core.permissions import Role
from portfolio_api.core.security import create_access_token, hash_password
from portfolio_api.main import app
from portfolio_api.models.user import User


@pytest.fixture(autouse=True)
def media_dirs(tmp_path, monkeypatch):
    """Keep uploaded files inside the test's temporary directory."""
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path / "uploads"))
    monkeypatch.setattr(settings, "RESUME_DIR", str(tmp_path / "resume"))
    return tmp_path


@pytest.fixture
def mongo_db():
    """In-memory MongoDB database."""
    return AsyncMongoMockClient()["portfolio_test"]


@pytest_asyncio.fixture
async def client(mongo_db) -> AsyncGenerator[AsyncClient, None]:
    """Create test client backed by the in-memory database.

    Redis is left unset, so the rate limiter lets every request through.
    """
    with (
        patch("portfolio_api.db.mongodb.mongodb_database", mongo_db),
        patch("portfolio_api.db.redis.redis_client", None),
    ):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac


async def create_user(mongo_db, email: str, password: str, role: Role, **fields) -> User:
    user = User(
        email=email,
        password=hash_password(password),
        name=fields.pop("name", "Test User"),
        role=role,
        **fields,
    )
    result = await mongo_db["users"].insert_one(user.to_mongo())
    user.id = str(result.inserted_id)
    return user


def bearer(user: User) -> dict:
    token = create_access_token(user.id, {"email": user.email, "role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def admin_user(mongo_db) -> User:
    """Create the site administrator."""
    return await create_user(
        mongo_db, "admin@example.com", "adminpass123", Role.ADMIN, name="Site Admin"
    )


@pytest_asyncio.fixture
async def regular_user(mongo_db) -> User:
    """Create a non-admin account."""
    return await create_user(
        mongo_db, "visitor@example.com", "userpass123", Role.USER, name="Visitor"
    )


@pytest.fixture
def admin_headers(admin_user: User) -> dict:
    """Authentication headers for the administrator."""
    return bearer(admin_user)


@pytest.fixture
def user_headers(regular_user: User) -> dict:
    """Authentication headers for the non-admin account."""
    return bearer(regular_user)


@pytest.fixture
def project_payload() -> dict:
    return {
        "title": "Portfolio Site",
        "description": "A personal site built with Next.js and FastAPI.",
        "excerpt": "Personal site",
        "technologies": ["Next.js", "FastAPI"],
        "category": "web",
        "image": "https://example.com/site.png",
        "githubUrl": "https://github.com/example/site",
        "tags": ["react", "python"],
        "status": "published",
    }


@pytest.fixture
def post_payload() -> dict:
    return {
        "title": "Hello World",
        "content": "The first post on the blog, about async Python.",
        "excerpt": "The first post",
        "category": "python",
        "tags": ["asyncio"],
        "image": "https://example.com/post.png",
        "readTime": "3 min read",
        "status": "published",
    }
