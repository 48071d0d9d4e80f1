"""MongoDB database connection and client management."""

import logging

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from portfolio_api.config import settings

logger = logging.getLogger(__name__)

# Collection names
PROJECTS = "projects"
POSTS = "posts"
TESTIMONIALS = "testimonials"
EXPERIENCE = "experience"
CERTIFICATIONS = "certifications"
CONTACTS = "contacts"
USERS = "users"

# Global MongoDB client and database
mongodb_client: AsyncIOMotorClient | None = None
mongodb_database: AsyncIOMotorDatabase | None = None


async def init_mongodb() -> None:
    """Initialize MongoDB connection."""
    global mongodb_client, mongodb_database

    mongodb_client = AsyncIOMotorClient(settings.MONGODB_URL, tz_aware=True)
    mongodb_database = mongodb_client[settings.MONGODB_DATABASE]

    # Try to create indexes, but don't fail startup if it errors
    try:
        await _create_indexes()
    except Exception as e:
        logger.warning(f"Could not create MongoDB indexes (non-fatal): {e}")


async def _create_indexes() -> None:
    """Create MongoDB indexes for lookups and uniqueness."""
    if mongodb_database is None:
        return

    for name in (PROJECTS, POSTS):
        collection = mongodb_database[name]
        await collection.create_index("slug", unique=True)
        await collection.create_index([("status", 1), ("createdAt", -1)])

    await mongodb_database[TESTIMONIALS].create_index([("status", 1), ("createdAt", -1)])
    await mongodb_database[EXPERIENCE].create_index([("startDate", -1)])
    await mongodb_database[CERTIFICATIONS].create_index([("issueDate", -1)])

    contacts = mongodb_database[CONTACTS]
    await contacts.create_index([("status", 1), ("createdAt", -1)])

    await mongodb_database[USERS].create_index("email", unique=True)


async def close_mongodb() -> None:
    """Close MongoDB connection."""
    global mongodb_client

    if mongodb_client:
        mongodb_client.close()


def get_mongodb() -> AsyncIOMotorDatabase:
    """Get MongoDB database instance."""
    if mongodb_database is None:
        raise RuntimeError("MongoDB is not initialized")
    return mongodb_database


def get_collection(name: str) -> AsyncIOMotorCollection:
    """Get a collection from the active database."""
    return get_mongodb()[name]
