"""Generic single-collection document store."""

import logging
from typing import Any, Generic, TypeVar

from bson import ObjectId
from fastapi import HTTPException, status
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import BaseModel
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from portfolio_api.core.text import generate_slug
from portfolio_api.db.mongodb import get_collection
from portfolio_api.models.base import MongoDocument, utcnow

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=MongoDocument)


def parse_object_id(value: str, label: str = "document") -> ObjectId:
    """Convert a path id to an ObjectId or fail with 400."""
    if not value or not ObjectId.is_valid(value):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid or missing {label} ID",
        )
    return ObjectId(value)


def id_or_slug_query(value: str) -> dict[str, Any]:
    """Match a document by ObjectId or by slug."""
    if ObjectId.is_valid(value):
        return {"$or": [{"_id": ObjectId(value)}, {"slug": value}]}
    return {"slug": value}


class DocumentStore(Generic[DocumentT]):
    """CRUD helpers over one collection, returning typed documents."""

    def __init__(
        self,
        collection_name: str,
        model: type[DocumentT],
        label: str,
        conflict_status: int = status.HTTP_400_BAD_REQUEST,
        conflict_detail: str | None = None,
    ):
        self.collection_name = collection_name
        self.model = model
        self.label = label
        self.conflict_status = conflict_status
        self.conflict_detail = conflict_detail or f"A {label} with this title already exists"

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return get_collection(self.collection_name)

    def not_found(self) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{self.label.capitalize()} not found",
        )

    def conflict(self, detail: str | None = None) -> HTTPException:
        """Error for a write that would break a unique index."""
        return HTTPException(
            status_code=self.conflict_status,
            detail=detail or self.conflict_detail,
        )

    def object_id(self, document_id: str) -> ObjectId:
        return parse_object_id(document_id, self.label)

    @property
    def clearable(self) -> set[str]:
        """Stored keys of optional fields that an update may remove."""
        return {
            field.alias or name
            for name, field in self.model.model_fields.items()
            if name != "id" and not field.is_required() and field.default is None
        }

    def split_changes(self, update: BaseModel) -> tuple[dict[str, Any], dict[str, Any]]:
        """Split a partial update into ``$set`` and ``$unset`` documents.

        Only fields the client sent are considered. An explicit null clears
        an optional field and is ignored for required ones.
        """
        sent = update.model_dump(by_alias=True, exclude_unset=True)
        clearable = self.clearable
        to_set = {key: value for key, value in sent.items() if value is not None}
        to_unset = {key: "" for key, value in sent.items() if value is None and key in clearable}
        return to_set, to_unset

    async def unique_slug(self, title: str, exclude: ObjectId | None = None) -> str:
        """Derive a slug from a title, rejecting one already in use."""
        slug = generate_slug(title)
        if not slug:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Title must contain letters or numbers",
            )

        query: dict[str, Any] = {"slug": slug}
        if exclude is not None:
            query["_id"] = {"$ne": exclude}
        if await self.collection.find_one(query, {"_id": 1}):
            raise self.conflict()
        return slug

    async def find_many(
        self,
        query: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
        limit: int = 0,
    ) -> list[DocumentT]:
        """Return matching documents in the requested order."""
        cursor = self.collection.find(query or {})
        if sort:
            cursor = cursor.sort(sort)
        if limit:
            cursor = cursor.limit(limit)
        return [self.model.from_mongo(doc) async for doc in cursor]

    async def count(self, query: dict[str, Any] | None = None) -> int:
        return await self.collection.count_documents(query or {})

    async def find_one(self, query: dict[str, Any]) -> DocumentT | None:
        doc = await self.collection.find_one(query)
        return self.model.from_mongo(doc) if doc else None

    async def get(self, document_id: str) -> DocumentT:
        """Fetch by id; 400 for a malformed id, 404 when missing."""
        document = await self.find_one({"_id": self.object_id(document_id)})
        if document is None:
            raise self.not_found()
        return document

    async def insert(self, document: DocumentT) -> DocumentT:
        """Store a new document; a unique index violation becomes a conflict."""
        try:
            result = await self.collection.insert_one(document.to_mongo())
        except DuplicateKeyError:
            logger.warning(f"Duplicate key on {self.label} insert")
            raise self.conflict()
        document.id = str(result.inserted_id)
        logger.info(f"Created {self.label} {document.id}")
        return document

    async def update(
        self,
        document_id: str,
        to_set: dict[str, Any],
        to_unset: dict[str, Any] | None = None,
        touch: bool = True,
        conflict_detail: str | None = None,
    ) -> DocumentT:
        """Apply ``$set``/``$unset`` and return the document after the write.

        ``conflict_detail`` overrides the message used when the write breaks
        a unique index.
        """
        oid = self.object_id(document_id)
        changes: dict[str, Any] = {}
        if touch:
            to_set = {**to_set, "updatedAt": utcnow()}
        if to_set:
            changes["$set"] = to_set
        if to_unset:
            changes["$unset"] = to_unset

        try:
            doc = await self.collection.find_one_and_update(
                {"_id": oid}, changes, return_document=ReturnDocument.AFTER
            )
        except DuplicateKeyError:
            logger.warning(f"Duplicate key on {self.label} update {document_id}")
            raise self.conflict(conflict_detail)
        if doc is None:
            raise self.not_found()
        logger.info(f"Updated {self.label} {document_id}")
        return self.model.from_mongo(doc)

    async def delete(self, document_id: str) -> None:
        result = await self.collection.delete_one({"_id": self.object_id(document_id)})
        if result.deleted_count == 0:
            raise self.not_found()
        logger.info(f"Deleted {self.label} {document_id}")

    async def increment(
        self, query: dict[str, Any], field: str, amount: int = 1
    ) -> DocumentT | None:
        """Atomically bump a counter and return the updated document."""
        doc = await self.collection.find_one_and_update(
            query, {"$inc": {field: amount}}, return_document=ReturnDocument.AFTER
        )
        return self.model.from_mongo(doc) if doc else None


def visibility_query(requested: str | None, is_admin: bool) -> dict[str, Any]:
    """Status filter for public listings.

    Published documents by default. Only admins may ask for drafts or for
    every status with ``all``.
    """
    if not is_admin or not requested:
        return {"status": "published"}
    if requested == "all":
        return {}
    return {"status": requested}


def all_of(*clauses: dict[str, Any] | None) -> dict[str, Any]:
    """AND together the non-empty query clauses."""
    present = [clause for clause in clauses if clause]
    if not present:
        return {}
    if len(present) == 1:
        return present[0]
    return {"$and": present}
