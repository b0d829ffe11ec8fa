"""Wine document store.

Every store operation returns a :class:`StoreResult` holding either a
success value or a :class:`~winecellar.exceptions.StoreError`. Driver
exceptions never escape the store, so callers branch on ``result.ok``
instead of inspecting raw driver payloads.

Documents keep their primary key in MongoDB's ``_id`` field and are
presented to callers with it renamed to ``id``.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from bson.errors import BSONError
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import CollectionInvalid, PyMongoError

from winecellar.exceptions import NotFoundError, StoreError

logger = logging.getLogger(__name__)

WINES_COLLECTION = "wines"

# Driver failures plus encoding errors raised before a request reaches the server
STORE_ERRORS = (PyMongoError, BSONError, OverflowError)

# Keys the store manages itself and never takes from a submitted body
RESERVED_FIELDS = ("id", "_id")

T = TypeVar("T")


@dataclass
class WriteSummary:
    """Counts reported by a write operation."""

    inserted: int = 0
    updated: int = 0
    deleted: int = 0
    generated_keys: list[str] = field(default_factory=list)
    first_error: str | None = None


@dataclass
class StoreResult(Generic[T]):
    """Outcome of a store operation: a value or an error, never both."""

    value: T | None = None
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StoreError) -> "StoreResult[T]":
        return cls(error=error)


def new_wine_id() -> str:
    """Generate a primary key for a document submitted without one."""
    return str(uuid.uuid4())


def to_document(wine: dict[str, Any]) -> tuple[dict[str, Any], bool]:
    """Convert an API wine into a MongoDB document.

    A submitted ``_id`` is discarded, the primary key only comes from ``id``.

    Returns:
        The document and whether its id was generated.
    """
    doc = dict(wine)
    doc.pop("_id", None)
    wine_id = doc.pop("id", None)
    generated = wine_id is None
    if generated:
        wine_id = new_wine_id()
    doc["_id"] = wine_id
    return doc, generated


def to_wine(doc: dict[str, Any]) -> dict[str, Any]:
    """Convert a MongoDB document into an API wine."""
    wine = {k: v for k, v in doc.items() if k != "_id"}
    wine["id"] = doc["_id"]
    return wine


class WineStore(ABC):
    """Interface to the collection of wine documents."""

    @abstractmethod
    async def list_wines(self) -> StoreResult[list[dict[str, Any]]]:
        """Fetch every document in the collection."""

    @abstractmethod
    async def get_wine(self, wine_id: str) -> StoreResult[dict[str, Any]]:
        """Fetch one document by primary key."""

    @abstractmethod
    async def insert_wine(self, wine: dict[str, Any]) -> StoreResult[WriteSummary]:
        """Insert one document, generating its id when absent."""

    @abstractmethod
    async def update_wine(self, wine_id: str, changes: dict[str, Any]) -> StoreResult[WriteSummary]:
        """Merge ``changes`` into the document with the given id."""

    @abstractmethod
    async def delete_wine(self, wine_id: str) -> StoreResult[WriteSummary]:
        """Remove the document with the given id."""

    @abstractmethod
    async def create_database(self) -> StoreResult[None]:
        """Create the database if the backend requires it."""

    @abstractmethod
    async def create_collection(self) -> StoreResult[bool]:
        """Create the wines collection.

        The success value is True when the collection was newly created
        and False when it already existed.
        """

    @abstractmethod
    async def insert_many(self, wines: list[dict[str, Any]]) -> StoreResult[WriteSummary]:
        """Bulk-insert documents."""

    async def close(self) -> None:
        """Release the underlying connection."""


class MongoWineStore(WineStore):
    """WineStore backed by a MongoDB collection through motor."""

    def __init__(
        self,
        client: AsyncIOMotorClient,
        database_name: str,
        collection_name: str = WINES_COLLECTION,
    ):
        self.client = client
        self.database_name = database_name
        self.collection_name = collection_name

    @property
    def database(self) -> AsyncIOMotorDatabase:
        return self.client[self.database_name]

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.database[self.collection_name]

    async def list_wines(self) -> StoreResult[list[dict[str, Any]]]:
        try:
            docs = await self.collection.find({}).to_list(length=None)
        except STORE_ERRORS as e:
            logger.error("list_wines failed: %s", e)
            return StoreResult.failure(StoreError(str(e)))
        return StoreResult.success([to_wine(doc) for doc in docs])

    async def get_wine(self, wine_id: str) -> StoreResult[dict[str, Any]]:
        try:
            doc = await self.collection.find_one({"_id": wine_id})
        except STORE_ERRORS as e:
            logger.error("get_wine %s failed: %s", wine_id, e)
            return StoreResult.failure(StoreError(str(e)))
        if doc is None:
            return StoreResult.failure(NotFoundError(wine_id))
        return StoreResult.success(to_wine(doc))

    async def insert_wine(self, wine: dict[str, Any]) -> StoreResult[WriteSummary]:
        doc, generated = to_document(wine)
        try:
            await self.collection.insert_one(doc)
        except STORE_ERRORS as e:
            logger.warning("insert_wine failed: %s", e)
            return StoreResult.failure(StoreError(str(e)))
        keys = [doc["_id"]] if generated else []
        return StoreResult.success(WriteSummary(inserted=1, generated_keys=keys))

    async def update_wine(self, wine_id: str, changes: dict[str, Any]) -> StoreResult[WriteSummary]:
        fields = {k: v for k, v in changes.items() if k not in RESERVED_FIELDS}
        try:
            if fields:
                result = await self.collection.update_one({"_id": wine_id}, {"$set": fields})
                matched = result.matched_count
            else:
                # $set rejects an empty document
                matched = await self.collection.count_documents({"_id": wine_id})
        except STORE_ERRORS as e:
            logger.warning("update_wine %s failed: %s", wine_id, e)
            return StoreResult.failure(StoreError(str(e)))
        return StoreResult.success(WriteSummary(updated=matched))

    async def delete_wine(self, wine_id: str) -> StoreResult[WriteSummary]:
        try:
            result = await self.collection.delete_one({"_id": wine_id})
        except STORE_ERRORS as e:
            logger.warning("delete_wine %s failed: %s", wine_id, e)
            return StoreResult.failure(StoreError(str(e)))
        return StoreResult.success(WriteSummary(deleted=result.deleted_count))

    async def create_database(self) -> StoreResult[None]:
        # MongoDB creates databases on first write
        return StoreResult.success(None)

    async def create_collection(self) -> StoreResult[bool]:
        try:
            existing = await self.database.list_collection_names()
            if self.collection_name in existing:
                return StoreResult.success(False)
            await self.database.create_collection(self.collection_name)
        except CollectionInvalid:
            return StoreResult.success(False)
        except STORE_ERRORS as e:
            return StoreResult.failure(StoreError(str(e)))
        return StoreResult.success(True)

    async def insert_many(self, wines: list[dict[str, Any]]) -> StoreResult[WriteSummary]:
        converted = [to_document(wine) for wine in wines]
        docs = [doc for doc, _ in converted]
        try:
            result = await self.collection.insert_many(docs)
        except STORE_ERRORS as e:
            return StoreResult.failure(StoreError(str(e)))
        keys = [doc["_id"] for doc, generated in converted if generated]
        return StoreResult.success(WriteSummary(inserted=len(result.inserted_ids), generated_keys=keys))

    async def close(self) -> None:
        self.client.close()

    def __repr__(self) -> str:
        return f"<MongoWineStore(db={self.database_name}, collection={self.collection_name})>"
