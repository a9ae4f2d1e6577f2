"""
Test Configuration Module

Provides an in-memory store double shaped like pymongo's AsyncMongoClient:
client[database][collection] with async find_one / find().to_list / insert_one / insert_many.
"""

import asyncio
import copy
from typing import Any, AsyncGenerator, Optional

import pytest
import pytest_asyncio
from bson import ObjectId
from pymongo.errors import DuplicateKeyError
from pymongo.results import InsertManyResult, InsertOneResult

from docrepo.config import get_settings


def _matches(document: dict[str, Any], filter: dict[str, Any]) -> bool:
    """Equality-only matching, enough for repository tests"""
    return all(key in document and document[key] == value for key, value in filter.items())


class FakeCursor:
    """Cursor double, drained with to_list()"""

    def __init__(self, documents: list[dict[str, Any]], error: Optional[Exception] = None):
        self.documents = documents
        self.error = error
        self.to_list_calls: list[Optional[int]] = []

    async def to_list(self, length: Optional[int] = None) -> list[dict[str, Any]]:
        self.to_list_calls.append(length)
        if self.error is not None:
            raise self.error
        return list(self.documents)


class FakeCollection:
    """
    Collection double

    Stores copies of inserted documents and records every call with its options.
    Failures are injected through the `fail_*` attributes.
    """

    def __init__(self, name: str):
        self.name = name
        self.documents: list[dict[str, Any]] = []
        self.calls: list[tuple[str, Any, dict[str, Any]]] = []
        self.fail_find_one: Optional[Exception] = None
        self.fail_find: Optional[Exception] = None
        self.fail_drain: Optional[Exception] = None
        self.fail_insert: Optional[Exception] = None
        # Generate identifiers back to front; the acknowledgment still follows input order
        self.generate_ids_reversed = False
        # Replaces the acknowledged identifier list when set
        self.acknowledged_ids_override: Optional[list[Any]] = None
        # find_one waits on this event when set
        self.block: Optional[asyncio.Event] = None
        self.last_cursor: Optional[FakeCursor] = None

    def seed(self, *documents: dict[str, Any]) -> None:
        self.documents.extend(copy.deepcopy(list(documents)))

    def _store(self, document: dict[str, Any]) -> None:
        if any(existing["_id"] == document["_id"] for existing in self.documents):
            raise DuplicateKeyError(f"E11000 duplicate key error _id: {document['_id']!r}", 11000)
        self.documents.append(copy.deepcopy(document))

    async def find_one(self, filter: dict[str, Any], **options: Any) -> Optional[dict[str, Any]]:
        self.calls.append(("find_one", filter, options))
        if self.block is not None:
            await self.block.wait()
        if self.fail_find_one is not None:
            raise self.fail_find_one
        for document in self.documents:
            if _matches(document, filter):
                return copy.deepcopy(document)
        return None

    def find(self, filter: dict[str, Any], **options: Any) -> FakeCursor:
        self.calls.append(("find", filter, options))
        if self.fail_find is not None:
            raise self.fail_find
        matched = [copy.deepcopy(d) for d in self.documents if _matches(d, filter)]
        if options.get("limit"):
            matched = matched[: options["limit"]]
        self.last_cursor = FakeCursor(matched, error=self.fail_drain)
        return self.last_cursor

    async def insert_one(self, document: dict[str, Any], **options: Any) -> InsertOneResult:
        self.calls.append(("insert_one", document, options))
        if self.fail_insert is not None:
            raise self.fail_insert
        # The real driver also sets _id on the passed mapping
        document.setdefault("_id", ObjectId())
        self._store(document)
        return InsertOneResult(document["_id"], True)

    async def insert_many(self, documents: list[dict[str, Any]], **options: Any) -> InsertManyResult:
        self.calls.append(("insert_many", documents, options))
        if self.fail_insert is not None:
            raise self.fail_insert
        pending = [d for d in documents if "_id" not in d]
        if self.generate_ids_reversed:
            pending.reverse()
        for document in pending:
            document["_id"] = ObjectId()
        for document in documents:
            self._store(document)
        inserted_ids = [document["_id"] for document in documents]
        if self.acknowledged_ids_override is not None:
            inserted_ids = self.acknowledged_ids_override
        return InsertManyResult(inserted_ids, True)


class FakeDatabase:
    def __init__(self, name: str):
        self.name = name
        self.collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


class FakeMongoClient:
    """Client double, indexable by database then collection name"""

    def __init__(self):
        self.databases: dict[str, FakeDatabase] = {}
        self.closed = False

    def __getitem__(self, name: str) -> FakeDatabase:
        if name not in self.databases:
            self.databases[name] = FakeDatabase(name)
        return self.databases[name]

    async def close(self) -> None:
        self.closed = True


@pytest_asyncio.fixture
async def mongo_client() -> AsyncGenerator[FakeMongoClient, None]:
    """In-memory MongoDB client double, closed after the test"""
    client = FakeMongoClient()
    yield client
    await client.close()


@pytest.fixture
def items_collection(mongo_client) -> FakeCollection:
    """The collection the `items` repositories are bound to"""
    return mongo_client["testdb"]["items"]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; tests that patch the environment need a fresh load"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
