"""
Typed Repository MongoDB Implementation

Provides the generic read/insert repository over an async pymongo client.
"""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from bson import ObjectId
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from docrepo.common.errors import InvalidIdentifierError, NotFoundError
from docrepo.config import get_settings
from docrepo.db.mongo import get_mongo
from docrepo.domain.insert_record import InsertRecord
from docrepo.repositories.base import BaseRepository, T

logger = logging.getLogger(__name__)


class MongoRepository(BaseRepository[T]):
    """
    Typed Repository MongoDB Implementation

    Binds a client, a database name and a collection name to a model class.
    Holds no other state, so one instance can be shared by concurrent tasks.
    The client is owned by the caller and never opened or closed here.
    """

    def __init__(
        self,
        client: AsyncMongoClient,
        database: str,
        collection: str,
        model: type[T],
    ):
        """
        Initialize Repository

        Names are not validated; an invalid name surfaces on first use.

        Args:
            client: Async MongoDB client
            database: Database name
            collection: Collection name
            model: Model class used to decode documents
        """
        self.client = client
        self.database = database
        self.collection_name = collection
        self.model = model

    @classmethod
    def from_settings(
        cls,
        model: type[T],
        collection: str,
        client: Optional[AsyncMongoClient] = None,
    ) -> "MongoRepository[T]":
        """
        Build a repository on the configured default database

        Args:
            model: Model class used to decode documents
            collection: Collection name
            client: Client to use, defaults to the process client from init_mongo()
        """
        settings = get_settings()
        if client is None:
            client = get_mongo()
        return cls(client, settings.MONGODB_DATABASE, collection, model)

    @property
    def collection(self) -> AsyncCollection:
        return self.client[self.database][self.collection_name]

    def _decode(self, document: Mapping[str, Any]) -> T:
        from_document = getattr(self.model, "from_document", None)
        if from_document is not None:
            return from_document(document)
        model_validate = getattr(self.model, "model_validate", None)
        if model_validate is not None:
            return model_validate(document)
        # Mapping types (dict, bson.SON, ...) take the raw document as-is
        return self.model(document)

    def _encode(self, model: T) -> Any:
        # Models without to_document() are handed to the driver as-is
        to_document = getattr(model, "to_document", None)
        if to_document is not None:
            return to_document()
        return model

    def _narrow_id(self, inserted_id: Any) -> ObjectId:
        if not isinstance(inserted_id, ObjectId):
            raise InvalidIdentifierError(
                f"Store returned a {type(inserted_id).__name__} identifier, expected ObjectId",
                details={
                    "database": self.database,
                    "collection": self.collection_name,
                    "inserted_id": repr(inserted_id),
                },
            )
        return inserted_id

    def _not_found(self, filter: Mapping[str, Any]) -> NotFoundError:
        return NotFoundError(
            f"No document in '{self.database}.{self.collection_name}' matches the filter",
            details={
                "database": self.database,
                "collection": self.collection_name,
                "filter": repr(filter),
            },
        )

    async def find_by_id(self, document_id: Union[str, ObjectId], **options: Any) -> T:
        """Find a document by primary key, matched verbatim"""
        return await self.find_one({"_id": document_id}, **options)

    async def find_one(self, filter: Mapping[str, Any], **options: Any) -> T:
        """Find the first document matching filter, raises NotFoundError if none"""
        logger.debug(f"find_one {self.database}.{self.collection_name} filter={filter!r}")
        document = await self.collection.find_one(filter, **options)
        if document is None:
            raise self._not_found(filter)
        return self._decode(document)

    async def find_many(self, filter: Mapping[str, Any], **options: Any) -> list[T]:
        """Find all documents matching filter, draining the cursor fully"""
        logger.debug(f"find {self.database}.{self.collection_name} filter={filter!r}")
        cursor = self.collection.find(filter, **options)
        documents = await cursor.to_list(length=None)
        return [self._decode(document) for document in documents]

    async def insert_one(self, model: T, **options: Any) -> InsertRecord[T]:
        """Insert a single model and pair it with the assigned identifier"""
        result = await self.collection.insert_one(self._encode(model), **options)
        inserted_id = self._narrow_id(result.inserted_id)
        logger.debug(
            f"insert_one {self.database}.{self.collection_name} inserted_id={inserted_id}"
        )
        return InsertRecord(id=inserted_id, base=model)

    async def insert_many(
        self, models: Sequence[T], **options: Any
    ) -> list[InsertRecord[T]]:
        """
        Insert several models with one store call

        Identifiers are paired with models by position. A failed batch raises the
        driver error as-is; which documents were written is not reported.
        """
        models = list(models)
        if not models:
            # The driver rejects an empty batch
            return []

        documents = [self._encode(model) for model in models]
        result = await self.collection.insert_many(documents, **options)
        inserted_ids = list(result.inserted_ids)

        if len(inserted_ids) != len(models):
            raise InvalidIdentifierError(
                f"Store acknowledged {len(inserted_ids)} identifiers for {len(models)} documents",
                code="identifier_count_mismatch",
                details={
                    "database": self.database,
                    "collection": self.collection_name,
                },
            )

        logger.debug(
            f"insert_many {self.database}.{self.collection_name} count={len(inserted_ids)}"
        )
        return [
            InsertRecord(id=self._narrow_id(inserted_id), base=model)
            for inserted_id, model in zip(inserted_ids, models)
        ]
