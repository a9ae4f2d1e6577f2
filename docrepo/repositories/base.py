"""
Base Repository Interface Module

Defines the generic interface for typed document access, decoupling calling code
from the store driver.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Sequence, TypeVar, Union

from bson import ObjectId

from docrepo.domain.insert_record import InsertRecord

# Define generic type variable
T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """
    Base Repository Interface

    Defines the typed read/insert operations. Filters and options are passed to the
    store unchanged; the repository does not interpret them.
    """

    @abstractmethod
    async def find_by_id(self, document_id: Union[str, ObjectId], **options: Any) -> T:
        """
        Find a document by primary key

        Args:
            document_id: Primary key value, matched verbatim (no str/ObjectId conversion)
            **options: Store lookup options (projection, session, ...)

        Returns:
            T: Decoded model

        Raises:
            NotFoundError: No document has this primary key
        """
        pass

    @abstractmethod
    async def find_one(self, filter: Mapping[str, Any], **options: Any) -> T:
        """
        Find the first document matching a filter

        Raises:
            NotFoundError: Nothing matches the filter
        """
        pass

    @abstractmethod
    async def find_many(self, filter: Mapping[str, Any], **options: Any) -> list[T]:
        """
        Find all documents matching a filter

        Returns:
            list[T]: Decoded models in store order, empty if nothing matches
        """
        pass

    @abstractmethod
    async def insert_one(self, model: T, **options: Any) -> InsertRecord[T]:
        """
        Insert a single model

        Returns:
            InsertRecord[T]: Store-assigned identifier paired with `model`
        """
        pass

    @abstractmethod
    async def insert_many(
        self, models: Sequence[T], **options: Any
    ) -> list[InsertRecord[T]]:
        """
        Insert several models with one store call

        Returns:
            list[InsertRecord[T]]: One record per input model, in input order
        """
        pass
