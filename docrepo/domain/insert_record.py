"""
Insert Record Domain Model

Defines the outcome of a successful insert.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from bson import ObjectId

ModelT = TypeVar("ModelT")


@dataclass(frozen=True)
class InsertRecord(Generic[ModelT]):
    """
    Insert Record Data Class

    Pairs the identifier the store assigned with the inserted model itself (not a copy).
    """

    # Store-assigned identifier
    id: ObjectId
    # The model instance that was inserted
    base: ModelT
