"""
docrepo

Typed create/read repository over a MongoDB document store.
"""

from docrepo.domain import Document, DocumentModel, InsertRecord
from docrepo.repositories import BaseRepository, MongoRepository

__all__ = [
    "Document",
    "DocumentModel",
    "InsertRecord",
    "BaseRepository",
    "MongoRepository",
]
