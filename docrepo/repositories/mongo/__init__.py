"""
MongoDB Repository Implementation Module Initialization
"""

from docrepo.repositories.mongo.typed_repo import MongoRepository

__all__ = [
    "MongoRepository",
]
